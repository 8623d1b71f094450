"""
Message delivery tracing over a computed routing state.
"""

from dataclasses import dataclass
from typing import List, Optional, Tuple

from records import MessageRecord
from routing import INFINITY, NO_HOP, RoutingState


@dataclass(frozen=True)
class MessageTrace:
    """
    Outcome of forwarding one message.

    cost is the engine's end-to-end cost, or None when unreachable; hops runs
    from source to destination inclusive and is empty when unreachable.
    """
    source: int
    destination: int
    cost: Optional[int]
    hops: Tuple[int, ...]
    payload: str

    @property
    def reachable(self) -> bool:
        return self.cost is not None


def trace_message(state: RoutingState, message: MessageRecord) -> MessageTrace:
    """
    Follow next hops from source toward destination.

    The walk is bounded by the node count, so a missing next hop or a
    forwarding loop ends as unreachable instead of hanging.
    """
    src, dst = message.source, message.destination
    unreachable = MessageTrace(src, dst, None, (), message.payload)

    total = state.cost_between(src, dst)
    if total == INFINITY:
        return unreachable

    path: List[int] = []
    current: Optional[int] = src
    for _ in range(len(state.nodes)):
        if current == dst:
            break
        path.append(current)
        current = state.next_hop_toward(current, dst)
        if current is NO_HOP:
            return unreachable
    if current != dst:
        return unreachable

    path.append(dst)
    return MessageTrace(src, dst, int(total), tuple(path), message.payload)


def trace_messages(state: RoutingState, messages: List[MessageRecord]) -> List[MessageTrace]:
    return [trace_message(state, m) for m in messages]
