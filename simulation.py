"""
Simulation loop: apply topology changes and snapshot routing state.
"""

from dataclasses import dataclass, field
from typing import Callable, Dict, Iterable, Iterator, List, Optional, Sequence

from adjacency_list_graph import AdjacencyListGraph
from algorithms import RoutingEngine
from dijkstra_engine import SimpleDijkstraEngine
from distance_vector_engine import SimpleDistanceVectorEngine
from records import ChangeRecord, MessageRecord
from routing import RouteEntry, RoutingState
from tracer import MessageTrace, trace_messages


ENGINES: Dict[str, Callable[[], RoutingEngine]] = {
    SimpleDistanceVectorEngine.name: SimpleDistanceVectorEngine,
    SimpleDijkstraEngine.name: SimpleDijkstraEngine,
}


def get_engine(name: str) -> RoutingEngine:
    """Instantiate an engine by name ("distance_vector" or "link_state")."""
    try:
        factory = ENGINES[name]
    except KeyError:
        raise ValueError(f"Unknown routing algorithm: {name!r}") from None
    return factory()


@dataclass(frozen=True)
class Snapshot:
    """
    Routing state and message traces at one point in the run.

    index 0 is the initial topology; index n is the state after the n-th
    change, which is recorded in ``change``.
    """
    index: int
    change: Optional[ChangeRecord]
    state: RoutingState = field(compare=False)
    tables: Dict[int, List[RouteEntry]]
    traces: List[MessageTrace]


def apply_change(graph: AdjacencyListGraph, change: ChangeRecord) -> None:
    """
    Apply one change to graph in place. Routing state must then be rebuilt.
    """
    if change.is_removal:
        graph.remove_edge(change.src, change.dst)
    else:
        graph.upsert_edge(change.src, change.dst, change.cost)


def take_snapshot(
    graph: AdjacencyListGraph,
    engine: RoutingEngine,
    messages: Sequence[MessageRecord],
    index: int = 0,
    change: Optional[ChangeRecord] = None,
) -> Snapshot:
    state = engine.solve(graph)
    return Snapshot(
        index=index,
        change=change,
        state=state,
        tables=state.forwarding_tables(),
        traces=trace_messages(state, list(messages)),
    )


def run_simulation(
    graph: AdjacencyListGraph,
    messages: Sequence[MessageRecord],
    changes: Iterable[ChangeRecord],
    engine: RoutingEngine,
) -> Iterator[Snapshot]:
    """
    Yield the initial snapshot, then one per change in input order.

    graph is mutated in place; every snapshot is recomputed from scratch.
    """
    yield take_snapshot(graph, engine, messages)
    for index, change in enumerate(changes, start=1):
        apply_change(graph, change)
        yield take_snapshot(graph, engine, messages, index=index, change=change)
