"""
Routing state abstractions for routesim.

Defines the all-pairs routing state produced by an engine run, the
forwarding-table entries derived from it, and the sentinels used for
unreachable destinations.
"""

from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Union
import math

from graph import Graph, NodeId


Cost = Union[int, float]

# Cost of an unreachable destination.
INFINITY: float = math.inf
# Next hop of an unreachable destination.
NO_HOP: Optional[NodeId] = None


@dataclass(frozen=True)
class RouteEntry:
    """
    Single forwarding entry in a node's routing table.
    """
    dest: NodeId
    next_hop: NodeId
    cost: int


class RoutingState:
    """
    Per-source cost and next-hop maps for every ordered pair of known nodes.

    Rows and columns are keyed in ascending node order. An engine run fills a
    fresh instance; nothing here is updated incrementally after a topology
    change.
    """

    def __init__(self, node_ids: Iterable[NodeId]) -> None:
        self._nodes: List[NodeId] = sorted(node_ids)
        self.cost: Dict[NodeId, Dict[NodeId, Cost]] = {}
        self.next_hop: Dict[NodeId, Dict[NodeId, Optional[NodeId]]] = {}
        for i in self._nodes:
            self.cost[i] = {k: (0 if i == k else INFINITY) for k in self._nodes}
            self.next_hop[i] = {k: (i if i == k else NO_HOP) for k in self._nodes}

    @property
    def nodes(self) -> List[NodeId]:
        return list(self._nodes)

    def cost_between(self, src: NodeId, dst: NodeId) -> Cost:
        """Cost src -> dst, INFINITY for unknown nodes or unreachable pairs."""
        return self.cost.get(src, {}).get(dst, INFINITY)

    def next_hop_toward(self, src: NodeId, dst: NodeId) -> Optional[NodeId]:
        return self.next_hop.get(src, {}).get(dst, NO_HOP)

    def is_reachable(self, src: NodeId, dst: NodeId) -> bool:
        return self.cost_between(src, dst) != INFINITY

    def forwarding_table(self, node: NodeId) -> List[RouteEntry]:
        """
        Finite-cost routes of node sorted by destination, self-route included.
        """
        row = self.cost.get(node, {})
        hops = self.next_hop[node] if row else {}
        return [
            RouteEntry(dest, hops[dest], int(cost))
            for dest, cost in sorted(row.items())
            if cost != INFINITY
        ]

    def forwarding_tables(self) -> Dict[NodeId, List[RouteEntry]]:
        return {node: self.forwarding_table(node) for node in self._nodes}

    def check_invariants(self, graph: Graph) -> List[str]:
        """
        Consistency check against the graph the state was computed from.

        Verifies self-routes, that every finite route leaves through a real
        neighbour whose own cost accounts for the remainder, cost symmetry,
        and that no neighbour offers a cheaper path. Returns a list of
        human-readable violations; empty means consistent.
        """
        problems: List[str] = []
        for i in self._nodes:
            if self.cost[i][i] != 0 or self.next_hop[i][i] != i:
                problems.append(f"node {i}: bad self-route")
            neighbours = graph.outgoing(i)
            for k in self._nodes:
                c_ik = self.cost[i][k]
                if c_ik != self.cost[k][i]:
                    problems.append(f"cost {i}->{k} ({c_ik}) != {k}->{i} ({self.cost[k][i]})")
                for j, w in neighbours.items():
                    if w + self.cost[j][k] < c_ik:
                        problems.append(f"cost {i}->{k} ({c_ik}) beaten via {j}")
                if i == k or c_ik == INFINITY:
                    continue
                j = self.next_hop[i][k]
                if j not in neighbours:
                    problems.append(f"next hop {i}->{k} is {j}, not a neighbour")
                elif c_ik != neighbours[j] + self.cost[j][k]:
                    problems.append(f"cost {i}->{k} ({c_ik}) inconsistent with next hop {j}")
        return problems

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RoutingState):
            return NotImplemented
        return self.cost == other.cost and self.next_hop == other.next_hop

    def __repr__(self) -> str:
        return f"RoutingState(nodes={self._nodes!r})"
