"""
Simple Bellman–Ford-style distance-vector engine.

Computes the converged outcome of distance-vector routing for all nodes at
once, rather than simulating per-neighbour vector exchange.
"""

from typing import Dict, List, Mapping, Optional

from algorithms import DistanceVectorEngine
from graph import Graph, NodeId
from routing import INFINITY, NO_HOP, Cost, RoutingState


class SimpleDistanceVectorEngine(DistanceVectorEngine):
    """
    All-pairs Bellman–Ford with early convergence and smallest-next-hop ties.
    """

    name = "distance_vector"

    def __init__(self) -> None:
        # Instrumentation for the most recent solve().
        self.last_rounds = 0
        self.last_examined = 0
        self.last_updates = 0

    def solve(self, graph: Graph) -> RoutingState:
        """
        Run relaxation rounds until a round changes nothing, or N-1 rounds.

        Each round walks every node i, every neighbour j that i can reach,
        and every destination k, all in ascending id order, and considers the
        route i -> j -> k. A strictly cheaper route is adopted with i's next
        hop toward j. An equally cheap route only replaces the next hop when
        it is a smaller id. Updates are visible to later candidates in the
        same round.
        """
        nodes = graph.nodes()
        adjacency = {i: graph.outgoing(i) for i in nodes}
        state = RoutingState(nodes)
        cost, next_hop = state.cost, state.next_hop

        for i in nodes:
            for j, w in adjacency[i].items():
                cost[i][j] = w
                next_hop[i][j] = j

        self.last_rounds = 0
        self.last_examined = 0
        self.last_updates = 0

        for _ in range(len(nodes) - 1):
            self.last_rounds += 1
            if not self._relax_round(nodes, adjacency, cost, next_hop):
                break

        return state

    def _relax_round(
        self,
        nodes: List[NodeId],
        adjacency: Mapping[NodeId, Mapping[NodeId, int]],
        cost: Dict[NodeId, Dict[NodeId, Cost]],
        next_hop: Dict[NodeId, Dict[NodeId, Optional[NodeId]]],
    ) -> bool:
        updated = False
        for i in nodes:
            row = cost[i]
            hops = next_hop[i]
            for j in adjacency[i]:
                c_ij = row[j]
                if c_ij == INFINITY:
                    continue
                via = hops[j]
                col = cost[j]
                for k in nodes:
                    self.last_examined += 1
                    alt = c_ij + col[k]
                    if alt < row[k]:
                        row[k] = alt
                        hops[k] = via
                        updated = True
                        self.last_updates += 1
                    elif alt == row[k] != INFINITY and via is not NO_HOP and via < hops[k] and k != i:
                        # Self-routes stay pinned even across zero-cost edges.
                        hops[k] = via
                        updated = True
                        self.last_updates += 1
        return updated
