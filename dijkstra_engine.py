"""
Heap-based DijkstraEngine implementation for routesim.

Uses Python's heapq to compute single-source shortest paths over any Graph
implementation that satisfies the Graph interface, and runs it once per root
to model the converged outcome of link-state routing.
"""

from typing import Dict, Optional
import heapq
import math

from algorithms import DijkstraEngine
from graph import Graph, NodeId
from routing import Cost, RoutingState


class SimpleDijkstraEngine(DijkstraEngine):
    """
    Single-source Dijkstra using a binary heap of (cost, node id).

    Ties on cost are broken toward the smaller predecessor id, which together
    with ascending neighbour order makes the resulting tree deterministic.

    Complexity:
        O(E log V) per root over the nodes reachable from it.
    """

    name = "link_state"

    def __init__(self) -> None:
        self.last_edges_examined = 0
        self.last_relaxed = 0

    def solve(self, graph: Graph) -> RoutingState:
        """
        Build the routing state by growing one shortest-path tree per node.
        """
        state = RoutingState(graph.nodes())
        examined = relaxed = 0
        for root in state.nodes:
            dist, _, first_hop = self.shortest_path_tree(graph, root)
            examined += self.last_edges_examined
            relaxed += self.last_relaxed
            for dest, cost in dist.items():
                state.cost[root][dest] = cost
                state.next_hop[root][dest] = first_hop[dest]
        self.last_edges_examined = examined
        self.last_relaxed = relaxed
        return state

    def shortest_path_tree(
        self, graph: Graph, source: NodeId
    ) -> tuple[Dict[NodeId, Cost], Dict[NodeId, NodeId], Dict[NodeId, NodeId]]:
        """
        Dijkstra from source returning (dist, prev, first_hop).

        prev maps each reachable node to its parent in the tree (the source is
        its own parent). first_hop maps each reachable node to the neighbour of
        source that the tree leaves through, which is what gets installed as
        the next hop; the source maps to itself.
        """
        dist: Dict[NodeId, Cost] = {source: 0}
        prev: Dict[NodeId, NodeId] = {source: source}
        first_hop: Dict[NodeId, NodeId] = {source: source}
        pq = [(0, source)]  # priority queue of (distance, node)
        self.last_edges_examined = 0
        self.last_relaxed = 0

        while pq:
            d_u, u = heapq.heappop(pq)

            # Skip outdated entries
            if d_u != dist.get(u, math.inf):
                continue

            for v, w in graph.outgoing(u).items():
                self.last_edges_examined += 1
                if v == source:
                    continue
                alt = d_u + w
                current = dist.get(v, math.inf)
                parent: Optional[NodeId] = prev.get(v)
                if alt < current or (alt == current and parent is not None and u < parent):
                    dist[v] = alt
                    prev[v] = u
                    first_hop[v] = v if u == source else first_hop[u]
                    self.last_relaxed += 1
                    heapq.heappush(pq, (alt, v))

        return dist, prev, first_hop

    def shortest_path_costs(self, graph: Graph, source: NodeId) -> Dict[NodeId, Cost]:
        """
        Compute only the cost map for all reachable nodes from source.
        """
        dist, _, _ = self.shortest_path_tree(graph, source)
        return dist

    def shortest_paths(
        self, graph: Graph, source: NodeId
    ) -> tuple[Dict[NodeId, Cost], Dict[NodeId, NodeId]]:
        """
        Dijkstra variant that also records predecessors for path reconstruction.

        The predecessor map omits the source itself because it has no parent.
        """
        dist, prev, _ = self.shortest_path_tree(graph, source)
        prev.pop(source, None)
        return dist, prev
