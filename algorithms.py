"""
Algorithm interfaces for routing.

Keeps graph algorithms separate from record parsing, reporting and the
simulation loop.
"""

from abc import ABC, abstractmethod
from typing import Dict

from graph import Graph, NodeId
from routing import Cost, RoutingState


class RoutingEngine(ABC):
    """
    Interface shared by both engines: full routing state from a topology.
    """

    name: str = ""

    @abstractmethod
    def solve(self, graph: Graph) -> RoutingState:
        """
        Compute cost and next hop for every ordered pair of nodes in graph.

        Always starts from scratch; the returned state depends only on the
        graph passed in.
        """
        raise NotImplementedError


class DijkstraEngine(RoutingEngine):
    """
    Interface for single-source shortest-path computation.
    """

    @abstractmethod
    def shortest_path_costs(self, graph: Graph, source: NodeId) -> Dict[NodeId, Cost]:
        """
        Compute shortest-path costs from source to all reachable nodes.

        Returns:
            Mapping dest_node -> path_cost(source -> dest_node).
        """
        raise NotImplementedError

    @abstractmethod
    def shortest_paths(
        self, graph: Graph, source: NodeId
    ) -> tuple[Dict[NodeId, Cost], Dict[NodeId, NodeId]]:
        """
        Compute shortest-path costs plus the predecessor chain for each dest.

        Returns:
            (dist, prev) where dist is the cost map and prev records parents.
        """
        raise NotImplementedError


class DistanceVectorEngine(RoutingEngine):
    """
    Interface for Bellman–Ford-style distance-vector computation.
    """

    last_rounds: int = 0
