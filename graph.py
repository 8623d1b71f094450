"""
Undirected, weighted graph abstraction for routesim.

Nodes are integer router ids.
Edges are stored per direction: u -> v with an integer cost, mirrored by v -> u.
"""

from abc import ABC, abstractmethod
from typing import List, Mapping


NodeId = int


class Graph(ABC):
    """Weighted graph over integer node ids, iterated in ascending id order."""

    @abstractmethod
    def nodes(self) -> List[NodeId]:
        """Return all known node ids, ascending."""
        raise NotImplementedError

    @abstractmethod
    def outgoing(self, node: NodeId) -> Mapping[NodeId, int]:
        """
        Outgoing neighbours and edge costs for a given node.

        Returns: dict[NodeId, int] whose iteration order is ascending by id.
        """
        raise NotImplementedError
