"""
Concrete topology graph implementation for routesim.

Implements the Graph interface using an adjacency-list representation where
every undirected edge is kept as two directed entries with the same cost.
"""

from typing import Dict, Iterable, List, Optional

from graph import Graph, NodeId


class AdjacencyListGraph(Graph):
    """
    Undirected, weighted graph backed by a node -> (neighbor -> cost) mapping.

    Both directions of an edge are written or deleted inside the same method
    call, so ``b in adj[a]`` iff ``a in adj[b]`` with identical costs.
    """

    def __init__(self) -> None:
        self._adj: Dict[NodeId, Dict[NodeId, int]] = {}

    @classmethod
    def from_records(cls, records: Iterable) -> "AdjacencyListGraph":
        """Build a graph from topology records (anything with src/dst/cost)."""
        g = cls()
        for rec in records:
            g.upsert_edge(rec.src, rec.dst, rec.cost)
        return g

    # --- Mutation API --------------------------------------------------------

    def add_node(self, node: NodeId) -> None:
        """Ensure node exists in the graph."""
        self._adj.setdefault(node, {})

    def upsert_edge(self, a: NodeId, b: NodeId, cost: int) -> None:
        """
        Add or update the undirected edge a <-> b with cost.
        Auto-adds nodes if they don't exist.
        """
        self.add_node(a)
        self.add_node(b)
        self._adj[a][b] = cost
        self._adj[b][a] = cost

    def remove_edge(self, a: NodeId, b: NodeId) -> None:
        """Delete a <-> b if present. Endpoints remain known nodes."""
        self._adj.get(a, {}).pop(b, None)
        self._adj.get(b, {}).pop(a, None)

    # --- Queries ---------------------------------------------------------------

    def neighbors(self, node: NodeId) -> Dict[NodeId, int]:
        """Adjacency of node sorted by neighbour id; empty if it has no edges."""
        adj = self._adj.get(node, {})
        return {v: adj[v] for v in sorted(adj)}

    def node_ids(self) -> List[NodeId]:
        return sorted(self._adj)

    def edge_cost(self, a: NodeId, b: NodeId) -> Optional[int]:
        return self._adj.get(a, {}).get(b)

    def has_edge(self, a: NodeId, b: NodeId) -> bool:
        return b in self._adj.get(a, {})

    def copy(self) -> "AdjacencyListGraph":
        g = AdjacencyListGraph()
        g._adj = {n: dict(adj) for n, adj in self._adj.items()}
        return g

    def __contains__(self, node: object) -> bool:
        return node in self._adj

    def __len__(self) -> int:
        return len(self._adj)

    # --- Graph interface -----------------------------------------------------

    def nodes(self) -> List[NodeId]:
        return self.node_ids()

    def outgoing(self, node: NodeId) -> Dict[NodeId, int]:
        return self.neighbors(node)  # sorted copy
