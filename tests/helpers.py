import random

from adjacency_list_graph import AdjacencyListGraph


def line_graph() -> AdjacencyListGraph:
    g = AdjacencyListGraph()
    g.upsert_edge(1, 2, 1)
    g.upsert_edge(2, 3, 1)
    g.upsert_edge(3, 4, 1)
    return g


def triangle_graph() -> AdjacencyListGraph:
    g = AdjacencyListGraph()
    g.upsert_edge(1, 2, 5)
    g.upsert_edge(2, 3, 5)
    g.upsert_edge(1, 3, 3)
    return g


def random_graph(seed: int, nodes: int = 9, edges: int = 14) -> AdjacencyListGraph:
    rng = random.Random(seed)
    g = AdjacencyListGraph()
    for n in range(nodes):
        g.add_node(n)
    while sum(len(g.outgoing(n)) for n in g.nodes()) < 2 * edges:
        a, b = rng.sample(range(nodes), 2)
        g.upsert_edge(a, b, rng.randint(1, 9))
    return g
