from dijkstra_engine import SimpleDijkstraEngine
from distance_vector_engine import SimpleDistanceVectorEngine
from records import MessageRecord
from routing import RoutingState
from tracer import trace_message

from helpers import line_graph, random_graph


def test_line_message_traces_all_hops():
    for engine in (SimpleDistanceVectorEngine(), SimpleDijkstraEngine()):
        state = engine.solve(line_graph())
        trace = trace_message(state, MessageRecord(1, 4, "hello"))

        assert trace.reachable
        assert trace.cost == 3
        assert trace.hops == (1, 2, 3, 4)
        assert trace.payload == "hello"


def test_link_state_trace_is_multi_hop_not_direct_edge_lookup():
    g = line_graph()
    state = SimpleDijkstraEngine().solve(g)

    trace = trace_message(state, MessageRecord(4, 1, "back"))

    assert trace.hops == (4, 3, 2, 1)


def test_message_to_self():
    state = SimpleDistanceVectorEngine().solve(line_graph())

    trace = trace_message(state, MessageRecord(2, 2, "loop"))

    assert trace.cost == 0
    assert trace.hops == (2,)


def test_unreachable_after_partition():
    g = line_graph()
    g.remove_edge(2, 3)
    state = SimpleDistanceVectorEngine().solve(g)

    trace = trace_message(state, MessageRecord(1, 4, "hello"))

    assert not trace.reachable
    assert trace.cost is None
    assert trace.hops == ()
    assert trace.payload == "hello"


def test_unknown_nodes_are_unreachable():
    state = SimpleDistanceVectorEngine().solve(line_graph())

    assert not trace_message(state, MessageRecord(1, 99, "x")).reachable
    assert not trace_message(state, MessageRecord(99, 1, "x")).reachable


def test_forwarding_loop_is_reported_unreachable():
    state = RoutingState([1, 2, 3])
    state.cost[1][3] = 5
    state.next_hop[1][3] = 2
    state.cost[2][3] = 4
    state.next_hop[2][3] = 1

    trace = trace_message(state, MessageRecord(1, 3, "spin"))

    assert not trace.reachable


def test_missing_next_hop_is_reported_unreachable():
    state = RoutingState([1, 2, 3])
    state.cost[1][3] = 5
    state.next_hop[1][3] = 2

    assert not trace_message(state, MessageRecord(1, 3, "lost")).reachable


def test_reported_cost_matches_sum_of_edges():
    g = random_graph(4)
    state = SimpleDistanceVectorEngine().solve(g)

    for src in state.nodes:
        for dst in state.nodes:
            trace = trace_message(state, MessageRecord(src, dst, ""))
            if not trace.reachable:
                continue
            walked = sum(g.edge_cost(a, b) for a, b in zip(trace.hops, trace.hops[1:]))
            assert walked == trace.cost
            assert len(trace.hops) <= len(state.nodes)
