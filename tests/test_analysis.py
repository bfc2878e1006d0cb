from onestroke.core.analysis import analyze, count_components, covers_all_edges, degrees
from onestroke.core.graph import build_graph


def test_triangle_is_closed():
    report = analyze(build_graph([(0, 1), (1, 2), (2, 0)]))
    assert report.degrees == (2, 2, 2)
    assert report.odd_nodes == ()
    assert report.components == 1
    assert report.admits_trail
    assert report.closed


def test_open_trail_has_two_odd_nodes():
    report = analyze(build_graph([(0, 1), (1, 2)]))
    assert report.odd_nodes == (0, 2)
    assert report.admits_trail
    assert not report.closed


def test_star_with_four_leaves_has_no_trail():
    report = analyze(build_graph([(0, 1), (0, 2), (0, 3), (0, 4)]))
    assert len(report.odd_nodes) == 4
    assert not report.admits_trail


def test_disconnected_components():
    graph = build_graph([(0, 1), (2, 3)])
    assert count_components(graph) == 2
    assert not analyze(graph).admits_trail


def test_self_loop_adds_two_to_degree():
    assert degrees(build_graph([(0, 0), (0, 1)])) == [3, 1]


def test_covers_all_edges():
    graph = build_graph([(0, 1), (1, 2), (2, 0)])
    assert covers_all_edges(graph, (0, 1, 2, 0))
    assert covers_all_edges(graph, (1, 0, 2, 1))
    assert not covers_all_edges(graph, (0, 1, 2))
    assert not covers_all_edges(graph, (0, 1, 0, 1))


def test_covers_parallel_edges_by_count():
    graph = build_graph([(0, 1), (0, 1)])
    assert covers_all_edges(graph, (0, 1, 0))
    assert not covers_all_edges(graph, (0, 1, 1))
