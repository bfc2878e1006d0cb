import pytest

from onestroke.core.errors import InvalidGraph, InvalidStart, MalformedInput
from onestroke.io.wire import (
    decode_edges,
    decode_trails,
    encode_edges,
    encode_trails,
    one_line_solver,
)


def test_decode_edges():
    assert decode_edges("0,1/1,2/2,0") == [(0, 1), (1, 2), (2, 0)]
    assert decode_edges(" 3 , 4 ") == [(3, 4)]
    assert decode_edges("") == []


@pytest.mark.parametrize("text", ["0,1/", "0", "0,1,2", "a,b", "0,-1", "0,1//1,2"])
def test_decode_edges_rejects_malformed(text):
    with pytest.raises(MalformedInput):
        decode_edges(text)


def test_encode_edges_is_canonical():
    text = "0,1/1,2/2,0"
    assert encode_edges(decode_edges(text)) == text


def test_trail_encoding():
    trails = [[0, 1, 2, 0], [1, 2, 0, 1]]
    assert encode_trails(trails) == "0,1,2,0/1,2,0,1"
    assert decode_trails(encode_trails(trails)) == trails
    assert encode_trails([]) == ""
    assert decode_trails("") == []


def test_decode_trails_skips_blank_entries():
    assert decode_trails("0,1/ /1,0") == [[0, 1], [1, 0]]


def test_triangle():
    assert one_line_solver("0,1/1,2/2,0", 0, 5) == "0,1,2,0"


def test_disconnected_pair_is_empty():
    for start in (0, 1):
        assert one_line_solver("0,1/2,3", start, 3) == ""


def test_single_edge():
    assert one_line_solver("0,1", 0, 1) == "0,1"


def test_non_positive_max():
    assert one_line_solver("0,1/1,2/2,0", 0, 0) == ""
    assert one_line_solver("0,1/1,2/2,0", 0, -3) == ""


def test_errors_propagate():
    with pytest.raises(InvalidGraph):
        one_line_solver("", 0, 1)
    with pytest.raises(InvalidStart):
        one_line_solver("0,1", 1, 1)
    with pytest.raises(MalformedInput):
        one_line_solver("0;1", 0, 1)


def test_results_are_repeatable():
    graph = "0,1/1,2/2,3/3,0/0,2/1,3"
    assert one_line_solver(graph, 2, 10) == one_line_solver(graph, 2, 10)
