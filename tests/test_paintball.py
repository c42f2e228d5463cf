import pytest

from katsolve.paintball import (
    Circle,
    build_graph,
    distance,
    intervals_intersect,
    remove_interval,
)


def test_distance_of_right_triangle():
    assert distance(0, 0, 3, 4) == pytest.approx(5.0)


def test_distance_is_symmetric_and_zero_to_self():
    assert distance(1.5, -2, 7, 3) == pytest.approx(distance(7, 3, 1.5, -2))
    assert distance(2, 2, 2, 2) == 0


def test_overlapping_circles_intersect():
    first, second = Circle(0, 0, 2), Circle(3, 0, 2)
    assert first.intersects(second)
    assert second.intersects(first)


def test_touching_circles_do_not_intersect():
    assert not Circle(0, 0, 1).intersects(Circle(2, 0, 1))


def test_vertical_line_crossing():
    circle = Circle(5, 5, 2)
    assert circle.intersects_vertical_line(6)
    assert not circle.intersects_vertical_line(7)
    assert not circle.intersects_vertical_line(2)


def test_vertical_line_through_centre_spans_diameter():
    assert Circle(5, 1, 3).vertical_line_intersection(5) == pytest.approx((-2, 4))


def test_vertical_line_intersection_is_centred():
    low, high = Circle(0, 4, 5).vertical_line_intersection(3)
    assert (low + high) / 2 == pytest.approx(4)
    assert high > low


def test_intervals_intersect_overlap():
    assert intervals_intersect((0, 5), (3, 8)) == (3, 5)


def test_intervals_intersect_disjoint_is_empty():
    start, end = intervals_intersect((0, 1), (2, 3))
    assert start > end


def test_remove_interval_splits_middle():
    assert remove_interval([(0, 10)], 2, 5) == [(0, 2), (5, 10)]


def test_remove_interval_keeps_disjoint():
    assert remove_interval([(6, 9), (0, 1)], 2, 5) == [(0, 1), (6, 9)]


def test_remove_interval_covering_removes_all():
    assert remove_interval([(2, 3), (4, 5)], 0, 10) == []


def test_remove_interval_result_is_sorted_and_outside_cut():
    result = remove_interval([(8, 12), (0, 4), (3, 9)], 2, 10)
    assert result == sorted(result)
    for low, high in result:
        assert high <= 2 or low >= 10


def test_build_graph_is_symmetric():
    circles = [Circle(0, 0, 1), Circle(1.5, 0, 1), Circle(10, 10, 1), Circle(3, 0, 1)]
    graph = build_graph(circles)
    for index, neighbours in enumerate(graph):
        assert index not in neighbours
        for other in neighbours:
            assert index in graph[other]
            assert circles[index].intersects(circles[other])
    assert graph[2] == []
    assert graph[1] == [0, 3]
    assert build_graph([]) == []