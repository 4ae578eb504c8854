import pytest

from chaikin.curve import apply_chaikin, chaikin_iteration


TRIANGLE = [(0.0, 0.0), (4.0, 0.0), (0.0, 4.0)]


def test_iteration_worked_example():
    result = chaikin_iteration(TRIANGLE, 0.25)
    assert result[:2] == [(1.0, 0.0), (3.0, 0.0)]
    assert len(result) == 6


@pytest.mark.parametrize("points", [[], [(1.0, 2.0)], [(1.0, 2.0), (3.0, 4.0)]])
def test_short_inputs_are_returned_unchanged(points):
    assert chaikin_iteration(points, 0.25) == points


def test_iteration_doubles_point_count():
    square = [(0, 0), (10, 0), (10, 10), (0, 10)]
    assert len(chaikin_iteration(square, 0.25)) == 2 * len(square)


def test_ratio_zero_reproduces_edge_endpoints():
    result = chaikin_iteration(TRIANGLE, 0.0)
    closed = TRIANGLE[1:] + TRIANGLE[:1]
    expected = []
    for p0, p1 in zip(TRIANGLE, closed):
        expected.extend([p0, p1])
    assert result == expected


def test_ratio_half_gives_repeated_midpoints():
    result = chaikin_iteration(TRIANGLE, 0.5)
    assert result[0::2] == result[1::2]


def test_points_stay_within_bounding_box():
    square = [(0, 0), (10, 0), (10, 10), (0, 10)]
    for stage in apply_chaikin(square, 5, 0.25):
        for x, y in stage:
            assert 0.0 <= x <= 10.0
            assert 0.0 <= y <= 10.0


def test_apply_returns_all_stages():
    stages = apply_chaikin(TRIANGLE, 7, 0.25)
    assert len(stages) == 8
    assert stages[0] == TRIANGLE
    for previous, following in zip(stages, stages[1:]):
        assert following == chaikin_iteration(previous, 0.25)


def test_apply_with_zero_iterations():
    assert apply_chaikin(TRIANGLE, 0, 0.25) == [TRIANGLE]


def test_apply_does_not_alias_input():
    source = list(TRIANGLE)
    stages = apply_chaikin(source, 1, 0.25)
    source.append((9.0, 9.0))
    assert stages[0] == TRIANGLE