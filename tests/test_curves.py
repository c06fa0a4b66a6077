import pytest

from socialcharts.charts.curves import linear_curve, natural_curve
from socialcharts.scene import Path


def test_natural_curve_short_inputs():
    assert natural_curve([], []) == ()
    assert natural_curve([1.0], [2.0]) == (("M", 1.0, 2.0),)
    assert natural_curve([0.0, 10.0], [0.0, 5.0]) == (("M", 0.0, 0.0), ("L", 10.0, 5.0))


def test_natural_curve_stays_on_a_straight_line():
    segments = natural_curve([0.0, 1.0, 2.0], [0.0, 2.0, 4.0])
    assert segments[0] == ("M", 0.0, 0.0)
    assert segments[1][0] == "C"
    assert segments[1][1:] == pytest.approx((1 / 3, 2 / 3, 2 / 3, 4 / 3, 1.0, 2.0))
    assert segments[2][1:] == pytest.approx((4 / 3, 8 / 3, 5 / 3, 10 / 3, 2.0, 4.0))


def test_natural_curve_passes_through_every_point():
    xs = [0.0, 10.0, 20.0, 30.0, 40.0]
    ys = [5.0, 1.0, 8.0, 3.0, 6.0]
    segments = natural_curve(xs, ys)
    assert len(segments) == len(xs)
    assert [seg[-2:] for seg in segments] == [(x, y) for x, y in zip(xs, ys)]


def test_curves_require_matching_lengths():
    with pytest.raises(ValueError):
        natural_curve([0.0, 1.0], [0.0])
    with pytest.raises(ValueError):
        linear_curve([0.0], [])


def test_path_d_string():
    path = Path(segments=linear_curve([0.0, 10.0], [0.0, 5.5]))
    assert path.d == "M0,0L10,5.5"
    curved = Path(segments=(("M", 0.0, 0.0), ("C", 1.0, 2.0, 3.0, 4.0, 5.0, 6.0)))
    assert curved.d == "M0,0C1,2,3,4,5,6"
