import pytest

from socialcharts.scales import BandScale, LinearScale, OrdinalScale, nice_ticks, unique


def test_linear_scale_maps_and_inverts_range():
    scale = LinearScale((0.0, 10.0), (360.0, 30.0))
    assert scale(0.0) == pytest.approx(360.0)
    assert scale(5.0) == pytest.approx(195.0)
    assert scale(10.0) == pytest.approx(30.0)


def test_linear_scale_degenerate_domain_uses_midpoint():
    assert LinearScale((4.0, 4.0), (100.0, 0.0))(4.0) == pytest.approx(50.0)


def test_ticks_use_round_steps():
    assert LinearScale((0.0, 1000.0), (0.0, 1.0)).ticks() == pytest.approx([float(v) for v in range(0, 1001, 100)])
    assert nice_ticks(0.0, 1.0) == pytest.approx([i / 10 for i in range(11)])
    assert nice_ticks(83.86, 667.29) == pytest.approx([float(v) for v in range(100, 651, 50)])
    assert nice_ticks(5.0, 5.0) == [5.0]


def test_tick_format_matches_step_precision():
    assert LinearScale((0.0, 2000.0), (0.0, 1.0)).tick_format()(1000.0) == "1,000"
    assert LinearScale((0.0, 1.0), (0.0, 1.0)).tick_format()(0.5) == "0.5"


def test_band_scale_without_padding():
    scale = BandScale(("a", "b", "c", "d"), (50.0, 570.0))
    assert scale.bandwidth == pytest.approx(130.0)
    assert [scale(k) for k in "abcd"] == pytest.approx([50.0, 180.0, 310.0, 440.0])
    assert scale.center("b") == pytest.approx(245.0)


def test_band_scale_with_padding():
    scale = BandScale.padded(["a", "b", "c", "d"], (50.0, 500.0), 0.2)
    step = 450.0 / 4.2
    assert scale.step == pytest.approx(step)
    assert scale.bandwidth == pytest.approx(step * 0.8)
    assert scale("a") == pytest.approx(50.0 + (450.0 - step * 3.8) / 2)


def test_band_scale_dedupes_and_rejects_unknown_keys():
    scale = BandScale(("a", "b", "a"), (0.0, 100.0))
    assert scale.domain == ("a", "b")
    with pytest.raises(KeyError):
        scale("z")


def test_ordinal_scale_cycles_range():
    colors = OrdinalScale(("a", "b", "c", "d"), ("red", "green", "blue"))
    assert [colors(k) for k in "abcd"] == ["red", "green", "blue", "red"]


def test_unique_preserves_order():
    assert unique(["x", "y", "x", "z"]) == ("x", "y", "z")
