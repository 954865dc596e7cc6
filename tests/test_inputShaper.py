import pytest

from drivetrain.inputShaper import InputShaper, shape_axis


def test_center_is_zero():
    assert shape_axis(0) == 0.0


def test_full_deflection_is_inverted():
    assert shape_axis(32768) == pytest.approx(-1.0)
    assert shape_axis(-32768) == pytest.approx(1.0)


def test_square_law_keeps_sign():
    assert shape_axis(-16384) == pytest.approx(0.25)
    assert shape_axis(16384) == pytest.approx(-0.25)


def test_dead_zone():
    # 0.1 deflection squares to 0.01, under the threshold
    assert shape_axis(-0.1 * 32768) == 0.0
    assert shape_axis(0.14 * 32768) == 0.0
    # 0.15 squares to 0.0225
    assert shape_axis(-0.15 * 32768) == pytest.approx(0.0225)
    assert shape_axis(0.15 * 32768) == pytest.approx(-0.0225)


@pytest.mark.parametrize("raw", [-32768, -20000, -5000, 5000, 20000, 32768])
def test_output_sign_opposes_raw(raw):
    value = shape_axis(raw)
    assert value != 0.0
    assert (value > 0) == (raw < 0)


def test_shaper_uses_config(cfg):
    shaper = InputShaper(cfg)
    assert shaper.shape_axes(-32768, 16384) == (pytest.approx(1.0), pytest.approx(-0.25))


def test_value_at_threshold_passes_through():
    # half deflection squares to exactly 0.25
    assert shape_axis(-16384, threshold=0.25) == 0.25
    assert shape_axis(16384, threshold=0.25) == -0.25
    assert shape_axis(-16383, threshold=0.25) == 0.0
