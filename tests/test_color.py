import pytest

from comboboxes.color import Color


def test_rgb_u8_scales_to_unit_range():
    c = Color.rgb_u8(255, 0, 255)
    assert c.as_rgba() == (1.0, 0.0, 1.0, 1.0)


def test_rgb_u8_rejects_out_of_range():
    with pytest.raises(ValueError):
        Color.rgb_u8(256, 0, 0)


def test_rgba_keeps_alpha():
    assert Color.rgba(1.0, 1.0, 1.0, 0.25).a == 0.25


def test_white_and_black_are_fixed_points_of_linearisation():
    assert Color.rgb(1.0, 1.0, 1.0).as_linear_rgba() == pytest.approx((1.0, 1.0, 1.0, 1.0))
    assert Color.rgb(0.0, 0.0, 0.0).as_linear_rgba() == (0.0, 0.0, 0.0, 1.0)


def test_linearisation_darkens_midtones_and_is_monotonic():
    values = [0.01, 0.04, 0.2, 0.5, 0.8, 2.0]
    linear = [Color.rgb(v, v, v).as_linear_rgba()[0] for v in values]
    assert linear == sorted(linear)
    assert linear[3] < 0.5


def test_linear_alpha_untouched():
    assert Color.rgba(0.5, 0.5, 0.5, 0.3).as_linear_rgba()[3] == 0.3


def test_scaling_keeps_alpha():
    c = Color.rgba(0.5, 0.25, 1.0, 0.5) * 30.0
    assert c.a == 0.5
    assert c.as_rgba()[:3] == (15.0, 7.5, 30.0)