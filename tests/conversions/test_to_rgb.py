import pytest

from tincture.colors import RgbU8, RgbU16, HsvF32
from tincture.conversions import hsv_to_unit_rgb
from tincture.samples.colors import samples_rgb_hsv


def test_hsv_to_unit_rgb_sectors():
    expected = {
        0.0: (1.0, 0.0, 0.0),
        60.0: (1.0, 1.0, 0.0),
        120.0: (0.0, 1.0, 0.0),
        180.0: (0.0, 1.0, 1.0),
        240.0: (0.0, 0.0, 1.0),
        300.0: (1.0, 0.0, 1.0),
    }
    for h, rgb in expected.items():
        assert hsv_to_unit_rgb(h, 1.0, 1.0) == pytest.approx(rgb)


def test_hsv_to_unit_rgb_clamps_saturation_and_value():
    assert hsv_to_unit_rgb(0.0, 2.0, 1.5) == pytest.approx((1.0, 0.0, 0.0))
    assert hsv_to_unit_rgb(0.0, -1.0, 0.5) == pytest.approx((0.5, 0.5, 0.5))


def test_round_trip_through_hsv():
    for rgb in samples_rgb_hsv:
        color = RgbU8(*rgb)
        assert color.to_hsv().to_rgb() == color
        assert color.to_hsv("f64").to_rgb() == color


def test_round_trip_grid():
    for v in range(0, 256, 51):
        for color in (RgbU8(v, 0, 255 - v), RgbU8(255, v, 0), RgbU8(v // 2, v, 17)):
            assert color.to_hsv("f64").to_rgb() == color


def test_hsv_samples_to_rgb():
    for rgb, hsv in samples_rgb_hsv.items():
        assert HsvF32(*hsv).to_rgb() == RgbU8(*rgb)


def test_to_wide_integral():
    assert HsvF32(0.0, 0.0, 1.0).to_rgb("u16") == RgbU16(0xFFFF, 0xFFFF, 0xFFFF)
