from chromaconv.colors import Hsl, Hsv, Hwb, Rgb
from chromaconv.conversions.to_rgb import (
    hex_to_rgb, hsl_to_rgb, hsv_to_rgb, hwb_to_rgb,
    hsl_to_unit_rgb, hsv_to_unit_rgb, hwb_to_unit_rgb,
    np_hsl_to_unit_rgb, np_hsv_to_unit_rgb, np_hwb_to_unit_rgb,
)
from chromaconv.errors import InvalidModel, MalformedHex, OutOfRangeChannel
from chromaconv.samples.colors import samples_hex_rgb, samples_hsl_rgb, samples_hsv_rgb, samples_hwb_rgb
import numpy as np
import pytest


def test_hex_to_rgb():
    for hexadecimal, expected in samples_hex_rgb.items():
        assert hex_to_rgb(hexadecimal) == expected
        assert hex_to_rgb(hexadecimal[1:]) == expected
        assert hex_to_rgb(hexadecimal.upper()) == expected


def test_hex_to_rgb_reference_color():
    assert hex_to_rgb("#406273") == Rgb(red=64, green=98, blue=115)


def test_hex_to_rgb_rejects_malformed():
    for bad in ["ZZZZZZ", "#ZZZZZZ", "#fff", "12345", "1234567", "##406273", "", "#40627g"]:
        with pytest.raises(MalformedHex):
            hex_to_rgb(bad)

    with pytest.raises(MalformedHex):
        hex_to_rgb(0x406273)


def test_hsl_to_rgb():
    for hsl, expected in samples_hsl_rgb.items():
        rgb = hsl_to_rgb(Hsl(*hsl))
        assert isinstance(rgb, Rgb)
        assert rgb == expected


def test_hsv_to_rgb():
    for hsv, expected in samples_hsv_rgb.items():
        assert hsv_to_rgb(Hsv(*hsv)) == expected


def test_hwb_to_rgb():
    for hwb, expected in samples_hwb_rgb.items():
        assert hwb_to_rgb(Hwb(*hwb)) == expected


def test_hwb_to_rgb_stays_in_byte_range():
    # The blend must scale by 255, not 100
    for hue in range(0, 360, 15):
        for whiteness in range(0, 101, 10):
            for blackness in range(0, 101, 10):
                rgb = hwb_to_rgb(Hwb(hue, whiteness, blackness))
                assert all(0 <= channel <= 255 for channel in rgb)


def test_hsv_to_rgb_full_value_reaches_255():
    assert max(hsv_to_rgb(Hsv(45, 80, 100))) == 255


def test_accepts_plain_payloads():
    assert hsl_to_rgb((0, 100, 50)) == (255, 0, 0)
    assert hsl_to_rgb({"hue": 0, "saturation": 100, "lightness": 50}) == (255, 0, 0)
    assert hsl_to_rgb((0.0, 100.0, 50.0)) == (255, 0, 0)


def test_rejects_wrong_model():
    with pytest.raises(InvalidModel):
        hsl_to_rgb(Hsv(0, 100, 100))


def test_rejects_out_of_range():
    with pytest.raises(OutOfRangeChannel) as excinfo:
        hsl_to_rgb((360, 50, 50))
    assert excinfo.value.field == "hue"

    with pytest.raises(OutOfRangeChannel) as excinfo:
        hsv_to_rgb((10, 101, 50))
    assert excinfo.value.field == "saturation"

    with pytest.raises(OutOfRangeChannel) as excinfo:
        hwb_to_rgb((10, 50, -1))
    assert excinfo.value.field == "blackness"


def test_unit_kernels_match_numpy():
    hue = np.arange(0, 360, 7.5)
    a = np.linspace(0, 1, hue.size)
    b = np.linspace(1, 0, hue.size)

    for scalar, vectorized in [
        (hsl_to_unit_rgb, np_hsl_to_unit_rgb),
        (hsv_to_unit_rgb, np_hsv_to_unit_rgb),
        (hwb_to_unit_rgb, np_hwb_to_unit_rgb),
    ]:
        result = vectorized(hue, a, b)
        assert result.shape == (hue.size, 3)
        expected = np.array([scalar(h, x, y) for h, x, y in zip(hue, a, b)])
        assert np.allclose(result, expected, atol=1e-12)


def test_np_hwb_gray_branch():
    result = np_hwb_to_unit_rgb(np.array([0.0, 90.0]), np.array([0.3, 0.8]), np.array([0.7, 0.8]))
    assert np.allclose(result[0], [0.3, 0.3, 0.3])
    assert np.allclose(result[1], [0.5, 0.5, 0.5])
