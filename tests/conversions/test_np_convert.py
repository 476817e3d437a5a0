from chromaconv.colors import Hsl, Hsv, Hwb, Rgb
from chromaconv.conversions.wrapper import convert, np_convert
from chromaconv.errors import ConversionError, InvalidModel, OutOfRangeChannel, UnsupportedTarget
from chromaconv.samples.colors import samples_hsl_rgb, samples_hsv_rgb, samples_hwb_rgb, samples_rgb_hsl
import numpy as np
import pytest

sources = {
    "rgb": (Rgb, list(samples_rgb_hsl.keys())),
    "hsl": (Hsl, list(samples_hsl_rgb.keys())),
    "hwb": (Hwb, list(samples_hwb_rgb.keys())),
    "hsv": (Hsv, list(samples_hsv_rgb.keys())),
}


def test_np_convert_matches_scalar_convert():
    for from_model, (cls, samples) in sources.items():
        colors = np.array(samples)
        for to_model in sources:
            result = np_convert(colors, from_model, to_model)
            expected = np.array([convert(cls(*sample), to_model) for sample in samples])
            assert result.shape == colors.shape
            assert np.array_equal(result, expected), (from_model, to_model)


def test_np_convert_reference_color():
    result = np_convert(np.array([64, 98, 115]), "rgb", "hwb")
    assert result.tolist() == [200, 25, 55]


def test_np_convert_keeps_leading_shape():
    colors = np.zeros((4, 5, 3), dtype=int)
    colors[..., 0] = 255
    result = np_convert(colors, "rgb", "hsv")
    assert result.shape == (4, 5, 3)
    assert np.all(result == np.array([0, 100, 100]))


def test_np_convert_unrounded():
    result = np_convert(np.array([[64, 98, 115]]), "rgb", "hsl", rounded=False)
    hue, saturation, lightness = result[0]
    assert abs(hue - 200) < 0.5
    assert abs(saturation - 28.49) < 0.01
    assert abs(lightness - 35.10) < 0.01


def test_np_convert_same_model():
    colors = np.array([[10, 20, 30]])
    assert np.array_equal(np_convert(colors, "hsl", "hsl"), colors)

    fractional = np.array([[10.4, 12.5, 30], [359.5, 0.5, 99.5]])
    for model, cls in (("hsl", Hsl), ("hwb", Hwb), ("hsv", Hsv)):
        result = np_convert(fractional, model, model)
        expected = np.array([convert(cls(*row), model) for row in fractional.tolist()])
        assert np.array_equal(result, expected)
        assert np.array_equal(result, fractional)


def test_np_convert_rejects_hex():
    with pytest.raises(InvalidModel):
        np_convert(np.array([[0, 0, 0]]), "hex", "rgb")
    with pytest.raises(UnsupportedTarget):
        np_convert(np.array([[0, 0, 0]]), "rgb", "hex")
    with pytest.raises(UnsupportedTarget):
        np_convert(np.array([[0, 0, 0]]), "rgb", "cmyk")


def test_np_convert_out_of_range():
    with pytest.raises(OutOfRangeChannel) as info:
        np_convert(np.array([[0, 0, 0], [0, 300, 0]]), "rgb", "hsl")
    assert info.value.field == "green"
    assert info.value.value == 300

    with pytest.raises(OutOfRangeChannel) as info:
        np_convert(np.array([[360, 50, 50]]), "hsl", "rgb")
    assert info.value.field == "hue"

    with pytest.raises(OutOfRangeChannel):
        np_convert(np.array([[0.5, 0, 0]]), "rgb", "hsl")
    with pytest.raises(OutOfRangeChannel):
        np_convert(np.array([[np.nan, 0, 0]]), "hsv", "rgb")


def test_np_convert_bad_shape():
    with pytest.raises(ConversionError):
        np_convert(np.array([[0, 0]]), "rgb", "hsl")
    with pytest.raises(ConversionError):
        np_convert(np.array(5), "rgb", "hsl")
    with pytest.raises(ConversionError):
        np_convert(np.array([["a", "b", "c"]]), "rgb", "hsl")
