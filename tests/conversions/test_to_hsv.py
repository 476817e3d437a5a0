from chromaconv.colors import Hsv, Rgb
from chromaconv.conversions.to_hsv import rgb_to_hsv, unit_rgb_to_hsv, np_unit_rgb_to_hsv
from chromaconv.conversions.to_hsl import rgb_to_hsl
from chromaconv.samples.colors import samples_rgb_hsv
import numpy as np


def test_rgb_to_hsv():
    for rgb, expected in samples_rgb_hsv.items():
        hsv = rgb_to_hsv(Rgb(*rgb))
        assert isinstance(hsv, Hsv)
        assert hsv == expected


def test_black_has_no_saturation():
    assert unit_rgb_to_hsv(0.0, 0.0, 0.0) == (0.0, 0.0, 0.0)
    assert rgb_to_hsv(Rgb(0, 0, 0)) == (0, 0, 0)


def test_hue_matches_hsl():
    for rgb in samples_rgb_hsv:
        assert rgb_to_hsv(rgb).hue == rgb_to_hsl(rgb).hue


def test_unit_rgb_to_hsv_numpy():
    the_matrix = np.array(list(samples_rgb_hsv.keys())) / 255
    hsv = np_unit_rgb_to_hsv(the_matrix[..., 0], the_matrix[..., 1], the_matrix[..., 2])
    expected = np.array([unit_rgb_to_hsv(*rgb) for rgb in the_matrix])
    assert np.allclose(hsv, expected, atol=1e-12)
