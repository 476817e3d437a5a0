from chromaconv.colors import Hwb, Rgb
from chromaconv.conversions.to_hwb import rgb_to_hwb, unit_rgb_to_hwb, np_unit_rgb_to_hwb
from chromaconv.conversions.to_hsl import rgb_to_hsl
from chromaconv.samples.colors import samples_rgb_hwb
import numpy as np


def test_rgb_to_hwb():
    for rgb, expected in samples_rgb_hwb.items():
        hwb = rgb_to_hwb(Rgb(*rgb))
        assert isinstance(hwb, Hwb)
        assert hwb == expected


def test_hue_matches_hsl():
    for rgb in samples_rgb_hwb:
        assert rgb_to_hwb(rgb).hue == rgb_to_hsl(rgb).hue


def test_unit_rgb_to_hwb_numpy():
    the_matrix = np.array(list(samples_rgb_hwb.keys())) / 255
    hwb = np_unit_rgb_to_hwb(the_matrix[..., 0], the_matrix[..., 1], the_matrix[..., 2])
    expected = np.array([unit_rgb_to_hwb(*rgb) for rgb in the_matrix])
    assert np.allclose(hwb, expected, atol=1e-12)
