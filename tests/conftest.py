import numpy as np
import pytest


def solid_bgr(width, height, rgb):
    """Uniform BGR image of the given RGB color."""
    image = np.zeros((height, width, 3), dtype=np.uint8)
    image[:, :] = (rgb[2], rgb[1], rgb[0])
    return image


@pytest.fixture
def make_image():
    return solid_bgr
