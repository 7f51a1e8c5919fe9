import numpy as np
import pytest

from colorimetry import (
    ImageSampler,
    InsufficientSampleError,
    InvalidRegionError,
    Region,
    RGBColor,
)


@pytest.fixture
def sampler():
    return ImageSampler()


def test_roi_region_is_centered(sampler):
    assert sampler.roi_region(100, 80) == Region(37, 30, 25, 20)


def test_roi_region_rounds_down(sampler):
    region = sampler.roi_region(10, 10)
    assert (region.width, region.height) == (2, 2)
    assert (region.x, region.y) == (4, 4)


def test_reference_region_bottom_right(sampler):
    assert sampler.reference_region(100, 80) == Region(82, 62, 8, 8)


def test_extract_region_preserves_channel_order(sampler, make_image):
    image = make_image(20, 20, (10, 20, 30))
    assert sampler.extract_region(image, Region(0, 0, 10, 10)) == RGBColor(10, 20, 30)


def test_trimmed_mean_beats_naive_mean(sampler):
    pixels = np.array([[0, 0, 0]] * 15 + [[255, 255, 255]] * 85)
    naive = pixels.mean(axis=0)[0]
    trimmed = sampler.trimmed_mean(pixels)
    assert trimmed.r > naive
    assert trimmed.r == trimmed.g == trimmed.b


def test_trimmed_mean_drops_outliers_within_margin(sampler):
    pixels = np.array([[0, 0, 0]] * 10 + [[200, 100, 50]] * 80 + [[255, 255, 255]] * 10)
    assert sampler.trimmed_mean(pixels) == RGBColor(200, 100, 50)


def test_trimmed_mean_rounds_half_up(sampler):
    # 10 pixels: keep indices 1..8, average of four 0s and four 1s is 0.5
    pixels = np.array([[0, 0, 0]] * 5 + [[1, 1, 1]] * 5)
    assert sampler.trimmed_mean(pixels) == RGBColor(1, 1, 1)


def test_single_pixel_is_insufficient(sampler, make_image):
    image = make_image(10, 10, (50, 50, 50))
    with pytest.raises(InsufficientSampleError):
        sampler.extract_region(image, Region(0, 0, 1, 1))


def test_non_positive_region_rejected(sampler, make_image):
    image = make_image(10, 10, (50, 50, 50))
    with pytest.raises(InvalidRegionError):
        sampler.extract_region(image, Region(0, 0, 0, 5))
    with pytest.raises(InvalidRegionError):
        sampler.extract_region(image, Region(0, 0, 5, -1))


def test_region_outside_image_rejected(sampler, make_image):
    image = make_image(10, 10, (50, 50, 50))
    with pytest.raises(InvalidRegionError):
        sampler.extract_region(image, Region(20, 20, 5, 5))


def test_region_is_clamped_to_bounds(sampler, make_image):
    image = make_image(10, 10, (0, 0, 0))
    image[:5, :5] = (30, 20, 10)
    assert sampler.extract_region(image, Region(-5, -5, 10, 10)) == RGBColor(10, 20, 30)


def test_reference_on_tiny_image_rejected(sampler, make_image):
    image = make_image(9, 9, (255, 255, 255))
    with pytest.raises(InvalidRegionError):
        sampler.sample_reference(image)


def test_grayscale_and_bgra_input(sampler):
    gray = np.full((40, 40), 90, dtype=np.uint8)
    assert sampler.sample_roi(gray) == RGBColor(90, 90, 90)

    bgra = np.zeros((40, 40, 4), dtype=np.uint8)
    bgra[:, :] = (30, 20, 10, 0)
    assert sampler.sample_roi(bgra) == RGBColor(10, 20, 30)


def test_sample_roi_ignores_border(sampler, make_image):
    image = make_image(100, 100, (0, 0, 0))
    image[30:70, 30:70] = (75, 180, 60)
    assert sampler.sample_roi(image) == RGBColor(60, 180, 75)


def test_sample_reference_reads_corner_patch(sampler, make_image):
    image = make_image(200, 100, (0, 0, 0))
    image[80:90, 180:190] = (200, 210, 220)
    assert sampler.sample_reference(image) == RGBColor(220, 210, 200)


def test_single_channel_input_treated_as_grayscale(sampler):
    gray = np.full((40, 40, 1), 90, dtype=np.uint8)
    assert sampler.sample_roi(gray) == RGBColor(90, 90, 90)
