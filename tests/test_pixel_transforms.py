"""
Unit tests for pixel_transforms module.

Tests the color filters, brightness adjustment, rotation and cropping,
including which operations work in place and which return new images.
"""

import pytest
from PIL import Image

from IP_Libs.errors import InvalidCropDimensions
from IP_Libs.ImageEditingLib.pixel_transforms import (
    adjust_brightness,
    apply_sepia,
    brightness_delta,
    create_waves,
    crop_image,
    grayscale,
    preview_brightness,
    red_blue_swap,
    rotate_clockwise,
)
from IP_Libs.ImageEditingLib.raster_models import rasters_equal


def all_pixels(image):
    return list(image.getdata())


class TestRedBlueSwap:
    """Tests for red_blue_swap function."""

    def test_swaps_red_and_blue(self, solid_image):
        """Should swap red and blue, leaving green alone."""
        image = solid_image((10, 20, 30))

        result = red_blue_swap(image)

        assert result is None
        assert set(all_pixels(image)) == {(30, 20, 10)}

    def test_is_an_involution(self, gradient_image):
        """Swapping twice should restore the original pixels."""
        original = gradient_image.copy()

        red_blue_swap(gradient_image)
        assert not rasters_equal(gradient_image, original)

        red_blue_swap(gradient_image)
        assert rasters_equal(gradient_image, original)


class TestGrayscale:
    """Tests for grayscale function."""

    def test_uses_floor_average(self, solid_image):
        """Should floor-divide the channel sum by three."""
        image = solid_image((10, 10, 11))
        grayscale(image)
        assert set(all_pixels(image)) == {(10, 10, 10)}

        image = solid_image((255, 255, 254))
        grayscale(image)
        assert set(all_pixels(image)) == {(254, 254, 254)}

    def test_all_channels_equal(self, gradient_image):
        """Every pixel should have r == g == b."""
        grayscale(gradient_image)

        for r, g, b in all_pixels(gradient_image):
            assert r == g == b

    def test_sample_colors(self, solid_image, sample_rgb_colors):
        """Primary colors average to 85; white, black and gray are unchanged."""
        expected = [85, 85, 85, 255, 0, 128]

        for color, gray in zip(sample_rgb_colors, expected):
            image = solid_image(color)
            grayscale(image)
            assert set(all_pixels(image)) == {(gray, gray, gray)}


class TestSepia:
    """Tests for apply_sepia function."""

    def test_applies_coefficients_and_truncates(self, solid_image):
        """Should compute each channel with the sepia matrix and truncate."""
        image = solid_image((100, 150, 200))

        apply_sepia(image)

        assert set(all_pixels(image)) == {(192, 171, 133)}

    def test_clamps_to_255(self, solid_image):
        """White should saturate red and green but not blue."""
        image = solid_image((255, 255, 255))

        apply_sepia(image)

        assert set(all_pixels(image)) == {(255, 255, 238)}


class TestCreateWaves:
    """Tests for create_waves function."""

    def test_origin_pixel(self, solid_image):
        """At (0, 0) sin is 0, cos is 1 and the blue falloff is 0."""
        image = solid_image((100, 100, 100), size=(3, 2))

        create_waves(image)

        assert image.getpixel((0, 0)) == (100, 150, 100)

    def test_uses_raw_modulus_as_radians(self, solid_image):
        """Row 1, column 2 uses sin(1) and cos(2) directly."""
        image = solid_image((100, 100, 100), size=(3, 2))

        create_waves(image)

        # 100 + 50*sin(1) = 142.07, 100 + 50*cos(2) = 79.19, 100 - 3 = 97
        assert image.getpixel((2, 1)) == (142, 79, 97)

    def test_clamps_channels(self, solid_image):
        """Channels should stay within 0-255."""
        image = solid_image((250, 250, 0), size=(12, 12))

        create_waves(image)

        assert image.getpixel((0, 0)) == (250, 255, 0)
        for pixel in all_pixels(image):
            assert all(0 <= channel <= 255 for channel in pixel)

    def test_negative_results_clamp_to_zero(self, solid_image):
        """sin(4) is negative, so a black pixel on row 4 keeps red at 0."""
        image = solid_image((0, 0, 0), size=(1, 5))

        create_waves(image)

        assert image.getpixel((0, 4))[0] == 0


class TestBrightness:
    """Tests for brightness_delta, adjust_brightness and preview_brightness."""

    @pytest.mark.parametrize("level, expected", [
        (0, 0),
        (50, 127),
        (-50, -127),
        (100, 255),
        (-100, -255),
        (1, 2),
    ])
    def test_delta_truncates_toward_zero(self, level, expected):
        """Should scale -100..100 to -255..255 with truncating division."""
        assert brightness_delta(level) == expected

    @pytest.mark.parametrize("level", [-101, 101, 500])
    def test_rejects_out_of_range_levels(self, level):
        """Should raise ValueError outside -100..100."""
        with pytest.raises(ValueError):
            brightness_delta(level)

    def test_adds_delta_in_place(self, solid_image):
        """Should add the delta to every channel of the same image object."""
        image = solid_image((100, 100, 100))

        result = adjust_brightness(image, 50)

        assert result is None
        assert set(all_pixels(image)) == {(227, 227, 227)}

    def test_clamps_at_extremes(self, gradient_image):
        """Full brightness should give white and full darkness black."""
        bright = gradient_image.copy()
        dark = gradient_image.copy()

        adjust_brightness(bright, 100)
        adjust_brightness(dark, -100)

        assert set(all_pixels(bright)) == {(255, 255, 255)}
        assert set(all_pixels(dark)) == {(0, 0, 0)}

    def test_invalid_level_leaves_image_untouched(self, gradient_image):
        """A rejected level should not modify the image."""
        original = gradient_image.copy()

        with pytest.raises(ValueError):
            adjust_brightness(gradient_image, 150)

        assert rasters_equal(gradient_image, original)

    def test_preview_returns_copy(self, solid_image):
        """Preview should not modify its input."""
        image = solid_image((100, 100, 100))

        preview = preview_brightness(image, -40)

        assert preview is not image
        assert set(all_pixels(image)) == {(100, 100, 100)}
        assert set(all_pixels(preview)) == {(0, 0, 0)}


class TestRotateClockwise:
    """Tests for rotate_clockwise function."""

    def test_swaps_dimensions(self, gradient_image):
        """Output size should be (height, width) of the input."""
        rotated = rotate_clockwise(gradient_image)

        assert rotated.size == (5, 7)

    def test_pixel_mapping(self, gradient_image):
        """Input (row, col) should land at output (col, height - 1 - row)."""
        width, height = gradient_image.size

        rotated = rotate_clockwise(gradient_image)

        for row in range(height):
            for col in range(width):
                expected = gradient_image.getpixel((col, row))
                assert rotated.getpixel((height - 1 - row, col)) == expected

    def test_four_rotations_restore_original(self, gradient_image):
        """Rotating four times should give back the original raster."""
        rotated = gradient_image
        for _ in range(4):
            rotated = rotate_clockwise(rotated)

        assert rasters_equal(rotated, gradient_image)

    def test_input_unchanged(self, gradient_image):
        """Should return a new image and leave the input alone."""
        original = gradient_image.copy()

        rotated = rotate_clockwise(gradient_image)

        assert rotated is not gradient_image
        assert rasters_equal(gradient_image, original)


class TestCropImage:
    """Tests for crop_image function."""

    def test_crops_subrectangle(self, gradient_image):
        """Output pixel (i, j) should equal input pixel (x1 + i, y1 + j)."""
        cropped = crop_image(gradient_image, 1, 2, 4, 5)

        assert cropped.size == (3, 3)
        for j in range(3):
            for i in range(3):
                assert cropped.getpixel((i, j)) == gradient_image.getpixel((1 + i, 2 + j))

    def test_clamps_coordinates(self, gradient_image):
        """Coordinates outside the image should be clamped to its bounds."""
        cropped = crop_image(gradient_image, -5, -5, 100, 100)

        assert rasters_equal(cropped, gradient_image)

    @pytest.mark.parametrize("box", [
        (3, 1, 3, 4),       # zero width
        (4, 1, 2, 4),       # negative width
        (1, 3, 4, 3),       # zero height
        (10, 10, 20, 20),   # both corners clamp to the same edge
        (-10, 0, -1, 5),    # entirely left of the image
    ])
    def test_rejects_empty_area(self, gradient_image, box):
        """Should raise InvalidCropDimensions when the clamped area is empty."""
        with pytest.raises(InvalidCropDimensions):
            crop_image(gradient_image, *box)

    def test_invalid_crop_is_value_error(self, gradient_image):
        """InvalidCropDimensions should also be catchable as ValueError."""
        with pytest.raises(ValueError):
            crop_image(gradient_image, 2, 2, 2, 2)

    def test_result_is_independent(self, gradient_image):
        """Modifying the crop must not change the source."""
        original = gradient_image.copy()

        cropped = crop_image(gradient_image, 0, 0, 3, 3)
        red_blue_swap(cropped)

        assert rasters_equal(gradient_image, original)


class TestInputValidation:
    """Tests for raster validation shared by all transforms."""

    def test_rejects_non_image(self):
        """Should raise TypeError for objects that are not images."""
        with pytest.raises(TypeError):
            grayscale("not_an_image")

    def test_rejects_non_rgb_mode(self):
        """Should raise ValueError for images that are not RGB."""
        with pytest.raises(ValueError):
            red_blue_swap(Image.new("L", (4, 4)))
