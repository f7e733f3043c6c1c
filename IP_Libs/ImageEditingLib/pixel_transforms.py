"""
Pixel transform operations for Image Processor.

Filters that keep the image size (red/blue swap, grayscale, sepia, waves,
brightness) modify the caller's image in place and return None. Rotation
and cropping change the size, so they return a new image and leave the
input untouched. Callers that need the pre-filter state for undo must
snapshot before calling an in-place filter.

Pixel math runs on NumPy arrays in int32 so intermediate values can leave
the 0-255 range before clamping.

Example:
    >>> from PIL import Image
    >>> img = Image.open("photo.jpg").convert("RGB")
    >>>
    >>> apply_sepia(img)              # in place
    >>> adjust_brightness(img, 25)    # in place
    >>> rotated = rotate_clockwise(img)
    >>> cropped = crop_image(rotated, 10, 10, 110, 60)
"""

from typing import Any

import numpy as np

from IP_Libs.constants import (
    BRIGHTNESS_MAX,
    BRIGHTNESS_MIN,
    CHANNEL_MAX,
    CHANNEL_MIN,
    SEPIA_MATRIX,
    WAVE_AMPLITUDE,
    WAVE_BLUE_FALLOFF,
    WAVE_PERIOD,
)
from IP_Libs.errors import InvalidCropDimensions
from IP_Libs.ImageEditingLib.raster_models import snapshot_image, validate_raster
from IP_Libs.pillow_compat import Image


def _to_array(image: Any) -> np.ndarray:
    validate_raster(image)
    return np.asarray(image, dtype=np.int32)


def _write_back(image: Any, pixels: np.ndarray) -> None:
    clamped = np.clip(pixels, CHANNEL_MIN, CHANNEL_MAX).astype(np.uint8)
    image.paste(Image.fromarray(clamped))


# ============================================================================
# Color Filters
# ============================================================================

def red_blue_swap(image: Any) -> None:
    """
    Swap the red and blue channels of every pixel. Green is unchanged.

    Args:
        image: RGB PIL Image, modified in place
    """
    pixels = _to_array(image)
    _write_back(image, pixels[..., ::-1])


def grayscale(image: Any) -> None:
    """
    Convert to gray by averaging the three channels.

    The average uses floor division, so (10, 10, 11) becomes (10, 10, 10).

    Args:
        image: RGB PIL Image, modified in place
    """
    pixels = _to_array(image)
    average = pixels.sum(axis=2) // 3
    _write_back(image, np.repeat(average[..., np.newaxis], 3, axis=2))


def apply_sepia(image: Any) -> None:
    """
    Apply a sepia tone using the standard sepia coefficients.

    Each output channel is truncated toward zero, then clamped to 0-255.

    Args:
        image: RGB PIL Image, modified in place
    """
    pixels = _to_array(image).astype(np.float64)
    red, green, blue = pixels[..., 0], pixels[..., 1], pixels[..., 2]

    toned = np.empty_like(pixels)
    for channel, (kr, kg, kb) in enumerate(SEPIA_MATRIX):
        toned[..., channel] = kr * red + kg * green + kb * blue
    _write_back(image, np.trunc(toned).astype(np.int32))


def create_waves(image: Any) -> None:
    """
    Apply a wavy color distortion.

    Per pixel at (row, col):
        red   += 50 * sin(row % 10)
        green += 50 * cos(col % 10)
        blue  -= (row + col) % 50

    The sin/cos arguments are the raw modulus values in radians, not
    scaled to a full period. Red and green are truncated toward zero.
    All channels are clamped to 0-255.

    Args:
        image: RGB PIL Image, modified in place
    """
    pixels = _to_array(image)
    height, width = pixels.shape[:2]
    rows = np.arange(height)[:, np.newaxis]
    cols = np.arange(width)[np.newaxis, :]

    output = np.empty_like(pixels)
    output[..., 0] = np.trunc(pixels[..., 0] + WAVE_AMPLITUDE * np.sin(rows % WAVE_PERIOD))
    output[..., 1] = np.trunc(pixels[..., 1] + WAVE_AMPLITUDE * np.cos(cols % WAVE_PERIOD))
    output[..., 2] = pixels[..., 2] - (rows + cols) % WAVE_BLUE_FALLOFF
    _write_back(image, output)


# ============================================================================
# Brightness
# ============================================================================

def brightness_delta(level: int) -> int:
    """
    Convert a brightness level (-100 to 100) to a per-channel offset (-255 to 255).

    Integer division truncates toward zero, so -50 maps to -127, not -128.

    Raises:
        ValueError: If level is outside -100..100
    """
    level = int(level)
    if not (BRIGHTNESS_MIN <= level <= BRIGHTNESS_MAX):
        raise ValueError(f"brightness must be {BRIGHTNESS_MIN}-{BRIGHTNESS_MAX}, got {level}")

    magnitude = abs(level) * CHANNEL_MAX // 100
    return magnitude if level >= 0 else -magnitude


def adjust_brightness(image: Any, level: int) -> None:
    """
    Add a brightness offset to every channel, clamping to 0-255.

    Args:
        image: RGB PIL Image, modified in place
        level: Brightness level from -100 (black) to 100 (white)

    Raises:
        ValueError: If level is outside -100..100
    """
    delta = brightness_delta(level)
    pixels = _to_array(image)
    _write_back(image, pixels + delta)


def preview_brightness(image: Any, level: int) -> 'Image.Image':
    """
    Return a brightness-adjusted copy, leaving the input untouched.

    Used for live slider previews before the adjustment is committed.
    """
    preview = snapshot_image(image)
    adjust_brightness(preview, level)
    return preview


# ============================================================================
# Geometry
# ============================================================================

def rotate_clockwise(image: Any) -> 'Image.Image':
    """
    Rotate 90 degrees clockwise.

    The input pixel at (row, col) lands at (col, height - 1 - row) in the
    output, whose size is (old_height, old_width).

    Args:
        image: RGB PIL Image (not modified)

    Returns:
        A new rotated PIL Image
    """
    validate_raster(image)
    return image.transpose(Image.Transpose.ROTATE_270)


def clamp_coordinate(value: int, upper: int) -> int:
    return max(0, min(int(value), upper))


def crop_image(image: Any, x1: int, y1: int, x2: int, y2: int) -> 'Image.Image':
    """
    Crop to the rectangle from (x1, y1) inclusive to (x2, y2) exclusive.

    All four coordinates are clamped into the image bounds first; the
    width and height are computed from the clamped values.

    Args:
        image: RGB PIL Image (not modified)
        x1, y1: Top-left corner
        x2, y2: Bottom-right corner

    Returns:
        A new PIL Image with its own pixel buffer

    Raises:
        InvalidCropDimensions: If the clamped width or height is <= 0
    """
    validate_raster(image)
    width, height = image.size

    left = clamp_coordinate(x1, width)
    top = clamp_coordinate(y1, height)
    right = clamp_coordinate(x2, width)
    bottom = clamp_coordinate(y2, height)

    if right - left <= 0 or bottom - top <= 0:
        raise InvalidCropDimensions(
            f"Invalid crop dimensions: ({left}, {top}) to ({right}, {bottom})"
        )

    return image.crop((left, top, right, bottom)).copy()
