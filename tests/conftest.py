"""
Pytest configuration and shared fixtures for Image Processor tests.

This module provides shared test fixtures and configuration
used across multiple test modules.
"""

import pytest
from PIL import Image


def build_gradient_image(width: int = 7, height: int = 5) -> Image.Image:
    """Build an RGB image where every pixel is distinct and depends on (x, y)."""
    image = Image.new("RGB", (width, height))
    image.putdata([
        ((x * 37) % 256, (y * 59) % 256, (x * y * 13 + 5) % 256)
        for y in range(height)
        for x in range(width)
    ])
    return image


@pytest.fixture
def gradient_image():
    """
    Provide a small RGB image with distinct pixels.

    Returns:
        7x5 RGB PIL Image
    """
    return build_gradient_image()


@pytest.fixture
def solid_image():
    """
    Provide a factory for single-color RGB images.

    Returns:
        Callable taking (color, size) and returning an RGB PIL Image
    """
    def _make(color=(100, 100, 100), size=(3, 2)):
        return Image.new("RGB", size, color)
    return _make


@pytest.fixture
def sample_rgb_colors():
    """
    Provide a list of sample RGB color tuples for testing.

    Returns:
        List of (R, G, B) tuples with common test colors
    """
    return [
        (255, 0, 0),      # Red
        (0, 255, 0),      # Green
        (0, 0, 255),      # Blue
        (255, 255, 255),  # White
        (0, 0, 0),        # Black
        (128, 128, 128),  # Gray
    ]
