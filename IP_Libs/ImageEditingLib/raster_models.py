"""
Raster data models for Image Processor.

A raster is a Pillow image in RGB mode with non-zero width and height.
Snapshots are independent copies: no two snapshots, and no snapshot and
the live image, ever share a pixel buffer.

Classes:
    ImageRecord: Container for a loaded image's path and its live raster

Functions:
    validate_raster: Check that an object is a usable RGB raster
    snapshot_image: Deep-copy a raster for history
    rasters_equal: Compare two rasters pixel-for-pixel
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

from IP_Libs.constants import RASTER_MODE
from IP_Libs.pillow_compat import Image


@dataclass
class ImageRecord:
    path: Optional[Path]
    image: 'Image.Image'


def validate_raster(image: Any) -> None:
    """
    Check that an object is a usable raster.

    Args:
        image: Object to check

    Raises:
        TypeError: If image is not a PIL Image
        ValueError: If image is not RGB or has a zero dimension
    """
    if not hasattr(image, "mode") or not hasattr(image, "size"):
        raise TypeError(f"Expected PIL Image, got {type(image)}")

    if image.mode != RASTER_MODE:
        raise ValueError(f"Expected {RASTER_MODE} image, got mode {image.mode}")

    width, height = image.size
    if width <= 0 or height <= 0:
        raise ValueError(f"Raster must be non-empty, got {width}x{height}")


def snapshot_image(image: Any) -> 'Image.Image':
    """
    Create an independently-owned copy of a raster.

    Args:
        image: RGB PIL Image to copy

    Returns:
        A new PIL Image with its own pixel buffer
    """
    validate_raster(image)
    return image.copy()


def rasters_equal(first: Any, second: Any) -> bool:
    """Return True when both rasters have the same size and identical pixel bytes."""
    if first.size != second.size or first.mode != second.mode:
        return False
    return first.tobytes() == second.tobytes()
