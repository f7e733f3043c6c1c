"""
ImageEditingLib - Core image editing functionality

This module provides pixel transforms, raster models, the filter registry,
and image file I/O for the Image Processor project.
"""

from IP_Libs.ImageEditingLib.raster_models import (
    ImageRecord,
    rasters_equal,
    snapshot_image,
    validate_raster,
)
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
from IP_Libs.ImageEditingLib.filter_registry import (
    FilterRegistry,
    get_default_registry,
    register_default_filters,
)
from IP_Libs.ImageEditingLib.image_file_handler import (
    get_supported_image_formats,
    is_supported_format,
    load_image,
    save_image,
)

__all__ = [
    "ImageRecord",
    "rasters_equal",
    "snapshot_image",
    "validate_raster",
    "adjust_brightness",
    "apply_sepia",
    "brightness_delta",
    "create_waves",
    "crop_image",
    "grayscale",
    "preview_brightness",
    "red_blue_swap",
    "rotate_clockwise",
    "FilterRegistry",
    "get_default_registry",
    "register_default_filters",
    "get_supported_image_formats",
    "is_supported_format",
    "load_image",
    "save_image",
]
