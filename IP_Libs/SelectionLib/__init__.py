"""
SelectionLib - Crop selection handling

Maps rectangles dragged on the scaled display to image pixel coordinates.
"""

from IP_Libs.SelectionLib.coordinate_mapper import (
    Rect,
    ViewportScale,
    build_rectangle,
    clamp_to_bounds,
    compute_scale,
    display_to_image,
    to_image_space,
)
from IP_Libs.SelectionLib.selection_model import SelectionModel

__all__ = [
    "Rect",
    "ViewportScale",
    "build_rectangle",
    "clamp_to_bounds",
    "compute_scale",
    "display_to_image",
    "to_image_space",
    "SelectionModel",
]
