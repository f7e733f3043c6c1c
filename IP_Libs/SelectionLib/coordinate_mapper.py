"""
Display-to-image coordinate mapping for crop selections.

The image is drawn scaled to fit the viewport with its aspect ratio kept,
and centered. A rectangle dragged in the viewport therefore has to be
shifted and divided by the scale before it means anything to the crop
operation.

Two mappings are provided:

- to_image_space divides by separate x and y scale factors and does not
  subtract the centering offset. It is only exact when the viewport and
  the image have the same aspect ratio.
- display_to_image subtracts the offset and divides by the single uniform
  scale used for drawing, flooring each corner. It follows the drawn image
  for any viewport shape.

Classes:
    Rect: Axis-aligned integer rectangle
    ViewportScale: How an image is fitted into a viewport

Functions:
    compute_scale: Fit an image into a viewport
    build_rectangle: Normalize two drag points into a Rect
    to_image_space: Per-axis division mapping
    display_to_image: Offset-aware uniform-scale mapping
    clamp_to_bounds: Clip a Rect to image bounds
"""

from dataclasses import dataclass
import math
from typing import Tuple

Point = Tuple[int, int]


@dataclass(frozen=True)
class Rect:
    x: int
    y: int
    width: int
    height: int

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height

    def is_empty(self) -> bool:
        return self.width <= 0 or self.height <= 0

    def as_box(self) -> Tuple[int, int, int, int]:
        """Return (x1, y1, x2, y2) corner coordinates for cropping."""
        return self.x, self.y, self.right, self.bottom


@dataclass(frozen=True)
class ViewportScale:
    """
    How an image is fitted into a viewport.

    Attributes:
        scale_x: viewport_width / image_width
        scale_y: viewport_height / image_height
        scale: min(scale_x, scale_y), used for drawing
        scaled_width: Drawn image width in viewport pixels
        scaled_height: Drawn image height in viewport pixels
        offset_x: Left margin that centers the drawn image
        offset_y: Top margin that centers the drawn image
    """
    scale_x: float
    scale_y: float
    scale: float
    scaled_width: int
    scaled_height: int
    offset_x: int
    offset_y: int


def compute_scale(
    viewport_width: int,
    viewport_height: int,
    image_width: int,
    image_height: int,
) -> ViewportScale:
    """
    Fit an image into a viewport, keeping its aspect ratio and centering it.

    Raises:
        ValueError: If any dimension is not positive
    """
    for name, value in (
        ("viewport_width", viewport_width),
        ("viewport_height", viewport_height),
        ("image_width", image_width),
        ("image_height", image_height),
    ):
        if value <= 0:
            raise ValueError(f"{name} must be > 0, got {value}")

    scale_x = viewport_width / image_width
    scale_y = viewport_height / image_height
    scale = min(scale_x, scale_y)

    scaled_width = int(image_width * scale)
    scaled_height = int(image_height * scale)

    return ViewportScale(
        scale_x=scale_x,
        scale_y=scale_y,
        scale=scale,
        scaled_width=scaled_width,
        scaled_height=scaled_height,
        offset_x=(viewport_width - scaled_width) // 2,
        offset_y=(viewport_height - scaled_height) // 2,
    )


def build_rectangle(start: Point, end: Point) -> Rect:
    """Normalize two arbitrary corner points into a Rect."""
    return Rect(
        x=int(min(start[0], end[0])),
        y=int(min(start[1], end[1])),
        width=int(abs(start[0] - end[0])),
        height=int(abs(start[1] - end[1])),
    )


def to_image_space(rect: Rect, scale_x: float, scale_y: float) -> Rect:
    """
    Divide each of x, y, width and height by the matching scale factor.

    Results are truncated to integers.
    """
    return Rect(
        x=int(rect.x / scale_x),
        y=int(rect.y / scale_y),
        width=int(rect.width / scale_x),
        height=int(rect.height / scale_y),
    )


def display_to_image(rect: Rect, viewport: ViewportScale) -> Rect:
    """
    Remove the centering offset, then divide by the uniform drawing scale.

    The two corners are mapped separately and floored, so a drag that
    starts in the letterbox margin lands on a negative coordinate instead
    of being pulled toward the image. Clip the result with clamp_to_bounds.
    """
    left = math.floor((rect.x - viewport.offset_x) / viewport.scale)
    top = math.floor((rect.y - viewport.offset_y) / viewport.scale)
    right = math.floor((rect.right - viewport.offset_x) / viewport.scale)
    bottom = math.floor((rect.bottom - viewport.offset_y) / viewport.scale)
    return Rect(x=left, y=top, width=right - left, height=bottom - top)


def clamp_to_bounds(rect: Rect, image_width: int, image_height: int) -> Rect:
    """Clip a rectangle to 0..image_width by 0..image_height."""
    left = max(0, min(rect.x, image_width))
    top = max(0, min(rect.y, image_height))
    right = max(0, min(rect.right, image_width))
    bottom = max(0, min(rect.bottom, image_height))
    return Rect(x=left, y=top, width=right - left, height=bottom - top)
