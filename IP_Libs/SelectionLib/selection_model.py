"""
Drag-selection state for the crop tool.

The model tracks a rectangle dragged in viewport coordinates and maps it to
image coordinates on request. Listeners are called synchronously with a
single bool (whether a usable selection exists) after every change.
"""

from typing import Callable, List, Optional, Tuple

from IP_Libs.SelectionLib.coordinate_mapper import (
    Point,
    Rect,
    build_rectangle,
    clamp_to_bounds,
    compute_scale,
    display_to_image,
    to_image_space,
)


SelectionListener = Callable[[bool], None]


class SelectionModel:
    """
    Observable crop selection.

    Args:
        viewport_size: (width, height) of the display area
        image_size: (width, height) of the image being displayed
        per_axis_mapping: Map with separate x/y scale factors and no centering
            offset instead of the offset-aware uniform scale. Only exact when
            the viewport and image aspect ratios match.
    """

    def __init__(
        self,
        viewport_size: Tuple[int, int] = (0, 0),
        image_size: Optional[Tuple[int, int]] = None,
        per_axis_mapping: bool = False,
    ) -> None:
        self.viewport_size = viewport_size
        self.image_size = image_size
        self.per_axis_mapping = per_axis_mapping
        self._listeners: List[SelectionListener] = []
        self._drag_start: Optional[Point] = None
        self._display_rect: Optional[Rect] = None

    def add_listener(self, listener: SelectionListener) -> None:
        self._listeners.append(listener)

    def remove_listener(self, listener: SelectionListener) -> bool:
        if listener in self._listeners:
            self._listeners.remove(listener)
            return True
        return False

    def set_viewport_size(self, width: int, height: int) -> None:
        self.viewport_size = (width, height)

    def set_image_size(self, width: int, height: int) -> None:
        """Set the displayed image size. Clears any selection."""
        self.image_size = (width, height)
        self.reset()

    @property
    def display_rect(self) -> Optional[Rect]:
        return self._display_rect

    def begin_drag(self, point: Point) -> None:
        self._drag_start = point
        self.reset()

    def update_drag(self, point: Point) -> None:
        if self._drag_start is None:
            return
        self._display_rect = build_rectangle(self._drag_start, point)
        self._notify()

    def end_drag(self) -> None:
        self._drag_start = None
        self._notify()

    def reset(self) -> None:
        self._display_rect = None
        self._notify()

    def image_rect(self) -> Optional[Rect]:
        """
        Map the current selection to image coordinates, clipped to the image.

        Returns:
            The clipped Rect, or None if nothing is selected or the viewport
            and image sizes are not known yet
        """
        if self._display_rect is None or self.image_size is None:
            return None

        viewport_width, viewport_height = self.viewport_size
        image_width, image_height = self.image_size
        if viewport_width <= 0 or viewport_height <= 0:
            return None

        viewport = compute_scale(viewport_width, viewport_height, image_width, image_height)
        if self.per_axis_mapping:
            mapped = to_image_space(self._display_rect, viewport.scale_x, viewport.scale_y)
        else:
            mapped = display_to_image(self._display_rect, viewport)

        return clamp_to_bounds(mapped, image_width, image_height)

    @property
    def has_selection(self) -> bool:
        rect = self.image_rect()
        return rect is not None and not rect.is_empty()

    def _notify(self) -> None:
        has_selection = self.has_selection
        for listener in list(self._listeners):
            listener(has_selection)
