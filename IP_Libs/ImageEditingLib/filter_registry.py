"""
Filter Registry.

Named image filters for the editor. The window builds its Filters menu from
the registry and the editing session dispatches "apply filter X" through it.
Each entry records whether the filter mutates its input in place or returns
a new image, so callers always get the filtered image back from apply().

Classes:
    FilterEntry: A registered filter and its menu metadata
    FilterRegistry: Registry for filter operations

Functions:
    get_default_registry: Get the global default registry (singleton)
    register_default_filters: Register all built-in filters
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional
import logging

from IP_Libs.constants import (
    FILTER_BRIGHTNESS,
    FILTER_GRAYSCALE,
    FILTER_RED_BLUE_SWAP,
    FILTER_ROTATE_CLOCKWISE,
    FILTER_SEPIA,
    FILTER_WAVES,
)

logger = logging.getLogger(__name__)

# (image, **params) -> None for in-place filters, new image otherwise
FilterFunction = Callable[..., Any]


@dataclass(frozen=True)
class FilterEntry:
    operation: FilterFunction
    in_place: bool
    label: str
    tags: List[str] = field(default_factory=list)


class FilterRegistry:
    """
    Registry for image filters.

    Example:
        >>> registry = FilterRegistry()
        >>> registry.register("grayscale", grayscale, in_place=True)
        >>> registry.register("rotate_clockwise", rotate_clockwise, in_place=False)
        >>> result = registry.apply("rotate_clockwise", image)
    """

    def __init__(self):
        self._entries: Dict[str, FilterEntry] = {}

    def register(
        self,
        name: str,
        operation: FilterFunction,
        in_place: bool,
        label: str = "",
        tags: Optional[List[str]] = None,
    ) -> None:
        """
        Register a filter.

        Args:
            name: Unique identifier for the filter (e.g., "sepia")
            operation: Callable taking (image, **params)
            in_place: True if the operation mutates its input and returns None
            label: Menu label for the filter (defaults to the name)
            tags: Lowercase tags; "filter" marks one-click menu entries

        Raises:
            ValueError: If name is empty or operation is not callable
            RuntimeError: If name is already registered
        """
        name = str(name).strip()
        if not name:
            raise ValueError("filter name cannot be empty")
        if not callable(operation):
            raise ValueError(f"operation must be callable, got {type(operation)}")
        if name in self._entries:
            raise RuntimeError(f"Filter '{name}' is already registered")

        self._entries[name] = FilterEntry(
            operation=operation,
            in_place=bool(in_place),
            label=label or name,
            tags=[str(tag).lower() for tag in tags or []],
        )
        logger.debug(f"Registered filter: {name} (in_place={in_place})")

    def get_metadata(self, name: str) -> FilterEntry:
        """
        Look up a registered filter.

        Raises:
            KeyError: If name is not registered; the message lists the known names
        """
        entry = self._entries.get(str(name).strip())
        if entry is None:
            raise KeyError(
                f"Unknown filter '{name}'. Available filters: {', '.join(self.list_filters())}"
            )
        return entry

    def get_filter(self, name: str) -> FilterFunction:
        return self.get_metadata(name).operation

    def is_in_place(self, name: str) -> bool:
        return self.get_metadata(name).in_place

    def apply(self, name: str, image: Any, **params: Any) -> Any:
        """
        Run a filter and return the resulting image.

        For in-place filters the returned object is `image` itself, now
        modified. For the others it is a new image and `image` is untouched.

        Raises:
            KeyError: If name is not registered
            ValueError: If the filter rejects its parameters
        """
        entry = self.get_metadata(name)
        result = entry.operation(image, **params)
        return image if entry.in_place else result

    def list_filters(self) -> List[str]:
        return sorted(self._entries)

    def filter_by_tag(self, tag: str) -> List[str]:
        """Sorted names of the filters carrying `tag` (case-insensitive)."""
        tag = str(tag).strip().lower()
        return sorted(name for name, entry in self._entries.items() if tag in entry.tags)


_default_registry: Optional[FilterRegistry] = None


def get_default_registry() -> FilterRegistry:
    """
    Get the global default registry (singleton).

    Creates the registry on first call and registers the built-in filters.
    """
    global _default_registry

    if _default_registry is None:
        _default_registry = FilterRegistry()
        register_default_filters(_default_registry)

    return _default_registry


def register_default_filters(registry: FilterRegistry) -> None:
    """Register the built-in filters under the names in constants.py."""
    from IP_Libs.ImageEditingLib.pixel_transforms import (
        adjust_brightness,
        apply_sepia,
        create_waves,
        grayscale,
        red_blue_swap,
        rotate_clockwise,
    )

    # Brightness takes a level and is driven by its dialog, so it stays out of the menu
    registry.register(FILTER_RED_BLUE_SWAP, red_blue_swap, True, "Red/Blue Swap", ["color", "filter"])
    registry.register(FILTER_GRAYSCALE, grayscale, True, "Black and White", ["color", "filter"])
    registry.register(FILTER_SEPIA, apply_sepia, True, "Sepia", ["color", "filter"])
    registry.register(FILTER_WAVES, create_waves, True, "Waves", ["color", "filter", "distortion"])
    registry.register(FILTER_ROTATE_CLOCKWISE, rotate_clockwise, False, "Rotate Clockwise", ["geometry", "filter"])
    registry.register(FILTER_BRIGHTNESS, adjust_brightness, True, "Brightness", ["color", "adjustment"])

    logger.info(f"Registered {len(registry.list_filters())} default filters")
