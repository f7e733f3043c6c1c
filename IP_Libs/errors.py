"""
Exception types for Image Processor.

Every error here is recoverable at the call site. Each class also derives
from the closest built-in so callers that catch `ValueError`, `LookupError`
or `OSError` keep working.
"""

from IP_Libs.constants import ERROR_INVALID_CROP, ERROR_NO_IMAGE, ERROR_NO_REDO, ERROR_NO_UNDO


class ImageEditorError(Exception):
    """Base class for all Image Processor errors."""


class InvalidCropDimensions(ImageEditorError, ValueError):
    """Crop rectangle has zero or negative area after clamping."""

    def __init__(self, message: str = ERROR_INVALID_CROP) -> None:
        super().__init__(message)


class NoUndoAvailable(ImageEditorError, LookupError):
    def __init__(self, message: str = ERROR_NO_UNDO) -> None:
        super().__init__(message)


class NoRedoAvailable(ImageEditorError, LookupError):
    def __init__(self, message: str = ERROR_NO_REDO) -> None:
        super().__init__(message)


class UnsupportedFormat(ImageEditorError, OSError):
    """Save target extension is not writable by the codec."""


class NoImageLoaded(ImageEditorError, RuntimeError):
    def __init__(self, message: str = ERROR_NO_IMAGE) -> None:
        super().__init__(message)
