"""
Editing session for Image Processor.

The session owns the live image, the undo/redo history and the crop
selection, and applies edits in the order the window needs:

- loading clears history, then records the loaded image as the first state
- every edit is computed on a copy first; only when it succeeds is the
  previous image pushed onto history and the live image replaced
- undo/redo swap the live image with the history entry they return

Nothing here touches Qt, so the window stays a thin layer of widgets.

Classes:
    ImageEditorSession: Live image plus history and selection
"""

from pathlib import Path
from typing import Any, Optional, Union
import logging

from IP_Libs.constants import FILTER_BRIGHTNESS, FILTER_ROTATE_CLOCKWISE
from IP_Libs.errors import InvalidCropDimensions, NoImageLoaded
from IP_Libs.HistoryLib.history_manager import ImageHistoryManager
from IP_Libs.ImageEditingLib import pixel_transforms
from IP_Libs.ImageEditingLib.filter_registry import FilterRegistry, get_default_registry
from IP_Libs.ImageEditingLib.image_file_handler import load_image, save_image
from IP_Libs.ImageEditingLib.raster_models import ImageRecord, snapshot_image, validate_raster
from IP_Libs.pillow_compat import Image
from IP_Libs.SelectionLib.selection_model import SelectionModel

logger = logging.getLogger(__name__)


class ImageEditorSession:
    """Live image plus its undo/redo history and crop selection, edited without Qt."""

    def __init__(
        self,
        registry: Optional[FilterRegistry] = None,
        history: Optional[ImageHistoryManager] = None,
        selection: Optional[SelectionModel] = None,
    ) -> None:
        self.registry = registry if registry is not None else get_default_registry()
        self.history = history if history is not None else ImageHistoryManager()
        self.selection = selection if selection is not None else SelectionModel()
        self.record: Optional[ImageRecord] = None

    @property
    def current_image(self) -> Optional['Image.Image']:
        return self.record.image if self.record is not None else None

    @property
    def has_image(self) -> bool:
        return self.record is not None

    def _require_image(self) -> 'Image.Image':
        if self.record is None:
            raise NoImageLoaded()
        return self.record.image

    def _replace_image(self, image: 'Image.Image') -> None:
        previous_size = self.record.image.size
        self.record.image = image
        if image.size != previous_size:
            self.selection.set_image_size(*image.size)

    # ------------------------------------------------------------------
    # File operations
    # ------------------------------------------------------------------

    def load(self, file_path: Union[str, Path]) -> 'Image.Image':
        """
        Load an image file and start a fresh history.

        Raises:
            OSError: If the file cannot be loaded; the session is unchanged
        """
        image = load_image(file_path)
        self.set_image(image, Path(file_path))
        return image

    def set_image(self, image: Any, path: Optional[Path] = None) -> None:
        """Make `image` the live image, clearing history and selection."""
        validate_raster(image)
        self.history.clear_history()
        self.history.save_state(image)
        self.record = ImageRecord(path=path, image=image)
        self.selection.set_image_size(*image.size)

    def save(self, file_path: Union[str, Path]) -> Path:
        """
        Save the live image.

        Returns:
            Path the image was written to

        Raises:
            NoImageLoaded: If no image is loaded
            UnsupportedFormat: If the extension is not writable
            OSError: If the file cannot be written
        """
        image = self._require_image()
        return save_image(image, file_path)

    # ------------------------------------------------------------------
    # Edits
    # ------------------------------------------------------------------

    def apply_filter(self, name: str, **params: Any) -> 'Image.Image':
        """
        Apply a registered filter to the live image.

        Raises:
            NoImageLoaded: If no image is loaded
            KeyError: If no filter has that name
            ValueError: If the filter rejects its parameters
        """
        image = self._require_image()
        result = self.registry.apply(name, snapshot_image(image), **params)

        self.history.save_state(image)
        self._replace_image(result)
        logger.debug(f"Applied filter {name} with {params}")
        return result

    def adjust_brightness(self, level: int) -> 'Image.Image':
        return self.apply_filter(FILTER_BRIGHTNESS, level=level)

    def preview_brightness(self, level: int) -> 'Image.Image':
        """Return a brightness-adjusted copy of the live image without committing it."""
        return pixel_transforms.preview_brightness(self._require_image(), level)

    def rotate_clockwise(self) -> 'Image.Image':
        return self.apply_filter(FILTER_ROTATE_CLOCKWISE)

    def crop(self, x1: int, y1: int, x2: int, y2: int) -> 'Image.Image':
        """
        Crop the live image to image-space corners.

        Raises:
            NoImageLoaded: If no image is loaded
            InvalidCropDimensions: If the clamped area is empty; the live
                image and history are unchanged
        """
        image = self._require_image()
        cropped = pixel_transforms.crop_image(image, x1, y1, x2, y2)

        self.history.save_state(image)
        self._replace_image(cropped)
        logger.debug(f"Cropped to ({x1}, {y1}) - ({x2}, {y2})")
        return cropped

    def crop_selection(self) -> 'Image.Image':
        """
        Crop the live image to the current selection, then clear the selection.

        The selection is cleared whether or not the crop succeeds.

        Raises:
            NoImageLoaded: If no image is loaded
            InvalidCropDimensions: If there is no usable selection
        """
        self._require_image()
        rect = self.selection.image_rect()
        try:
            if rect is None or rect.is_empty():
                raise InvalidCropDimensions("No crop area selected")
            return self.crop(*rect.as_box())
        except InvalidCropDimensions as e:
            logger.warning(f"Crop rejected: {e}")
            raise
        finally:
            self.selection.reset()

    # ------------------------------------------------------------------
    # History
    # ------------------------------------------------------------------

    def undo(self) -> 'Image.Image':
        """
        Raises:
            NoImageLoaded: If no image is loaded
            NoUndoAvailable: If there is nothing to undo
        """
        image = self._require_image()
        self._replace_image(self.history.undo(image))
        return self.record.image

    def redo(self) -> 'Image.Image':
        """
        Raises:
            NoImageLoaded: If no image is loaded
            NoRedoAvailable: If there is nothing to redo
        """
        image = self._require_image()
        self._replace_image(self.history.redo(image))
        return self.record.image

    def can_undo(self) -> bool:
        return self.has_image and self.history.can_undo()

    def can_redo(self) -> bool:
        return self.has_image and self.history.can_redo()
