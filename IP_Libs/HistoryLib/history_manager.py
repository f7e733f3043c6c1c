"""
Undo/redo history for Image Processor.

History is kept as two stacks of full image snapshots. Every push stores a
deep copy, so later edits to the live image never reach back into history,
and no two stack entries share a pixel buffer.

The manager never snapshots on its own: callers must call save_state()
with the live image before applying any edit.

Classes:
    ImageHistoryManager: Undo and redo stacks of image snapshots
"""

from typing import Any, List
import logging

from IP_Libs.errors import NoRedoAvailable, NoUndoAvailable
from IP_Libs.ImageEditingLib.raster_models import snapshot_image
from IP_Libs.pillow_compat import Image

logger = logging.getLogger(__name__)


class ImageHistoryManager:
    """
    Undo and redo stacks of image snapshots.

    The top of each stack is the last element of its list.

    Example:
        >>> history = ImageHistoryManager()
        >>> history.save_state(image)
        >>> grayscale(image)
        >>> image = history.undo(image)   # back to the colored version
        >>> image = history.redo(image)   # gray again
    """

    def __init__(self) -> None:
        self.undo_stack: List['Image.Image'] = []
        self.redo_stack: List['Image.Image'] = []

    def save_state(self, image: Any) -> None:
        """
        Push a copy of the image onto the undo stack and drop all redo states.

        Args:
            image: The current image, captured before an edit is applied
        """
        self.undo_stack.append(snapshot_image(image))
        self.redo_stack.clear()
        logger.debug(f"Saved history state (undo depth {len(self.undo_stack)})")

    def undo(self, current_image: Any) -> 'Image.Image':
        """
        Step back to the previous state.

        Args:
            current_image: The live image, stored on the redo stack

        Returns:
            The previous image state

        Raises:
            NoUndoAvailable: If the undo stack is empty
        """
        if not self.undo_stack:
            raise NoUndoAvailable()

        self.redo_stack.append(snapshot_image(current_image))
        return self.undo_stack.pop()

    def redo(self, current_image: Any) -> 'Image.Image':
        """
        Re-apply the most recently undone state.

        Args:
            current_image: The live image, stored on the undo stack

        Returns:
            The next image state

        Raises:
            NoRedoAvailable: If the redo stack is empty
        """
        if not self.redo_stack:
            raise NoRedoAvailable()

        self.undo_stack.append(snapshot_image(current_image))
        return self.redo_stack.pop()

    def clear_history(self) -> None:
        """Empty both stacks. Called when a new image is loaded."""
        self.undo_stack.clear()
        self.redo_stack.clear()
        logger.debug("Cleared history")

    def can_undo(self) -> bool:
        return bool(self.undo_stack)

    def can_redo(self) -> bool:
        return bool(self.redo_stack)

    @property
    def undo_depth(self) -> int:
        return len(self.undo_stack)

    @property
    def redo_depth(self) -> int:
        return len(self.redo_stack)
