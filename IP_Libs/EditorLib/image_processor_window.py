from io import BytesIO
from typing import Any, Optional

from PyQt5.QtCore import QRect, Qt
from PyQt5.QtGui import QColor, QKeySequence, QPainter, QPixmap
from PyQt5.QtWidgets import (
    QAction,
    QDialog,
    QFileDialog,
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QMessageBox,
    QPushButton,
    QSlider,
    QVBoxLayout,
    QWidget,
)

from IP_Libs.constants import (
    BRIGHTNESS_SLIDER_MAJOR_TICK,
    BRIGHTNESS_SLIDER_MAX,
    BRIGHTNESS_SLIDER_MIN,
    DEFAULT_WINDOW_HEIGHT,
    DEFAULT_WINDOW_WIDTH,
    ERROR_NO_IMAGE,
    PREVIEW_MIN_SIZE,
    SAVE_IMAGE_FILTER,
    SELECTION_FILL_COLOR,
    SELECTION_OUTLINE_COLOR,
    STANDARD_IMAGE_FILTER,
)
from IP_Libs.EditorLib.editor_session import ImageEditorSession
from IP_Libs.errors import InvalidCropDimensions, NoRedoAvailable, NoUndoAvailable
from IP_Libs.SelectionLib.coordinate_mapper import compute_scale
from IP_Libs.SelectionLib.selection_model import SelectionModel


def _to_pixmap(image: Any) -> QPixmap:
    buffer = BytesIO()
    image.save(buffer, format="PNG")
    pixmap = QPixmap()
    pixmap.loadFromData(buffer.getvalue(), "PNG")
    return pixmap


class ImageCanvas(QWidget):
    """Draws the image fitted and centered, and feeds mouse drags to a SelectionModel."""

    def __init__(self, selection: SelectionModel, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.selection = selection
        self.crop_mode = False
        self._pixmap: Optional[QPixmap] = None
        self._image_size = (0, 0)
        self.setMinimumSize(PREVIEW_MIN_SIZE, PREVIEW_MIN_SIZE)
        self.setStyleSheet("background: white;")
        self.selection.add_listener(lambda _has_selection: self.update())

    def set_image(self, image: Any) -> None:
        self._pixmap = _to_pixmap(image) if image is not None else None
        self._image_size = image.size if image is not None else (0, 0)
        self.update()

    def resizeEvent(self, event) -> None:
        self.selection.set_viewport_size(self.width(), self.height())
        super().resizeEvent(event)

    def mousePressEvent(self, event) -> None:
        if self.crop_mode:
            self.selection.begin_drag((event.x(), event.y()))

    def mouseMoveEvent(self, event) -> None:
        if self.crop_mode:
            self.selection.update_drag((event.x(), event.y()))

    def mouseReleaseEvent(self, event) -> None:
        if self.crop_mode:
            self.selection.end_drag()

    def paintEvent(self, event) -> None:
        if self._pixmap is None:
            return

        viewport = compute_scale(self.width(), self.height(), *self._image_size)
        painter = QPainter(self)
        painter.drawPixmap(
            QRect(viewport.offset_x, viewport.offset_y, viewport.scaled_width, viewport.scaled_height),
            self._pixmap,
        )

        rect = self.selection.display_rect
        if rect is not None:
            area = QRect(rect.x, rect.y, rect.width, rect.height)
            painter.fillRect(area, QColor(*SELECTION_FILL_COLOR))
            painter.setPen(QColor(*SELECTION_OUTLINE_COLOR))
            painter.drawRect(area)
        painter.end()


class BrightnessDialog(QDialog):
    """Slider with live preview; the edit is only committed on OK."""

    def __init__(self, session: ImageEditorSession, canvas: ImageCanvas, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.session = session
        self.canvas = canvas
        self.setWindowTitle("Adjust Brightness")
        self.setModal(True)

        self.slider = QSlider(Qt.Horizontal)
        self.slider.setRange(BRIGHTNESS_SLIDER_MIN, BRIGHTNESS_SLIDER_MAX)
        self.slider.setValue(0)
        self.slider.setTickInterval(BRIGHTNESS_SLIDER_MAJOR_TICK)
        self.slider.setTickPosition(QSlider.TicksBelow)
        self.label_value = QLabel("Brightness: 0")

        btn_ok = QPushButton("OK")
        btn_cancel = QPushButton("Cancel")

        buttons = QHBoxLayout()
        buttons.addWidget(btn_ok)
        buttons.addWidget(btn_cancel)

        layout = QVBoxLayout(self)
        layout.addWidget(self.label_value)
        layout.addWidget(self.slider)
        layout.addLayout(buttons)

        self.slider.valueChanged.connect(self.on_value_changed)
        btn_ok.clicked.connect(self.accept)
        btn_cancel.clicked.connect(self.reject)

    def on_value_changed(self, value: int) -> None:
        self.label_value.setText(f"Brightness: {value}")
        self.canvas.set_image(self.session.preview_brightness(value))

    def accept(self) -> None:
        if self.slider.value() != 0:
            self.session.adjust_brightness(self.slider.value())
        self.canvas.set_image(self.session.current_image)
        super().accept()

    def reject(self) -> None:
        self.canvas.set_image(self.session.current_image)
        super().reject()


class ImageProcessorWindow(QMainWindow):
    def __init__(self, session: Optional[ImageEditorSession] = None) -> None:
        super().__init__()
        self.session = session if session is not None else ImageEditorSession()
        self.setWindowTitle("Image Processor")
        self.resize(DEFAULT_WINDOW_WIDTH, DEFAULT_WINDOW_HEIGHT)

        self._build_ui()
        self._build_menus()
        self._connect_signals()
        self.exit_crop_mode()
        self.update_history_buttons()

    def _build_ui(self) -> None:
        central = QWidget(self)
        self.setCentralWidget(central)

        root = QVBoxLayout(central)
        buttons_row = QHBoxLayout()

        self.canvas = ImageCanvas(self.session.selection, central)

        self.btn_undo = QPushButton("Undo")
        self.btn_redo = QPushButton("Redo")
        self.btn_crop_mode = QPushButton("Crop Mode")
        self.btn_apply_crop = QPushButton("Apply Crop")
        self.btn_cancel_crop = QPushButton("Cancel Crop")

        for button in (self.btn_undo, self.btn_redo, self.btn_crop_mode, self.btn_apply_crop, self.btn_cancel_crop):
            buttons_row.addWidget(button)

        root.addWidget(self.canvas, stretch=1)
        root.addLayout(buttons_row)

    def _build_menus(self) -> None:
        file_menu = self.menuBar().addMenu("File")
        self._add_action(file_menu, "Load Image", self.load_image, "Ctrl+O", "Open an image file")
        self._add_action(file_menu, "Save Image", self.save_image, "Ctrl+S", "Save current image")

        filters_menu = self.menuBar().addMenu("Filters")
        registry = self.session.registry
        for name in registry.filter_by_tag("filter"):
            label = registry.get_metadata(name).label
            self._add_action(
                filters_menu,
                label,
                lambda _checked=False, filter_name=name: self.apply_filter(filter_name),
            )

        edit_menu = self.menuBar().addMenu("Edit")
        self._add_action(edit_menu, "Brightness...", self.show_brightness_dialog, "Ctrl+B", "Adjust image brightness")
        self._add_action(edit_menu, "Crop Mode", self.enter_crop_mode, "Ctrl+X", "Enter crop mode")
        self.action_undo = self._add_action(edit_menu, "Undo", self.undo, "Ctrl+Z")
        self.action_redo = self._add_action(edit_menu, "Redo", self.redo, "Ctrl+Y")

    def _add_action(self, menu, text: str, slot, shortcut: str = "", tooltip: str = "") -> QAction:
        action = QAction(text, self)
        if shortcut:
            action.setShortcut(QKeySequence(shortcut))
        if tooltip:
            action.setToolTip(f"{tooltip} ({shortcut})" if shortcut else tooltip)
        action.triggered.connect(slot)
        menu.addAction(action)
        return action

    def _connect_signals(self) -> None:
        self.btn_undo.clicked.connect(self.undo)
        self.btn_redo.clicked.connect(self.redo)
        self.btn_crop_mode.clicked.connect(self.enter_crop_mode)
        self.btn_apply_crop.clicked.connect(self.apply_crop)
        self.btn_cancel_crop.clicked.connect(self.exit_crop_mode)
        self.session.selection.add_listener(self.btn_apply_crop.setEnabled)

    def load_image(self) -> None:
        file_path, _ = QFileDialog.getOpenFileName(self, "Load Image", "", STANDARD_IMAGE_FILTER)
        if not file_path:
            return

        try:
            self.session.load(file_path)
        except OSError as e:
            self._show_error("Error", f"Error loading image: {e}")
            return

        self.exit_crop_mode()
        self.refresh()

    def save_image(self) -> None:
        if not self._require_image():
            return

        default_path = str(self.session.record.path or "")
        file_path, _ = QFileDialog.getSaveFileName(self, "Save Image", default_path, SAVE_IMAGE_FILTER)
        if not file_path:
            return

        try:
            saved_path = self.session.save(file_path)
        except OSError as e:
            self._show_error("Error", f"Error saving image: {e}")
            return

        self._show_info("Success", f"Image saved to {saved_path}")

    def apply_filter(self, name: str) -> None:
        if not self._require_image():
            return

        try:
            self.session.apply_filter(name)
        except (KeyError, ValueError) as e:
            self._show_error("Error", f"Invalid filter: {e}")
            return

        self.refresh()

    def show_brightness_dialog(self) -> None:
        if not self._require_image():
            return

        BrightnessDialog(self.session, self.canvas, self).exec_()
        self.update_history_buttons()

    def enter_crop_mode(self) -> None:
        if not self._require_image():
            return

        self.canvas.crop_mode = True
        self.btn_crop_mode.setVisible(False)
        self.btn_apply_crop.setVisible(True)
        self.btn_cancel_crop.setVisible(True)
        self.btn_apply_crop.setEnabled(False)

    def apply_crop(self) -> None:
        try:
            self.session.crop_selection()
        except InvalidCropDimensions as e:
            self._show_error("Error", f"Invalid Crop Area: {e}")
        self.exit_crop_mode()
        self.refresh()

    def exit_crop_mode(self) -> None:
        self.canvas.crop_mode = False
        self.btn_crop_mode.setVisible(True)
        self.btn_apply_crop.setVisible(False)
        self.btn_cancel_crop.setVisible(False)
        self.session.selection.reset()

    def undo(self) -> None:
        if not self.session.has_image:
            return

        try:
            self.session.undo()
        except NoUndoAvailable as e:
            self._show_info("Undo", str(e))
            return

        self.refresh()

    def redo(self) -> None:
        if not self.session.has_image:
            return

        try:
            self.session.redo()
        except NoRedoAvailable as e:
            self._show_info("Redo", str(e))
            return

        self.refresh()

    def refresh(self) -> None:
        self.canvas.set_image(self.session.current_image)
        self.update_history_buttons()

    def update_history_buttons(self) -> None:
        can_undo = self.session.can_undo()
        can_redo = self.session.can_redo()
        self.btn_undo.setEnabled(can_undo)
        self.btn_redo.setEnabled(can_redo)
        self.action_undo.setEnabled(can_undo)
        self.action_redo.setEnabled(can_redo)

    def _require_image(self) -> bool:
        if not self.session.has_image:
            self._show_error("Error", ERROR_NO_IMAGE)
            return False
        return True

    def _show_info(self, title: str, message: str) -> None:
        QMessageBox.information(self, title, message)

    def _show_error(self, title: str, message: str) -> None:
        QMessageBox.critical(self, title, message)
