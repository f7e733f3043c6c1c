"""
Constants and configuration values for Image Processor.

This module centralizes all constant values, magic numbers, and
configuration settings used throughout the application.
"""

# Raster constants
RASTER_MODE = "RGB"
CHANNEL_MIN = 0
CHANNEL_MAX = 255

# Brightness constants
BRIGHTNESS_MIN = -100
BRIGHTNESS_MAX = 100
BRIGHTNESS_SLIDER_MIN = -40
BRIGHTNESS_SLIDER_MAX = 40
BRIGHTNESS_SLIDER_MAJOR_TICK = 10

# Sepia coefficients, one row per output channel
SEPIA_MATRIX = (
    (0.393, 0.769, 0.189),
    (0.349, 0.686, 0.168),
    (0.272, 0.534, 0.131),
)

# Wave filter constants
WAVE_AMPLITUDE = 50
WAVE_PERIOD = 10
WAVE_BLUE_FALLOFF = 50

# File naming
DEFAULT_OUTPUT_EXTENSION = ".png"
DEFAULT_JPEG_QUALITY = 95

# Supported file formats
SUPPORTED_STANDARD_IMAGES = {".png", ".jpg", ".jpeg", ".bmp", ".gif", ".tiff", ".webp"}
STANDARD_IMAGE_FILTER = "Images (*.png *.jpg *.jpeg *.bmp *.gif *.tiff *.webp)"
SAVE_IMAGE_FILTER = "PNG Images (*.png);;JPEG Images (*.jpg *.jpeg);;All Files (*)"

# UI constants
DEFAULT_WINDOW_WIDTH = 1024
DEFAULT_WINDOW_HEIGHT = 768
PREVIEW_MIN_SIZE = 400
SELECTION_FILL_COLOR = (105, 105, 105, 125)
SELECTION_OUTLINE_COLOR = (255, 0, 0, 255)

# User-facing messages
ERROR_NO_IMAGE = "No image loaded."
ERROR_NO_UNDO = "No more undo actions available"
ERROR_NO_REDO = "No more redo actions available"
ERROR_INVALID_CROP = "Invalid crop dimensions."

# Filter names
FILTER_RED_BLUE_SWAP = "red_blue_swap"
FILTER_GRAYSCALE = "grayscale"
FILTER_SEPIA = "sepia"
FILTER_WAVES = "waves"
FILTER_ROTATE_CLOCKWISE = "rotate_clockwise"
FILTER_BRIGHTNESS = "brightness"
