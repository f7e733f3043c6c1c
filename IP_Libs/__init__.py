"""
IP_Libs - Image Processor Library Modules

This package contains core functionality for the Image Processor project,
organized into specialized sub-packages:

- ImageEditingLib: Pixel transforms, raster models, filter registry and file I/O
- HistoryLib: Undo/redo snapshot history
- SelectionLib: Display-to-image selection mapping for cropping
- EditorLib: Editing session controller and the PyQt5 window
"""

__version__ = "0.1.0"
