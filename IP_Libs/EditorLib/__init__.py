"""
EditorLib - Editing session and window

The session is importable without Qt; the window module needs PyQt5 and is
imported only by the application entry point.
"""

from IP_Libs.EditorLib.editor_session import ImageEditorSession

__all__ = [
    "ImageEditorSession",
]
