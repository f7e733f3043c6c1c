"""
HistoryLib - Undo/redo history

Provides the snapshot-based history manager used by the editing session.
"""

from IP_Libs.HistoryLib.history_manager import ImageHistoryManager

__all__ = [
    "ImageHistoryManager",
]
