"""
Single import point for Pillow (which provides the `PIL` namespace).

Library modules import `Image` from here rather than from `PIL` directly,
so a missing Pillow install fails with one clear message.
"""
from importlib import import_module
from types import ModuleType
from typing import Optional


def _import(name: str) -> Optional[ModuleType]:
    try:
        return import_module(name)
    except ImportError:
        return None


_pil_image = _import("PIL.Image")

if _pil_image is None:
    raise ImportError("pillow (PIL) is required: install with 'pip install Pillow'")

Image = _pil_image
