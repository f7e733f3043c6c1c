"""
Image file loading and saving for Image Processor.

Loading always yields an RGB raster. Saving chooses the output format from
the file extension: a path with no extension is saved as PNG with ".png"
appended, and an extension Pillow cannot write raises UnsupportedFormat.

Functions:
    load_image: Load an image file as an RGB raster
    save_image: Save a raster, choosing the format by extension
    resolve_save_target: Work out the final path and Pillow format for a save
    get_supported_image_formats: Extensions offered in file dialogs
    is_supported_format: Check a path against the supported extensions
"""

from pathlib import Path
from typing import Any, Dict, List, Tuple, Union
import logging

from IP_Libs.constants import (
    DEFAULT_JPEG_QUALITY,
    DEFAULT_OUTPUT_EXTENSION,
    RASTER_MODE,
    SUPPORTED_STANDARD_IMAGES,
)
from IP_Libs.errors import UnsupportedFormat
from IP_Libs.ImageEditingLib.raster_models import validate_raster
from IP_Libs.pillow_compat import Image

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def get_supported_image_formats() -> List[str]:
    """
    Get list of supported standard image formats.

    Returns:
        List of file extensions (e.g., ['.bmp', '.gif', ...])
    """
    return sorted(list(SUPPORTED_STANDARD_IMAGES))


def is_supported_format(file_path: PathLike) -> bool:
    """Check if a file path has one of the supported image extensions."""
    return Path(file_path).suffix.lower() in SUPPORTED_STANDARD_IMAGES


def load_image(file_path: PathLike) -> 'Image.Image':
    """
    Load an image file as an RGB raster.

    Args:
        file_path: Path to the image file

    Returns:
        RGB PIL Image fully loaded into memory

    Raises:
        OSError: If the file cannot be read or is not a recognized image
    """
    path = Path(file_path)
    try:
        with Image.open(path) as source:
            image = source.convert(RASTER_MODE)
    except OSError as e:
        raise OSError(f"Error loading image {path}: {e}") from e

    logger.info(f"Loaded image {path} ({image.width}x{image.height})")
    return image


def resolve_save_target(file_path: PathLike) -> Tuple[Path, str]:
    """
    Work out the final save path and Pillow format name.

    Args:
        file_path: Requested output path

    Returns:
        Tuple of (path, format) where format is a Pillow format name like "PNG"

    Raises:
        UnsupportedFormat: If the extension is not writable by Pillow
    """
    path = Path(file_path)
    extension = path.suffix.lower()

    if not extension:
        path = path.with_name(path.name + DEFAULT_OUTPUT_EXTENSION)
        extension = DEFAULT_OUTPUT_EXTENSION

    save_format = Image.registered_extensions().get(extension)
    if save_format is None or save_format not in Image.SAVE:
        raise UnsupportedFormat(f"Unsupported image format: {extension.lstrip('.')}")

    return path, save_format


def get_save_kwargs(save_format: str) -> Dict[str, Any]:
    """Get PIL Image.save() kwargs based on format."""
    kwargs: Dict[str, Any] = {"format": save_format}

    if save_format == "JPEG":
        kwargs["quality"] = DEFAULT_JPEG_QUALITY

    return kwargs


def save_image(image: Any, file_path: PathLike) -> Path:
    """
    Save a raster to disk, creating parent directories as needed.

    Args:
        image: RGB PIL Image to save
        file_path: Output path; the extension selects the format

    Returns:
        Path where the image was saved

    Raises:
        UnsupportedFormat: If the extension is not writable
        OSError: If the file cannot be written
    """
    validate_raster(image)
    path, save_format = resolve_save_target(file_path)

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        image.save(path, **get_save_kwargs(save_format))
    except (OSError, ValueError) as e:
        raise OSError(f"Error saving image {path}: {e}") from e

    logger.info(f"Saved image {path} as {save_format}")
    return path
