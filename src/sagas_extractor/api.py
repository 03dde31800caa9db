# -*- coding: utf-8 -*-
"""
High-level helpers for using the extractor from other Python code.

Usage:
    import sagas_extractor as sagas

    info = sagas.get_header_info("title.bin")
    image = sagas.extract_image("title.bin")             # PIL.Image
    sagas.extract_image("title.bin", "title.png")         # writes, returns True
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional, Union

from PIL import Image

from .sagas_core import SagasFile, SagasParser

__all__ = ["open_sagas_file", "get_header_info", "extract_image", "save_png"]

PathLike = Union[str, os.PathLike]


def open_sagas_file(file_path: PathLike) -> SagasFile:
    """
    Decode a Sagas bitmap file.

    Args:
        file_path: path to the raw binary

    Returns:
        SagasFile: the decoded header, palette and pixel plane
    """
    return SagasParser.parse_file(file_path)


def get_header_info(file_path: PathLike) -> Dict[str, Any]:
    """Header fields of *file_path* in display form."""
    return open_sagas_file(file_path).header.to_dict()


def save_png(image: Image.Image, output_path: PathLike) -> Path:
    """Write *image* as PNG, creating the parent directory."""
    path = Path(output_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    image.save(path, format="PNG")
    logging.info(f"Wrote {image.width}x{image.height} image to {path}")
    return path


def extract_image(file_path: PathLike, output_path: Optional[PathLike] = None):
    """
    Decode *file_path* into an RGBA image.

    Args:
        file_path: path to the raw binary
        output_path: PNG destination (None returns the image instead)

    Returns:
        PIL.Image.Image or bool: the image, or True once it has been written
    """
    image = open_sagas_file(file_path).to_pil()
    if output_path is None:
        return image
    save_png(image, output_path)
    return True
