# -*- coding: utf-8 -*-
"""
Pixel plane reading and palette compositing.
"""

from __future__ import annotations

import logging
from typing import Union

import numpy as np

from .binary_cursor import BinaryCursor
from .errors import IndexOutOfRange
from .palette import SagasColorLUT

__all__ = ["read_pixel_plane", "compose_rgba"]


def read_pixel_plane(cursor: BinaryCursor, offset: int, width: int, height: int) -> np.ndarray:
    """Read width*height index bytes at *offset*, row-major, untouched."""
    count = width * height
    cursor.seek(offset)
    raw = cursor.read_bytes(count)
    logging.debug(f"Pixel plane: read {count} bytes ({width}x{height}) at 0x{offset:x}")
    plane = np.frombuffer(raw, dtype=np.uint8)
    plane.setflags(write=False)
    return plane


def compose_rgba(
    palette: Union[SagasColorLUT, np.ndarray],
    pixels,
    width: int,
    height: int,
) -> np.ndarray:
    """
    Map every index through the palette.

    Returns a (height, width, 4) uint8 array where out[y, x] is
    palette[pixels[y * width + x]].
    """
    table = palette.colors if isinstance(palette, SagasColorLUT) else np.asarray(palette, dtype=np.uint8)

    if isinstance(pixels, (bytes, bytearray, memoryview)):
        idx = np.frombuffer(bytes(pixels), dtype=np.uint8)
    else:
        idx = np.asarray(pixels).reshape(-1)

    if idx.size != width * height:
        raise ValueError(f"pixel plane has {idx.size} entries, expected {width}x{height}")

    if idx.size:
        bad = (idx < 0) | (idx >= len(table))
        if bad.any():
            pixel = int(np.argmax(bad))
            raise IndexOutOfRange(int(idx[pixel]), len(table), pixel)

    return table[idx.astype(np.intp)].reshape(height, width, 4)
