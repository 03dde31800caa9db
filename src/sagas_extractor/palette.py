# -*- coding: utf-8 -*-
"""
Color lookup table decoding.

The table is always 256 RGBA entries (1024 bytes). Stored alpha uses the
console's narrow range and is widened on read; the entries are then
de-interleaved with a per-32-entry block swap.
"""

from __future__ import annotations

import logging
from typing import NamedTuple, Sequence, Union

import numpy as np

from .binary_cursor import BinaryCursor
from .errors import IndexOutOfRange

__all__ = [
    "PALETTE_SIZE",
    "PALETTE_BYTES",
    "SWIZZLE_BLOCK",
    "SagasColor",
    "SagasColorLUT",
    "remap_alpha",
    "remap_alpha_array",
    "swizzle_palette",
]

PALETTE_SIZE = 256
PALETTE_BYTES = PALETTE_SIZE * 4
SWIZZLE_BLOCK = 32


class SagasColor(NamedTuple):
    r: int
    g: int
    b: int
    a: int


def remap_alpha(a: int) -> int:
    """Widen a stored alpha byte to 0-255. Zero stays fully transparent."""
    if a == 0:
        return 0
    return ((a << 1) - 1) & 0xFF


def remap_alpha_array(alpha) -> np.ndarray:
    """Vectorised remap_alpha over a uint8 array."""
    a = np.asarray(alpha, dtype=np.uint16)
    widened = ((a << 1) - 1) & 0xFF
    return np.where(a == 0, 0, widened).astype(np.uint8)


def swizzle_palette(colors: Union[np.ndarray, Sequence[Sequence[int]]]) -> np.ndarray:
    """
    Swap local entries 8-15 with 16-23 inside every 32-entry block.

    Returns a new (256, 4) array. Applying it twice gives back the input.
    """
    pal = np.array(colors, dtype=np.uint8)
    if pal.shape != (PALETTE_SIZE, 4):
        raise ValueError(f"palette must have shape ({PALETTE_SIZE}, 4), got {pal.shape}")
    blocks = pal.reshape(-1, SWIZZLE_BLOCK, 4)
    blocks[:, 8:16], blocks[:, 16:24] = blocks[:, 16:24].copy(), blocks[:, 8:16].copy()
    return pal


class SagasColorLUT:
    """Decoded palette. `colors` is a read-only (256, 4) uint8 RGBA array."""

    def __init__(self, colors: np.ndarray):
        self.colors = colors
        self.colors.setflags(write=False)

    def __len__(self) -> int:
        return len(self.colors)

    def __getitem__(self, index: int) -> SagasColor:
        if not 0 <= index < len(self.colors):
            raise IndexOutOfRange(index, len(self.colors))
        r, g, b, a = (int(v) for v in self.colors[index])
        return SagasColor(r, g, b, a)

    def __iter__(self):
        for i in range(len(self)):
            yield self[i]

    @classmethod
    def from_bytes(cls, raw: bytes) -> "SagasColorLUT":
        if len(raw) != PALETTE_BYTES:
            raise ValueError(f"palette needs {PALETTE_BYTES} bytes, got {len(raw)}")
        pal = np.frombuffer(raw, dtype=np.uint8).reshape(PALETTE_SIZE, 4).copy()
        pal[:, 3] = remap_alpha_array(pal[:, 3])
        return cls(swizzle_palette(pal))

    @classmethod
    def from_cursor(cls, cursor: BinaryCursor, offset: int) -> "SagasColorLUT":
        cursor.seek(offset)
        raw = cursor.read_bytes(PALETTE_BYTES)
        logging.debug(f"Palette: read {len(raw)} bytes at 0x{offset:x}")
        return cls.from_bytes(raw)

    def to_bytes(self) -> bytes:
        """Flat RGBA bytes, 4 per entry."""
        return self.colors.tobytes()
