# -*- coding: utf-8 -*-
"""
Decode errors for the Sagas bitmap pipeline.

Every failure aborts the whole decode; the stage that failed is recorded on
the exception so callers can report it.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator, Optional

__all__ = [
    "SagasDecodeError",
    "UnexpectedEof",
    "SeekFailure",
    "IndexOutOfRange",
    "decode_stage",
]


class SagasDecodeError(Exception):
    """Base class for all decode failures."""

    def __init__(self, message: str, *, stage: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.stage = stage

    def __str__(self) -> str:
        if self.stage:
            return f"[{self.stage}] {self.message}"
        return self.message


class UnexpectedEof(SagasDecodeError):
    """A read asked for more bytes than the stream had left."""

    def __init__(self, requested: int, available: int, position: int, *, stage: Optional[str] = None):
        super().__init__(
            f"unexpected end of stream at 0x{position:x}: "
            f"wanted {requested} byte(s), got {available}",
            stage=stage,
        )
        self.requested = requested
        self.available = available
        self.position = position


class SeekFailure(SagasDecodeError):
    """The underlying stream could not move to the requested offset."""

    def __init__(self, offset: int, reason: str = "", *, stage: Optional[str] = None):
        message = f"cannot seek to offset {offset}"
        if reason:
            message += f": {reason}"
        super().__init__(message, stage=stage)
        self.offset = offset


class IndexOutOfRange(SagasDecodeError):
    """A palette slot that does not exist was referenced."""

    def __init__(self, index: int, palette_size: int, pixel: Optional[int] = None, *, stage: Optional[str] = None):
        if pixel is None:
            message = f"palette index {index} out of range, palette has {palette_size} entries"
        else:
            message = f"pixel {pixel} uses palette index {index}, palette has {palette_size} entries"
        super().__init__(message, stage=stage)
        self.index = index
        self.palette_size = palette_size
        self.pixel = pixel


@contextmanager
def decode_stage(name: str) -> Iterator[None]:
    """Tag any SagasDecodeError raised inside the block with *name*."""
    try:
        yield
    except SagasDecodeError as e:
        if e.stage is None:
            e.stage = name
        raise
