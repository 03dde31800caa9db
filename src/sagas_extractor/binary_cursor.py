# -*- coding: utf-8 -*-
"""
Little-endian byte reader over an in-memory blob or a seekable stream.
"""

from __future__ import annotations

import io
import struct
from typing import BinaryIO, Union

from .errors import SeekFailure, UnexpectedEof

__all__ = ["BinaryCursor"]

ByteSource = Union[bytes, bytearray, memoryview, BinaryIO]

_U8 = struct.Struct("<B")
_U16 = struct.Struct("<H")
_U32 = struct.Struct("<I")
_U64 = struct.Struct("<Q")


class BinaryCursor:
    """Sequential reads plus absolute seeks. All reads fail with UnexpectedEof when short."""

    def __init__(self, source: ByteSource):
        if isinstance(source, (bytes, bytearray, memoryview)):
            self._stream: BinaryIO = io.BytesIO(bytes(source))
        else:
            self._stream = source

    def tell(self) -> int:
        return self._stream.tell()

    def seek(self, offset: int) -> int:
        """Move to *offset* bytes from the start. Past-the-end is allowed."""
        if offset < 0:
            raise SeekFailure(offset, "negative offset")
        try:
            return self._stream.seek(offset, io.SEEK_SET)
        except (OSError, ValueError) as e:
            raise SeekFailure(offset, str(e)) from e

    def read_bytes(self, count: int) -> bytes:
        position = self._stream.tell()
        data = self._stream.read(count)
        if len(data) < count:
            raise UnexpectedEof(count, len(data), position)
        return data

    def _unpack(self, fmt: struct.Struct) -> int:
        return fmt.unpack(self.read_bytes(fmt.size))[0]

    def read_u8(self) -> int:
        return self._unpack(_U8)

    def read_u16(self) -> int:
        return self._unpack(_U16)

    def read_u32(self) -> int:
        return self._unpack(_U32)

    def read_u64(self) -> int:
        return self._unpack(_U64)

    def read_cstring(self) -> bytes:
        """
        Read up to and including the next NUL byte.

        The terminator is consumed but not returned. The result is raw bytes;
        no text encoding is assumed.
        """
        start = self._stream.tell()
        buffer = bytearray()
        while True:
            b = self._stream.read(1)
            if not b:
                # position of the missing terminator
                raise UnexpectedEof(1, 0, start + len(buffer))
            if b == b"\x00":
                return bytes(buffer)
            buffer += b
