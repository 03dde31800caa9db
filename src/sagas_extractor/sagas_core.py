# -*- coding: utf-8 -*-
"""
Sagas bitmap parser module.

Reads the DBZ Sagas indexed bitmap container:

- header: fixed little-endian fields with two NUL-terminated strings inline
- palette: 256 RGBA entries at color_table_offset (alpha widened, block swizzled)
- pixel plane: width*height palette indices at image_offset

Header -> palette -> pixels are read in that order by one decode session.
"""

from __future__ import annotations

import io
import logging
import os
from dataclasses import asdict, dataclass
from typing import Any, Dict, Union

import numpy as np
from PIL import Image

from .binary_cursor import BinaryCursor
from .compositor import compose_rgba, read_pixel_plane
from .errors import decode_stage
from .palette import SagasColorLUT

__all__ = [
    "SagasHeader",
    "SagasFile",
    "SagasParser",
    "decode_sagas",
    "parse_sagas",
    "get_image_pil",
    "get_image_rgba",
]

# ------------------------------------------------------------
# Header
# ------------------------------------------------------------


@dataclass(frozen=True)
class SagasHeader:
    """
    File header. The unkN fields are kept verbatim; their meaning is unknown.

    source_path and note_path are raw bytes since the strings come from a
    legacy toolchain and are not guaranteed to be valid UTF-8.
    """

    unk0: int
    unk1: int
    unk2: int
    unk3: int
    unk4: int
    source_path: bytes
    unk5: int
    unk6: int
    unk7: int
    image_offset: int
    width: int
    height: int
    unk9: int
    unk10: int
    color_table_offset: int
    unk12: int
    unk13: int
    unk14: int
    note_path: bytes

    @classmethod
    def from_cursor(cls, r: BinaryCursor) -> "SagasHeader":
        unk0 = r.read_u64()
        unk1 = r.read_u32()
        unk2 = r.read_u32()
        unk3 = r.read_u32()
        unk4 = r.read_u32()
        source_path = r.read_cstring()

        unk5 = r.read_u32()
        unk6 = r.read_u32()
        unk7 = r.read_u32()
        image_offset = r.read_u32()

        width = r.read_u16()
        height = r.read_u16()

        unk9 = r.read_u32()
        unk10 = r.read_u32()
        color_table_offset = r.read_u32()

        unk12 = r.read_u16()
        unk13 = r.read_u16()
        unk14 = r.read_u32()
        note_path = r.read_cstring()

        return cls(
            unk0=unk0,
            unk1=unk1,
            unk2=unk2,
            unk3=unk3,
            unk4=unk4,
            source_path=source_path,
            unk5=unk5,
            unk6=unk6,
            unk7=unk7,
            image_offset=image_offset,
            width=width,
            height=height,
            unk9=unk9,
            unk10=unk10,
            color_table_offset=color_table_offset,
            unk12=unk12,
            unk13=unk13,
            unk14=unk14,
            note_path=note_path,
        )

    @property
    def pixel_count(self) -> int:
        return self.width * self.height

    @property
    def source_path_text(self) -> str:
        # latin-1 maps every byte, so display never fails
        return self.source_path.decode("latin-1")

    @property
    def note_path_text(self) -> str:
        return self.note_path.decode("latin-1")

    def to_dict(self) -> Dict[str, Any]:
        """Display form: strings as latin-1 text, offsets in hex."""
        info = asdict(self)
        info["source_path"] = self.source_path_text
        info["note_path"] = self.note_path_text
        info["image_offset"] = f"0x{self.image_offset:x}"
        info["color_table_offset"] = f"0x{self.color_table_offset:x}"
        return info


# ------------------------------------------------------------
# Decode session
# ------------------------------------------------------------


class SagasFile:
    """Header, palette and pixel plane of one decoded file."""

    def __init__(self, header: SagasHeader, lut: SagasColorLUT, image: np.ndarray):
        self.header = header
        self.lut = lut
        self.image = image

    @classmethod
    def from_cursor(cls, cursor: BinaryCursor) -> "SagasFile":
        with decode_stage("header"):
            cursor.seek(0)
            header = SagasHeader.from_cursor(cursor)
        logging.debug(
            f"Sagas header: {header.width}x{header.height}, "
            f"palette at 0x{header.color_table_offset:x}, pixels at 0x{header.image_offset:x}"
        )

        with decode_stage("palette"):
            lut = SagasColorLUT.from_cursor(cursor, header.color_table_offset)

        with decode_stage("pixels"):
            image = read_pixel_plane(cursor, header.image_offset, header.width, header.height)

        return cls(header, lut, image)

    def get_header(self) -> SagasHeader:
        return self.header

    def get_color_table(self) -> SagasColorLUT:
        return self.lut

    def get_image(self) -> np.ndarray:
        return self.image

    def to_rgba(self) -> np.ndarray:
        """(height, width, 4) uint8 RGBA array."""
        with decode_stage("composite"):
            return compose_rgba(self.lut, self.image, self.header.width, self.header.height)

    def to_pil(self) -> Image.Image:
        rgba = self.to_rgba()
        if rgba.size == 0:
            return Image.new("RGBA", (self.header.width, self.header.height))
        return Image.fromarray(np.ascontiguousarray(rgba))


def decode_sagas(data: Union[bytes, bytearray, memoryview]) -> SagasFile:
    """Decode an in-memory Sagas blob."""
    return SagasFile.from_cursor(BinaryCursor(data))


# ------------------------------------------------------------
# File level API
# ------------------------------------------------------------


class SagasParser:
    """Opens and decodes Sagas bitmap files."""

    @staticmethod
    def parse_file(file_path: Union[str, os.PathLike]) -> SagasFile:
        """
        Decode the file at *file_path*.

        Raises FileNotFoundError when the path is missing and SagasDecodeError
        when the contents are truncated or inconsistent.
        """
        if not os.path.isfile(file_path):
            logging.error(f"Sagas file not found: {file_path}")
            raise FileNotFoundError(f"File not found: {file_path}")

        with open(file_path, "rb") as f:
            # the whole blob fits in memory; buffering keeps cstring reads cheap
            cursor = BinaryCursor(io.BytesIO(f.read()))
        return SagasFile.from_cursor(cursor)


def parse_sagas(file_path: Union[str, os.PathLike]) -> SagasFile:
    return SagasParser.parse_file(file_path)


# ------------------------------------------------------------
# Image helpers
# ------------------------------------------------------------


def get_image_pil(sagas_file: SagasFile) -> Image.Image:
    """RGBA Pillow image of a decoded file."""
    return sagas_file.to_pil()


def get_image_rgba(sagas_file: SagasFile) -> bytes:
    """Raw RGBA bytes (width*height*4), row-major."""
    return sagas_file.to_rgba().tobytes()
