import struct

import pytest

HEADER_FIXED_BYTES = 64


def build_header(
    *,
    width,
    height,
    image_offset,
    color_table_offset,
    source_path=b"D:\\sagas\\tex\\title.tga",
    note_path=b"note.txt",
    unk=None,
):
    """Pack a Sagas header. `unk` overrides opaque fields by name."""
    u = dict(
        unk0=0x1122334455667788, unk1=1, unk2=2, unk3=3, unk4=4,
        unk5=5, unk6=6, unk7=7, unk9=9, unk10=10, unk12=16, unk13=16, unk14=14,
    )
    u.update(unk or {})
    return b"".join([
        struct.pack("<QIIII", u["unk0"], u["unk1"], u["unk2"], u["unk3"], u["unk4"]),
        source_path + b"\x00",
        struct.pack("<IIII", u["unk5"], u["unk6"], u["unk7"], image_offset),
        struct.pack("<HH", width, height),
        struct.pack("<III", u["unk9"], u["unk10"], color_table_offset),
        struct.pack("<HHI", u["unk12"], u["unk13"], u["unk14"]),
        note_path + b"\x00",
    ])


def header_size(source_path=b"D:\\sagas\\tex\\title.tga", note_path=b"note.txt"):
    return HEADER_FIXED_BYTES + len(source_path) + 1 + len(note_path) + 1


def build_palette(entries=None):
    """256 raw RGBA entries; `entries` maps index -> (r, g, b, a), the rest are zero."""
    raw = bytearray(256 * 4)
    for i, rgba in (entries or {}).items():
        raw[i * 4:i * 4 + 4] = bytes(rgba)
    return bytes(raw)


def build_sagas(width, height, pixels, palette_entries=None, *, pixels_first=False, **header_kwargs):
    """
    Complete blob: header, then palette and pixel plane.

    With pixels_first the pixel plane precedes the palette, so decoding has
    to seek backwards for the pixels.
    """
    strings = {k: header_kwargs[k] for k in ("source_path", "note_path") if k in header_kwargs}
    start = header_size(**strings)
    palette = build_palette(palette_entries)
    plane = bytes(pixels)
    if pixels_first:
        image_offset, color_table_offset = start, start + len(plane)
        body = plane + palette
    else:
        color_table_offset, image_offset = start, start + len(palette)
        body = palette + plane
    header = build_header(
        width=width,
        height=height,
        image_offset=image_offset,
        color_table_offset=color_table_offset,
        **header_kwargs,
    )
    assert len(header) == start
    return header + body


EXAMPLE_PALETTE = {
    0: (10, 20, 30, 0),
    1: (40, 50, 60, 128),
    2: (70, 80, 90, 64),
    3: (100, 110, 120, 255),
}


@pytest.fixture
def example_blob():
    return build_sagas(2, 2, [0, 1, 2, 3], EXAMPLE_PALETTE)


@pytest.fixture
def example_file(tmp_path, example_blob):
    path = tmp_path / "title.bin"
    path.write_bytes(example_blob)
    return path
