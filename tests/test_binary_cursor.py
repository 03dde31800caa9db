import io
import struct

import pytest

from sagas_extractor import BinaryCursor, SeekFailure, UnexpectedEof


def test_little_endian_reads_advance():
    data = struct.pack("<BHIQ", 0xAB, 0x1234, 0xDEADBEEF, 0x0102030405060708)
    cursor = BinaryCursor(data)
    assert cursor.read_u8() == 0xAB
    assert cursor.read_u16() == 0x1234
    assert cursor.read_u32() == 0xDEADBEEF
    assert cursor.read_u64() == 0x0102030405060708
    assert cursor.tell() == len(data)


def test_cstring_excludes_terminator_and_consumes_it():
    cursor = BinaryCursor(b"abc\x00\x07")
    assert cursor.read_cstring() == b"abc"
    assert cursor.read_u8() == 7


def test_cstring_keeps_non_utf8_bytes():
    cursor = BinaryCursor(b"\xff\xfe\x83\x41\x00")
    assert cursor.read_cstring() == b"\xff\xfe\x83\x41"


def test_empty_cstring():
    cursor = BinaryCursor(b"\x00rest")
    assert cursor.read_cstring() == b""
    assert cursor.tell() == 1


def test_cstring_without_terminator_is_eof():
    with pytest.raises(UnexpectedEof):
        BinaryCursor(b"abc").read_cstring()


def test_short_read_reports_counts():
    cursor = BinaryCursor(b"\x01\x02")
    cursor.read_u8()
    with pytest.raises(UnexpectedEof) as info:
        cursor.read_u32()
    assert info.value.requested == 4
    assert info.value.available == 1
    assert info.value.position == 1


def test_seek_is_absolute_both_directions():
    cursor = BinaryCursor(bytes(range(16)))
    cursor.seek(10)
    assert cursor.read_u8() == 10
    cursor.seek(2)
    assert cursor.read_u8() == 2


def test_seek_past_end_then_read_fails():
    cursor = BinaryCursor(b"\x00" * 4)
    cursor.seek(100)
    with pytest.raises(UnexpectedEof):
        cursor.read_u8()


def test_negative_seek_fails():
    with pytest.raises(SeekFailure):
        BinaryCursor(b"\x00").seek(-1)


def test_stream_source():
    cursor = BinaryCursor(io.BytesIO(b"\x34\x12"))
    assert cursor.read_u16() == 0x1234


class _Unseekable(io.RawIOBase):
    def readable(self):
        return True

    def seek(self, offset, whence=io.SEEK_SET):
        raise io.UnsupportedOperation("seek")


def test_stream_that_refuses_seek():
    with pytest.raises(SeekFailure) as info:
        BinaryCursor(_Unseekable()).seek(8)
    assert info.value.offset == 8
