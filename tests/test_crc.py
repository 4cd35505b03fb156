import pytest

from protocore.crc import crc8, crc32


def test_crc32_empty_is_start_value():
    assert crc32(0, b"") == 0


def test_crc32_check_value():
    assert crc32(0, b"123456789") == 0xCBF43926


def test_crc32_streaming_matches_whole():
    data = b"the quick brown fox jumps over the lazy dog"
    assert crc32(crc32(0, data[:10]), data[10:]) == crc32(0, data)


def test_crc32_accepts_bytearray_and_memoryview():
    data = b"abcdef"
    assert crc32(0, bytearray(data)) == crc32(0, data) == crc32(0, memoryview(data))


def test_crc32_rejects_text():
    with pytest.raises(TypeError):
        crc32(0, "text")


def test_crc8_table_entries():
    assert crc8(0, b"\x01") == 0x25
    assert crc8(0, b"\x02") == 0x4A
    assert crc8(0, b"\xff") == 0x60


def test_crc8_empty_is_start_value():
    assert crc8(0x5A, b"") == 0x5A


def test_crc8_streaming_matches_whole():
    data = bytes(range(200))
    assert crc8(crc8(0, data[:77]), data[77:]) == crc8(0, data)


def test_crc8_result_is_a_byte():
    assert 0 <= crc8(0, b"some longer payload \x80\x90\xfe") <= 0xFF


def test_crc8_rejects_text():
    with pytest.raises(TypeError):
        crc8(0, "text")