"""CRC-32 (reflected, polynomial 0xEDB88320) and CRC-8 (polynomial 0x25)."""

from __future__ import annotations

import zlib

__all__ = ["crc32", "crc8"]


def _crc8_table(poly: int):
    table = []
    for i in range(256):
        c = i
        for _ in range(8):
            c = ((c << 1) ^ poly) & 0xFF if c & 0x80 else (c << 1) & 0xFF
        table.append(c)
    return tuple(table)


_CRC8_TABLE = _crc8_table(0x25)


def crc32(crc: int, data) -> int:
    """Continue a CRC-32 from ``crc`` over ``data``; start with 0."""
    return zlib.crc32(memoryview(data).tobytes(), crc & 0xFFFFFFFF)


def crc8(crc: int, data) -> int:
    """Continue a CRC-8 from ``crc`` over ``data`` (no reflection, no final xor)."""
    crc &= 0xFF
    for byte in memoryview(data).tobytes():
        crc = _CRC8_TABLE[crc ^ byte]
    return crc