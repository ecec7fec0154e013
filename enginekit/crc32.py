"""Table-driven reflected CRC-32 (polynomial 0x04C11DB7)."""

from __future__ import annotations

__all__ = ["CRC32", "get_crc", "POLYNOMIAL", "INVALID_CRC32"]

POLYNOMIAL = 0x04C11DB7
INVALID_CRC32 = 0xFFFFFFFF
_MASK = 0xFFFFFFFF


def _reflect(value: int, bits: int) -> int:
    result = 0
    for i in range(bits):
        if value & (1 << i):
            result |= 1 << (bits - 1 - i)
    return result


def _build_table() -> tuple[int, ...]:
    table = []
    for i in range(0x100):
        entry = _reflect(i, 8) << 24
        for _ in range(8):
            entry = ((entry << 1) ^ (POLYNOMIAL if entry & 0x80000000 else 0)) & _MASK
        table.append(_reflect(entry, 32))
    return tuple(table)


_TABLE = _build_table()


def _as_bytes(data: bytes | bytearray | memoryview | str) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8")
    return bytes(data)


class CRC32:
    """Incremental CRC-32 checksum."""

    def __init__(self, data: bytes | bytearray | memoryview | str = b"") -> None:
        self._crc = INVALID_CRC32
        if data:
            self.update(data)

    def reset(self) -> None:
        """Start a new checksum."""
        self._crc = INVALID_CRC32

    def update(self, data: bytes | bytearray | memoryview | str) -> "CRC32":
        """Feed more data into the checksum; strings are hashed as UTF-8."""
        crc = self._crc
        for byte in _as_bytes(data):
            crc = (crc >> 8) ^ _TABLE[(crc & 0xFF) ^ byte]
        self._crc = crc
        return self

    def digest(self) -> int:
        """Return the checksum of everything fed so far."""
        return ~self._crc & _MASK

    def __int__(self) -> int:
        return self.digest()

    def __repr__(self) -> str:
        return f"CRC32(0x{self.digest():08X})"


def get_crc(text: str) -> int:
    """Return the CRC-32 of ``text``; the empty string gives 0."""
    if not text:
        return 0
    return CRC32(text).digest()