"""Width parsing and XXH digests for the hash pages."""

import re
from typing import Optional

import xxhash

SUPPORTED_WIDTHS = (32, 64, 128)

_DIGITS = re.compile(r"[0-9]+")
_MASK64 = (1 << 64) - 1


def parse_width(raw: str) -> Optional[int]:
    """Return the hash width named by a ``/H{width}`` path segment.

    ``None`` means the segment is not a run of digits or names a width we
    do not hash at.
    """
    if not _DIGITS.fullmatch(raw):
        return None
    width = int(raw)
    if width not in SUPPORTED_WIDTHS:
        return None
    return width


def hash_hex(data: bytes, width: int) -> Optional[str]:
    """Hash ``data`` with seed 0 and return the zero-padded lowercase hex digest.

    The 128-bit digest is written low 64 bits first, then high 64 bits.
    """
    if width == 32:
        return f"{xxhash.xxh32_intdigest(data, seed=0):08x}"
    if width == 64:
        return f"{xxhash.xxh64_intdigest(data, seed=0):016x}"
    if width == 128:
        value = xxhash.xxh3_128_intdigest(data, seed=0)
        low64 = value & _MASK64
        high64 = value >> 64
        return f"{low64:016x}{high64:016x}"
    return None
