"""32-bit word helpers shared by SHA-1 and SHA-2.

Every value handled by the digest engine is an unsigned 32-bit word. Python
integers do not wrap, so each helper masks its result with ``MASK32``.
"""

from __future__ import annotations


MASK32 = 0xFFFFFFFF


def rotl(x: int, n: int) -> int:
    """Left-rotate a 32-bit word `x` by `n` bits."""
    x &= MASK32
    return ((x << n) | (x >> (32 - n))) & MASK32


def rotr(x: int, n: int) -> int:
    """Right-rotate a 32-bit word `x` by `n` bits."""
    x &= MASK32
    return ((x >> n) | (x << (32 - n))) & MASK32


def shr(x: int, n: int) -> int:
    """Right-shift a 32-bit word `x` by `n` bits."""
    x &= MASK32
    return x >> n


def word_to_hex(x: int) -> str:
    """Render a 32-bit word as 8 lowercase hex characters, MSB nibble first."""
    return (x & MASK32).to_bytes(4, byteorder="big").hex()
