"""Turn caller text into the raw bytes that get hashed.

Two conventions are supported:

- Text starting with ``0x`` is a hexadecimal literal. Each pair of hex digits
  is one byte (case-insensitive); a trailing odd digit is the high nibble of a
  final byte whose low nibble is zero.
- Anything else is converted one byte per character, keeping the low 8 bits
  of each code point (a Latin-1 style single-byte encoding).

A hex literal made only of ``0`` digits (``0x00``, ``0x0000``) decodes to the
empty byte sequence, not to zero bytes. The published test vectors encode the
empty message that way, so the quirk is kept here and nowhere else.
"""

from __future__ import annotations


HEX_PREFIX = "0x"

_HEX_CHARS = frozenset("0123456789abcdefABCDEF")


class HexLiteralError(ValueError):
    """Raised when a ``0x`` literal contains a non-hex character."""


def decode_hex_literal(digits: str) -> bytes:
    """Decode the hex digits that follow a ``0x`` prefix."""
    for pos, ch in enumerate(digits):
        if ch not in _HEX_CHARS:
            raise HexLiteralError(
                f"Invalid hex digit {ch!r} at position {pos} in literal "
                f"{HEX_PREFIX}{digits}"
            )

    if all(ch == "0" for ch in digits):
        return b""

    if len(digits) % 2:
        digits += "0"

    out = bytearray()
    for i in range(0, len(digits), 2):
        out.append(int(digits[i : i + 2], 16))
    return bytes(out)


def text_to_bytes(text: str) -> bytes:
    """Convert caller text into the byte sequence fed to the digest engine."""
    if text.startswith(HEX_PREFIX):
        return decode_hex_literal(text[len(HEX_PREFIX) :])
    return bytes(ord(ch) & 0xFF for ch in text)
