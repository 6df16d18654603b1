"""Message preprocessing: padding, block partitioning and schedule expansion.

The work before the compression loop is split into three steps:

1. `pad_message` appends the single ``0x80`` terminator byte.
2. `split_into_blocks` cuts the padded bytes into 512-bit blocks of sixteen
   big-endian words, zero-filling the tail and writing the 64-bit bit length
   of the *original* message into words 14 and 15 of the final block only.
3. `expand_message_schedule` stretches each block into the per-round schedule
   using the algorithm's recurrence (`sha1_schedule_word` or
   `sha2_schedule_word`).
"""

from __future__ import annotations

from typing import Callable, List, Sequence

from words import MASK32, rotl, rotr, shr


WORDS_PER_BLOCK = 16
BYTES_PER_BLOCK = 64


def small_sigma0(x: int) -> int:
    """SHA-2 function σ0 used in the message schedule."""
    return (rotr(x, 7) ^ rotr(x, 18) ^ shr(x, 3)) & MASK32


def small_sigma1(x: int) -> int:
    """SHA-2 function σ1 used in the message schedule."""
    return (rotr(x, 17) ^ rotr(x, 19) ^ shr(x, 10)) & MASK32


def sha1_schedule_word(w: Sequence[int], i: int) -> int:
    """SHA-1 recurrence: W[i] = rotl(W[i-3] ^ W[i-8] ^ W[i-14] ^ W[i-16], 1)."""
    return rotl(w[i - 3] ^ w[i - 8] ^ w[i - 14] ^ w[i - 16], 1)


def sha2_schedule_word(w: Sequence[int], i: int) -> int:
    """SHA-2 recurrence: W[i] = σ1(W[i-2]) + W[i-7] + σ0(W[i-15]) + W[i-16]."""
    return (
        small_sigma1(w[i - 2]) + w[i - 7] + small_sigma0(w[i - 15]) + w[i - 16]
    ) & MASK32


def pad_message(message: bytes) -> bytes:
    """Append the ``0x80`` terminator byte.

    Zero fill and the length words are added by `split_into_blocks`, so the
    terminator is written exactly once however many blocks result.
    """
    return bytes(message) + b"\x80"


def block_count(padded_length: int) -> int:
    """Number of 512-bit blocks needed for `padded_length` bytes.

    The padded bytes occupy ``padded_length / 4`` words, two more words hold
    the bit length, and the total is rounded up to a multiple of 16 words.
    """
    return (padded_length + 8 + BYTES_PER_BLOCK - 1) // BYTES_PER_BLOCK


def split_into_blocks(padded: bytes, length_bits: int) -> List[List[int]]:
    """Split a padded message into blocks of sixteen 32-bit words.

    Parameters
    ----------
    padded : bytes
        Output of `pad_message`.
    length_bits : int
        Bit length of the message *before* the terminator was appended.

    Returns
    -------
    list[list[int]]
        At least one block. Bytes past the end of `padded` read as zero.
    """
    n = block_count(len(padded))
    blocks: List[List[int]] = []

    for i in range(n):
        last = i == n - 1
        block: List[int] = []
        for j in range(WORDS_PER_BLOCK):
            if last and j == 14:
                block.append((length_bits >> 32) & MASK32)
            elif last and j == 15:
                block.append(length_bits & MASK32)
            else:
                offset = i * BYTES_PER_BLOCK + j * 4
                chunk = padded[offset : offset + 4]
                word = int.from_bytes(chunk.ljust(4, b"\x00"), byteorder="big")
                block.append(word)
        blocks.append(block)

    return blocks


def expand_message_schedule(
    block: Sequence[int],
    rounds: int,
    schedule_word: Callable[[Sequence[int], int], int],
) -> List[int]:
    """Expand a 16-word block into a `rounds`-word message schedule."""
    if len(block) != WORDS_PER_BLOCK:
        raise ValueError(f"Expected {WORDS_PER_BLOCK}-word block, got {len(block)}")

    w = [word & MASK32 for word in block]
    for i in range(WORDS_PER_BLOCK, rounds):
        w.append(schedule_word(w, i))
    return w
