"""SHA-1 and SHA-2 compression rounds.

One round updates the working state from a single message schedule word `w`
and its round constant `k`.

SHA-1, five words `(a, b, c, d, e)`, phase ``i // 20`` picks `f`::

    temp = rotl(a, 5) + f(b, c, d) + e + k + w
    (a, b, c, d, e) <- (temp, a, rotl(b, 30), c, d)

    f = ch, parity, maj, parity for the four 20-round phases

SHA-2 (SHA-224 / SHA-256), eight words `(a, b, c, d, e, f, g, h)`::

    S1    = (e >>> 6) ^ (e >>> 11) ^ (e >>> 25)
    temp1 = h + S1 + ch(e, f, g) + k + w
    S0    = (a >>> 2) ^ (a >>> 13) ^ (a >>> 22)
    temp2 = S0 + maj(a, b, c)
    (a, b, c, d, e, f, g, h) <- (temp1 + temp2, a, b, c, d + temp1, e, f, g)

All additions are performed modulo 2**32.
"""

from __future__ import annotations

from typing import List, Sequence, Tuple, Union

from words import MASK32, rotl, rotr


# SHA-1 round constants, one per 20-round phase (FIPS 180-4, 4.2.1).
SHA1_K: Tuple[int, ...] = (
    0x5A827999,
    0x6ED9EBA1,
    0x8F1BBCDC,
    0xCA62C1D6,
)

# SHA-224/256 round constants k[0..63] from FIPS 180-4, 4.2.2.
SHA2_K: Tuple[int, ...] = (
    0x428A2F98, 0x71374491, 0xB5C0FBCF, 0xE9B5DBA5,
    0x3956C25B, 0x59F111F1, 0x923F82A4, 0xAB1C5ED5,
    0xD807AA98, 0x12835B01, 0x243185BE, 0x550C7DC3,
    0x72BE5D74, 0x80DEB1FE, 0x9BDC06A7, 0xC19BF174,
    0xE49B69C1, 0xEFBE4786, 0x0FC19DC6, 0x240CA1CC,
    0x2DE92C6F, 0x4A7484AA, 0x5CB0A9DC, 0x76F988DA,
    0x983E5152, 0xA831C66D, 0xB00327C8, 0xBF597FC7,
    0xC6E00BF3, 0xD5A79147, 0x06CA6351, 0x14292967,
    0x27B70A85, 0x2E1B2138, 0x4D2C6DFC, 0x53380D13,
    0x650A7354, 0x766A0ABB, 0x81C2C92E, 0x92722C85,
    0xA2BFE8A1, 0xA81A664B, 0xC24B8B70, 0xC76C51A3,
    0xD192E819, 0xD6990624, 0xF40E3585, 0x106AA070,
    0x19A4C116, 0x1E376C08, 0x2748774C, 0x34B0BCB5,
    0x391C0CB3, 0x4ED8AA4A, 0x5B9CCA4F, 0x682E6FF3,
    0x748F82EE, 0x78A5636F, 0x84C87814, 0x8CC70208,
    0x90BEFFFA, 0xA4506CEB, 0xBEF9A3F7, 0xC67178F2,
)


def ch(x: int, y: int, z: int) -> int:
    """Choice: bits of `y` where `x` is set, bits of `z` elsewhere."""
    return ((x & y) ^ (~x & z)) & MASK32


def parity(x: int, y: int, z: int) -> int:
    """Parity: bitwise XOR of the three words."""
    return (x ^ y ^ z) & MASK32


def maj(x: int, y: int, z: int) -> int:
    """Majority vote of each bit position."""
    return ((x & y) ^ (x & z) ^ (y & z)) & MASK32


def big_sigma0(x: int) -> int:
    """SHA-2 function Σ0 applied to `a`."""
    return rotr(x, 2) ^ rotr(x, 13) ^ rotr(x, 22)


def big_sigma1(x: int) -> int:
    """SHA-2 function Σ1 applied to `e`."""
    return rotr(x, 6) ^ rotr(x, 11) ^ rotr(x, 25)


_SHA1_PHASE_FUNCTIONS = (ch, parity, maj, parity)


def sha1_compression(
    state: Sequence[int], w: int, k: int, i: int
) -> Tuple[int, int, int, int, int]:
    """Perform SHA-1 round `i` on the 5-word working state."""
    a, b, c, d, e = state
    f = _SHA1_PHASE_FUNCTIONS[i // 20](b, c, d)
    temp = (rotl(a, 5) + f + e + k + w) & MASK32
    return temp, a, rotl(b, 30), c, d


def sha2_compression(
    state: Sequence[int], w: int, k: int, i: int
) -> Tuple[int, int, int, int, int, int, int, int]:
    """Perform one SHA-2 round on the 8-word working state.

    Parameters
    ----------
    state : sequence of int
        Working state words `(a, b, c, d, e, f, g, h)`.
    w : int
        Message schedule word `w[i]`.
    k : int
        Round constant `k[i]`.
    i : int
        Round index; SHA-2 rounds are uniform so it is unused.

    Returns
    -------
    tuple[int, ...]
        Updated working state, all words reduced modulo 2**32.
    """
    a, b, c, d, e, f, g, h = state

    temp1 = (h + big_sigma1(e) + ch(e, f, g) + k + w) & MASK32
    temp2 = (big_sigma0(a) + maj(a, b, c)) & MASK32

    return (
        (temp1 + temp2) & MASK32,
        a,
        b,
        c,
        (d + temp1) & MASK32,
        e,
        f,
        g,
    )


def compress_rounds(
    state: Sequence[int],
    ws: Sequence[int],
    params,
    track_state: bool = False,
) -> Union[Tuple[int, ...], Tuple[Tuple[int, ...], List[Tuple[int, ...]]]]:
    """Run every compression round of one block.

    Parameters
    ----------
    state : sequence of int
        Hash state carried in from the previous block.
    ws : sequence of int
        Message schedule for this block, one word per round.
    params : AlgorithmParams
        Selects constants, round count and round function.
    track_state : bool
        When true, also return the working state after every round.

    Returns
    -------
    tuple[int, ...] or (tuple[int, ...], list[tuple[int, ...]])
        Final working state, plus the per-round states when tracking.
    """
    if len(ws) != params.rounds:
        raise ValueError(
            f"{params.name} expects {params.rounds} message schedule words, got {len(ws)}"
        )
    if len(state) != len(params.initial_state):
        raise ValueError(
            f"{params.name} expects a {len(params.initial_state)}-word state, got {len(state)}"
        )

    working = tuple(word & MASK32 for word in state)
    trace: List[Tuple[int, ...]] = []
    for i in range(params.rounds):
        k = params.constants[i // params.phase_length]
        working = params.compression_step(working, ws[i], k, i)
        if track_state:
            trace.append(working)

    if track_state:
        return working, trace
    return working


def update_hash_state(
    prev_state: Sequence[int], working: Sequence[int]
) -> Tuple[int, ...]:
    """Add the working state back into the chaining value, word by word.

        H_{i+1}[j] = (H_i[j] + working[j]) mod 2^32
    """
    return tuple((h + x) & MASK32 for h, x in zip(prev_state, working))
