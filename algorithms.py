"""Algorithm parameter sets for SHA-1, SHA-224 and SHA-256.

Each variant is one immutable `AlgorithmParams` bundle. The pipeline in
`shasum_cli` is identical for all three and only reads from the bundle.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Sequence, Tuple

from compress import SHA1_K, SHA2_K, sha1_compression, sha2_compression
from preprocess import sha1_schedule_word, sha2_schedule_word
from words import MASK32


class InvalidParameterSet(ValueError):
    """Raised when an `AlgorithmParams` bundle is internally inconsistent."""


# Initial hash values, FIPS 180-4 section 5.3.
SHA1_H0: Tuple[int, ...] = (
    0x67452301,
    0xEFCDAB89,
    0x98BADCFE,
    0x10325476,
    0xC3D2E1F0,
)

# Second 32 bits of the fractional parts of the square roots of the 9th
# through 16th primes 23..53.
SHA224_H0: Tuple[int, ...] = (
    0xC1059ED8,
    0x367CD507,
    0x3070DD17,
    0xF70E5939,
    0xFFC00B31,
    0x68581511,
    0x64F98FA7,
    0xBEFA4FA4,
)

# First 32 bits of the fractional parts of the square roots of the first
# 8 primes 2..19.
SHA256_H0: Tuple[int, ...] = (
    0x6A09E667,
    0xBB67AE85,
    0x3C6EF372,
    0xA54FF53A,
    0x510E527F,
    0x9B05688C,
    0x1F83D9AB,
    0x5BE0CD19,
)


# (state words, rounds): SHA-1 and SHA-2 are never mixed.
_STATE_ROUND_SHAPES = ((5, 80), (8, 64))


@dataclass(frozen=True)
class AlgorithmParams:
    """Everything that differs between the supported hash variants.

    `phase_length` is the number of consecutive rounds sharing one entry of
    `constants`: 20 for SHA-1, 1 for SHA-2.
    """

    name: str
    initial_state: Tuple[int, ...]
    constants: Tuple[int, ...]
    rounds: int
    phase_length: int
    schedule_word: Callable[[Sequence[int], int], int]
    compression_step: Callable[..., Tuple[int, ...]]
    output_words: int

    def __post_init__(self) -> None:
        state_words = len(self.initial_state)
        if self.rounds < 16:
            raise InvalidParameterSet(
                f"{self.name}: round count must be at least 16, got {self.rounds}"
            )
        if self.phase_length < 1 or len(self.constants) * self.phase_length != self.rounds:
            raise InvalidParameterSet(
                f"{self.name}: {len(self.constants)} constants x phase length "
                f"{self.phase_length} does not cover {self.rounds} rounds"
            )
        if state_words not in (5, 8):
            raise InvalidParameterSet(
                f"{self.name}: hash state must have 5 or 8 words, got {state_words}"
            )
        if (state_words, self.rounds) not in _STATE_ROUND_SHAPES:
            raise InvalidParameterSet(
                f"{self.name}: a {state_words}-word state cannot run "
                f"{self.rounds} rounds"
            )
        if self.output_words not in (state_words, state_words - 1):
            raise InvalidParameterSet(
                f"{self.name}: output word count {self.output_words} does not "
                f"match a {state_words}-word state"
            )
        for label, words in (("initial state", self.initial_state), ("constant", self.constants)):
            for j, word in enumerate(words):
                if not isinstance(word, int) or word < 0 or word > MASK32:
                    raise InvalidParameterSet(
                        f"{self.name}: {label} word {j} is out of 32-bit range: {word!r}"
                    )

    @property
    def digest_size(self) -> int:
        """Digest length in bytes."""
        return self.output_words * 4


SHA1 = AlgorithmParams(
    name="sha1",
    initial_state=SHA1_H0,
    constants=SHA1_K,
    rounds=80,
    phase_length=20,
    schedule_word=sha1_schedule_word,
    compression_step=sha1_compression,
    output_words=5,
)

# SHA-224 is SHA-256 with different initial values and the last word dropped.
SHA224 = AlgorithmParams(
    name="sha224",
    initial_state=SHA224_H0,
    constants=SHA2_K,
    rounds=64,
    phase_length=1,
    schedule_word=sha2_schedule_word,
    compression_step=sha2_compression,
    output_words=7,
)

SHA256 = AlgorithmParams(
    name="sha256",
    initial_state=SHA256_H0,
    constants=SHA2_K,
    rounds=64,
    phase_length=1,
    schedule_word=sha2_schedule_word,
    compression_step=sha2_compression,
    output_words=8,
)

ALGORITHMS: Dict[str, AlgorithmParams] = {
    params.name: params for params in (SHA1, SHA224, SHA256)
}


def get_algorithm(name) -> AlgorithmParams:
    """Look up a parameter set by name (``sha256``, ``SHA-256``, ...).

    An `AlgorithmParams` instance is returned unchanged.
    """
    if isinstance(name, AlgorithmParams):
        return name
    key = str(name).lower().replace("-", "").replace("_", "")
    try:
        return ALGORITHMS[key]
    except KeyError:
        raise ValueError(
            f"Unknown algorithm {name!r}; expected one of {', '.join(ALGORITHMS)}"
        ) from None
