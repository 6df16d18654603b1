"""SHA-1 / SHA-224 / SHA-256 digests built on `compress_rounds`.

This module provides:

- `sha1sum(text)`, `sha224sum(text)`, `sha256sum(text)`: lowercase hex
  digests of caller text (see `byte_source` for the ``0x`` convention).
- `digest_bytes(data, algorithm)`: hex digest of raw bytes.
- CLI usage: `python shasum_cli.py [-a sha1] "message"` prints the hex digest.
"""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from typing import List, Sequence, Tuple

from algorithms import AlgorithmParams, get_algorithm
from byte_source import text_to_bytes
from compress import compress_rounds, update_hash_state
from preprocess import expand_message_schedule, pad_message, split_into_blocks
from words import word_to_hex


def sha_before(
    data: bytes, params: AlgorithmParams
) -> Tuple[Tuple[int, ...], List[List[int]]]:
    """Prepare everything needed before the compression loop.

    This performs:
    - Initialization of the hash state from the algorithm's H0.
    - Padding of the message.
    - Splitting into 512-bit blocks of sixteen words.
    - Expanding each block into its message schedule.

    With this, a custom compression pipeline can be run, e.g.:

        state0, schedules = sha_before(data, SHA256)
        state = state0
        for ws in schedules:
            state = update_hash_state(state, compress_rounds(state, ws, SHA256))
        digest = sha_after(state, SHA256)
    """
    state = tuple(params.initial_state)

    padded = pad_message(data)
    blocks = split_into_blocks(padded, len(data) * 8)

    schedules = [
        expand_message_schedule(block, params.rounds, params.schedule_word)
        for block in blocks
    ]
    return state, schedules


def format_digest(state: Sequence[int], output_words: int) -> str:
    """Concatenate the first `output_words` state words as hex."""
    return "".join(word_to_hex(word) for word in state[:output_words])


def sha_after(state: Sequence[int], params: AlgorithmParams) -> str:
    """Finalize the hex digest from the state left after the last block."""
    return format_digest(state, params.output_words)


def digest_bytes(data: bytes, algorithm="sha256") -> str:
    """Compute the hex digest of raw `data`."""
    params = get_algorithm(algorithm)
    state, schedules = sha_before(data, params)

    for ws in schedules:
        working = compress_rounds(state, ws, params)
        state = update_hash_state(state, working)

    return sha_after(state, params)


@dataclass(frozen=True)
class BlockTrace:
    """Round-level record of one block.

    `words` are the block's sixteen input words, `rounds[i]` is the working
    state after round `i`, and `hash_state` is the chaining value after the
    block was added back.
    """

    words: Tuple[int, ...]
    rounds: List[Tuple[int, ...]]
    hash_state: Tuple[int, ...]


def digest_bytes_with_state_tracking(
    data: bytes, algorithm="sha256"
) -> Tuple[str, List[BlockTrace]]:
    """Compute a digest while tracking the working state after every round.

    Returns:
        (digest_hex, block_traces), one `BlockTrace` per 512-bit block
    """
    params = get_algorithm(algorithm)
    state, schedules = sha_before(data, params)
    traces: List[BlockTrace] = []

    for ws in schedules:
        working, rounds = compress_rounds(state, ws, params, track_state=True)
        state = update_hash_state(state, working)
        traces.append(BlockTrace(tuple(ws[:16]), rounds, state))

    return sha_after(state, params), traces


def shasum(text: str, algorithm="sha256") -> str:
    """Hex digest of caller text under the given algorithm."""
    return digest_bytes(text_to_bytes(text), algorithm)


def sha1sum(text: str) -> str:
    """40-character SHA-1 hex digest of `text`."""
    return shasum(text, "sha1")


def sha224sum(text: str) -> str:
    """56-character SHA-224 hex digest of `text`."""
    return shasum(text, "sha224")


def sha256sum(text: str) -> str:
    """64-character SHA-256 hex digest of `text`."""
    return shasum(text, "sha256")


def _print_block_states(traces: List[BlockTrace]) -> None:
    """Write the hash state after each block to stderr."""
    for block_idx, block in enumerate(traces):
        sys.stderr.write(
            f"block {block_idx}: {' '.join(word_to_hex(w) for w in block.hash_state)}\n"
        )


def main(argv: list[str] | None = None) -> int:
    """CLI entry point.

    Usage:
        python shasum_cli.py "message"
        python shasum_cli.py -a sha1 "0x195a"
        python shasum_cli.py -f path/to/file

    Without `-f`, the argument is converted with `text_to_bytes` and hashed.
    With `-f`, the file's raw bytes are hashed. The resulting hex digest is
    printed to stdout.
    """
    parser = argparse.ArgumentParser(
        description="Compute SHA-1, SHA-224 or SHA-256 hex digests"
    )
    parser.add_argument(
        "-a",
        "--algorithm",
        type=str,
        choices=["sha1", "sha224", "sha256"],
        default="sha256",
        help="Hash algorithm (default: sha256)",
    )
    parser.add_argument(
        "--trace",
        action="store_true",
        help="Also write the hash state after each block to stderr",
    )
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("text", nargs="?", help="Text to hash (0x... for hex)")
    source.add_argument("-f", "--file", type=str, help="Hash the raw bytes of a file")
    args = parser.parse_args(argv)

    params = get_algorithm(args.algorithm)

    if args.file is not None:
        try:
            with open(args.file, "rb") as f:
                data = f.read()
        except OSError as e:
            sys.stderr.write(f"Error reading file '{args.file}': {e}\n")
            return 1
    else:
        try:
            data = text_to_bytes(args.text)
        except ValueError as e:
            sys.stderr.write(f"Error: {e}\n")
            return 1

    if args.trace:
        digest_hex, traces = digest_bytes_with_state_tracking(data, params)
        _print_block_states(traces)
    else:
        digest_hex = digest_bytes(data, params)

    print(digest_hex)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
