"""Record the working state after every compression round of a message.

For one input, this script:
1. Converts the text with `text_to_bytes` (``0x...`` is a hex literal)
2. Computes the digest while tracking the working state at each round
3. Saves results to <output-dir>/<algorithm>-<id>.yaml

Usage:
    python trace_states.py abc
    python trace_states.py -a sha1 "0x195a"
    python trace_states.py "hello world" --output-dir /tmp/traces
"""

from __future__ import annotations

import argparse
import os
import sys
from typing import Dict, List

import yaml

from algorithms import get_algorithm
from byte_source import text_to_bytes
from shasum_cli import digest_bytes_with_state_tracking, sha256sum
from words import word_to_hex


def build_trace(text: str, algorithm="sha256") -> Dict:
    """Return a YAML-ready description of every round for `text`."""
    params = get_algorithm(algorithm)
    data = text_to_bytes(text)
    digest_hex, traces = digest_bytes_with_state_tracking(data, params)

    blocks: List[Dict] = []
    for block_idx, block in enumerate(traces):
        blocks.append({
            "block_index": block_idx,
            "words": [word_to_hex(w) for w in block.words],
            "rounds": [[word_to_hex(w) for w in r] for r in block.rounds],
            "hash_state": [word_to_hex(w) for w in block.hash_state],
        })

    return {
        "algorithm": params.name,
        "input": text,
        "message_hex": data.hex(),
        "digest_hex": digest_hex,
        "blocks": blocks,
    }


def trace_filename(text: str, algorithm="sha256") -> str:
    """File name for a trace; the input is identified by its own SHA-256."""
    params = get_algorithm(algorithm)
    return f"{params.name}-{sha256sum(text)[:16]}.yaml"


def write_trace(trace: Dict, output_dir: str = "data/trace") -> str:
    """Write a trace from `build_trace` and return the output path."""
    os.makedirs(output_dir, exist_ok=True)
    output_path = os.path.join(
        output_dir, trace_filename(trace["input"], trace["algorithm"])
    )

    with open(output_path, "w") as f:
        yaml.dump(trace, f, default_flow_style=False, sort_keys=False)

    return output_path


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Record the working state after every compression round"
    )
    parser.add_argument("text", type=str, help="Message text (0x... for hex)")
    parser.add_argument(
        "-a",
        "--algorithm",
        type=str,
        choices=["sha1", "sha224", "sha256"],
        default="sha256",
        help="Hash algorithm (default: sha256)",
    )
    parser.add_argument(
        "--output-dir",
        type=str,
        default="data/trace",
        help="Output directory (default: data/trace)",
    )
    args = parser.parse_args(argv)

    try:
        trace = build_trace(args.text, args.algorithm)
        output_path = write_trace(trace, args.output_dir)
    except (OSError, ValueError) as e:
        sys.stderr.write(f"Error: {e}\n")
        return 1

    print(f"Algorithm: {trace['algorithm']}")
    print(f"Blocks:    {len(trace['blocks'])}")
    print(f"Digest:    {trace['digest_hex']}")
    print(f"Done! Saved trace to {output_path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
