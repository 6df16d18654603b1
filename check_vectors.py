"""Check the digest engine against a YAML file of known-answer vectors.

Each entry names an `input` (``0x...`` for hex literals) and the expected hex
digest for any of ``sha1``, ``sha224`` and ``sha256``.

Usage:
    python check_vectors.py
    python check_vectors.py --vectors my_vectors.yaml
    python check_vectors.py -a sha1
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Dict, List, Optional, Tuple

import yaml

from algorithms import ALGORITHMS
from byte_source import HexLiteralError, text_to_bytes
from shasum_cli import shasum


DEFAULT_VECTORS = Path(__file__).with_name("vectors.yaml")


def load_vectors(path) -> List[Dict]:
    """Load and sanity-check the vector list from `path`."""
    with open(path, "r") as f:
        data = yaml.safe_load(f)

    if not isinstance(data, dict) or not isinstance(data.get("vectors"), list):
        raise ValueError(f"{path}: expected a mapping with a 'vectors' list")

    vectors = data["vectors"]
    for idx, entry in enumerate(vectors):
        if not isinstance(entry, dict) or "input" not in entry:
            raise ValueError(f"{path}: vector {idx} has no 'input'")
        if not isinstance(entry["input"], str):
            raise ValueError(f"{path}: vector {idx} input must be a string")
        try:
            text_to_bytes(entry["input"])
        except HexLiteralError as e:
            raise ValueError(f"{path}: vector {idx}: {e}") from e
    return vectors


def check_vectors(
    vectors: List[Dict], algorithms: Optional[List[str]] = None
) -> Tuple[int, int]:
    """Run every expected digest in `vectors` and print one line per check.

    Returns:
        (passed, failed)
    """
    names = algorithms or list(ALGORITHMS)
    passed = 0
    failed = 0

    for idx, entry in enumerate(vectors):
        text = entry["input"]
        label = entry.get("description") or repr(text[:32])
        for name in names:
            expected = entry.get(name)
            if expected is None:
                continue
            got = shasum(text, name)
            if got == str(expected).lower():
                passed += 1
                print(f"[OK]   {name:<6} #{idx} {label}")
            else:
                failed += 1
                print(f"[FAIL] {name:<6} #{idx} {label}")
                print(f"         expected {expected}")
                print(f"         got      {got}")

    return passed, failed


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Check SHA digests against known-answer vectors"
    )
    parser.add_argument(
        "--vectors",
        type=str,
        default=str(DEFAULT_VECTORS),
        help=f"Vector file (default: {DEFAULT_VECTORS.name} beside this script)",
    )
    parser.add_argument(
        "-a",
        "--algorithm",
        type=str,
        choices=sorted(ALGORITHMS),
        action="append",
        help="Only check this algorithm (may be repeated)",
    )
    args = parser.parse_args(argv)

    try:
        vectors = load_vectors(args.vectors)
    except (OSError, ValueError, yaml.YAMLError) as e:
        sys.stderr.write(f"Error loading vectors: {e}\n")
        return 1

    passed, failed = check_vectors(vectors, args.algorithm)
    print(f"\n[SUMMARY] {passed} passed, {failed} failed")
    return 0 if failed == 0 else 1


if __name__ == "__main__":
    raise SystemExit(main())
