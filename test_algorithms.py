import dataclasses

import pytest

from algorithms import (
    ALGORITHMS,
    SHA1,
    SHA224,
    SHA256,
    SHA1_H0,
    SHA256_H0,
    InvalidParameterSet,
    get_algorithm,
)


def test_registry():
    assert ALGORITHMS == {"sha1": SHA1, "sha224": SHA224, "sha256": SHA256}


@pytest.mark.parametrize(
    "params,state_words,rounds,output_words,digest_size",
    [
        (SHA1, 5, 80, 5, 20),
        (SHA224, 8, 64, 7, 28),
        (SHA256, 8, 64, 8, 32),
    ],
)
def test_parameter_shapes(params, state_words, rounds, output_words, digest_size):
    assert len(params.initial_state) == state_words
    assert params.rounds == rounds
    assert len(params.constants) * params.phase_length == rounds
    assert params.output_words == output_words
    assert params.digest_size == digest_size


def test_sha224_shares_sha256_rounds():
    assert SHA224.constants is SHA256.constants
    assert SHA224.compression_step is SHA256.compression_step
    assert SHA224.initial_state != SHA256.initial_state


def test_params_are_frozen():
    with pytest.raises(dataclasses.FrozenInstanceError):
        SHA256.rounds = 80


@pytest.mark.parametrize(
    "changes",
    [
        {"rounds": 80},
        {"constants": SHA256.constants[:-1]},
        {"initial_state": (0,) * 6},
        {"output_words": 6},
        {"phase_length": 0},
        {"initial_state": (2**32,) + SHA256_H0[1:]},
        {"constants": (-1,) + SHA256.constants[1:]},
    ],
)
def test_inconsistent_sha256_bundle_fails_fast(changes):
    with pytest.raises(InvalidParameterSet):
        dataclasses.replace(SHA256, **changes)


def test_mixed_sha1_bundle_fails_fast():
    # An 8-word state with SHA-1's 5-word output.
    with pytest.raises(InvalidParameterSet):
        dataclasses.replace(SHA1, initial_state=SHA256_H0)
    with pytest.raises(InvalidParameterSet):
        dataclasses.replace(SHA1, rounds=64)


@pytest.mark.parametrize(
    "base,changes",
    [
        # 5-word SHA-1 state driven for 64 rounds.
        (SHA1, {"rounds": 64, "phase_length": 16}),
        # 8-word SHA-2 state driven by the 80-round SHA-1 loop.
        (SHA1, {"initial_state": SHA256_H0, "output_words": 8}),
        (SHA256, {"initial_state": SHA1_H0, "output_words": 5}),
        (SHA256, {"rounds": 80, "constants": SHA256.constants + SHA256.constants[:16]}),
    ],
)
def test_state_size_and_round_count_never_mixed(base, changes):
    """
    Every size check other than the state/round pairing passes for these
    bundles, so only that pairing can reject them.
    """
    with pytest.raises(InvalidParameterSet, match="cannot run"):
        dataclasses.replace(base, **changes)


def test_too_few_rounds():
    with pytest.raises(InvalidParameterSet):
        dataclasses.replace(SHA256, rounds=8, constants=SHA256.constants[:8])


@pytest.mark.parametrize(
    "name,expected",
    [
        ("sha1", SHA1),
        ("SHA-1", SHA1),
        ("sha_224", SHA224),
        ("SHA256", SHA256),
        (SHA256, SHA256),
    ],
)
def test_get_algorithm(name, expected):
    assert get_algorithm(name) is expected


def test_get_algorithm_unknown():
    with pytest.raises(ValueError, match="Unknown algorithm"):
        get_algorithm("md5")
