from __future__ import annotations

import os
import sys

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from password_kdf import AlgorithmUnavailable, HasherConfig, InvalidParameters, create_hasher


def test_defaults():
    config = HasherConfig()
    assert config.iterations == 10_000
    assert config.key_size == 256
    assert config.key_length == 32
    assert config.salt_size == 32
    assert config.algorithm == "sha1"


@pytest.mark.parametrize(
    "kwargs",
    [
        {"iterations": 0},
        {"iterations": -1},
        {"key_size": 0},
        {"key_size": 100},
        {"salt_size": 0},
        {"iterations": 1.5},
        {"iterations": True},
        {"key_size": "256"},
        {"iterations": 2**40},
        {"iterations": 2**31},
        {"key_size": 8 * 2**40},
        {"key_size": 8 * 2**31},
    ],
)
def test_invalid_parameters(kwargs):
    with pytest.raises(InvalidParameters):
        HasherConfig(**kwargs)


@pytest.mark.parametrize(
    "label, expected",
    [
        ("sha1", "sha1"),
        ("SHA256", "sha256"),
        ("PBKDF2WithHmacSHA1", "sha1"),
        ("pbkdf2-hmac-sha512", "sha512"),
        ("hmac_sha256", "sha256"),
        ("sha-256", "sha256"),
    ],
)
def test_algorithm_labels_are_normalised(label, expected):
    assert HasherConfig(algorithm=label).algorithm == expected


@pytest.mark.parametrize("label", ["nosuchdigest", "pbkdf2"])
def test_unknown_algorithm(label):
    with pytest.raises(AlgorithmUnavailable):
        HasherConfig(algorithm=label)


def test_blank_algorithm_is_invalid():
    with pytest.raises(InvalidParameters):
        HasherConfig(algorithm="  ")


def test_config_is_frozen():
    config = HasherConfig()
    with pytest.raises(AttributeError):
        config.iterations = 1


def test_from_mapping_converts_strings():
    config = HasherConfig.from_mapping({"ITERATIONS": "2000", "KEY_SIZE": "512", "UNUSED": "x"})
    assert config.iterations == 2000
    assert config.key_size == 512
    assert config.salt_size == 32


def test_from_mapping_rejects_bad_numbers():
    with pytest.raises(InvalidParameters):
        HasherConfig.from_mapping({"SALT_SIZE": "thirty-two"})


def test_create_hasher_merges_overrides():
    hasher = create_hasher({"ITERATIONS": 500, "ALGORITHM": "sha512"})
    assert hasher.config == HasherConfig(iterations=500, algorithm="sha512")


def test_largest_accepted_values():
    config = HasherConfig(iterations=2**31 - 1, key_size=8 * (2**31 - 1))
    assert config.iterations == 2**31 - 1
    assert config.key_length == 2**31 - 1
