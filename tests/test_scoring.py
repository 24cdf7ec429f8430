"""Tests for entropy scoring, strength labels and crack-time estimates."""
from __future__ import annotations

import math

import pytest

from password_evaluator.scoring import (
    ATTEMPTS_PER_SECOND,
    classify_strength,
    entropy_bits,
    estimate_crack_time,
    estimate_strength,
    keyspace_size,
    password_length,
)


def _entropy_for_seconds(seconds: float) -> float:
    return math.log2(seconds * ATTEMPTS_PER_SECOND)


@pytest.mark.parametrize("empty", ["", None])
def test_empty_password_scores_zero(empty: str | None) -> None:
    estimate = estimate_strength(empty)
    assert estimate.length == 0
    assert estimate.keyspace == 0
    assert estimate.entropy == 0
    assert estimate.strength == "Weak"
    assert estimate.crack_time == "Instant"


@pytest.mark.parametrize(
    ("password", "expected"),
    [
        ("abc", 26),
        ("ABC", 26),
        ("123", 10),
        ("!?", 32),
        (" ", 32),
        ("aB", 52),
        ("a1", 36),
        ("aB1", 62),
        ("a!", 58),
        ("Aa1!", 94),
        ("Tr0ub4dor&3", 94),
    ],
)
def test_keyspace_sums_character_classes(password: str, expected: int) -> None:
    assert keyspace_size(password) == expected


def test_every_listed_symbol_counts_as_symbol() -> None:
    for symbol in "`!@#$%^&*()_+-=[]{};':\"\\|,.<>/?~ ":
        assert keyspace_size(symbol) == 32, symbol


def test_unrecognised_characters_have_empty_keyspace() -> None:
    assert keyspace_size("éüñ") == 0
    assert keyspace_size("٣") == 0  # non-ASCII digit
    assert entropy_bits(password_length("éüñ"), keyspace_size("éüñ")) == 0.0


def test_length_counts_utf16_code_units() -> None:
    assert password_length("abc") == 3
    assert password_length("é") == 1
    assert password_length("😀") == 2
    assert password_length("a😀b") == 4


def test_entropy_formula() -> None:
    assert entropy_bits(8, 26) == pytest.approx(8 * math.log2(26))
    assert entropy_bits(10, 0) == 0.0
    assert entropy_bits(0, 94) == 0.0


def test_password_entropy_example() -> None:
    estimate = estimate_strength("password")
    assert estimate.length == 8
    assert estimate.keyspace == 26
    assert estimate.entropy == pytest.approx(37.6035, abs=1e-4)
    assert estimate.strength == "Weak"


@pytest.mark.parametrize(
    ("entropy", "label"),
    [
        (0.0, "Weak"),
        (59.999, "Weak"),
        (60.0, "Strong"),
        (79.999, "Strong"),
        (80.0, "Very Strong"),
        (250.0, "Very Strong"),
    ],
)
def test_strength_boundaries(entropy: float, label: str) -> None:
    assert classify_strength(entropy) == label


def test_crack_time_instant_below_one_second() -> None:
    assert estimate_crack_time(_entropy_for_seconds(0.999)) == "Instant"
    assert estimate_crack_time(0.0) == "Instant"


def test_crack_time_seconds_bucket() -> None:
    assert estimate_crack_time(_entropy_for_seconds(1.001)) == "1.00 seconds"
    assert estimate_crack_time(_entropy_for_seconds(42.5)) == "42.50 seconds"


@pytest.mark.parametrize(
    ("seconds", "expected"),
    [
        (90, "1.50 minutes"),
        (2 * 3600, "2.00 hours"),
        (3 * 86400, "3.00 days"),
    ],
)
def test_crack_time_sub_year_buckets(seconds: float, expected: str) -> None:
    assert estimate_crack_time(_entropy_for_seconds(seconds)) == expected


def test_crack_time_years_are_grouped() -> None:
    year = 365 * 86400
    assert estimate_crack_time(_entropy_for_seconds(1000 * year)) == "1,000 years"
    assert estimate_crack_time(_entropy_for_seconds(3775.25 * year)) == "3,775.25 years"
    assert estimate_crack_time(_entropy_for_seconds(2.5 * year)) == "2.5 years"


def test_crack_time_unbounded_sentinel() -> None:
    assert estimate_crack_time(_entropy_for_seconds(2e6 * 365 * 86400)) == "millions of years"
    assert estimate_crack_time(200.0) == "millions of years"


def test_crack_time_handles_entropy_beyond_float_range() -> None:
    assert estimate_crack_time(5000.0) == "millions of years"
    estimate = estimate_strength("Aa1!" * 500)
    assert estimate.crack_time == "millions of years"
    assert estimate.strength == "Very Strong"
