"""Entropy-based password scoring: keyspace, entropy, strength and crack time."""
from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import Literal

ATTEMPTS_PER_SECOND = 1e11

WEAK_THRESHOLD = 60.0
VERY_STRONG_THRESHOLD = 80.0

LOWERCASE_POOL = 26
UPPERCASE_POOL = 26
DIGIT_POOL = 10
SYMBOL_POOL = 32

StrengthLabel = Literal["Weak", "Strong", "Very Strong"]

_LOWERCASE_RE = re.compile(r"[a-z]")
_UPPERCASE_RE = re.compile(r"[A-Z]")
_DIGIT_RE = re.compile(r"[0-9]")
_SYMBOL_RE = re.compile(r"[ `!@#$%^&*()_+\-=\[\]{};':\"\\|,.<>/?~]")

_CHARACTER_CLASSES: tuple[tuple[re.Pattern[str], int], ...] = (
    (_LOWERCASE_RE, LOWERCASE_POOL),
    (_UPPERCASE_RE, UPPERCASE_POOL),
    (_DIGIT_RE, DIGIT_POOL),
    (_SYMBOL_RE, SYMBOL_POOL),
)

INSTANT = "Instant"
MILLIONS_OF_YEARS = "millions of years"

# Largest exponent for which 2.0 ** x is still a finite float.
_MAX_FLOAT_EXPONENT = 1023


@dataclass(frozen=True)
class StrengthEstimate:
    length: int
    keyspace: int
    entropy: float
    strength: StrengthLabel
    crack_time: str


def password_length(password: str | None) -> int:
    """Return the password length in UTF-16 code units.

    Characters outside the Basic Multilingual Plane count twice, the way
    browsers and JSON clients measure string length.
    """
    if not password:
        return 0
    return len(password.encode("utf-16-le", "surrogatepass")) // 2


def keyspace_size(password: str | None) -> int:
    """Return the attacker alphabet size implied by the character classes used."""
    if not password:
        return 0
    return sum(pool for pattern, pool in _CHARACTER_CLASSES if pattern.search(password))


def entropy_bits(length: int, keyspace: int) -> float:
    """Entropy in bits of a ``length``-symbol string over ``keyspace`` symbols."""
    if keyspace == 0:
        return 0.0
    return length * math.log2(keyspace)


def classify_strength(entropy: float) -> StrengthLabel:
    if entropy < WEAK_THRESHOLD:
        return "Weak"
    if entropy < VERY_STRONG_THRESHOLD:
        return "Strong"
    return "Very Strong"


def _format_years(years: float) -> str:
    text = f"{years:,.3f}".rstrip("0").rstrip(".")
    return f"{text} years"


def estimate_crack_time(entropy: float) -> str:
    """Return a human readable brute-force time at ``ATTEMPTS_PER_SECOND``."""
    if entropy > _MAX_FLOAT_EXPONENT:
        return MILLIONS_OF_YEARS

    seconds = 2.0**entropy / ATTEMPTS_PER_SECOND
    if seconds < 1:
        return INSTANT
    if seconds < 60:
        return f"{seconds:.2f} seconds"
    minutes = seconds / 60
    if minutes < 60:
        return f"{minutes:.2f} minutes"
    hours = minutes / 60
    if hours < 24:
        return f"{hours:.2f} hours"
    days = hours / 24
    if days < 365:
        return f"{days:.2f} days"
    years = days / 365
    if years < 1e6:
        return _format_years(years)
    return MILLIONS_OF_YEARS


def estimate_strength(password: str | None) -> StrengthEstimate:
    """Run the entropy branch of an evaluation, without corpus overrides."""
    length = password_length(password)
    keyspace = keyspace_size(password)
    entropy = entropy_bits(length, keyspace)
    return StrengthEstimate(
        length=length,
        keyspace=keyspace,
        entropy=entropy,
        strength=classify_strength(entropy),
        crack_time=estimate_crack_time(entropy),
    )
