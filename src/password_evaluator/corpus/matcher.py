"""Exact and partial matching of passwords against a reference corpus."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from password_evaluator.corpus.reference import ReferenceCorpus

MatchKind = Literal["exact", "partial", "none"]
MatchStrategy = Literal["index", "scan"]

MATCH_STRATEGIES: tuple[MatchStrategy, ...] = ("index", "scan")


@dataclass(frozen=True)
class MatchResult:
    kind: MatchKind
    word: str | None = None

    @property
    def is_exact(self) -> bool:
        return self.kind == "exact"

    @property
    def is_partial(self) -> bool:
        return self.kind == "partial"


EXACT_MATCH = MatchResult("exact")
NO_MATCH = MatchResult("none")


def normalize_strategy(strategy: str) -> MatchStrategy:
    value = strategy.lower()
    if value not in MATCH_STRATEGIES:
        raise ValueError(f"Unknown match strategy {strategy!r}; expected one of {', '.join(MATCH_STRATEGIES)}")
    return value  # type: ignore[return-value]


def scan_partial_match(password: str, corpus: ReferenceCorpus) -> str | None:
    """Return the first corpus entry contained in the lowercased password.

    Walks every eligible entry in corpus order and stops at the first hit.
    """
    lowered = password.lower()
    for entry in corpus.partial_entries:
        if entry in lowered:
            return entry
    return None


def index_partial_match(password: str, corpus: ReferenceCorpus) -> str | None:
    """Same result as :func:`scan_partial_match`, probing the corpus index.

    Every substring of the lowercased password whose length matches some
    eligible entry is looked up; the hit with the lowest corpus position wins.
    """
    positions = corpus.partial_positions
    if not positions:
        return None

    lowered = password.lower()
    text_len = len(lowered)
    best: int | None = None
    best_entry: str | None = None
    for length in corpus.partial_lengths:
        if length > text_len:
            break
        for start in range(text_len - length + 1):
            candidate = lowered[start : start + length]
            position = positions.get(candidate)
            if position is not None and (best is None or position < best):
                best = position
                best_entry = candidate
    return best_entry


def match_password(password: str, corpus: ReferenceCorpus, *, strategy: MatchStrategy = "index") -> MatchResult:
    """Classify ``password`` as an exact, partial or non-match of ``corpus``.

    The partial search only runs when there is no exact match.
    """
    if password in corpus:
        return EXACT_MATCH

    if strategy == "scan":
        word = scan_partial_match(password, corpus)
    else:
        word = index_partial_match(password, corpus)

    if word is None:
        return NO_MATCH
    return MatchResult("partial", word)
