"""Public corpus API re-exported for external users.

The objects listed in ``__all__`` form the supported surface for loading a
reference corpus and matching passwords against it.
"""
from __future__ import annotations

from password_evaluator.corpus.loader import DEFAULT_COLUMN, DEFAULT_DELIMITER, load_corpus, load_corpus_from_lines
from password_evaluator.corpus.matcher import (
    EXACT_MATCH,
    MATCH_STRATEGIES,
    NO_MATCH,
    MatchKind,
    MatchResult,
    MatchStrategy,
    index_partial_match,
    match_password,
    normalize_strategy,
    scan_partial_match,
)
from password_evaluator.corpus.reference import EMPTY_CORPUS, MIN_PARTIAL_LENGTH, ReferenceCorpus

__all__ = [
    "DEFAULT_COLUMN",
    "DEFAULT_DELIMITER",
    "EMPTY_CORPUS",
    "EXACT_MATCH",
    "MATCH_STRATEGIES",
    "MIN_PARTIAL_LENGTH",
    "MatchKind",
    "MatchResult",
    "MatchStrategy",
    "NO_MATCH",
    "ReferenceCorpus",
    "index_partial_match",
    "load_corpus",
    "load_corpus_from_lines",
    "match_password",
    "normalize_strategy",
    "scan_partial_match",
]
