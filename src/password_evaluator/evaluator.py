"""Password evaluation: entropy scoring combined with corpus matching."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from password_evaluator.corpus.matcher import MatchResult, MatchStrategy, match_password, normalize_strategy
from password_evaluator.corpus.reference import EMPTY_CORPUS, ReferenceCorpus
from password_evaluator.errors import InvalidInput
from password_evaluator.scoring import estimate_strength

MASKED_PASSWORD = "***"

COMMON_STRENGTH = "Very Weak (Common)"
PREDICTABLE_STRENGTH = "Weak (Predictable)"
BREACHED_CRACK_TIME = "Instant (breach-listed)"

RECOMMEND_REPLACE = (
    "This password appears in lists of breached passwords. Replace it with a stronger one immediately."
)
RECOMMEND_GOOD = "Good password!"


def _recommend_avoid(word: str) -> str:
    return f"Your password contains the common word '{word}', which makes it predictable."


@dataclass(frozen=True)
class EvaluationResult:
    length: int
    keyspace: int
    entropy: float
    strength: str
    is_common: bool
    contained_common_word: str | None
    estimated_crack_time: str
    recommendation: str

    @property
    def display_entropy(self) -> float:
        return round(self.entropy, 2)

    def to_dict(self) -> dict[str, Any]:
        """Return the response document; the password itself is always masked."""
        return {
            "password": MASKED_PASSWORD,
            "evaluation": {
                "length": self.length,
                "keyspace": self.keyspace,
                "entropy": self.display_entropy,
                "strength": self.strength,
                "isCommon": self.is_common,
                "containedCommonWord": self.contained_common_word,
            },
            "security_tips": {
                "estimatedCrackTime": self.estimated_crack_time,
                "recommendation": self.recommendation,
            },
        }


def validate_password_input(password: object) -> str:
    """Return ``password`` if it is a non-empty string, else raise :exc:`InvalidInput`."""
    if not isinstance(password, str) or not password:
        raise InvalidInput()
    return password


class PasswordEvaluator:
    """Evaluate passwords against a read-only :class:`ReferenceCorpus`.

    The evaluator keeps no per-request state; a single instance can serve
    concurrent callers.
    """

    def __init__(self, corpus: ReferenceCorpus = EMPTY_CORPUS, *, strategy: MatchStrategy | str = "index") -> None:
        self._corpus = corpus
        self._strategy = normalize_strategy(strategy)

    @property
    def corpus(self) -> ReferenceCorpus:
        return self._corpus

    @property
    def strategy(self) -> MatchStrategy:
        return self._strategy

    def match(self, password: str) -> MatchResult:
        return match_password(password, self._corpus, strategy=self._strategy)

    def evaluate(self, password: object) -> EvaluationResult:
        """Score ``password`` and apply the breached-corpus overrides."""
        checked = validate_password_input(password)
        estimate = estimate_strength(checked)
        match = self.match(checked)

        if match.is_exact:
            strength = COMMON_STRENGTH
            crack_time = BREACHED_CRACK_TIME
            recommendation = RECOMMEND_REPLACE
        elif match.is_partial:
            strength = PREDICTABLE_STRENGTH
            crack_time = estimate.crack_time
            recommendation = _recommend_avoid(match.word or "")
        else:
            strength = estimate.strength
            crack_time = estimate.crack_time
            recommendation = RECOMMEND_GOOD

        return EvaluationResult(
            length=estimate.length,
            keyspace=estimate.keyspace,
            entropy=estimate.entropy,
            strength=strength,
            is_common=match.is_exact,
            contained_common_word=match.word,
            estimated_crack_time=crack_time,
            recommendation=recommendation,
        )
