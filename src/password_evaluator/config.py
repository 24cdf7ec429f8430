"""Runtime settings with environment overrides."""
from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

from password_evaluator.corpus.loader import DEFAULT_COLUMN, DEFAULT_DELIMITER
from password_evaluator.corpus.matcher import MatchStrategy, normalize_strategy

DEFAULT_CORPUS_PATH = Path("data") / "1millionPasswords.csv"
DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 3000

ENV_CORPUS = "PASSWORD_EVALUATOR_CORPUS"
ENV_COLUMN = "PASSWORD_EVALUATOR_COLUMN"
ENV_DELIMITER = "PASSWORD_EVALUATOR_DELIMITER"
ENV_HOST = "PASSWORD_EVALUATOR_HOST"
ENV_PORT = "PORT"
ENV_MATCH_STRATEGY = "PASSWORD_EVALUATOR_MATCH_STRATEGY"


@dataclass(frozen=True)
class Settings:
    corpus_path: Path = DEFAULT_CORPUS_PATH
    corpus_column: str = DEFAULT_COLUMN
    corpus_delimiter: str = DEFAULT_DELIMITER
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    match_strategy: MatchStrategy = "index"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Settings:
        """Build settings from ``environ`` (``os.environ`` by default).

        Raises :exc:`ValueError` for a non-numeric port, a port outside
        1-65535, a delimiter that is not one character, or an unknown match
        strategy.
        """
        env = os.environ if environ is None else environ

        port_raw = env.get(ENV_PORT)
        port = DEFAULT_PORT
        if port_raw:
            try:
                port = int(port_raw)
            except ValueError as exc:
                raise ValueError(f"{ENV_PORT} must be an integer, got {port_raw!r}") from exc
            if not 0 < port < 65536:
                raise ValueError(f"{ENV_PORT} must be between 1 and 65535, got {port}")

        delimiter = env.get(ENV_DELIMITER) or DEFAULT_DELIMITER
        if len(delimiter) != 1:
            raise ValueError(f"{ENV_DELIMITER} must be a single character, got {delimiter!r}")

        return cls(
            corpus_path=Path(env.get(ENV_CORPUS) or DEFAULT_CORPUS_PATH),
            corpus_column=env.get(ENV_COLUMN) or DEFAULT_COLUMN,
            corpus_delimiter=delimiter,
            host=env.get(ENV_HOST) or DEFAULT_HOST,
            port=port,
            match_strategy=normalize_strategy(env.get(ENV_MATCH_STRATEGY) or "index"),
        )
