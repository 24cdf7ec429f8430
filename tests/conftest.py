import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parent.parent
SRC_DIR = PROJECT_ROOT / "src"
if SRC_DIR.exists():
    sys.path.insert(0, str(SRC_DIR))

from password_evaluator.corpus import ReferenceCorpus  # noqa: E402
from password_evaluator.evaluator import PasswordEvaluator  # noqa: E402

COMMON_PASSWORDS = ["123456", "password", "qwerty", "admin", "12345", "1234", "iloveyou", "sunshine"]


@pytest.fixture
def corpus() -> ReferenceCorpus:
    return ReferenceCorpus(COMMON_PASSWORDS)


@pytest.fixture
def evaluator(corpus: ReferenceCorpus) -> PasswordEvaluator:
    return PasswordEvaluator(corpus)


@pytest.fixture
def corpus_csv(tmp_path: Path) -> Path:
    path = tmp_path / "common.csv"
    lines = ["rank,password"] + [f"{idx},{word}" for idx, word in enumerate(COMMON_PASSWORDS, start=1)]
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path
