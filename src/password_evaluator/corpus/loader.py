"""Bulk loading of the reference corpus from delimited files."""
from __future__ import annotations

import csv
import logging
from collections.abc import Iterable, Iterator
from pathlib import Path

from password_evaluator.corpus.reference import EMPTY_CORPUS, ReferenceCorpus

logger = logging.getLogger(__name__)

DEFAULT_COLUMN = "password"
DEFAULT_DELIMITER = ","


def _iter_column(reader: csv.DictReader, column: str, stats: dict[str, int]) -> Iterator[str]:
    while True:
        try:
            row = next(reader)
        except StopIteration:
            return
        except csv.Error as exc:
            stats["skipped"] += 1
            logger.debug("Skipping malformed row near line %d: %s", reader.line_num, exc)
            continue

        value = row.get(column)
        if not isinstance(value, str) or not value:
            stats["skipped"] += 1
            continue
        yield value


def load_corpus(
    path: str | Path,
    *,
    column: str = DEFAULT_COLUMN,
    delimiter: str = DEFAULT_DELIMITER,
    encoding: str = "utf-8-sig",
    max_rows: int | None = None,
) -> ReferenceCorpus:
    """Load a :class:`ReferenceCorpus` from a delimited file with a header row.

    Only ``column`` is read. Rows without a value for it, and rows the
    :mod:`csv` module cannot parse, are skipped. A missing or unreadable file
    yields an empty corpus rather than an error so the caller can still start.
    """
    source = Path(path)
    stats = {"skipped": 0}

    try:
        with source.open("r", encoding=encoding, errors="replace", newline="") as fh:
            reader = csv.DictReader(fh, delimiter=delimiter)
            values: list[str] = []
            for value in _iter_column(reader, column, stats):
                values.append(value)
                if max_rows is not None and len(values) >= max_rows:
                    break
            header = reader.fieldnames or []
    except FileNotFoundError:
        logger.warning("Corpus file %s not found; common-password checks are disabled", source)
        return EMPTY_CORPUS
    except OSError as exc:
        logger.warning("Could not read corpus file %s: %s", source, exc)
        return EMPTY_CORPUS

    if column not in header:
        logger.warning("Corpus file %s has no %r column (found: %s)", source, column, ", ".join(header) or "none")

    corpus = ReferenceCorpus(values)
    logger.info(
        "Loaded %d common passwords from %s (%d rows skipped)",
        len(corpus),
        source,
        stats["skipped"],
    )
    return corpus


def load_corpus_from_lines(lines: Iterable[str]) -> ReferenceCorpus:
    """Build a corpus from plain strings, ignoring blank entries."""
    return ReferenceCorpus(line.rstrip("\r\n") for line in lines if line.strip())
