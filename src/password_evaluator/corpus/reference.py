"""Immutable reference corpus of known-common passwords."""
from __future__ import annotations

from collections.abc import Iterable, Iterator
from types import MappingProxyType
from typing import Mapping

MIN_PARTIAL_LENGTH = 5


class ReferenceCorpus:
    """Ordered, de-duplicated set of breached passwords.

    Entries keep the order in which they were first seen in the source, which
    is the order partial matching walks. The corpus has no mutators; the
    collections it exposes are read-only views, so one instance may be shared
    by any number of concurrent evaluations.
    """

    __slots__ = ("_entries", "_members", "_partial_entries", "_partial_positions", "_partial_lengths")

    def __init__(self, entries: Iterable[str] = (), *, min_partial_length: int = MIN_PARTIAL_LENGTH) -> None:
        ordered = tuple(dict.fromkeys(entries))
        self._entries = ordered
        self._members = frozenset(ordered)

        positions: dict[str, int] = {}
        for position, entry in enumerate(ordered):
            if len(entry) >= min_partial_length:
                positions[entry] = position
        self._partial_positions: Mapping[str, int] = MappingProxyType(positions)
        self._partial_entries = tuple(positions)
        self._partial_lengths = tuple(sorted({len(entry) for entry in positions}))

    def __contains__(self, password: object) -> bool:
        return password in self._members

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __bool__(self) -> bool:
        return bool(self._entries)

    def __repr__(self) -> str:
        return f"ReferenceCorpus(size={len(self._entries)}, partial={len(self._partial_entries)})"

    @property
    def entries(self) -> tuple[str, ...]:
        return self._entries

    @property
    def partial_entries(self) -> tuple[str, ...]:
        """Entries long enough to take part in substring matching, in corpus order."""
        return self._partial_entries

    @property
    def partial_positions(self) -> Mapping[str, int]:
        """Read-only map of partial-match entry to its corpus position."""
        return self._partial_positions

    @property
    def partial_lengths(self) -> tuple[int, ...]:
        """Distinct lengths of the partial-match entries, ascending."""
        return self._partial_lengths


EMPTY_CORPUS = ReferenceCorpus()
