"""Most-recent-first log of dispatcher results."""

from __future__ import annotations

from typing import Iterator, List, Optional

from .results import AlgorithmResult


class ResultHistory:
    """
    Ordered result log backing the editor's result board.

    New results go to the front. With ``limit`` set, the oldest entries are
    dropped once the log is full.
    """

    def __init__(self, limit: Optional[int] = None):
        if limit is not None and limit <= 0:
            raise ValueError("limit must be positive.")
        self.limit = limit
        self._entries: List[AlgorithmResult] = []

    def add(self, result: AlgorithmResult) -> None:
        self._entries.insert(0, result)
        if self.limit is not None:
            del self._entries[self.limit:]

    @property
    def latest(self) -> Optional[AlgorithmResult]:
        return self._entries[0] if self._entries else None

    def clear(self) -> None:
        self._entries.clear()

    def __iter__(self) -> Iterator[AlgorithmResult]:
        return iter(list(self._entries))

    def __len__(self) -> int:
        return len(self._entries)

    def __getitem__(self, index: int) -> AlgorithmResult:
        return self._entries[index]
