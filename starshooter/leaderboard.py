"""A bounded high-score table kept in descending score order."""

from __future__ import annotations

import bisect
import os
from typing import Iterator, List, Tuple, Union

Entry = Tuple[int, str]
PathLike = Union[str, "os.PathLike[str]"]


class LeaderBoard:
    """Scores sorted highest first; equal scores keep their insertion order."""

    def __init__(self, capacity: int = 8) -> None:
        self.capacity = capacity
        self._entries: List[Entry] = []

    def _add(self, score: int, name: str) -> None:
        index = bisect.bisect_right(self._entries, -score, key=lambda entry: -entry[0])
        self._entries.insert(index, (score, name))

    def insert(self, score: int, name: str) -> None:
        """Add an entry and drop the lowest one if the table is over capacity."""
        self._add(score, name)
        if len(self._entries) > self.capacity:
            self._entries.pop()

    def entries(self) -> List[Entry]:
        """Return a copy of the (score, name) entries, best first."""
        return list(self._entries)

    def load(self, path: PathLike) -> None:
        """Replace the entries with those read from ``path``.

        The file holds whitespace-separated ``score name`` pairs; reading stops
        at the first pair that does not parse. Raises OSError if the file
        cannot be opened, leaving the current entries untouched.
        """
        with open(path, encoding="utf-8") as handle:
            tokens = handle.read().split()
        self._entries.clear()
        for score_token, name in zip(tokens[0::2], tokens[1::2]):
            try:
                score = int(score_token)
            except ValueError:
                break
            self._add(score, name)

    def save(self, path: PathLike) -> None:
        """Write one ``score name`` line per entry to ``path``."""
        with open(path, "w", encoding="utf-8") as handle:
            for score, name in self._entries:
                handle.write(f"{score} {name}\n")

    def __iter__(self) -> Iterator[Entry]:
        return iter(list(self._entries))

    def __len__(self) -> int:
        return len(self._entries)