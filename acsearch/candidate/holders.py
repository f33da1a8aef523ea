from __future__ import annotations

from abc import ABC, abstractmethod
from bisect import bisect_right
from typing import List, Sequence

from acsearch.trie.emit import Match


def remove_overlaps(candidates: Sequence[Match]) -> List[Match]:
    """
    Greedy interval selection (pure function, easy to unit test).

    Rules:
    - longer matches are considered first, ties go to the earlier start
    - a candidate is kept only if it overlaps nothing kept so far
    - the result is returned in ascending start order
    """
    ordered = sorted(candidates, key=lambda m: (-m.size, m.start))
    # accepted intervals are disjoint, so sorting by start also sorts by end
    accepted: List[Match] = []
    starts: List[int] = []
    for candidate in ordered:
        i = bisect_right(starts, candidate.end)
        if i > 0 and accepted[i - 1].overlaps_with(candidate):
            continue
        starts.insert(i, candidate.start)
        accepted.insert(i, candidate)
    return accepted


class EmitCandidateHolder(ABC):
    """Buffers raw candidates of one scan until they are safe to release."""

    @abstractmethod
    def add(self, candidate: Match) -> None:
        raise NotImplementedError

    @abstractmethod
    def settle(self, position: int) -> List[Match]:
        """Release what can no longer change once ``position`` has been scanned."""
        raise NotImplementedError

    @abstractmethod
    def drain(self) -> List[Match]:
        """Release everything still buffered (end of text)."""
        raise NotImplementedError


class OverlappingEmitCandidateHolder(EmitCandidateHolder):
    def __init__(self) -> None:
        self._pending: List[Match] = []

    def add(self, candidate: Match) -> None:
        self._pending.append(candidate)

    def settle(self, position: int) -> List[Match]:
        return self.drain()

    def drain(self) -> List[Match]:
        released, self._pending = self._pending, []
        return released


class NonOverlappingEmitCandidateHolder(EmitCandidateHolder):
    """
    Keeps candidates until no later candidate can overlap them.

    A candidate found after ``position`` ends past it and is at most
    ``longest_keyword`` long, so it starts at ``position - longest_keyword + 2``
    or later. Greedy selection only ever compares overlapping intervals, so
    resolving a closed buffer on its own gives the same answer as resolving
    the whole scan at once.
    """

    def __init__(self, longest_keyword: int) -> None:
        self._longest_keyword = longest_keyword
        self._pending: List[Match] = []
        self._max_end = -1

    def add(self, candidate: Match) -> None:
        self._pending.append(candidate)
        if candidate.end > self._max_end:
            self._max_end = candidate.end

    def settle(self, position: int) -> List[Match]:
        if not self._pending:
            return []
        earliest_future_start = position - self._longest_keyword + 2
        if self._max_end >= earliest_future_start:
            return []
        return self.drain()

    def drain(self) -> List[Match]:
        if not self._pending:
            return []
        released = remove_overlaps(self._pending)
        self._pending = []
        self._max_end = -1
        return released
