from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Union

from acsearch.trie.emit import Match


@dataclass(frozen=True)
class MatchToken:
    fragment: str
    match: Match

    is_match: ClassVar[bool] = True

    @property
    def start(self) -> int:
        return self.match.start


@dataclass(frozen=True)
class FragmentToken:
    """Uncovered text between matches."""

    fragment: str
    start: int

    is_match: ClassVar[bool] = False


Token = Union[MatchToken, FragmentToken]
