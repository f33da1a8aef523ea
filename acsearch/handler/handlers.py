from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Optional

from acsearch.trie.emit import Match


class EmitHandler(ABC):
    """Consumer of accepted matches.

    ``accept`` returns whether the handler wants more matches; once it
    returns False the scan stops before reading the next symbol.
    """

    @abstractmethod
    def accept(self, match: Match) -> bool:
        raise NotImplementedError

    def wants_more(self) -> bool:
        return True


class CollectingEmitHandler(EmitHandler):
    def __init__(self) -> None:
        self._matches: List[Match] = []

    def accept(self, match: Match) -> bool:
        self._matches.append(match)
        return True

    @property
    def matches(self) -> List[Match]:
        return self._matches


class FirstMatchHandler(EmitHandler):
    def __init__(self) -> None:
        self._first: Optional[Match] = None

    def accept(self, match: Match) -> bool:
        if self._first is None:
            self._first = match
        return False

    def wants_more(self) -> bool:
        return self._first is None

    @property
    def first_match(self) -> Optional[Match]:
        return self._first
