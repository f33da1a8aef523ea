from __future__ import annotations

from typing import Iterable

from acsearch.candidate.holders import EmitCandidateHolder
from acsearch.handler.handlers import EmitHandler
from acsearch.trie.emit import Match


class EmitCandidateFlushHandler:
    """Moves released candidates from a holder into an emit handler."""

    def __init__(self, handler: EmitHandler, holder: EmitCandidateHolder) -> None:
        self._handler = handler
        self._holder = holder
        self._stopped = False

    def stop(self) -> bool:
        return self._stopped or not self._handler.wants_more()

    def flush_settled(self, position: int) -> None:
        self._forward(self._holder.settle(position))

    def flush(self) -> None:
        self._forward(self._holder.drain())

    def _forward(self, matches: Iterable[Match]) -> None:
        for match in matches:
            if self._stopped:
                return
            if not self._handler.accept(match):
                self._stopped = True
