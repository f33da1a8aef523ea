from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional, Sequence

from acsearch.candidate.flush import EmitCandidateFlushHandler
from acsearch.candidate.holders import (
    EmitCandidateHolder,
    NonOverlappingEmitCandidateHolder,
    OverlappingEmitCandidateHolder,
    remove_overlaps,
)
from acsearch.handler.handlers import CollectingEmitHandler, EmitHandler, FirstMatchHandler
from acsearch.tokenizer.fragmenter import Tokenizer
from acsearch.tokenizer.tokens import Token
from acsearch.trie.config import TrieConfig
from acsearch.trie.emit import Match
from acsearch.trie.state import ROOT, StateGraph, fold_symbol

if TYPE_CHECKING:
    from acsearch.trie.builder import TrieBuilder


def is_whole_word(text: Sequence[str], start: int, end: int) -> bool:
    return (start == 0 or text[start - 1].isspace()) and (
        end == len(text) - 1 or text[end + 1].isspace()
    )


class Trie:
    """Read-only keyword automaton.

    Built through ``Trie.builder()``. A Trie holds no per-scan state, so one
    instance may be queried from many threads at once.
    """

    def __init__(self, config: TrieConfig, graph: StateGraph, keyword_count: int) -> None:
        self._config = config
        self._graph = graph
        self._keyword_count = keyword_count

    @staticmethod
    def builder() -> "TrieBuilder":
        from acsearch.trie.builder import TrieBuilder

        return TrieBuilder()

    @property
    def config(self) -> TrieConfig:
        return self._config

    @property
    def keyword_count(self) -> int:
        return self._keyword_count

    @property
    def state_count(self) -> int:
        return self._graph.state_count

    def parse_text(self, text: Sequence[str], handler: Optional[EmitHandler] = None) -> List[Match]:
        """
        Scan ``text`` once and return the accepted matches in ascending start order.

        With a custom ``handler`` the matches are pushed into it instead and
        the returned list is empty; the scan ends early once the handler stops
        wanting more.
        """
        if handler is not None:
            self._scan(text, handler)
            return []
        collector = CollectingEmitHandler()
        self._scan(text, collector)
        return collector.matches

    def first_match(self, text: Sequence[str]) -> Optional[Match]:
        handler = FirstMatchHandler()
        self._scan(text, handler)
        return handler.first_match

    def contains_match(self, text: Sequence[str]) -> bool:
        return self.first_match(text) is not None

    def tokenize(self, text: str) -> List[Token]:
        matches = self.parse_text(text)
        if self._config.allow_overlaps:
            # fragments must partition the text
            matches = remove_overlaps(matches)
        return Tokenizer(matches, text).tokenize()

    def _new_holder(self) -> EmitCandidateHolder:
        if self._config.allow_overlaps:
            return OverlappingEmitCandidateHolder()
        return NonOverlappingEmitCandidateHolder(self._graph.longest_keyword)

    def _scan(self, text: Sequence[str], handler: EmitHandler) -> None:
        holder = self._new_holder()
        flush_handler = EmitCandidateFlushHandler(handler, holder)
        graph = self._graph
        case_insensitive = self._config.case_insensitive
        whole_words = self._config.only_whole_words

        state = ROOT
        for position in range(len(text)):
            if flush_handler.stop():
                return
            ch = text[position]
            if case_insensitive:
                ch = fold_symbol(ch)
            state = graph.next_state(state, ch)

            for keyword in graph.emits(state):
                start = position - len(keyword) + 1
                if whole_words and not is_whole_word(text, start, position):
                    continue
                holder.add(Match(start, position, keyword))
            flush_handler.flush_settled(position)

        flush_handler.flush()
