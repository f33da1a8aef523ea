from __future__ import annotations

from dataclasses import replace
from typing import Iterable, List, Optional

from acsearch.trie.config import TrieConfig
from acsearch.trie.state import AutomatonBuilder
from acsearch.trie.trie import Trie


class TrieBuilder:
    """
    Fluent builder for :class:`Trie`.

    Keywords are only normalized when ``build()`` runs, so flags and keywords
    may be given in any order.
    """

    def __init__(self, config: Optional[TrieConfig] = None) -> None:
        self._config = config or TrieConfig()
        self._keywords: List[Optional[str]] = []

    def case_insensitive(self) -> "TrieBuilder":
        self._config = replace(self._config, case_insensitive=True)
        return self

    def remove_overlaps(self) -> "TrieBuilder":
        self._config = replace(self._config, remove_overlaps=True)
        return self

    def only_whole_words(self) -> "TrieBuilder":
        self._config = replace(self._config, only_whole_words=True)
        return self

    def add_keyword(self, keyword: Optional[str]) -> "TrieBuilder":
        self._keywords.append(keyword)
        return self

    def add_keywords(self, keywords: Iterable[Optional[str]]) -> "TrieBuilder":
        self._keywords.extend(keywords)
        return self

    def build(self) -> Trie:
        automaton = AutomatonBuilder(case_insensitive=self._config.case_insensitive)
        for keyword in self._keywords:
            automaton.insert(keyword)
        graph = automaton.build()
        return Trie(self._config, graph, automaton.keyword_count)
