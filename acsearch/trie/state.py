from __future__ import annotations

from dataclasses import dataclass
from functools import cached_property
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Tuple

from loguru import logger

# 状态机（goto / fail / output）
ROOT = 0


def fold_symbol(ch: str) -> str:
    """Lower-case a single symbol, keeping it when lowering changes its length."""
    lowered = ch.lower()
    return lowered if len(lowered) == 1 else ch


def normalize_keyword(keyword: str, case_insensitive: bool) -> str:
    if not case_insensitive:
        return keyword
    return "".join(fold_symbol(ch) for ch in keyword)


@dataclass(frozen=True)
class StateGraph:
    """Frozen Aho-Corasick automaton.

    States are indices into parallel tables; index 0 is the root and is its
    own failure target. Nothing here changes after construction, so one graph
    can serve any number of concurrent scans.
    """

    goto: Tuple[Mapping[str, int], ...]
    fail: Tuple[int, ...]
    output: Tuple[Tuple[str, ...], ...]
    depth: Tuple[int, ...]

    def __post_init__(self) -> None:
        size = len(self.goto)
        if size == 0:
            raise ValueError("state graph has no root state")
        if not (len(self.fail) == len(self.output) == len(self.depth) == size):
            raise ValueError("state graph tables have mismatched lengths")
        if self.fail[ROOT] != ROOT or self.depth[ROOT] != 0:
            raise ValueError("root state must be its own failure target at depth 0")
        for state in range(1, size):
            target = self.fail[state]
            if not 0 <= target < size:
                raise ValueError(f"state {state} has failure index {target} out of range")
            if self.depth[target] >= self.depth[state]:
                raise ValueError(f"state {state} fails to a state that is not shallower")
        for state in range(size):
            for ch, child in self.goto[state].items():
                if not 1 <= child < size:
                    raise ValueError(f"state {state} has transition {ch!r} to {child} out of range")
                if self.depth[child] != self.depth[state] + 1:
                    raise ValueError(f"state {state} has transition {ch!r} to a state at the wrong depth")
            for word in self.output[state]:
                if not word or len(word) > self.depth[state]:
                    raise ValueError(f"state {state} emits {word!r}, which does not end there")

    @property
    def state_count(self) -> int:
        return len(self.goto)

    @cached_property
    def longest_keyword(self) -> int:
        # every leaf ends a keyword, so the deepest state bounds keyword length
        return max(self.depth)

    def next_state(self, state: int, ch: str) -> int:
        """Take the transition on ``ch``, following failure links on mismatch."""
        goto = self.goto
        nxt = goto[state].get(ch)
        while nxt is None:
            if state == ROOT:
                return ROOT
            state = self.fail[state]
            nxt = goto[state].get(ch)
        return nxt

    def emits(self, state: int) -> Tuple[str, ...]:
        return self.output[state]


class AutomatonBuilder:
    """Mutable trie; ``build()`` computes failure links and freezes it."""

    def __init__(self, case_insensitive: bool = False) -> None:
        self._case_insensitive = case_insensitive
        self._next: List[Dict[str, int]] = [dict()]
        self._fail: List[int] = [ROOT]
        self._out: List[List[str]] = [[]]
        self._depth: List[int] = [0]
        self._keywords: set[str] = set()
        self._frozen = False

    @property
    def keyword_count(self) -> int:
        return len(self._keywords)

    def insert(self, keyword: Optional[str]) -> None:
        if self._frozen:
            raise RuntimeError("cannot insert keywords into a built automaton")
        if keyword is None or keyword == "":
            logger.debug("ignoring empty keyword")
            return
        if not isinstance(keyword, str):
            raise TypeError(f"keyword must be a str, got {type(keyword).__name__}")

        word = normalize_keyword(keyword, self._case_insensitive)
        state = ROOT
        for ch in word:
            nxt = self._next[state].get(ch)
            if nxt is None:
                nxt = len(self._next)
                self._next[state][ch] = nxt
                self._next.append(dict())
                self._fail.append(ROOT)
                self._out.append([])
                self._depth.append(self._depth[state] + 1)
            state = nxt
        if word not in self._out[state]:
            self._out[state].append(word)
        self._keywords.add(word)

    def build(self) -> StateGraph:
        if self._frozen:
            raise RuntimeError("automaton already built")

        # depth-1 states fail to the root
        queue: List[int] = []
        for nxt in self._next[ROOT].values():
            self._fail[nxt] = ROOT
            queue.append(nxt)

        head = 0
        while head < len(queue):
            r = queue[head]
            head += 1
            for ch, s in self._next[r].items():
                queue.append(s)
                f = self._fail[r]
                while f != ROOT and ch not in self._next[f]:
                    f = self._fail[f]
                self._fail[s] = self._next[f].get(ch, ROOT)
                inherited = self._out[self._fail[s]]
                if inherited:
                    own = self._out[s]
                    own.extend(word for word in inherited if word not in own)

        self._frozen = True
        graph = StateGraph(
            goto=tuple(MappingProxyType(dict(t)) for t in self._next),
            fail=tuple(self._fail),
            output=tuple(tuple(words) for words in self._out),
            depth=tuple(self._depth),
        )
        logger.debug(
            f"automaton built: keywords={self.keyword_count}, states={graph.state_count}"
        )
        return graph
