from __future__ import annotations

from typing import Iterable, List

from acsearch.tokenizer.tokens import FragmentToken, MatchToken, Token
from acsearch.trie.emit import Match


class Tokenizer:
    """
    Splits a text into match tokens and the gap tokens around them.

    - matches must not overlap; they are walked in ascending start order
    - match fragments are sliced from the original text, so casing survives
      case-insensitive matching
    - joining every fragment gives back the original text
    """

    def __init__(self, matches: Iterable[Match], text: str) -> None:
        self._matches = sorted(matches, key=lambda m: m.start)
        self._text = text

    def tokenize(self) -> List[Token]:
        tokens: List[Token] = []
        last = 0
        for match in self._matches:
            if match.start < last:
                raise ValueError(f"match {match} overlaps a previous match")
            if match.start > last:
                tokens.append(FragmentToken(self._text[last : match.start], last))
            tokens.append(MatchToken(self._text[match.start : match.end + 1], match))
            last = match.end + 1
        if last < len(self._text):
            tokens.append(FragmentToken(self._text[last:], last))
        return tokens
