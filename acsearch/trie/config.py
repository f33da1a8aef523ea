from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class TrieConfig:
    case_insensitive: bool = False
    remove_overlaps: bool = False
    only_whole_words: bool = False

    @property
    def allow_overlaps(self) -> bool:
        return not self.remove_overlaps
