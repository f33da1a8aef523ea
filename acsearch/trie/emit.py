from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Match:
    """A keyword occurrence over the closed interval [start, end]."""

    start: int
    end: int  # inclusive
    keyword: str

    def __post_init__(self) -> None:
        if self.end - self.start + 1 != len(self.keyword):
            raise ValueError(
                f"interval [{self.start}, {self.end}] does not fit keyword {self.keyword!r}"
            )

    @property
    def size(self) -> int:
        return self.end - self.start + 1

    def overlaps_with(self, other: Match) -> bool:
        return self.start <= other.end and self.end >= other.start

    def __str__(self) -> str:
        return f"{self.start}:{self.end}={self.keyword}"
