from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from acsearch.tokenizer.tokens import Token
from acsearch.trie.config import TrieConfig
from acsearch.trie.emit import Match


class MatchSchema(BaseModel):
    start: int = Field(..., description="起始位置（含）")
    end: int = Field(..., description="结束位置（含）")
    keyword: str = Field(..., description="命中的关键词")

    @classmethod
    def from_match(cls, match: Match) -> "MatchSchema":
        return cls(start=match.start, end=match.end, keyword=match.keyword)


class TokenSchema(BaseModel):
    fragment: str = Field(..., description="原文片段")
    is_match: bool = Field(..., alias="isMatch", description="是否为命中片段")
    match: Optional[MatchSchema] = None

    model_config = ConfigDict(populate_by_name=True)

    @classmethod
    def from_token(cls, token: Token) -> "TokenSchema":
        match = MatchSchema.from_match(token.match) if token.is_match else None
        return cls(fragment=token.fragment, is_match=token.is_match, match=match)


class TrieConfigSchema(BaseModel):
    case_insensitive: bool = Field(False, alias="caseInsensitive")
    remove_overlaps: bool = Field(False, alias="removeOverlaps")
    only_whole_words: bool = Field(False, alias="onlyWholeWords")

    model_config = ConfigDict(populate_by_name=True)

    @classmethod
    def from_config(cls, config: TrieConfig) -> "TrieConfigSchema":
        return cls(
            case_insensitive=config.case_insensitive,
            remove_overlaps=config.remove_overlaps,
            only_whole_words=config.only_whole_words,
        )


class ScanResultSchema(BaseModel):
    config: TrieConfigSchema
    keyword_count: int = Field(..., alias="keywordCount")
    matches: list[MatchSchema] = Field(default_factory=list)
    tokens: Optional[list[TokenSchema]] = None
    found: Optional[bool] = None

    model_config = ConfigDict(populate_by_name=True)
