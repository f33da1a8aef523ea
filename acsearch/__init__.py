"""
多模式关键词匹配（Aho-Corasick）：
- 一次构建，只读共享
- 支持忽略大小写、去除重叠、整词匹配
- 支持全部命中 / 首个命中 / 是否命中 / 原文切分
"""

from acsearch.trie.builder import TrieBuilder
from acsearch.trie.config import TrieConfig
from acsearch.trie.emit import Match
from acsearch.trie.trie import Trie
from acsearch.tokenizer.tokens import FragmentToken, MatchToken, Token

__all__ = [
    "Trie",
    "TrieBuilder",
    "TrieConfig",
    "Match",
    "Token",
    "MatchToken",
    "FragmentToken",
]
