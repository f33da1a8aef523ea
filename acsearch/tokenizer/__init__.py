"""
文本切分模块：
- 按匹配结果把原文切成 match / fragment 片段
- 片段按顺序拼接可还原原文
"""

from .fragmenter import Tokenizer
from .tokens import FragmentToken, MatchToken, Token

__all__ = ["Tokenizer", "Token", "MatchToken", "FragmentToken"]
