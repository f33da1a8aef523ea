#!/usr/bin/env python3
"""
关键词扫描命令行

    acsearch -k he -k she --text "ushers"
    acsearch --keywords-file words.txt --remove-overlaps --mode tokenize < input.txt

结果以 JSON 输出到 stdout，日志写 stderr。
"""

from __future__ import annotations

import argparse
import sys
from dataclasses import replace
from pathlib import Path
from typing import List, Optional

from loguru import logger

from acsearch.core.config import Settings
from acsearch.core.logging_setup import setup_logger
from acsearch.schemas.trie_schema import MatchSchema, ScanResultSchema, TokenSchema, TrieConfigSchema
from acsearch.trie.builder import TrieBuilder
from acsearch.trie.config import TrieConfig

MODES = ("all", "first", "exists", "tokenize")


def _parse_args(argv: Optional[List[str]]) -> argparse.Namespace:
    ap = argparse.ArgumentParser(prog="acsearch", description="Aho-Corasick keyword scan")
    ap.add_argument("-k", "--keyword", action="append", default=[], help="keyword (repeatable)")
    ap.add_argument("--keywords-file", type=Path, help="file with one keyword per line")
    ap.add_argument("--text", help="text to scan (default: read stdin)")
    ap.add_argument("--mode", choices=MODES, default="all")
    # unset flags fall back to the TRIE_* settings
    ap.add_argument("--case-insensitive", action=argparse.BooleanOptionalAction, default=None)
    ap.add_argument("--remove-overlaps", action=argparse.BooleanOptionalAction, default=None)
    ap.add_argument("--whole-words", action=argparse.BooleanOptionalAction, default=None)
    args = ap.parse_args(argv)
    if not args.keyword and args.keywords_file is None:
        ap.error("at least one --keyword or --keywords-file is required")
    return args


def _trie_config(args: argparse.Namespace, settings: Settings) -> TrieConfig:
    config = settings.trie_config()
    overrides = {
        "case_insensitive": args.case_insensitive,
        "remove_overlaps": args.remove_overlaps,
        "only_whole_words": args.whole_words,
    }
    return replace(config, **{k: v for k, v in overrides.items() if v is not None})


def _load_keywords(args: argparse.Namespace) -> List[str]:
    keywords = list(args.keyword)
    if args.keywords_file is not None:
        lines = args.keywords_file.read_text(encoding="utf-8").splitlines()
        keywords.extend(line.strip() for line in lines)
    return keywords


def main(argv: Optional[List[str]] = None, settings: Optional[Settings] = None) -> int:
    settings = settings or Settings()
    setup_logger(settings)
    args = _parse_args(argv)

    trie = TrieBuilder(_trie_config(args, settings)).add_keywords(_load_keywords(args)).build()

    text = args.text if args.text is not None else sys.stdin.read()
    logger.info(f"扫描文本: mode={args.mode}, text_length={len(text)}, keywords={trie.keyword_count}")

    result = ScanResultSchema(
        config=TrieConfigSchema.from_config(trie.config),
        keyword_count=trie.keyword_count,
    )
    exit_code = 0
    if args.mode == "all":
        result.matches = [MatchSchema.from_match(m) for m in trie.parse_text(text)]
    elif args.mode == "first":
        first = trie.first_match(text)
        result.found = first is not None
        result.matches = [MatchSchema.from_match(first)] if first is not None else []
        exit_code = 0 if first is not None else 1
    elif args.mode == "exists":
        result.found = trie.contains_match(text)
        exit_code = 0 if result.found else 1
    else:
        tokens = trie.tokenize(text)
        result.tokens = [TokenSchema.from_token(t) for t in tokens]
        result.matches = [MatchSchema.from_match(t.match) for t in tokens if t.is_match]

    logger.info(f"扫描完成: match_count={len(result.matches)}")
    print(result.model_dump_json(by_alias=True, exclude_none=True))
    return exit_code


if __name__ == "__main__":
    sys.exit(main())
