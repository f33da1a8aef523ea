# 读取 .env 配置
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

from acsearch.trie.config import TrieConfig


class Settings(BaseSettings):
    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FILE: Optional[str] = None
    DEBUG: bool = False

    # CLI defaults
    TRIE_CASE_INSENSITIVE: bool = False
    TRIE_REMOVE_OVERLAPS: bool = False
    TRIE_ONLY_WHOLE_WORDS: bool = False

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"  # 忽略多余的环境变量
    )

    def trie_config(self) -> TrieConfig:
        return TrieConfig(
            case_insensitive=self.TRIE_CASE_INSENSITIVE,
            remove_overlaps=self.TRIE_REMOVE_OVERLAPS,
            only_whole_words=self.TRIE_ONLY_WHOLE_WORDS,
        )


settings = Settings()
