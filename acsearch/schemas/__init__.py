from .trie_schema import MatchSchema, ScanResultSchema, TokenSchema, TrieConfigSchema

__all__ = ["MatchSchema", "TokenSchema", "TrieConfigSchema", "ScanResultSchema"]
