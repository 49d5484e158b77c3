"""AC 自動機パッケージ。TrieTree を公開する。"""

from .tree import TrieTree

__all__ = ["TrieTree"]
