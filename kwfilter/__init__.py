"""kwfilter パッケージエントリーポイント。

キーワードの検出・計数・置換（跳過文字対応）を提供する。
"""

from .base import KeywordFilter, ReplaceStrategy
from .builder import KeywordFilterBuilder, build_filter
from .errors import InvalidArgumentError, InvalidStateError, KeywordFilterError
from .models import Match
from .regex_filter import RegexKeywordFilter
from .trie import TrieTree

__all__ = [
    "KeywordFilter",
    "ReplaceStrategy",
    "KeywordFilterBuilder",
    "build_filter",
    "KeywordFilterError",
    "InvalidArgumentError",
    "InvalidStateError",
    "Match",
    "RegexKeywordFilter",
    "TrieTree",
]
