# kwfilter/builder.py
"""
キーワードフィルタの構築。

典型的な使い方:

    builder = KeywordFilterBuilder()
    builder.set_keywords(["心情", "哈哈"])     # キーワード
    builder.set_skip_chars(["*", " "])         # 跳過文字
    kf = builder.build()

    kf.count("老龙恼怒闹老农，老农恼怒闹老龙。", "老龙")         # -> 2
    kf.replace("买彩票中奖了，哈哈", lambda kw: "呵呵")          # -> "买彩票中奖了，呵呵"
    kf.has_keywords("今天天气不错，心*情也跟着好起来了")           # -> True
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Optional, Union

from kwfilter.base import KeywordFilter
from kwfilter.config import ENGINE_REGEX, ENGINE_TRIE, ENGINES
from kwfilter.config.filter import FilterConfig
from kwfilter.errors import InvalidArgumentError
from kwfilter.kws.keywords import load_keywords
from kwfilter.regex_filter import RegexKeywordFilter
from kwfilter.trie import TrieTree


class KeywordFilterBuilder:
    """キーワードと跳過文字を集め、compile 済みの KeywordFilter を作る。"""

    def __init__(self, engine: str = FilterConfig.ENGINE) -> None:
        if engine not in ENGINES:
            raise InvalidArgumentError(f"unknown engine: {engine!r} (choose from {', '.join(ENGINES)})")
        self.engine = engine
        self._keywords: List[str] = []
        self._skip_chars: Optional[List[str]] = None

    def set_keywords(self, keywords: Iterable[str]) -> "KeywordFilterBuilder":
        if keywords is None:
            raise InvalidArgumentError("keywords must not be None")
        keywords = list(keywords)
        if not keywords:
            raise InvalidArgumentError("keywords must not be empty")
        self._keywords = keywords
        return self

    def set_skip_chars(self, skip_chars: Optional[Iterable[str]]) -> "KeywordFilterBuilder":
        self._skip_chars = list(skip_chars) if skip_chars is not None else None
        return self

    def from_file(self, path: Union[str, Path]) -> "KeywordFilterBuilder":
        """キーワードファイル（kws.keywords の形式）から読み込む。"""
        return self.set_keywords(load_keywords(path))

    def build(self) -> KeywordFilter:
        if not self._keywords:
            raise InvalidArgumentError("keywords must be set before build()")
        kf = TrieTree() if self.engine == ENGINE_TRIE else RegexKeywordFilter()
        kf.add_all(self._keywords)
        kf.add_skip_chars(self._skip_chars)
        kf.compile()
        return kf


def build_filter(
    keywords: Iterable[str],
    skip_chars: Optional[Iterable[str]] = None,
    engine: str = FilterConfig.ENGINE,
) -> KeywordFilter:
    """KeywordFilterBuilder の省略形。"""
    return KeywordFilterBuilder(engine).set_keywords(keywords).set_skip_chars(skip_chars).build()


__all__ = ["KeywordFilterBuilder", "build_filter", "ENGINE_TRIE", "ENGINE_REGEX"]
