# kwfilter/regex_filter.py
"""
正規表現の合成によるキーワードフィルタ。

キーワードを長い順に `|` で連結した 1 本のパターンへ変換し、照合は `re` に任せる。
跳過文字がある場合は文字と文字の間に `[跳過文字]*` を挟む（例: 心情 → 心[\\* ]*情）。

注意: キーワード数が多い、あるいはテキストが長い場合は `TrieTree` を使うこと。
"""

from __future__ import annotations

import re
from typing import FrozenSet, Iterable, Iterator, List, Optional, Pattern, Set

from kwfilter.base import KeywordFilter, ReplaceStrategy, splice
from kwfilter.errors import InvalidArgumentError, InvalidStateError, check_not_none
from kwfilter.models import Match


class RegexKeywordFilter(KeywordFilter):
    """`re` で照合する KeywordFilter 実装。TrieTree と同じ構築手順・同じ契約を持つ。"""

    def __init__(self) -> None:
        self._keywords: Set[str] = set()
        self._skip_chars: Set[str] = set()
        self._pattern: Optional[Pattern[str]] = None
        self._compiled = False

    def add(self, keyword: str) -> None:
        if keyword is None or not keyword.strip():
            raise InvalidArgumentError("keyword must not be empty")
        if self._compiled:
            raise InvalidStateError("cannot add keyword after compile()")
        self._keywords.add(keyword)

    def add_all(self, keywords: Iterable[str]) -> None:
        if keywords is None:
            raise InvalidArgumentError("keywords must not be None")
        for keyword in keywords:
            self.add(keyword)

    def add_skip_char(self, ch: str) -> None:
        if self._compiled:
            raise InvalidStateError("cannot add skip char after compile()")
        if not isinstance(ch, str) or len(ch) != 1:
            raise InvalidArgumentError(f"skip char must be a single character: {ch!r}")
        self._skip_chars.add(ch)

    def add_skip_chars(self, chars: Optional[Iterable[str]]) -> None:
        if self._compiled:
            raise InvalidStateError("cannot add skip char after compile()")
        if chars is None:
            return
        for ch in chars:
            self.add_skip_char(ch)

    def compile(self) -> None:
        if self._compiled:
            return
        # 長いキーワードを先に並べ、同じ位置では最長一致させる
        ordered = sorted(self._keywords, key=lambda k: (-len(k), k))
        self._pattern = re.compile("|".join(self._to_regex(k) for k in ordered)) if ordered else None
        self._compiled = True

    @property
    def compiled(self) -> bool:
        return self._compiled

    @property
    def keywords(self) -> FrozenSet[str]:
        return frozenset(self._keywords)

    @property
    def skip_chars(self) -> FrozenSet[str]:
        return frozenset(self._skip_chars)

    @property
    def pattern(self) -> Optional[str]:
        return self._pattern.pattern if self._pattern is not None else None

    def __len__(self) -> int:
        return len(self._keywords)

    def has_keywords(self, text: str) -> bool:
        check_not_none(text, "text")
        self._check_compiled()
        if self._pattern is None:
            return False
        return self._pattern.search(text) is not None

    def count(self, text: str, keyword: str) -> int:
        """keyword の出現回数を数える。重なり合う出現もそれぞれ数える（"aaa" 中の "aa" は 2）。"""
        check_not_none(text, "text")
        check_not_none(keyword, "keyword")
        if not keyword:
            raise InvalidArgumentError("keyword must not be empty")
        self._check_compiled()
        # 先読みは文字を消費しないので、開始位置ごとに 1 回試す
        pattern = re.compile("(?=" + self._to_regex(keyword) + ")")
        return sum(1 for _ in pattern.finditer(text))

    def finditer(self, text: str) -> Iterator[Match]:
        check_not_none(text, "text")
        self._check_compiled()
        if self._pattern is None:
            return iter(())
        return (
            Match(self._strip_skip(m.group(0)), m.start(), m.end())
            for m in self._pattern.finditer(text)
        )

    def find_all(self, text: str) -> List[Match]:
        return list(self.finditer(text))

    def replace(self, text: str, strategy: ReplaceStrategy) -> str:
        check_not_none(text, "text")
        check_not_none(strategy, "strategy")
        return splice(text, self.finditer(text), strategy)

    # --- 内部処理 ---

    def _skip_class(self) -> str:
        return "[" + "".join(re.escape(c) for c in sorted(self._skip_chars)) + "]*"

    def _to_regex(self, keyword: str) -> str:
        if not self._skip_chars:
            return re.escape(keyword)
        skip = self._skip_class()
        # 末尾には付けない（一致区間の後ろの跳過文字は出力に残す）
        return skip.join(re.escape(c) for c in keyword)

    def _strip_skip(self, matched: str) -> str:
        # 一致文字列から跳過文字を除き、登録されたキーワードの表記に戻す
        if matched in self._keywords:
            return matched
        return "".join(c for c in matched if c not in self._skip_chars)

    def _check_compiled(self) -> None:
        if not self._compiled:
            raise InvalidStateError("RegexKeywordFilter is not compiled; call compile() first")
