# kwfilter/base.py
"""
キーワードフィルタの共通インターフェース。

実装は 2 種類:
- `kwfilter.trie.TrieTree`: AC 自動機。キーワード数が多くても走査はテキスト長に比例。
- `kwfilter.regex_filter.RegexKeywordFilter`: 正規表現の合成。少数のキーワード向け。

どちらを使うかは構築時（`KeywordFilterBuilder`）に決め、実行中に切り替えることはない。
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable, Iterable, Iterator, List

from kwfilter.models import Match

# 一致したキーワードを受け取り、置換後の文字列を返す関数
ReplaceStrategy = Callable[[str], str]


class KeywordFilter(ABC):
    """キーワードの検出・計数・置換を提供するクラスの基底。"""

    @abstractmethod
    def has_keywords(self, text: str) -> bool:
        """テキストがキーワードを1つでも含むなら True を返す。"""

    @abstractmethod
    def count(self, text: str, keyword: str) -> int:
        """指定キーワードの出現回数を返す。"""

    @abstractmethod
    def finditer(self, text: str) -> Iterator[Match]:
        """置換対象になる一致（互いに重ならない）を左から順に返す。"""

    @abstractmethod
    def replace(self, text: str, strategy: ReplaceStrategy) -> str:
        """一致したキーワードを `strategy(keyword)` の結果に置き換えた文字列を返す。

        strategy を変えることで伏せ字・ハイライトなどを実現できる。
        """


def splice(text: str, matches: Iterable[Match], strategy: ReplaceStrategy) -> str:
    """重ならない一致（左から順）を strategy の結果で置き換え、残りはそのまま連結する。"""
    out: List[str] = []
    pos = 0
    for match in matches:
        out.append(text[pos:match.start])
        out.append(strategy(match.keyword))
        pos = match.end
    out.append(text[pos:])
    return "".join(out)
