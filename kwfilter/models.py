# kwfilter/models.py

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Match:
    """
    テキスト中で検出したキーワード 1 件を表すモデル。

    - start / end は元テキスト上のインデックス（end は含まない）。
    - 一致区間の内側にある跳過文字（skip char）も区間に含まれる。
      例: キーワード "心情"、テキスト "心*情" → Match("心情", 0, 3)
    """
    keyword: str
    start: int
    end: int

    @property
    def span(self) -> Tuple[int, int]:
        return self.start, self.end

    def text_in(self, text: str) -> str:
        """元テキストから一致区間をそのまま切り出して返す（跳過文字を含む）。"""
        return text[self.start:self.end]


@dataclass(frozen=True)
class PendingMatch:
    """
    置換走査中の「確定前」の一致。

    より長いキーワード（例: 心事 → 心事重 → 心事重重）に置き換わる可能性があるため、
    出力へ反映するのは走査がこの一致より先へ進んだことが確定してから。
    NoMatch 状態は None で表す。
    """
    keyword: str
    start: int
    end: int

    def to_match(self) -> Match:
        return Match(self.keyword, self.start, self.end)
