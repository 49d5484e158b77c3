# kwfilter/trie/tree.py
"""
AC 自動機（Aho-Corasick）によるキーワードフィルタ。

手順は 3 段階:
1) `add()` でキーワードを 1 語ずつ Trie 木へ挿入する（共通の接頭辞は枝を共有）。
2) `compile()` で幅優先に失敗リンクを張り、検索可能な自動機にする。
3) `has_keywords()` / `replace()` / `finditer()` でテキストを 1 文字ずつ走査する。

Trie 木の性質:
- 根は文字を持たず、根以外の各ノードは 1 文字に対応する。
- 根からあるノードまでの経路上の文字を連結すると、そのノードに対応する文字列になる。
- 1 つのノードの子はすべて異なる文字を持つ。

compile 後は読み取り専用。検索系メソッドは呼び出しごとのローカル状態しか持たないため、
複数スレッドから同時に呼び出してよい。
"""

from __future__ import annotations

from collections import deque
from typing import FrozenSet, Iterable, Iterator, List, Optional, Set

from kwfilter.base import KeywordFilter, ReplaceStrategy, splice
from kwfilter.errors import InvalidArgumentError, InvalidStateError, check_not_none
from kwfilter.models import Match, PendingMatch
from kwfilter.trie.node import ROOT, NodeTable
from kwfilter.trie.pending import Held, on_break, on_terminal, promote


def _by_length_desc(keywords: Iterable[str]) -> tuple:
    # 1 ノードに複数のキーワードがある場合は長い順、同じ長さなら辞書順
    return tuple(sorted(set(keywords), key=lambda k: (-len(k), k)))


class TrieTree(KeywordFilter):
    """
    AC 自動機で複数キーワードを同時に照合するフィルタ。

    使い方:
        tree = TrieTree()
        tree.add_all(["心事", "心事重", "心事重重"])
        tree.add_skip_chars(["*", " "])
        tree.compile()
        tree.replace("毛人凤正心*事重重地", lambda kw: "*")  # -> "毛人凤正*地"
    """

    def __init__(self) -> None:
        self._nodes = NodeTable()
        self._keywords: Set[str] = set()
        self._skip_chars: Set[str] = set()
        self._compiled = False

    # --- 構築フェーズ ---

    def add(self, keyword: str) -> None:
        """キーワードを 1 語 Trie 木へ挿入する。"""
        if keyword is None or not keyword.strip():
            raise InvalidArgumentError("keyword must not be empty")
        self._check_building("cannot add keyword after compile()")
        last = self._nodes.extend(keyword)
        self._nodes.keywords[last].add(keyword)
        self._keywords.add(keyword)

    def add_all(self, keywords: Iterable[str]) -> None:
        if keywords is None:
            raise InvalidArgumentError("keywords must not be None")
        for keyword in keywords:
            self.add(keyword)

    def add_skip_char(self, ch: str) -> None:
        """マッチング時に無視する文字を登録する。"""
        self._check_building("cannot add skip char after compile()")
        if not isinstance(ch, str) or len(ch) != 1:
            raise InvalidArgumentError(f"skip char must be a single character: {ch!r}")
        self._skip_chars.add(ch)

    def add_skip_chars(self, chars: Optional[Iterable[str]]) -> None:
        """跳過文字をまとめて登録する。None は何もしない。"""
        self._check_building("cannot add skip char after compile()")
        if chars is None:
            return
        for ch in chars:
            self.add_skip_char(ch)

    def compile(self) -> None:
        """失敗リンクを張り、検索可能な状態へ移行する。2 回目以降は何もしない。"""
        if self._compiled:
            return
        self._build_fail_path()
        self._compiled = True

    def _build_fail_path(self) -> None:
        """
        失敗リンクの構築。ノード c（親 r、文字 x）について:
        - 根の子の失敗リンクはすべて根。
        - それ以外は r の失敗リンクから根に向かってたどり、x の子を持つ最初のノードの
          その子を c の失敗リンクにする。見つからなければ根。
        同時に outputs（このノードで認識されるキーワード）を失敗リンク先から引き継ぐ。
        """
        nodes = self._nodes
        queue = deque()
        for child in nodes.children[ROOT].values():
            nodes.fail[child] = ROOT
            nodes.outputs[child] = _by_length_desc(nodes.keywords[child])
            queue.append(child)

        while queue:
            r = queue.popleft()
            for ch, child in nodes.children[r].items():
                queue.append(child)
                f = nodes.fail[r]
                while f != ROOT and ch not in nodes.children[f]:
                    f = nodes.fail[f]
                target = nodes.children[f].get(ch, ROOT)
                nodes.fail[child] = target
                nodes.outputs[child] = _by_length_desc(
                    nodes.keywords[child].union(nodes.outputs[target])
                )

    # --- 検索フェーズ ---

    @property
    def compiled(self) -> bool:
        return self._compiled

    @property
    def keywords(self) -> FrozenSet[str]:
        return frozenset(self._keywords)

    @property
    def skip_chars(self) -> FrozenSet[str]:
        return frozenset(self._skip_chars)

    def __len__(self) -> int:
        return len(self._keywords)

    def __contains__(self, keyword: object) -> bool:
        return keyword in self._keywords

    def has_keywords(self, text: str) -> bool:
        check_not_none(text, "text")
        self._check_compiled()
        nodes = self._nodes
        skip = self._skip_chars
        node = ROOT
        for ch in text:
            if ch in skip:
                continue
            node = self._step(node, ch)
            if nodes.is_terminal(node):
                return True
        return False

    def count(self, text: str, keyword: str) -> int:
        """
        keyword の出現回数を数える。自動機は使わず、各開始位置から 2 本のポインタで照合する。

        - 文字が一致すれば両方のポインタを進める。
        - 一致しないが跳過文字ならテキスト側だけ進める（キーワード側は進めない）。
        - それ以外は、その開始位置をあきらめる。
        開始位置ごとに独立して照合するので、重なった出現もすべて数える。
        """
        check_not_none(text, "text")
        check_not_none(keyword, "keyword")
        if not keyword:
            raise InvalidArgumentError("keyword must not be empty")
        self._check_compiled()

        skip = self._skip_chars
        n, m = len(text), len(keyword)
        cnt = 0
        for start in range(n):
            if text[start] != keyword[0]:
                continue
            i, k = start, 0
            while i < n and k < m:
                if text[i] == keyword[k]:
                    i += 1
                    k += 1
                elif text[i] in skip:
                    i += 1
                else:
                    break
            if k == m:
                cnt += 1
        return cnt

    def finditer(self, text: str) -> Iterator[Match]:
        """
        置換対象になる一致を左から順に返す（互いに重ならない）。

        最も左から始まる一致を選び、同じ位置から始まる一致は長いキーワードを優先する
        （心事 < 心事重 < 心事重重）。途中に短いキーワードが現れても長い一致を待つので、
        {哈, 哈哈大笑} で "他哈哈大笑" は 哈哈大笑 の 1 件になる。
        """
        check_not_none(text, "text")
        self._check_compiled()
        return self._scan(text)

    def _scan(self, text: str) -> Iterator[Match]:
        nodes = self._nodes
        skip = self._skip_chars
        node = ROOT
        # 跳過文字以外の文字のテキスト上の位置
        visible: List[int] = []
        pending: Optional[PendingMatch] = None
        held: Held = ()
        # ここより左は確定済みの一致が消費している
        boundary = 0

        for i, ch in enumerate(text):
            if ch in skip:
                continue
            visible.append(i)
            node = self._step(node, ch)

            depth = nodes.depth[node]
            frontier = visible[-depth] if depth else None
            pending, flushed = on_break(pending, frontier)
            while flushed is not None:
                boundary = flushed.end
                yield flushed.to_match()
                pending, held = promote(held, boundary)
                pending, flushed = on_break(pending, frontier)

            for candidate in self._candidates(node, visible, boundary, i + 1):
                pending, hold = on_terminal(pending, candidate)
                if hold is not None:
                    held += (hold,)

        while pending is not None:
            yield pending.to_match()
            pending, held = promote(held, pending.end)

    def find_all(self, text: str) -> List[Match]:
        return list(self.finditer(text))

    def replace(self, text: str, strategy: ReplaceStrategy) -> str:
        check_not_none(text, "text")
        check_not_none(strategy, "strategy")
        # 一致の外側（跳過文字を含む）はそのまま、一致区間は strategy の結果に置き換える
        return splice(text, self.finditer(text), strategy)

    # --- 内部処理 ---

    def _step(self, node: int, ch: str) -> int:
        """ch で遷移する。子が無ければ失敗リンクをたどり、根でも無ければ根に留まる。"""
        children = self._nodes.children
        fail = self._nodes.fail
        while node != ROOT and ch not in children[node]:
            node = fail[node]
        return children[node].get(ch, ROOT)

    def _candidates(self, node: int, visible: List[int], boundary: int, end: int) -> Iterator[PendingMatch]:
        """node で終わる一致のうち、確定済みの一致と重ならないものを長い順に返す。"""
        for keyword in self._nodes.outputs[node]:
            start = visible[-len(keyword)]
            if start >= boundary:
                yield PendingMatch(keyword, start, end)

    def _check_building(self, message: str) -> None:
        if self._compiled:
            raise InvalidStateError(message)

    def _check_compiled(self) -> None:
        if not self._compiled:
            raise InvalidStateError("TrieTree is not compiled; call compile() first")
