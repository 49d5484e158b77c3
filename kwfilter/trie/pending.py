# kwfilter/trie/pending.py
"""
置換走査の「確定前一致」を扱う小さな状態機械。

状態:
- NoMatch: None
- PendingMatch(keyword, start, end)
- held: 確定前一致より右にあり、重ならない候補（確定前一致が確定した後に改めて評価する）

遷移はすべて純粋関数で、文字列バッファの操作とは切り離してあるので単体でテストできる。

例: キーワード {心事, 心事重, 心事重重}、テキスト "心事重重地"
  事 → on_terminal(None, 心事[0:2])       → (心事[0:2], None)
  重 → on_terminal(心事, 心事重[0:3])     → (心事重[0:3], None)   長い方で上書き
  重 → on_terminal(心事重, 心事重重[0:4]) → (心事重重[0:4], None)
  地 → on_break(心事重重, None)           → (None, 心事重重[0:4]) 確定

例: キーワード {哈, 哈哈大笑}、テキスト "他哈哈大笑"
  2 文字目の 哈[2:3] は 哈[1:2] と重ならないが、経路がまだ位置 1 まで届いているので
  確定させずに held へ回す。笑 で 哈哈大笑[1:5] が 哈[1:2] を上書きし、held の 哈[2:3] は
  確定時に境界より左になるので捨てられる。
"""

from __future__ import annotations

from typing import Optional, Tuple

from kwfilter.models import PendingMatch

Transition = Tuple[Optional[PendingMatch], Optional[PendingMatch]]
Held = Tuple[PendingMatch, ...]


def on_terminal(pending: Optional[PendingMatch], candidate: PendingMatch) -> Transition:
    """終端ノードで候補を得たときの遷移。(新しい確定前一致, held へ回す候補) を返す。"""
    if pending is None:
        return candidate, None
    if candidate.start <= pending.start:
        # 同じ位置か、より左から始まる長い一致が優先
        return candidate, None
    if candidate.start < pending.end:
        # 確定前一致と重なる後発の一致は、どう決着しても使われない
        return pending, None
    return pending, candidate


def on_break(pending: Optional[PendingMatch], frontier: Optional[int]) -> Transition:
    """一致が伸びる可能性が途切れたかを判定する遷移。(新しい確定前一致, 確定した一致) を返す。

    frontier は現在の自動機の経路が始まるテキスト位置（根にいるなら None）。
    以後の一致はすべて frontier 以降から始まるため、frontier が確定前一致の開始位置より
    右にあれば、その一致がこれ以上長いものや左のものに置き換わることはない。
    """
    if pending is None:
        return None, None
    if frontier is None or frontier > pending.start:
        return None, pending
    return pending, None


def promote(held: Held, boundary: int) -> Tuple[Optional[PendingMatch], Held]:
    """確定で境界が進んだ後、held から次の確定前一致（最も左、同じ位置なら最長）を選ぶ。

    境界より左から始まる候補は捨てる。
    """
    alive = [m for m in held if m.start >= boundary]
    if not alive:
        return None, ()
    best = min(alive, key=lambda m: (m.start, -m.end))
    return best, tuple(m for m in alive if m is not best)
