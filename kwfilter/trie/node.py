# kwfilter/trie/node.py
"""
Trie 木のノード表（アリーナ方式）。

ノードはオブジェクトではなく整数インデックスで表し、各属性を並列リストで保持する。
- children[n]: 文字 → 子ノード番号。子は親だけが持つ（木構造）。
- fail[n]: 失敗リンク。所有関係のない参照なので番号で持つ。根（0）は -1（未定義）。
- depth[n]: 根からの文字数。
- keywords[n]: このノードで終わるキーワード。
- outputs[n]: compile 後に確定する「このノードで認識されるキーワード」。
  自ノードのキーワード + 失敗リンク先の outputs（長い順）。
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Set, Tuple

ROOT = 0
NO_FAIL = -1


class NodeTable:
    def __init__(self) -> None:
        self.children: List[Dict[str, int]] = []
        self.fail: List[int] = []
        self.depth: List[int] = []
        self.keywords: List[Set[str]] = []
        self.outputs: List[Tuple[str, ...]] = []
        self.new_node(0)

    def new_node(self, depth: int) -> int:
        self.children.append({})
        self.fail.append(NO_FAIL)
        self.depth.append(depth)
        self.keywords.append(set())
        self.outputs.append(())
        return len(self.children) - 1

    def get(self, node: int, ch: str) -> Optional[int]:
        return self.children[node].get(ch)

    def touch(self, node: int, ch: str) -> int:
        """子ノードがあれば返し、無ければ作ってから返す。"""
        child = self.children[node].get(ch)
        if child is not None:
            return child
        child = self.new_node(self.depth[node] + 1)
        self.children[node][ch] = child
        return child

    def extend(self, chars: Iterable[str]) -> int:
        """根から chars をたどり（無い枝は作り）、最後のノード番号を返す。"""
        node = ROOT
        for ch in chars:
            node = self.touch(node, ch)
        return node

    def is_terminal(self, node: int) -> bool:
        return bool(self.outputs[node])
