"""
kwfilter.kws.keywords

keywords.txt の柔軟なパーサを提供し、
- キーワード一覧（フィルタ構築用）
- キーワード→レベルのマッピング（呼び出し側で置換方法を変えたい場合用）
を取得する。

サポートするフォーマット:
1) レベル行形式（複数行対応）
   例:
     level1=[ ]
     level2=[心情, 哈哈,
             心事重重]
     level3=[老龙]
   → "level<数値>" をレベルとして解釈（int）。[] 内は改行・末尾カンマ可。

2) 1行1語形式
   例:
     心事
     心事重
   → 既定レベル（config.DEFAULT_LEVEL）を付与。'#' で始まる行はコメント。

備考:
- 半角/全角カンマ・読点で分割する。
- ファイルが無い場合は FileNotFoundError をそのまま送出する（既定語で代用しない）。
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Dict, List, Tuple, Union

from kwfilter.config import DEFAULT_LEVEL, KEYWORDS_ENCODING

_LEVEL_HEAD = re.compile(r"level\s*(\d+)\s*=\s*\[", re.IGNORECASE)
_SEPARATORS = re.compile(r"[,，、]")


def parse_keywords(text: str) -> Tuple[List[str], Dict[str, int]]:
    """キーワードファイルの本文を解析し、(keywords, level_map) を返す。

    - keywords: キーワード（重複排除・出現順を維持）
    - level_map: キーワード→レベル（同じ語が複数回出たら後勝ち）
    """
    i = 0
    n = len(text)
    any_level = False
    keywords: List[str] = []
    level_map: Dict[str, int] = {}

    # --- パターン1: levelN=[ ... ] ブロックを複数行対応で抽出 ---
    while i < n:
        m = _LEVEL_HEAD.search(text, i)
        if not m:
            break
        any_level = True
        level = int(m.group(1))
        j = m.end()
        end = text.find("]", j)
        if end == -1:
            # 閉じブラケットが無い → 以降を諦める
            break
        for raw in _SEPARATORS.split(text[j:end]):
            w = raw.strip()
            if not w:
                continue
            if w not in level_map:
                keywords.append(w)
            level_map[w] = level
        i = end + 1

    if any_level:
        return keywords, level_map

    # --- パターン2: 1行1語 ---
    for ln in text.splitlines():
        w = ln.strip()
        if not w or w.startswith("#"):
            continue
        if w not in level_map:
            keywords.append(w)
        level_map[w] = DEFAULT_LEVEL
    return keywords, level_map


def load_keywords_with_level(path: Union[str, Path]) -> Tuple[List[str], Dict[str, int]]:
    """キーワードファイルを読み取り、(keywords, level_map) を返す。"""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"keyword file not found: {path}")
    return parse_keywords(path.read_text(encoding=KEYWORDS_ENCODING))


def load_keywords(path: Union[str, Path]) -> List[str]:
    """キーワード一覧だけを返す。"""
    keywords, _level_map = load_keywords_with_level(path)
    return keywords
