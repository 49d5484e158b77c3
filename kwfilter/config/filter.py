"""
キーワードフィルタ構築に関する設定モジュール。

提供内容:
- フィルタの実装方式（AC 自動機 / 正規表現）や跳過文字の既定値を集中管理する。
- .env は使用せず、コード内の定数で設定を保持する運用前提。

利用方法:
- `KeywordFilterBuilder` と `kwfilter/cli.py` が `FilterConfig` のクラス属性を参照する。
"""

from typing import Tuple

from kwfilter.config import DEFAULT_SKIP_CHARS, ENGINE_TRIE, KEYWORDS_FILE_PATH


class FilterConfig:
    """フィルタ構築の既定値をまとめるクラス。

    責務:
    - 実装方式・跳過文字・置換文字列の既定値を一箇所で管理する。

    注意:
    - "regex" はキーワード数が少ない場合向け。数百語を超える場合は "trie" を使うこと。
    """

    # フィルタの実装方式（"trie": AC 自動機 / "regex": 正規表現の合成）
    ENGINE: str = ENGINE_TRIE

    # マッチング時に無視する文字。出力にはそのまま残る（一致区間の内側を除く）。
    SKIP_CHARS: Tuple[str, ...] = DEFAULT_SKIP_CHARS

    # 伏せ字に使う文字
    MASK_CHAR: str = "*"

    # ハイライト置換のテンプレート。{keyword} が一致したキーワードに置き換わる。
    HIGHLIGHT_TEMPLATE: str = "<b>{keyword}</b>"

    # キーワードファイルの既定パス
    KEYWORDS_FILE_PATH: str = KEYWORDS_FILE_PATH
