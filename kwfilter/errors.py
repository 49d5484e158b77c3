# kwfilter/errors.py
"""
キーワードフィルタで送出する例外の定義。

- InvalidArgumentError: 引数が不正（None / 空文字 / 空白のみ など）
- InvalidStateError: 状態が不正（compile 後の追加、compile 前の検索 など）

どちらも組み込み例外（ValueError / RuntimeError）を継承しているため、
呼び出し側は従来どおり `except ValueError` でも捕捉できる。
"""


class KeywordFilterError(Exception):
    """kwfilter パッケージの例外の基底クラス。"""


class InvalidArgumentError(KeywordFilterError, ValueError):
    """引数が不正な場合に送出する。"""


class InvalidStateError(KeywordFilterError, RuntimeError):
    """構築フェーズと検索フェーズの順序が守られていない場合に送出する。"""


def check_not_none(value, name: str):
    """None なら InvalidArgumentError を送出し、そうでなければ値をそのまま返す。"""
    if value is None:
        raise InvalidArgumentError(f"Null value not allowed for parameter '{name}'.")
    return value
