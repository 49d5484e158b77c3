# kwfilter/strategies.py
"""よく使う置換戦略（ReplaceStrategy）のファクトリ。"""

from __future__ import annotations

from kwfilter.base import ReplaceStrategy
from kwfilter.config.filter import FilterConfig
from kwfilter.errors import InvalidArgumentError


def constant(replacement: str) -> ReplaceStrategy:
    """どのキーワードも同じ文字列に置き換える。例: constant("文明用语")"""
    def _strategy(keyword: str) -> str:
        return replacement
    return _strategy


def mask(char: str = FilterConfig.MASK_CHAR, keep_length: bool = False) -> ReplaceStrategy:
    """伏せ字に置き換える。keep_length=True ならキーワードの文字数分だけ繰り返す。"""
    if not char:
        raise InvalidArgumentError("mask char must not be empty")

    def _strategy(keyword: str) -> str:
        return char * len(keyword) if keep_length else char
    return _strategy


def highlight(template: str = FilterConfig.HIGHLIGHT_TEMPLATE) -> ReplaceStrategy:
    """テンプレートの {keyword} を一致キーワードに差し替える（ハイライト表示用）。"""
    if "{keyword}" not in template:
        raise InvalidArgumentError("template must contain '{keyword}'")

    def _strategy(keyword: str) -> str:
        return template.replace("{keyword}", keyword)
    return _strategy
