# kwfilter/cli.py
"""
コマンドラインからキーワードフィルタを使うためのエントリーポイント。

- 設定はコード内（FilterConfig）で集中管理し、引数で上書きする
- テキストは位置引数、無ければ標準入力から読む
- モード:
    check   … キーワードを含むか（含めば終了コード 1）
    count   … --keyword の出現回数
    replace … 伏せ字（--mask）またはハイライト（--highlight）に置換
    find    … 一致したキーワードと位置を 1 行ずつ表示

例:
    kwfilter --keywords config/keywords.txt --mode replace "毛人凤正心事重重地在地毯上来回走着"
"""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from kwfilter import strategies
from kwfilter.builder import KeywordFilterBuilder
from kwfilter.config import ENGINES
from kwfilter.config.filter import FilterConfig
from kwfilter.errors import KeywordFilterError


def _build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="kwfilter", description="キーワードの検出・計数・置換")
    ap.add_argument("text", nargs="?", help="対象テキスト（省略時は標準入力）")
    ap.add_argument("--keywords", default=FilterConfig.KEYWORDS_FILE_PATH, help="キーワードファイルのパス")
    ap.add_argument("--skip", default="".join(FilterConfig.SKIP_CHARS), help="跳過文字（連結して指定。空文字で無効）")
    ap.add_argument("--engine", choices=ENGINES, default=FilterConfig.ENGINE)
    ap.add_argument("--mode", choices=("check", "count", "replace", "find"), default="replace")
    ap.add_argument("--keyword", help="count モードで数えるキーワード")
    ap.add_argument("--mask", default=FilterConfig.MASK_CHAR, help="replace モードの伏せ字")
    ap.add_argument("--keep-length", action="store_true", help="伏せ字をキーワードの文字数分だけ繰り返す")
    ap.add_argument("--highlight", help="replace モードでハイライトに使うテンプレート（例: '<b>{keyword}</b>'）")
    ap.add_argument("-v", "--verbose", action="store_true")
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    text = args.text if args.text is not None else sys.stdin.read()

    try:
        kf = (
            KeywordFilterBuilder(args.engine)
            .from_file(args.keywords)
            .set_skip_chars(list(args.skip))
            .build()
        )
    except (OSError, KeywordFilterError) as e:
        print(f"[エラー] フィルタの構築に失敗しました: {e}", file=sys.stderr)
        return 2

    if args.verbose:
        print(f"[情報] {len(kf)}個のキーワードを読み込みました（engine={args.engine}）", file=sys.stderr)

    try:
        if args.mode == "check":
            hit = kf.has_keywords(text)
            print("true" if hit else "false")
            return 1 if hit else 0
        if args.mode == "count":
            if not args.keyword:
                print("[エラー] count モードには --keyword が必要です", file=sys.stderr)
                return 2
            print(kf.count(text, args.keyword))
            return 0
        if args.mode == "find":
            for m in kf.finditer(text):
                print(f"{m.start}\t{m.end}\t{m.keyword}")
            return 0

        if args.highlight:
            strategy = strategies.highlight(args.highlight)
        else:
            strategy = strategies.mask(args.mask, keep_length=args.keep_length)
        print(kf.replace(text, strategy))
        return 0
    except KeywordFilterError as e:
        print(f"[エラー] {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
