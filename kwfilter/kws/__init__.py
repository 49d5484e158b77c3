"""キーワードファイルの読み込み。"""
