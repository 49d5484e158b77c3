# kwfilter/config (package)

# Keyword file settings
KEYWORDS_FILE_PATH = "config/keywords.txt"  # kwfilter コマンド（kwfilter/cli.py）の既定値
KEYWORDS_ENCODING = "utf-8"
DEFAULT_LEVEL = 2  # 1行1語形式のキーワードに付与する既定レベル

# Skip characters
DEFAULT_SKIP_CHARS = ("*", " ")  # "心*情" や "心 情" を "心情" として扱う

# Engine names
ENGINE_TRIE = "trie"
ENGINE_REGEX = "regex"
ENGINES = (ENGINE_TRIE, ENGINE_REGEX)
