# tests/test_builder.py

import pytest

from kwfilter import KeywordFilterBuilder, RegexKeywordFilter, TrieTree, build_filter
from kwfilter.errors import InvalidArgumentError, InvalidStateError


@pytest.mark.parametrize("keywords", [None, []])
def test_set_keywords_rejects_empty(keywords):
    with pytest.raises(InvalidArgumentError):
        KeywordFilterBuilder().set_keywords(keywords)


def test_build_without_keywords_fails():
    with pytest.raises(InvalidArgumentError):
        KeywordFilterBuilder().build()


def test_unknown_engine():
    with pytest.raises(InvalidArgumentError):
        KeywordFilterBuilder("dfa")


def test_default_engine_is_trie():
    kf = KeywordFilterBuilder().set_keywords(["心情"]).build()
    assert isinstance(kf, TrieTree)
    assert kf.compiled
    assert kf.skip_chars == frozenset()


@pytest.mark.parametrize("engine, cls", [("trie", TrieTree), ("regex", RegexKeywordFilter)])
def test_engines_share_contract(engine, cls):
    kf = build_filter(["心情"], ["*", " "], engine=engine)
    assert isinstance(kf, cls)
    assert kf.has_keywords("天气真好!心*情也好!")
    assert kf.count("老*龙恼怒闹老农", "老龙") == 1
    assert kf.count("aaa", "aa") == 2
    assert kf.replace("天气真好!心情也好!", lambda kw: "文明用语") == "天气真好!文明用语也好!"
    with pytest.raises(InvalidStateError):
        kf.add("哈哈")


@pytest.mark.parametrize("engine", ["trie", "regex"])
def test_engines_prefer_longest_match(engine):
    kf = build_filter(["哈", "哈哈大笑"], engine=engine)
    assert kf.replace("他哈哈大笑", lambda kw: "*") == "他*"
    assert kf.replace("他哈哈", lambda kw: "*") == "他**"


def test_from_file(tmp_path):
    path = tmp_path / "keywords.txt"
    path.write_text("level2=[心事, 心事重,\n        心事重重]\n", encoding="utf-8")
    kf = KeywordFilterBuilder().from_file(path).build()
    assert kf.replace("毛人凤正心事重重地在地毯上来回走着", lambda kw: "*") == "毛人凤正*地在地毯上来回走着"


def test_from_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        KeywordFilterBuilder().from_file(tmp_path / "nope.txt")


def test_blank_keyword_in_collection_fails():
    with pytest.raises(InvalidArgumentError):
        build_filter(["心情", " "])
