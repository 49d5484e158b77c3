# tests/test_cli.py

import pytest

from kwfilter.cli import main


@pytest.fixture
def keywords_file(tmp_path):
    path = tmp_path / "keywords.txt"
    path.write_text("level2=[心事, 心事重, 心事重重]\nlevel3=[心情]\n", encoding="utf-8")
    return str(path)


def test_replace_mode(keywords_file, capsys):
    assert main(["--keywords", keywords_file, "毛人凤正心事重重地在地毯上来回走着"]) == 0
    assert capsys.readouterr().out == "毛人凤正*地在地毯上来回走着\n"


def test_highlight_mode(keywords_file, capsys):
    assert main(["--keywords", keywords_file, "--highlight", "<b>{keyword}</b>", "我的心 情不好"]) == 0
    assert capsys.readouterr().out == "我的<b>心情</b>不好\n"


def test_check_mode(keywords_file, capsys):
    assert main(["--keywords", keywords_file, "--mode", "check", "心*情"]) == 1
    assert capsys.readouterr().out == "true\n"
    assert main(["--keywords", keywords_file, "--mode", "check", "--skip", "", "心*情"]) == 0
    assert capsys.readouterr().out == "false\n"


def test_count_mode(keywords_file, capsys):
    args = ["--keywords", keywords_file, "--mode", "count", "--keyword", "老龙", "老*龙恼怒闹老农，老农恼怒闹老龙"]
    assert main(args) == 0
    assert capsys.readouterr().out == "2\n"


def test_find_mode(keywords_file, capsys):
    assert main(["--keywords", keywords_file, "--mode", "find", "--engine", "regex", "毛人凤正心事重重地"]) == 0
    assert capsys.readouterr().out == "4\t8\t心事重重\n"


def test_missing_keywords_file(tmp_path, capsys):
    assert main(["--keywords", str(tmp_path / "none.txt"), "心情"]) == 2
    assert "[エラー]" in capsys.readouterr().err
