# tests/test_strategies.py

import pytest

from kwfilter import build_filter, strategies
from kwfilter.errors import InvalidArgumentError


@pytest.fixture
def kf():
    return build_filter(["心情", "哈哈"], ["*", " "])


def test_constant(kf):
    assert kf.replace("买彩票中奖了，哈哈", strategies.constant("呵呵")) == "买彩票中奖了，呵呵"


def test_mask(kf):
    assert kf.replace("心*情不错", strategies.mask()) == "*不错"
    assert kf.replace("心*情不错", strategies.mask("#", keep_length=True)) == "##不错"


def test_highlight(kf):
    assert kf.replace("我的心情不好", strategies.highlight()) == "我的<b>心情</b>不好"
    assert kf.replace("我的心情不好", strategies.highlight("[{keyword}]")) == "我的[心情]不好"


def test_invalid_strategy_arguments():
    with pytest.raises(InvalidArgumentError):
        strategies.mask("")
    with pytest.raises(InvalidArgumentError):
        strategies.highlight("<b></b>")
