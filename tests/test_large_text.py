# tests/test_large_text.py

import random
import time

from kwfilter import build_filter, strategies

HEAD = "HEADKEYWORD"
TAIL = "TAILKEYWORD"


def _cjk(rng, n):
    return "".join(chr(0x4E00 + rng.randrange(3000)) for _ in range(n))


def test_replace_large_text_with_many_keywords():
    rng = random.Random(20131214)
    keywords = [_cjk(rng, rng.randint(2, 4)) for _ in range(1100)]
    keywords.insert(0, HEAD)
    keywords.append(TAIL)
    body = _cjk(rng, 12000)
    assert TAIL not in body

    kf = build_filter(keywords, ["*", " ", "_", "-", "，"])
    text = HEAD + body + TAIL

    started = time.perf_counter()
    result = kf.replace(text, strategies.highlight("<b>{keyword}</b>"))
    elapsed = time.perf_counter() - started

    assert result.startswith("<b>" + HEAD + "</b>")
    assert result.endswith("<b>" + TAIL + "</b>")
    assert elapsed < 2.5
