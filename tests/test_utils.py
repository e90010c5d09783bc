import logging

import pgcss.utils as util
from pgcss.utils.regex import extract_integers, split_funcs, to_float, tokenize


def test_func():
    assert util.in_bounds(3, 4, 5) == 4
    assert util.in_bounds(6, 4, 5) == 5
    assert util.in_bounds(4.5, 4, 5) == 4.5

    assert util.not_neg(-2) == 0
    assert util.not_neg(2) == 2

    assert util.make_default(None, 3) == 3
    assert util.make_default(0, 3) == 0


def test_tokenize():
    assert tokenize("10px 20px") == ["10px", "20px"]
    assert tokenize(" 1, 2 ") == ["1", "2"]
    assert tokenize("10px\t 5%") == ["10px", "5%"]
    assert tokenize("") == []


def test_numbers():
    assert extract_integers("rgba(255, 128, 0, 64)") == [255, 128, 0, 64]
    assert extract_integers("none") == []

    assert to_float("45deg") == 45
    assert to_float("-1.5em") == -1.5
    assert to_float(".5") == 0.5
    assert to_float(" 12 ") == 12
    assert to_float("abc") == 0
    assert to_float("") == 0


def test_split_funcs():
    assert split_funcs("translateX(10px) rotate(45deg)") == [
        ("translatex", "10px"),
        ("rotate", "45deg"),
    ]
    assert split_funcs("translate( 10px, 5% )") == [("translate", "10px, 5%")]
    # unmatched parenthesis drop the rest
    assert split_funcs("rotate(45deg) scale(2") == [("rotate", "45deg")]
    assert split_funcs("none") == []


def test_debug_once(caplog):
    caplog.set_level(logging.DEBUG, logger="pgcss")
    util.debug_once("a message that is only logged once")
    util.debug_once("a message that is only logged once")
    messages = [r.message for r in caplog.records]
    assert messages.count("a message that is only logged once") == 1
