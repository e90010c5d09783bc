from pgcss.style.Parser import normalize_property, parse_declaration, parse_rules
from pgcss.types import Declaration


def test_normalize_property():
    assert normalize_property("backgroundColor") == "background-color"
    assert normalize_property("background-color") == "background-color"
    assert normalize_property("Background-Color") == "background-color"
    assert normalize_property("fontSize") == "font-size"
    assert normalize_property(" WIDTH ") == "width"
    assert normalize_property("my-Property") == "my-property"


def test_parse_declaration():
    assert parse_declaration("backgroundColor: #1e1e2e") == Declaration(
        "background-color", "#1e1e2e"
    )
    assert parse_declaration("  width :  90%  ") == Declaration("width", "90%")
    # only the first colon splits
    assert parse_declaration("background-image: url(http://x.png)") == Declaration(
        "background-image", "url(http://x.png)"
    )
    assert parse_declaration("width:") == Declaration("width", "")


def test_malformed():
    assert parse_declaration("no colon here") is None
    assert parse_declaration(": 10px") is None
    assert parse_declaration("") is None


def test_parse_rules():
    rules = ["width: 10px", "garbage", "height: 20px", "width: 30px"]
    assert parse_rules(rules) == [
        Declaration("width", "10px"),
        Declaration("height", "20px"),
        Declaration("width", "30px"),
    ]
    assert parse_rules([]) == []
