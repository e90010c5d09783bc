######################### Regexes ##################################

import re

# separates tokens of a value like "10px 20px" or "1, 2"
token_sep_re = re.compile(r"[\s,]+")
# https://docs.python.org/3/library/re.html#simulating-scanf
dec_re = r"[-+]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][-+]?\d+)?"
number_pattern = re.compile(dec_re)
int_pattern = re.compile(r"\d+")


def tokenize(s: str) -> list[str]:
    """
    Splits a value by whitespace. Commas are separators too.

    "10px 20px" -> ["10px", "20px"]
    "1, 2" -> ["1", "2"]
    """
    return [t for t in token_sep_re.split(s) if t]


def extract_integers(s: str) -> list[int]:
    """
    All runs of digits in the order they appear

    "rgb(255, 128, 0)" -> [255, 128, 0]
    """
    return [int(x) for x in int_pattern.findall(s)]


def to_float(s: str) -> float:
    """
    Parses the number at the start of `s`. Anything that follows is ignored.
    If there is no number at the start, 0 is returned.

    "45deg" -> 45.0
    "abc" -> 0.0
    """
    if match := number_pattern.match(s.strip()):
        return float(match.group())
    return 0.0


def split_funcs(s: str) -> list[tuple[str, str]]:
    """
    Splits a sequence of function calls into (name, argument) pairs.
    Names are lowercased, both parts are stripped.
    If a parenthesis is missing the rest of the string is dropped.

    "translateX(10px) rotate(45deg)" -> [("translatex", "10px"), ("rotate", "45deg")]
    """
    result = []
    pos = 0
    while pos < len(s):
        if (opening := s.find("(", pos)) == -1:
            break
        if (closing := s.find(")", opening)) == -1:
            break
        name = s[pos:opening].strip().lower()
        result.append((name, s[opening + 1 : closing].strip()))
        pos = closing + 1
    return result


##########################################################################
