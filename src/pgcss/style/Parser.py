"""
Turns raw rules like "backgroundColor: #1e1e2e" into Declarations
"""
from typing import Iterable

from pgcss.config import property_aliases
from pgcss.types import Declaration
from pgcss.utils import debug_once


def normalize_property(prop: str) -> str:
    """
    Lowercases the property and resolves camelCase aliases to kebab-case

    "backgroundColor" -> "background-color"
    "background-color" -> "background-color"
    "my-Property" -> "my-property"
    """
    lower = prop.strip().lower()
    return property_aliases.get(lower.replace("-", ""), lower)


def parse_declaration(rule: str) -> Declaration | None:
    """
    Splits the rule at the first colon.
    Returns None if there is no colon or no property
    """
    prop, colon, value = rule.partition(":")
    if not colon or not (prop := normalize_property(prop)):
        debug_once(f"CSS: Dropped malformed rule ({rule!r})")
        return None
    return Declaration(prop, value.strip())


def parse_rules(rules: Iterable[str]) -> list[Declaration]:
    """
    Parses every rule. The order is kept and malformed rules are dropped silently.
    """
    return [decl for rule in rules if (decl := parse_declaration(rule)) is not None]
