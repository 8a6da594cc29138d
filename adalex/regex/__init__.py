"""
adalex Regex Package

A small regular-expression algebra evaluated incrementally with Brzozowski
derivatives. The lexer advances every grammar rule one character at a time
and asks each surviving node whether it is nullable (a match is complete).

Author: xwest
"""

from .nodes import (
    Regex, Unit, CharClass, Union, Concatenation, ZeroOrOne, ZeroOrMore,
    OneOrMore, Intersection, Negation, ACCEPT_ANYTHING
)
from .derivatives import derive, nullable
from .builders import (
    concatenation_of, union_of, units, char_range, general_category,
    any_character, character_except
)

__all__ = [
    "Regex",
    "Unit",
    "CharClass",
    "Union",
    "Concatenation",
    "ZeroOrOne",
    "ZeroOrMore",
    "OneOrMore",
    "Intersection",
    "Negation",
    "ACCEPT_ANYTHING",
    "derive",
    "nullable",
    "concatenation_of",
    "union_of",
    "units",
    "char_range",
    "general_category",
    "any_character",
    "character_except",
]
