"""
Convenience constructors for building grammars out of regex nodes.

Author: xwest
"""

import unicodedata
from functools import reduce
from typing import Iterable

from .nodes import Regex, Unit, CharClass, Union, Concatenation, Intersection, Negation


def concatenation_of(*regexes: Regex, priority: int = 0) -> Regex:
    """Concatenate two or more regexes, left to right."""
    if len(regexes) < 2:
        raise ValueError("A concatenation needs at least two regexes")
    # Right-nested so that the head is always the next thing to match
    return reduce(
        lambda right, left: Concatenation(left, right, priority),
        reversed(regexes[:-1]),
        regexes[-1],
    )


def union_of(*regexes: Regex, priority: int = 0) -> Regex:
    """Union of one or more regexes."""
    if not regexes:
        raise ValueError("A union needs at least one regex")
    if len(regexes) == 1:
        return regexes[0]
    return Union(tuple(regexes), priority)


def units(characters: Iterable[str], priority: int = 0) -> Regex:
    """Union of single-character units, one per given character."""
    return union_of(*(Unit(character, priority) for character in characters))


def char_range(first: str, last: str) -> CharClass:
    """Single character between ``first`` and ``last`` (inclusive)."""
    low, high = ord(first), ord(last)
    return CharClass(
        lambda character: low <= ord(character) <= high,
        f"[{first}-{last}]",
    )


def general_category(category: str) -> CharClass:
    """
    Single character of the given Unicode general category.

    Args:
        category: Two-letter category name such as "Lu" or "Nd"
    """
    return CharClass(
        lambda character: unicodedata.category(character) == category,
        category,
    )


def any_character() -> CharClass:
    """Exactly one character, whatever it is."""
    return CharClass(_always, "any")


def character_except(excluded: Regex) -> Regex:
    """
    Exactly one character that ``excluded`` does not match.

    Negation alone also accepts longer inputs (it is the complement over all
    strings), so it is intersected with a single-character class.
    """
    return Intersection(any_character(), Negation(excluded))


def _always(character: str) -> bool:
    return True
