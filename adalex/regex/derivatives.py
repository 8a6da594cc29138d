"""
Brzozowski derivatives over the adalex regex nodes.

``derive(regex, c)`` returns the regex matching every suffix ``s`` such that
``c + s`` is matched by ``regex``, or None when that set is empty.
``nullable(regex)`` tells whether ``regex`` matches the empty string, in
other words whether a match is complete at this point.

Both functions dispatch over the closed variant set of ``nodes``; an object of
any other type is a programming error and raises TypeError.

Author: xwest
"""

from dataclasses import replace
from typing import List, Optional

from .nodes import (
    Regex, Unit, CharClass, Union, Concatenation, ZeroOrOne, ZeroOrMore,
    OneOrMore, Intersection, Negation, ACCEPT_ANYTHING
)


def nullable(regex: Regex) -> bool:
    """Check if ``regex`` accepts the empty remaining input."""
    if isinstance(regex, Unit):
        return regex.position == len(regex.literal)
    if isinstance(regex, CharClass):
        return regex.matched
    if isinstance(regex, Union):
        return any(nullable(child) for child in regex.children)
    if isinstance(regex, Concatenation):
        return nullable(regex.left) and nullable(regex.right)
    if isinstance(regex, (ZeroOrOne, ZeroOrMore)):
        return True
    if isinstance(regex, OneOrMore):
        return nullable(regex.child)
    if isinstance(regex, Intersection):
        return nullable(regex.left) and nullable(regex.right)
    if isinstance(regex, Negation):
        return regex.child is None or not nullable(regex.child)
    raise TypeError(f"Not a regex node: {regex!r}")


def derive(regex: Regex, character: str) -> Optional[Regex]:
    """
    Advance ``regex`` by a single character.

    Args:
        regex: Regex node to advance
        character: The next (case-folded) input character

    Returns:
        The derivative, or None if no match is possible anymore
    """
    if isinstance(regex, Unit):
        literal = regex.literal
        if regex.position < len(literal) and literal[regex.position] == character:
            return replace(regex, position=regex.position + 1)
        return None

    if isinstance(regex, CharClass):
        if not regex.matched and regex.predicate(character):
            return replace(regex, matched=True)
        return None

    if isinstance(regex, Union):
        survivors = [derive(child, character) for child in regex.children]
        return _union(survivors, regex.priority)

    if isinstance(regex, Concatenation):
        advanced_left = derive(regex.left, character)
        head = None
        if advanced_left is not None:
            head = Concatenation(advanced_left, regex.right, regex.priority)
        if not nullable(regex.left):
            return head
        # The left side may be skipped entirely
        return _union([head, derive(regex.right, character)], regex.priority)

    if isinstance(regex, ZeroOrMore):
        advanced_child = derive(regex.child, character)
        if advanced_child is None:
            return None
        return Concatenation(advanced_child, regex, regex.priority)

    if isinstance(regex, OneOrMore):
        advanced_child = derive(regex.child, character)
        if advanced_child is None:
            return None
        return Concatenation(
            advanced_child, ZeroOrMore(regex.child, regex.priority), regex.priority
        )

    if isinstance(regex, ZeroOrOne):
        return derive(regex.child, character)

    if isinstance(regex, Intersection):
        advanced_left = derive(regex.left, character)
        if advanced_left is None:
            return None
        advanced_right = derive(regex.right, character)
        if advanced_right is None:
            return None
        return Intersection(advanced_left, advanced_right, regex.priority)

    if isinstance(regex, Negation):
        if regex.child is None:
            return regex
        advanced_child = derive(regex.child, character)
        if advanced_child is None:
            return ACCEPT_ANYTHING if regex.priority == 0 else Negation(None, regex.priority)
        return Negation(advanced_child, regex.priority)

    raise TypeError(f"Not a regex node: {regex!r}")


def _union(candidates: List[Optional[Regex]], priority: int) -> Optional[Regex]:
    """Build the union of the live candidates, None if all of them are dead."""
    children = []
    for candidate in candidates:
        if candidate is not None and candidate not in children:
            children.append(candidate)

    if not children:
        return None
    if len(children) == 1:
        return children[0]
    return Union(tuple(children), priority)
