"""
Regex node definitions for the adalex lexer.

Every node is an immutable value. Advancing a node by one character never
mutates it, it produces a new node (the derivative) or ``None`` when no match
is possible anymore. The variant set is closed: ``derivatives.derive`` and
``derivatives.nullable`` know every class defined here and reject anything
else.

Author: xwest
"""

from dataclasses import dataclass
from typing import Callable, Optional, Tuple


class Regex:
    """
    Base class of all regex nodes.

    Provides method-style access to the derivative functions so that grammar
    code can write ``regex.advanced(c)`` and ``regex.nullable()``.
    """

    priority: int = 0

    def advanced(self, character: str) -> Optional["Regex"]:
        """Return the derivative of this regex by ``character`` (None if dead)."""
        from .derivatives import derive
        return derive(self, character)

    def nullable(self) -> bool:
        """Check if this regex accepts the empty remaining input."""
        from .derivatives import nullable
        return nullable(self)


# ============================================================================
# Leaf nodes
# ============================================================================

@dataclass(frozen=True)
class Unit(Regex):
    """
    Matches a fixed literal sequence.

    The literal is stored lowercased, the lexer folds its input the same way.
    ``position`` is the number of characters of the literal already matched.
    """
    literal: str
    priority: int = 0
    position: int = 0

    def __post_init__(self):
        if self.literal != self.literal.lower():
            object.__setattr__(self, "literal", self.literal.lower())

    def __repr__(self) -> str:
        return f"Unit({self.literal!r}@{self.position})"


@dataclass(frozen=True)
class CharClass(Regex):
    """
    Matches any single character satisfying ``predicate``.

    Once a character has been consumed the node is the canonical acceptor:
    nullable, and dead on the next character.
    """
    predicate: Callable[[str], bool]
    description: str = "<class>"
    priority: int = 0
    matched: bool = False

    def __repr__(self) -> str:
        return f"CharClass({self.description}{', matched' if self.matched else ''})"


# ============================================================================
# Composite nodes
# ============================================================================

@dataclass(frozen=True)
class Union(Regex):
    """Matches what any of its children matches."""
    children: Tuple[Regex, ...]
    priority: int = 0


@dataclass(frozen=True)
class Concatenation(Regex):
    """Matches ``left`` followed by ``right``."""
    left: Regex
    right: Regex
    priority: int = 0


@dataclass(frozen=True)
class ZeroOrOne(Regex):
    """Optional ``child``: ``[child]``."""
    child: Regex
    priority: int = 0


@dataclass(frozen=True)
class ZeroOrMore(Regex):
    """Kleene star: ``{child}``."""
    child: Regex
    priority: int = 0


@dataclass(frozen=True)
class OneOrMore(Regex):
    """``child {child}``."""
    child: Regex
    priority: int = 0


@dataclass(frozen=True)
class Intersection(Regex):
    """Matches only what both ``left`` and ``right`` match."""
    left: Regex
    right: Regex
    priority: int = 0


@dataclass(frozen=True)
class Negation(Regex):
    """
    Complement of ``child``.

    ``child`` is None once the negated regex has died: from then on every
    continuation is accepted.
    """
    child: Optional[Regex]
    priority: int = 0


# Accepts any remaining input (complement of the dead matcher)
ACCEPT_ANYTHING = Negation(None)
