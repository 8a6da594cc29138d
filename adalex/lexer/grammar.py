"""
Lexical grammar of Ada 2012 (ISO/IEC 8652:2012(E), section 2).

Every token type is described by one root regex. The grammar table maps the
root regexes, referenced by their index, to the token types they produce.
The table is built once per process on first use and is never mutated, so
any number of lexers can share it.

Reserved words and compound delimiters carry priority 1: when one of them and
a generic rule (identifier, single delimiter) are complete at the same point,
the reserved word or compound delimiter wins.

Author: xwest
"""

import logging
from dataclasses import dataclass
from typing import Dict, Iterator, Tuple

from ..regex import (
    Regex, Unit, Intersection, Negation, ZeroOrOne, ZeroOrMore, OneOrMore,
    concatenation_of, union_of, units, char_range, general_category, character_except
)
from ..startup.lazy_init import LazyComponent
from .tokens import TokenType, SINGLE_DELIMITERS, COMPOUND_DELIMITERS, KEYWORDS
from .errors import GrammarError

logger = logging.getLogger(__name__)

KEYWORD_PRIORITY = 1
COMPOUND_DELIMITER_PRIORITY = 1


# ============================================================================
# Character classes
# ============================================================================

HORIZONTAL_TABULATION = "\t"
LINE_FEED = "\n"
VERTICAL_TABULATION = "\u000b"
FORM_FEED = "\f"
CARRIAGE_RETURN = "\r"
SPACE = " "
NEXT_LINE = "\u0085"
NO_BREAK_SPACE = "\u00a0"

SEPARATOR_LINE = general_category("Zl")
SEPARATOR_PARAGRAPH = general_category("Zp")

# format_effector ::= HT | LF | VT | FF | CR | NEL | Zl | Zp
FORMAT_EFFECTOR = union_of(
    units(HORIZONTAL_TABULATION + LINE_FEED + VERTICAL_TABULATION
          + FORM_FEED + CARRIAGE_RETURN + NEXT_LINE),
    SEPARATOR_LINE,
    SEPARATOR_PARAGRAPH,
)

# other_control ::= Cc that is not a format_effector
OTHER_CONTROL = Intersection(general_category("Cc"), Negation(FORMAT_EFFECTOR))

# graphic_character ::= anything but other_control, private use, surrogates,
# format effectors, U+FFFE and U+FFFF
GRAPHIC_CHARACTER = character_except(
    union_of(
        OTHER_CONTROL,
        general_category("Co"),
        general_category("Cs"),
        FORMAT_EFFECTOR,
        Unit("\ufffe"),
        Unit("\uffff"),
    )
)

# identifier_start ::= Lu | Ll | Lt | Lm | Lo | Nl
IDENTIFIER_START = union_of(*(
    general_category(category) for category in ("Lu", "Ll", "Lt", "Lm", "Lo", "Nl")
))

# identifier_extend ::= Mn | Mc | Nd | Pc
IDENTIFIER_EXTEND = union_of(*(
    general_category(category) for category in ("Mn", "Mc", "Nd", "Pc")
))

DIGIT = char_range("0", "9")

# extended_digit ::= digit | a | b | c | d | e | f
EXTENDED_DIGIT = union_of(DIGIT, char_range("a", "f"))


# ============================================================================
# Root regexes
# ============================================================================

WHITESPACES = OneOrMore(units(
    HORIZONTAL_TABULATION + LINE_FEED + VERTICAL_TABULATION + FORM_FEED
    + CARRIAGE_RETURN + SPACE + NEXT_LINE + NO_BREAK_SPACE
))

# identifier ::= identifier_start {identifier_start | identifier_extend}
IDENTIFIER = concatenation_of(
    IDENTIFIER_START,
    ZeroOrMore(union_of(IDENTIFIER_START, IDENTIFIER_EXTEND)),
)


def _numeral(digit: Regex) -> Regex:
    """numeral ::= digit {[underline] digit}"""
    return concatenation_of(
        digit,
        ZeroOrMore(concatenation_of(ZeroOrOne(Unit("_")), digit)),
    )


NUMERAL = _numeral(DIGIT)
BASED_NUMERAL = _numeral(EXTENDED_DIGIT)

# exponent ::= e [+] numeral | e - numeral
EXPONENT = concatenation_of(
    Unit("e"),
    union_of(Unit("-"), ZeroOrOne(Unit("+"))),
    NUMERAL,
)

# decimal_literal ::= numeral [.numeral] [exponent]
DECIMAL_LITERAL = concatenation_of(
    NUMERAL,
    ZeroOrOne(concatenation_of(Unit("."), NUMERAL)),
    ZeroOrOne(EXPONENT),
)

# based_literal ::= base # based_numeral [.based_numeral] # [exponent]
BASED_LITERAL = concatenation_of(
    NUMERAL,
    Unit("#"),
    BASED_NUMERAL,
    ZeroOrOne(concatenation_of(Unit("."), BASED_NUMERAL)),
    Unit("#"),
    ZeroOrOne(EXPONENT),
)

# character_literal ::= 'graphic_character'
CHARACTER_LITERAL = concatenation_of(Unit("'"), GRAPHIC_CHARACTER, Unit("'"))

# string_element ::= "" | non_quotation_mark_graphic_character
STRING_ELEMENT = union_of(
    Unit('""'),
    Intersection(GRAPHIC_CHARACTER, Negation(Unit('"'))),
)

# string_literal ::= "{string_element}"
STRING_LITERAL = concatenation_of(Unit('"'), ZeroOrMore(STRING_ELEMENT), Unit('"'))

NON_END_OF_LINE_CHARACTER = character_except(union_of(
    units(LINE_FEED + VERTICAL_TABULATION + FORM_FEED + CARRIAGE_RETURN + NEXT_LINE),
    SEPARATOR_LINE,
    SEPARATOR_PARAGRAPH,
))

# comment ::= --{non_end_of_line_character}
COMMENT = concatenation_of(Unit("--"), ZeroOrMore(NON_END_OF_LINE_CHARACTER))


# ============================================================================
# Grammar table
# ============================================================================

@dataclass(frozen=True)
class GrammarRule:
    """A root regex registered with the token type it produces."""
    index: int
    name: str
    regex: Regex
    kind: TokenType

    @property
    def priority(self) -> int:
        return self.regex.priority


class GrammarTable:
    """
    Immutable mapping from root rules to token types.

    Rules are referenced by their index, which is also the order in which
    the lexer tries them (and the tie-break between equal priorities).
    """

    def __init__(self, rules: Tuple[GrammarRule, ...]):
        self._rules = rules
        self._kinds = tuple(rule.kind for rule in rules)
        seen: Dict[TokenType, GrammarRule] = {}

        for position, rule in enumerate(rules):
            if rule.index != position:
                raise GrammarError(f"Rule {rule.name} registered at {position} with index {rule.index}")
            if rule.kind in seen:
                raise GrammarError(
                    f"Rules {seen[rule.kind].name} and {rule.name} "
                    f"both produce {rule.kind.name}"
                )
            seen[rule.kind] = rule

    def __len__(self) -> int:
        return len(self._rules)

    def __iter__(self) -> Iterator[GrammarRule]:
        return iter(self._rules)

    def __getitem__(self, index: int) -> GrammarRule:
        return self._rules[index]

    def kind_of(self, index: int) -> TokenType:
        """Token type produced by the root rule at ``index``."""
        return self._kinds[index]

    def priority_of(self, index: int) -> int:
        return self._rules[index].priority


def grammar_entries() -> Iterator[Tuple[str, Regex, TokenType]]:
    """Yield ``(name, regex, kind)`` for every root rule, in registration order."""
    yield "whitespaces", WHITESPACES, TokenType.WHITESPACE

    for delimiter, kind in SINGLE_DELIMITERS.items():
        yield repr(delimiter), Unit(delimiter), kind

    for delimiter, kind in COMPOUND_DELIMITERS.items():
        yield repr(delimiter), Unit(delimiter, COMPOUND_DELIMITER_PRIORITY), kind

    yield "identifier", IDENTIFIER, TokenType.IDENTIFIER
    yield "decimal_literal", DECIMAL_LITERAL, TokenType.DECIMAL_LITERAL
    yield "based_literal", BASED_LITERAL, TokenType.BASED_LITERAL
    yield "character_literal", CHARACTER_LITERAL, TokenType.CHARACTER_LITERAL
    yield "string_literal", STRING_LITERAL, TokenType.STRING_LITERAL
    yield "comment", COMMENT, TokenType.COMMENT

    for word, kind in KEYWORDS.items():
        yield word, Unit(word, KEYWORD_PRIORITY), kind


def build_grammar_table() -> GrammarTable:
    """Build the Ada grammar table. Prefer ``get_grammar_table()``."""
    rules = tuple(
        GrammarRule(index, name, regex, kind)
        for index, (name, regex, kind) in enumerate(grammar_entries())
    )
    table = GrammarTable(rules)
    logger.debug("Ada grammar table has %d root rules", len(table))
    return table


_GRAMMAR_TABLE = LazyComponent("Ada grammar table", build_grammar_table)


def get_grammar_table() -> GrammarTable:
    """Return the process-wide grammar table, building it on first call."""
    return _GRAMMAR_TABLE.get_instance()
