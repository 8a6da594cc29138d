"""
Token definitions for the adalex lexer.

This module defines every token type of the Ada 2012 lexical grammar
(ISO/IEC 8652:2012(E), section 2):
- Single and compound delimiters
- Identifiers and literals (decimal, based, character, string)
- Comments and whitespace
- Reserved words

Token type values are part of the public contract (syntax highlighters and
structure views persist them), so every member carries an explicit value.
New members get new values, existing values never change.

Author: xwest
"""

from enum import Enum
from dataclasses import dataclass
from typing import Dict


class TokenType(Enum):
    """
    Enumeration of all token types in Ada.

    Organized by category for clarity and maintainability.
    """

    # ========================================================================
    # Single Delimiters
    # ========================================================================
    AMPERSAND = 1                   # &
    APOSTROPHE = 2                  # ' (attribute tick)
    LEFT_PARENTHESIS = 3            # (
    RIGHT_PARENTHESIS = 4           # )
    ASTERISK = 5                    # *
    PLUS_SIGN = 6                   # +
    COMMA = 7                       # ,
    HYPHEN_MINUS = 8                # -
    FULL_STOP = 9                   # .
    SOLIDUS = 10                    # /
    COLON = 11                      # :
    SEMICOLON = 12                  # ;
    LESS_THAN_SIGN = 13             # <
    EQUALS_SIGN = 14                # =
    GREATER_THAN_SIGN = 15          # >
    VERTICAL_LINE = 16              # |

    # ========================================================================
    # Compound Delimiters
    # ========================================================================
    ARROW = 17                      # =>
    DOUBLE_DOT = 18                 # ..
    DOUBLE_ASTERISK = 19            # **
    ASSIGNMENT = 20                 # :=
    NOT_EQUAL_SIGN = 21             # /=
    GREATER_EQUAL_SIGN = 22         # >=
    LESS_EQUAL_SIGN = 23            # <=
    LEFT_LABEL_BRACKET = 24         # <<
    RIGHT_LABEL_BRACKET = 25        # >>
    BOX_SIGN = 26                   # <>

    # ========================================================================
    # Identifiers and Literals
    # ========================================================================
    IDENTIFIER = 27                 # Put_Line, Ñandú
    DECIMAL_LITERAL = 28            # 42, 1_000.0, 1.0e-6
    BASED_LITERAL = 29              # 16#FF#, 2#1010.1#e2
    CHARACTER_LITERAL = 30          # 'a'
    STRING_LITERAL = 31             # "Hello, ""World"""

    # ========================================================================
    # Trivia and Error Recovery
    # ========================================================================
    COMMENT = 32                    # -- comment
    WHITESPACE = 33                 # spaces, tabs, line breaks
    INVALID = 34                    # Unrecognized character

    # ========================================================================
    # Reserved Words
    # ========================================================================
    ABORT_KEYWORD = 35
    ABS_KEYWORD = 36
    ABSTRACT_KEYWORD = 37
    ACCEPT_KEYWORD = 38
    ACCESS_KEYWORD = 39
    ALIASED_KEYWORD = 40
    ALL_KEYWORD = 41
    AND_KEYWORD = 42
    ARRAY_KEYWORD = 43
    AT_KEYWORD = 44
    BEGIN_KEYWORD = 45
    BODY_KEYWORD = 46
    CASE_KEYWORD = 47
    CONSTANT_KEYWORD = 48
    DECLARE_KEYWORD = 49
    DELAY_KEYWORD = 50
    DELTA_KEYWORD = 51
    DIGITS_KEYWORD = 52
    DO_KEYWORD = 53
    ELSE_KEYWORD = 54
    ELSIF_KEYWORD = 55
    END_KEYWORD = 56
    ENTRY_KEYWORD = 57
    EXCEPTION_KEYWORD = 58
    EXIT_KEYWORD = 59
    FOR_KEYWORD = 60
    FUNCTION_KEYWORD = 61
    GENERIC_KEYWORD = 62
    GOTO_KEYWORD = 63
    IF_KEYWORD = 64
    IN_KEYWORD = 65
    INTERFACE_KEYWORD = 66
    IS_KEYWORD = 67
    LIMITED_KEYWORD = 68
    LOOP_KEYWORD = 69
    MOD_KEYWORD = 70
    NEW_KEYWORD = 71
    NOT_KEYWORD = 72
    NULL_KEYWORD = 73
    OF_KEYWORD = 74
    OR_KEYWORD = 75
    OTHERS_KEYWORD = 76
    OUT_KEYWORD = 77
    OVERRIDING_KEYWORD = 78
    PACKAGE_KEYWORD = 79
    PRAGMA_KEYWORD = 80
    PRIVATE_KEYWORD = 81
    PROCEDURE_KEYWORD = 82
    PROTECTED_KEYWORD = 83
    RAISE_KEYWORD = 84
    RANGE_KEYWORD = 85
    RECORD_KEYWORD = 86
    REM_KEYWORD = 87
    RENAMES_KEYWORD = 88
    REQUEUE_KEYWORD = 89
    RETURN_KEYWORD = 90
    REVERSE_KEYWORD = 91
    SELECT_KEYWORD = 92
    SEPARATE_KEYWORD = 93
    SOME_KEYWORD = 94
    SUBTYPE_KEYWORD = 95
    SYNCHRONIZED_KEYWORD = 96
    TAGGED_KEYWORD = 97
    TASK_KEYWORD = 98
    TERMINATE_KEYWORD = 99
    THEN_KEYWORD = 100
    TYPE_KEYWORD = 101
    UNTIL_KEYWORD = 102
    USE_KEYWORD = 103
    WHEN_KEYWORD = 104
    WHILE_KEYWORD = 105
    WITH_KEYWORD = 106
    XOR_KEYWORD = 107

    @property
    def is_keyword(self) -> bool:
        """Check if this is a reserved word type."""
        return self.name.endswith("_KEYWORD")

    @property
    def is_delimiter(self) -> bool:
        """Check if this is a single or compound delimiter type."""
        return self.value <= TokenType.BOX_SIGN.value

    @property
    def is_literal(self) -> bool:
        """Check if this is a literal type."""
        return self in {
            TokenType.DECIMAL_LITERAL, TokenType.BASED_LITERAL,
            TokenType.CHARACTER_LITERAL, TokenType.STRING_LITERAL,
        }

    @property
    def is_trivia(self) -> bool:
        """Check if this type carries no syntactic meaning (comments, whitespace)."""
        return self in (TokenType.COMMENT, TokenType.WHITESPACE)


@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in the source code.

    Used for diagnostics; tokens themselves only carry offsets.
    """
    filename: str
    line: int
    column: int
    offset: int  # Character offset from start of buffer

    def __str__(self) -> str:
        return f"{self.filename}:{self.line}:{self.column}"

    def __repr__(self) -> str:
        return f"SourceLocation({self.filename!r}, {self.line}, {self.column}, {self.offset})"

    @classmethod
    def from_offset(cls, buffer: str, offset: int, filename: str = "<string>") -> "SourceLocation":
        """Compute the 1-based line and column of ``offset`` in ``buffer``."""
        line = buffer.count("\n", 0, offset) + 1
        column = offset - (buffer.rfind("\n", 0, offset) + 1) + 1
        return cls(filename, line, column, offset)


@dataclass(frozen=True)
class Token:
    """
    Represents a lexical token in an Ada buffer.

    Offsets refer to the original (not case-folded) buffer, ``end`` is
    exclusive.
    """
    type: TokenType
    start: int
    end: int

    def __post_init__(self):
        if self.start > self.end:
            raise ValueError(f"Token start {self.start} is after its end {self.end}")

    def __str__(self) -> str:
        return f"{self.type.name}[{self.start}:{self.end}]"

    def __repr__(self) -> str:
        return f"Token({self.type.name}, {self.start}, {self.end})"

    @property
    def length(self) -> int:
        return self.end - self.start

    def text(self, buffer: str) -> str:
        """Return the source text of this token within ``buffer``."""
        return buffer[self.start:self.end]

    @property
    def is_keyword(self) -> bool:
        return self.type.is_keyword

    @property
    def is_literal(self) -> bool:
        return self.type.is_literal

    @property
    def is_identifier(self) -> bool:
        return self.type == TokenType.IDENTIFIER


# Lookup tables used to build the grammar

SINGLE_DELIMITERS: Dict[str, TokenType] = {
    "&": TokenType.AMPERSAND,
    "'": TokenType.APOSTROPHE,
    "(": TokenType.LEFT_PARENTHESIS,
    ")": TokenType.RIGHT_PARENTHESIS,
    "*": TokenType.ASTERISK,
    "+": TokenType.PLUS_SIGN,
    ",": TokenType.COMMA,
    "-": TokenType.HYPHEN_MINUS,
    ".": TokenType.FULL_STOP,
    "/": TokenType.SOLIDUS,
    ":": TokenType.COLON,
    ";": TokenType.SEMICOLON,
    "<": TokenType.LESS_THAN_SIGN,
    "=": TokenType.EQUALS_SIGN,
    ">": TokenType.GREATER_THAN_SIGN,
    "|": TokenType.VERTICAL_LINE,
}

COMPOUND_DELIMITERS: Dict[str, TokenType] = {
    "=>": TokenType.ARROW,
    "..": TokenType.DOUBLE_DOT,
    "**": TokenType.DOUBLE_ASTERISK,
    ":=": TokenType.ASSIGNMENT,
    "/=": TokenType.NOT_EQUAL_SIGN,
    ">=": TokenType.GREATER_EQUAL_SIGN,
    "<=": TokenType.LESS_EQUAL_SIGN,
    "<<": TokenType.LEFT_LABEL_BRACKET,
    ">>": TokenType.RIGHT_LABEL_BRACKET,
    "<>": TokenType.BOX_SIGN,
}

# Ada 2012 reserved words (ARM 2.9)
KEYWORDS: Dict[str, TokenType] = {
    member.name[:-len("_KEYWORD")].lower(): member
    for member in TokenType
    if member.is_keyword
}
