"""
adalex Lexer Package

Implements a derivative-based lexical analyzer for Ada 2012.

Key Features:
- Grammar written as regex combinators, one root regex per token type
- Longest match with priorities (reserved words beat identifiers)
- Attribute tick handling (X'First is never a character literal)
- Case-insensitive matching with offsets into the original text
- Error recovery through one-character INVALID tokens

Author: xwest
"""

from .tokens import Token, TokenType, SourceLocation, KEYWORDS, SINGLE_DELIMITERS, COMPOUND_DELIMITERS
from .errors import LexerError, LexingBoundsError, GrammarError, Diagnostic
from .grammar import GrammarRule, GrammarTable, get_grammar_table
from .lexer import (
    Lexer, DEFAULT_STATE, fold_case, first_token, text_tokens,
    tokenize_string, tokenize_file, invalid_token_diagnostics, collect_diagnostics
)

__all__ = [
    "Lexer",
    "Token",
    "TokenType",
    "SourceLocation",
    "KEYWORDS",
    "SINGLE_DELIMITERS",
    "COMPOUND_DELIMITERS",
    "LexerError",
    "LexingBoundsError",
    "GrammarError",
    "Diagnostic",
    "GrammarRule",
    "GrammarTable",
    "get_grammar_table",
    "DEFAULT_STATE",
    "fold_case",
    "first_token",
    "text_tokens",
    "tokenize_string",
    "tokenize_file",
    "invalid_token_diagnostics",
    "collect_diagnostics",
]
