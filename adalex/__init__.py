"""
adalex - Ada Lexical Analysis Package

A lexer for Ada 2012 source text built on regex derivatives, designed to be
driven by editors and language tools through a pull-based token stream.

Architecture:
    adalex/
    ├── regex/           # Regex combinators and their derivatives
    ├── lexer/           # Token types, Ada grammar table, lexer
    ├── startup/         # Build-once initialization of shared data
    └── cli.py           # Token dump command line tool

Author: xwest
License: MIT
"""

__version__ = "0.1.0-alpha"
__author__ = "xwest"
__license__ = "MIT"

from .lexer import Lexer, Token, TokenType, first_token, text_tokens, tokenize_string

__all__ = [
    # Core classes
    "Lexer",
    "Token",
    "TokenType",

    # Convenience functions
    "first_token",
    "text_tokens",
    "tokenize_string",

    # Version info
    "__version__",
    "__author__",
    "__license__",
]
