"""
adalex Lexer - turns Ada source text into a stream of tokens

Rather than one big hand-written state machine, every token type is
described by a root regex in the grammar table and all of them are run in
parallel, one character at a time, using regex derivatives. The longest
input for which some rule is complete wins; among the rules complete at that
point the one with the highest priority wins (reserved words over
identifiers).

The lexer follows the usual pull protocol of editor lexers:

    lexer.start(buffer, start, end, state)
    while lexer.token_type is not None:
        ... lexer.token_type, lexer.token_start, lexer.token_end ...
        lexer.advance()

It never raises on bad input: unrecognized characters become one-character
INVALID tokens.

Author: xwest
"""

import logging
from typing import Iterable, Iterator, List, Optional, Tuple

from ..regex import Regex, derive, nullable
from .tokens import Token, TokenType, SourceLocation
from .errors import Diagnostic, check_bounds, create_invalid_character_diagnostic
from .grammar import GrammarTable, get_grammar_table

logger = logging.getLogger(__name__)

# Lexer state passed around by editors; Ada needs a single lexing mode
DEFAULT_STATE = 0

# (root rule index, regex derived from that root)
FrontierEntry = Tuple[int, Regex]


def fold_case(text: str) -> str:
    """
    Lowercase ``text`` one character at a time.

    A character whose lowercase form is not exactly one character long (such
    as U+0130) is kept as is, so offsets in the folded text always match
    offsets in the original text.
    """
    folded = []
    for character in text:
        lowered = character.lower()
        folded.append(lowered if len(lowered) == 1 else character)
    return "".join(folded)


class Lexer:
    """
    Ada lexical analyzer.

    One instance scans one buffer range at a time and is not thread-safe.
    Several instances can run concurrently: the only shared state is the
    immutable grammar table.
    """

    def __init__(self, grammar: Optional[GrammarTable] = None):
        """
        Initialize the lexer.

        Args:
            grammar: Grammar table to use, the shared Ada table by default
        """
        self.grammar = grammar if grammar is not None else get_grammar_table()

        # Original buffer, and its case-folded copy used for matching
        self._buffer = ""
        self._text = ""

        self._lexing_end_offset = 0
        self._lexing_offset = 0
        self._state = DEFAULT_STATE

        self._token_type: Optional[TokenType] = None
        self._token_start = 0
        self._token_end = 0

    # ------------------------------------------------------------------------
    # Pull protocol
    # ------------------------------------------------------------------------

    def start(
        self,
        buffer: str,
        start_offset: int = 0,
        end_offset: Optional[int] = None,
        initial_state: int = DEFAULT_STATE
    ) -> None:
        """
        Start lexing ``buffer[start_offset:end_offset]``.

        The first token is analysed right away: ``token_type`` is valid as
        soon as this returns.

        Raises:
            LexingBoundsError: If the range does not lie within the buffer
        """
        if end_offset is None:
            end_offset = len(buffer)

        check_bounds(len(buffer), start_offset, end_offset)

        self._buffer = buffer
        self._text = fold_case(buffer)

        self._lexing_end_offset = end_offset
        self._lexing_offset = start_offset
        self._state = initial_state

        self._token_type = None
        self._token_start = start_offset
        self._token_end = start_offset

        logger.debug(
            "Lexing range [%d, %d) of %d characters, state %d",
            start_offset, end_offset, len(buffer), initial_state
        )

        self.advance()

    def advance(self) -> None:
        """Analyse the next token, or set ``token_type`` to None at the end."""
        if self._lexing_offset == self._lexing_end_offset:
            self._token_type = None
            return

        self._token_start = self._token_end

        # An apostrophe right after an identifier is always an attribute
        # tick, never the start of a character literal: X'First, T'('a')
        if self._text[self._lexing_offset] == "'" and self._token_type == TokenType.IDENTIFIER:
            self._lexing_offset = self._token_end = self._token_start + 1
            self._token_type = TokenType.APOSTROPHE
            return

        self._token_type, self._token_end = self._scan(self._lexing_offset)
        self._lexing_offset = self._token_end

    def _scan(self, offset: int) -> Tuple[TokenType, int]:
        """
        Recognize the token starting at ``offset``.

        Returns:
            The token type and the (exclusive) end offset of the token
        """
        text = self._text
        end = self._lexing_end_offset

        frontier: List[FrontierEntry] = [(rule.index, rule.regex) for rule in self.grammar]

        # Last frontier containing a complete match, and the number of
        # characters consumed since then
        accepting: List[FrontierEntry] = []
        roll_back_offset = 0

        position = offset

        while True:
            character = text[position]
            position += 1

            survivors: List[FrontierEntry] = []
            for root, regex in frontier:
                advanced = derive(regex, character)
                if advanced is not None:
                    survivors.append((root, advanced))

            frontier = survivors

            if any(nullable(regex) for _, regex in survivors):
                accepting = survivors
                roll_back_offset = 0
            else:
                roll_back_offset += 1

            if not survivors or position == end:
                break

        # A match still in progress at the end of the range is resolved on
        # what survives there, not on an earlier accepting point
        candidates = frontier if frontier and position == end else accepting
        root = self._highest_priority_root(candidates)

        if root is None:
            return TokenType.INVALID, offset + 1

        return self.grammar.kind_of(root), position - roll_back_offset

    def _highest_priority_root(self, candidates: List[FrontierEntry]) -> Optional[int]:
        """Root index of the complete candidate with the highest priority (first wins ties)."""
        best_root = None
        best_priority = 0

        for root, regex in candidates:
            if not nullable(regex):
                continue
            priority = self.grammar.priority_of(root)
            if best_root is None or priority > best_priority:
                best_root = root
                best_priority = priority

        return best_root

    # ------------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------------

    @property
    def state(self) -> int:
        return self._state

    @property
    def token_type(self) -> Optional[TokenType]:
        """Type of the current token, None once the end of the range is reached."""
        return self._token_type

    @property
    def token_start(self) -> int:
        return self._token_start

    @property
    def token_end(self) -> int:
        return self._token_end

    @property
    def buffer_sequence(self) -> str:
        """The buffer passed to ``start`` (not case-folded)."""
        return self._buffer

    @property
    def buffer_end(self) -> int:
        return self._lexing_end_offset

    def current_token(self) -> Optional[Token]:
        """The current token, or None at the end of the range."""
        if self._token_type is None:
            return None
        return Token(self._token_type, self._token_start, self._token_end)

    def tokens(self) -> Iterator[Token]:
        """Lazily yield the current token and every following one."""
        while self._token_type is not None:
            yield Token(self._token_type, self._token_start, self._token_end)
            self.advance()

    def __iter__(self) -> Iterator[Token]:
        return self.tokens()


def first_token(text: str) -> Optional[Token]:
    """
    Return the first token of ``text``.

    Args:
        text: Source text

    Returns:
        The first token, or None if ``text`` is empty
    """
    lexer = Lexer()
    lexer.start(text, 0, len(text), DEFAULT_STATE)
    return lexer.current_token()


def text_tokens(text: str) -> Iterator[Token]:
    """
    Lazily lex the whole of ``text``.

    Every call starts a new lexer at offset 0, so calling it again restarts
    the sequence.
    """
    lexer = Lexer()
    lexer.start(text, 0, len(text), DEFAULT_STATE)
    return lexer.tokens()


def tokenize_string(
    source: str,
    start_offset: int = 0,
    end_offset: Optional[int] = None
) -> List[Token]:
    """
    Convenience function to tokenize a source string.

    Args:
        source: Source code string
        start_offset: Start of the range to lex
        end_offset: End of the range to lex (defaults to the end of the source)

    Returns:
        List of tokens covering the range

    Raises:
        LexingBoundsError: If the range does not lie within the source
    """
    lexer = Lexer()
    lexer.start(source, start_offset, end_offset, DEFAULT_STATE)
    return list(lexer.tokens())


def tokenize_file(filepath: str, encoding: str = "utf-8") -> List[Token]:
    """
    Convenience function to tokenize a source file.

    Raises:
        OSError: If file cannot be read
    """
    with open(filepath, "r", encoding=encoding, newline="") as f:
        source = f.read()

    return tokenize_string(source)


def invalid_token_diagnostics(
    tokens: Iterable[Token],
    source: str,
    filename: str = "<string>"
) -> List[Diagnostic]:
    """Report the INVALID tokens among already lexed ``tokens`` of ``source``."""
    diagnostics = []
    for token in tokens:
        if token.type == TokenType.INVALID:
            location = SourceLocation.from_offset(source, token.start, filename)
            diagnostics.append(
                create_invalid_character_diagnostic(source[token.start], location)
            )
    return diagnostics


def collect_diagnostics(source: str, filename: str = "<string>") -> List[Diagnostic]:
    """Report every INVALID token of ``source`` as a diagnostic."""
    return invalid_token_diagnostics(text_tokens(source), source, filename)
