"""
Error handling for the adalex lexer.

Unrecognized characters are not errors as far as the lexer is concerned: they
become INVALID tokens and scanning goes on. The exceptions defined here cover
contract violations by the caller (bad lexing bounds) and mistakes in the
grammar definition itself. ``Diagnostic`` is also used to report INVALID
tokens to tools without raising.

Author: xwest
"""

from typing import Optional
from dataclasses import dataclass
from .tokens import SourceLocation

@dataclass
class Diagnostic:
    """A lexer diagnostic (error, warning, info)."""
    message: str
    location: Optional[SourceLocation]
    severity: str  # "error", "warning", "info", "hint"
    code: Optional[str] = None
    help_text: Optional[str] = None

    def __str__(self) -> str:
        severity_prefix = self.severity.upper()
        if self.code:
            severity_prefix += f"[{self.code}]"
        result = f"{severity_prefix}: {self.message}\n"
        if self.location is not None:
            result += f"  --> {self.location}\n"

        if self.help_text:
            result += f"  help: {self.help_text}\n"

        return result


class LexerError(Exception):
    """
    Base class of the exceptions raised by the lexer.

    Contains detailed diagnostic information for error reporting.
    """

    def __init__(
        self,
        message: str,
        location: Optional[SourceLocation] = None,
        code: Optional[str] = None,
        help_text: Optional[str] = None
    ):
        super().__init__(message)
        self.diagnostic = Diagnostic(
            message=message,
            location=location,
            severity="error",
            code=code,
            help_text=help_text
        )

    def __str__(self) -> str:
        return str(self.diagnostic)


class LexingBoundsError(LexerError, IndexError):
    """
    Raised by ``Lexer.start`` when the requested range lies outside the buffer.

    This is a programming error on the caller's side, bounds are never clamped.
    """

    def __init__(self, message: str, start_offset: int, end_offset: int, buffer_length: int):
        super().__init__(
            message,
            code="L100",
            help_text=f"Valid bounds satisfy 0 <= start <= end <= {buffer_length}."
        )
        self.start_offset = start_offset
        self.end_offset = end_offset
        self.buffer_length = buffer_length


class GrammarError(LexerError):
    """Raised when the lexical grammar table is inconsistent."""

    def __init__(self, message: str):
        super().__init__(message, code="L200")


# Common error codes for categorization
ERROR_CODES = {
    "L001": "Invalid character",
    "L100": "Illegal lexing bounds",
    "L200": "Inconsistent grammar table",
}


def create_invalid_character_diagnostic(char: str, location: SourceLocation) -> Diagnostic:
    """Create the diagnostic reported for an INVALID token."""
    if char.isprintable():
        help_text = f"The character '{char}' is not valid in Ada source code."
    else:
        help_text = f"Non-printable character (Unicode: U+{ord(char):04X}) is not allowed."

    return Diagnostic(
        message=f"{ERROR_CODES['L001']}: {char!r}",
        location=location,
        severity="error",
        code="L001",
        help_text=help_text,
    )


def check_bounds(buffer_length: int, start_offset: int, end_offset: int) -> None:
    """
    Validate a lexing range against a buffer length.

    Raises:
        LexingBoundsError: If the range is not within ``[0, buffer_length]``
    """
    if start_offset < 0:
        raise LexingBoundsError(
            f"Illegal negative lexing start offset: {start_offset}",
            start_offset, end_offset, buffer_length
        )
    if end_offset > buffer_length:
        raise LexingBoundsError(
            f"Illegal lexing end offset greater than total text length: {end_offset}",
            start_offset, end_offset, buffer_length
        )
    if start_offset > end_offset:
        raise LexingBoundsError(
            f"{ERROR_CODES['L100']}: {start_offset} to {end_offset}",
            start_offset, end_offset, buffer_length
        )
