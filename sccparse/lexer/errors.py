"""
Error handling for the SCC# lexer.

Lexer errors are token-source failures: they abort a parse outright and are
never turned into syntax errors or wrapped with grammar context.
"""

from typing import Optional, List
from dataclasses import dataclass

from .tokens import SourceLocation


@dataclass
class Diagnostic:
    """A lexer error with its location and repair hints."""
    message: str
    location: SourceLocation
    code: Optional[str] = None
    help_text: Optional[str] = None
    suggestions: Optional[List[str]] = None

    @property
    def category(self) -> Optional[str]:
        """Short name of the error code, e.g. "Invalid character"."""
        return ERROR_CODES.get(self.code)

    def __str__(self) -> str:
        header = f"error[{self.code}]" if self.code else "error"
        result = f"{header}: {self.message}\n"
        result += f"  --> {self.location}\n"

        if self.help_text:
            result += f"  help: {self.help_text}\n"

        if self.suggestions:
            result += "  suggestions:\n"
            for suggestion in self.suggestions:
                result += f"    - {suggestion}\n"

        return result


class LexerError(Exception):
    """
    Exception raised when the lexer cannot produce the next token.

    Contains detailed diagnostic information for error reporting.
    """

    def __init__(
        self,
        message: str,
        location: SourceLocation,
        code: Optional[str] = None,
        help_text: Optional[str] = None,
        suggestions: Optional[List[str]] = None
    ):
        super().__init__(message)
        self.diagnostic = Diagnostic(
            message=message,
            location=location,
            code=code,
            help_text=help_text,
            suggestions=suggestions
        )

    @property
    def location(self) -> SourceLocation:
        return self.diagnostic.location

    def __str__(self) -> str:
        return str(self.diagnostic)


# Error codes for categorization
ERROR_CODES = {
    "L001": "Invalid character",
    "L002": "Unterminated string constant",
}


class ErrorRecovery:
    """Suggestion helpers for lexer diagnostics."""

    @staticmethod
    def suggest_operator_corrections(invalid_char: str) -> List[str]:
        """Suggest the operators a stray character was probably part of."""
        from .tokens import OPERATORS

        return [op for op in OPERATORS if invalid_char in op and op != invalid_char][:3]


def create_invalid_character_error(char: str, location: SourceLocation) -> LexerError:
    """Create an error for a character that starts no token."""
    suggestions = ErrorRecovery.suggest_operator_corrections(char)

    if char.isprintable():
        help_text = f"The character '{char}' is not valid in SCC# source code."
    else:
        help_text = f"Non-printable character (Unicode: U+{ord(char):04X}) is not allowed."

    return LexerError(
        message=f"Invalid character: '{char}'",
        location=location,
        code="L001",
        help_text=help_text,
        suggestions=[f"Did you mean '{op}'?" for op in suggestions]
    )


def create_unterminated_string_error(location: SourceLocation) -> LexerError:
    """Create an error for a string constant with no closing quote."""
    return LexerError(
        message="Unterminated string constant",
        location=location,
        code="L002",
        help_text="String constants must be closed with '\"' on the same line.",
        suggestions=["Add a closing '\"'"]
    )
