"""
SCC# Lexer Package

Implements the token source consumed by the syntax analyser.

Key Features:
- Pull-based: one token produced per request, one line of text buffered
- Keyword, operator, identifier, number and string constant recognition
- Line numbers on every token for diagnostics
- I/O failures propagate unchanged; malformed input raises LexerError
"""

from .tokens import Token, Symbol, SourceLocation, KEYWORDS, OPERATORS
from .lexer import Lexer, TokenSource, TokenStream, tokenize_string, tokenize_file
from .errors import LexerError, Diagnostic

__all__ = [
    "Lexer",
    "TokenSource",
    "TokenStream",
    "tokenize_string",
    "tokenize_file",
    "Token",
    "Symbol",
    "SourceLocation",
    "KEYWORDS",
    "OPERATORS",
    "LexerError",
    "Diagnostic",
]
