"""
SCC# Lexer - turns source text into tokens on demand.

The lexer is a pull-based token source: the parser asks for one token at a
time and the lexer reads the underlying text a line at a time, so a parse
never holds more than one line of source plus one token of lookahead.
"""

import io
import logging
import re
from typing import Iterable, Iterator, List, Optional, Protocol, TextIO, Union

from .tokens import Token, Symbol, SourceLocation, KEYWORDS, OPERATORS, MAX_OPERATOR_LENGTH
from .errors import create_invalid_character_error, create_unterminated_string_error

logger = logging.getLogger(__name__)


class TokenSource(Protocol):
    """Anything the parser can pull tokens from."""

    def next_token(self) -> Token:
        """Return the next token, or the eof sentinel once input is exhausted."""
        ...


class Lexer:
    """
    SCC# lexical analyzer.

    Reads from a string or a text stream. ``OSError`` raised by the stream
    propagates to the caller untouched; malformed input raises
    ``LexerError``.
    """

    def __init__(self, source: Union[str, TextIO], filename: str = "<string>"):
        """
        Initialize the lexer.

        Args:
            source: Source code string, or a readable text stream
            filename: Name of source file for error reporting
        """
        if isinstance(source, str):
            source = io.StringIO(source)
        self.stream = source
        self.filename = filename
        self.line = 0
        self._text = ""
        self._pos = 0
        self._exhausted = False

        self._compile_patterns()

    def _compile_patterns(self):
        """Compile regex patterns used by the lexer."""
        self.whitespace_pattern = re.compile(r'\s+')
        self.identifier_pattern = re.compile(r'[A-Za-z][A-Za-z0-9_]*')
        self.number_pattern = re.compile(r'\d+(?:\.\d+)?')
        self.string_pattern = re.compile(r'"([^"\n]*)"')

    def next_token(self) -> Token:
        """Get the next token from the source."""
        while True:
            if self._pos >= len(self._text) and not self._read_line():
                return Token(Symbol.EOF, "", self.line)

            match = self.whitespace_pattern.match(self._text, self._pos)
            if match:
                self._pos = match.end()
                continue

            return self._scan_token()

    def tokenize(self) -> List[Token]:
        """
        Tokenize the remaining input.

        Returns:
            List of tokens ending with the eof token
        """
        tokens = []
        while True:
            token = self.next_token()
            tokens.append(token)
            if token.is_eof:
                return tokens

    def _read_line(self) -> bool:
        """Pull the next line of text; False once the stream is drained."""
        if self._exhausted:
            return False

        text = self.stream.readline()
        if not text:
            self._exhausted = True
            logger.debug("reached end of %s after %d line(s)", self.filename, self.line)
            # eof is reported on the last line that held text
            self.line = max(self.line, 1)
            return False

        self.line += 1
        self._text = text
        self._pos = 0
        return True

    def _scan_token(self) -> Token:
        start = self._pos
        current_char = self._text[start]

        # Identifiers and keywords
        match = self.identifier_pattern.match(self._text, start)
        if match:
            lexeme = match.group(0)
            self._pos = match.end()
            return Token(KEYWORDS.get(lexeme, Symbol.IDENTIFIER), lexeme, self.line)

        # Number constants
        match = self.number_pattern.match(self._text, start)
        if match:
            self._pos = match.end()
            return Token(Symbol.NUMBER_CONSTANT, match.group(0), self.line)

        # String constants keep their contents, not the quotes
        if current_char == '"':
            match = self.string_pattern.match(self._text, start)
            if not match:
                raise create_unterminated_string_error(self._location(start))
            self._pos = match.end()
            return Token(Symbol.STRING_CONSTANT, match.group(1), self.line)

        # Operators and punctuation (longest first)
        for op_len in range(MAX_OPERATOR_LENGTH, 0, -1):
            potential_op = self._text[start:start + op_len]
            if len(potential_op) == op_len and potential_op in OPERATORS:
                self._pos = start + op_len
                return Token(OPERATORS[potential_op], potential_op, self.line)

        raise create_invalid_character_error(current_char, self._location(start))

    def _location(self, pos: int) -> SourceLocation:
        return SourceLocation(self.filename, self.line, pos + 1)


class TokenStream:
    """
    Token source over pre-built tokens.

    Yields the given tokens in order, then the eof sentinel forever. An eof
    token inside the iterable ends the stream early.
    """

    def __init__(self, tokens: Iterable[Token]):
        self._tokens: Iterator[Token] = iter(tokens)
        self._eof: Optional[Token] = None
        self._last_line = 1

    def next_token(self) -> Token:
        if self._eof is None:
            token = next(self._tokens, None)
            if token is None:
                self._eof = Token(Symbol.EOF, "", self._last_line)
            elif token.is_eof:
                self._eof = token
            else:
                self._last_line = token.line
                return token
        return self._eof


def tokenize_string(source: str, filename: str = "<string>") -> List[Token]:
    """Tokenize a source string into a list ending with eof."""
    return Lexer(source, filename).tokenize()


def tokenize_file(filepath: str) -> List[Token]:
    """
    Tokenize a source file into a list ending with eof.

    Raises:
        LexerError: If the file contains malformed input
        OSError: If the file cannot be read
    """
    with open(filepath, "r", encoding="utf-8") as f:
        return Lexer(f, filepath).tokenize()
