"""
Token definitions for the SCC# syntax checker.

This module defines every terminal symbol the grammar can reference:
- Keywords (begin, end, if, then, else, while, loop, do, until, call)
- Operators (arithmetic, relational and assignment)
- Literals (identifiers, number constants, string constants)
- Punctuation and the end-of-input sentinel
"""

from enum import Enum
from dataclasses import dataclass


class Symbol(Enum):
    """
    Enumeration of all terminal symbols in SCC#.

    The value of each member is the name used for it in trace output and
    in "expected ..." diagnostics.
    """

    # ========================================================================
    # Special Tokens
    # ========================================================================
    EOF = "eof"                             # End of input sentinel

    # ========================================================================
    # Literals
    # ========================================================================
    IDENTIFIER = "identifier"               # x, total, loop2
    NUMBER_CONSTANT = "numberConstant"      # 42, 3.14
    STRING_CONSTANT = "stringConstant"      # "hello"

    # ========================================================================
    # Keywords
    # ========================================================================
    BEGIN = "begin"
    END = "end"
    IF = "if"
    THEN = "then"
    ELSE = "else"
    WHILE = "while"
    LOOP = "loop"
    DO = "do"
    UNTIL = "until"
    CALL = "call"

    # ========================================================================
    # Operators
    # ========================================================================

    # Arithmetic
    PLUS = "plus"                           # +
    MINUS = "minus"                         # -
    TIMES = "times"                         # *
    DIVIDE = "divide"                       # /

    # Relational
    GREATER_THAN = "greaterThan"            # >
    GREATER_EQUAL = "greaterEqual"          # >=
    EQUALS = "equals"                       # =
    NOT_EQUAL = "notEqual"                  # /=
    LESS_THAN = "lessThan"                  # <
    LESS_EQUAL = "lessEqual"                # <=

    # Assignment
    BECOMES = "becomes"                     # :=

    # ========================================================================
    # Punctuation
    # ========================================================================
    LEFT_PARENTHESIS = "leftParenthesis"    # (
    RIGHT_PARENTHESIS = "rightParenthesis"  # )
    COMMA = "comma"                         # ,
    SEMICOLON = "semicolon"                 # ;

    def __str__(self) -> str:
        return self.value


# Symbols whose trace output includes the raw lexeme
LEXEME_SYMBOLS = frozenset({
    Symbol.IDENTIFIER,
    Symbol.NUMBER_CONSTANT,
    Symbol.STRING_CONSTANT,
})


@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in the source text.

    Only used by lexer diagnostics; the parser works with line numbers.
    """
    filename: str
    line: int
    column: int

    def __str__(self) -> str:
        return f"{self.filename}:{self.line}:{self.column}"


@dataclass(frozen=True)
class Token:
    """
    A lexical token: its terminal symbol, raw text and source line.

    Tokens are immutable once produced and consumed exactly once by the
    parser.
    """
    kind: Symbol
    text: str
    line: int

    def __str__(self) -> str:
        if self.carries_lexeme:
            return f"{self.kind.value}({self.text!r})"
        return self.kind.value

    @property
    def carries_lexeme(self) -> bool:
        """Check if trace output for this token includes its lexeme."""
        return self.kind in LEXEME_SYMBOLS

    @property
    def is_eof(self) -> bool:
        return self.kind is Symbol.EOF


# Lookup tables used by the lexer for keyword/operator recognition

KEYWORDS = {
    "begin": Symbol.BEGIN,
    "end": Symbol.END,
    "if": Symbol.IF,
    "then": Symbol.THEN,
    "else": Symbol.ELSE,
    "while": Symbol.WHILE,
    "loop": Symbol.LOOP,
    "do": Symbol.DO,
    "until": Symbol.UNTIL,
    "call": Symbol.CALL,
}

OPERATORS = {
    # Arithmetic
    "+": Symbol.PLUS,
    "-": Symbol.MINUS,
    "*": Symbol.TIMES,
    "/": Symbol.DIVIDE,

    # Relational
    ">": Symbol.GREATER_THAN,
    ">=": Symbol.GREATER_EQUAL,
    "=": Symbol.EQUALS,
    "/=": Symbol.NOT_EQUAL,
    "<": Symbol.LESS_THAN,
    "<=": Symbol.LESS_EQUAL,

    # Assignment
    ":=": Symbol.BECOMES,

    # Punctuation
    "(": Symbol.LEFT_PARENTHESIS,
    ")": Symbol.RIGHT_PARENTHESIS,
    ",": Symbol.COMMA,
    ";": Symbol.SEMICOLON,
}

# Longest operator first so ">=" wins over ">"
MAX_OPERATOR_LENGTH = max(len(op) for op in OPERATORS)
