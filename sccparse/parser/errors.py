"""
Error handling for the SCC# syntax analyser.

A syntax error originates at exactly one point (a terminal mismatch or a
choice with no matching alternative) and then gathers one context frame per
enclosing rule while the parse unwinds. Frames are kept innermost (origin)
first; ``trace()`` renders them outermost first, each nested rule indented
under the one that contains it.
"""

from typing import Optional, Tuple
from dataclasses import dataclass

from ..lexer.tokens import Token
from .grammar import Rule


@dataclass(frozen=True)
class ErrorFrame:
    """One entry of an error chain."""
    context: str
    line: int
    message: str

    @classmethod
    def for_rule(cls, rule: Rule, line: int) -> "ErrorFrame":
        """Frame for a rule that began on ``line``."""
        return cls(rule.label, line, f"'{rule.label}' at line {line}.")


class SyntaxAnalysisError(Exception):
    """
    Exception raised when the token stream does not match the grammar.

    Attributes:
        expected: Description of what the grammar required
        found: The offending lookahead token
        frames: Error chain, innermost (origin) first
    """

    def __init__(self, expected: str, found: Token, frames: Tuple[ErrorFrame, ...] = ()):
        self.expected = expected
        self.found = found
        self.message = f"expected {expected}, found: '{found.text}'"
        super().__init__(self.message)
        self.frames = frames or (ErrorFrame(expected, found.line, self.message),)

    @property
    def line(self) -> int:
        return self.found.line

    @property
    def origin(self) -> ErrorFrame:
        return self.frames[0]

    @property
    def rules(self) -> Tuple[str, ...]:
        """Labels of the enclosing rules, innermost first."""
        return tuple(frame.context for frame in self.frames[1:])

    def within(self, rule: Rule, line: int) -> "SyntaxAnalysisError":
        """Return a copy of this error with a frame for ``rule`` appended."""
        return SyntaxAnalysisError(
            self.expected,
            self.found,
            self.frames + (ErrorFrame.for_rule(rule, line),),
        )

    def trace(self, indent: str = "  ") -> str:
        """Render the chain outermost first, one nested frame per line."""
        outermost_first = reversed(self.frames)
        return "\n".join(
            f"{indent * depth}{frame.message}" for depth, frame in enumerate(outermost_first)
        )

    def __str__(self) -> str:
        return self.message



class ParseDepthError(Exception):
    """
    Exception raised when the input nests deeper than the call stack allows.

    The input may well be valid, so this is not a syntax error: no error
    event is emitted and no chain is built.

    Attributes:
        token: Lookahead at the point the parse was abandoned
        tokens_consumed: Terminals accepted before that point
    """

    def __init__(self, token: Token, tokens_consumed: int):
        self.token = token
        self.tokens_consumed = tokens_consumed
        super().__init__(
            f"input nests too deeply to check (line {token.line}, "
            f"after {tokens_consumed} token(s))"
        )

    @property
    def line(self) -> int:
        return self.token.line

@dataclass(frozen=True)
class AnalysisResult:
    """Outcome of one parse: success, or the fully chained syntax error."""
    error: Optional[SyntaxAnalysisError] = None

    @property
    def succeeded(self) -> bool:
        return self.error is None

    @property
    def frames(self) -> Tuple[ErrorFrame, ...]:
        return self.error.frames if self.error else ()

    def __bool__(self) -> bool:
        return self.succeeded
