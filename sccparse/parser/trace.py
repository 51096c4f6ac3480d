"""
Trace sinks for the SCC# syntax analyser.

The parser pushes structured events to a sink in the exact order rules are
entered and left and terminals accepted. Sinks decide how to keep or render
them; every event renders to one line of the trace format:

    BEGIN <statement part>
    TOKEN identifier 'x' on line 1
    END <statement part>
    SUCCESS
    COMPILATION_EXCEPTION
    EXPECTED 'end' at line 3, found: '+'
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, TextIO, Union

from ..lexer.tokens import Token
from .grammar import Rule


@dataclass(frozen=True)
class RuleStarted:
    rule: Rule

    def render(self) -> List[str]:
        return [f"BEGIN {self.rule.label}"]


@dataclass(frozen=True)
class RuleFinished:
    rule: Rule

    def render(self) -> List[str]:
        return [f"END {self.rule.label}"]


@dataclass(frozen=True)
class TerminalAccepted:
    token: Token

    def render(self) -> List[str]:
        text = self.token.kind.value
        if self.token.carries_lexeme:
            text += f" '{self.token.text}'"
        return [f"TOKEN {text} on line {self.token.line}"]


@dataclass(frozen=True)
class ParseSucceeded:
    def render(self) -> List[str]:
        return ["SUCCESS"]


@dataclass(frozen=True)
class ErrorReported:
    """The single error event of a failed parse."""
    token: Token
    expected: str

    def render(self) -> List[str]:
        return [
            "COMPILATION_EXCEPTION",
            f"EXPECTED {self.expected}, found: '{self.token.text}'",
        ]


TraceEvent = Union[RuleStarted, RuleFinished, TerminalAccepted, ParseSucceeded, ErrorReported]


class TraceSink(ABC):
    """Receives the parser's event stream."""

    def begin_rule(self, rule: Rule) -> None:
        self.emit(RuleStarted(rule))

    def end_rule(self, rule: Rule) -> None:
        self.emit(RuleFinished(rule))

    def insert_terminal(self, token: Token) -> None:
        self.emit(TerminalAccepted(token))

    def report_success(self) -> None:
        self.emit(ParseSucceeded())

    def report_error(self, token: Token, expected: str) -> None:
        self.emit(ErrorReported(token, expected))

    @abstractmethod
    def emit(self, event: TraceEvent) -> None:
        """Handle one event."""


class RecordingTrace(TraceSink):
    """Keeps every event in order."""

    def __init__(self):
        self.events: List[TraceEvent] = []

    def emit(self, event: TraceEvent) -> None:
        self.events.append(event)

    def lines(self) -> List[str]:
        """Render the recorded events in the trace format."""
        return [line for event in self.events for line in event.render()]

    def __len__(self) -> int:
        return len(self.events)


class StreamTrace(TraceSink):
    """
    Writes each event to a text stream as it happens.

    Args:
        stream: Destination for rendered lines
        prefix: Marker written in front of every line
        rules: When False, rule and token events are dropped and only the
            outcome (SUCCESS or the error report) is written
    """

    def __init__(self, stream: TextIO, prefix: str = "", rules: bool = True):
        self.stream = stream
        self.prefix = prefix
        self.rules = rules

    def emit(self, event: TraceEvent) -> None:
        if not self.rules and isinstance(event, (RuleStarted, RuleFinished, TerminalAccepted)):
            return
        for line in event.render():
            self.stream.write(f"{self.prefix}{line}\n")


class NullTrace(TraceSink):
    """Discards all events."""

    def emit(self, event: TraceEvent) -> None:
        pass
