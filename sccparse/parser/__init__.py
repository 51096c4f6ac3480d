"""
SCC# Parser Package

Implements a recursive descent syntax analyser for SCC#. Instead of a tree
it produces an ordered trace of rule entry/exit and terminal events, and
reports the first syntax error with the full stack of enclosing rules.

Key Features:
- One method per non-terminal, one token of lookahead, no backtracking
- Pluggable trace sinks (recording, streaming, null)
- Error chains with the entry line of every enclosing rule
- Stops at the first error; no recovery
"""

from .grammar import Rule
from .parser import Parser, check_string, check_file
from .errors import SyntaxAnalysisError, ParseDepthError, ErrorFrame, AnalysisResult
from .trace import (
    TraceSink, RecordingTrace, StreamTrace, NullTrace,
    RuleStarted, RuleFinished, TerminalAccepted, ParseSucceeded, ErrorReported,
)

__all__ = [
    # Core parser
    "Parser", "Rule", "check_string", "check_file",

    # Trace sinks and events
    "TraceSink", "RecordingTrace", "StreamTrace", "NullTrace",
    "RuleStarted", "RuleFinished", "TerminalAccepted", "ParseSucceeded", "ErrorReported",

    # Error handling
    "SyntaxAnalysisError", "ParseDepthError", "ErrorFrame", "AnalysisResult",
]
