"""
SCC# Syntax Checker Package

A recursive descent syntax analyser for the SCC# teaching language.

Architecture:
    sccparse/
    ├── lexer/           # Tokens and the pull-based token source
    ├── parser/          # Grammar engine, trace sinks, error chains
    └── cli.py           # Command line front end
"""

__version__ = "1.0.0"
__license__ = "MIT"

from .lexer import Lexer, Token, Symbol, LexerError
from .parser import Parser, Rule, SyntaxAnalysisError, ParseDepthError, RecordingTrace, StreamTrace, check_string, check_file

__all__ = [
    # Core classes
    "Lexer",
    "Parser",
    "Token",
    "Symbol",
    "Rule",
    "RecordingTrace",
    "StreamTrace",

    # Entry points
    "check_string",
    "check_file",

    # Errors
    "LexerError",
    "SyntaxAnalysisError",
    "ParseDepthError",

    # Version info
    "__version__",
    "__license__",
]
