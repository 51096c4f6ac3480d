"""
SCC# Recursive Descent Syntax Analyser

Checks that a token stream conforms to the SCC# grammar using one method per
non-terminal and a single token of lookahead. The analyser builds no tree:
its output is the ordered stream of rule/terminal events pushed to a trace
sink, and on failure a syntax error chained with every enclosing rule.

Grammar (LL(1), no backtracking):

    <statement part>          ::= begin <statement list> end
    <statement list>          ::= <statement> ( ; <statement> )*
    <statement>               ::= <assignment statement> | <if statement>
                                | <while statement> | <procedure statement>
                                | <until statement>
    <assignment statement>    ::= identifier := <assignment statement remainder>
    <assignment statement remainder> ::= stringConstant | <expression>
    <if statement>            ::= if <condition> then <statement list>
                                  <if statement remainder> end if
    <if statement remainder>  ::= ( else <statement list> )?
    <while statement>         ::= while <condition> loop <statement list> end loop
    <procedure statement>     ::= call identifier ( <argument list> )
    <until statement>         ::= do <statement list> until <condition>
    <expression>              ::= <factor> <expression remainder>
    <expression remainder>    ::= ( + | - | * | / ) <factor> | <empty>
    <factor>                  ::= identifier | numberConstant | ( <expression> )
    <argument list>           ::= identifier ( , <argument list> )?
    <condition>               ::= identifier <conditional operator> <condition remainder>
    <condition remainder>     ::= identifier | numberConstant | stringConstant
    <conditional operator>    ::= > | >= | = | /= | < | <=
"""

import logging
from contextlib import contextmanager
from typing import Callable, Dict, Iterator, NoReturn, Optional

from ..lexer.tokens import Token, Symbol
from ..lexer.lexer import Lexer, TokenSource
from .errors import SyntaxAnalysisError, ParseDepthError, AnalysisResult
from .grammar import (
    Rule, STATEMENT_FIRST, ARITHMETIC_OPERATORS, EXPRESSION_REMAINDER_EMPTY,
    FACTOR_TERMINALS, CONDITION_OPERANDS, CONDITIONAL_OPERATORS,
    describe_choice, describe_terminal,
)
from .trace import TraceSink, NullTrace

logger = logging.getLogger(__name__)


class Parser:
    """
    SCC# recursive descent syntax analyser.

    A parser owns its lookahead for the lifetime of one parse; create a new
    parser for every token stream.
    """

    def __init__(self, source: TokenSource, trace: Optional[TraceSink] = None):
        """
        Initialize parser with a token source.

        Args:
            source: Token source, pulled one token at a time
            trace: Sink for rule/terminal events (discarded if omitted)
        """
        self.source = source
        self.trace = trace if trace is not None else NullTrace()
        self.tokens_consumed = 0
        self._lookahead: Optional[Token] = None

        self._init_parsing_tables()

    def _init_parsing_tables(self):
        """Map every non-terminal to the method that recognises it."""
        self.rule_parsers: Dict[Rule, Callable[[], None]] = {
            Rule.STATEMENT_PART: self._statement_part,
            Rule.STATEMENT_LIST: self._statement_list,
            Rule.STATEMENT: self._statement,
            Rule.ASSIGNMENT_STATEMENT: self._assignment_statement,
            Rule.ASSIGNMENT_REMAINDER: self._assignment_remainder,
            Rule.IF_STATEMENT: self._if_statement,
            Rule.IF_REMAINDER: self._if_remainder,
            Rule.WHILE_STATEMENT: self._while_statement,
            Rule.PROCEDURE_STATEMENT: self._procedure_statement,
            Rule.UNTIL_STATEMENT: self._until_statement,
            Rule.EXPRESSION: self._expression,
            Rule.EXPRESSION_REMAINDER: self._expression_remainder,
            Rule.FACTOR: self._factor,
            Rule.ARGUMENT_LIST: self._argument_list,
            Rule.CONDITION: self._condition,
            Rule.CONDITION_REMAINDER: self._condition_remainder,
            Rule.CONDITIONAL_OPERATOR: self._conditional_operator,
        }

    @property
    def lookahead(self) -> Token:
        """The next unconsumed token."""
        if self._lookahead is None:
            raise RuntimeError("parse has not started")
        return self._lookahead

    def parse(self, start: Rule = Rule.STATEMENT_PART) -> None:
        """
        Check the whole token stream against the grammar.

        The start rule must be followed by the eof sentinel. On success a
        single SUCCESS event is emitted.

        Args:
            start: Rule the input must derive from; fragments can be checked
                by starting lower in the grammar

        Raises:
            SyntaxAnalysisError: On the first syntax error, chained with
                every enclosing rule
            ParseDepthError: If the input nests too deeply for the call
                stack; the trace then holds neither outcome event
        """
        if self._lookahead is not None:
            raise RuntimeError("a Parser checks a single token stream; create a new one")

        self._lookahead = self.source.next_token()
        logger.debug("parsing from %s, first token %s on line %d",
                     start.label, self._lookahead, self._lookahead.line)

        try:
            self.rule_parsers[start]()
            self.accept(Symbol.EOF)
        except SyntaxAnalysisError as e:
            logger.debug("syntax error after %d token(s): %s", self.tokens_consumed, e)
            raise
        except RecursionError:
            logger.debug("nesting limit reached after %d token(s)", self.tokens_consumed)
            raise ParseDepthError(self.lookahead, self.tokens_consumed) from None

        self.trace.report_success()
        logger.debug("accepted %d token(s)", self.tokens_consumed)

    def analyse(self, start: Rule = Rule.STATEMENT_PART) -> AnalysisResult:
        """Like ``parse`` but returns the outcome instead of raising a syntax error."""
        try:
            self.parse(start)
        except SyntaxAnalysisError as e:
            return AnalysisResult(e)
        return AnalysisResult()

    # Terminal acceptance

    def accept(self, symbol: Symbol) -> Token:
        """
        Consume the lookahead if it is ``symbol``; otherwise report an error.

        Exactly one token is pulled from the source on success, none on
        failure.
        """
        token = self.lookahead
        if token.kind is not symbol:
            self.report_error(token, describe_terminal(symbol, token.line))

        self.trace.insert_terminal(token)
        self._lookahead = self.source.next_token()
        self.tokens_consumed += 1
        return token

    def report_error(self, token: Token, expected: str) -> NoReturn:
        """Emit the error event and raise the originating syntax error."""
        self.trace.report_error(token, expected)
        raise SyntaxAnalysisError(expected, token)

    @contextmanager
    def _rule(self, rule: Rule) -> Iterator[None]:
        """
        Rule boundary: BEGIN on entry, END on normal exit, and on a syntax
        error a frame for this rule and its entry line.
        """
        line = self.lookahead.line
        self.trace.begin_rule(rule)
        try:
            yield
        except SyntaxAnalysisError as e:
            raise e.within(rule, line) from None
        self.trace.end_rule(rule)

    def _check(self, symbol: Symbol) -> bool:
        return self.lookahead.kind is symbol

    # Statements

    def _statement_part(self):
        with self._rule(Rule.STATEMENT_PART):
            self.accept(Symbol.BEGIN)
            self._statement_list()
            self.accept(Symbol.END)

    def _statement_list(self):
        with self._rule(Rule.STATEMENT_LIST):
            self._statement()
            while self._check(Symbol.SEMICOLON):
                self.accept(Symbol.SEMICOLON)
                self._statement()

    def _statement(self):
        with self._rule(Rule.STATEMENT):
            alternative = STATEMENT_FIRST.get(self.lookahead.kind)
            if alternative is None:
                self.report_error(self.lookahead, describe_choice(Rule.STATEMENT, self.lookahead.line))
            self.rule_parsers[alternative]()

    def _assignment_statement(self):
        with self._rule(Rule.ASSIGNMENT_STATEMENT):
            self.accept(Symbol.IDENTIFIER)
            self.accept(Symbol.BECOMES)
            self._assignment_remainder()

    def _assignment_remainder(self):
        with self._rule(Rule.ASSIGNMENT_REMAINDER):
            if self._check(Symbol.STRING_CONSTANT):
                self.accept(Symbol.STRING_CONSTANT)
            else:
                self._expression()

    def _if_statement(self):
        with self._rule(Rule.IF_STATEMENT):
            self.accept(Symbol.IF)
            self._condition()
            self.accept(Symbol.THEN)
            self._statement_list()
            self._if_remainder()
            self.accept(Symbol.END)
            self.accept(Symbol.IF)

    def _if_remainder(self):
        with self._rule(Rule.IF_REMAINDER):
            if self._check(Symbol.ELSE):
                self.accept(Symbol.ELSE)
                self._statement_list()

    def _while_statement(self):
        with self._rule(Rule.WHILE_STATEMENT):
            self.accept(Symbol.WHILE)
            self._condition()
            self.accept(Symbol.LOOP)
            self._statement_list()
            self.accept(Symbol.END)
            self.accept(Symbol.LOOP)

    def _procedure_statement(self):
        with self._rule(Rule.PROCEDURE_STATEMENT):
            self.accept(Symbol.CALL)
            self.accept(Symbol.IDENTIFIER)
            self.accept(Symbol.LEFT_PARENTHESIS)
            self._argument_list()
            self.accept(Symbol.RIGHT_PARENTHESIS)

    def _until_statement(self):
        # The condition is checked once; repetition is not a syntactic concern
        with self._rule(Rule.UNTIL_STATEMENT):
            self.accept(Symbol.DO)
            self._statement_list()
            self.accept(Symbol.UNTIL)
            self._condition()

    # Expressions

    def _expression(self):
        with self._rule(Rule.EXPRESSION):
            self._factor()
            self._expression_remainder()

    def _expression_remainder(self):
        # At most one extra operator and factor: "x + y + z" stops after "y"
        with self._rule(Rule.EXPRESSION_REMAINDER):
            kind = self.lookahead.kind
            if kind in ARITHMETIC_OPERATORS:
                self.accept(kind)
                self._factor()
            elif kind not in EXPRESSION_REMAINDER_EMPTY:
                self.report_error(
                    self.lookahead, describe_choice(Rule.EXPRESSION_REMAINDER, self.lookahead.line)
                )

    def _factor(self):
        with self._rule(Rule.FACTOR):
            kind = self.lookahead.kind
            if kind in FACTOR_TERMINALS:
                self.accept(kind)
            elif kind is Symbol.LEFT_PARENTHESIS:
                self.accept(Symbol.LEFT_PARENTHESIS)
                self._expression()
                self.accept(Symbol.RIGHT_PARENTHESIS)
            else:
                self.report_error(self.lookahead, describe_choice(Rule.FACTOR, self.lookahead.line))

    def _argument_list(self):
        # Right recursive: each trailing comma nests another argument list
        with self._rule(Rule.ARGUMENT_LIST):
            self.accept(Symbol.IDENTIFIER)
            if self._check(Symbol.COMMA):
                self.accept(Symbol.COMMA)
                self._argument_list()

    # Conditions

    def _condition(self):
        with self._rule(Rule.CONDITION):
            self.accept(Symbol.IDENTIFIER)
            self._conditional_operator()
            self._condition_remainder()

    def _condition_remainder(self):
        with self._rule(Rule.CONDITION_REMAINDER):
            kind = self.lookahead.kind
            if kind not in CONDITION_OPERANDS:
                self.report_error(
                    self.lookahead, describe_choice(Rule.CONDITION_REMAINDER, self.lookahead.line)
                )
            self.accept(kind)

    def _conditional_operator(self):
        with self._rule(Rule.CONDITIONAL_OPERATOR):
            kind = self.lookahead.kind
            if kind not in CONDITIONAL_OPERATORS:
                self.report_error(
                    self.lookahead, describe_choice(Rule.CONDITIONAL_OPERATOR, self.lookahead.line)
                )
            self.accept(kind)


def check_string(source: str, trace: Optional[TraceSink] = None,
                 filename: str = "<string>", start: Rule = Rule.STATEMENT_PART) -> AnalysisResult:
    """
    Convenience function to check a source string.

    Raises:
        LexerError: If the source contains malformed input
        ParseDepthError: If the source nests too deeply to check
    """
    return Parser(Lexer(source, filename), trace).analyse(start)


def check_file(filepath: str, trace: Optional[TraceSink] = None,
               start: Rule = Rule.STATEMENT_PART) -> AnalysisResult:
    """
    Convenience function to check a source file.

    Raises:
        LexerError: If the file contains malformed input
        ParseDepthError: If the file nests too deeply to check
        OSError: If the file cannot be read
    """
    with open(filepath, "r", encoding="utf-8") as f:
        return Parser(Lexer(f, filepath), trace).analyse(start)
