"""
Grammar labels and lookahead tables for the SCC# syntax analyser.

Four non-terminals are remainder productions introduced to remove left
recursion: ``<assignment statement remainder>``, ``<if statement remainder>``,
``<expression remainder>`` and ``<condition remainder>``. ``<term>`` is
folded into ``<factor>``.
"""

from enum import Enum

from ..lexer.tokens import Symbol


class Rule(Enum):
    """Non-terminals of the grammar; values are the trace labels."""

    STATEMENT_PART = "<statement part>"
    STATEMENT_LIST = "<statement list>"
    STATEMENT = "<statement>"
    ASSIGNMENT_STATEMENT = "<assignment statement>"
    ASSIGNMENT_REMAINDER = "<assignment statement remainder>"
    IF_STATEMENT = "<if statement>"
    IF_REMAINDER = "<if statement remainder>"
    WHILE_STATEMENT = "<while statement>"
    PROCEDURE_STATEMENT = "<procedure statement>"
    UNTIL_STATEMENT = "<until statement>"
    EXPRESSION = "<expression>"
    EXPRESSION_REMAINDER = "<expression remainder>"
    FACTOR = "<factor>"
    ARGUMENT_LIST = "<argument list>"
    CONDITION = "<condition>"
    CONDITION_REMAINDER = "<condition remainder>"
    CONDITIONAL_OPERATOR = "<conditional operator>"

    @property
    def label(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value


# FIRST sets of the lookahead-dispatched choices

STATEMENT_FIRST = {
    Symbol.IDENTIFIER: Rule.ASSIGNMENT_STATEMENT,
    Symbol.IF: Rule.IF_STATEMENT,
    Symbol.WHILE: Rule.WHILE_STATEMENT,
    Symbol.CALL: Rule.PROCEDURE_STATEMENT,
    Symbol.DO: Rule.UNTIL_STATEMENT,
}

ARITHMETIC_OPERATORS = frozenset({Symbol.PLUS, Symbol.MINUS, Symbol.TIMES, Symbol.DIVIDE})

# Lookaheads on which <expression remainder> takes its empty alternative
EXPRESSION_REMAINDER_EMPTY = frozenset({Symbol.RIGHT_PARENTHESIS, Symbol.SEMICOLON})

FACTOR_TERMINALS = frozenset({Symbol.IDENTIFIER, Symbol.NUMBER_CONSTANT})

CONDITION_OPERANDS = frozenset({
    Symbol.IDENTIFIER,
    Symbol.NUMBER_CONSTANT,
    Symbol.STRING_CONSTANT,
})

CONDITIONAL_OPERATORS = frozenset({
    Symbol.GREATER_THAN,
    Symbol.GREATER_EQUAL,
    Symbol.EQUALS,
    Symbol.NOT_EQUAL,
    Symbol.LESS_THAN,
    Symbol.LESS_EQUAL,
})


# "Expected ..." descriptions reported when no alternative matches
EXPECTED = {
    Rule.STATEMENT: (
        "'identifier', '<if statement>', '<while statement>', "
        "'<procedure statement>' or '<until statement>'"
    ),
    Rule.EXPRESSION_REMAINDER: "'+', '-', '*', '/', ')' or ';'",
    Rule.FACTOR: "'identifier', 'numberConstant' or '('",
    Rule.CONDITION_REMAINDER: "'identifier', 'numberConstant' or 'stringConstant'",
    Rule.CONDITIONAL_OPERATOR: "'>', '>=', '=', '/=', '<' or '<='",
}


def describe_choice(rule: Rule, line: int) -> str:
    """Description of the alternatives of ``rule``, located at ``line``."""
    return f"{EXPECTED[rule]} at line {line}"


def describe_terminal(symbol: Symbol, line: int) -> str:
    """Description of a single required terminal, located at ``line``."""
    return f"'{symbol.value}' at line {line}"
