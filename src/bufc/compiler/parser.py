"""
Statement Parser
================

Groups the lexer's tokens into statements.

Grammar
-------
program    ::= statement*
statement  ::= token* ';'

The parser only splits on terminators; it does not check what a statement
contains. Shape checking belongs to the code generator.

Example Usage
-------------
>>> from bufc.compiler.lexer import tokenize
>>> from bufc.compiler.parser import Parser
>>> tree = Parser(tokenize("do >;write;")).parse()
>>> len(tree)
2
"""

from typing import Sequence

from bufc.errors import SourceLocation
from bufc.compiler.lexer import Token
from bufc.compiler.ast import StatementNode, SyntaxTree
from bufc.compiler.errors import BufSyntaxError


class Parser:
    """
    Splits a token sequence into statement nodes.

    A single forward pass: tokens are collected until a terminator closes
    the current statement. The input sequence is never modified.

    Attributes:
        tokens: Tokens to parse
        filename: Source filename for error reporting
    """

    def __init__(self, tokens: Sequence[Token], filename: str = "<input>"):
        self.tokens = tuple(tokens)
        self.filename = filename

    def parse(self) -> SyntaxTree:
        """
        Build the syntax tree.

        Returns:
            SyntaxTree with one node per terminated statement

        Raises:
            BufSyntaxError: If tokens follow the last terminator
        """
        statements: list[StatementNode] = []
        start = 0

        for index, token in enumerate(self.tokens):
            if not token.is_terminator():
                continue
            body = self.tokens[start:index]
            line = body[0].line if body else token.line
            statements.append(StatementNode(body, line, self.filename))
            start = index + 1

        if start < len(self.tokens):
            dangling = self.tokens[start]
            raise BufSyntaxError(SourceLocation(self.filename, dangling.line))

        return SyntaxTree(tuple(statements))


def parse(tokens: Sequence[Token], filename: str = "<input>") -> SyntaxTree:
    """Parse ``tokens``; convenience wrapper around Parser."""
    return Parser(tokens, filename).parse()
