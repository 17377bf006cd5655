"""
Syntax Tree Definitions
=======================

The language has no nesting and no expression structure, so the tree is
flat:

    SyntaxTree
    └── StatementNode* - the tokens between two ';' terminators

Interpreting what a statement's tokens mean is left entirely to the code
generator.

Design Notes
------------
- Nodes are frozen dataclasses holding tuples, so a tree cannot be changed
  after the parser builds it.
- Each node records the line it started on for error reporting.
"""

from dataclasses import dataclass, field

from bufc.errors import SourceLocation
from bufc.compiler.lexer import Token, TokenType


@dataclass(frozen=True)
class StatementNode:
    """
    One statement: the tokens before its terminator.

    Attributes:
        tokens: The statement's tokens, terminator excluded
        line: Line of the first token (or of the terminator when empty)
        filename: Source filename
    """
    tokens: tuple[Token, ...]
    line: int = 1
    filename: str = "<input>"

    @property
    def location(self) -> SourceLocation:
        return SourceLocation(self.filename, self.line)

    @property
    def head(self) -> Token | None:
        """The leading token, or None for an empty statement."""
        return self.tokens[0] if self.tokens else None

    @property
    def arguments(self) -> tuple[Token, ...]:
        """Tokens following the leading token."""
        return self.tokens[1:]

    def to_dict(self) -> dict:
        return {"type": "Expression", "body": [t.to_dict() for t in self.tokens]}


@dataclass(frozen=True)
class SyntaxTree:
    """
    Root of a parsed program.

    Attributes:
        statements: Statement nodes in source order
    """
    statements: tuple[StatementNode, ...] = field(default_factory=tuple)

    def __len__(self) -> int:
        return len(self.statements)

    def __iter__(self):
        return iter(self.statements)

    def to_dict(self) -> dict:
        """Serializable form used by the diagnostic dumps."""
        return {"type": "Program", "body": [s.to_dict() for s in self.statements]}


# =============================================================================
# Tree Printer
# =============================================================================

class TreePrinter:
    """
    Pretty printer for debugging.

    Usage:
        printer = TreePrinter()
        print(printer.print(tree))

    Output:
        Program
          Statement@1: do '+++'
          Statement@2: write
    """

    def print(self, tree: SyntaxTree) -> str:
        """Render the tree and return it as a string."""
        lines = ["Program"]
        for node in tree:
            words = []
            for token in node.tokens:
                # Keywords read better bare, everything else quoted
                if token.kind == TokenType.KEYWORD:
                    words.append(token.text)
                else:
                    words.append(repr(token.text))
            lines.append(f"  Statement@{node.line}: {' '.join(words)}")
        return "\n".join(lines)
