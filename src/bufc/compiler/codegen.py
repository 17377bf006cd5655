"""
C Code Generator
================

Translates a syntax tree into C source for the buffer machine.

Code Generation Strategy
------------------------
The output is the fixed runtime preamble (see ``runtime.py``) followed by a
``main`` function that owns one zero-initialized buffer. Each statement
becomes one straight-line fragment of ``main``, in source order:

| Statement      | Generated C                                         |
|----------------|-----------------------------------------------------|
| do OPS;        | execute(&buffer, "OPS");                            |
| for N OPS;     | for (...; i < N; ...) { execute(&buffer, "OPS"); }  |
|                | buffer.pointer++;                                   |
| write;         | write(&buffer);                                     |

The pointer advance after a ``for`` loop is part of the language: each
``for`` statement uses up one cell and leaves the pointer past it.

Operation strings are passed to the runtime verbatim; the generator never
simulates the buffer.

Usage
-----
>>> from bufc.compiler.lexer import tokenize
>>> from bufc.compiler.parser import parse
>>> from bufc.compiler.codegen import CodeGenerator
>>> c_source = CodeGenerator().generate(parse(tokenize("do +++;write;")))
"""

from typing import Callable

from bufc.compiler.ast import StatementNode, SyntaxTree
from bufc.compiler.errors import CodegenError
from bufc.compiler.lexer import Token, TokenType, keyword_for
from bufc.compiler.runtime import RUNTIME_PREAMBLE


INDENT = "\t"


class CodeGenerator:
    """
    Generates C source from a syntax tree.

    A generator keeps the lines of the program it is currently producing;
    ``generate`` resets them, so one instance can be reused.

    Attributes:
        output: Lines of the ``main`` function generated so far
    """

    def __init__(self):
        self.output: list[str] = []
        self._handlers: dict[str, Callable[[StatementNode], None]] = {
            "do": self._gen_do,
            "for": self._gen_for,
            "write": self._gen_write,
        }

    def generate(self, tree: SyntaxTree) -> str:
        """
        Generate the complete C program.

        Args:
            tree: The parsed program

        Returns:
            C source text

        Raises:
            CodegenError: If a statement is unknown or malformed
        """
        self.output = []

        self._emit("int main(void) {")
        self._emit(f"{INDENT}buffer_t buffer = make_buffer();\n")

        for node in tree:
            self._gen_statement(node)

        self._emit(f"{INDENT}return 0;")
        self._emit("}")

        return "\n".join([RUNTIME_PREAMBLE] + self.output) + "\n"

    # =========================================================================
    # Statement Translation
    # =========================================================================

    def _gen_statement(self, node: StatementNode) -> None:
        head = node.head
        if head is None:
            raise CodegenError(
                "empty statement",
                node.location,
                hint="remove the extra ';'",
            )

        keyword = keyword_for(head.text) if head.kind == TokenType.KEYWORD else None
        if keyword is None:
            raise CodegenError(
                f"statement cannot start with '{head.text}'",
                node.location,
                hint="statements start with 'do', 'for' or 'write'",
            )

        self._handlers[keyword](node)

    def _gen_do(self, node: StatementNode) -> None:
        (operation,) = self._expect_shape(node, "do", (TokenType.OPERATOR,))
        self._emit(f'{INDENT}execute(&buffer, "{operation.text}");')

    def _gen_for(self, node: StatementNode) -> None:
        times, operation = self._expect_shape(
            node, "for", (TokenType.NUMBER, TokenType.OPERATOR)
        )
        # Leading zeros would make the C literal octal
        count = times.text.lstrip("0") or "0"
        self._emit(f"{INDENT}for (unsigned long long i = 0; i < {count}ULL; i++) {{")
        self._emit(f'{INDENT}{INDENT}execute(&buffer, "{operation.text}");')
        self._emit(f"{INDENT}}}")
        self._emit(f"{INDENT}buffer.pointer++;\n")

    def _gen_write(self, node: StatementNode) -> None:
        self._expect_shape(node, "write", ())
        self._emit(f"{INDENT}write(&buffer);")

    # =========================================================================
    # Helpers
    # =========================================================================

    def _expect_shape(
        self,
        node: StatementNode,
        keyword: str,
        shape: tuple[TokenType, ...],
    ) -> tuple[Token, ...]:
        """
        Check a statement's arguments against the kinds its keyword takes.

        Returns:
            The argument tokens

        Raises:
            CodegenError: On a count or kind mismatch
        """
        arguments = node.arguments
        kinds = tuple(token.kind for token in arguments)
        if kinds != shape:
            expected = " ".join(kind.name.lower() for kind in shape) or "nothing"
            found = " ".join(repr(token.text) for token in arguments) or "nothing"
            raise CodegenError(
                f"'{keyword}' expects {expected}, found {found}",
                node.location,
                hint=_USAGE[keyword],
            )
        return arguments

    def _emit(self, line: str) -> None:
        self.output.append(line)


_USAGE = {
    "do": "usage: do <operations>;",
    "for": "usage: for <count> <operations>;",
    "write": "usage: write;",
}


def generate(tree: SyntaxTree) -> str:
    """Generate C source for ``tree``; convenience wrapper."""
    return CodeGenerator().generate(tree)
