"""
Compiler Error Hierarchy
========================

Exceptions raised by the translation pipeline. All of them inherit from
CompileError, which itself inherits from BufcError.

Exception Hierarchy
-------------------
CompileError (base for all pipeline errors)
├── LexError - identifier text that is not a recognized keyword
├── BufSyntaxError - trailing tokens with no statement terminator
└── CodegenError - unknown leading token or wrong statement shape

Every error aborts the current compilation. There is no recovery and no
partial output.

Error Message Format
--------------------
    filename:line: error: description
    hint: suggestion for fixing

Example:
    hello.none:3: error: unknown identifier 'foo'
    hint: statements start with 'do', 'for' or 'write'
"""

from typing import Optional

from bufc.errors import BufcError, SourceLocation


# =============================================================================
# Base Compiler Exception
# =============================================================================

class CompileError(BufcError):
    """
    Base exception for all errors raised while translating a program.

    Attributes:
        message: The error description
        location: Where in the source the error occurred
        hint: A suggestion for fixing the error
    """

    def __init__(
        self,
        message: str,
        location: Optional[SourceLocation] = None,
        hint: Optional[str] = None,
    ):
        self.message = message
        self.location = location
        self.hint = hint
        super().__init__(self._format_message())

    @property
    def line(self) -> Optional[int]:
        """Line the error was reported on, if known."""
        return self.location.line if self.location else None

    def _format_message(self) -> str:
        parts = []

        if self.location:
            parts.append(f"{self.location}: error: {self.message}")
        else:
            parts.append(f"error: {self.message}")

        if self.hint:
            parts.append(f"hint: {self.hint}")

        return "\n".join(parts)


# =============================================================================
# Pipeline Errors
# =============================================================================

class LexError(CompileError):
    """
    An identifier that is not one of the language keywords.

    Example:
        foo;        // 'foo' contains none of write, for, do
    """

    def __init__(self, text: str, location: Optional[SourceLocation] = None):
        self.text = text
        super().__init__(
            f"unknown identifier '{text}'",
            location=location,
            hint="statements start with 'do', 'for' or 'write'",
        )


class BufSyntaxError(CompileError):
    """
    Syntax error in a program.

    The only syntactic rule of the language is that every statement ends
    with ';'. This is raised when tokens remain after the last terminator.

    Note:
        Named BufSyntaxError to stay distinct from the Python builtin
        SyntaxError.
    """

    def __init__(self, location: Optional[SourceLocation] = None):
        super().__init__(
            "missing statement terminator",
            location=location,
            hint="add ';' at the end of the statement",
        )


class CodegenError(CompileError):
    """
    A statement the code generator cannot translate.

    Raised when:
    - a statement does not start with a keyword (including empty statements)
    - a statement has the wrong number or kind of arguments for its keyword
    """
    pass
