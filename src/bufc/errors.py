"""
bufc Error Hierarchy
====================

This module defines the exception hierarchy for the whole toolchain.
All exceptions inherit from BufcError, allowing callers to catch every
toolchain-related error with a single except clause if desired.

Exception Hierarchy
-------------------
BufcError (base)
├── CompileError (translation pipeline, see bufc.compiler.errors)
│   ├── LexError - identifier that is not a keyword
│   ├── BufSyntaxError - statement without a terminator
│   └── CodegenError - malformed or unknown statement
└── ToolchainError - the native C compiler failed

Design Philosophy
-----------------
Compile errors capture the source location (filename, line) where they
occurred. Toolchain errors capture the command that was run together with
its exit status and output, so a failing gcc invocation can be reproduced
by hand.
"""

from dataclasses import dataclass
from typing import Optional


# =============================================================================
# Base Exception Class
# =============================================================================

class BufcError(Exception):
    """
    Base exception for all bufc errors.

        try:
            compiler.compile_file("hello.none")
        except BufcError as e:
            print(f"Error: {e}")
    """
    pass


# =============================================================================
# Source Location Tracking
# =============================================================================

@dataclass(frozen=True)
class SourceLocation:
    """
    A location in a source file, used for error reporting.

    The language has no column-sensitive constructs, so only the line is
    tracked.

    Attributes:
        filename: Name of the source file (or "<input>" for string input)
        line: Line number (1-indexed)
    """
    filename: str
    line: int

    def __str__(self) -> str:
        """Format as 'filename:line' for error messages."""
        return f"{self.filename}:{self.line}"


# =============================================================================
# Native Toolchain Exceptions
# =============================================================================

class ToolchainError(BufcError):
    """
    The external C compiler could not turn generated code into a binary.

    Raised when:
    - the compiler executable is not installed
    - the compiler exits with a non-zero status
    - the compiler does not finish within the configured timeout

    Attributes:
        message: Short description of the failure
        command: The command line that was executed
        return_code: Exit status, or None if the process never finished
        stdout: Captured standard output
        stderr: Captured standard error
    """

    def __init__(
        self,
        message: str,
        command: Optional[list[str]] = None,
        return_code: Optional[int] = None,
        stdout: str = "",
        stderr: str = "",
    ):
        self.message = message
        self.command = command or []
        self.return_code = return_code
        self.stdout = stdout
        self.stderr = stderr
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        parts = [self.message]
        if self.command:
            parts.append(f"command: {' '.join(self.command)}")
        if self.return_code is not None:
            parts.append(f"exit status: {self.return_code}")
        if self.stderr.strip():
            parts.append(self.stderr.rstrip())
        return "\n".join(parts)
