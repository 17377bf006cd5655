"""
bufc - Compiler for the Buffer Machine Language
===============================================

This package compiles programs written in a tiny statement language into
C, and drives a native C compiler to turn them into executables.

The target is a "buffer machine": a fixed array of integer cells and one
movable pointer. Programs manipulate it with strings of single-character
operations (> < + - . ,).

Main Components
---------------
- **compiler**: lexer, parser and C code generator
- **toolchain**: runs the C compiler and manages intermediate files
- **diagnostics**: debug dumps of tokens and syntax tree
- **cli**: the ``bufc`` command

Quick Start
-----------
Compile to C:
    >>> from bufc import compile_source
    >>> c_source = compile_source("do +++;write;")

Build an executable:
    >>> from bufc import build_executable
    >>> binary = build_executable("hello.none")

Or use the command-line tool:
    $ bufc hello.none
    $ ./hello.out
"""

__version__ = "1.0.0"

# =============================================================================
# Public API Exports
# =============================================================================

from bufc.errors import BufcError, SourceLocation, ToolchainError
from bufc.config import BuildConfig
from bufc.compiler import (
    BufCompiler,
    CompilerOptions,
    CompilerResult,
    compile_source,
    compile_file,
    CompileError,
    LexError,
    BufSyntaxError,
    CodegenError,
)
from bufc.diagnostics import DiagnosticSink
from bufc.toolchain import NativeToolchain, build_executable

__all__ = [
    "__version__",
    # Errors
    "BufcError",
    "SourceLocation",
    "ToolchainError",
    "CompileError",
    "LexError",
    "BufSyntaxError",
    "CodegenError",
    # Configuration
    "BuildConfig",
    # Compiler
    "BufCompiler",
    "CompilerOptions",
    "CompilerResult",
    "compile_source",
    "compile_file",
    # Build
    "DiagnosticSink",
    "NativeToolchain",
    "build_executable",
]
