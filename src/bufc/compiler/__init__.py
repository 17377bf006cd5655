"""
bufc Compiler
=============

Translates programs for the buffer machine into C source.

Pipeline
--------
    Source → Lexer → tokens → Parser → SyntaxTree → Code Generator → C

Each stage is a pure function of the previous stage's output.

Language
--------
    do <operations>;            run the operations once
    for <count> <operations>;   run them <count> times, then advance pointer
    write;                      print cells 0..pointer

Usage
-----
>>> from bufc.compiler import compile_source
>>> c_source = compile_source("for 3 +.;")
"""

from bufc.compiler.compiler import (
    BufCompiler,
    CompilerOptions,
    CompilerResult,
    compile_source,
    compile_file,
)
from bufc.compiler.errors import (
    CompileError,
    LexError,
    BufSyntaxError,
    CodegenError,
)
from bufc.compiler.lexer import (
    Lexer,
    Token,
    TokenType,
    CharClass,
    classify,
    keyword_for,
    keyword_matches,
    tokenize,
)
from bufc.compiler.parser import Parser, parse
from bufc.compiler.codegen import CodeGenerator, generate
from bufc.compiler.ast import StatementNode, SyntaxTree, TreePrinter

__all__ = [
    # Main API
    "BufCompiler",
    "CompilerOptions",
    "CompilerResult",
    "compile_source",
    "compile_file",
    # Errors
    "CompileError",
    "LexError",
    "BufSyntaxError",
    "CodegenError",
    # Lexer
    "Lexer",
    "Token",
    "TokenType",
    "CharClass",
    "classify",
    "keyword_for",
    "keyword_matches",
    "tokenize",
    # Parser
    "Parser",
    "parse",
    # Code Generator
    "CodeGenerator",
    "generate",
    # Tree
    "StatementNode",
    "SyntaxTree",
    "TreePrinter",
]
