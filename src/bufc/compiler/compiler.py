"""
Compiler Main Module
====================

Orchestrates the translation pipeline:

    Source → Lex → Parse → Generate → C source

Usage
-----
Command line:
    $ bufc hello.none -S -o hello.c

Programmatic:
    >>> from bufc.compiler import compile_source
    >>> c_source = compile_source('do +++;write;')

Compilation Pipeline
--------------------
1. **Lexical Analysis**: Convert source to tokens
2. **Parsing**: Split tokens into statements
3. **Code Generation**: Translate statements to C

Error Handling
--------------
The first error aborts the compilation and propagates to the caller as a
CompileError subclass. There is no partial output.

In debug mode the tokens and the tree are written to a DiagnosticSink as
soon as each is produced, so the dumps of the stages that succeeded exist
even when a later stage fails.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from bufc.config import BuildConfig
from bufc.diagnostics import DiagnosticSink
from bufc.compiler.ast import SyntaxTree
from bufc.compiler.codegen import CodeGenerator
from bufc.compiler.lexer import Lexer, Token
from bufc.compiler.parser import Parser


logger = logging.getLogger(__name__)


@dataclass
class CompilerOptions:
    """
    Compiler configuration options.

    Attributes:
        debug: Dump tokens and tree to ``dump_dir``
        dump_dir: Directory for diagnostic dumps
    """
    debug: bool = False
    dump_dir: Path = field(default_factory=lambda: Path("representation"))

    @classmethod
    def from_config(cls, config: BuildConfig) -> "CompilerOptions":
        return cls(debug=config.debug, dump_dir=config.dump_dir)


@dataclass
class CompilerResult:
    """
    Result of a compilation.

    Attributes:
        filename: Source filename
        tokens: Lexer output
        tree: Parser output
        code: Generated C source
    """
    filename: str = ""
    tokens: tuple[Token, ...] = ()
    tree: SyntaxTree = field(default_factory=SyntaxTree)
    code: str = ""

    @property
    def token_count(self) -> int:
        return len(self.tokens)

    @property
    def statement_count(self) -> int:
        return len(self.tree)


class BufCompiler:
    """
    Compiles programs to C.

    Example:
        compiler = BufCompiler()
        result = compiler.compile_file("hello.none")
        print(result.code)

    Attributes:
        options: Compiler configuration options
    """

    def __init__(self, options: Optional[CompilerOptions] = None):
        self.options = options or CompilerOptions()

    def compile_source(self, source: str, filename: str = "<input>") -> CompilerResult:
        """
        Compile program text to C.

        Args:
            source: Program text
            filename: Source filename for error messages

        Returns:
            CompilerResult with every intermediate artifact

        Raises:
            CompileError: If any stage fails
        """
        sink = DiagnosticSink(self.options.dump_dir) if self.options.debug else None

        logger.info("Generating tokens...")
        tokens = Lexer(source, filename).tokenize()
        if sink:
            sink.dump_tokens(tokens)

        logger.info("Generating AST...")
        tree = Parser(tokens, filename).parse()
        if sink:
            sink.dump_tree(tree)

        logger.info("Generating code...")
        code = CodeGenerator().generate(tree)

        logger.debug(f"{len(tokens)} tokens, {len(tree)} statements")
        return CompilerResult(filename=filename, tokens=tokens, tree=tree, code=code)

    def compile_file(self, filepath) -> CompilerResult:
        """
        Compile a program file to C.

        Raises:
            CompileError: If compilation fails
            FileNotFoundError: If the source file does not exist
        """
        path = Path(filepath)
        if not path.exists():
            raise FileNotFoundError(f"Source file not found: {filepath}")

        logger.info("Reading source file...")
        source = path.read_text(encoding="utf-8")

        logger.info("Compiling...")
        return self.compile_source(source, str(filepath))


# =============================================================================
# Convenience Functions
# =============================================================================

def compile_source(source: str, filename: str = "<input>") -> str:
    """
    Compile program text and return the generated C source.

    Raises:
        CompileError: If compilation fails

    Example:
        >>> c_source = compile_source("for 3 +.;")
    """
    return BufCompiler().compile_source(source, filename).code


def compile_file(filepath, output_path=None) -> str:
    """
    Compile a program file and return the generated C source.

    Args:
        filepath: Path to the program file
        output_path: Optional path to also write the C source to

    Raises:
        CompileError: If compilation fails
        FileNotFoundError: If the source file does not exist
    """
    result = BufCompiler().compile_file(filepath)

    if output_path:
        Path(output_path).write_text(result.code, encoding="utf-8")

    return result.code
