"""
bufc - Compiler Command-Line Interface
======================================

Usage Examples
--------------
Build an executable (hello.none -> hello.out):
    $ bufc hello.none

Emit C only:
    $ bufc -S hello.none -o hello.c

Inspect the front end:
    $ bufc --tokens hello.none
    $ bufc --ast hello.none

Keep intermediate files and dump tokens.json / ast.json:
    $ bufc --debug hello.none
"""

import logging
from pathlib import Path
from typing import Optional

import click

from bufc import __version__
from bufc.config import BuildConfig
from bufc.compiler import (
    BufCompiler,
    CompilerOptions,
    TreePrinter,
    parse,
    tokenize,
)
from bufc.cli.errors import handle_cli_exception
from bufc.toolchain import build_executable


def setup_logging(verbose: bool) -> None:
    """Configure logging based on verbosity."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s" if verbose else "%(message)s",
    )


# =============================================================================
# CLI Definition
# =============================================================================

@click.command()
@click.argument(
    "input_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "-o", "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Output file (default: input with .none replaced by .out, "
         "or input.c with -S)",
)
@click.option(
    "-S", "--emit-c",
    is_flag=True,
    help="Write the generated C source and stop",
)
@click.option(
    "--tokens",
    is_flag=True,
    help="Print the token sequence and exit (for debugging)",
)
@click.option(
    "--ast",
    is_flag=True,
    help="Print the syntax tree and exit (for debugging)",
)
@click.option(
    "--debug",
    is_flag=True,
    help="Keep the intermediate C file and dump tokens/AST as JSON",
)
@click.option(
    "--cc",
    default=None,
    help="C compiler to use (default: gcc, or $BUFC_CC)",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output",
)
@click.version_option(version=__version__, prog_name="bufc")
def main(
    input_file: Path,
    output: Optional[Path],
    emit_c: bool,
    tokens: bool,
    ast: bool,
    debug: bool,
    cc: Optional[str],
    verbose: bool,
) -> None:
    """
    Compile a buffer machine program.

    INPUT_FILE is the program source (.none) to compile.

    \b
    Statements:
        do <ops>;             run <ops> once
        for <n> <ops>;        run <ops> n times, then move the pointer right
        write;                print cells 0..pointer

    \b
    Operations:
        >  <   move pointer        +  -   change current cell
        .      print buffer        ,      reset buffer
    """
    setup_logging(verbose)

    config = BuildConfig.from_env()
    if debug:
        config.debug = True
    if cc:
        config.cc = cc

    try:
        # Front-end dumps stop before the stages they don't need
        if tokens or ast:
            source = input_file.read_text(encoding="utf-8")
            token_list = tokenize(source, str(input_file))
            if tokens:
                for token in token_list:
                    click.echo(repr(token))
            else:
                click.echo(TreePrinter().print(parse(token_list, str(input_file))))
            return

        if emit_c:
            compiler = BufCompiler(CompilerOptions.from_config(config))
            result = compiler.compile_file(input_file)

            if output is None:
                output = input_file.with_name(input_file.name + ".c")
            output.write_text(result.code, encoding="utf-8")
            click.echo(f"Compiled {input_file} -> {output}")
            return

        binary = build_executable(input_file, config=config, output_path=output)
        click.echo(f"Built {input_file} -> {binary}")

    except Exception as e:
        handle_cli_exception(e, verbose)


if __name__ == "__main__":
    main()
