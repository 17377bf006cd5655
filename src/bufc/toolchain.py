"""
Native Toolchain Driver
=======================

Turns a program into an executable:

    hello.none → (bufc) → hello.none.c → (gcc) → hello.out

The C compiler is an external collaborator. Its failures are reported as
ToolchainError with the command, exit status and output attached; they are
not reinterpreted.

Usage
-----
>>> from bufc.toolchain import build_executable
>>> binary = build_executable("hello.none")

Artifacts
---------
- ``<source>.c`` is written next to the source file and deleted after the
  build unless debug mode is on.
- The binary is written next to the source, named by replacing ``.none``
  with ``.out`` (``<source>.out`` when the name has no ``.none``).
"""

import logging
import subprocess
from pathlib import Path
from typing import Optional

from bufc.config import BuildConfig
from bufc.errors import ToolchainError
from bufc.compiler.compiler import BufCompiler, CompilerOptions


logger = logging.getLogger(__name__)

SOURCE_SUFFIX = ".none"
BINARY_SUFFIX = ".out"


def c_path_for(source_path: Path) -> Path:
    """Path of the intermediate C file for ``source_path``."""
    return source_path.with_name(source_path.name + ".c")


def binary_path_for(source_path: Path) -> Path:
    """Path of the executable built from ``source_path``."""
    name = source_path.name
    if SOURCE_SUFFIX in name:
        return source_path.with_name(name.replace(SOURCE_SUFFIX, BINARY_SUFFIX, 1))
    return source_path.with_name(name + BINARY_SUFFIX)


class NativeToolchain:
    """
    Wrapper around the system C compiler.

    Attributes:
        cc: Compiler executable
        cflags: Flags placed after the input file
        timeout: Seconds to wait before giving up
    """

    def __init__(
        self,
        cc: str = "gcc",
        cflags: Optional[list[str]] = None,
        timeout: float = 60.0,
    ):
        self.cc = cc
        self.cflags = ["-O3"] if cflags is None else list(cflags)
        self.timeout = timeout

    @classmethod
    def from_config(cls, config: BuildConfig) -> "NativeToolchain":
        return cls(cc=config.cc, cflags=config.cflags, timeout=config.timeout)

    def command(self, c_path: Path, binary_path: Path) -> list[str]:
        """Command line used to compile ``c_path`` into ``binary_path``."""
        return [self.cc, str(c_path), *self.cflags, "-o", str(binary_path)]

    def build(self, c_path: Path, binary_path: Path) -> Path:
        """
        Compile a C file into an executable.

        Returns:
            Path of the executable

        Raises:
            ToolchainError: If the compiler is missing, fails, or times out
        """
        cmd = self.command(c_path, binary_path)
        logger.debug(f"Running: {' '.join(cmd)}")

        try:
            result = subprocess.run(
                cmd,
                capture_output=True,
                text=True,
                timeout=self.timeout,
            )
        except subprocess.TimeoutExpired:
            raise ToolchainError(
                f"C compiler timed out after {self.timeout:g}s",
                command=cmd,
            )
        except FileNotFoundError:
            raise ToolchainError(
                f"C compiler '{self.cc}' not found - is it installed?",
                command=cmd,
            )

        if result.returncode != 0:
            raise ToolchainError(
                f"C compiler failed for {c_path}",
                command=cmd,
                return_code=result.returncode,
                stdout=result.stdout,
                stderr=result.stderr,
            )

        return binary_path


def build_executable(
    source_path,
    config: Optional[BuildConfig] = None,
    output_path=None,
    toolchain: Optional[NativeToolchain] = None,
) -> Path:
    """
    Compile a program file all the way to an executable.

    Args:
        source_path: Program file to build
        config: Build configuration (defaults from the environment)
        output_path: Executable path (default: see ``binary_path_for``)
        toolchain: C compiler wrapper (default: built from ``config``)

    Returns:
        Path of the executable

    Raises:
        BufcError: If compilation or the native build fails
        FileNotFoundError: If the source file does not exist
    """
    config = config or BuildConfig.from_env()
    toolchain = toolchain or NativeToolchain.from_config(config)
    source_path = Path(source_path)

    compiler = BufCompiler(CompilerOptions.from_config(config))
    result = compiler.compile_file(source_path)

    logger.info("Writing output...")
    c_path = c_path_for(source_path)
    c_path.write_text(result.code, encoding="utf-8")

    binary_path = Path(output_path) if output_path else binary_path_for(source_path)

    # On failure the C file is left behind for inspection
    logger.info("Generating binary executable...")
    toolchain.build(c_path, binary_path)

    if not config.debug:
        logger.info("Removing artifacts...")
        c_path.unlink(missing_ok=True)

    logger.info("Done!")
    return binary_path
