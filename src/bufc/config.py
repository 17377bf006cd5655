"""
bufc - Build Configuration
==========================

Settings for a build. Configuration can come from:
- Default values (defined here)
- Environment variables (``BuildConfig.from_env``)
- Command-line options, applied on top by the CLI

Environment variables (all optional):
- BUFC_DEBUG: keep intermediate C and dump tokens/AST (1/true/yes/on)
- BUFC_CC: C compiler executable (default: gcc)
- BUFC_CFLAGS: space separated compiler flags (default: -O3)
- BUFC_DUMP_DIR: directory for tokens.json / ast.json
- BUFC_TIMEOUT: seconds to wait for the C compiler
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional
import os


TRUTHY = ("1", "true", "yes", "on")


@dataclass
class BuildConfig:
    """
    Configuration for one build.

    Attributes:
        debug: Keep the intermediate C file and write diagnostic dumps
        cc: C compiler executable
        cflags: Extra flags passed to the C compiler
        dump_dir: Where tokens.json and ast.json are written in debug mode
        timeout: Seconds to wait for the C compiler
    """

    debug: bool = False
    cc: str = "gcc"
    cflags: List[str] = field(default_factory=lambda: ["-O3"])
    dump_dir: Path = field(default_factory=lambda: Path("representation"))
    timeout: float = 60.0

    @classmethod
    def from_env(cls, environ: Optional[dict] = None) -> "BuildConfig":
        """
        Create a BuildConfig from environment variables.

        Args:
            environ: Mapping to read instead of os.environ
        """
        env = os.environ if environ is None else environ
        config = cls()

        if "BUFC_DEBUG" in env:
            config.debug = env["BUFC_DEBUG"].strip().lower() in TRUTHY

        if env.get("BUFC_CC"):
            config.cc = env["BUFC_CC"]

        if "BUFC_CFLAGS" in env:
            config.cflags = env["BUFC_CFLAGS"].split()

        if env.get("BUFC_DUMP_DIR"):
            config.dump_dir = Path(env["BUFC_DUMP_DIR"])

        if env.get("BUFC_TIMEOUT"):
            config.timeout = float(env["BUFC_TIMEOUT"])

        return config
