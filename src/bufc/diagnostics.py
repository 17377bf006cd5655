"""
Diagnostic Dumps
================

Writes the intermediate artifacts of a compilation to disk for inspection:

- ``tokens.json``: the lexer output
- ``ast.json``: the parser output

Dumps are only written in debug mode and never affect the generated code.
"""

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Sequence

if TYPE_CHECKING:
    from bufc.compiler.ast import SyntaxTree
    from bufc.compiler.lexer import Token


logger = logging.getLogger(__name__)

TOKENS_FILENAME = "tokens.json"
TREE_FILENAME = "ast.json"


class DiagnosticSink:
    """
    Writes token and tree dumps into a directory.

    The directory is created on the first write.

    Attributes:
        directory: Where dump files are written
    """

    def __init__(self, directory: Path):
        self.directory = Path(directory)

    def dump_tokens(self, tokens: Sequence["Token"]) -> Path:
        """Write the token sequence to tokens.json and return its path."""
        return self._write(TOKENS_FILENAME, [token.to_dict() for token in tokens])

    def dump_tree(self, tree: "SyntaxTree") -> Path:
        """Write the syntax tree to ast.json and return its path."""
        return self._write(TREE_FILENAME, tree.to_dict())

    def _write(self, filename: str, data) -> Path:
        self.directory.mkdir(parents=True, exist_ok=True)
        path = self.directory / filename
        path.write_text(json.dumps(data, indent=2), encoding="utf-8")
        logger.debug(f"Wrote {path}")
        return path
