"""
Lexer (Tokenizer)
=================

This module converts program text into a sequence of tokens for the parser.

Token Categories
----------------
| Kind        | Characters              | Example  |
|-------------|-------------------------|----------|
| PUNCTUATION | ;                       | ;        |
| NUMBER      | 0-9 (maximal run)       | 42       |
| KEYWORD     | word chars (max. run)   | write    |
| OPERATOR    | > < + - . , (max. run)  | >>+.     |

Whitespace separates tokens and is otherwise ignored. Any character that
belongs to none of the classes above is skipped without error.

Keyword Matching
----------------
An identifier is accepted as a keyword when its text *contains* one of
``write``, ``for`` or ``do``. ``double``, ``forward`` and ``rewrite`` are
therefore keywords, while ``foo`` is rejected. See ``keyword_matches``.

Example Usage
-------------
>>> from bufc.compiler.lexer import tokenize
>>> for token in tokenize("for 3 +.;"):
...     print(token)
Token(KEYWORD, 'for', 1)
Token(NUMBER, '3', 1)
Token(OPERATOR, '+.', 1)
Token(PUNCTUATION, ';', 1)
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional
import string

from bufc.errors import SourceLocation
from bufc.compiler.errors import LexError


# =============================================================================
# Token Type Enumeration
# =============================================================================

class TokenType(Enum):
    """Token kinds produced by the lexer."""

    PUNCTUATION = auto()    # statement terminator ';'
    NUMBER = auto()         # decimal digit run
    KEYWORD = auto()        # write, for, do
    OPERATOR = auto()       # raw operation string


class CharClass(Enum):
    """Character classes driving the scanner. The classes are disjoint."""

    WHITESPACE = auto()
    PUNCTUATION = auto()
    DIGIT = auto()
    IDENTIFIER = auto()
    OPERATOR = auto()
    OTHER = auto()


# =============================================================================
# Language Tables
# =============================================================================

PUNCTUATION_CHARS = ";"

DIGIT_CHARS = string.digits

# Word characters; a run that starts with a letter or '_' may continue
# through digits
IDENT_CHARS = string.ascii_letters + string.digits + "_"

OPERATOR_CHARS = "><+-.,"

# Checked in this order when resolving which keyword an identifier means
KEYWORDS: tuple[str, ...] = ("write", "for", "do")


def classify(char: str) -> CharClass:
    """Map a single character to its CharClass."""
    if char.isspace():
        return CharClass.WHITESPACE
    if char in PUNCTUATION_CHARS:
        return CharClass.PUNCTUATION
    if char in DIGIT_CHARS:
        return CharClass.DIGIT
    if char in IDENT_CHARS:
        return CharClass.IDENTIFIER
    if char in OPERATOR_CHARS:
        return CharClass.OPERATOR
    return CharClass.OTHER


def keyword_for(text: str) -> Optional[str]:
    """
    Return the keyword an identifier stands for, or None.

    Matching is by substring: the first keyword in KEYWORDS that occurs
    anywhere in ``text`` wins.
    """
    for keyword in KEYWORDS:
        if keyword in text:
            return keyword
    return None


def keyword_matches(text: str) -> bool:
    """Return True if ``text`` is accepted as a keyword."""
    return keyword_for(text) is not None


# =============================================================================
# Token Data Class
# =============================================================================

@dataclass(frozen=True)
class Token:
    """
    A single token.

    Attributes:
        kind: The TokenType classification
        text: The exact source text of the token
        line: Line on which the token starts (1-indexed)
        filename: Name of the source file
    """
    kind: TokenType
    text: str
    line: int
    filename: str = "<input>"

    def __repr__(self) -> str:
        return f"Token({self.kind.name}, {self.text!r}, {self.line})"

    @property
    def location(self) -> SourceLocation:
        """Return a SourceLocation for error reporting."""
        return SourceLocation(self.filename, self.line)

    def is_terminator(self) -> bool:
        """Return True if this token ends a statement."""
        return self.kind == TokenType.PUNCTUATION

    def to_dict(self) -> dict:
        """Serializable form used by the diagnostic dumps."""
        kind = _DUMP_NAMES.get(self.kind, self.kind.name.lower())
        return {"type": kind, "value": self.text, "line": self.line}


# Names used in tokens.json where they differ from the enum member
_DUMP_NAMES = {TokenType.OPERATOR: "operation"}


# =============================================================================
# Lexer Implementation
# =============================================================================

class Lexer:
    """
    Tokenizes program text.

    Usage:
        lexer = Lexer(source_text, filename)
        tokens = lexer.tokenize()

    Attributes:
        source: The text being tokenized
        filename: Name of the source file (for error reporting)
    """

    def __init__(self, source: str, filename: str = "<input>"):
        self.source = source
        self.filename = filename

        self._pos = 0
        self._line = 1

    def tokenize(self) -> tuple[Token, ...]:
        """
        Scan the whole source.

        Returns:
            The tokens in source order

        Raises:
            LexError: If an identifier is not a keyword
        """
        tokens: list[Token] = []

        while not self._at_end():
            char = self.source[self._pos]
            char_class = classify(char)

            if char_class == CharClass.WHITESPACE:
                if char == "\n":
                    self._line += 1
                self._pos += 1
                continue

            if char_class == CharClass.PUNCTUATION:
                tokens.append(self._make_token(TokenType.PUNCTUATION, char))
                self._pos += 1
                continue

            if char_class == CharClass.DIGIT:
                text = self._scan_run(DIGIT_CHARS)
                tokens.append(self._make_token(TokenType.NUMBER, text))
                continue

            if char_class == CharClass.IDENTIFIER:
                tokens.append(self._scan_keyword())
                continue

            if char_class == CharClass.OPERATOR:
                text = self._scan_run(OPERATOR_CHARS)
                tokens.append(self._make_token(TokenType.OPERATOR, text))
                continue

            # Unknown characters are ignored
            self._pos += 1

        return tuple(tokens)

    # =========================================================================
    # Scanning Helpers
    # =========================================================================

    def _at_end(self) -> bool:
        return self._pos >= len(self.source)

    def _scan_run(self, charset: str) -> str:
        """Consume the longest run of characters from ``charset``."""
        start = self._pos
        while not self._at_end() and self.source[self._pos] in charset:
            self._pos += 1
        return self.source[start:self._pos]

    def _scan_keyword(self) -> Token:
        text = self._scan_run(IDENT_CHARS)
        if not keyword_matches(text):
            raise LexError(text, SourceLocation(self.filename, self._line))
        return self._make_token(TokenType.KEYWORD, text)

    def _make_token(self, kind: TokenType, text: str) -> Token:
        # Runs never span a newline, so the current line is the start line
        return Token(kind=kind, text=text, line=self._line, filename=self.filename)


def tokenize(source: str, filename: str = "<input>") -> tuple[Token, ...]:
    """Tokenize ``source``; convenience wrapper around Lexer."""
    return Lexer(source, filename).tokenize()
