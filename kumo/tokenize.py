from pathlib import Path
from typing import Iterator, Optional

from kumo.token import (
    DELIMITERS,
    KEYWORDS,
    OPERATORS,
    Token,
    TokenType,
    new_token,
)
from kumo.utils import Peekable, get_logger

logger = get_logger(__name__)

WHITESPACE = frozenset(b" \t\n\r\x0c")
IDENTIFIER_CHARS = frozenset(
    b"abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ_"
)
DIGITS = frozenset(b"0123456789")

EQUALS = ord("=")
DOT = ord(".")
NEWLINE = ord("\n")
COMMENT_MARKER = ord("?")

# One byte, no lookahead.
SINGLE_CHAR_TOKENS = {
    ord(lexeme): kind
    for lexeme, kind in (OPERATORS | DELIMITERS).items()
    if lexeme in "+-*/%&|;:,(){}[]"
}

# First byte -> (kind on its own, kind when followed by "=").
TWO_CHAR_TOKENS = {
    ord(">"): (TokenType.OpGt, TokenType.OpGe),
    ord("="): (TokenType.Assignment, TokenType.OpEq),
    ord("!"): (TokenType.OpNot, TokenType.OpNe),
    ord("<"): (TokenType.OpLt, TokenType.OpLe),
}


class SourceFileError(OSError):
    def __init__(self, path: str, reason: str):
        super().__init__(f"cannot read source file {path}: {reason}")
        self.path = path
        self.reason = reason


class Scanner:
    """Turns a source buffer into tokens, one per ``next_token`` call.

    The scanner keeps two indices into the immutable input: ``position`` is
    the byte in ``ch`` and ``read_position`` is the byte that the next
    advance will load. ``ch`` is ``None`` once the cursor has moved past the
    end of the input.
    """

    position: int
    read_position: int
    ch: Optional[int]
    input: bytes

    def __init__(self, source: str | bytes) -> None:
        if isinstance(source, str):
            source = source.encode("utf-8")
        self.position = 0
        self.read_position = 0
        self.ch = None
        self.input = bytes(source)
        self.read_char()

    @classmethod
    def from_file(cls, path: str | Path) -> "Scanner":
        try:
            contents = Path(path).read_bytes()
        except OSError as e:
            raise SourceFileError(str(path), e.strerror or str(e)) from e
        logger.debug("read %d bytes from %s", len(contents), path)
        return cls(contents)

    def __iter__(self) -> Iterator[Token]:
        while (token := self.next_token()) is not None:
            yield token

    def next_token(self) -> Optional[Token]:
        """Return the next token, or ``None``.

        ``None`` means either that the input is exhausted or that the current
        byte does not start any token; the byte is skipped in both cases.
        """
        self.skip_whitespace()
        token = None
        if self.ch is not None:
            token = self.classify(self.ch)
        self.read_char()
        return token

    def classify(self, ch: int) -> Optional[Token]:
        if ch in SINGLE_CHAR_TOKENS:
            return new_token(SINGLE_CHAR_TOKENS[ch])
        if ch in TWO_CHAR_TOKENS:
            short, long = TWO_CHAR_TOKENS[ch]
            if self.peek() == EQUALS:
                self.read_char()
                return new_token(long)
            return new_token(short)
        if ch == COMMENT_MARKER:
            return new_token(TokenType.Comment, self.read_comment())
        if ch in IDENTIFIER_CHARS:
            ident = self.read_identifier()
            if ident in KEYWORDS:
                return new_token(KEYWORDS[ident])
            return new_token(TokenType.Identifier, ident)
        if ch in DIGITS:
            return new_token(TokenType.NumLiteral, self.read_number())
        logger.debug("skipping byte %#04x at offset %d", ch, self.position)
        return None

    def read_char(self) -> None:
        if self.read_position >= len(self.input):
            self.ch = None
        else:
            self.ch = self.input[self.read_position]
        self.position = self.read_position
        self.read_position += 1

    def peek(self) -> Optional[int]:
        if self.read_position >= len(self.input):
            return None
        return self.input[self.read_position]

    def skip_whitespace(self) -> None:
        while self.ch is not None and self.ch in WHITESPACE:
            self.read_char()

    def read_while(self, accepted: frozenset[int]) -> None:
        while (next_ch := self.peek()) is not None and next_ch in accepted:
            self.read_char()

    def read_identifier(self) -> str:
        start = self.position
        self.read_while(IDENTIFIER_CHARS)
        return self.slice(start)

    def read_number(self) -> str:
        start = self.position
        self.read_while(DIGITS)
        if self.peek() == DOT:
            self.read_char()
            self.read_while(DIGITS)
        return self.slice(start)

    def read_comment(self) -> str:
        # The "?" marker is part of the comment text.
        start = self.position
        while (next_ch := self.peek()) is not None and next_ch != NEWLINE:
            self.read_char()
        return self.slice(start)

    def slice(self, start: int) -> str:
        """Decode ``input[start..position]``, both ends inclusive."""
        return self.input[start : self.position + 1].decode("utf-8", errors="replace")


def tokenize(source: str | bytes | Scanner) -> Peekable[Token]:
    if not isinstance(source, Scanner):
        source = Scanner(source)
    return Peekable(source)
