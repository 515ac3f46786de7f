from dataclasses import dataclass
from enum import IntEnum
from typing import Optional


class TokenType(IntEnum):
    # Keywords
    KwLet = 1
    KwFn = 2
    KwVoid = 3
    KwTrue = 4
    KwFalse = 5
    KwIf = 6
    KwElse = 7
    KwWhile = 8
    KwReturn = 9
    KwBreak = 10

    # Literals
    NumLiteral = 11
    StrLiteral = 12

    # Operators
    OpPlus = 13
    OpMinus = 14
    OpMult = 15
    OpDiv = 16
    OpMod = 17
    OpAnd = 18
    OpOr = 19
    OpNot = 20
    OpGt = 21
    OpGe = 22
    OpEq = 23
    OpNe = 24
    OpLt = 25
    OpLe = 26

    # Delimiters
    SemiColon = 27
    Colon = 28
    Comma = 29
    Assignment = 30
    LParen = 31
    RParen = 32
    LSquirly = 33
    RSquirly = 34
    LBracket = 35
    RBracket = 36

    # Others
    Identifier = 37
    Comment = 38
    Eof = 39


KEYWORDS = {
    "let": TokenType.KwLet,
    "fn": TokenType.KwFn,
    "void": TokenType.KwVoid,
    "true": TokenType.KwTrue,
    "false": TokenType.KwFalse,
    "if": TokenType.KwIf,
    "else": TokenType.KwElse,
    "while": TokenType.KwWhile,
    "return": TokenType.KwReturn,
    "break": TokenType.KwBreak,
}

OPERATORS = {
    "+": TokenType.OpPlus,
    "-": TokenType.OpMinus,
    "*": TokenType.OpMult,
    "/": TokenType.OpDiv,
    "%": TokenType.OpMod,
    "&": TokenType.OpAnd,
    "|": TokenType.OpOr,
    "!": TokenType.OpNot,
    ">": TokenType.OpGt,
    ">=": TokenType.OpGe,
    "==": TokenType.OpEq,
    "!=": TokenType.OpNe,
    "<": TokenType.OpLt,
    "<=": TokenType.OpLe,
}

DELIMITERS = {
    ";": TokenType.SemiColon,
    ":": TokenType.Colon,
    ",": TokenType.Comma,
    "=": TokenType.Assignment,
    "(": TokenType.LParen,
    ")": TokenType.RParen,
    "{": TokenType.LSquirly,
    "}": TokenType.RSquirly,
    "[": TokenType.LBracket,
    "]": TokenType.RBracket,
}

# Fixed spelling of every variant without a payload.
LEXEMES = {
    kind: lexeme
    for table in (KEYWORDS, OPERATORS, DELIMITERS)
    for lexeme, kind in table.items()
}
LEXEMES[TokenType.Eof] = ""

PAYLOAD_TYPES = frozenset(
    {
        TokenType.NumLiteral,
        TokenType.StrLiteral,
        TokenType.Identifier,
        TokenType.Comment,
    }
)


@dataclass
class Token:
    kind: TokenType
    text: Optional[str] = None

    @property
    def lexeme(self) -> str:
        if self.kind in PAYLOAD_TYPES:
            return self.text or ""
        return LEXEMES[self.kind]

    def __str__(self) -> str:
        if self.kind in PAYLOAD_TYPES:
            return f'{self.kind.name}("{self.text or ""}")'
        return self.kind.name


def new_token(kind: TokenType, text: Optional[str] = None) -> Token:
    return Token(kind, text)
