from dataclasses import dataclass
from enum import IntEnum
from typing import Optional


class TokenType(IntEnum):
    Integer = 1
    Plus = 2
    Minus = 3
    Asterisk = 4
    Slash = 5
    LParen = 6
    RParen = 7
    EOF = 8


PUNCTUATORS = {
    "+": TokenType.Plus,
    "-": TokenType.Minus,
    "*": TokenType.Asterisk,
    "/": TokenType.Slash,
    "(": TokenType.LParen,
    ")": TokenType.RParen,
}


@dataclass(frozen=True)
class Token:
    kind: TokenType
    value: Optional[int] = None

    def __str__(self) -> str:
        if self.kind == TokenType.Integer:
            return f"{self.kind.name}({self.value})"
        return self.kind.name


def new_token(token_type: TokenType, value: Optional[int] = None) -> Token:
    return Token(token_type, value)
