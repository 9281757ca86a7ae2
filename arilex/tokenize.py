import string
from typing import Iterator

from arilex.errors import NumericOverflowError, UnrecognizedCharacterError
from arilex.helper import get_logger
from arilex.token import PUNCTUATORS, Token, TokenType, new_token
from arilex.utils import INT64_DIGITS, INT64_MAX, Cursor

logger = get_logger(__name__)


def is_digit(char: str) -> bool:
    return char in string.digits


class Tokenizer:
    """Pull-based tokenizer for integer arithmetic expressions.

    Call :meth:`next_token` until it returns an ``EOF`` token; further calls
    keep returning ``EOF``. With ``strict=False`` an unrecognized character
    ends the stream, with ``strict=True`` it raises
    :class:`UnrecognizedCharacterError`.
    """

    cursor: Cursor
    strict: bool

    def __init__(self, expression: str, strict: bool = False) -> None:
        self.cursor = Cursor(expression)
        self.strict = strict

    def __iter__(self) -> Iterator[Token]:
        while True:
            token = self.next_token()
            yield token
            if token.kind == TokenType.EOF:
                return

    def next_token(self) -> Token:
        cursor = self.cursor
        cursor.skip_whitespace()
        location = cursor.position
        match cursor.char:
            case None:
                return new_token(TokenType.EOF)
            case char if is_digit(char):
                # leaves the cursor on the first non-digit, no whitespace pre-skip
                token = self.read_integer()
            case char if char in PUNCTUATORS:
                token = new_token(PUNCTUATORS[char])
                cursor.advance_and_skip_whitespace()
            case char:
                return self.unrecognized(char)
        logger.debug("token %s at %d", token, location)
        return token

    def read_integer(self) -> Token:
        cursor = self.cursor
        location = cursor.position
        temp = [cursor.char]
        while (char := cursor.advance()) is not None and is_digit(char):
            temp.append(char)
        digits = "".join(temp)
        # int() rejects strings past the interpreter's digit limit
        significant = digits.lstrip("0") or "0"
        if len(significant) > INT64_DIGITS or int(significant) > INT64_MAX:
            raise NumericOverflowError(digits, cursor.expression, location)
        return new_token(TokenType.Integer, int(significant))

    def unrecognized(self, char: str) -> Token:
        cursor = self.cursor
        if self.strict:
            raise UnrecognizedCharacterError(char, cursor.expression, cursor.position)
        logger.warning(
            "unrecognized character %r at %d, truncating input", char, cursor.position
        )
        cursor.exhaust()
        return new_token(TokenType.EOF)


def tokenize(expression: str, strict: bool = False) -> list[Token]:
    return list(Tokenizer(expression, strict=strict))
