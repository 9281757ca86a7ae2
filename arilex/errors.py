"""Exceptions raised while tokenizing.

Every error knows the source text and the character index it failed at, so
callers can render a caret diagnostic with ``arilex.helper.error_message``.
"""

from typing import Optional


class ArilexError(Exception):
    """Base exception for all arilex errors."""

    def __init__(
        self,
        message: str,
        expression: Optional[str] = None,
        location: Optional[int] = None,
    ) -> None:
        self.message = message
        self.expression = expression
        self.location = location
        super().__init__(message)


class NumericOverflowError(ArilexError):
    """A run of digits does not fit in a signed 64-bit integer."""

    def __init__(self, digits: str, expression: str, location: int) -> None:
        self.digits = digits
        super().__init__(
            f"integer literal {digits} out of 64-bit range", expression, location
        )


class UnrecognizedCharacterError(ArilexError):
    """Strict mode met a character that starts no token."""

    def __init__(self, char: str, expression: str, location: int) -> None:
        self.char = char
        super().__init__(f"invalid token {char!r}", expression, location)
