from typing import Callable, Optional


INT64_MAX = 9223372036854775807
INT64_DIGITS = len(str(INT64_MAX))

# str.isspace accepts these, Unicode White_Space does not
SEPARATORS = "\x1c\x1d\x1e\x1f"


def is_whitespace(char: str) -> bool:
    return char.isspace() and char not in SEPARATORS


class Cursor:
    """Single-character lookahead over a fully loaded source text.

    ``char`` is the character under the cursor, or ``None`` once the text is
    exhausted. The position only ever moves forward.
    """

    def __init__(self, expression: str) -> None:
        self.expression = expression
        self.position = 0
        self.char: Optional[str] = expression[0] if expression else None

    def advance(self) -> Optional[str]:
        if self.position < len(self.expression):
            self.position += 1
        self.char = (
            self.expression[self.position]
            if self.position < len(self.expression)
            else None
        )
        return self.char

    def advance_while(self, predicate: Callable[[str], bool]) -> None:
        while self.char is not None and predicate(self.char):
            self.advance()

    def skip_whitespace(self) -> None:
        self.advance_while(is_whitespace)

    def advance_and_skip_whitespace(self) -> None:
        self.advance()
        self.skip_whitespace()

    def exhaust(self) -> None:
        self.position = len(self.expression)
        self.char = None
