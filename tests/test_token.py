import dataclasses

import pytest

from arilex.helper import error_message, get_logger
from arilex.token import TokenType, new_token


class TestToken:
    def test_str(self) -> None:
        assert str(new_token(TokenType.Integer, 42)) == "Integer(42)"
        assert str(new_token(TokenType.Plus)) == "Plus"
        assert str(new_token(TokenType.EOF)) == "EOF"

    def test_immutable(self) -> None:
        token = new_token(TokenType.Integer, 1)
        with pytest.raises(dataclasses.FrozenInstanceError):
            token.value = 2


class TestHelper:
    def test_error_message(self) -> None:
        assert error_message("1 @ 2", 2, "invalid token") == "1 @ 2\n  ^ invalid token\n"

    def test_error_message_multiline(self) -> None:
        source = "1 + 1\n2 $ 3\n4"
        assert error_message(source, 8, "invalid token") == "2 $ 3\n  ^ invalid token\n"

    def test_logger_namespace(self) -> None:
        assert get_logger("foo").name == "arilex.foo"
        assert get_logger("arilex.tokenize").name == "arilex.tokenize"
