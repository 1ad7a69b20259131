"""
Summary: Token types and the push-back token stream consumed by the tree builder.
Why: Keep lexical structure separate from tree construction and error reporting.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from enum import Enum
from typing import final


class TokenKind(Enum):
    """Lexical category of a token."""

    NAME = "name"
    LEFT_BRACKET = "left_bracket"
    RIGHT_BRACKET = "right_bracket"
    COMMA = "comma"

    @property
    def is_structural(self) -> bool:
        """Return whether the kind is a delimiter rather than name text."""

        return self is not TokenKind.NAME


@final
@dataclass(frozen=True, slots=True)
class Token:
    """A single token produced by the tokenizer.

    Attributes:
        kind: Lexical category.
        text: Resolved text. For structural tokens this is the delimiter itself.
        start: Offset of the first input character covered by the token.
        end: Offset one past the last input character covered by the token.
        owned: ``True`` when escape resolution rebuilt ``text``; otherwise
            ``text`` is exactly ``input[start:end]``.
    """

    kind: TokenKind
    text: str
    start: int
    end: int
    owned: bool = False

    @property
    def is_name(self) -> bool:
        return self.kind is TokenKind.NAME

    @property
    def is_left_bracket(self) -> bool:
        return self.kind is TokenKind.LEFT_BRACKET

    @property
    def is_right_bracket(self) -> bool:
        return self.kind is TokenKind.RIGHT_BRACKET

    @property
    def is_comma(self) -> bool:
        return self.kind is TokenKind.COMMA


@final
class TokenStream:
    """Front-consumable token queue with single-token push-back."""

    _tokens: deque[Token]
    _position: int
    end_offset: int

    def __init__(self, tokens: Iterable[Token] = (), end_offset: int = 0) -> None:
        """Initialize the stream.

        Args:
            tokens: Tokens in left-to-right input order.
            end_offset: Length of the tokenized input, used to locate
                end-of-stream errors.
        """
        self._tokens = deque(tokens)
        self._position = 0
        self.end_offset = end_offset

    @property
    def position(self) -> int:
        """Index of the next token within the original sequence."""

        return self._position

    def pop(self) -> Token | None:
        """Consume the front token, or return ``None`` when drained."""

        if not self._tokens:
            return None
        self._position += 1
        return self._tokens.popleft()

    def push_back(self, token: Token) -> None:
        """Return a consumed token to the front of the stream."""

        self._position -= 1
        self._tokens.appendleft(token)

    def peek(self) -> Token | None:
        """Return the front token without consuming it."""

        return self._tokens[0] if self._tokens else None

    def __len__(self) -> int:
        return len(self._tokens)

    def __bool__(self) -> bool:
        return bool(self._tokens)

    def __iter__(self) -> Iterator[Token]:
        return iter(self._tokens)

    def __repr__(self) -> str:
        return f"TokenStream(position={self._position}, remaining={len(self._tokens)})"


__all__ = ["Token", "TokenKind", "TokenStream"]
