"""Recursive-descent parser for S-expressions of lists and opaque tokens."""

import logging
from typing import Any

from .errors import (
    DepthExceeded,
    ListTooLong,
    TrailingInput,
    UnexpectedDelimiter,
    UnexpectedEndOfInput,
)
from .types import Limits, SList, Token, Value

log = logging.getLogger(__name__)

WHITESPACE = (" ", "\n")
# Characters that end a token. End of input ends one as well.
TOKEN_END = (" ", "\n", ")")


class Cursor:
    """Forward-only read position into an immutable buffer."""

    __slots__ = ("buffer", "pos")

    def __init__(self, buffer: str, pos: int = 0):
        self.buffer = buffer
        self.pos = pos

    def peek(self) -> str:
        """Current character, or "" at end of input."""
        if self.pos >= len(self.buffer):
            return ""
        return self.buffer[self.pos]

    def at_end(self) -> bool:
        return self.pos >= len(self.buffer)

    def skip_whitespace(self) -> None:
        buf = self.buffer
        n = len(buf)
        i = self.pos
        while i < n and buf[i] in WHITESPACE:
            i += 1
        self.pos = i

    def __repr__(self) -> str:
        return f"Cursor(pos={self.pos}, len={len(self.buffer)})"


def parse_value(cursor: Cursor, limits: Any = None) -> Value:
    """Parse one value at the cursor and leave the cursor just past it.

    Raises:
        UnexpectedEndOfInput: the buffer ran out while a value was expected.
        ListTooLong: a list has more direct children than max_children.
        UnexpectedDelimiter: the value starts with ')' or whitespace.
        DepthExceeded: lists are nested deeper than max_depth.
    """
    lim = Limits.of(limits)
    try:
        return _parse(cursor, lim, 0)
    except RecursionError as e:
        raise DepthExceeded("nesting too deep for the interpreter stack", cursor.pos) from e


def _parse(cur: Cursor, lim: Limits, depth: int) -> Value:
    ch = cur.peek()
    if ch == "(":
        return _parse_list(cur, lim, depth + 1)
    if ch:
        return _parse_token(cur, lim)
    raise UnexpectedEndOfInput("ran out of characters", cur.pos)


def _parse_list(cur: Cursor, lim: Limits, depth: int) -> SList:
    if lim.max_depth is not None and depth > lim.max_depth:
        raise DepthExceeded(f"max nesting depth {lim.max_depth} exceeded", cur.pos)
    start = cur.pos
    cur.pos += 1
    children: list[Value] = []
    while True:
        cur.skip_whitespace()
        ch = cur.peek()
        if not ch:
            raise UnexpectedEndOfInput(f"unterminated list opened at offset {start}", cur.pos)
        if ch == ")":
            cur.pos += 1
            break
        if lim.max_children is not None and len(children) >= lim.max_children:
            raise ListTooLong(f"list reached max length {lim.max_children}", cur.pos)
        children.append(_parse(cur, lim, depth))
    return SList(children)


def _parse_token(cur: Cursor, lim: Limits) -> Token:
    buf = cur.buffer
    n = len(buf)
    start = cur.pos
    if lim.max_token_length is not None:
        n = min(n, start + lim.max_token_length)
    end = start
    while end < n and buf[end] not in TOKEN_END:
        end += 1
    if end == start:
        raise UnexpectedDelimiter(f"unexpected {buf[start]!r}", start)
    # The scan stops at the cap; whatever follows is left for the caller
    # and parses as the next sibling.
    if end < len(buf) and buf[end] not in TOKEN_END:
        log.warning("max token length %d reached at offset %d, token truncated",
                    lim.max_token_length, start)
    cur.pos = end
    return Token(buf[start:end])


def _skip_token_tail(cur: Cursor) -> None:
    buf = cur.buffer
    n = len(buf)
    i = cur.pos
    while i < n and buf[i] not in TOKEN_END:
        i += 1
    cur.pos = i


def parse(src: str, limits: Any = None) -> Value:
    """Parse a buffer holding exactly one value, surrounded by optional whitespace."""
    cur = Cursor(src)
    cur.skip_whitespace()
    if cur.at_end():
        raise UnexpectedEndOfInput("nothing to parse", cur.pos)
    value = parse_value(cur, limits)
    if isinstance(value, Token):
        # a truncated top-level token has no sibling to become; drop its tail
        _skip_token_tail(cur)
    cur.skip_whitespace()
    if not cur.at_end():
        raise TrailingInput("extra input after expression", cur.pos)
    return value
