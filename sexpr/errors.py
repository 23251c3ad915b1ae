"""Exception taxonomy. Everything fatal derives from SexprError."""

from typing import Optional


class SexprError(RuntimeError):
    pass


class FileNotFound(SexprError):
    def __init__(self, path: str):
        super().__init__(f"file not found: {path}")
        self.path = path


class BufferReadFailure(SexprError):
    def __init__(self, code: int):
        super().__init__(f"err: {code}")
        self.code = code


class ParseError(SexprError):
    def __init__(self, msg: str, pos: Optional[int] = None):
        if pos is not None:
            msg = f"{msg} (at offset {pos})"
        super().__init__(msg)
        self.pos = pos


class UnexpectedEndOfInput(ParseError):
    pass


class ListTooLong(ParseError):
    pass


class UnexpectedDelimiter(ParseError):
    pass


class TrailingInput(ParseError):
    pass


class DepthExceeded(ParseError):
    pass
