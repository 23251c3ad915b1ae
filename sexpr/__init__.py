from .types import Limits, SList, Token, Value
from .parser import Cursor, parse, parse_value
from .printer import destroy, render, write
from .reader import parse_file, read_all
from .errors import (
    BufferReadFailure,
    DepthExceeded,
    FileNotFound,
    ListTooLong,
    ParseError,
    SexprError,
    TrailingInput,
    UnexpectedDelimiter,
    UnexpectedEndOfInput,
)

__all__ = [
    "Limits", "SList", "Token", "Value",
    "Cursor", "parse", "parse_value",
    "destroy", "render", "write",
    "parse_file", "read_all",
    "SexprError", "FileNotFound", "BufferReadFailure", "ParseError",
    "UnexpectedEndOfInput", "ListTooLong", "UnexpectedDelimiter",
    "TrailingInput", "DepthExceeded",
]
