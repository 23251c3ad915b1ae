"""Canonical rendering and explicit release of parsed trees."""

import io
from typing import Callable, Optional, TextIO

from .types import SList, Token, Value


def write(value: Value, out: TextIO) -> None:
    """Write the canonical form of value to a text stream."""
    if isinstance(value, Token):
        out.write(value.text)
        return
    out.write("(")
    for i, child in enumerate(value.children):
        if i:
            out.write(" ")
        write(child, out)
    out.write(")")


def render(value: Value) -> str:
    """Canonical form: parenthesized lists, siblings separated by one space."""
    buf = io.StringIO()
    write(value, buf)
    return buf.getvalue()


def destroy(value: Value, on_release: Optional[Callable[[Value], None]] = None) -> None:
    """Release everything value owns, children before their parent.

    on_release is called once per released node. A destroyed SList is left
    empty, so destroying it again never reaches its former children.
    """
    if isinstance(value, SList):
        for child in value.children:
            destroy(child, on_release)
        value.children.clear()
    if on_release is not None:
        on_release(value)
