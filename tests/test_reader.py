import io

import pytest
from sexpr.reader import (
    READALL_ERROR,
    READALL_INVALID,
    READALL_NOMEM,
    READALL_TOOMUCH,
    parse_file,
    read_all,
)
from sexpr.errors import BufferReadFailure, FileNotFound, ListTooLong
from sexpr.types import Limits, SList, Token


class _BrokenStream:
    def read(self, n):
        raise OSError("device gone")


class _HungryStream:
    def read(self, n):
        raise MemoryError


def test_read_all_small():
    assert read_all(io.StringIO("(a b)\n")) == "(a b)\n"


def test_read_all_multiple_chunks():
    data = "(" + "x " * 1000 + ")"
    assert read_all(io.StringIO(data), chunk_size=7) == data


def test_read_all_empty():
    assert read_all(io.StringIO("")) == ""


def test_read_all_none_stream():
    with pytest.raises(BufferReadFailure) as exc:
        read_all(None)
    assert exc.value.code == READALL_INVALID


def test_read_all_bad_chunk_size():
    with pytest.raises(BufferReadFailure) as exc:
        read_all(io.StringIO("x"), chunk_size=0)
    assert exc.value.code == READALL_INVALID


def test_read_all_stream_error():
    with pytest.raises(BufferReadFailure) as exc:
        read_all(_BrokenStream())
    assert exc.value.code == READALL_ERROR


def test_read_all_too_much():
    with pytest.raises(BufferReadFailure) as exc:
        read_all(io.StringIO("x" * 100), limit=10, chunk_size=4)
    assert exc.value.code == READALL_TOOMUCH


def test_read_all_at_limit():
    assert read_all(io.StringIO("x" * 10), limit=10) == "x" * 10


def test_read_all_out_of_memory():
    with pytest.raises(BufferReadFailure, match="err: -4") as exc:
        read_all(_HungryStream())
    assert exc.value.code == READALL_NOMEM


def test_parse_file(tmp_path):
    p = tmp_path / "in.sexp"
    p.write_text("(a\n (b c))\n")
    assert parse_file(p) == SList([Token("a"), SList([Token("b"), Token("c")])])


def test_parse_file_missing(tmp_path):
    with pytest.raises(FileNotFound, match="file not found") as exc:
        parse_file(tmp_path / "nope.sexp")
    assert exc.value.path.endswith("nope.sexp")


def test_parse_file_input_size_limit(tmp_path):
    p = tmp_path / "big.sexp"
    p.write_text("(" + "a " * 50 + ")")
    with pytest.raises(BufferReadFailure) as exc:
        parse_file(p, Limits(max_children=None, max_input_size=20))
    assert exc.value.code == READALL_TOOMUCH


def test_parse_file_applies_limits(tmp_path):
    p = tmp_path / "wide.sexp"
    p.write_text("(a b c)")
    with pytest.raises(ListTooLong):
        parse_file(p, {"max_children": 2})
