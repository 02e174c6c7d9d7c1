import io
import os

import pytest

from atomsh.fdio import putchar_fd, putendl_fd, putnbr_fd, putstr_fd


def test_putchar_string():
    out = io.StringIO()
    putchar_fd("w", out)
    assert out.getvalue() == "w"


def test_putchar_code_matches_chr():
    out = io.StringIO()
    putchar_fd(ord("z"), out)
    assert out.getvalue() == "z"


def test_putchar_rejects_long_string():
    with pytest.raises(ValueError):
        putchar_fd("ab", io.StringIO())


def test_putstr():
    out = io.StringIO()
    putstr_fd("RONDELLE", out)
    assert out.getvalue() == "RONDELLE"


def test_putendl_appends_newline():
    out = io.StringIO()
    putendl_fd("gg bg", out)
    assert out.getvalue() == "gg bg" + "\n"


def test_putnbr_negative():
    out = io.StringIO()
    putnbr_fd(-162, out)
    assert out.getvalue() == "-162"


def test_putnbr_minimum():
    out = io.StringIO()
    putnbr_fd(-2147483648, out)
    assert out.getvalue() == "-2147483648"


def test_putnbr_out_of_range():
    with pytest.raises(OverflowError):
        putnbr_fd(2**31, io.StringIO())


def test_writes_accumulate_in_order():
    out = io.StringIO()
    putstr_fd("a", out)
    putnbr_fd(5, out)
    putchar_fd("b", out)
    assert out.getvalue() == "a" + "5" + "b"


def test_file_descriptor_output():
    read_fd, write_fd = os.pipe()
    try:
        putstr_fd("caillou", write_fd)
        putendl_fd("!", write_fd)
        os.close(write_fd)
        write_fd = None
        with os.fdopen(read_fd, "r", encoding="utf-8") as reader:
            read_fd = None
            assert reader.read() == "caillou" + "!" + "\n"
    finally:
        if write_fd is not None:
            os.close(write_fd)
        if read_fd is not None:
            os.close(read_fd)


def test_bool_is_not_a_stream():
    with pytest.raises(TypeError):
        putstr_fd("x", True)