import pytest

from atomsh.memory import (
    bzero,
    calloc,
    memchr,
    memcmp,
    memcpy,
    memmove,
    memrchr,
    memset,
)


def test_memset_fills_prefix_and_returns_buffer():
    buf = bytearray(b"abcdefghij")
    result = memset(buf, ord("0"), 5)
    assert result is buf
    assert buf[:5] == b"0" * 5
    assert buf[5:] == b"fghij"


def test_memset_truncates_value_to_a_byte():
    buf = bytearray(4)
    memset(buf, ord("x") + 256, 4)
    assert buf == b"x" * 4


def test_memset_rejects_overrun():
    with pytest.raises(ValueError):
        memset(bytearray(3), 1, 4)


def test_bzero_clears_prefix_only():
    buf = bytearray(b"abcdefghij")
    assert bzero(buf, 8) is None
    assert buf[:8] == bytes(8)
    assert buf[8:] == b"ij"


def test_calloc_is_zero_filled():
    buf = calloc(3, 4)
    assert len(buf) == 3 * 4
    assert all(byte == 0 for byte in buf)
    assert calloc(0, 10) == bytearray()


def test_calloc_rejects_negative():
    with pytest.raises(ValueError):
        calloc(-1, 4)


def test_memcpy_copies_and_returns_dest():
    dest = bytearray(8)
    src = b"couscous"
    assert memcpy(dest, src, 5) is dest
    assert dest[:5] == src[:5]
    assert dest[5:] == bytes(3)


def test_memcpy_both_none_returns_none():
    assert memcpy(None, None, 0) is None
    assert memmove(None, None, 3) is None


def test_memcpy_one_none_raises():
    with pytest.raises(TypeError):
        memcpy(bytearray(2), None, 1)


def test_memcpy_rejects_overrun():
    with pytest.raises(ValueError):
        memcpy(bytearray(2), b"abcd", 3)


def test_memmove_prefix_copy():
    src = b"PLUS QUE 3 LIGNE !!!"
    dest = bytearray(50)
    memmove(dest, src, 6)
    assert dest[:6] == src[:6]


def test_memmove_overlap_forward():
    buf = bytearray(b"abcdef")
    view = memoryview(buf)
    dest = view[2:]
    result = memmove(dest, view, 4)
    assert result is dest
    assert bytes(result) == b"abcd"
    assert buf == b"ababcd"


def test_memmove_overlap_backward():
    buf = bytearray(b"abcdef")
    view = memoryview(buf)
    result = memmove(view, view[2:], 4)
    assert result is view
    assert bytes(result) == b"cdefef"
    assert buf == b"cdefef"


def test_memchr_finds_first_occurrence():
    data = b"pamoison"
    index = memchr(data, ord("o"), len(data))
    assert data[index] == ord("o")
    assert ord("o") not in data[:index]


def test_memchr_respects_length():
    assert memchr(b"abc", ord("c"), 2) is None
    assert memchr(b"abc", ord("z"), 3) is None


def test_memrchr_finds_last_occurrence():
    data = b"Caillou"
    index = memrchr(data, ord("l"), len(data))
    assert data[index] == ord("l")
    assert ord("l") not in data[index + 1:]
    assert memrchr(data, ord("l"), 1) is None


def test_memchr_and_memrchr_agree_on_single_occurrence():
    data = b"pamoison"
    assert memchr(data, ord("m"), 8) == memrchr(data, ord("m"), 8)


def test_memcmp_equal_and_zero_length():
    assert memcmp(b"same", b"same", 4) == 0
    assert memcmp(b"abc", b"xyz", 0) == 0


def test_memcmp_sign_and_antisymmetry():
    a, b = b"aa\x00", b"aaw"
    assert memcmp(a, b, 3) < 0
    assert memcmp(b, a, 3) == -memcmp(a, b, 3)


def test_memcmp_is_unsigned():
    assert memcmp(b"\xff", b"\x01", 1) > 0


def test_memcmp_rejects_short_buffer():
    with pytest.raises(ValueError):
        memcmp(b"aa", b"aaw", 3)


def test_negative_count_rejected():
    with pytest.raises(ValueError):
        memchr(b"abc", 1, -1)