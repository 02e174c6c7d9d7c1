import pytest

from atomsh.numbers import INT_MAX, INT_MIN, atoi, itoa


def test_atoi_stops_at_first_non_digit():
    assert atoi("  -4 2") == -4


def test_atoi_accepts_plus_sign():
    assert atoi("+42") == 42


def test_atoi_skips_all_c_whitespace():
    assert atoi("\t\n\v\f\r 17abc") == 17


@pytest.mark.parametrize("text", ["", "abc", "--5", "+-3", "   "])
def test_atoi_without_digits_is_zero(text):
    assert atoi(text) == 0


def test_atoi_wraps_past_int_max():
    assert atoi("2147483648") == INT_MIN


def test_atoi_limits():
    assert atoi("-2147483648") == INT_MIN
    assert atoi(str(INT_MAX)) == INT_MAX


def test_atoi_rejects_non_string():
    with pytest.raises(TypeError):
        atoi(12)


@pytest.mark.parametrize("n", [0, 7, -7, 10, -10, 123456, INT_MAX, INT_MIN])
def test_itoa_atoi_round_trip(n):
    assert atoi(itoa(n)) == n


def test_itoa_minimum():
    assert itoa(INT_MIN) == "-2147483648"


@pytest.mark.parametrize("n", [INT_MAX + 1, INT_MIN - 1])
def test_itoa_out_of_range(n):
    with pytest.raises(OverflowError):
        itoa(n)


def test_itoa_rejects_non_int():
    with pytest.raises(TypeError):
        itoa("5")