import pytest

from xvutils import numconv


@pytest.mark.parametrize("text", ["0", "7", "123", "2147483647"])
def test_atoi_digits(text):
    assert numconv.atoi(text) == int(text)


def test_atoi_stops_at_non_digit():
    assert numconv.atoi("123abc") == 123


def test_atoi_rejects_sign_and_space():
    assert numconv.atoi("-5") == 0
    assert numconv.atoi(" 5") == 0


@pytest.mark.parametrize("value", [0, 1, -1, 42, -42, 99999, -2147483648])
def test_strtoint_round_trip(value):
    assert numconv.strtoint(str(value)) == value


def test_strtoint_whitespace_and_plus():
    assert numconv.strtoint(" \t\n+17xyz") == 17
    assert numconv.strtoint("  -42") == -42


def test_strtoint_no_digits():
    assert numconv.strtoint("  abc") == 0


@pytest.mark.parametrize(
    "n, base",
    [
        (0, 1),
        (100, 7),
        (0xFFFFFFFF, 3),
        (0x100000000, 10),
        (0xFFFFFFFFFFFFFFFF, 0xFFFFFFFF),
        (0x123456789ABCDEF0, 1000),
        (0xDEADBEEFCAFEBABE, 17),
    ],
)
def test_do_div_matches_divmod(n, base):
    assert numconv.do_div(n, base) == divmod(n, base)


@pytest.mark.parametrize(
    "n, base",
    [(5, 2), (1 << 40, 3), (0xFFFFFFFFFFFFFFFF, 1), ((1 << 63) + 12345, 0x80000001)],
)
def test_div64_32_matches_divmod(n, base):
    assert numconv.div64_32(n, base) == divmod(n, base)


def test_do_div_zero_base():
    with pytest.raises(ZeroDivisionError):
        numconv.do_div(10, 0)


def test_do_div_out_of_range():
    with pytest.raises(ValueError):
        numconv.do_div(1 << 64, 3)
    with pytest.raises(ValueError):
        numconv.do_div(10, 1 << 32)


def test_lldiv_and_rem():
    n = 0x0123456789ABCDEF
    assert numconv.lldiv(n, 1000) == n // 1000
    q, r = numconv.div_u64_rem(n, 1000)
    assert q * 1000 + r == n
    assert 0 <= r < 1000


def test_genmask_documented_example():
    assert numconv.genmask(39, 21, 64) == 0x000000FFFFE00000


def test_genmask_full_and_single():
    assert numconv.genmask(31, 0, 32) == 0xFFFFFFFF
    for bit in (0, 5, 63):
        assert numconv.genmask(bit, bit) == 1 << bit


def test_genmask_invalid():
    with pytest.raises(ValueError):
        numconv.genmask(3, 5)


@pytest.mark.parametrize("x", [0, 1, 31, 32, 33, 1000])
def test_roundup_and_align(x):
    r = numconv.roundup(x, 32)
    assert r % 32 == 0 and x <= r < x + 32
    assert numconv.align(x, 32) == r


@pytest.mark.parametrize("n, d", [(0, 3), (1, 3), (9, 3), (10, 3), (4096, 512)])
def test_div_round_up(n, d):
    q = numconv.div_round_up(n, d)
    assert q * d >= n
    assert (q - 1) * d < n or q == 0


def test_swab32():
    assert numconv.swab32(0x12345678) == 0x78563412
    for x in (0, 0xDEADBEEF, 0x000000FF):
        assert numconv.swab32(numconv.swab32(x)) == x


@pytest.mark.parametrize("k", range(32))
def test_log2_powers(k):
    assert numconv.log2(1 << k) == k


def test_memcmp():
    assert numconv.memcmp(b"abc", b"abc", 3) == 0
    assert numconv.memcmp(b"abc", b"abd", 3) < 0
    assert numconv.memcmp(b"\xff", b"\x01", 1) > 0
    assert numconv.memcmp(b"abX", b"abY", 2) == 0


def test_memcmp_short_buffer():
    with pytest.raises(ValueError):
        numconv.memcmp(b"ab", b"abc", 3)


def test_strcmp():
    assert numconv.strcmp("hi\n", "hi\n") == 0
    assert numconv.strcmp("a", "b") < 0
    assert numconv.strcmp("abc", "ab") > 0
    assert numconv.strcmp("ab", "abc") < 0
    assert numconv.strcmp(b"ab\0zz", b"ab") == 0