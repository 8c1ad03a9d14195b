import pytest

from xvutils.errno import Errno, describe


def test_pinned_values():
    assert Errno.EIO == 5
    assert Errno.ENOSPC == 28
    assert Errno(530).name == "ERECALLCONFLICT"


def test_describe_known():
    assert describe(5) == "I/O error"
    assert describe(Errno.ENOENT) == "No such file or directory"


def test_aliases():
    assert Errno.EWOULDBLOCK is Errno.EAGAIN
    assert Errno.EDEADLOCK is Errno.EDEADLK
    assert describe(Errno.EWOULDBLOCK) == "Try again"


def test_every_member_has_description():
    for member in Errno:
        assert describe(member).strip() != ""
        assert describe(int(member)) == describe(member)


@pytest.mark.parametrize("code", [0, 41, 58, 9999, -1])
def test_unknown_codes_raise(code):
    with pytest.raises(ValueError):
        describe(code)