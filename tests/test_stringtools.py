import pytest

from scaffkit.stringtools import (
    is_num,
    itos,
    ltrim,
    replace_all,
    rtrim,
    split,
    trim,
)


def test_split_by_string():
    assert split("1234|234", "|") == ["1234", "234"]


def test_split_drops_empty_pieces():
    assert split("|1234|", "|") == ["1234"]


def test_split_by_multi_char_separator():
    assert split("1234|rs234", "|rs") == ["1234", "234"]


def test_split_by_char():
    assert split("1234|234", "|") == ["1234", "234"]


@pytest.mark.parametrize("text", ["1234  234", "1234\t234", "1234 234", "1234\t\t234"])
def test_split_by_blanks(text):
    assert split(text) == ["1234", "234"]


def test_split_blanks_at_edges():
    assert split("\n 1234 \r\n234\t") == ["1234", "234"]


def test_split_empty_separator_rejected():
    with pytest.raises(ValueError):
        split("abc", "")


def test_ltrim():
    assert ltrim("\t\n \rltrim\t\n \r") == "ltrim\t\n \r"


def test_rtrim():
    assert rtrim("\t\n \rrtrim\t\n \r") == "\t\n \rrtrim"


def test_trim():
    assert trim("\t\n \rltrim\t\n \r") == "ltrim"


def test_ltrim_all_blank_rejected():
    with pytest.raises(ValueError):
        ltrim(" \t\n")


def test_rtrim_all_blank_is_empty():
    assert rtrim(" \t") == ""


def test_replace_all():
    assert replace_all("a-b-c", "-", "--") == "a--b--c"


def test_replace_all_empty_old_rejected():
    with pytest.raises(ValueError):
        replace_all("abc", "", "x")


def test_is_num():
    assert is_num("0123456789") is True
    assert is_num("12a") is False
    assert is_num("") is True


def test_itos():
    assert itos(-42) == "-42"