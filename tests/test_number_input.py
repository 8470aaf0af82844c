import pytest

from utils.number_input import parse_number_list, format_number_list


@pytest.mark.parametrize("text, expected", [
    ("64, 34, 25, 12, 22, 11, 90", [64, 34, 25, 12, 22, 11, 90]),
    ("5,3,8", [5, 3, 8]),
    ("5, , abc, 7", [5, 7]),
    ("12abc, -3, +4", [12, -3, 4]),
    ("", []),
    (None, []),
    ("abc", []),
])
def test_parse_number_list(text, expected):
    assert parse_number_list(text) == expected


def test_format_number_list():
    assert format_number_list([5, 3, 8]) == "5, 3, 8"
    assert format_number_list([]) == ""


def test_oversized_entry_is_dropped():
    assert parse_number_list("4, " + "1" * 5000 + ", 2") == [4, 2]
