import pytest

from video_scraper_core.utils import format_duration, parse_duration_text


@pytest.mark.parametrize(
    "text, expected",
    [
        ("1:30:23", 5423000),
        ("0:00:05", 5000),
        ("4:05", 245000),
        ("42", 42000),
        (" 0:01:00 ", 60000),
        ("25:00:00", 90000000),
        ("0:00:01.5", 1500),
    ],
)
def test_parse_duration_text(text, expected):
    assert parse_duration_text(text) == expected


@pytest.mark.parametrize("text", ["", "   ", "abc", "1:2:3:4", "1:xx:00", "-1:00"])
def test_parse_duration_text_rejects_invalid(text):
    with pytest.raises(ValueError):
        parse_duration_text(text)


def test_format_duration():
    assert format_duration(5423000) == "1:30:23"
    assert format_duration(2000) == "0:00:02"
