from datetime import datetime

from boilerplate_viewer.formatting import format_generated, format_line_count


def test_format_line_count():
    assert format_line_count("") == "0 lines"
    assert format_line_count("one") == "1 line"
    assert format_line_count("a\nb\n") == "2 lines"
    assert format_line_count("x\n" * 1200) == "1,200 lines"


def test_format_generated():
    assert format_generated(datetime(2024, 1, 2, 3, 4, 5)) == "2024-01-02 03:04"
    assert len(format_generated()) == len("2024-01-02 03:04")
