from api.text import split_lines


def test_split_lines_drops_blank_lines():
    assert split_lines("Hello\n\nWorld\n") == ["Hello", "World"]


def test_split_lines_drops_whitespace_only_lines():
    assert split_lines("one\n   \n\t\ntwo") == ["one", "two"]


def test_split_lines_keeps_order_and_content():
    text = "  indented\nlast line  \nmiddle"
    assert split_lines(text) == ["  indented", "last line  ", "middle"]


def test_split_lines_empty_input():
    assert split_lines("") == []
    assert split_lines("\n\n \n") == []


def test_split_lines_count_matches_non_blank_lines():
    text = "a\n\nb\n \nc\nd\n\n"
    non_blank = [line for line in text.split("\n") if line.strip()]
    assert len(split_lines(text)) == len(non_blank) == 4


def test_split_lines_only_splits_on_newline():
    # a carriage return stays part of the line
    assert split_lines("a\r\nb") == ["a\r", "b"]
