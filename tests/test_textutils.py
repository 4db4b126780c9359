import io

import pytest

from solong.textutils import find_within, read_lines, split_words, substring


def test_split_drops_empty_pieces():
    assert split_words("111\n\n1P1\n", "\n") == ["111", "1P1"]


def test_split_only_separators():
    assert split_words("\n\n\n", "\n") == []


def test_split_rejoins_to_filtered_text():
    text = "aa,b,,ccc,"
    words = split_words(text, ",")
    assert ",".join(words) == "aa,b,ccc"
    assert all(words)


def test_find_within_limit():
    assert find_within("a.ber", ".ber", 5) == 1
    assert find_within("map.ber", ".ber", 5) is None
    assert find_within("map.ber", ".ber", 7) == 3


def test_find_empty_needle():
    assert find_within("anything", "", 0) == 0


def test_find_missing():
    assert find_within("map.txt", ".ber", 100) is None


def test_find_negative_limit():
    with pytest.raises(ValueError):
        find_within("abc", "a", -1)


def test_substring_cases():
    assert substring("hello", 1, 3) == "ell"
    assert substring("hello", 3, 100) == "lo"
    assert substring("hello", 10, 2) == ""
    assert substring("hello", 0, 0) == ""


def test_substring_rejects_negative():
    with pytest.raises(ValueError):
        substring("hello", -1, 2)


@pytest.mark.parametrize("chunk_size", [1, 2, 3, 7, 1000])
def test_read_lines_round_trip(chunk_size):
    text = "1111\n1PC1\n1E01\n1111"
    lines = list(read_lines(io.StringIO(text), chunk_size))
    assert "".join(lines) == text
    assert all(line.endswith("\n") for line in lines[:-1])
    assert lines[-1] == "1111"
    assert len(lines) == text.count("\n") + 1


def test_read_lines_trailing_newline():
    lines = list(read_lines(io.StringIO("ab\ncd\n"), 4))
    assert lines == ["ab\n", "cd\n"]


def test_read_lines_empty_stream():
    assert list(read_lines(io.StringIO(""))) == []


def test_read_lines_binary():
    data = b"x\n\ny"
    assert list(read_lines(io.BytesIO(data), 2)) == [b"x\n", b"\n", b"y"]


def test_read_lines_bad_chunk_size():
    with pytest.raises(ValueError):
        list(read_lines(io.StringIO("a"), 0))