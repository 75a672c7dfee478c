"""Tests for the greedy wrapping algorithm."""

from __future__ import annotations

import pytest

from wordwrap_lib.wrapper import (
    LineResult,
    build_line,
    split_words,
    wrap_lines,
    wrap_words,
)


def test_wrap_words_two_lines() -> None:
    assert wrap_words("The quick brown fox", 10) == "The quick\nbrown fox\n"


def test_wrap_words_slices_long_word() -> None:
    lines = wrap_lines("Supercalifragilisticexpialidocious", 10)
    assert lines == ["Supercalif", "ragilistic", "expialidoc", "ious"]
    assert [len(line) for line in lines] == [10, 10, 10, 4]


def test_width_one_single_letters() -> None:
    assert wrap_lines("a b c", 1) == ["a", "b", "c"]


@pytest.mark.parametrize("text", ["", None])
def test_empty_or_none_text(text) -> None:
    assert wrap_words(text, 10) == ""
    assert wrap_lines(text, 10) == []


def test_only_spaces_gives_empty_result() -> None:
    assert wrap_words("    ", 5) == ""


def test_exact_multiple_has_no_empty_trailing_line() -> None:
    word = "abcde" * 3
    lines = wrap_lines(word, 5)
    assert lines == ["abcde", "abcde", "abcde"]


def test_word_equal_to_limit_fits() -> None:
    assert wrap_lines("abcde", 5) == ["abcde"]
    # "ab cd" is exactly 5 characters and stays on one line
    assert wrap_lines("ab cd ef", 5) == ["ab cd", "ef"]


def test_remainder_keeps_collecting_words() -> None:
    assert wrap_lines("abcdefgh ij kl", 5) == ["abcde", "fgh", "ij kl"]
    assert wrap_lines("abcdefg h", 5) == ["abcde", "fg h"]


def test_long_word_after_words_starts_new_line() -> None:
    assert wrap_lines("hi abcdefghijkl", 5) == ["hi", "abcde", "fghij", "kl"]


def test_interior_double_space_is_kept_on_a_line() -> None:
    assert wrap_lines("a  b", 10) == ["a  b"]


def test_empty_word_at_line_start_is_absorbed() -> None:
    assert wrap_lines("a  b", 1) == ["a", "b"]
    assert wrap_lines("  a b", 10) == ["a b"]


def test_trailing_spaces_are_ignored() -> None:
    assert wrap_words("a b   ", 10) == "a b\n"


def test_all_lines_within_limit_and_words_preserved() -> None:
    text = "Lorem ipsum dolor sit amet consectetur adipiscingelitseddoeiusmod tempor"
    for limit in range(1, 25):
        lines = wrap_lines(text, limit)
        assert all(0 < len(line) <= limit for line in lines)
        assert "".join(lines).replace(" ", "") == text.replace(" ", "")


def test_build_line_returns_cursor_and_remainder() -> None:
    words = ["abcdefg", "hi"]
    first = build_line(words, 0, 5)
    assert first == LineResult("abcde", 0, "fg")
    second = build_line(words, first.next_index, 5, first.remainder)
    assert second == LineResult("fg hi", 2)
    assert words == ["abcdefg", "hi"]


def test_build_line_stops_before_word_that_does_not_fit() -> None:
    assert build_line(["one", "two", "three"], 0, 7) == LineResult("one two", 2)


def test_build_line_past_end_is_empty() -> None:
    assert build_line(["a"], 1, 5) == LineResult("", 1)


def test_split_words_keeps_interior_empties() -> None:
    assert split_words(" a  b  ") == ["", "a", "", "b"]


@pytest.mark.parametrize("limit", [0, -3])
def test_non_positive_limit_rejected(limit) -> None:
    with pytest.raises(ValueError):
        wrap_words("some text", limit)


@pytest.mark.parametrize("limit", [2.5, "10", True])
def test_non_int_limit_rejected(limit) -> None:
    with pytest.raises(TypeError):
        wrap_words("some text", limit)
