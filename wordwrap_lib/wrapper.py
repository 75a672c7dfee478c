#!/usr/bin/env python3
from __future__ import annotations

"""
Greedy word-wrapping for WordWrap.

Provides:
- Splitting a sentence into space-delimited words.
- Building one wrapped line at a time from a cursor into the word list.
- Wrapping a whole sentence, slicing words longer than the width.
"""

from dataclasses import dataclass
from typing import List, Optional, Sequence

NEWLINE = "\n"


@dataclass
class LineResult:
    """
    One finished line plus where the next line starts.
    """
    line: str
    next_index: int
    remainder: Optional[str] = None  # unconsumed tail of a sliced word at next_index


def split_words(text: str) -> List[str]:
    """
    Split text on single spaces.

    Runs of spaces yield empty words, which are kept so interior spacing
    survives. Trailing empty words are dropped.
    """
    words = text.split(" ")
    while words and not words[-1]:
        words.pop()
    return words


def build_line(
    words: Sequence[str],
    index: int,
    limit: int,
    pending: Optional[str] = None,
) -> LineResult:
    """
    Build a single line starting at words[index].

    Args:
        words: The word sequence (never modified).
        index: Cursor of the first word to consider.
        limit: Maximum number of characters on the line.
        pending: Leftover of a previously sliced word, used instead of words[index].

    Returns:
        LineResult with the line text, the cursor for the next line and,
        if a word was sliced, the part still to be placed.
    """
    line = ""
    counter = 0
    while index < len(words):
        word = words[index] if pending is None else pending
        pending = None
        word_len = len(word)

        if word_len > limit:
            if counter == 0:
                return LineResult(word[:limit], index, word[limit:])
            break

        if counter == 0:
            line = word
            counter = word_len
        elif counter + 1 + word_len <= limit:
            line = f"{line} {word}"
            counter += 1 + word_len
        else:
            break
        index += 1

    return LineResult(line, index)


def _check_limit(limit: int) -> None:
    if isinstance(limit, bool) or not isinstance(limit, int):
        raise TypeError(f"limit must be an int, got {type(limit).__name__}")
    if limit <= 0:
        raise ValueError(f"limit must be positive, got {limit}")


def wrap_lines(text: Optional[str], limit: int) -> List[str]:
    """
    Wrap text into lines of at most `limit` characters.

    Words are never reordered. A word longer than `limit` is cut into
    `limit`-sized chunks, each on its own line; the last chunk keeps
    collecting following words as usual.

    Raises:
        TypeError: If limit is not an int.
        ValueError: If limit is not positive.
    """
    _check_limit(limit)
    if not text:
        return []

    words = split_words(text)
    lines: List[str] = []
    index = 0
    pending: Optional[str] = None
    while index < len(words):
        result = build_line(words, index, limit, pending)
        lines.append(result.line)
        index = result.next_index
        pending = result.remainder
    return lines


def wrap_words(text: Optional[str], limit: int) -> str:
    """
    Wrap text and return it as one string.

    Every line, the last included, ends with a newline. Empty or None
    text gives an empty string.
    """
    lines = wrap_lines(text, limit)
    return "".join(line + NEWLINE for line in lines)
