#!/usr/bin/env python3
from __future__ import annotations

"""
Input/output helpers for WordWrap.

Provides:
- Data structure for one (text, width) input pair.
- Reading alternating text/width lines from an input file.
- Writing wrapped blocks separated by blank lines.
"""

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import List, Sequence

from wordwrap_lib.wrapper import NEWLINE

# Blocks are separated by exactly one blank line
BLOCK_SEPARATOR = NEWLINE + NEWLINE


@dataclass
class WrapPair:
    """
    Represents one text line and its (still unparsed) width line.
    """
    text: str
    limit_raw: str


def trim_spaces(text: str) -> str:
    # Only the space character is trimmed; tabs are content.
    return text.strip(" ")


def read_input_file(path: Path, encoding: str = "utf-8", verbosity: int = 0) -> List[WrapPair]:
    """
    Read an input file of alternating text and width lines.

    - Both lines of a pair are trimmed of surrounding spaces.
    - A text line without a following width line ends reading.
    - An empty text line is skipped along with its width line.

    Args:
        path: Path to the input file.
        encoding: Text encoding of the file.
        verbosity: Verbosity level for optional debug output.

    Returns:
        List of WrapPair objects; empty if the file cannot be read.
    """
    try:
        with open(path, "r", encoding=encoding) as f:
            raw = f.read()
    except FileNotFoundError:
        print(f"❌ Input file not found: {path}", file=sys.stderr)
        return []
    except UnicodeDecodeError as e:
        print(f"❌ Cannot decode {path} as {encoding}: {e}", file=sys.stderr)
        return []
    except OSError as e:
        print(f"❌ Failed to read input file {path}: {e}", file=sys.stderr)
        return []

    # Universal newlines already folded \r\n and \r into \n
    raw_lines = raw.split(NEWLINE)
    if raw_lines and not raw_lines[-1]:
        raw_lines.pop()

    pairs: List[WrapPair] = []
    for i in range(0, len(raw_lines), 2):
        text = trim_spaces(raw_lines[i])
        if i + 1 >= len(raw_lines):
            if verbosity >= 1:
                print(f"   ⚠️ Dropping text without a width line: {text!r}", file=sys.stderr)
            break
        limit_raw = trim_spaces(raw_lines[i + 1])
        if not text:
            if verbosity >= 2:
                print(f"      ↳ Skipping empty text line {i + 1}")
            continue
        pairs.append(WrapPair(text=text, limit_raw=limit_raw))

    if verbosity >= 1:
        print(f"   🛈 Read {len(pairs)} pairs from {path}")
    return pairs


def format_blocks(blocks: Sequence[str]) -> str:
    """
    Join wrapped blocks for output.

    Each block loses its trailing newline and blocks are separated by
    one blank line. Nothing follows the last block.
    """
    trimmed = [b[: -len(NEWLINE)] if b.endswith(NEWLINE) else b for b in blocks]
    return BLOCK_SEPARATOR.join(trimmed)


def write_output_file(
    path: Path,
    blocks: Sequence[str],
    encoding: str = "utf-8",
    verbosity: int = 0,
) -> bool:
    """
    Write wrapped blocks to the output file.

    Args:
        path: Destination path (overwritten).
        blocks: Wrapped blocks, each usually ending with a newline.
        encoding: Text encoding of the file.
        verbosity: Verbosity level for optional debug output.

    Returns:
        True if the file was written, False otherwise.
    """
    try:
        with open(path, "w", encoding=encoding, newline="\n") as w:
            w.write(format_blocks(blocks))
    except OSError as e:
        print(f"❌ Error writing to file: {path} ({e})", file=sys.stderr)
        return False

    if verbosity >= 1:
        print(f"   🛈 Wrote {len(blocks)} blocks to {path}")
    return True
