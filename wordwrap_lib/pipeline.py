#!/usr/bin/env python3
from __future__ import annotations

"""
Main processing pipeline for WordWrap.

Handles:
- Reading (text, width) pairs from the input file.
- Parsing widths and wrapping each text.
- Writing the wrapped blocks to the output file.

Every failure here is recoverable: it is reported on stderr and the run
carries on with whatever data is left.
"""

import re
import sys
from pathlib import Path
from typing import List, Optional, Sequence

from wordwrap_lib.io_utils import WrapPair, read_input_file, write_output_file
from wordwrap_lib.wrapper import NEWLINE, wrap_words

# LIMIT_RE — optional sign followed by ASCII digits, nothing else
LIMIT_RE = re.compile(r"[+-]?[0-9]+")


def parse_limit(raw: str) -> Optional[int]:
    """
    Parse a width field.

    Only ASCII digits are accepted and the value is not bounded to 32 bits,
    unlike Java's Integer.parseInt which takes any Unicode digit but
    rejects values outside the int range.

    Returns:
        The integer width, or None if the field is not a plain integer.
    """
    if not LIMIT_RE.fullmatch(raw):
        return None
    return int(raw)


def wrap_pairs(pairs: Sequence[WrapPair], verbosity: int = 0) -> List[str]:
    """
    Wrap every pair, skipping the ones whose width is unusable.

    Args:
        pairs: Pairs read from the input file.
        verbosity: Verbosity level (0 = normal output, higher = more debug info).

    Returns:
        Wrapped blocks in input order.
    """
    blocks: List[str] = []
    for pair in pairs:
        limit = parse_limit(pair.limit_raw)
        if limit is None:
            print(f"⚠️ Invalid limit format: {pair.limit_raw}. Skipping item.", file=sys.stderr)
            continue

        try:
            block = wrap_words(pair.text, limit)
        except ValueError as e:
            print(f"⚠️ Invalid limit {limit}: {e}. Skipping item.", file=sys.stderr)
            continue

        if verbosity >= 2:
            print(f"      ↳ width {limit}: {block.count(NEWLINE)} lines")
        blocks.append(block)
    return blocks


def run_pipeline(input_path: Path, output_path: Path, encoding: str = "utf-8", verbosity: int = 0) -> List[str]:
    """
    Main processing pipeline for WordWrap.

    Args:
        input_path: File of alternating text and width lines.
        output_path: File receiving the wrapped blocks.
        encoding: Text encoding for both files.
        verbosity: Verbosity level (0 = normal output, higher = more debug info).

    Returns:
        The wrapped blocks that were (or would have been) written.
    """
    if verbosity >= 1:
        print(f"   🛈 Input: {input_path} | Output: {output_path} | Encoding: {encoding}")

    print("➡️ Step 1: Read input pairs")
    pairs = read_input_file(input_path, encoding=encoding, verbosity=verbosity)

    print("➡️ Step 2: Wrap")
    blocks = wrap_pairs(pairs, verbosity=verbosity)
    if verbosity >= 1:
        print(f"   🛈 Wrapped {len(blocks)} of {len(pairs)} pairs.")

    print("💾 Step 3: Write output")
    if write_output_file(output_path, blocks, encoding=encoding, verbosity=verbosity):
        print(f"✅ Word wrap complete. Output written to {output_path}")
    return blocks
