#!/usr/bin/env python3
from __future__ import annotations

"""
WordWrap — greedy word wrapping of sentences to a fixed width.

CLI entry point — minimal logic here:
- Parses command-line arguments.
- Dispatches to:
    • wordwrap_lib/config_manager.py → create_default_config() / load_config()
    • wordwrap_lib/pipeline.py       → run_pipeline()

# ============================================================
# 📂 Project Structure
# ============================================================
wordwrap/
├── wordwrap.py                  # CLI entry point — just parses args & dispatches
│
├── wordwrap_lib/                # All reusable logic lives here
│   ├── __init__.py              # Empty for now (marks this as a package)
│   ├── config_manager.py        # Load/save/validate config.json
│   ├── io_utils.py              # Read input pairs, write wrapped blocks
│   ├── pipeline.py              # run_pipeline() — read, wrap, write
│   └── wrapper.py               # The wrapping algorithm
│
├── cfg/
│   └── config.json              # User-editable configuration (created on first run)
│
├── tests/                       # pytest suite
└── pyproject.toml
"""

import argparse
import sys
from pathlib import Path

from wordwrap_lib.config_manager import (
    DEFAULT_CONFIG,
    FILE_KEYS,
    create_default_config,
    is_valid_encoding,
    load_config,
    validate_config,
)
from wordwrap_lib.pipeline import run_pipeline


def main(argv: list[str] | None = None) -> None:
    """
    Entry point for WordWrap CLI.

    Reads (text, width) pairs from the configured input file, wraps each
    text and writes the blocks to the configured output file. --input and
    --output override the configured names.
    """
    parser = argparse.ArgumentParser(
        prog="WordWrap",
        description="WordWrap — wrap sentences to a maximum line width",
        epilog="Example: wordwrap --input input.txt --output output.txt -v"
    )
    parser.add_argument(
        "--input",
        type=Path,
        help="Input file of alternating text and width lines (default from config)"
    )
    parser.add_argument(
        "--output",
        type=Path,
        help="Output file for wrapped blocks (default from config)"
    )
    parser.add_argument(
        "--init-config",
        action="store_true",
        help="Create the default config file if missing, validate it and exit"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="count",
        default=0,
        help="Increase output verbosity (can be used multiple times: -v, -vv, -vvv)"
    )

    args = parser.parse_args(argv)

    # Clamp verbosity to max 3
    args.verbose = min(args.verbose, 3)

    try:
        if args.init_config:
            create_default_config()
            if not validate_config(load_config()):
                raise SystemExit(1)
            return

        try:
            cfg = load_config()
        except (OSError, ValueError) as e:
            print(f"⚠️ Using default configuration ({e})", file=sys.stderr)
            cfg = dict(DEFAULT_CONFIG)

        # Unusable values fall back to their defaults so the run still completes
        for key in FILE_KEYS:
            value = cfg.get(key)
            if not isinstance(value, str) or not value.strip():
                print(f"⚠️ Invalid {key} {value!r}; using {DEFAULT_CONFIG[key]!r}", file=sys.stderr)
                cfg[key] = DEFAULT_CONFIG[key]
        if not is_valid_encoding(cfg.get("encoding")):
            print(
                f"⚠️ Invalid encoding {cfg.get('encoding')!r}; using {DEFAULT_CONFIG['encoding']!r}",
                file=sys.stderr,
            )
            cfg["encoding"] = DEFAULT_CONFIG["encoding"]

        input_path = args.input or Path(cfg["input_file"])
        output_path = args.output or Path(cfg["output_file"])
        run_pipeline(
            input_path,
            output_path,
            encoding=cfg["encoding"],
            verbosity=args.verbose,
        )

    except Exception as e:
        print(f"\n❌ Error: {e}", file=sys.stderr)
        raise SystemExit(1)


if __name__ == "__main__":
    main()
