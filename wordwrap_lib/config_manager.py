#!/usr/bin/env python3
from __future__ import annotations

"""
Configuration management for WordWrap.

Handles:
- Creating a default config file if missing.
- Loading and saving configuration values.
- Ensuring all required keys exist.
- Validating file names and the text encoding.
"""

import json
from pathlib import Path
from typing import Any

# Path to the configuration file (stored in cfg/ at project root)
CONFIG_PATH = Path(__file__).parent.parent / "cfg" / "config.json"

# Keys holding file names; relative names resolve against the working directory.
FILE_KEYS = ("input_file", "output_file")

# DEFAULT_CONFIG defines all required keys with safe defaults
DEFAULT_CONFIG: dict[str, Any] = {
    "_note_files": (
        "Input holds alternating lines: a sentence, then its width. "
        "Output holds one wrapped block per pair, separated by a blank line."
    ),
    "input_file": "input.txt",
    "output_file": "output.txt",
    "encoding": "utf-8",
}


def create_default_config() -> None:
    """
    Create config.json with default values if it doesn't exist.

    - Creates the cfg/ directory when needed.
    - Prints a warning if the file already exists.
    - Handles file system errors gracefully.
    """
    if CONFIG_PATH.exists():
        print(f"   ⚠️ Config already exists at {CONFIG_PATH}")
        return

    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(DEFAULT_CONFIG, indent=2), encoding="utf-8")
    except OSError as e:
        print(f"   ❌ Failed to write config file: {e}")
        return

    print(f"   ✅ Created default config at: {CONFIG_PATH}")
    print("   📄 Default values:")
    for key, value in DEFAULT_CONFIG.items():
        print(f"      {key}: {value}")


def ensure_keys(cfg: dict[str, Any]) -> dict[str, Any]:
    """
    Ensure all expected keys from DEFAULT_CONFIG are present in cfg.
    Missing keys are added with default values and the config is saved.

    Returns:
        dict[str, Any]: Updated configuration dictionary.
    """
    updated = False
    for key, value in DEFAULT_CONFIG.items():
        if key not in cfg:
            cfg[key] = value
            updated = True
    if updated:
        save_config(cfg)
    return cfg


def load_config() -> dict[str, Any]:
    """
    Load config.json, creating it if missing.
    Ensures all keys exist.

    Returns:
        dict[str, Any]: Parsed configuration dictionary.

    Raises:
        json.JSONDecodeError: If config.json exists but is invalid.
        OSError: If reading the file fails.
    """
    if not CONFIG_PATH.exists():
        create_default_config()

    try:
        cfg = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        print(f"   ❌ Config file is corrupted: {e}")
        print(f"   ⚠️ Please fix or delete {CONFIG_PATH} and try again.")
        raise
    except OSError as e:
        print(f"   ❌ Failed to read config file: {e}")
        raise

    return ensure_keys(cfg)


def save_config(cfg: dict[str, Any]) -> None:
    """
    Save config to disk.

    Args:
        cfg (dict[str, Any]): Configuration dictionary to save.
    """
    serialisable_cfg = {
        k: str(v) if isinstance(v, Path) else v for k, v in cfg.items()
    }

    try:
        CONFIG_PATH.write_text(json.dumps(serialisable_cfg, indent=2), encoding="utf-8")
    except OSError as e:
        print(f"\n❌ Failed to save config file: {e}")
        return

    print(f"\n💾 Updated config at {CONFIG_PATH}")


def is_valid_encoding(name: Any) -> bool:
    if not isinstance(name, str) or not name:
        return False
    try:
        # Rejects binary codecs such as rot13 as well as unknown names
        "".encode(name)
    except (LookupError, UnicodeError):
        return False
    return True


def validate_config(cfg: dict[str, Any]) -> bool:
    """
    Validate config values.

    Checks performed:
    1. input_file and output_file must be non-empty strings.
    2. encoding must name a text encoding Python knows.

    Returns:
        bool: True if configuration is valid, False otherwise.
    """
    ok = True

    print("   🔍 Validating configuration...")

    print("      📂 Files:")
    for key in FILE_KEYS:
        value = cfg.get(key)
        if not isinstance(value, str) or not value.strip():
            print(f"         ❌ Invalid {key}: {value!r} (must be a non-empty string)")
            ok = False
        else:
            print(f"         ✅ {key}: {value}")

    encoding = cfg.get("encoding")
    if not is_valid_encoding(encoding):
        print(f"         ⚠️ Invalid encoding: {encoding!r}")
        ok = False
    else:
        print(f"         ✅ encoding: {encoding}")

    if ok:
        print("   ✅ Configuration valid")
    return ok
