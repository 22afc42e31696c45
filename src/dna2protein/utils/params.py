"""Settings file parsing."""

from pathlib import Path
from typing import Any


def parse_params(param_file: str | Path) -> dict[str, Any]:
    """
    Parse a ``KEY = VALUE`` settings file.

    Numeric values are parsed as float; anything else is kept as a string.
    Lines without ``=`` are ignored, and so are ``#`` comment lines even
    when they contain ``=``.

    Args:
        param_file: Path to the settings file

    Returns:
        Dictionary of setting name -> value
    """
    params = {}
    with open(param_file) as f:
        for line in f:
            line = line.strip()
            if line.startswith("#") or "=" not in line:
                continue
            name, value = line.split("=", 1)
            name = name.strip()
            value = value.strip()
            try:
                params[name] = float(value)
            except ValueError:
                params[name] = value
    return params


def get_sequence_params(params: dict) -> dict:
    """
    Extract sequence normalization settings from a parsed params dict.

    Raises:
        ValueError: If a setting has a non-numeric value
    """
    return {
        "strip_whitespace": bool(int(params.get("STRIP_WHITESPACE", 0))),
    }


def load_sequence_params(param_file: str | Path | None) -> dict:
    """Read sequence settings from a file, or return the defaults."""
    if param_file is None:
        return get_sequence_params({})
    return get_sequence_params(parse_params(param_file))
