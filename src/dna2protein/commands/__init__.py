"""CLI subcommand implementations."""

from . import (
    transcribe,
    translate,
)

__all__ = [
    "transcribe",
    "translate",
]
