"""Input/output helpers for CLI commands."""

from .text_io import read_text, split_lines, write_text

__all__ = ["read_text", "split_lines", "write_text"]
