"""Shared types and text helpers for literal-newline conversion."""

from .base import (
    ConversionError,
    ConversionResult,
    ConversionSettings,
    CreateError,
    ReadError,
    SyncError,
    WriteError,
)
from .newline import (
    count_literal_newlines,
    derive_output_path,
    replace_literal_newlines,
    resolve_output_path,
    split_lines,
    write_lines,
)

__all__ = [
    "ConversionError",
    "ConversionResult",
    "ConversionSettings",
    "CreateError",
    "ReadError",
    "SyncError",
    "WriteError",
    "count_literal_newlines",
    "derive_output_path",
    "replace_literal_newlines",
    "resolve_output_path",
    "split_lines",
    "write_lines",
]
