"""Service layer exports."""

from .file_conversion import convert_file, convert_text

__all__ = [
    "convert_file",
    "convert_text",
]
