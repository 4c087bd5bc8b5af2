"""Base types and error taxonomy for literal-newline conversion."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Optional, Union

PathLike = Union[str, Path]


@dataclass(frozen=True)
class ConversionSettings:
    """Runtime configuration for file conversion."""

    encoding: Optional[str] = None
    sync: bool = True


@dataclass(frozen=True)
class ConversionResult:
    """Summary of a completed file conversion."""

    input_path: Path
    output_path: Path
    lines_written: int
    substitutions: int

    def as_dict(self) -> Dict[str, object]:
        return {
            "input_path": str(self.input_path),
            "output_path": str(self.output_path),
            "lines_written": self.lines_written,
            "substitutions": self.substitutions,
        }


class ConversionError(Exception):
    """Base exception for conversion failures.

    Carries the path involved and the underlying cause; ``str()`` yields the
    single human-readable line shown to users.
    """

    template = "Conversion failed for '{path}': {cause}"

    def __init__(self, path: PathLike, cause: BaseException) -> None:
        self.path = Path(path)
        self.cause = cause
        self.message = self.template.format(path=self.path, cause=cause)
        super().__init__(self.message)


class ReadError(ConversionError):
    """Raised when the input file cannot be read as text."""

    template = "Error when reading '{path}': {cause}"


class CreateError(ConversionError):
    """Raised when the output file cannot be created or truncated."""

    template = "Error when creating file '{path}': {cause}"


class WriteError(ConversionError):
    """Raised when writing converted lines fails."""

    template = "Error when writing '{path}': {cause}"


class SyncError(ConversionError):
    """Raised when the output cannot be flushed to durable storage."""

    template = "Cannot sync data with disk for '{path}': {cause}"
