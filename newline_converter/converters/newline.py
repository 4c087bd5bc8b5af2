"""Text helpers turning literal ``\\n`` sequences into real newlines."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Optional, TextIO

from .base import PathLike

LITERAL_NEWLINE = "\\n"
COPY_SUFFIX = " - copy"


def split_lines(content: str) -> List[str]:
    """
    Split on ``\\n``, dropping one ``\\r`` before each ``\\n``.

    A trailing newline does not add an empty last line; a lone ``\\r``
    stays inside its line.
    """
    lines = content.split("\n")
    last = lines.pop()
    lines = [line[:-1] if line.endswith("\r") else line for line in lines]
    if last:
        lines.append(last)
    return lines


def replace_literal_newlines(line: str) -> str:
    return line.replace(LITERAL_NEWLINE, "\n")


def count_literal_newlines(line: str) -> int:
    return line.count(LITERAL_NEWLINE)


def derive_output_path(input_path: PathLike) -> Path:
    """
    Build the default output path next to the input.

    ``notes.txt`` becomes ``notes - copy.txt`` and ``README`` becomes
    ``README - copy``. Only the last extension is reattached.

    Raises:
        ValueError: if the path has no file name to derive from.
    """
    path = Path(input_path)
    if path.name in ("", ".", ".."):
        raise ValueError(f"cannot derive an output file name from '{input_path}'")

    return path.with_name(f"{path.stem}{COPY_SUFFIX}{path.suffix}")


def resolve_output_path(input_path: PathLike, override: Optional[PathLike] = None) -> Path:
    if override is not None:
        return Path(override)
    return derive_output_path(input_path)


def write_lines(handle: TextIO, lines: Iterable[str]) -> int:
    """Write each line converted and newline-terminated; return the record count."""
    written = 0
    for line in lines:
        handle.write(replace_literal_newlines(line))
        handle.write("\n")
        written += 1
    return written
