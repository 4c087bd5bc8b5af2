"""Service layer orchestrating the read → convert → write → sync pipeline."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional

from ..converters import (
    ConversionResult,
    ConversionSettings,
    CreateError,
    ReadError,
    SyncError,
    WriteError,
    count_literal_newlines,
    replace_literal_newlines,
    resolve_output_path,
    split_lines,
    write_lines,
)
from ..converters.base import PathLike

logger = logging.getLogger(__name__)

_FALSE_VALUES = {"0", "false", "no", "off"}


def _default_settings() -> ConversionSettings:
    return ConversionSettings(
        encoding=os.getenv("NEWLINE_CONVERTER_ENCODING") or None,
        sync=os.getenv("NEWLINE_CONVERTER_SYNC", "1").strip().lower() not in _FALSE_VALUES,
    )


def convert_text(content: str) -> str:
    """Apply the line-by-line substitution to in-memory text."""

    return "".join(f"{replace_literal_newlines(line)}\n" for line in split_lines(content))


def convert_file(
    input_path: PathLike,
    output_path: Optional[PathLike] = None,
    *,
    settings: Optional[ConversionSettings] = None,
) -> ConversionResult:
    """
    Convert ``input_path`` and write the result to the effective output path.

    The output is ``output_path`` when given, otherwise ``<stem> - copy<ext>``
    beside the input. Any existing output is truncated.

    Raises:
        ReadError: input missing, unreadable or not valid text.
        CreateError: output cannot be opened, or no output name can be derived.
        WriteError: writing the converted lines fails.
        SyncError: the durability flush fails.
    """

    if settings is None:
        settings = _default_settings()

    source = Path(input_path)
    content = _read_content(source, settings.encoding)

    try:
        target = resolve_output_path(source, output_path)
    except ValueError as exc:
        raise CreateError(source, exc) from exc

    logger.info("Converting %s -> %s", source, target)

    try:
        handle = target.open("w+", encoding=settings.encoding, newline="\n")
    except (OSError, LookupError) as exc:
        raise CreateError(target, exc) from exc

    lines = split_lines(content)

    with handle:
        try:
            written = write_lines(handle, lines)
            handle.flush()
        except (OSError, UnicodeError) as exc:
            raise WriteError(target, exc) from exc

        if settings.sync:
            try:
                os.fsync(handle.fileno())
            except OSError as exc:
                raise SyncError(target, exc) from exc
        else:
            logger.debug("Skipping durability flush for %s", target)

    substitutions = sum(count_literal_newlines(line) for line in lines)
    logger.debug(
        "Wrote %d line(s) with %d substitution(s) to %s",
        written,
        substitutions,
        target,
    )

    return ConversionResult(
        input_path=source,
        output_path=target,
        lines_written=written,
        substitutions=substitutions,
    )


def _read_content(path: Path, encoding: Optional[str]) -> str:
    try:
        with path.open("r", encoding=encoding, newline="") as source:
            return source.read()
    except (OSError, UnicodeDecodeError, LookupError) as exc:
        raise ReadError(path, exc) from exc
