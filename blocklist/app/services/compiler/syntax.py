"""Entry source parsing and syntax check."""
from __future__ import annotations

import os
from pathlib import Path
from typing import Union

from pydantic import ValidationError

from blocklist.app.core.config import settings
from blocklist.app.core.logging import get_log_context, get_logger
from blocklist.app.exceptions import DeserializeError, SourceIOError
from blocklist.app.services.compiler.models import EntryList

logger = get_logger(__name__)


def _describe_validation_error(error: ValidationError) -> str:
    """Flatten a pydantic error into a single line."""
    parts = []
    for item in error.errors(include_url=False):
        loc = "".join(
            f"[{p}]" if isinstance(p, int) else f".{p}" for p in item.get("loc", ())
        ).lstrip(".")
        msg = item.get("msg", "invalid value")
        parts.append(f"{loc}: {msg}" if loc else msg)
    return "; ".join(parts) or str(error)


def parse_entries(text: Union[str, bytes]) -> EntryList:
    """Parse JSON source text into an entry list.

    Args:
        text: JSON array of tagged entry records

    Returns:
        Parsed entry list, in source order

    Raises:
        DeserializeError: The text is not a well-formed entry list
    """
    try:
        return EntryList.model_validate_json(text)
    except ValidationError as e:
        raise DeserializeError(_describe_validation_error(e)) from e


def syntax_check(input_file: Union[str, os.PathLike]) -> EntryList:
    """Read and parse an entry source file.

    Raises:
        SourceIOError: The file cannot be read or decoded
        DeserializeError: The content is not a well-formed entry list
    """
    path = Path(input_file)
    try:
        text = path.read_text(encoding=settings.source_encoding)
    except (OSError, UnicodeDecodeError) as e:
        raise SourceIOError(str(e)) from e

    entries = parse_entries(text)
    logger.debug(
        "parsed %d entries from %s",
        len(entries),
        path,
        extra=get_log_context(input_file=str(path), entry_count=len(entries)),
    )
    return entries
