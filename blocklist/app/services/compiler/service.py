"""Rule compiler."""

from __future__ import annotations

import os
from pathlib import Path
from typing import FrozenSet, Iterable, Optional, Sequence, Union

from blocklist.app.core.config import settings
from blocklist.app.core.logging import get_log_context, get_logger
from blocklist.app.exceptions import (
    CompileSyntaxError,
    ConflictingFeatureSetError,
    OutputIOError,
    SyntaxCheckError,
    UnsupportedFeatureSetError,
)
from blocklist.app.services.compiler.dialects import (
    GOOGLE_SEARCH_MATCH_METHODS,
    Dialect,
    get_dialect,
    google_search_rules,
)
from blocklist.app.services.compiler.models import (
    CompileTarget,
    DomainEntry,
    FeatureFlag,
    HeaderAttribute,
    PathEntry,
)
from blocklist.app.services.compiler.syntax import syntax_check

logger = get_logger(__name__)

EntryLike = Union[DomainEntry, PathEntry]


def validate_feature_set(
    target: CompileTarget,
    feature_flags: Iterable[FeatureFlag],
) -> FrozenSet[FeatureFlag]:
    """Check that the requested feature flags can be emitted for ``target``.

    Returns:
        The requested flags as a set

    Raises:
        UnsupportedFeatureSetError: A flag is not available for the target
        ConflictingFeatureSetError: Both Google search variants were requested
    """
    dialect = get_dialect(target)
    flags = frozenset(FeatureFlag(f) for f in feature_flags)

    if flags - dialect.features:
        raise UnsupportedFeatureSetError()

    if {FeatureFlag.GOOGLE_SEARCH_PREFIX, FeatureFlag.GOOGLE_SEARCH_FUZZY} <= flags:
        raise ConflictingFeatureSetError(
            str(FeatureFlag.GOOGLE_SEARCH_PREFIX), str(FeatureFlag.GOOGLE_SEARCH_FUZZY)
        )
    return flags


def render_header(dialect: Dialect, header_attributes: Iterable[HeaderAttribute]) -> str:
    return "".join(dialect.header_line(attr) for attr in header_attributes)


def render_general_rules(dialect: Dialect, entries: Iterable[EntryLike]) -> str:
    """One general rule per entry, in input order, each ending in a newline."""
    return "".join(f"{dialect.general_rule(entry)}\n" for entry in entries)


def render_google_search_rules(entries: Iterable[EntryLike], feature: FeatureFlag) -> str:
    """Two Google search rules per literal entry, newline separated.

    Entries with a non-literal match method are skipped. The block carries no
    trailing newline.
    """
    lines = []
    for entry in entries:
        if entry.match_method not in GOOGLE_SEARCH_MATCH_METHODS:
            continue
        lines.extend(google_search_rules(entry.pattern, feature))
    return "\n".join(lines)


def _google_search_feature(flags: FrozenSet[FeatureFlag]) -> Optional[FeatureFlag]:
    # At most one survives validate_feature_set
    return next((flag for flag in flags if flag.is_google_search), None)


def compile_entries(
    entries: Iterable[EntryLike],
    target: CompileTarget,
    feature_flags: Iterable[FeatureFlag],
    header_attributes: Sequence[HeaderAttribute] = (),
) -> str:
    """Compile an entry list into rule text for one dialect.

    Blocks are assembled header first, then general rules (``Base``), then
    Google search rules. An empty flag set yields an empty string.

    Args:
        entries: Parsed entries, in output order
        target: Output dialect
        feature_flags: Rule sets to emit
        header_attributes: Commented metadata lines, in output order

    Returns:
        The compiled text

    Raises:
        UnsupportedFeatureSetError: The flags cannot be emitted for ``target``
        UnsupportedMatchMethodError: The dialect has no template for an entry
    """
    flags = frozenset(FeatureFlag(f) for f in feature_flags)
    if not flags:
        return ""

    flags = validate_feature_set(target, flags)
    dialect = get_dialect(target)
    entries = tuple(entries)
    header_attributes = tuple(header_attributes)

    outputs = [render_header(dialect, header_attributes)]
    logger.info(
        "loaded %d headers",
        len(header_attributes),
        extra=get_log_context(target=str(target), header_count=len(header_attributes)),
    )

    if FeatureFlag.BASE in flags:
        outputs.append(render_general_rules(dialect, entries))
        logger.info("pushed General block rules")

    google = _google_search_feature(flags)
    if google is not None:
        outputs.append(render_google_search_rules(entries, google))
        logger.info("pushed Google block rules")

    return "".join(outputs)


def compile_file(
    input_file: Union[str, os.PathLike],
    output_file: Union[str, os.PathLike],
    target: CompileTarget,
    feature_flags: Iterable[FeatureFlag],
    header_attributes: Sequence[HeaderAttribute] = (),
) -> str:
    """Compile an entry source file and write the result.

    The output is fully assembled before the file is opened. With an empty
    flag set neither file is touched.

    Returns:
        The text written (empty when nothing was written)

    Raises:
        CompileSyntaxError: The source failed the syntax check
        UnsupportedFeatureSetError: The flags cannot be emitted for ``target``
        OutputIOError: The output file could not be written
    """
    flags = frozenset(FeatureFlag(f) for f in feature_flags)
    context = get_log_context(
        command="compile",
        target=str(target),
        input_file=str(input_file),
        output_file=str(output_file),
        features=sorted(str(f) for f in flags),
    )
    if not flags:
        logger.info("no feature flags requested, nothing to write", extra=context)
        return ""

    # Reject bad flag sets before reading anything
    validate_feature_set(target, flags)

    try:
        entries = syntax_check(input_file)
    except SyntaxCheckError as e:
        raise CompileSyntaxError(e) from e
    logger.info("loaded %d entries", len(entries), extra={**context, "entry_count": len(entries)})

    text = compile_entries(entries, target, flags, header_attributes)

    logger.info("writing file", extra=context)
    try:
        Path(output_file).write_text(text, encoding=settings.output_encoding, newline="")
    except (OSError, UnicodeEncodeError) as e:
        raise OutputIOError(str(e)) from e
    return text
