"""Compiler package.

- models.py: Entry list data models
- dialects.py: Per-target rule templates
- syntax.py: Source parsing and syntax check
- service.py: Rule compiler
"""

from blocklist.app.services.compiler.dialects import (
    DIALECTS,
    Dialect,
    get_dialect,
    google_search_rules,
)
from blocklist.app.services.compiler.models import (
    CompileTarget,
    DomainEntry,
    Entry,
    EntryKind,
    EntryList,
    FeatureFlag,
    HeaderAttribute,
    MatchMethod,
    PathEntry,
)
from blocklist.app.services.compiler.service import (
    compile_entries,
    compile_file,
    render_general_rules,
    render_google_search_rules,
    render_header,
    validate_feature_set,
)
from blocklist.app.services.compiler.syntax import parse_entries, syntax_check

__all__ = [
    "DIALECTS",
    "Dialect",
    "get_dialect",
    "google_search_rules",
    "CompileTarget",
    "DomainEntry",
    "Entry",
    "EntryKind",
    "EntryList",
    "FeatureFlag",
    "HeaderAttribute",
    "MatchMethod",
    "PathEntry",
    "compile_entries",
    "compile_file",
    "render_general_rules",
    "render_google_search_rules",
    "render_header",
    "validate_feature_set",
    "parse_entries",
    "syntax_check",
]
