"""Services package for the blocklist compiler.

This package provides:
- Entry list parsing and syntax checking
- Rule compilation for uBlacklist and uBlock Origin
"""

from blocklist.app.services.compiler import (
    CompileTarget,
    EntryList,
    FeatureFlag,
    HeaderAttribute,
    compile_entries,
    compile_file,
    parse_entries,
    syntax_check,
)

__all__ = [
    "CompileTarget",
    "EntryList",
    "FeatureFlag",
    "HeaderAttribute",
    "compile_entries",
    "compile_file",
    "parse_entries",
    "syntax_check",
]
