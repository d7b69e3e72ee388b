"""Per-target rule templates.

Everything that differs between output dialects lives here so adding a
target only touches this table.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, FrozenSet, Mapping, Tuple, Union

from blocklist.app.exceptions import UnsupportedMatchMethodError
from blocklist.app.services.compiler.models import (
    CompileTarget,
    DomainEntry,
    EntryKind,
    FeatureFlag,
    HeaderAttribute,
    MatchMethod,
    PathEntry,
)


@dataclass(frozen=True)
class Dialect:
    """Constants of one output dialect.

    Attributes:
        target: Dialect this entry describes
        comment: Comment prefix used for header lines
        general_rules: ``str.format`` templates keyed by (entry kind, match
            method); ``{pattern}`` is replaced with the raw entry text
        features: Feature flags this dialect can emit
    """
    target: CompileTarget
    comment: str
    general_rules: Mapping[Tuple[EntryKind, MatchMethod], str]
    features: FrozenSet[FeatureFlag]

    def header_line(self, attribute: HeaderAttribute) -> str:
        return f"{self.comment} {attribute.key}: {attribute.value}\n"

    def general_rule(self, entry: Union[DomainEntry, PathEntry]) -> str:
        """Render the general block rule for one entry, without line break."""
        template = self.general_rules.get((entry.kind, entry.match_method))
        if template is None:
            raise UnsupportedMatchMethodError(
                str(self.target), str(entry.kind), str(entry.match_method)
            )
        return template.format(pattern=entry.pattern)


DIALECTS: Dict[CompileTarget, Dialect] = {
    CompileTarget.U_BLACK_LIST: Dialect(
        target=CompileTarget.U_BLACK_LIST,
        comment="#",
        general_rules={
            (EntryKind.DOMAIN, MatchMethod.LITERAL): "*://{pattern}/*",
            (EntryKind.PATH, MatchMethod.LITERAL): "*://{pattern}",
        },
        # uBlacklist match patterns have no prefix operator
        features=frozenset({FeatureFlag.BASE, FeatureFlag.GOOGLE_SEARCH_FUZZY}),
    ),
    CompileTarget.U_BLOCK_ORIGIN: Dialect(
        target=CompileTarget.U_BLOCK_ORIGIN,
        comment="!",
        general_rules={
            (EntryKind.DOMAIN, MatchMethod.LITERAL): "||{pattern}^",
            (EntryKind.PATH, MatchMethod.LITERAL): "||{pattern}^",
        },
        features=frozenset(FeatureFlag),
    ),
}


# Attribute selector operator per Google search feature
GOOGLE_SEARCH_OPERATORS: Dict[FeatureFlag, str] = {
    FeatureFlag.GOOGLE_SEARCH_PREFIX: "^=",
    FeatureFlag.GOOGLE_SEARCH_FUZZY: "*=",
}

# Two cosmetic rules per entry: the result card containing the link, and the
# link's parent. The first template is reproduced without a closing bracket.
GOOGLE_SEARCH_TEMPLATES: Tuple[str, str] = (
    'www.google.*##.g:has(a[href{operator}"{pattern}")',
    'www.google.*##.a[href{operator}"{pattern}"]:upward(1)',
)

# Only literal patterns can be embedded in an attribute selector
GOOGLE_SEARCH_MATCH_METHODS: FrozenSet[MatchMethod] = frozenset({MatchMethod.LITERAL})


def get_dialect(target: CompileTarget) -> Dialect:
    return DIALECTS[CompileTarget(target)]


def google_search_rules(pattern: str, feature: FeatureFlag) -> Tuple[str, str]:
    """Render the Google search rule pair for one pattern."""
    operator = GOOGLE_SEARCH_OPERATORS[feature]
    return tuple(
        template.format(operator=operator, pattern=pattern)
        for template in GOOGLE_SEARCH_TEMPLATES
    )
