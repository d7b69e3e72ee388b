"""Entry list data models."""
from dataclasses import dataclass
from enum import Enum
from typing import Annotated, Iterator, Literal, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, RootModel


class MatchMethod(str, Enum):
    """How an entry's pattern is compared against a candidate URL."""
    LITERAL = "literal"

    def __str__(self) -> str:
        return self.value


class EntryKind(str, Enum):
    """Entry variants, as spelled in the ``type`` tag."""
    DOMAIN = "domain"
    PATH = "path"

    def __str__(self) -> str:
        return self.value


class CompileTarget(str, Enum):
    """Supported output dialects."""
    U_BLACK_LIST = "uBlackList"
    U_BLOCK_ORIGIN = "uBlockOrigin"

    def __str__(self) -> str:
        return self.value


class FeatureFlag(str, Enum):
    """Optional rule sets a compile run can emit."""
    BASE = "Base"
    # Google search block rule, matches when the result URL starts with the entry.
    GOOGLE_SEARCH_PREFIX = "GoogleSearchPrefix"
    # Google search block rule, matches when the result URL contains the entry.
    GOOGLE_SEARCH_FUZZY = "GoogleSearchFuzzy"

    def __str__(self) -> str:
        return self.value

    @property
    def is_google_search(self) -> bool:
        return self in (FeatureFlag.GOOGLE_SEARCH_PREFIX, FeatureFlag.GOOGLE_SEARCH_FUZZY)


class _EntryBase(BaseModel):
    model_config = ConfigDict(frozen=True)

    match_method: MatchMethod = Field(..., alias="match")


class DomainEntry(_EntryBase):
    """Block every URL on a domain."""

    type: Literal["domain"] = "domain"
    domain: str

    @property
    def kind(self) -> EntryKind:
        return EntryKind.DOMAIN

    @property
    def pattern(self) -> str:
        return self.domain


class PathEntry(_EntryBase):
    """Block URLs under a host and path, e.g. ``example.com/ads``."""

    type: Literal["path"] = "path"
    path: str

    @property
    def kind(self) -> EntryKind:
        return EntryKind.PATH

    @property
    def pattern(self) -> str:
        return self.path


Entry = Annotated[Union[DomainEntry, PathEntry], Field(discriminator="type")]


class EntryList(RootModel[Tuple[Entry, ...]]):
    """Ordered, read-only sequence of entries.

    Serializes to and from a JSON array of tagged records::

        [{"type": "domain", "match": "literal", "domain": "example.com"}]
    """

    model_config = ConfigDict(frozen=True)

    def __iter__(self) -> Iterator[Union[DomainEntry, PathEntry]]:
        return iter(self.root)

    def __len__(self) -> int:
        return len(self.root)

    def __getitem__(self, index: int) -> Union[DomainEntry, PathEntry]:
        return self.root[index]

    def to_json(self) -> str:
        """Serialize back to the source shape."""
        return self.model_dump_json(by_alias=True)


@dataclass(frozen=True)
class HeaderAttribute:
    """One ``key: value`` line of the compiled file header."""
    key: str
    value: str

    @classmethod
    def parse(cls, token: str) -> "HeaderAttribute":
        """Parse a ``K=V`` token. The value may itself contain ``=``."""
        key, sep, value = token.partition("=")
        if not sep:
            raise ValueError(f"Header attribute must be in K=V form: {token!r}")
        return cls(key=key, value=value)
