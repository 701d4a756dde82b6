"""Discriminated union of tag operation outcomes.

TagsCreated | NoNewVersion | TagFailed follows the NonIdealState pattern:
non-success variants carry a message and an error_type, and callers branch
on the variant's type rather than comparing error identities.
"""

from dataclasses import dataclass
from typing import Literal

from semver import Version

TagFailureKind = Literal[
    "repository",
    "invalid-version",
    "invalid-tag",
    "dirty-tree",
    "tag-write",
]


@dataclass(frozen=True)
class TagsCreated:
    """Success: the tags were created (or would have been, in dry-run mode)."""

    requested: Version
    previous: Version
    tag_names: tuple[str, ...]
    dry_run: bool


@dataclass(frozen=True)
class NoNewVersion:
    """The requested version is not newer than the latest tag. Implements NonIdealState."""

    requested: Version
    previous: Version

    @property
    def message(self) -> str:
        return (
            f"version v{self.requested} is not greater than latest tag "
            f"v{self.previous}, nothing to do"
        )

    @property
    def error_type(self) -> str:
        return "no-new-version"


@dataclass(frozen=True)
class TagFailed:
    """The operation failed. Implements NonIdealState.

    requested and previous are set whenever they were computed before the
    failure, so callers can report them regardless of outcome.
    """

    kind: TagFailureKind
    message: str
    requested: Version | None = None
    previous: Version | None = None
    details: str | None = None

    @property
    def error_type(self) -> str:
        return self.kind


TagOutcome = TagsCreated | NoNewVersion | TagFailed
