"""Value types exchanged with the Git gateway."""

from dataclasses import dataclass


@dataclass(frozen=True)
class TagRef:
    """A tag reference as stored in the repository.

    ref_name is the short name under refs/tags/. display_name is the name
    recorded in the annotated tag object when the ref points at one, and
    ref_name otherwise. commit is the object the ref peels to one level
    (%(*objectname)): the commit for lightweight tags and for annotated
    tags of commits, but the inner tag object for a tag of a tag.
    """

    ref_name: str
    display_name: str
    commit: str


@dataclass(frozen=True)
class TagAuthor:
    """Identity recorded as the tagger of an annotated tag."""

    name: str
    email: str


@dataclass(frozen=True)
class FileStatus:
    """One entry of `git status --porcelain`.

    code is the two-column XY status (index, worktree), e.g. "M ", " M",
    "MM", "D ", "R " or "??". path is the remainder of the line, which for
    renames and copies reads "old -> new".
    """

    code: str
    path: str

    @property
    def line(self) -> str:
        """The entry as git printed it."""
        return f"{self.code} {self.path}"
