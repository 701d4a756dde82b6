"""Fake implementation of Git operations for testing."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from semtag.gateway.git.abc import Git
from semtag.gateway.git.types import FileStatus, TagAuthor, TagRef


@dataclass(frozen=True)
class CreatedTag:
    """Record of a create_tag() call on FakeGit."""

    tag_name: str
    commit: str
    message: str
    author: TagAuthor


class FakeGit(Git):
    """In-memory fake implementation of Git operations.

    This fake accepts pre-configured state in its constructor and tracks
    mutations for test assertions.

    Constructor Injection:
    ---------------------
    - repository_root: Root returned by get_repository_root(), or None to
      simulate running outside a repository
    - tags: Tag references present in the repository
    - head_commit: Commit hash HEAD points at
    - file_status: Porcelain entries returned by get_file_status()
    - list_tags_error: If set, list_tags() raises RuntimeError with this message
    - create_tag_error: If set, create_tag() raises RuntimeError with this message

    Mutation Tracking:
    -----------------
    - created_tags: CreatedTag records from create_tag()
    - deleted_tags: Names passed to delete_tag() that existed
    """

    def __init__(
        self,
        *,
        repository_root: Path | None = None,
        tags: list[TagRef] | None = None,
        head_commit: str = "0" * 40,
        file_status: list[FileStatus] | None = None,
        list_tags_error: str | None = None,
        create_tag_error: str | None = None,
    ) -> None:
        self._repository_root = repository_root
        self._tags: list[TagRef] = list(tags) if tags is not None else []
        self._head_commit = head_commit
        self._file_status = list(file_status) if file_status is not None else []
        self._list_tags_error = list_tags_error
        self._create_tag_error = create_tag_error

        # Mutation tracking
        self._created_tags: list[CreatedTag] = []
        self._deleted_tags: list[str] = []

    @staticmethod
    def with_tag_names(*names: str, repository_root: Path, **kwargs) -> FakeGit:
        """Build a FakeGit whose lightweight tags all point at an old commit."""
        tags = [TagRef(ref_name=name, display_name=name, commit="1" * 40) for name in names]
        return FakeGit(repository_root=repository_root, tags=tags, **kwargs)

    # ============================================================================
    # Query Operations
    # ============================================================================

    def get_repository_root(self, cwd: Path) -> Path:
        if self._repository_root is None:
            raise RuntimeError("Failed to get repository root: not a git repository")
        return self._repository_root

    def list_tags(self, repo_root: Path) -> list[TagRef]:
        if self._list_tags_error is not None:
            raise RuntimeError(self._list_tags_error)
        return list(self._tags)

    def get_head_commit(self, repo_root: Path) -> str:
        return self._head_commit

    def get_file_status(self, repo_root: Path) -> list[FileStatus]:
        return list(self._file_status)

    # ============================================================================
    # Mutation Operations
    # ============================================================================

    def delete_tag(self, repo_root: Path, tag_name: str) -> None:
        """Remove a tag by ref name (mutates internal state)."""
        remaining = [tag for tag in self._tags if tag.ref_name != tag_name]
        if len(remaining) == len(self._tags):
            raise RuntimeError(f"Failed to delete tag '{tag_name}': tag not found")
        self._tags = remaining
        self._deleted_tags.append(tag_name)

    def create_tag(
        self,
        repo_root: Path,
        tag_name: str,
        commit: str,
        message: str,
        author: TagAuthor,
    ) -> None:
        """Create an annotated tag (mutates internal state)."""
        if self._create_tag_error is not None:
            raise RuntimeError(self._create_tag_error)
        if any(tag.ref_name == tag_name for tag in self._tags):
            raise RuntimeError(f"Failed to create tag '{tag_name}': tag already exists")
        self._tags.append(TagRef(ref_name=tag_name, display_name=tag_name, commit=commit))
        self._created_tags.append(
            CreatedTag(tag_name=tag_name, commit=commit, message=message, author=author)
        )

    # ============================================================================
    # Mutation Tracking Properties
    # ============================================================================

    @property
    def tags(self) -> list[TagRef]:
        """Current tag references, including ones created during the test."""
        return list(self._tags)

    @property
    def created_tags(self) -> list[CreatedTag]:
        """Tags created during the test.

        This property is for test assertions only.
        """
        return self._created_tags.copy()

    @property
    def deleted_tags(self) -> list[str]:
        """Tag names deleted during the test.

        This property is for test assertions only.
        """
        return self._deleted_tags.copy()
