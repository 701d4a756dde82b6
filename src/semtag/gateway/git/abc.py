"""Abstract base class for Git operations used by the tagger."""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path

from semtag.gateway.git.types import FileStatus, TagAuthor, TagRef


class Git(ABC):
    """Abstract interface for Git operations.

    All implementations (real, fake, dry-run) must implement this interface.
    Failing operations raise RuntimeError describing what was attempted.
    """

    # ============================================================================
    # Query Operations
    # ============================================================================

    @abstractmethod
    def get_repository_root(self, cwd: Path) -> Path:
        """Get the top-level directory of the repository containing cwd.

        Raises:
            RuntimeError: If cwd is not inside a git repository
        """
        ...

    @abstractmethod
    def list_tags(self, repo_root: Path) -> list[TagRef]:
        """List every tag reference in the repository.

        Args:
            repo_root: Path to the repository root

        Returns:
            Tag references in no particular order
        """
        ...

    @abstractmethod
    def get_head_commit(self, repo_root: Path) -> str:
        """Get the commit hash HEAD points at."""
        ...

    @abstractmethod
    def get_file_status(self, repo_root: Path) -> list[FileStatus]:
        """Get the porcelain status entries of the worktree.

        Args:
            repo_root: Path to the repository root

        Returns:
            One entry per staged, modified, or untracked path, in git's order;
            empty when the worktree is clean
        """
        ...

    # ============================================================================
    # Mutation Operations
    # ============================================================================

    @abstractmethod
    def delete_tag(self, repo_root: Path, tag_name: str) -> None:
        """Delete a local tag.

        Raises:
            RuntimeError: If the tag does not exist or cannot be deleted
        """
        ...

    @abstractmethod
    def create_tag(
        self,
        repo_root: Path,
        tag_name: str,
        commit: str,
        message: str,
        author: TagAuthor,
    ) -> None:
        """Create an annotated tag pointing at commit.

        Args:
            repo_root: Path to the repository root
            tag_name: Tag name to create (e.g., 'v1.0.0')
            commit: Commit hash the tag points at
            message: Tag message
            author: Tagger identity recorded in the tag object

        Raises:
            RuntimeError: If the tag already exists or git fails
        """
        ...
