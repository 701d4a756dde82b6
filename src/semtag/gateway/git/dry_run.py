"""No-op Git wrapper for dry-run mode.

This module provides a Git wrapper that prevents execution of destructive
operations while delegating read-only operations to the wrapped implementation.
"""

import shlex
from pathlib import Path

from semtag.gateway.feedback.abc import UserFeedback
from semtag.gateway.git.abc import Git
from semtag.gateway.git.types import FileStatus, TagAuthor, TagRef


class DryRunGit(Git):
    """No-op wrapper that prevents execution of destructive operations.

    Tag deletion and creation are replaced by a notice describing the git
    command that would have run. Queries are delegated to the wrapped
    implementation so the rest of the computation sees real repository state.

    Usage:
        real_ops = RealGit()
        noop_ops = DryRunGit(real_ops, feedback)

        # Query operations work normally
        tags = noop_ops.list_tags(repo_root)

        # Mutation operations report instead of acting
        noop_ops.create_tag(repo_root, "v1.0.0", head, "v1.0.0", author)
    """

    def __init__(self, wrapped: Git, feedback: UserFeedback) -> None:
        """Create a dry-run wrapper around a Git implementation.

        Args:
            wrapped: The Git implementation to wrap (usually RealGit or FakeGit)
            feedback: Receives the dry-run notices
        """
        self._wrapped = wrapped
        self._feedback = feedback

    # ============================================================================
    # Query Operations (delegate to wrapped implementation)
    # ============================================================================

    def get_repository_root(self, cwd: Path) -> Path:
        return self._wrapped.get_repository_root(cwd)

    def list_tags(self, repo_root: Path) -> list[TagRef]:
        return self._wrapped.list_tags(repo_root)

    def get_head_commit(self, repo_root: Path) -> str:
        return self._wrapped.get_head_commit(repo_root)

    def get_file_status(self, repo_root: Path) -> list[FileStatus]:
        return self._wrapped.get_file_status(repo_root)

    # ============================================================================
    # Mutation Operations (report dry-run notice)
    # ============================================================================

    def delete_tag(self, repo_root: Path, tag_name: str) -> None:
        """Report instead of deleting the tag."""
        self._feedback.info(f"[DRY RUN] Would run: git tag -d {tag_name}")

    def create_tag(
        self,
        repo_root: Path,
        tag_name: str,
        commit: str,
        message: str,
        author: TagAuthor,
    ) -> None:
        """Report instead of creating the tag."""
        cmd = [
            "git",
            "-c",
            f"user.name={author.name}",
            "-c",
            f"user.email={author.email}",
            "tag",
            "-a",
            tag_name,
            commit,
            "-m",
            message,
        ]
        self._feedback.info(f"[DRY RUN] Would run: {shlex.join(cmd)}")
