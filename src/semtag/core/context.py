"""Application context with dependency injection."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from semtag.gateway.feedback.abc import UserFeedback
from semtag.gateway.feedback.real import InteractiveFeedback
from semtag.gateway.git.abc import Git
from semtag.gateway.git.real import RealGit


@dataclass(frozen=True)
class SemtagContext:
    """Immutable context holding all dependencies for semtag operations.

    Created at the CLI entry point and threaded through the application.
    discovery_root bounds the upward search for VERSION and config files;
    None means search up to the filesystem root.
    """

    git: Git
    feedback: UserFeedback
    cwd: Path
    discovery_root: Path | None

    @staticmethod
    def for_test(
        git: Git | None = None,
        feedback: UserFeedback | None = None,
        cwd: Path | None = None,
        discovery_root: Path | None = None,
    ) -> SemtagContext:
        """Create a test context with fakes for anything not given.

        Discovery is confined to cwd unless discovery_root says otherwise,
        so files above a test's temporary directory are never picked up.
        """
        from semtag.gateway.feedback.fake import FakeUserFeedback
        from semtag.gateway.git.fake import FakeGit

        resolved_cwd = cwd if cwd is not None else Path("/test/repo")
        return SemtagContext(
            git=git if git is not None else FakeGit(repository_root=resolved_cwd),
            feedback=feedback if feedback is not None else FakeUserFeedback(),
            cwd=resolved_cwd,
            discovery_root=discovery_root if discovery_root is not None else resolved_cwd,
        )


def create_context() -> SemtagContext:
    """Create production context with real implementations."""
    return SemtagContext(
        git=RealGit(),
        feedback=InteractiveFeedback(),
        cwd=Path.cwd(),
        discovery_root=None,
    )
