"""Decide whether a new version tag is warranted and create it."""

from pathlib import Path

from semver import Version

from semtag.cli.config import TaggerConfig
from semtag.core.types import NoNewVersion, TagFailed, TagOutcome, TagsCreated
from semtag.core.versions import largest_version_for_major, parse_version
from semtag.gateway.feedback.abc import UserFeedback
from semtag.gateway.git.abc import Git
from semtag.gateway.git.dry_run import DryRunGit
from semtag.gateway.git.types import FileStatus, TagAuthor


def version_tag_name(version: Version) -> str:
    return f"v{version}"


def major_alias_tag_name(version: Version) -> str:
    return f"v{version.major}"


def format_file_status(entries: list[FileStatus]) -> str:
    """Render worktree status exactly as `git status --porcelain` printed it."""
    return "\n".join(entry.line for entry in entries)


class Tagger:
    """Creates a version tag at HEAD when the configured version is new.

    The flow is: resolve repository, parse requested version, find the
    previous version for the same major line, then either stop (no new
    version, dirty tree) or replace the tags. In dry-run mode the git
    gateway is wrapped so mutations are reported instead of performed.
    """

    def __init__(
        self, *, git: Git, feedback: UserFeedback, config: TaggerConfig, cwd: Path
    ) -> None:
        if config.dry_run and not isinstance(git, DryRunGit):
            git = DryRunGit(git, feedback)
        self._git = git
        self._feedback = feedback
        self._config = config
        self._cwd = cwd

    def largest_existing_version(self, repo_root: Path, major: int) -> Version:
        """Find the largest version tag in the repository for a major line.

        Raises:
            RuntimeError: If tags cannot be listed
            InvalidVersionTagError: If a full-looking tag name is malformed
        """
        names = [tag.display_name for tag in self._git.list_tags(repo_root)]
        return largest_version_for_major(names, major)

    def tag(self) -> TagOutcome:
        """Run the tagging decision once."""
        try:
            repo_root = self._git.get_repository_root(self._cwd)
        except RuntimeError as e:
            return TagFailed(kind="repository", message=f"opening git repo: {e}")
        if repo_root.resolve() != self._cwd.resolve():
            return TagFailed(
                kind="repository",
                message=f"opening git repo: {self._cwd} is not a repository root ({repo_root})",
            )

        try:
            requested = parse_version(self._config.version)
        except ValueError as e:
            return TagFailed(
                kind="invalid-version",
                message=f"parsing requested version '{self._config.version}': {e}",
            )

        try:
            previous = self.largest_existing_version(repo_root, requested.major)
        except RuntimeError as e:
            return TagFailed(
                kind="repository", message=f"getting repo tags: {e}", requested=requested
            )
        except ValueError as e:
            return TagFailed(kind="invalid-tag", message=str(e), requested=requested)
        self._feedback.info(f"found largest semver tag v{previous} for major {requested.major}")

        if not requested > previous:
            outcome = NoNewVersion(requested=requested, previous=previous)
            self._feedback.info(outcome.message)
            return outcome

        try:
            file_status = self._git.get_file_status(repo_root)
        except RuntimeError as e:
            return TagFailed(
                kind="repository",
                message=f"getting worktree status: {e}",
                requested=requested,
                previous=previous,
            )
        if file_status:
            return TagFailed(
                kind="dirty-tree",
                message="dirty git state, can't tag",
                requested=requested,
                previous=previous,
                details=format_file_status(file_status),
            )

        tag_names = [version_tag_name(requested)]
        if self._config.create_major_alias:
            tag_names.append(major_alias_tag_name(requested))

        try:
            self._replace_tags(repo_root, tag_names)
        except RuntimeError as e:
            return TagFailed(
                kind="tag-write",
                message=f"creating git tag: {e}",
                requested=requested,
                previous=previous,
            )

        if self._config.dry_run:
            self._feedback.info(f"would have created {', '.join(tag_names)}")
        else:
            self._feedback.success(
                f"created {', '.join(tag_names)}. Push to origin still required."
            )
        return TagsCreated(
            requested=requested,
            previous=previous,
            tag_names=tuple(tag_names),
            dry_run=self._config.dry_run,
        )

    def _replace_tags(self, repo_root: Path, tag_names: list[str]) -> None:
        head = self._git.get_head_commit(repo_root)
        author = TagAuthor(name=self._config.git_author_name, email=self._config.git_author_email)
        for name in tag_names:
            try:
                self._git.delete_tag(repo_root, name)
            except RuntimeError as e:
                self._feedback.info(f"failed to delete tag {name}, but probably not an issue: {e}")
            self._git.create_tag(repo_root, name, head, name, author)
