"""Production Git operations using subprocess."""

from pathlib import Path

from semtag.gateway.git.abc import Git
from semtag.gateway.git.types import FileStatus, TagAuthor, TagRef
from semtag.subprocess_utils import run_subprocess_with_context

# refname, object type, annotated tag name, peeled object, object
_TAG_FORMAT = "%(refname:strip=2)%09%(objecttype)%09%(tag)%09%(*objectname)%09%(objectname)"


class RealGit(Git):
    """Production implementation of Git operations using the git CLI."""

    # ============================================================================
    # Query Operations
    # ============================================================================

    def get_repository_root(self, cwd: Path) -> Path:
        """Get the repository root directory."""
        result = run_subprocess_with_context(
            cmd=["git", "rev-parse", "--show-toplevel"],
            operation_context="get repository root",
            cwd=cwd,
        )
        return Path(result.stdout.strip())

    def list_tags(self, repo_root: Path) -> list[TagRef]:
        """List tags via git for-each-ref, resolving annotated tag names."""
        result = run_subprocess_with_context(
            cmd=["git", "for-each-ref", f"--format={_TAG_FORMAT}", "refs/tags"],
            operation_context="list tags",
            cwd=repo_root,
        )
        return [parse_tag_line(line) for line in result.stdout.splitlines() if line]

    def get_head_commit(self, repo_root: Path) -> str:
        """Get the commit hash of HEAD."""
        result = run_subprocess_with_context(
            cmd=["git", "rev-parse", "HEAD"],
            operation_context="find repository HEAD",
            cwd=repo_root,
        )
        return result.stdout.strip()

    def get_file_status(self, repo_root: Path) -> list[FileStatus]:
        """Get porcelain status entries, keeping each two-column XY code."""
        result = run_subprocess_with_context(
            cmd=["git", "status", "--porcelain"],
            operation_context="get worktree status",
            cwd=repo_root,
        )
        return [
            FileStatus(code=line[:2], path=line[3:])
            for line in result.stdout.splitlines()
            if line
        ]

    # ============================================================================
    # Mutation Operations
    # ============================================================================

    def delete_tag(self, repo_root: Path, tag_name: str) -> None:
        """Delete a local tag."""
        run_subprocess_with_context(
            cmd=["git", "tag", "-d", tag_name],
            operation_context=f"delete tag '{tag_name}'",
            cwd=repo_root,
        )

    def create_tag(
        self,
        repo_root: Path,
        tag_name: str,
        commit: str,
        message: str,
        author: TagAuthor,
    ) -> None:
        """Create an annotated tag with an explicit tagger identity."""
        run_subprocess_with_context(
            cmd=[
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
            ],
            operation_context=f"create tag '{tag_name}'",
            cwd=repo_root,
        )


def parse_tag_line(line: str) -> TagRef:
    """Parse one line of for-each-ref output produced with _TAG_FORMAT."""
    ref_name, object_type, tag_name, peeled, object_name = line.split("\t")
    if object_type == "tag":
        return TagRef(ref_name=ref_name, display_name=tag_name or ref_name, commit=peeled)
    return TagRef(ref_name=ref_name, display_name=ref_name, commit=object_name)
