"""Tests for the tag command using injected fakes."""

from pathlib import Path

from click.testing import CliRunner

from semtag.cli.cli import cli
from semtag.core.context import SemtagContext
from semtag.gateway.feedback.fake import FakeUserFeedback
from semtag.gateway.git.fake import FakeGit
from semtag.gateway.git.types import FileStatus

HEAD = "c" * 40

BASE_ENV = {
    "TAG_VERSION": None,
    "TAG_VERSION_FILE": None,
    "TAG_DRY_RUN": None,
    "TAG_CREATE_MAJOR_ALIAS": None,
    "TAG_GIT_AUTHOR_NAME": "Release Bot",
    "TAG_GIT_AUTHOR_EMAIL": "bot@example.com",
}


def _invoke(
    ctx: SemtagContext, args: list[str] | None = None, env: dict[str, str | None] | None = None
):
    runner = CliRunner()
    return runner.invoke(cli, ["tag", *(args or [])], obj=ctx, env={**BASE_ENV, **(env or {})})


def _context(tmp_path: Path, git: FakeGit, feedback: FakeUserFeedback | None = None):
    return SemtagContext.for_test(
        git=git,
        feedback=feedback if feedback is not None else FakeUserFeedback(),
        cwd=tmp_path,
    )


def test_creates_tag_and_prints_versions(tmp_path: Path) -> None:
    (tmp_path / "VERSION").write_text("1.3.0\n", encoding="utf-8")
    git = FakeGit.with_tag_names(
        "v1.0.0", "v1.2.0", "v2.0.0", repository_root=tmp_path, head_commit=HEAD
    )

    result = _invoke(_context(tmp_path, git))

    assert result.exit_code == 0, result.output
    assert result.stdout == "v1.3.0,v1.2.0"
    assert [(c.tag_name, c.commit) for c in git.created_tags] == [("v1.3.0", HEAD)]


def test_version_from_environment_with_major_alias(tmp_path: Path) -> None:
    git = FakeGit.with_tag_names("v2.0.0", repository_root=tmp_path, head_commit=HEAD)

    result = _invoke(
        _context(tmp_path, git),
        env={"TAG_VERSION": "1.9.9", "TAG_CREATE_MAJOR_ALIAS": "true"},
    )

    assert result.exit_code == 0, result.output
    assert result.stdout == "v1.9.9,v0.0.0"
    assert [c.tag_name for c in git.created_tags] == ["v1.9.9", "v1"]


def test_no_new_version_exits_8(tmp_path: Path) -> None:
    git = FakeGit.with_tag_names("v1.2.0", repository_root=tmp_path)

    result = _invoke(_context(tmp_path, git), env={"TAG_VERSION": "1.2.0"})

    assert result.exit_code == 8
    assert result.stdout == "v1.2.0,v1.2.0"
    assert git.created_tags == []


def test_dirty_tree_exits_1_and_reports_status(tmp_path: Path) -> None:
    git = FakeGit.with_tag_names(
        "v1.2.0",
        repository_root=tmp_path,
        file_status=[
            FileStatus(code="MM", path="src/app.py"),
            FileStatus(code="D ", path="gone.py"),
        ],
    )
    feedback = FakeUserFeedback()

    result = _invoke(_context(tmp_path, git, feedback), env={"TAG_VERSION": "1.3.0"})

    assert result.exit_code == 1
    assert result.stdout == "v1.3.0,v1.2.0"
    assert git.created_tags == []
    assert feedback.texts("error") == ["dirty git state, can't tag"]
    assert feedback.texts("details") == ["MM src/app.py\nD  gone.py"]


def test_dry_run_flag_prevents_mutation(tmp_path: Path) -> None:
    git = FakeGit.with_tag_names("v1.2.0", repository_root=tmp_path)
    feedback = FakeUserFeedback()

    result = _invoke(
        _context(tmp_path, git, feedback), ["--dry-run"], env={"TAG_VERSION": "1.3.0"}
    )

    assert result.exit_code == 0, result.output
    assert result.stdout == "v1.3.0,v1.2.0"
    assert git.created_tags == []
    assert any(text.startswith("[DRY RUN]") for text in feedback.texts("info"))


def test_dry_run_from_environment(tmp_path: Path) -> None:
    git = FakeGit.with_tag_names("v1.2.0", repository_root=tmp_path)

    result = _invoke(_context(tmp_path, git), env={"TAG_VERSION": "1.3.0", "TAG_DRY_RUN": "1"})

    assert result.exit_code == 0, result.output
    assert git.created_tags == []


def test_dry_run_from_yaml_config(tmp_path: Path) -> None:
    (tmp_path / ".semtag.yaml").write_text("dry-run: true\n", encoding="utf-8")
    git = FakeGit.with_tag_names("v1.2.0", repository_root=tmp_path)

    result = _invoke(_context(tmp_path, git), env={"TAG_VERSION": "1.3.0"})

    assert result.exit_code == 0, result.output
    assert git.created_tags == []


def test_missing_version_source_exits_1(tmp_path: Path) -> None:
    git = FakeGit(repository_root=tmp_path)

    result = _invoke(_context(tmp_path, git))

    assert result.exit_code == 1
    assert result.stdout == ""
    assert "unable to find VERSION" in result.output


def test_invalid_requested_version_prints_nothing_to_stdout(tmp_path: Path) -> None:
    git = FakeGit(repository_root=tmp_path)
    feedback = FakeUserFeedback()

    result = _invoke(_context(tmp_path, git, feedback), env={"TAG_VERSION": "not-a-version"})

    assert result.exit_code == 1
    assert result.stdout == ""
    assert len(feedback.texts("error")) == 1


def test_not_a_repository_exits_1(tmp_path: Path) -> None:
    git = FakeGit(repository_root=None)

    result = _invoke(_context(tmp_path, git), env={"TAG_VERSION": "1.0.0"})

    assert result.exit_code == 1
    assert git.created_tags == []


def test_help_lists_dry_run() -> None:
    result = CliRunner().invoke(cli, ["tag", "--help"], obj=SemtagContext.for_test())

    assert result.exit_code == 0
    assert "--dry-run" in result.output
