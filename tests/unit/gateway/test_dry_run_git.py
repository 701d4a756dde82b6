"""Tests for DryRunGit."""

from pathlib import Path

from semtag.gateway.feedback.fake import FakeUserFeedback
from semtag.gateway.git.dry_run import DryRunGit
from semtag.gateway.git.fake import FakeGit
from semtag.gateway.git.types import TagAuthor

REPO = Path("/repo")
AUTHOR = TagAuthor(name="Bot", email="bot@example.com")


def test_queries_delegate_to_wrapped() -> None:
    fake = FakeGit.with_tag_names("v1.0.0", repository_root=REPO, head_commit="f" * 40)
    dry_run = DryRunGit(fake, FakeUserFeedback())

    assert dry_run.get_repository_root(REPO) == REPO
    assert [tag.display_name for tag in dry_run.list_tags(REPO)] == ["v1.0.0"]
    assert dry_run.get_head_commit(REPO) == "f" * 40
    assert dry_run.get_file_status(REPO) == []


def test_mutations_are_reported_not_performed() -> None:
    fake = FakeGit.with_tag_names("v1", repository_root=REPO)
    feedback = FakeUserFeedback()
    dry_run = DryRunGit(fake, feedback)

    dry_run.delete_tag(REPO, "v1")
    dry_run.create_tag(REPO, "v1", "e" * 40, "v1", AUTHOR)

    assert fake.deleted_tags == []
    assert fake.created_tags == []
    assert feedback.texts("info") == [
        "[DRY RUN] Would run: git tag -d v1",
        "[DRY RUN] Would run: git -c user.name=Bot -c user.email=bot@example.com"
        f" tag -a v1 {'e' * 40} -m v1",
    ]


def test_create_notice_quotes_author_identity() -> None:
    feedback = FakeUserFeedback()
    dry_run = DryRunGit(FakeGit(repository_root=REPO), feedback)

    dry_run.create_tag(
        REPO, "v2.0.0", "e" * 40, "v2.0.0", TagAuthor(name="Release Bot", email="rb@example.com")
    )

    [notice] = feedback.texts("info")
    assert "'user.name=Release Bot'" in notice
    assert "-c user.email=rb@example.com" in notice
