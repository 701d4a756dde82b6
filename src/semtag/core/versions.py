"""Semantic version parsing and tag scanning."""

from collections.abc import Iterable

from semver import Version

FLOOR_VERSION = Version(0, 0, 0)


class InvalidVersionTagError(ValueError):
    """A tag that looks like a full version could not be parsed as one."""

    def __init__(self, tag_name: str, reason: str) -> None:
        super().__init__(f"tag '{tag_name}' is not a valid semantic version: {reason}")
        self.tag_name = tag_name


def parse_version(text: str) -> Version:
    """Parse a semantic version, tolerating a leading 'v' and missing minor/patch.

    >>> parse_version("v1.3")
    Version(major=1, minor=3, patch=0, prerelease=None, build=None)

    Raises:
        ValueError: If text is not a semantic version
    """
    candidate = text.strip()
    if candidate.startswith("v"):
        candidate = candidate[1:]
    return Version.parse(candidate, optional_minor_and_patch=True)


def is_full_version_name(name: str) -> bool:
    """Check whether a tag name has at least three dot-separated components."""
    return len(name.split(".")) >= 3


def largest_version_for_major(tag_names: Iterable[str], major: int) -> Version:
    """Find the largest version among tag names sharing the given major number.

    Names with fewer than three dot-separated components are not full version
    tags and are skipped. Names with three or more components must parse; a
    malformed one aborts the scan.

    Args:
        tag_names: Tag display names, e.g. 'v1.2.0'
        major: Major version line to search

    Returns:
        The largest matching version, or 0.0.0 if no tag matches

    Raises:
        InvalidVersionTagError: If a full-looking tag name fails to parse
    """
    largest = FLOOR_VERSION
    for name in tag_names:
        if not is_full_version_name(name):
            continue
        try:
            version = parse_version(name)
        except ValueError as e:
            raise InvalidVersionTagError(name, str(e)) from e
        if version.major == major and version > largest:
            largest = version
    return largest
