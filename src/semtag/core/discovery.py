"""Locate files by walking up the directory tree."""

from pathlib import Path

VERSION_FILE_NAME = "VERSION"
CONFIG_FILE_NAME = ".semtag.yaml"


class VersionFileError(Exception):
    """A version file could not be found or read."""


def find_upwards(start: Path, filename: str, *, stop_at: Path | None = None) -> Path | None:
    """Walk up from start looking for filename.

    The filesystem root itself is not examined. When stop_at is given, the
    walk ends after examining that directory, so tests can confine discovery
    to a temporary tree.

    Args:
        start: Directory to begin the search in
        filename: Name of the file to look for
        stop_at: Last directory to examine (inclusive)

    Returns:
        Path to the first match, or None
    """
    current = start
    while current != current.parent:
        candidate = current / filename
        if candidate.is_file():
            return candidate
        if stop_at is not None and current == stop_at:
            return None
        current = current.parent
    return None


def read_version_file(path: Path) -> str:
    """Return the first line of a version file."""
    try:
        content = path.read_text(encoding="utf-8")
    except OSError as e:
        raise VersionFileError(f"reading version file {path}: {e}") from e
    first_line = content.split("\n", 1)[0].strip()
    if not first_line:
        raise VersionFileError(f"version file {path} has an empty first line")
    return first_line


def version_from_file(start: Path, *, stop_at: Path | None = None) -> str:
    """Find the nearest VERSION file above start and return its first line."""
    path = find_upwards(start, VERSION_FILE_NAME, stop_at=stop_at)
    if path is None:
        raise VersionFileError(f"unable to find {VERSION_FILE_NAME} file in any path up to root")
    return read_version_file(path)
