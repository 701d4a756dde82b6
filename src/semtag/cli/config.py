"""Layered configuration for the tag command.

Sources, lowest precedence first:
  1. TAG_* environment variables (TAG_GIT_AUTHOR_NAME -> git-author-name)
  2. .semtag.yaml, found by walking up from the working directory
  3. command-line flags

Example .semtag.yaml:
  git-author-name: Release Bot
  git-author-email: release-bot@example.com
  create-major-alias: true
"""

from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from semtag.core.discovery import (
    CONFIG_FILE_NAME,
    VersionFileError,
    find_upwards,
    read_version_file,
    version_from_file,
)

ENV_PREFIX = "TAG_"

KNOWN_KEYS = frozenset(
    {
        "version",
        "version-file",
        "dry-run",
        "git-author-name",
        "git-author-email",
        "create-major-alias",
    }
)

_TRUE_STRINGS = frozenset({"1", "true", "yes", "on"})
_FALSE_STRINGS = frozenset({"0", "false", "no", "off", ""})


class ConfigError(Exception):
    """Configuration is missing, malformed, or fails validation."""


@dataclass(frozen=True)
class TaggerConfig:
    """Validated settings for one tagging run."""

    version: str
    git_author_name: str
    git_author_email: str
    dry_run: bool = False
    create_major_alias: bool = False
    version_file: Path | None = None


def env_key(variable: str) -> str:
    """Map an environment variable name to a config key.

    >>> env_key("TAG_GIT_AUTHOR_NAME")
    'git-author-name'
    """
    return variable.removeprefix(ENV_PREFIX).lower().replace("_", "-")


def load_env_layer(environ: Mapping[str, str]) -> dict[str, Any]:
    """Collect recognized TAG_* variables. Unrecognized ones are ignored."""
    layer: dict[str, Any] = {}
    for variable, value in environ.items():
        if not variable.startswith(ENV_PREFIX):
            continue
        key = env_key(variable)
        if key in KNOWN_KEYS:
            layer[key] = value
    return layer


def load_yaml_layer(path: Path) -> dict[str, Any]:
    """Load a YAML config file as a flat mapping of known keys."""
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"reading config file {path}: {e}") from e
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"config file {path} must contain a mapping")
    unknown = sorted(str(key) for key in data if key not in KNOWN_KEYS)
    if unknown:
        raise ConfigError(f"config file {path} has unknown keys: {', '.join(unknown)}")
    return dict(data)


def merge_layers(*layers: Mapping[str, Any]) -> dict[str, Any]:
    """Merge layers so later ones override earlier ones."""
    merged: dict[str, Any] = {}
    for layer in layers:
        merged.update(layer)
    return merged


def coerce_bool(key: str, value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in _TRUE_STRINGS:
            return True
        if lowered in _FALSE_STRINGS:
            return False
    raise ConfigError(f"{key} must be a boolean, got {value!r}")


def _optional_str(merged: Mapping[str, Any], key: str) -> str | None:
    value = merged.get(key)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, (str, int, float)):
        raise ConfigError(f"{key} must be a string, got {value!r}")
    text = str(value).strip()
    return text or None


def _required_str(merged: Mapping[str, Any], key: str) -> str:
    value = _optional_str(merged, key)
    if value is None:
        raise ConfigError(f"{key} is required")
    return value


def resolve_version(
    merged: Mapping[str, Any], *, cwd: Path, stop_at: Path | None
) -> tuple[str, Path | None]:
    """Determine the requested version string.

    An explicit version wins, then an explicit version-file, then the
    nearest VERSION file above cwd.

    Returns:
        (version, version_file) where version_file is None for an explicit version
    """
    if isinstance(merged.get("version"), float):
        raise ConfigError("version must be quoted in YAML, e.g. version: \"1.10.0\"")
    version = _optional_str(merged, "version")
    if version is not None:
        return version, None

    explicit_file = _optional_str(merged, "version-file")
    try:
        if explicit_file is not None:
            path = Path(explicit_file)
            if not path.is_absolute():
                path = cwd / path
            return read_version_file(path), path
        return version_from_file(cwd, stop_at=stop_at), None
    except VersionFileError as e:
        raise ConfigError(str(e)) from e


def build_tagger_config(
    merged: Mapping[str, Any], *, cwd: Path, stop_at: Path | None
) -> TaggerConfig:
    """Validate merged settings into a TaggerConfig."""
    version, version_file = resolve_version(merged, cwd=cwd, stop_at=stop_at)
    email = _required_str(merged, "git-author-email")
    if "@" not in email:
        raise ConfigError(f"git-author-email must be an email address, got {email!r}")
    return TaggerConfig(
        version=version,
        git_author_name=_required_str(merged, "git-author-name"),
        git_author_email=email,
        dry_run=coerce_bool("dry-run", merged.get("dry-run", False)),
        create_major_alias=coerce_bool(
            "create-major-alias", merged.get("create-major-alias", False)
        ),
        version_file=version_file,
    )


def load_tagger_config(
    *,
    cwd: Path,
    environ: Mapping[str, str],
    flags: Mapping[str, Any],
    stop_at: Path | None = None,
) -> TaggerConfig:
    """Load, merge and validate configuration for the tag command.

    Args:
        cwd: Working directory discovery starts from
        environ: Environment variables (usually os.environ)
        flags: Command-line values that were explicitly given
        stop_at: Last directory examined when discovering files, or None
            to walk to the filesystem root

    Raises:
        ConfigError: If any layer is malformed or validation fails
    """
    layers: list[Mapping[str, Any]] = [load_env_layer(environ)]
    config_path = find_upwards(cwd, CONFIG_FILE_NAME, stop_at=stop_at)
    if config_path is not None:
        layers.append(load_yaml_layer(config_path))
    layers.append(flags)
    return build_tagger_config(merge_layers(*layers), cwd=cwd, stop_at=stop_at)
