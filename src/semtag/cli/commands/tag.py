"""Create a version tag at HEAD when the configured version is new."""

import os

import click
from click.core import ParameterSource

from semtag.cli.config import ConfigError, load_tagger_config
from semtag.core.context import SemtagContext
from semtag.core.tagger import Tagger
from semtag.core.types import NoNewVersion, TagFailed, TagOutcome
from semtag.output import machine_output

EXIT_CODE_NO_NEW_VERSION = 8


def format_versions(outcome: TagOutcome) -> str | None:
    """Render 'v<requested>,v<previous>' when both versions are known."""
    if outcome.requested is None or outcome.previous is None:
        return None
    return f"v{outcome.requested},v{outcome.previous}"


@click.command("tag")
@click.option(
    "--dry-run",
    is_flag=True,
    help="Print, but do not perform, any actions",
)
@click.pass_obj
def tag_cmd(ctx: SemtagContext, dry_run: bool) -> None:
    """Tag HEAD with the VERSION if it is newer than existing tags.

    The version comes from TAG_VERSION, the `version` key in .semtag.yaml,
    or the first line of the nearest VERSION file. On success or when both
    versions are known, prints 'v<requested>,v<previous>' to stdout.

    \b
    Exit codes:
      0  tag created (or simulated with --dry-run)
      8  version is not newer than the latest tag
      1  any other failure
    """
    # Flags only override lower layers when actually given
    flags: dict[str, bool] = {}
    if click.get_current_context().get_parameter_source("dry_run") == ParameterSource.COMMANDLINE:
        flags["dry-run"] = dry_run
    try:
        config = load_tagger_config(
            cwd=ctx.cwd,
            environ=os.environ,
            flags=flags,
            stop_at=ctx.discovery_root,
        )
    except ConfigError as e:
        raise click.ClickException(str(e)) from e

    tagger = Tagger(git=ctx.git, feedback=ctx.feedback, config=config, cwd=ctx.cwd)
    outcome = tagger.tag()

    versions = format_versions(outcome)
    if versions is not None:
        machine_output(versions, nl=False)

    if isinstance(outcome, NoNewVersion):
        raise SystemExit(EXIT_CODE_NO_NEW_VERSION)
    if isinstance(outcome, TagFailed):
        ctx.feedback.error(outcome.message)
        if outcome.details:
            ctx.feedback.details(outcome.details)
        raise SystemExit(1)
