"""Interactive feedback printed to stderr."""

import click

from semtag.gateway.feedback.abc import UserFeedback
from semtag.output import user_output


class InteractiveFeedback(UserFeedback):
    """Styled feedback on stderr, leaving stdout for machine output."""

    def info(self, message: str) -> None:
        user_output(message)

    def success(self, message: str) -> None:
        user_output(click.style("✓ ", fg="green") + message)

    def error(self, message: str) -> None:
        user_output(click.style("Error: ", fg="red") + message)

    def details(self, text: str) -> None:
        user_output(click.style(text, dim=True))
