"""User feedback gateway."""

from semtag.gateway.feedback.abc import UserFeedback
from semtag.gateway.feedback.fake import FakeUserFeedback
from semtag.gateway.feedback.real import InteractiveFeedback

__all__ = [
    "UserFeedback",
    "InteractiveFeedback",
    "FakeUserFeedback",
]
