"""Fake UserFeedback that records messages for assertions."""

from semtag.gateway.feedback.abc import UserFeedback


class FakeUserFeedback(UserFeedback):
    """Records every message as a (level, text) tuple."""

    def __init__(self) -> None:
        self._messages: list[tuple[str, str]] = []

    def info(self, message: str) -> None:
        self._messages.append(("info", message))

    def success(self, message: str) -> None:
        self._messages.append(("success", message))

    def error(self, message: str) -> None:
        self._messages.append(("error", message))

    def details(self, text: str) -> None:
        self._messages.append(("details", text))

    @property
    def messages(self) -> list[tuple[str, str]]:
        """All recorded messages in order."""
        return self._messages.copy()

    def texts(self, level: str) -> list[str]:
        """Messages recorded at a single level."""
        return [text for recorded, text in self._messages if recorded == level]
