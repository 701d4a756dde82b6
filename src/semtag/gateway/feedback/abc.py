"""Abstract interface for reporting progress to the user."""

from abc import ABC, abstractmethod


class UserFeedback(ABC):
    """Reports progress and diagnostics to the person running the command.

    Passed explicitly to the components that report, so tests can capture
    messages without touching process-wide logging state.
    """

    @abstractmethod
    def info(self, message: str) -> None:
        """Report routine progress."""
        ...

    @abstractmethod
    def success(self, message: str) -> None:
        """Report a completed action."""
        ...

    @abstractmethod
    def error(self, message: str) -> None:
        """Report a failure."""
        ...

    @abstractmethod
    def details(self, text: str) -> None:
        """Show a block of supporting text (e.g., a status listing) verbatim."""
        ...
