"""
User notification channel.

Providers report user-facing errors and warnings through a Notifier so the
host decides how to display them (console, NiceGUI toast, ...).
"""

import sys
from abc import ABC, abstractmethod
from typing import Optional, TextIO


class Notifier(ABC):
    """Interface for showing messages to the user."""

    @abstractmethod
    def show_error_message(self, message: str):
        pass

    @abstractmethod
    def show_warning_message(self, message: str):
        pass

    @abstractmethod
    def show_information_message(self, message: str):
        pass


class ConsoleNotifier(Notifier):
    """Writes notifications to a text stream (stderr by default)."""

    def __init__(self, stream: Optional[TextIO] = None):
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        # Resolved lazily so captured/replaced sys.stderr is honored
        return self._stream or sys.stderr

    def show_error_message(self, message: str):
        print(f"Error: {message}", file=self.stream)

    def show_warning_message(self, message: str):
        print(f"Warning: {message}", file=self.stream)

    def show_information_message(self, message: str):
        print(message, file=self.stream)
