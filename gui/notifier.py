"""
NiceGUI notification channel.

Shows provider errors and warnings as toast messages on a running NiceGUI
page. Requires the optional 'gui' extra (pip install nicegui).
"""

from nicegui import ui

from core.notifications import Notifier


class NiceGuiNotifier(Notifier):
    """Forwards notifications to nicegui.ui.notify."""

    def __init__(self, position: str = 'bottom', timeout: int = 5000):
        self.position = position
        self.timeout = timeout

    def show_error_message(self, message: str):
        self._notify(message, 'negative')

    def show_warning_message(self, message: str):
        self._notify(message, 'warning')

    def show_information_message(self, message: str):
        self._notify(message, 'info')

    def _notify(self, message: str, notify_type: str):
        # multi_line keeps the '\n\t Error:' detail readable
        ui.notify(message, type=notify_type, position=self.position,
                  timeout=self.timeout, multi_line=True)
