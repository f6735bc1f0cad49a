"""Toast Center - Transient notifications shown over the main window."""

import uuid
from dataclasses import dataclass
from typing import List

from PySide6.QtCore import QObject, QTimer, Signal

TOAST_KINDS = ("success", "error", "info", "warning")
DEFAULT_TOAST_DURATION_MS = 5000


@dataclass(frozen=True)
class Toast:
    """A single notification."""

    id: str
    message: str
    kind: str


class ToastCenter(QObject):
    """Holds the active toasts and dismisses each one after a fixed delay.

    Signals:
        toast_added: Emitted with the new Toast.
        toast_dismissed: Emitted with the id of a removed toast.
    """

    toast_added = Signal(object)
    toast_dismissed = Signal(str)

    def __init__(self, duration_ms: int = DEFAULT_TOAST_DURATION_MS, parent=None):
        """
        Args:
            duration_ms: Auto-dismiss delay; 0 keeps toasts until dismissed.
        """
        super().__init__(parent)
        self._duration_ms = duration_ms
        self._toasts: List[Toast] = []

    @property
    def toasts(self) -> List[Toast]:
        return list(self._toasts)

    def show(self, message: str, kind: str = "info") -> Toast:
        if kind not in TOAST_KINDS:
            raise ValueError(f"Unknown toast kind: {kind}")
        toast = Toast(id=uuid.uuid4().hex[:7], message=message, kind=kind)
        self._toasts.append(toast)
        self.toast_added.emit(toast)

        if self._duration_ms > 0:
            QTimer.singleShot(self._duration_ms, self, lambda: self.dismiss(toast.id))
        return toast

    def show_success(self, message: str) -> Toast:
        return self.show(message, "success")

    def show_error(self, message: str) -> Toast:
        return self.show(message, "error")

    def show_info(self, message: str) -> Toast:
        return self.show(message, "info")

    def show_warning(self, message: str) -> Toast:
        return self.show(message, "warning")

    def dismiss(self, toast_id: str) -> None:
        """Remove a toast; unknown or already dismissed ids are ignored."""
        remaining = [toast for toast in self._toasts if toast.id != toast_id]
        if len(remaining) == len(self._toasts):
            return
        self._toasts = remaining
        self.toast_dismissed.emit(toast_id)
