"""Toast container - Renders the notifications held by a ToastCenter."""

from typing import Dict, Optional

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QHBoxLayout, QLabel, QPushButton, QVBoxLayout, QWidget

from book_catalog.services import Toast, ToastCenter

_KIND_STYLES = {
    "success": "background-color: #dcfce7; color: #166534;",
    "error": "background-color: #fee2e2; color: #991b1b;",
    "info": "background-color: #dbeafe; color: #1e40af;",
    "warning": "background-color: #fef9c3; color: #854d0e;",
}


class ToastWidget(QWidget):
    """One toast with a dismiss button."""

    def __init__(self, toast: Toast, toast_center: ToastCenter, parent=None):
        super().__init__(parent)
        self.toast = toast
        self.setAttribute(Qt.WidgetAttribute.WA_StyledBackground, True)
        self.setStyleSheet(f"{_KIND_STYLES[toast.kind]} border-radius: 6px;")

        layout = QHBoxLayout(self)
        layout.setContentsMargins(12, 8, 8, 8)
        self.message_label = QLabel(toast.message)
        self.message_label.setTextFormat(Qt.TextFormat.PlainText)
        self.message_label.setWordWrap(True)
        layout.addWidget(self.message_label, 1)

        dismiss_button = QPushButton("✕")
        dismiss_button.setFlat(True)
        dismiss_button.setFixedSize(24, 24)
        dismiss_button.setAccessibleName("Dismiss notification")
        dismiss_button.clicked.connect(lambda: toast_center.dismiss(toast.id))
        layout.addWidget(dismiss_button)


class ToastContainer(QWidget):
    """Vertical stack of active toasts, newest at the bottom."""

    def __init__(self, toast_center: ToastCenter, parent=None):
        super().__init__(parent)
        if toast_center is None:
            raise ValueError("ToastCenter must not be None")
        self._toast_center = toast_center
        self._widgets: Dict[str, ToastWidget] = {}

        self._layout = QVBoxLayout(self)
        self._layout.setContentsMargins(8, 8, 8, 8)
        self._layout.setSpacing(8)

        toast_center.toast_added.connect(self._on_toast_added)
        toast_center.toast_dismissed.connect(self._on_toast_dismissed)
        for toast in toast_center.toasts:
            self._on_toast_added(toast)

    @property
    def visible_toast_ids(self):
        return list(self._widgets)

    def widget_for(self, toast_id: str) -> Optional[ToastWidget]:
        return self._widgets.get(toast_id)

    def _on_toast_added(self, toast: Toast):
        widget = ToastWidget(toast, self._toast_center)
        self._widgets[toast.id] = widget
        self._layout.addWidget(widget)

    def _on_toast_dismissed(self, toast_id: str):
        widget = self._widgets.pop(toast_id, None)
        if widget is not None:
            self._layout.removeWidget(widget)
            widget.deleteLater()
