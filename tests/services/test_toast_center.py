"""Unit tests for ToastCenter."""

import pytest
from PySide6.QtTest import QTest

from book_catalog.services import ToastCenter


@pytest.fixture
def center(qt_app):
    return ToastCenter(duration_ms=0)


def test_show_helpers_set_kind(center):
    kinds = [
        center.show_success("saved").kind,
        center.show_error("failed").kind,
        center.show_info("fyi").kind,
        center.show_warning("careful").kind,
    ]
    assert kinds == ["success", "error", "info", "warning"]
    assert [toast.message for toast in center.toasts] == ["saved", "failed", "fyi", "careful"]


def test_toast_ids_are_unique(center):
    ids = {center.show_info(str(i)).id for i in range(20)}
    assert len(ids) == 20


def test_dismiss_removes_toast_and_emits(center):
    dismissed = []
    center.toast_dismissed.connect(dismissed.append)
    toast = center.show_success("saved")

    center.dismiss(toast.id)
    center.dismiss(toast.id)

    assert center.toasts == []
    assert dismissed == [toast.id]


def test_toast_added_signal(center):
    added = []
    center.toast_added.connect(added.append)
    toast = center.show_error("failed")
    assert added == [toast]


def test_unknown_kind_is_rejected(center):
    with pytest.raises(ValueError):
        center.show("hello", "fatal")


def test_toasts_auto_dismiss(qt_app):
    center = ToastCenter(duration_ms=20)
    center.show_info("short lived")

    QTest.qWait(200)

    assert center.toasts == []
