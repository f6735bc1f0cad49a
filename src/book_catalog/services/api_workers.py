"""Async workers for non-blocking backend calls using Qt threading."""

from abc import ABC, abstractmethod
from typing import Any, Callable, Optional

from loguru import logger
from PySide6.QtCore import QObject, QRunnable, QThreadPool, Signal, Slot

from book_catalog.services.errors import BookApiError, BookCatalogError


class WorkerSignals(QObject):
    """
    Signals for communicating results from worker threads.

    QRunnable doesn't inherit from QObject, so we need a separate
    QObject to hold the signals.
    """
    finished = Signal()
    error = Signal(object)  # BookCatalogError
    result = Signal(object)


class BookRequestWorker(QRunnable):
    """
    Worker that runs a single catalog request in a background thread.

    Uses Qt's thread pool for efficient thread management.
    Emits signals when the request completes or fails.
    """

    def __init__(self, request: Callable[[], Any], description: str = "request"):
        super().__init__()
        self.request = request
        self.description = description
        self.signals = WorkerSignals()
        self.setAutoDelete(True)

    @Slot()
    def run(self):
        """Execute the request in the background thread."""
        try:
            result = self.request()
        except BookCatalogError as e:
            self.signals.error.emit(e)
        except Exception as e:
            # Anything the client did not classify is reported as a generic failure
            logger.exception("Unexpected error during {}", self.description)
            self.signals.error.emit(BookApiError(f"Unexpected error: {e}"))
        else:
            self.signals.result.emit(result)
        finally:
            self.signals.finished.emit()


class RequestRunner(ABC):
    """Runs catalog requests and reports the outcome to UI-thread callbacks."""

    @abstractmethod
    def submit(
        self,
        request: Callable[[], Any],
        on_result: Callable[[Any], None],
        on_error: Callable[[BookCatalogError], None],
        description: str = "request",
    ) -> None:
        """Start ``request``; exactly one of the callbacks fires when it ends."""


class ThreadPoolRequestRunner(RequestRunner):
    """Runs requests on a QThreadPool.

    Callbacks should be slots of QObjects living in the UI thread so the
    results are delivered through queued connections.
    """

    def __init__(self, pool: Optional[QThreadPool] = None):
        self._pool = pool or QThreadPool.globalInstance()

    def submit(self, request, on_result, on_error, description="request"):
        worker = BookRequestWorker(request, description)
        worker.signals.result.connect(on_result)
        worker.signals.error.connect(on_error)
        logger.debug("Submitting {}", description)
        self._pool.start(worker)
