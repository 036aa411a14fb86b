import logging
from typing import TYPE_CHECKING, override

from PyQt6.QtCore import QObject, QRunnable, pyqtSignal

from koj.search.query_parser import SearchQuery

if TYPE_CHECKING:
    from koj.search.search_coordinator import LineLookup, SearchOptions


class LookupSignals(QObject):
    """
    Defines the signals available from a running lookup.
    """

    finished: pyqtSignal = pyqtSignal(object, object, int)  # query, records, dispatch_id
    failed: pyqtSignal = pyqtSignal(object, str, int)  # query, message, dispatch_id


class LookupWorker(QRunnable):
    """
    Worker thread running one line lookup for a query.
    """

    def __init__(
        self,
        lookup: "LineLookup",
        query: SearchQuery,
        options: "SearchOptions",
        dispatch_id: int = 0,
    ):
        super().__init__()
        self.lookup: "LineLookup" = lookup
        self.query: SearchQuery = query
        self.options: "SearchOptions" = options
        self.dispatch_id: int = dispatch_id
        self.signals: LookupSignals = LookupSignals()

    @override
    def run(self):
        """
        Looks up the lines for the query and reports them with the query.
        """
        logger = logging.getLogger("LookupWorker")
        logger.debug("Looking up %s (%s)", self.query.value, self.query.mode.value)
        try:
            records = list(
                self.lookup.lookup(self.query.value, self.query.mode, self.options)
            )
        except Exception as e:  # pylint: disable=broad-exception-caught
            # An exception leaving run() aborts the application
            logger.exception("Lookup for %s failed", self.query.value)
            message = str(e) or type(e).__name__
            self.signals.failed.emit(self.query, message, self.dispatch_id)
            return

        # Notify finish signal
        self.signals.finished.emit(self.query, records, self.dispatch_id)
