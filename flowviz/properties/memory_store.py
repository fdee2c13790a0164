"""In-process property store."""
import logging
import threading
from typing import Dict, List, Optional, Sequence

from flowviz.properties.query import Query, QueryResponse
from flowviz.properties.store import PropertyStore, plan_updates, run_query
from flowviz.properties.update import Update

logger = logging.getLogger(__name__)


class InMemoryPropertyStore(PropertyStore):
    """
    Keeps properties in a dict guarded by a lock.

    Update batches are staged on a copy and swapped in only after every
    write succeeded, so a failing batch leaves no trace.
    """

    def __init__(self, properties: Optional[Dict[str, str]] = None):
        self._properties: Dict[str, str] = dict(properties or {})
        self._lock = threading.RLock()

    def execute_queries(self, queries: Sequence[Query]) -> List[QueryResponse]:
        with self._lock:
            view = self._properties
            return [run_query(query, view.get) for query in queries]

    def execute_updates(self, updates: Sequence[Update]) -> None:
        writes = plan_updates(updates)
        with self._lock:
            staged = dict(self._properties)
            for path, value in writes:
                self._write(staged, path, value)
            self._properties = staged
        logger.debug(f"Committed {len(writes)} property writes")

    def _write(self, properties: Dict[str, str], path: str, value: str) -> None:
        """
        Apply one write to the staged copy.

        Extension point: subclasses may override it to validate, reject or
        transform writes. Raising here discards the whole staged batch.
        """
        properties[path] = value

    def snapshot(self) -> Dict[str, str]:
        """Copy of all stored properties."""
        with self._lock:
            return dict(self._properties)
