"""Repository for property persistence (DB-backed)."""
import logging
from datetime import datetime
from typing import List, Optional, Sequence

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from flowviz.models.property import Property
from flowviz.properties.errors import ErrorKind, StoreTransactionError
from flowviz.properties.query import Query, QueryResponse
from flowviz.properties.store import PropertyStore, plan_updates, run_query
from flowviz.properties.update import Update
from flowviz.utils.transaction import TransactionContext

logger = logging.getLogger(__name__)


class PropertyRepository(PropertyStore):
    """
    Property store backed by the ``property`` table.

    A query batch runs inside one session transaction; an update batch
    commits once at the end or is rolled back as a whole.
    """

    def __init__(self, session):
        self._session = session

    def execute_queries(self, queries: Sequence[Query]) -> List[QueryResponse]:
        try:
            return [run_query(query, self._find_value) for query in queries]
        except SQLAlchemyError as e:
            logger.error(f"Property query batch failed: {e}")
            raise StoreTransactionError(
                ErrorKind.DATABASE_ERROR, f"Property query failed: {e}"
            ) from e

    def execute_updates(self, updates: Sequence[Update]) -> None:
        writes = plan_updates(updates)
        try:
            try:
                self._apply(writes)
            except IntegrityError:
                # A concurrent writer inserted one of the paths first. The
                # rows are visible after the rollback, so the retry updates.
                logger.warning("Property insert conflicted, retrying batch")
                self._apply(writes)
        except SQLAlchemyError as e:
            logger.error(f"Property update batch rolled back: {e}")
            raise StoreTransactionError(
                ErrorKind.DATABASE_ERROR, f"Property update failed: {e}"
            ) from e

    def _apply(self, writes) -> None:
        with TransactionContext(self._session):
            for path, value in writes:
                self._upsert(path, value)

    def _find(self, path: str) -> Optional[Property]:
        return (
            self._session.query(Property)
            .filter(Property.path == path)
            .first()
        )

    def _find_value(self, path: str) -> Optional[str]:
        row = self._find(path)
        return row.value if row else None

    def _upsert(self, path: str, value: str) -> None:
        existing = self._find(path)
        now = datetime.utcnow()

        if existing:
            existing.value = value
            existing.updated_at = now
            return

        self._session.add(
            Property(path=path, value=value, created_at=now, updated_at=now)
        )
