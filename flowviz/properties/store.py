"""Abstract interface for the hierarchical property store."""
import logging
from abc import ABC, abstractmethod
from typing import Callable, List, Optional, Sequence, Tuple

from flowviz.properties.errors import (
    ErrorKind,
    PropertyNotFoundError,
    PropertyStoreError,
    StoreTransactionError,
)
from flowviz.properties.query import GET_PROPERTY, PROPERTY_NAME, Query, QueryResponse
from flowviz.properties.update import SET_PROPERTY, VALUE, Update

logger = logging.getLogger(__name__)


class PropertyStore(ABC):
    """
    Executes query and update batches atomically.

    Implementations must evaluate a query batch against one consistent
    view, and apply an update batch all-or-nothing.
    """

    @abstractmethod
    def execute_queries(self, queries: Sequence[Query]) -> List[QueryResponse]:
        """Evaluate queries in order, one response per query."""
        ...

    @abstractmethod
    def execute_updates(self, updates: Sequence[Update]) -> None:
        """Apply all updates, or none of them."""
        ...


def require_path(path: Optional[str]) -> str:
    """Validate a property name parameter."""
    if path is None:
        raise StoreTransactionError(
            ErrorKind.INVALID_REQUEST, f"Missing '{PROPERTY_NAME}' parameter"
        )
    if not path.startswith("/"):
        raise StoreTransactionError(
            ErrorKind.INVALID_PROPERTY_PATH,
            f"Property path '{path}' must be absolute",
            path,
        )
    return path


def run_query(
    query: Query, lookup: Callable[[str], Optional[str]]
) -> QueryResponse:
    """
    Evaluate one query with a path lookup.

    Errors whose kind the query suppresses become an absent response;
    all others propagate.
    """
    try:
        if query.operation != GET_PROPERTY:
            raise StoreTransactionError(
                ErrorKind.INVALID_REQUEST,
                f"Unsupported query operation '{query.operation}'",
            )
        path = require_path(query.param(PROPERTY_NAME))
        value = lookup(path)
        if value is None:
            raise PropertyNotFoundError(path)
        return QueryResponse(present=True, value=value)
    except PropertyStoreError as e:
        if e.kind in query.suppressed_errors:
            logger.debug(f"Suppressed {e.kind.value} for query: {e}")
            return QueryResponse.absent()
        raise


def plan_updates(updates: Sequence[Update]) -> List[Tuple[str, str]]:
    """
    Validate every update up front and return the (path, value) writes.

    Raises:
        StoreTransactionError: If any update is malformed.
    """
    writes = []
    for update in updates:
        if update.operation != SET_PROPERTY:
            raise StoreTransactionError(
                ErrorKind.INVALID_REQUEST,
                f"Unsupported update operation '{update.operation}'",
            )
        path = require_path(update.item(PROPERTY_NAME))
        value = update.item(VALUE)
        if value is None:
            raise StoreTransactionError(
                ErrorKind.INVALID_REQUEST, f"Missing '{VALUE}' item", path
            )
        writes.append((path, value))
    return writes
