"""Batched read-only property queries."""
import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, FrozenSet, Iterable, List, Optional, Tuple

from flowviz.properties.errors import ErrorKind, StoreTransactionError

if TYPE_CHECKING:
    from flowviz.properties.store import PropertyStore

logger = logging.getLogger(__name__)

GET_PROPERTY = "getProperty"
PROPERTY_NAME = "propertyName"


@dataclass
class Query:
    """A single read operation inside a QueryBatch."""

    operation: str
    params: List[Tuple[str, str]] = field(default_factory=list)
    suppressed_errors: FrozenSet[ErrorKind] = frozenset()

    def param(self, name: str) -> Optional[str]:
        """Return the first parameter value with the given name."""
        for key, value in self.params:
            if key == name:
                return value
        return None


@dataclass(frozen=True)
class QueryHandle:
    """Position of a query within its batch."""

    index: int


@dataclass(frozen=True)
class QueryResponse:
    """Result of one query: a value, or absence of a suppressed error."""

    present: bool
    value: Optional[str] = None

    @classmethod
    def absent(cls) -> "QueryResponse":
        return cls(present=False)


class QueryBatch:
    """
    Collects queries and runs them in one round trip.

    Nothing is sent to the store until execute() is called, and a batch
    executes exactly once.

    Usage:
        batch = QueryBatch()
        handle = batch.add_query(GET_PROPERTY, [(PROPERTY_NAME, path)])
        batch.set_suppressed_errors(handle, {ErrorKind.NO_SUCH_PROPERTY})
        batch.execute(store)
        response = batch.response(handle)
    """

    def __init__(self):
        self._queries: List[Query] = []
        self._responses: Optional[List[QueryResponse]] = None
        self._executed = False

    @property
    def queries(self) -> Tuple[Query, ...]:
        return tuple(self._queries)

    def add_query(
        self, operation: str, params: Iterable[Tuple[str, str]] = ()
    ) -> QueryHandle:
        """
        Append a query to the batch.

        Args:
            operation: Store operation name, e.g. "getProperty"
            params: Ordered (name, value) parameter pairs

        Returns:
            Handle for retrieving the response after execution.
        """
        self._require_pending()
        self._queries.append(Query(operation=operation, params=list(params)))
        return QueryHandle(index=len(self._queries) - 1)

    def set_suppressed_errors(
        self, handle: QueryHandle, kinds: Iterable[ErrorKind]
    ) -> None:
        """Report the given error kinds as "not present" for this query only."""
        self._require_pending()
        self._queries[handle.index].suppressed_errors = frozenset(kinds)

    def execute(self, store: "PropertyStore") -> List[QueryResponse]:
        """
        Run every query against one consistent view of the store.

        Raises:
            PropertyStoreError: If any query hits an error it does not suppress.
            RuntimeError: If the batch was already executed, even unsuccessfully.
        """
        self._require_pending()
        self._executed = True

        if not self._queries:
            self._responses = []
            return []

        logger.debug(f"Executing query batch of {len(self._queries)} queries")
        responses = list(store.execute_queries(self.queries))
        if len(responses) != len(self._queries):
            raise StoreTransactionError(
                ErrorKind.INVALID_REQUEST,
                f"Store returned {len(responses)} responses "
                f"for {len(self._queries)} queries",
            )

        self._responses = responses
        return list(responses)

    def response(self, handle: QueryHandle) -> QueryResponse:
        """Get the response for a query after execution."""
        if self._responses is None:
            raise RuntimeError("QueryBatch has not been executed")
        return self._responses[handle.index]

    def _require_pending(self) -> None:
        if self._executed:
            raise RuntimeError("QueryBatch already executed")
