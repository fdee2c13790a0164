"""Hierarchical property store: paths, batches and store implementations."""
from flowviz.properties.errors import (
    ErrorKind,
    PropertyNotFoundError,
    PropertyStoreError,
    StoreTransactionError,
)
from flowviz.properties.memory_store import InMemoryPropertyStore
from flowviz.properties.path import PropertyPath, resolve
from flowviz.properties.query import (
    GET_PROPERTY,
    PROPERTY_NAME,
    Query,
    QueryBatch,
    QueryHandle,
    QueryResponse,
)
from flowviz.properties.store import PropertyStore
from flowviz.properties.update import (
    SET_PROPERTY,
    VALUE,
    Update,
    UpdateBatch,
    UpdateHandle,
    UpdateItem,
)

__all__ = [
    "ErrorKind",
    "PropertyNotFoundError",
    "PropertyStoreError",
    "StoreTransactionError",
    "InMemoryPropertyStore",
    "PropertyPath",
    "resolve",
    "GET_PROPERTY",
    "PROPERTY_NAME",
    "Query",
    "QueryBatch",
    "QueryHandle",
    "QueryResponse",
    "PropertyStore",
    "SET_PROPERTY",
    "VALUE",
    "Update",
    "UpdateBatch",
    "UpdateHandle",
    "UpdateItem",
]
