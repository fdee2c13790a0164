"""Property store error taxonomy."""
import enum
from typing import Optional


class ErrorKind(enum.Enum):
    """Error kinds reported by a property store."""

    NO_SUCH_PROPERTY = "NoSuchProperty"
    INVALID_PROPERTY_PATH = "InvalidPropertyPath"
    INVALID_REQUEST = "InvalidRequest"
    ACCESS_DENIED = "AccessDenied"
    STORE_UNAVAILABLE = "StoreUnavailable"
    DATABASE_ERROR = "DatabaseError"


class PropertyStoreError(Exception):
    """Base error raised by property store transactions."""

    def __init__(self, kind: ErrorKind, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.kind = kind
        self.path = path


class PropertyNotFoundError(PropertyStoreError):
    """The requested property does not exist."""

    def __init__(self, path: str):
        super().__init__(
            ErrorKind.NO_SUCH_PROPERTY, f"Property '{path}' does not exist", path
        )


class StoreTransactionError(PropertyStoreError):
    """A batch failed for any reason other than a missing property."""
