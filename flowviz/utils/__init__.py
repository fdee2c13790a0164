"""Utility modules."""
from .transaction import TransactionContext

__all__ = [
    "TransactionContext",
]
