"""Repository implementations."""
from flowviz.repositories.property_repository import PropertyRepository

__all__ = [
    "PropertyRepository",
]
