"""Domain models package."""
from flowviz.models.property import Property

__all__ = [
    "Property",
]
