"""HTTP routes."""
from flowviz.routes.configure import configure_bp

__all__ = [
    "configure_bp",
]
