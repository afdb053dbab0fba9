"""Infrastructure module for cross-cutting concerns."""

from .container import Container
from .logging import setup_logging

__all__ = [
    "Container",
    "setup_logging",
]
