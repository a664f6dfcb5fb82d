"""
Bookshelf GraphQL API
Minimal in-memory book catalogue served over GraphQL
"""

__version__ = "0.1.0"

from .config import settings

__all__ = ["settings", "__version__"]
