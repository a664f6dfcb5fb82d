"""
GraphQL context helpers shared by resolvers
"""

from typing import Any

import strawberry

from ..logging import get_logger
from ..store import BookStore

logger = get_logger(__name__)


def build_context(store: BookStore, **extra: Any) -> dict[str, Any]:
    """Build the context dict handed to every resolver of one operation."""
    return {"store": store, **extra}


def get_store_from_info(info: strawberry.Info) -> BookStore:
    """Extract the book store from the GraphQL info object."""
    store = info.context.get("store")
    if store is None:
        logger.error("Book store not found in GraphQL context")
        raise RuntimeError("Book store is not available in the GraphQL context")
    return store
