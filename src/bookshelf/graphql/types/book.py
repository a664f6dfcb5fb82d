"""
Book GraphQL type definitions
"""

import asyncio
from collections.abc import Awaitable
from dataclasses import dataclass, field

import strawberry

from ...store import BookRecord, BookStore
from ..scalars import ObjectID


@dataclass
class BookRef:
    """The fields a resolver knows about a book, plus a memoized full-record fetch.

    Mutations hand back refs carrying only ``id`` and the updated field. Field
    resolvers fill the gaps through ``fetch``; the first call starts the store
    lookup and every later call awaits that same task.
    """

    id: str
    title: str | None = None
    author: str | None = None
    object_id: str | None = None
    _pending: "asyncio.Future[BookRecord | None] | None" = field(
        default=None, repr=False, compare=False
    )

    @classmethod
    def from_record(cls, record: BookRecord) -> "BookRef":
        return cls(
            id=record.id,
            title=record.title,
            author=record.author,
            object_id=record.object_id,
        )

    @property
    def fetch_started(self) -> bool:
        return self._pending is not None

    def fetch(self, store: BookStore) -> Awaitable[BookRecord | None]:
        if self._pending is None:
            self._pending = asyncio.ensure_future(store.find_by_id(self.id))
        return self._pending


@strawberry.type
class Book:
    """Book type for GraphQL API."""

    ref: strawberry.Private[BookRef]

    @strawberry.field
    def id(self) -> strawberry.ID:
        return strawberry.ID(self.ref.id)

    @strawberry.field
    async def title(self, info: strawberry.Info) -> str | None:
        from ..resolvers.book import resolve_book_title

        return await resolve_book_title(self, info)

    @strawberry.field
    async def author(self, info: strawberry.Info) -> str | None:
        from ..resolvers.book import resolve_book_author

        return await resolve_book_author(self, info)

    @strawberry.field
    async def object_id(self, info: strawberry.Info) -> ObjectID | None:  # type: ignore[valid-type]
        from ..resolvers.book import resolve_book_object_id

        return await resolve_book_object_id(self, info)


@strawberry.type
class UpdateBookReturn:
    """Payload returned by book mutations."""

    book: Book | None
