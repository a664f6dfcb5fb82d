from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

from ...logging import get_logger
from ...store import BookNotFoundError, BookRecord
from ..context import get_store_from_info
from ..types.book import Book, BookRef, UpdateBookReturn

if TYPE_CHECKING:
    from ...store import BookStore

logger = get_logger(__name__)


def book_from_record(record: BookRecord) -> Book:
    """Convert a store record to the GraphQL type."""
    return Book(ref=BookRef.from_record(record))


# Query resolvers
async def resolve_books(info: strawberry.Info) -> list[Book]:
    """Resolve every book in store order."""
    store = get_store_from_info(info)
    return [book_from_record(record) for record in store.all()]


async def resolve_book_by_id(info: strawberry.Info, id: str) -> Book | None:
    """Resolve a book by its ID. Unknown ids resolve to None."""
    store = get_store_from_info(info)
    record = store.get(id)
    if record is None:
        logger.info("Book not found", book_id=id)
        return None
    return book_from_record(record)


# Mutation resolvers
#
# Both mutations return a partial book (id plus the updated field only) and
# leave the remaining fields to the Book field resolvers, which re-fetch the
# record from the store on demand.
async def update_book(info: strawberry.Info, id: str, title: str) -> UpdateBookReturn:
    """Set a book's title in place."""
    logger.debug("updateBook called", book_id=id)
    store = get_store_from_info(info)
    record = store.update_title(id, title)

    return UpdateBookReturn(book=Book(ref=BookRef(id=record.id, title=title)))


async def update_book_object_id(
    info: strawberry.Info, id: str, object_id: str
) -> UpdateBookReturn:
    """Set a book's object id in place."""
    logger.debug("updateBookObjId called", book_id=id)
    store = get_store_from_info(info)
    record = store.update_object_id(id, object_id)

    return UpdateBookReturn(book=Book(ref=BookRef(id=record.id, object_id=object_id)))


# Field resolvers
async def _fetch_full_record(book: Book, store: BookStore) -> BookRecord:
    record = await book.ref.fetch(store)
    if record is None:
        raise BookNotFoundError(book.ref.id)
    return record


async def resolve_book_title(book: Book, info: strawberry.Info) -> str | None:
    if book.ref.title is not None:
        return book.ref.title
    record = await _fetch_full_record(book, get_store_from_info(info))
    return record.title


async def resolve_book_author(book: Book, info: strawberry.Info) -> str | None:
    if book.ref.author is not None:
        return book.ref.author
    record = await _fetch_full_record(book, get_store_from_info(info))
    return record.author


async def resolve_book_object_id(book: Book, info: strawberry.Info) -> str | None:
    if book.ref.object_id is not None:
        return book.ref.object_id
    record = await _fetch_full_record(book, get_store_from_info(info))
    return record.object_id
