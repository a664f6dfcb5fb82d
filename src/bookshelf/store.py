"""In-memory book store and lookup helpers."""

from dataclasses import dataclass, replace

from .logging import get_logger

logger = get_logger(__name__)


@dataclass
class BookRecord:
    """A single book as held by the store."""

    id: str
    title: str
    author: str
    object_id: str


SEED_BOOKS: tuple[BookRecord, ...] = (
    BookRecord(id="1", title="The Awakening", author="Kate Chopin", object_id="1233"),
    BookRecord(id="2", title="City of Glass", author="Paul Auster", object_id="1234"),
)


class StoreException(Exception):
    """Base exception for store operations."""

    pass


class BookNotFoundError(StoreException):
    """Raised when an operation addresses a book id the store does not hold."""

    def __init__(self, book_id: str):
        self.book_id = book_id
        super().__init__(f"Book not found: {book_id}")


class BookStore:
    """Ordered, in-memory sequence of book records.

    Lookups are linear scans. Mutations change the matching record in place,
    so every holder of a record returned by the store sees the update.
    """

    def __init__(self, records: list[BookRecord] | None = None):
        self._records: list[BookRecord] = list(records or [])

    @classmethod
    def with_seed_data(cls) -> "BookStore":
        """Build a store holding fresh copies of the two seed books."""
        return cls([replace(record) for record in SEED_BOOKS])

    def __len__(self) -> int:
        return len(self._records)

    def all(self) -> list[BookRecord]:
        """Return every record in store order."""
        return list(self._records)

    def get(self, book_id: str) -> BookRecord | None:
        """Return the first record with ``book_id``, or None."""
        return next((record for record in self._records if record.id == book_id), None)

    async def find_by_id(self, book_id: str) -> BookRecord | None:
        """Asynchronous lookup used by field resolvers completing partial books."""
        logger.debug("find_by_id called", book_id=book_id)
        return self.get(book_id)

    def _require(self, book_id: str) -> BookRecord:
        record = self.get(book_id)
        if record is None:
            logger.info("Book not found", book_id=book_id)
            raise BookNotFoundError(book_id)
        return record

    def update_title(self, book_id: str, title: str) -> BookRecord:
        record = self._require(book_id)
        record.title = title
        logger.info("Book title updated", book_id=book_id)
        return record

    def update_object_id(self, book_id: str, object_id: str) -> BookRecord:
        record = self._require(book_id)
        record.object_id = object_id
        logger.info("Book object id updated", book_id=book_id)
        return record
