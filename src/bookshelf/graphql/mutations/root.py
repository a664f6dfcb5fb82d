"""
Root GraphQL mutation definitions
"""

import strawberry

from ..scalars import ObjectID
from ..types.book import UpdateBookReturn


@strawberry.type
class Mutation:
    """Root GraphQL mutation type."""

    @strawberry.mutation(name="updateBook")
    async def update_book(
        self, info: strawberry.Info, id: strawberry.ID, title: str
    ) -> UpdateBookReturn | None:
        """Update a book's title."""
        from ..resolvers.book import update_book

        return await update_book(info, str(id), title)

    @strawberry.mutation(name="updateBookObjId")
    async def update_book_obj_id(
        self,
        info: strawberry.Info,
        id: strawberry.ID,
        object_id: ObjectID,  # type: ignore[valid-type]
    ) -> UpdateBookReturn | None:
        """Update a book's object id."""
        from ..resolvers.book import update_book_object_id

        return await update_book_object_id(info, str(id), object_id)
