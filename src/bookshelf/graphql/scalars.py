"""
Custom GraphQL scalars
"""

from typing import Any, NewType

import strawberry
from graphql import StringValueNode, Undefined, ValueNode

# Wire convention for ObjectID. Serialized values are quoted and tagged
# ("'obj:1233'") while inputs are expected bare ("<tag>:1233"), so the
# output of serialize is not accepted by parse_value as-is.
OBJECT_ID_PREFIX = "obj"
OBJECT_ID_SEPARATOR = ":"
OBJECT_ID_QUOTE = "'"


def serialize_object_id(value: Any) -> str:
    """Render an internal object id for the response, e.g. ``1233 -> "'obj:1233'"``."""
    return f"{OBJECT_ID_QUOTE}{OBJECT_ID_PREFIX}{OBJECT_ID_SEPARATOR}{value}{OBJECT_ID_QUOTE}"


def _strip_tag(value: str) -> str:
    parts = value.split(OBJECT_ID_SEPARATOR)
    if len(parts) < 2:
        raise ValueError(
            f"ObjectID must look like '<tag>{OBJECT_ID_SEPARATOR}<id>', got {value!r}"
        )
    return parts[1]


def parse_object_id_value(value: Any) -> str:
    """Parse an ObjectID supplied through variables: keep the segment after the tag."""
    if not isinstance(value, str):
        raise TypeError(f"ObjectID cannot represent a non-string value: {value!r}")
    return _strip_tag(value)


def parse_object_id_literal(ast: ValueNode, _variables: dict[str, Any] | None = None) -> Any:
    """Parse an inline ObjectID literal.

    Non-string literals return ``Undefined`` so the request fails validation
    with a type mismatch instead of reaching the resolver.
    """
    if isinstance(ast, StringValueNode):
        return _strip_tag(ast.value)
    return Undefined


ObjectID = strawberry.scalar(
    NewType("ObjectID", str),
    name="ObjectID",
    description="ObjectID custom scalar type",
    serialize=serialize_object_id,
    parse_value=parse_object_id_value,
    parse_literal=parse_object_id_literal,
)
