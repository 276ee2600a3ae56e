"""Shared type model fixtures."""

import pytest

from typelower.codegen.core.schema import (
    Array,
    AttributeDefinition,
    NamedType,
    Object,
    Primitive,
    PrimitiveKind,
)
from typelower.codegen.languages.go import GoGenerator, GoTypeMapper


def prim(kind: PrimitiveKind) -> AttributeDefinition:
    return AttributeDefinition(type=Primitive(kind))


@pytest.fixture
def mapper() -> GoTypeMapper:
    return GoTypeMapper()


@pytest.fixture
def generator() -> GoGenerator:
    return GoGenerator()


@pytest.fixture
def user_object() -> AttributeDefinition:
    """Object with a required id and an optional name."""
    return AttributeDefinition(
        type=Object(
            {
                "name": prim(PrimitiveKind.STRING),
                "id": prim(PrimitiveKind.INTEGER),
            }
        ),
        required=frozenset({"id"}),
    )


@pytest.fixture
def cyclic_types() -> dict:
    """Two named types referencing each other."""
    author = NamedType(name="author")
    book = NamedType(name="book")
    author.definition = AttributeDefinition(
        type=Object(
            {
                "books": AttributeDefinition(type=Array(AttributeDefinition(type=book))),
                "name": prim(PrimitiveKind.STRING),
            }
        ),
        required=frozenset({"name"}),
    )
    book.definition = AttributeDefinition(
        type=Object(
            {
                "author": AttributeDefinition(type=author),
                "title": prim(PrimitiveKind.STRING),
            }
        ),
        required=frozenset({"title", "author"}),
    )
    return {"author": author, "book": book}
