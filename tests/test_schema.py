"""Tests for the type model and the document loader."""

import pytest

from typelower.codegen.core.schema import (
    Array,
    AttributeDefinition,
    MediaType,
    ModelError,
    NamedType,
    Object,
    Primitive,
    PrimitiveKind,
    load_types,
)


class TestModel:
    def test_is_required(self, user_object) -> None:
        assert user_object.is_required("id")
        assert not user_object.is_required("name")
        assert not user_object.is_required("missing")

    def test_field_names_sorted(self) -> None:
        obj = Object({"b": None, "a": None, "C": None})
        assert obj.field_names() == ["C", "a", "b"]

    def test_structural_types_are_hashable(self) -> None:
        obj = Object({"a": AttributeDefinition(type=Primitive(PrimitiveKind.STRING))})
        assert hash(AttributeDefinition(type=Array(AttributeDefinition(type=obj))))

    def test_named_types_compare_by_identity(self) -> None:
        assert NamedType(name="a") != NamedType(name="a")


class TestLoadTypes:
    def test_primitives_arrays_and_objects(self) -> None:
        types = load_types(
            {
                "types": {
                    "user": {
                        "type": "object",
                        "required": ["id"],
                        "properties": {
                            "id": {"type": "integer"},
                            "scores": {"type": "array", "items": {"type": "number"}},
                        },
                    }
                }
            }
        )
        definition = types["user"].definition
        assert isinstance(definition.type, Object)
        assert definition.required == frozenset({"id"})
        assert definition.type.fields["id"].type == Primitive(PrimitiveKind.INTEGER)
        scores = definition.type.fields["scores"].type
        assert scores == Array(AttributeDefinition(type=Primitive(PrimitiveKind.NUMBER)))

    def test_cyclic_references_resolved(self) -> None:
        types = load_types(
            {
                "types": {
                    "node": {
                        "type": "object",
                        "properties": {
                            "children": {"type": "array", "items": {"ref": "node"}},
                            "parent": {"ref": "node"},
                        },
                    }
                }
            }
        )
        node = types["node"]
        assert node.definition.type.fields["parent"].type is node
        assert node.definition.type.fields["children"].type.element.type is node

    def test_media_types(self) -> None:
        types = load_types(
            {
                "media_types": {
                    "bottle": {
                        "identifier": "application/vnd.bottle+json",
                        "type": "object",
                        "properties": {},
                    }
                }
            }
        )
        assert isinstance(types["bottle"], MediaType)
        assert types["bottle"].identifier == "application/vnd.bottle+json"

    def test_descriptions_kept(self) -> None:
        types = load_types({"types": {"id": {"type": "string", "description": "An ID"}}})
        assert types["id"].definition.description == "An ID"

    @pytest.mark.parametrize(
        "document",
        [
            [],
            {"types": []},
            {"types": {"a": {"type": "decimal"}}},
            {"types": {"a": {}}},
            {"types": {"a": {"ref": "b"}}},
            {"types": {"a": {"type": "array"}}},
            {"types": {"a": {"type": "object", "required": ["x"], "properties": {}}}},
            {"types": {"a": {"type": "object", "required": 5, "properties": {}}}},
            {"types": {"a": {"type": "object", "required": "id", "properties": {"id": {"type": "string"}}}}},
            {"types": {"a": {"type": "object", "required": [1], "properties": {}}}},
            {"media_types": {"m": {"identifier": 7, "type": "string"}}},
            {"types": {"a": "string"}},
            {"types": {"a": {"type": "string"}}, "media_types": {"a": {"type": "string"}}},
        ],
    )
    def test_malformed_documents(self, document) -> None:
        with pytest.raises(ModelError):
            load_types(document)
