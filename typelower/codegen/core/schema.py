"""
Core type model for code generation.

A closed set of data type variants (primitives, arrays, objects and named
types) that language generators lower into source text, plus a loader that
builds named types from a JSON-like document.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet, Mapping, Optional
from enum import Enum

from .generator import GeneratorError


class ModelError(GeneratorError):
    """Exception raised when a type document cannot be turned into a model."""

    pass


class PrimitiveKind(Enum):
    """Supported primitive kinds."""

    BOOLEAN = "boolean"
    INTEGER = "integer"
    NUMBER = "number"
    STRING = "string"


class DataType:
    """Base class of the closed data type variant.

    The only subclasses are Primitive, Array, Object and NamedType (with
    MediaType as a kind of NamedType). Consumers dispatch on these and treat
    anything else as a generator bug.
    """

    __slots__ = ()


@dataclass(frozen=True)
class AttributeDefinition:
    """A data type together with the metadata attached where it is used."""

    type: DataType
    required: FrozenSet[str] = field(default_factory=frozenset)
    description: Optional[str] = None

    def is_required(self, field_name: str) -> bool:
        """Check whether an Object field must always be present."""
        return field_name in self.required


@dataclass(frozen=True)
class Primitive(DataType):
    kind: PrimitiveKind


@dataclass(frozen=True)
class Array(DataType):
    element: AttributeDefinition


@dataclass(frozen=True)
class Object(DataType):
    """Structural type: field name -> attribute. Iteration order is not significant."""

    fields: Mapping[str, AttributeDefinition] = field(default_factory=dict)

    def __hash__(self) -> int:
        return hash(frozenset(self.fields))

    def field_names(self) -> list[str]:
        """Field names in code point order."""
        return sorted(self.fields)


@dataclass(eq=False)
class NamedType(DataType):
    """
    A user-defined type introduced with a name.

    Named types are always referenced by name, so they may form cycles. The
    definition is assigned once by whoever builds the model and is kept out
    of repr and equality so cyclic graphs never get traversed by them.
    """

    name: str
    definition: Optional[AttributeDefinition] = field(default=None, repr=False)


@dataclass(eq=False)
class MediaType(NamedType):
    """A named type derived from a media type definition."""

    identifier: str = ""


# Document loading

_PRIMITIVES = {kind.value: kind for kind in PrimitiveKind}


def load_types(document: Mapping[str, Any]) -> Dict[str, NamedType]:
    """
    Build named types from a JSON-like document.

    The document looks like::

        {
            "types": {
                "User": {"type": "object", "required": ["id"],
                         "properties": {"id": {"type": "integer"},
                                        "friends": {"type": "array",
                                                    "items": {"ref": "User"}}}}
            },
            "media_types": {
                "UserMedia": {"identifier": "application/vnd.user+json",
                              "type": "object", "properties": {}}
            }
        }

    References (``{"ref": Name}``) are resolved after every named type has
    been created, so forward and cyclic references both work.

    Returns:
        Dict mapping type name to NamedType

    Raises:
        ModelError: If the document is malformed
    """
    if not isinstance(document, Mapping):
        raise ModelError("Type document must be a JSON object")

    user_specs = document.get("types", {}) or {}
    media_specs = document.get("media_types", {}) or {}
    if not isinstance(user_specs, Mapping) or not isinstance(media_specs, Mapping):
        raise ModelError("'types' and 'media_types' must be JSON objects")

    named: Dict[str, NamedType] = {}
    for name in user_specs:
        named[name] = NamedType(name=name)
    for name, spec in media_specs.items():
        if name in named:
            raise ModelError(f"Duplicate type name: {name}")
        identifier = spec.get("identifier", "") if isinstance(spec, Mapping) else ""
        if not isinstance(identifier, str):
            raise ModelError(f"{name}: 'identifier' must be a string")
        named[name] = MediaType(name=name, identifier=identifier)

    for specs in (user_specs, media_specs):
        for name, spec in specs.items():
            named[name].definition = _build_attribute(spec, named, name)

    return named


def _build_attribute(
    spec: Any, named: Mapping[str, NamedType], path: str
) -> AttributeDefinition:
    """Recursively convert a document node into an AttributeDefinition."""
    if not isinstance(spec, Mapping):
        raise ModelError(f"{path}: expected an object, got {type(spec).__name__}")

    description = spec.get("description")

    if "ref" in spec:
        ref = spec["ref"]
        if not isinstance(ref, str) or ref not in named:
            raise ModelError(f"{path}: unknown type reference {ref!r}")
        return AttributeDefinition(type=named[ref], description=description)

    type_name = spec.get("type")
    if not isinstance(type_name, str):
        raise ModelError(f"{path}: missing or invalid 'type'")

    if type_name in _PRIMITIVES:
        return AttributeDefinition(
            type=Primitive(_PRIMITIVES[type_name]), description=description
        )

    if type_name == "array":
        if "items" not in spec:
            raise ModelError(f"{path}: array without 'items'")
        element = _build_attribute(spec["items"], named, f"{path}[]")
        return AttributeDefinition(type=Array(element), description=description)

    if type_name == "object":
        properties = spec.get("properties", {}) or {}
        if not isinstance(properties, Mapping):
            raise ModelError(f"{path}: 'properties' must be an object")
        required = spec.get("required", []) or []
        if not isinstance(required, list) or not all(
            isinstance(r, str) for r in required
        ):
            raise ModelError(f"{path}: 'required' must be a list of field names")
        unknown = [r for r in required if r not in properties]
        if unknown:
            raise ModelError(f"{path}: required fields not declared: {unknown}")
        fields = {
            field_name: _build_attribute(field_spec, named, f"{path}.{field_name}")
            for field_name, field_spec in properties.items()
        }
        return AttributeDefinition(
            type=Object(fields), required=frozenset(required), description=description
        )

    raise ModelError(f"{path}: unsupported type {type_name!r}")
