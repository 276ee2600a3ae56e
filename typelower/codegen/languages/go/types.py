"""
Go-specific type lowering.

Maps type model nodes to Go type references and struct definitions. Named
types are always referenced by name, anonymous objects are always inlined.
"""

from typing import Dict, Optional, Union

from ....logging_config import get_logger
from ...core.config import LoweringConfig
from ...core.generator import GeneratorBug
from ...core.schema import (
    Array,
    AttributeDefinition,
    DataType,
    ModelError,
    NamedType,
    Object,
    Primitive,
    PrimitiveKind,
)
from ...core.templates import TemplateEngine
from .naming import create_go_sanitizer
from .structs import GoStructEmitter

logger = get_logger(__name__)

GO_PRIMITIVE_TYPES: Dict[PrimitiveKind, str] = {
    PrimitiveKind.BOOLEAN: "bool",
    PrimitiveKind.INTEGER: "int",
    PrimitiveKind.NUMBER: "float64",
    PrimitiveKind.STRING: "string",
}


class GoTypeMapper:
    """
    Central engine for lowering type model nodes to Go source text.

    Two entry points are distinguished: type_def() yields what goes where a
    type is used (field types, array elements), source_code() yields what
    goes after ``type Name`` in a declaration.
    """

    def __init__(
        self,
        config: Optional[LoweringConfig] = None,
        template_engine: Optional[TemplateEngine] = None,
    ):
        self.config = config or LoweringConfig()
        self.sanitizer = create_go_sanitizer()
        self.struct_emitter = GoStructEmitter(self, template_engine)

    def primitive_name(self, primitive: Primitive) -> str:
        """Go scalar type for a primitive."""
        go_type = GO_PRIMITIVE_TYPES.get(primitive.kind)
        if go_type is None:
            raise GeneratorBug(f"typelower bug: unknown primitive type {primitive!r}")
        return go_type

    def reference_name(self, named: NamedType) -> str:
        """Exported identifier of a named type, without any pointer."""
        return self.sanitizer.sanitize(named.name, True)

    def type_name(self, data_type: DataType) -> str:
        """
        Bare Go type name for a data type.

        Objects have no name of their own and map to the configured unknown
        type. Named types yield their identifier without a pointer.
        """
        if isinstance(data_type, Primitive):
            return self.primitive_name(data_type)
        elif isinstance(data_type, Array):
            return "[]" + self.type_name(data_type.element.type)
        elif isinstance(data_type, Object):
            return self.config.unknown_type
        elif isinstance(data_type, NamedType):
            return self.reference_name(data_type)
        else:
            raise GeneratorBug(f"typelower bug: unknown type {data_type!r}")

    def type_def(self, attribute: AttributeDefinition) -> str:
        """
        Go type used where the attribute is referenced.

        Primitives, arrays and named types lower to a reference; an anonymous
        object lowers to its full struct since it has no name to refer to.
        """
        data_type = attribute.type
        if isinstance(data_type, Primitive):
            return self.primitive_name(data_type)
        elif isinstance(data_type, Array):
            return "[]" + self.type_def(data_type.element)
        elif isinstance(data_type, Object):
            return self.struct_emitter.emit_struct(data_type, attribute.is_required)
        elif isinstance(data_type, NamedType):
            pointer = "*" if self.config.named_type_pointers else ""
            return pointer + self.reference_name(data_type)
        else:
            raise GeneratorBug(f"typelower bug: unknown type {data_type!r}")

    def source_code(self, data_structure: Union[AttributeDefinition, NamedType]) -> str:
        """
        Go code defining a type matching the data structure.

        This is the part that comes after ``type Foo``. For a named type the
        definition behind the name is lowered; names nested inside it are
        still only referenced.
        """
        if isinstance(data_structure, NamedType):
            logger.debug("Lowering definition of %s", data_structure.name)
            if data_structure.definition is None:
                raise ModelError(f"Named type {data_structure.name} has no definition")
            definition = data_structure.definition
        else:
            definition = data_structure

        data_type = definition.type
        if isinstance(data_type, Primitive):
            return self.primitive_name(data_type)
        elif isinstance(data_type, Array):
            return "[]" + self.type_def(data_type.element)
        elif isinstance(data_type, Object):
            return self.struct_emitter.emit_struct(data_type, definition.is_required)
        elif isinstance(data_type, NamedType):
            return self.type_def(definition)
        else:
            raise GeneratorBug(f"typelower bug: unknown data structure type {data_type!r}")
