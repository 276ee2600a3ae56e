"""
Go code generator implementation.

Generates Go type declarations from named types of the type model.
"""

from typing import List, Mapping, Optional

from ....logging_config import get_logger
from ...core.config import LoweringConfig
from ...core.generator import CodeGenerator
from ...core.schema import Array, DataType, NamedType, Object
from ...core.templates import TemplateEngine
from .types import GoTypeMapper
from .structs import STRUCT_TEMPLATE_NAME, GO_STRUCT_TEMPLATE

logger = get_logger(__name__)

DECLARATION_TEMPLATE_NAME = "declaration.go.j2"

GO_DECLARATION_TEMPLATE = (
    "{% if description %}{{ description | comment }}\n{% endif %}"
    "type {{ type_name }} {{ source }}"
)


class GoGenerator(CodeGenerator):
    """Code generator for Go type declarations with struct tags."""

    def __init__(self, config: Optional[LoweringConfig] = None):
        """Initialize Go generator with configuration."""
        super().__init__(config)
        self.type_mapper = GoTypeMapper(self.config, self.template_engine)

    def register_templates(self, engine: TemplateEngine) -> None:
        engine.add_template(STRUCT_TEMPLATE_NAME, GO_STRUCT_TEMPLATE)
        engine.add_template(DECLARATION_TEMPLATE_NAME, GO_DECLARATION_TEMPLATE)

    @property
    def language_name(self) -> str:
        return "go"

    @property
    def file_extension(self) -> str:
        return ".go"

    def declare(self, named: NamedType) -> str:
        """Generate ``type Name <definition>`` for a single named type."""
        description = named.definition.description if named.definition else None
        return self.render_template(
            DECLARATION_TEMPLATE_NAME,
            {
                "description": description,
                "type_name": self.type_mapper.reference_name(named),
                "source": self.type_mapper.source_code(named),
            },
        )

    def generate(self, types: Mapping[str, NamedType]) -> str:
        """Generate declarations for all named types, ordered by Go name."""
        ordered = sorted(
            types.values(), key=lambda named: self.type_mapper.reference_name(named)
        )
        logger.debug("Generating %d Go declarations", len(ordered))
        return "\n\n".join(self.declare(named) for named in ordered)

    def validate_types(self, types: Mapping[str, NamedType]) -> List[str]:
        """Validate named types for Go generation."""
        warnings = super().validate_types(types)

        declared = {}
        for name in sorted(types):
            go_name = self.type_mapper.reference_name(types[name])
            if go_name in declared:
                warnings.append(
                    f"Types {declared[go_name]} and {name} are both declared as {go_name}"
                )
            else:
                declared[go_name] = name
            if go_name[0].isdigit():
                warnings.append(f"Type {name} yields identifier {go_name} starting with a digit")

            definition = types[name].definition
            if definition is not None:
                nested = _inlined_object(definition.type)
                if nested is not None:
                    warnings.extend(self._validate_object(name, nested))

        return warnings

    def _validate_object(self, path: str, obj: Object) -> List[str]:
        """Report empty structs and field names that clash once goified."""
        warnings = []

        if not obj.fields:
            warnings.append(f"Type {path} has no fields - will generate empty struct")

        seen = {}
        for field_name in obj.field_names():
            go_name = self.type_mapper.sanitizer.sanitize(field_name, True)
            if go_name in seen:
                warnings.append(
                    f"Fields {path}.{seen[go_name]} and {path}.{field_name} "
                    f"both map to Go field {go_name}"
                )
            else:
                seen[go_name] = field_name
            if go_name[0].isdigit():
                warnings.append(
                    f"Field {path}.{field_name} yields identifier {go_name} starting with a digit"
                )

            nested = _inlined_object(obj.fields[field_name].type)
            if nested is not None:
                warnings.extend(self._validate_object(f"{path}.{field_name}", nested))

        return warnings


def _inlined_object(data_type: DataType) -> Optional[Object]:
    """Return the anonymous struct a field inlines, looking through arrays."""
    while isinstance(data_type, Array):
        data_type = data_type.element.type
    if isinstance(data_type, Object):
        return data_type
    return None
