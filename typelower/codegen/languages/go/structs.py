"""
Go struct emission.

Writes the field list of an object type as a Go struct with struct tags.
"""

from typing import TYPE_CHECKING, Any, Callable, Dict, List, Optional

from ...core.schema import Object
from ...core.templates import TemplateEngine, create_template_engine
from .naming import goify

if TYPE_CHECKING:
    from .types import GoTypeMapper


STRUCT_TEMPLATE_NAME = "struct.go.j2"

GO_STRUCT_TEMPLATE = (
    "struct {\n"
    "{% for field in fields %}"
    "{{ indent }}{{ field.name }} {{ field.type }} {{ field.tag }}\n"
    "{% endfor %}"
    "}"
)


class GoStructEmitter:
    """Emits ``struct { ... }`` text for object types."""

    def __init__(
        self, type_mapper: "GoTypeMapper", template_engine: Optional[TemplateEngine] = None
    ):
        self.type_mapper = type_mapper
        self.config = type_mapper.config
        self.template_engine = template_engine or create_template_engine()
        if not self.template_engine.template_exists(STRUCT_TEMPLATE_NAME):
            self.template_engine.add_template(STRUCT_TEMPLATE_NAME, GO_STRUCT_TEMPLATE)

    def emit_struct(self, obj: Object, is_required: Callable[[str], bool]) -> str:
        """
        Go struct definition for an object type.

        Fields are written in code point order of their names so the output
        does not depend on the order the model stores them in.

        Args:
            obj: Object type to emit
            is_required: Predicate telling which fields must always be present

        Returns:
            Struct definition text
        """
        fields = [
            self.field_data(name, obj.fields[name], is_required(name))
            for name in obj.field_names()
        ]
        return self.template_engine.render_template(
            STRUCT_TEMPLATE_NAME, {"fields": fields, "indent": self.config.field_indent}
        )

    def field_data(self, name: str, attribute, required: bool) -> Dict[str, Any]:
        """Template context for a single struct field."""
        type_text = self.type_mapper.type_def(attribute)
        # Inlined structs are nested one level deeper
        type_text = type_text.replace("\n", "\n" + self.config.field_indent)
        return {
            "name": goify(name, True),
            "type": type_text,
            "tag": self.struct_tag(name, required),
        }

    def struct_tag(self, name: str, required: bool) -> str:
        """Struct tag carrying the original field name."""
        tag_parts: List[str] = [name]
        if not required:
            tag_parts.append(self.config.omit_marker)
        return f'`{self.config.tag_key}:"{",".join(tag_parts)}"`'
