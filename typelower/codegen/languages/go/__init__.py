"""
Go code generator module.

Lowers the type model into Go type references, struct definitions and
type declarations.
"""

from .generator import GoGenerator
from .naming import (
    GO_KEYWORDS,
    GO_RESERVED_WORDS,
    GO_SCALAR_TYPES,
    context_name,
    create_go_sanitizer,
    goify,
)
from .structs import GoStructEmitter
from .types import GO_PRIMITIVE_TYPES, GoTypeMapper

__all__ = [
    "GoGenerator",
    "GoTypeMapper",
    "GoStructEmitter",
    # Naming
    "GO_KEYWORDS",
    "GO_SCALAR_TYPES",
    "GO_RESERVED_WORDS",
    "GO_PRIMITIVE_TYPES",
    "create_go_sanitizer",
    "goify",
    "context_name",
]
