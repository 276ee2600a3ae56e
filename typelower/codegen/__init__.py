"""
Code generation for the typelower type model.

Lowers named types, arrays, objects and primitives into Go source text.
"""

from .core import (
    Array,
    AttributeDefinition,
    GeneratorBug,
    GeneratorError,
    GenerationResult,
    LoweringConfig,
    MediaType,
    NamedType,
    Object,
    Primitive,
    PrimitiveKind,
    generate_code,
    get_config_manager,
    load_config,
    load_types,
)
from .languages.go import GoGenerator, GoTypeMapper, context_name, goify


def generate_from_document(document, config=None) -> GenerationResult:
    """
    Generate Go declarations from a type document.

    Args:
        document: JSON-like type document (see load_types)
        config: LoweringConfig, dict of overrides, or None for defaults

    Returns:
        GenerationResult with generated code
    """
    if not isinstance(config, LoweringConfig):
        config = load_config(config)

    types = load_types(document)
    return generate_code(GoGenerator(config), types)


__all__ = [
    "Array",
    "AttributeDefinition",
    "GeneratorBug",
    "GeneratorError",
    "GenerationResult",
    "GoGenerator",
    "GoTypeMapper",
    "LoweringConfig",
    "MediaType",
    "NamedType",
    "Object",
    "Primitive",
    "PrimitiveKind",
    "context_name",
    "generate_code",
    "generate_from_document",
    "goify",
    "get_config_manager",
    "load_config",
    "load_types",
]
