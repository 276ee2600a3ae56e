"""
Core code generation components.

Provides the type model, base classes and utilities used by language generators.
"""

from .generator import (
    CodeGenerator,
    GeneratorBug,
    GeneratorError,
    GenerationResult,
    generate_code,
)
from .schema import (
    Array,
    AttributeDefinition,
    DataType,
    MediaType,
    ModelError,
    NamedType,
    Object,
    Primitive,
    PrimitiveKind,
    load_types,
)
from .naming import IdentifierSanitizer
from .config import (
    LoweringConfig,
    ConfigManager,
    ConfigError,
    get_config_manager,
    load_config,
)
from .templates import TemplateEngine, TemplateError, create_template_engine

__all__ = [
    # Base generator interface
    "CodeGenerator",
    "GeneratorBug",
    "GeneratorError",
    "GenerationResult",
    "generate_code",
    # Type model
    "Array",
    "AttributeDefinition",
    "DataType",
    "MediaType",
    "ModelError",
    "NamedType",
    "Object",
    "Primitive",
    "PrimitiveKind",
    "load_types",
    # Naming utilities - language-agnostic
    "IdentifierSanitizer",
    # Configuration system
    "LoweringConfig",
    "ConfigManager",
    "ConfigError",
    "get_config_manager",
    "load_config",
    # Template system
    "TemplateEngine",
    "TemplateError",
    "create_template_engine",
]
