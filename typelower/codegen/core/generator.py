"""
Base generator interface for all code generation targets.

Defines the contract that all language generators must implement, and the
two failure tiers: recoverable GeneratorError and fatal GeneratorBug.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Dict, List, Mapping, Optional

from .templates import TemplateEngine, TemplateError, create_template_engine

if TYPE_CHECKING:
    from .config import LoweringConfig
    from .schema import NamedType


class GeneratorError(Exception):
    """Base exception for recoverable code generation errors."""

    pass


class GeneratorBug(BaseException):
    """
    Invariant violation inside the generator or its type model.

    Raised for an unknown data type variant or primitive kind. It derives from
    BaseException so that ``except Exception`` handlers, generate_code
    included, never turn it into an ordinary failed result.
    """

    pass


class CodeGenerator(ABC):
    """Abstract base class for all code generators."""

    def __init__(self, config: Optional["LoweringConfig"] = None):
        """Initialize generator with optional configuration."""
        from .config import LoweringConfig

        self.config = config or LoweringConfig()
        self._template_engine: Optional[TemplateEngine] = None

    @property
    @abstractmethod
    def language_name(self) -> str:
        """Return the name of the target language (e.g., 'go')."""
        pass

    @property
    @abstractmethod
    def file_extension(self) -> str:
        """Return the file extension for generated files (e.g., '.go')."""
        pass

    @property
    def template_engine(self) -> TemplateEngine:
        """Get the template engine for this generator."""
        if self._template_engine is None:
            self._template_engine = create_template_engine()
            self.register_templates(self._template_engine)
        return self._template_engine

    def register_templates(self, engine: TemplateEngine) -> None:
        """Add the generator's in-memory templates to the engine."""
        pass

    @abstractmethod
    def declare(self, named: "NamedType") -> str:
        """
        Generate the declaration of a single named type.

        Args:
            named: Named type to declare

        Returns:
            Declaration source text
        """
        pass

    @abstractmethod
    def generate(self, types: Mapping[str, "NamedType"]) -> str:
        """
        Generate declarations for all named types.

        Args:
            types: Dictionary mapping type names to NamedType objects

        Returns:
            Generated code as a string
        """
        pass

    def validate_types(self, types: Mapping[str, "NamedType"]) -> List[str]:
        """
        Validate named types for issues worth reporting.

        Returns:
            List of warning messages (empty if no issues)
        """
        warnings = []
        for name, named in types.items():
            if named.definition is None:
                warnings.append(f"Type '{name}' has no definition")
        return warnings

    def format_code(self, code: str) -> str:
        """Strip trailing whitespace and collapse runs of blank lines."""
        lines = code.split("\n")
        formatted_lines = []
        blank_count = 0

        for line in lines:
            stripped = line.rstrip()
            if not stripped:
                blank_count += 1
                if blank_count <= 1:
                    formatted_lines.append("")
            else:
                blank_count = 0
                formatted_lines.append(stripped)

        return "\n".join(formatted_lines)

    def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        return self.template_engine.render_template(template_name, context)


class GenerationResult:
    """Container for generation results and metadata."""

    def __init__(
        self, code: str, warnings: List[str] = None, metadata: Dict[str, Any] = None
    ):
        self.code = code
        self.warnings = warnings or []
        self.metadata = metadata or {}
        self.success = True
        self.error_message: Optional[str] = None
        self.exception: Optional[Exception] = None

    @classmethod
    def error(cls, message: str, exception: Exception = None) -> "GenerationResult":
        """Create a failed generation result."""
        result = cls(code="")
        result.success = False
        result.error_message = message
        result.exception = exception
        return result


def generate_code(
    generator: CodeGenerator, types: Mapping[str, "NamedType"]
) -> GenerationResult:
    """
    Generate code using the specified generator with error handling.

    Recoverable GeneratorError and TemplateError failures become a failed
    GenerationResult.
    GeneratorBug is not an Exception and propagates to the caller.

    Args:
        generator: Code generator instance
        types: Named types to generate declarations for

    Returns:
        GenerationResult with code, warnings, and metadata
    """
    try:
        warnings = generator.validate_types(types)
        code = generator.format_code(generator.generate(types))

        metadata = {
            "language": generator.language_name,
            "file_extension": generator.file_extension,
            "type_count": len(types),
        }

        return GenerationResult(code, warnings, metadata)

    except (GeneratorError, TemplateError) as e:
        return GenerationResult.error(f"Code generation failed: {e}", exception=e)
