"""
Go-specific naming utilities and sanitization.

Handles Go reserved words, predeclared scalar types and naming conventions.
"""

from ...core.naming import IdentifierSanitizer


# Go reserved words
GO_KEYWORDS = frozenset(
    {
        "break",
        "case",
        "chan",
        "const",
        "continue",
        "default",
        "defer",
        "else",
        "fallthrough",
        "for",
        "func",
        "go",
        "goto",
        "if",
        "import",
        "interface",
        "map",
        "package",
        "range",
        "return",
        "select",
        "struct",
        "switch",
        "type",
        "var",
    }
)

# Go predeclared scalar types
GO_SCALAR_TYPES = frozenset(
    {
        "bool",
        "byte",
        "complex64",
        "complex128",
        "float32",
        "float64",
        "int",
        "int8",
        "int16",
        "int32",
        "int64",
        "rune",
        "string",
        "uint",
        "uint8",
        "uint16",
        "uint32",
        "uint64",
        "uintptr",
    }
)

GO_RESERVED_WORDS = GO_KEYWORDS | GO_SCALAR_TYPES

_go_sanitizer = IdentifierSanitizer(GO_RESERVED_WORDS)


def create_go_sanitizer() -> IdentifierSanitizer:
    """Create an identifier sanitizer configured for Go."""
    return IdentifierSanitizer(GO_RESERVED_WORDS)


def goify(name: str, exported: bool) -> str:
    """
    Make a valid Go identifier out of any string.

    Produces a CamelCase version of ``name``: underscores start a new word,
    characters other than ASCII letters and digits are removed. The first
    character is uppercase if ``exported`` is True, lowercase otherwise.

    >>> goify("user_id", True)
    'UserId'
    >>> goify("type", False)
    'type_'
    """
    return _go_sanitizer.sanitize(name, exported)


def context_name(action: str, resource: str) -> str:
    """Name of the context type generated for an action on a resource."""
    return goify(action, True) + goify(resource, True) + "Context"
