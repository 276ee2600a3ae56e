"""
Naming utilities for safe code generation.

Turns arbitrary strings into camel-cased identifiers that are valid in a
target language and never collide with its reserved words.
"""

from typing import AbstractSet


class IdentifierSanitizer:
    """
    Stateless identifier builder for one target language.

    Underscores mark word boundaries and are dropped, ASCII letters and
    digits are kept, everything else is discarded. The first kept character
    takes its case from ``exported``.
    """

    def __init__(
        self,
        reserved_words: AbstractSet[str],
        suffix_on_conflict: str = "_",
        placeholder: str = "v",
    ):
        """
        Initialize identifier sanitizer.

        Args:
            reserved_words: Words a result must never be equal to
            suffix_on_conflict: Appended to a result that is a reserved word
            placeholder: Returned (case adjusted) when nothing survives
        """
        self.reserved_words = frozenset(reserved_words)
        self.suffix_on_conflict = suffix_on_conflict
        self.placeholder = placeholder

    def sanitize(self, name: str, exported: bool) -> str:
        """
        Make a valid identifier out of any string.

        Args:
            name: Original name
            exported: Uppercase first character if True, lowercase otherwise

        Returns:
            Non-empty identifier
        """
        chars = []
        next_upper = False

        for char in name:
            if char == "_":
                next_upper = True
            elif _is_word_char(char):
                if not chars:
                    char = char.upper() if exported else char.lower()
                    next_upper = False
                elif next_upper:
                    char = char.upper()
                    next_upper = False
                chars.append(char)

        if not chars:
            return self.placeholder.upper() if exported else self.placeholder.lower()

        result = "".join(chars)
        if self.is_reserved(result):
            result += self.suffix_on_conflict
        return result

    def is_reserved(self, name: str) -> bool:
        """Check if name is exactly one of the reserved words."""
        return name in self.reserved_words


def _is_word_char(char: str) -> bool:
    # ASCII only: other letters and digits are dropped like punctuation.
    return char.isascii() and char.isalnum()
