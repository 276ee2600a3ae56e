"""
Language-specific code generators.

This module contains generators for the supported target languages.
"""

from .go import GoGenerator

__all__ = ["GoGenerator"]
