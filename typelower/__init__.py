"""
typelower - lowers an abstract type model into Go type declarations.
"""

__version__ = "0.1.0"
