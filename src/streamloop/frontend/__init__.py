"""
Frontend: type text parsing.
"""

from .type_parser import TypeParser, TypeTransformer, parse_type

__all__ = ["TypeParser", "TypeTransformer", "parse_type"]
