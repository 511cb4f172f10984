"""
Type Text Parser

Parses declaration-style type text (``List<String>``, ``int[][]``,
``Map.Entry<K, ? super V>``) into the semantic types held by variable
placeholders. Lark LALR grammar in ``grammar.lark``.
"""

from typing import Optional
from pathlib import Path
from lark import Lark, Transformer, v_args
from lark.exceptions import UnexpectedInput, ParseError as LarkParseError
import logging

from ..shared.types import Type, PrimitiveType, ClassType, ArrayType, WildcardType
from ..shared.errors import TypeTextError
from ..utils.config import (
    DEFAULT_PARSER_CACHE_FILE,
    PRIMITIVE_TYPE_NAMES,
    QUALIFIED_NAME_SEPARATOR,
)

logger = logging.getLogger("streamloop.frontend.type_parser")


@v_args(inline=True)
class TypeTransformer(Transformer):
    """Converts the Lark parse tree into semantic Type objects"""

    def start(self, ty):
        return ty

    def qualified_name(self, *names):
        return QUALIFIED_NAME_SEPARATOR.join(str(name) for name in names)

    def type_args(self, *args):
        return tuple(args)

    def named_type(self, name, args=()):
        if not args and name in PRIMITIVE_TYPE_NAMES:
            return PrimitiveType(name)
        return ClassType(name, args)

    def type_ref(self, base, *dims):
        ty = base
        for _ in dims:
            ty = ArrayType(ty)
        return ty

    def wildcard(self, *children):
        if not children:
            return WildcardType()
        bound_kind, bound = children
        return WildcardType(bound, is_extends=(str(bound_kind) == "extends"))


class TypeParser:
    """
    Parser for type text.

    Uses Lark native caching; one instance can be reused for every
    variable of every transformation.
    """

    def __init__(self, cache_file: str = DEFAULT_PARSER_CACHE_FILE):
        grammar_path = Path(__file__).parent / "grammar.lark"
        self.parser = Lark.open(
            str(grammar_path),
            start='start',
            parser='lalr',              # Required for caching
            cache=cache_file,
            maybe_placeholders=False,
        )
        self.transformer = TypeTransformer()

    def parse(self, text: str) -> Type:
        """
        Parse type text to a semantic Type.

        Raises TypeTextError when the text is not a well-formed type.
        """
        try:
            tree = self.parser.parse(text)
        except (UnexpectedInput, LarkParseError) as e:
            column = getattr(e, 'column', None)
            if not isinstance(column, int) or column < 1:
                column = None
            raise TypeTextError("invalid type text", text, column) from e
        ty = self.transformer.transform(tree)
        logger.debug(f"Parsed type text {text!r} as {ty.canonical_text()}")
        return ty


_default_parser: Optional[TypeParser] = None


def parse_type(text: str) -> Type:
    """Parse type text with a shared TypeParser instance."""
    global _default_parser
    if _default_parser is None:
        _default_parser = TypeParser()
    return _default_parser.parse(text)
