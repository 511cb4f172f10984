"""
Type-based name suggestions.

A TypeNamingOracle maps a semantic type to idiomatic local variable names,
most preferred first. It is a pure query; it never sees or edits source.
"""

import logging
from typing import AbstractSet, List, Protocol

from ..shared.types import Type, TypeVisitor, PrimitiveType, ClassType, ArrayType, WildcardType
from ..utils.config import (
    ARRAY_NAME_SUFFIX,
    COLLECTION_TYPE_NAMES,
    JAVA_KEYWORDS,
    PRIMITIVE_NAME_SUGGESTIONS,
    TYPE_ABBREVIATIONS,
)
from .words import camel_suffixes, pluralize, with_article

logger = logging.getLogger("streamloop.naming.oracle")


class TypeNamingOracle(Protocol):
    """Suggests variable names for a type; finite, deterministic, possibly empty"""

    def suggest_names(self, ty: Type) -> List[str]:
        ...


class _ElementNames(TypeVisitor[List[str]]):
    """Class-derived names of an element type, before pluralization"""

    def visit_primitive_type(self, ty: PrimitiveType) -> List[str]:
        return [] if ty.name == "void" else [ty.name]

    def visit_class_type(self, ty: ClassType) -> List[str]:
        return camel_suffixes(ty.simple_name)

    def visit_array_type(self, ty: ArrayType) -> List[str]:
        return []

    def visit_wildcard_type(self, ty: WildcardType) -> List[str]:
        return ty.bound.accept(self) if ty.bound is not None else []


class JavaStyleNamingOracle(TypeVisitor[List[str]]):
    """
    Names in the style of hand-written Java loops.

    - ``int`` -> ``i``; ``String`` -> ``s``, ``string``
    - ``ArrayList<T>`` -> ``arrayList``, ``list``, then plurals of T
      (``List<String>`` -> ``list``, ``strings``)
    - ``User[]`` -> ``users``, ``arr``
    - ``? extends T`` -> names of T; unbounded ``?`` -> nothing
    """

    def __init__(self, keywords: AbstractSet[str] = JAVA_KEYWORDS):
        self.keywords = keywords
        self._element_names = _ElementNames()

    def suggest_names(self, ty: Type) -> List[str]:
        names: List[str] = []
        for name in ty.accept(self):
            if name in self.keywords:
                name = with_article(name)
            if name in names or name in self.keywords or not name.isidentifier():
                continue
            names.append(name)
        logger.debug(f"Type {ty.canonical_text()} suggests {names}")
        return names

    def visit_primitive_type(self, ty: PrimitiveType) -> List[str]:
        return list(PRIMITIVE_NAME_SUGGESTIONS.get(ty.name, [ty.name[:1]]))

    def visit_class_type(self, ty: ClassType) -> List[str]:
        simple = ty.simple_name
        names = list(TYPE_ABBREVIATIONS.get(simple, []))
        names.extend(camel_suffixes(simple))
        if simple in COLLECTION_TYPE_NAMES and len(ty.type_args) == 1:
            names.extend(pluralize(n) for n in ty.type_args[0].accept(self._element_names))
        return names

    def visit_array_type(self, ty: ArrayType) -> List[str]:
        names = [pluralize(n) for n in ty.component_type.accept(self._element_names)]
        names.append(ARRAY_NAME_SUFFIX)
        return names

    def visit_wildcard_type(self, ty: WildcardType) -> List[str]:
        if ty.bound is None:
            return []
        return ty.bound.accept(self)
