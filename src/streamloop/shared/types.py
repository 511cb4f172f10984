"""
Semantic Type Model

Types of the values a stream pipeline carries (elements, accumulators,
intermediate results). A variable placeholder holds one of these until its
type is resolved to canonical text.

Canonical text follows the host's canonical form: qualified names as written,
type arguments separated by ``,`` without spaces (``java.util.Map<K,V>``).
"""

from dataclasses import dataclass
from typing import Tuple, Optional, Generic, TypeVar
from abc import ABC, abstractmethod
from enum import Enum

from ..utils.config import (
    QUALIFIED_NAME_SEPARATOR,
    TYPE_ARGUMENT_SEPARATOR,
    ARRAY_DIMENSION_SUFFIX,
)


class TypeKind(Enum):
    """Type kind"""
    PRIMITIVE = "primitive"  # int, long, boolean, void, ...
    CLASS = "class"          # String, java.util.List<T>, Map.Entry<K,V>
    ARRAY = "array"          # T[]
    WILDCARD = "wildcard"    # ?, ? extends T, ? super T


T = TypeVar('T')


@dataclass(frozen=True)
class Type:
    """
    Semantic type of a synthesized variable.

    Immutable and hashable; dispatch goes through ``accept`` so callers
    do not need isinstance chains.
    """
    kind: TypeKind

    def accept(self, visitor: 'TypeVisitor[T]') -> T:
        """Accept type visitor"""
        _type_visitor_dispatch = {
            TypeKind.PRIMITIVE: lambda: visitor.visit_primitive_type(self),  # type: ignore
            TypeKind.CLASS: lambda: visitor.visit_class_type(self),  # type: ignore
            TypeKind.ARRAY: lambda: visitor.visit_array_type(self),  # type: ignore
            TypeKind.WILDCARD: lambda: visitor.visit_wildcard_type(self),  # type: ignore
        }
        return _type_visitor_dispatch[self.kind]()

    def canonical_text(self) -> str:
        raise NotImplementedError

    def __str__(self) -> str:
        return self.canonical_text()


@dataclass(frozen=True)
class PrimitiveType(Type):
    """Primitive type (int, boolean, void, ...)"""
    name: str

    def __init__(self, name: str):
        super().__init__(kind=TypeKind.PRIMITIVE)
        object.__setattr__(self, 'name', name)

    def canonical_text(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return self.name


@dataclass(frozen=True)
class ClassType(Type):
    """
    Class or interface type, possibly parameterized.

    ``qualified_name`` is kept exactly as written (``List`` or
    ``java.util.List``); nested types use the dotted form (``Map.Entry``).
    """
    qualified_name: str
    type_args: Tuple[Type, ...] = ()

    def __init__(self, qualified_name: str, type_args: Tuple[Type, ...] = ()):
        super().__init__(kind=TypeKind.CLASS)
        object.__setattr__(self, 'qualified_name', qualified_name)
        object.__setattr__(self, 'type_args', tuple(type_args))

    @property
    def simple_name(self) -> str:
        """Last segment of the qualified name: ``java.util.Map.Entry`` -> ``Entry``"""
        return self.qualified_name.rsplit(QUALIFIED_NAME_SEPARATOR, 1)[-1]

    def canonical_text(self) -> str:
        if not self.type_args:
            return self.qualified_name
        args = TYPE_ARGUMENT_SEPARATOR.join(arg.canonical_text() for arg in self.type_args)
        return f"{self.qualified_name}<{args}>"

    def __repr__(self) -> str:
        return f"ClassType({self.canonical_text()})"


@dataclass(frozen=True)
class ArrayType(Type):
    """Array type: component[]"""
    component_type: Type

    def __init__(self, component_type: Type):
        super().__init__(kind=TypeKind.ARRAY)
        object.__setattr__(self, 'component_type', component_type)

    def canonical_text(self) -> str:
        return f"{self.component_type.canonical_text()}{ARRAY_DIMENSION_SUFFIX}"

    def __repr__(self) -> str:
        return f"ArrayType({self.canonical_text()})"


@dataclass(frozen=True)
class WildcardType(Type):
    """
    Wildcard type argument.

    ``bound`` is None for an unbounded ``?``; ``is_extends`` distinguishes
    ``? extends T`` from ``? super T``.
    """
    bound: Optional[Type] = None
    is_extends: bool = True

    def __init__(self, bound: Optional[Type] = None, is_extends: bool = True):
        super().__init__(kind=TypeKind.WILDCARD)
        object.__setattr__(self, 'bound', bound)
        object.__setattr__(self, 'is_extends', is_extends)

    def canonical_text(self) -> str:
        if self.bound is None:
            return "?"
        keyword = "extends" if self.is_extends else "super"
        return f"? {keyword} {self.bound.canonical_text()}"

    def __repr__(self) -> str:
        return f"WildcardType({self.canonical_text()})"


class TypeVisitor(ABC, Generic[T]):
    """Type visitor pattern; one method per TypeKind"""

    @abstractmethod
    def visit_primitive_type(self, ty: PrimitiveType) -> T:
        raise NotImplementedError

    @abstractmethod
    def visit_class_type(self, ty: ClassType) -> T:
        raise NotImplementedError

    @abstractmethod
    def visit_array_type(self, ty: ArrayType) -> T:
        raise NotImplementedError

    @abstractmethod
    def visit_wildcard_type(self, ty: WildcardType) -> T:
        raise NotImplementedError


# Common types
VOID = PrimitiveType("void")
INT = PrimitiveType("int")
STRING = ClassType("String")
OBJECT = ClassType("Object")
