"""
Shared components: semantic types, enclosing-code scopes, errors.
"""

from .errors import (
    StreamLoopError, TypeTextError,
    StreamLoopImplementationError, VariableLifecycleError,
)
from .types import (
    Type, TypeKind, PrimitiveType, ClassType, ArrayType, WildcardType, TypeVisitor,
    VOID, INT, STRING, OBJECT,
)
from .scope import Scope, ScopeKind, ScopeManager, Binding, BindingType
