"""
Enclosing-code scopes.

Names already bound around the rewritten chain (fields, parameters, locals,
lambda parameters). A generated local must not collide with any of them;
the name registry consults the innermost scope, which looks outward.
"""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Generator, List, Optional


class ScopeKind(Enum):
    CLASS = "class"
    METHOD = "method"
    BLOCK = "block"
    LAMBDA = "lambda"
    LOOP = "loop"


class BindingType(Enum):
    FIELD = "field"
    PARAMETER = "parameter"
    LOCAL = "local"
    LAMBDA_PARAMETER = "lambda_parameter"


@dataclass
class Binding:
    """One name binding in the enclosing code."""
    name: str
    binding_type: BindingType
    type_text: Optional[str] = None


@dataclass
class Scope:
    """
    One scope level: name -> Binding.
    define() overwrites (shadow); lookup() inner -> outer.
    """

    parent: Optional[Scope]
    kind: ScopeKind
    _bindings: Dict[str, Binding] = field(default_factory=dict)

    def lookup(self, name: str) -> Optional[Binding]:
        """Binding for name, innermost to outermost."""
        if name in self._bindings:
            return self._bindings[name]
        if self.parent is not None:
            return self.parent.lookup(name)
        return None

    def define(self, name: str, binding_type: BindingType = BindingType.LOCAL,
               type_text: Optional[str] = None) -> Binding:
        binding = Binding(name=name, binding_type=binding_type, type_text=type_text)
        self._bindings[name] = binding
        return binding


class ScopeManager:
    """
    Scope stack. enter_scope = push, exit_scope = pop.
    lookup/define operate on the current (innermost) scope.
    """

    def __init__(self) -> None:
        self._stack: List[Scope] = []
        self._current: Optional[Scope] = None

    def enter_scope(self, kind: ScopeKind, parent: Optional[Scope] = None) -> Scope:
        p = parent if parent is not None else self._current
        scope = Scope(parent=p, kind=kind)
        self._stack.append(scope)
        self._current = scope
        return scope

    def exit_scope(self) -> None:
        if not self._stack:
            raise RuntimeError("Cannot exit scope: no active scope")
        self._stack.pop()
        self._current = self._stack[-1] if self._stack else None

    @contextmanager
    def scope(self, kind: ScopeKind, parent: Optional[Scope] = None) -> Generator[Scope, None, None]:
        """Context manager: enter on __enter__, exit on __exit__."""
        s = self.enter_scope(kind, parent)
        try:
            yield s
        finally:
            self.exit_scope()

    def current_scope(self) -> Optional[Scope]:
        return self._current

    def define(self, name: str, binding_type: BindingType = BindingType.LOCAL,
               type_text: Optional[str] = None) -> Binding:
        """Define name in the current scope."""
        if self._current is None:
            raise RuntimeError(f"Cannot define '{name}': no active scope")
        return self._current.define(name, binding_type, type_text)

    def lookup(self, name: str) -> Optional[Binding]:
        if self._current is None:
            return None
        return self._current.lookup(name)
