"""
Stream Variable

A placeholder for a local the loop rewrite introduces (loop element,
intermediate value, accumulator). Its lifecycle:

1. Construction: cheap, so it can be done before it is known whether the
   rewrite will be applied at all.
2. Gathering: ``add_best_name_candidate`` / ``add_other_name_candidate``.
3. ``add_candidates_from_type``: type-based candidates appended once and the
   type fixed as canonical text. Nothing in the original source may change
   before this point.
4. ``register``: the registry assigns the actual name.
5. Code generation: ``name`` / ``type_text`` / ``declaration``.

Each step is forward only. Calling out of order raises
VariableLifecycleError; it means the planner is broken, so it is never
caught here.
"""

import logging
from enum import Enum
from typing import Optional

from ..shared.errors import VariableLifecycleError
from ..shared.types import Type, VOID
from ..utils.config import DEFAULT_VARIABLE_NAME, STUB_TEXT, UNREGISTERED_TEMPLATE
from .candidates import NameCandidateSet
from .oracle import TypeNamingOracle
from .registry import NameRegistry

logger = logging.getLogger("streamloop.naming.variable")


class VariableState(Enum):
    CREATED = "created"
    GATHERING = "gathering"
    TYPED = "typed"
    REGISTERED = "registered"


class StreamVariable:
    """A synthesized local whose name and type are committed late"""

    def __init__(self, ty: Type):
        self._state = VariableState.CREATED
        self._pending_type: Optional[Type] = ty
        self._type_text: Optional[str] = None
        self._name: Optional[str] = None
        self._candidates: Optional[NameCandidateSet] = NameCandidateSet()

    @property
    def state(self) -> VariableState:
        return self._state

    @property
    def is_registered(self) -> bool:
        return self._state is VariableState.REGISTERED

    def add_best_name_candidate(self, candidate: str) -> None:
        """
        Register best name candidate for this variable (like lambda argument
        which was explicitly present in the original code).
        """
        self._gathering("add best name candidate").add_best(candidate)

    def add_other_name_candidate(self, candidate: str) -> None:
        """
        Register normal name candidate for this variable (for example, derived
        using unpluralize from collection name).
        """
        self._gathering("add other name candidate").add_other(candidate)

    add_explicit_candidate = add_best_name_candidate
    add_heuristic_candidate = add_other_name_candidate

    def _gathering(self, action: str) -> NameCandidateSet:
        if self._state not in (VariableState.CREATED, VariableState.GATHERING):
            raise VariableLifecycleError(
                f"Cannot {action} for {self!r}: candidate gathering is closed "
                f"(state {self._state.value})",
                VariableLifecycleError.CANDIDATES_CLOSED,
            )
        self._state = VariableState.GATHERING
        return self._candidates

    def add_candidates_from_type(self, oracle: TypeNamingOracle) -> None:
        """
        Register name candidates based on variable type.

        Must be called exactly once, after all best/other candidates are in.
        The semantic type is released and replaced by its canonical text.
        """
        if self._pending_type is None or self._type_text is not None:
            raise VariableLifecycleError(
                f"Type of {self!r} is already resolved to '{self._type_text}'",
                VariableLifecycleError.TYPE_ALREADY_RESOLVED,
            )
        ty = self._pending_type
        self._candidates.extend_other(oracle.suggest_names(ty))
        self._type_text = ty.canonical_text()
        self._pending_type = None
        self._state = VariableState.TYPED
        logger.debug(f"Resolved type of {self!r} to {self._type_text}")

    resolve_type = add_candidates_from_type

    def register(self, registry: NameRegistry) -> None:
        """
        Register variable within the rewrite scope. Must be called once, after
        the type is resolved. Now the variable gets an actual name.
        """
        if self._state is VariableState.REGISTERED:
            raise VariableLifecycleError(
                f"Variable '{self._name}' is already registered",
                VariableLifecycleError.ALREADY_REGISTERED,
            )
        if self._state is not VariableState.TYPED:
            raise VariableLifecycleError(
                f"Cannot register {self!r} before its type is resolved",
                VariableLifecycleError.REGISTER_BEFORE_TYPE,
            )
        variants = self._candidates.ordered()
        if not variants:
            variants = [DEFAULT_VARIABLE_NAME]
        self._name = registry.register_var_name(variants)
        self._candidates = None
        self._state = VariableState.REGISTERED
        logger.debug(f"Variable {self._type_text} {self._name} registered from {variants}")

    @property
    def name(self) -> str:
        if self._name is None:
            raise VariableLifecycleError(
                f"Name of {self!r} requested before registration",
                VariableLifecycleError.NAME_BEFORE_REGISTER,
            )
        return self._name

    @property
    def type_text(self) -> str:
        if self._type_text is None:
            raise VariableLifecycleError(
                f"Type of {self!r} requested before type resolution",
                VariableLifecycleError.TYPE_BEFORE_RESOLVE,
            )
        return self._type_text

    @property
    def declaration(self) -> str:
        return f"{self.type_text} {self.name}"

    def __repr__(self) -> str:
        if self._name is None:
            return UNREGISTERED_TEMPLATE.format(best=self._candidates.best, other=self._candidates.other)
        return self._name

    __str__ = __repr__


class StubVariable(StreamVariable):
    """
    Variable for code paths that need a placeholder but generate no code.
    Every mutation is ignored and every query returns a marker.
    """

    def __init__(self):
        super().__init__(VOID)

    def add_best_name_candidate(self, candidate: str) -> None:
        pass

    def add_other_name_candidate(self, candidate: str) -> None:
        pass

    add_explicit_candidate = add_best_name_candidate
    add_heuristic_candidate = add_other_name_candidate

    def add_candidates_from_type(self, oracle: TypeNamingOracle) -> None:
        pass

    resolve_type = add_candidates_from_type

    def register(self, registry: NameRegistry) -> None:
        pass

    @property
    def name(self) -> str:
        return STUB_TEXT

    @property
    def type_text(self) -> str:
        return STUB_TEXT

    @property
    def declaration(self) -> str:
        return STUB_TEXT

    def __repr__(self) -> str:
        return STUB_TEXT

    __str__ = __repr__


STUB = StubVariable()
