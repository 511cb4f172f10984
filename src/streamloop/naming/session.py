"""
Naming Session

Single owner of every variable placeholder created for one stream-to-loop
transformation. All placeholders share one registry, so registering them in
creation order makes collision resolution reproducible.
"""

import logging
from typing import Iterable, List, Optional, Tuple, Union

from ..frontend.type_parser import parse_type
from ..shared.errors import VariableLifecycleError
from ..shared.scope import Scope
from ..shared.types import Type
from .oracle import JavaStyleNamingOracle, TypeNamingOracle
from .registry import NameRegistry
from .variable import StreamVariable, VariableState
from .words import unpluralize_name

logger = logging.getLogger("streamloop.naming.session")


class NamingSession:
    """
    Per-transformation naming state.

    Pass either a ready ``registry`` or the ``enclosing`` scope / ``reserved``
    names to build one from.
    """

    def __init__(self,
                 registry: Optional[NameRegistry] = None,
                 oracle: Optional[TypeNamingOracle] = None,
                 enclosing: Optional[Scope] = None,
                 reserved: Iterable[str] = ()):
        self.registry = registry if registry is not None else NameRegistry(enclosing, reserved)
        self.oracle = oracle if oracle is not None else JavaStyleNamingOracle()
        self._variables: List[StreamVariable] = []
        self._discarded = False

    @property
    def variables(self) -> Tuple[StreamVariable, ...]:
        return tuple(self._variables)

    @property
    def discarded(self) -> bool:
        return self._discarded

    def new_variable(self, ty: Union[Type, str]) -> StreamVariable:
        """Create a placeholder for a local of the given type (Type or type text)."""
        if self._discarded:
            raise VariableLifecycleError(
                "Cannot create variables in a discarded naming session",
                VariableLifecycleError.SESSION_DISCARDED,
            )
        if isinstance(ty, str):
            ty = parse_type(ty)
        variable = StreamVariable(ty)
        self._variables.append(variable)
        return variable

    def suggest_from_collection(self, variable: StreamVariable, collection_name: str) -> None:
        """Element name heuristic from the name of the container being streamed."""
        candidate = unpluralize_name(collection_name)
        if candidate:
            variable.add_other_name_candidate(candidate)

    def resolve_types(self) -> None:
        """Resolve the type of every variable still gathering candidates, in creation order."""
        for variable in self._variables:
            if variable.state in (VariableState.CREATED, VariableState.GATHERING):
                variable.add_candidates_from_type(self.oracle)

    def register_all(self) -> List[str]:
        """Register every unregistered variable in creation order; returns all names."""
        self.resolve_types()
        for variable in self._variables:
            if not variable.is_registered:
                variable.register(self.registry)
        logger.debug(f"Registered {len(self._variables)} variable(s): {self.registry.used_names}")
        return [variable.name for variable in self._variables]

    def discard(self) -> None:
        """Abandon the transformation; nothing outside the session was touched."""
        logger.debug(f"Discarding naming session with {len(self._variables)} variable(s)")
        self._variables.clear()
        self._discarded = True
