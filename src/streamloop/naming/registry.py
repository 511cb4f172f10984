"""
Name Registry

Authority over the rewrite scope of one transformation: every name handed to
a generated local, every name reserved by the surrounding code, and the
language keywords. Names are never released until the transformation ends.
"""

import logging
from typing import AbstractSet, Iterable, List, Optional, Sequence

from ..shared.scope import Scope
from ..utils.config import DEFAULT_VARIABLE_NAME, DISAMBIGUATION_START, JAVA_KEYWORDS

logger = logging.getLogger("streamloop.naming.registry")


class NameRegistry:
    """
    Resolves ordered candidate lists to collision-free names.

    ``enclosing`` is the innermost scope of the code around the rewrite;
    any name visible from it is taken. ``reserved`` adds names the caller
    knows are taken without modelling a scope for them.
    """

    def __init__(self,
                 enclosing: Optional[Scope] = None,
                 reserved: Iterable[str] = (),
                 keywords: AbstractSet[str] = JAVA_KEYWORDS):
        self.enclosing = enclosing
        self.keywords = keywords
        self._reserved = set(reserved)
        self._used: List[str] = []
        self._used_set = set()

    @property
    def used_names(self) -> List[str]:
        """Names registered for generated locals, in registration order"""
        return list(self._used)

    def reserve(self, name: str) -> None:
        """Mark a name from the surrounding code as taken."""
        self._reserved.add(name)

    def is_used(self, name: str) -> bool:
        if name in self._used_set or name in self._reserved or name in self.keywords:
            return True
        return self.enclosing is not None and self.enclosing.lookup(name) is not None

    def register_var_name(self, variants: Sequence[str]) -> str:
        """
        Commit the first unused variant and return it.

        Round 0 tries every variant as is; round k tries every variant
        suffixed with k (``x1``, ``x2``, ...), so the result is deterministic
        and registration never fails.
        """
        variants = [v for v in variants if v] or [DEFAULT_VARIABLE_NAME]
        for variant in variants:
            if not self.is_used(variant):
                return self._commit(variant)
        logger.debug(f"All candidates taken: {list(variants)}; disambiguating")
        index = DISAMBIGUATION_START
        while True:
            for variant in variants:
                name = f"{variant}{index}"
                if not self.is_used(name):
                    return self._commit(name)
            index += 1

    def _commit(self, name: str) -> str:
        self._used.append(name)
        self._used_set.add(name)
        logger.debug(f"Registered variable name '{name}'")
        return name
