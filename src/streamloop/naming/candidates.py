"""
Name candidates for one synthesized variable.

Two insertion-ordered sets: names the original code used explicitly (best)
and heuristic names (other). Dicts keep insertion order and absorb
duplicates, so they double as ordered sets.
"""

from typing import Dict, Iterable, List


class NameCandidateSet:
    """Ordered, deduplicated best/other name candidates"""

    def __init__(self) -> None:
        self._best: Dict[str, None] = {}
        self._other: Dict[str, None] = {}

    def add_best(self, name: str) -> None:
        self._best.setdefault(name, None)

    def add_other(self, name: str) -> None:
        self._other.setdefault(name, None)

    def extend_other(self, names: Iterable[str]) -> None:
        for name in names:
            self.add_other(name)

    @property
    def best(self) -> List[str]:
        return list(self._best)

    @property
    def other(self) -> List[str]:
        return list(self._other)

    def ordered(self) -> List[str]:
        """Best candidates then other candidates; a name present in both keeps its best position."""
        merged = dict(self._best)
        for name in self._other:
            merged.setdefault(name, None)
        return list(merged)

    def is_empty(self) -> bool:
        return not self._best and not self._other

    def __len__(self) -> int:
        return len(self.ordered())

    def __repr__(self) -> str:
        return f"{self.best}|{self.other}"
