# MIT License
"""In-memory collection of computed scenarios, keyed by name."""
from __future__ import annotations

from typing import Dict, Iterable, Iterator, List, Optional

from .insights import Insight, generate_insights
from .params import ScenarioResult


class DuplicateScenarioError(ValueError):
    """A scenario with the same name is already stored."""


class ScenarioStore:
    """Ordered scenario results; iteration follows insertion order.

    The first two entries are the baseline and comparison used by
    :meth:`insights`.
    """

    def __init__(self, results: Iterable[ScenarioResult] = ()):
        self._results: Dict[str, ScenarioResult] = {}
        for r in results:
            self.append(r)

    def append(self, result: ScenarioResult) -> None:
        if result.name in self._results:
            raise DuplicateScenarioError(f"Scenario {result.name!r} already exists")
        self._results[result.name] = result

    def remove_by_name(self, name: str) -> None:
        """Drop a scenario; unknown names are ignored."""
        self._results.pop(name, None)

    def load(self, results: Iterable[ScenarioResult]) -> None:
        """Replace the contents, e.g. with the preloaded examples."""
        self._results = {}
        for r in results:
            self.append(r)

    def get(self, name: str) -> Optional[ScenarioResult]:
        return self._results.get(name)

    def names(self) -> List[str]:
        return list(self._results)

    def insights(self) -> Optional[Insight]:
        return generate_insights(list(self))

    def __iter__(self) -> Iterator[ScenarioResult]:
        return iter(list(self._results.values()))

    def __len__(self) -> int:
        return len(self._results)

    def __contains__(self, name: object) -> bool:
        return name in self._results
