# MIT License
"""Call-style interface used by the dashboard.

:class:`ScenarioService` is created once by the entry point.  It
computes the preloaded examples at construction and hands out the same
immutable snapshot afterwards.
"""
from __future__ import annotations

import logging
import time
from typing import Any, Dict, Mapping, Optional, Tuple

import numpy as np

from .calculator import calculate_scenario
from .params import FreightFactors, RouteParams, ScenarioResult, ServiceSettings
from .presets import PRELOADED_INPUTS
from .route import make_rng
from .validation import validate_scenario_input

logger = logging.getLogger(__name__)


class ScenarioService:
    """Validate-and-calculate facade with cached preloaded scenarios."""

    def __init__(
        self,
        factors: Optional[FreightFactors] = None,
        route_params: Optional[RouteParams] = None,
        settings: Optional[ServiceSettings] = None,
        rng: Optional[np.random.Generator] = None,
    ):
        self.factors = factors or FreightFactors()
        self.route_params = route_params or RouteParams()
        self.settings = settings or ServiceSettings()
        self._rng = rng if rng is not None else make_rng(self.settings.preload_seed)
        self._preloaded: Tuple[ScenarioResult, ...] = tuple(
            calculate_scenario(inp, self.factors, self.route_params, self._rng) for inp in PRELOADED_INPUTS
        )
        logger.info("Scenario service ready with %d preloaded scenarios", len(self._preloaded))

    def _delay(self) -> None:
        if self.settings.simulated_latency_s > 0:
            time.sleep(self.settings.simulated_latency_s)

    def get_preloaded_scenarios(self) -> Tuple[ScenarioResult, ...]:
        self._delay()
        return self._preloaded

    def calculate_scenario(self, raw: Mapping[str, Any]) -> ScenarioResult:
        """Validate ``raw`` and compute its result.

        Raises
        ------
        transport_core.validation.ValidationError
            If a required field is missing or out of range.
        """
        self._delay()
        inp = validate_scenario_input(raw)
        return calculate_scenario(inp, self.factors, self.route_params, self._rng)

    def health_check(self) -> Dict[str, str]:
        return {"status": "OK", "message": "Transport Calculator Data Service is running"}
