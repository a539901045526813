"""Core package for the freight transport scenario calculator.

This package contains the deterministic models (modal allocation, cost,
CO₂ emissions), the illustrative route synthesizer, the scenario
calculator that composes them, and the insights generator that
compares two computed scenarios.  The Streamlit dashboard in ``app.py``
and ``pages/`` is a thin layer over :class:`ScenarioService` and
:class:`ScenarioStore`.
"""

from .params import ScenarioInput, ScenarioResult, FreightFactors, RouteParams, ServiceSettings
from .validation import ValidationError, validate_scenario_input
from .calculator import calculate_scenario
from .insights import ComputationDegenerate, Insight, generate_insights
from .store import DuplicateScenarioError, ScenarioStore
from .service import ScenarioService

__all__ = [
    "ScenarioInput",
    "ScenarioResult",
    "FreightFactors",
    "RouteParams",
    "ServiceSettings",
    "ValidationError",
    "validate_scenario_input",
    "calculate_scenario",
    "ComputationDegenerate",
    "Insight",
    "generate_insights",
    "DuplicateScenarioError",
    "ScenarioStore",
    "ScenarioService",
]
