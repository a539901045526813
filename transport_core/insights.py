# MIT License
"""Relative comparison of two scenario results.

The first stored scenario is the baseline, the second the comparison.
Percentages relative to a baseline of exactly zero are reported as
``None`` ("not applicable") instead of an infinite ratio.
"""
from __future__ import annotations

import logging
from typing import Optional, Sequence

from pydantic import BaseModel, ConfigDict

from .params import ScenarioResult
from .utils import round_half_up, round_int

logger = logging.getLogger(__name__)


class ComputationDegenerate(ArithmeticError):
    """A relative change was requested against a zero baseline."""


class Insight(BaseModel):
    """Cost and CO₂ deltas of the comparison against the baseline.

    Attributes
    ----------
    cost_difference:
        Comparison minus baseline cost (MSEK/year), 2 decimals.
    co2_difference:
        Comparison minus baseline emissions (t CO₂e/year).
    cost_percentage, co2_percentage:
        Difference relative to the baseline in percent, or None when the
        baseline value is zero.
    better_scenario:
        Name of the comparison if it is cheaper *and* cleaner, otherwise
        the baseline's name.
    """

    model_config = ConfigDict(frozen=True)

    baseline: str
    comparison: str
    cost_difference: float
    co2_difference: int
    cost_percentage: Optional[int]
    co2_percentage: Optional[int]
    better_scenario: str

    @property
    def cost_saving(self) -> bool:
        return self.cost_difference < 0

    @property
    def co2_reduction(self) -> bool:
        return self.co2_difference < 0


def relative_change_pct(difference: float, baseline: float) -> int:
    """Return ``difference / baseline`` in whole percent.

    Raises
    ------
    ComputationDegenerate
        If ``baseline`` is zero.
    """
    if baseline == 0:
        raise ComputationDegenerate("baseline value is zero")
    return round_int(difference / baseline * 100)


def _pct_or_none(difference: float, baseline: float, label: str, baseline_name: str) -> Optional[int]:
    try:
        return relative_change_pct(difference, baseline)
    except ComputationDegenerate:
        logger.warning("%s percentage not applicable: baseline %r has zero %s", label, baseline_name, label)
        return None


def generate_insights(results: Sequence[ScenarioResult]) -> Optional[Insight]:
    """Compare the first two results; None when fewer than two exist."""
    if len(results) < 2:
        return None
    baseline, comparison = results[0], results[1]

    cost_difference = comparison.total_cost_msek - baseline.total_cost_msek
    co2_difference = comparison.co2_total_tons - baseline.co2_total_tons
    better = comparison.name if cost_difference < 0 and co2_difference < 0 else baseline.name

    return Insight(
        baseline=baseline.name,
        comparison=comparison.name,
        cost_difference=round_half_up(cost_difference, 2),
        co2_difference=round_int(co2_difference),
        cost_percentage=_pct_or_none(cost_difference, baseline.total_cost_msek, "cost", baseline.name),
        co2_percentage=_pct_or_none(co2_difference, baseline.co2_total_tons, "CO2", baseline.name),
        better_scenario=better,
    )
