# MIT License
"""Modal split and cost model.

Rail capacity follows from the train frequency alone; trucks carry the
residual demand that rail cannot cover.  Each leg is priced with a flat
rate and the total is reported in MSEK/year.
"""

from __future__ import annotations

import logging
from typing import NamedTuple

from .params import FreightFactors, ScenarioInput
from .utils import round_half_up, sek_to_msek

logger = logging.getLogger(__name__)


class Allocation(NamedTuple):
    """Unrounded modal split of one scenario and its cost."""

    rail_capacity_tons: float
    truck_volume_tons: float
    rail_rate_per_ton: float
    total_cost_msek: float


def rail_capacity_tons(inp: ScenarioInput, factors: FreightFactors) -> float:
    """Tons per year the scheduled trains can move.

    This is a capacity ceiling and is deliberately not capped at the
    demanded tonnage.
    """
    if inp.transport_mode == "truck" and factors.truck_mode_rail_policy == "exclude":
        return 0.0
    capacity = inp.train_frequency * factors.tons_per_train * factors.weeks_per_year
    if inp.transport_mode == "truck" and capacity > 0:
        logger.warning(
            "Scenario %r uses truck mode with %s trains/week; rail capacity is still charged",
            inp.name,
            inp.train_frequency,
        )
    return capacity


def truck_volume_tons(tonnage: float, rail_capacity: float) -> float:
    """Residual demand not covered by rail (never negative)."""
    return max(0.0, tonnage - rail_capacity)


def rail_rate_per_ton(mode: str, factors: FreightFactors) -> float:
    """Per-ton rail rate; only electric traction gets the lower rate."""
    if mode == "rail_electric":
        return factors.rail_cost_electric_per_ton
    return factors.rail_cost_diesel_per_ton


def total_cost_msek(
    rail_tons: float,
    truck_tons: float,
    rail_rate: float,
    distance_km: float,
    factors: FreightFactors,
) -> float:
    """Annual transport cost in MSEK, rounded to two decimals.

    Parameters
    ----------
    rail_tons:
        Rail capacity (t/year).
    truck_tons:
        Truck volume (t/year).
    rail_rate:
        Rail cost per ton (SEK/t).
    distance_km:
        Terminal plus customer distance travelled by truck (km).
    factors:
        Model rates.
    """
    rail_cost = rail_tons * rail_rate
    truck_cost = truck_tons * factors.truck_cost_per_ton_km * distance_km / 1000.0
    return round_half_up(sek_to_msek(rail_cost + truck_cost), 2)


def compute_allocation(inp: ScenarioInput, factors: FreightFactors) -> Allocation:
    rail = rail_capacity_tons(inp, factors)
    truck = truck_volume_tons(inp.tonnage, rail)
    rate = rail_rate_per_ton(inp.transport_mode, factors)
    cost = total_cost_msek(rail, truck, rate, inp.distance_to_terminal + inp.distance_to_customer, factors)
    logger.debug("Allocation for %r: rail=%s t truck=%s t cost=%s MSEK", inp.name, rail, truck, cost)
    return Allocation(rail, truck, rate, cost)
