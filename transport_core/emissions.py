# MIT License
"""CO₂ model for the rail and truck legs.

Fuel use is given in litres per 10 km and converted to CO₂e with a
single diesel factor.  Electric rail is treated as fossil free, and in
pure truck mode no rail leg is emitted.
"""

from __future__ import annotations

import logging
from typing import NamedTuple

from .allocation import Allocation
from .params import FreightFactors, ScenarioInput
from .utils import kg_to_tonnes, round_int

logger = logging.getLogger(__name__)


class Emissions(NamedTuple):
    """Rounded emissions (t CO₂e/year); each figure is rounded on its own."""

    co2_rail_tons: int
    co2_truck_tons: int
    co2_total_tons: int


def rail_co2_tonnes(inp: ScenarioInput, rail_tons: float, factors: FreightFactors) -> float:
    """Unrounded rail emissions; only diesel traction emits."""
    if inp.transport_mode != "rail_diesel":
        return 0.0
    litres = rail_tons * (inp.distance_to_terminal / 10.0) * factors.diesel_train_l_per_10km
    return kg_to_tonnes(litres * factors.diesel_kg_co2e_per_l)


def truck_co2_tonnes(inp: ScenarioInput, truck_tons: float, factors: FreightFactors) -> float:
    """Unrounded truck emissions over both road legs, whatever the mode."""
    distance = inp.distance_to_terminal + inp.distance_to_customer
    litres = truck_tons * distance / 10.0 * factors.truck_l_per_10km
    return kg_to_tonnes(litres * factors.diesel_kg_co2e_per_l)


def compute_emissions(inp: ScenarioInput, allocation: Allocation, factors: FreightFactors) -> Emissions:
    rail = rail_co2_tonnes(inp, allocation.rail_capacity_tons, factors)
    truck = truck_co2_tonnes(inp, allocation.truck_volume_tons, factors)
    logger.debug("Emissions for %r: rail=%s t truck=%s t", inp.name, rail, truck)
    # the total is rounded from the unrounded sum, so it may differ by 1 t
    # from co2_rail_tons + co2_truck_tons
    return Emissions(round_int(rail), round_int(truck), round_int(rail + truck))
