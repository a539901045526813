# MIT License
"""Scenario calculator.

Composes the allocation, emissions and route models into one immutable
:class:`~transport_core.params.ScenarioResult`.  Everything except the
route is a deterministic function of the input.
"""

from __future__ import annotations

import logging
from typing import List, Optional

import numpy as np

from .allocation import Allocation, compute_allocation
from .emissions import compute_emissions
from .params import FreightFactors, RouteParams, ScenarioInput, ScenarioResult
from .route import synthesize_route
from .utils import format_tons, round_int

logger = logging.getLogger(__name__)

ELECTRIC_NOTE = "Electric rail transport with zero CO2 emissions"


def build_notes(inp: ScenarioInput, allocation: Allocation) -> List[str]:
    """Human readable remarks, each condition checked independently."""
    notes = []
    if inp.transport_mode == "rail_electric":
        notes.append(ELECTRIC_NOTE)
    if allocation.truck_volume_tons > 0:
        notes.append(f"{format_tons(allocation.truck_volume_tons)} tons/year transported by truck")
    if allocation.rail_capacity_tons > 0:
        notes.append(f"{format_tons(allocation.rail_capacity_tons)} tons/year transported by rail")
    return notes


def calculate_scenario(
    inp: ScenarioInput,
    factors: Optional[FreightFactors] = None,
    route_params: Optional[RouteParams] = None,
    rng: Optional[np.random.Generator] = None,
) -> ScenarioResult:
    """Compute all derived metrics of a validated scenario.

    Parameters
    ----------
    inp:
        Validated input, see :func:`transport_core.validation.validate_scenario_input`.
    factors:
        Rates and emission factors; defaults to the case study values.
    route_params:
        Map anchors for the route synthesizer.
    rng:
        Random source for route jitter.

    Returns
    -------
    ScenarioResult
        Frozen result record.
    """
    factors = factors or FreightFactors()
    allocation = compute_allocation(inp, factors)
    emissions = compute_emissions(inp, allocation, factors)
    route = synthesize_route(inp, route_params, rng)
    result = ScenarioResult(
        name=inp.name,
        rail_capacity_tons=round_int(allocation.rail_capacity_tons),
        truck_volume_tons=round_int(allocation.truck_volume_tons),
        total_cost_msek=allocation.total_cost_msek,
        co2_rail_tons=emissions.co2_rail_tons,
        co2_truck_tons=emissions.co2_truck_tons,
        co2_total_tons=emissions.co2_total_tons,
        route=route,
        notes=tuple(build_notes(inp, allocation)),
        transport_mode=inp.transport_mode,
        train_frequency=inp.train_frequency,
        distance_to_terminal=inp.distance_to_terminal,
        distance_to_customer=inp.distance_to_customer,
        tonnage=inp.tonnage,
        description=inp.description,
    )
    logger.info(
        "Calculated scenario %r: %s MSEK, %s t CO2e",
        result.name,
        result.total_cost_msek,
        result.co2_total_tons,
    )
    return result
