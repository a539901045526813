# MIT License
"""Example scenarios from the Hissmofors terminal case study."""

from __future__ import annotations

from typing import Tuple

from .params import ScenarioInput

CURRENT_TERMINAL = ScenarioInput(
    name="Current Terminal (Diesel, Limited Capacity)",
    tonnage=720_000,
    transport_mode="rail_diesel",
    train_frequency=2.5,
    distance_to_terminal=80,
    distance_to_customer=120,
    description="Current situation with diesel trains and limited capacity",
)

UPGRADED_TERMINAL = ScenarioInput(
    name="Upgraded Electrified Terminal (High Capacity)",
    tonnage=720_000,
    transport_mode="rail_electric",
    train_frequency=10,
    distance_to_terminal=0,
    distance_to_customer=0,
    description="Future scenario with electrified terminal and full rail capacity",
)

PRELOADED_INPUTS: Tuple[ScenarioInput, ...] = (CURRENT_TERMINAL, UPGRADED_TERMINAL)
