# MIT License
"""Data models for the freight scenario calculator.

All data models are defined using [`pydantic.BaseModel`](https://docs.pydantic.dev/)
to provide type checking, validation and JSON serialisation.  Field names
are snake_case in Python; the JSON representation uses the camelCase
names the web form sends (``transportMode``, ``trainFrequency`` ...), and
either spelling is accepted on input.

:class:`ScenarioInput` is what the user submits, :class:`ScenarioResult`
is what the calculator derives from it.  The remaining models hold the
constants of the cost, emissions and route models so they can be tuned
without touching the calculation code.
"""
from __future__ import annotations

import os
from typing import Literal, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

TransportMode = Literal["rail_diesel", "rail_electric", "truck"]
TRANSPORT_MODES: Tuple[str, ...] = ("rail_diesel", "rail_electric", "truck")

# (latitude, longitude)
GeoPoint = Tuple[float, float]

# upper bounds keep every intermediate cost and CO2 product finite
MAX_TONNAGE = 1e12
MAX_TRAINS_PER_WEEK = 1e6
MAX_DISTANCE_KM = 1e6


class _CamelModel(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class ScenarioInput(_CamelModel):
    """One user supplied transport configuration.

    Attributes
    ----------
    name:
        Identifying label; acts as the key in the scenario store.
    tonnage:
        Annual demand to move (t/year).
    transport_mode:
        ``rail_diesel``, ``rail_electric`` or ``truck``.
    train_frequency:
        Trains per week.
    distance_to_terminal:
        Road/rail distance from the mill to the loading terminal (km).
    distance_to_customer:
        Distance from the terminal to the customer (km).
    """

    name: str = Field(..., min_length=1)
    tonnage: float = Field(..., gt=0, le=MAX_TONNAGE, description="Annual tonnage (t/year)")
    transport_mode: TransportMode = Field(..., description="Transport mode")
    train_frequency: float = Field(..., ge=0, le=MAX_TRAINS_PER_WEEK, description="Trains per week")
    distance_to_terminal: float = Field(..., ge=0, le=MAX_DISTANCE_KM, description="Distance to terminal (km)")
    distance_to_customer: float = Field(..., ge=0, le=MAX_DISTANCE_KM, description="Distance to customer (km)")
    description: Optional[str] = Field(None, description="Free text shown next to presets")

    @field_validator("name")
    @classmethod
    def _name_not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("name must not be blank")
        return v


class ScenarioResult(_CamelModel):
    """Derived metrics of one scenario.

    Produced once per :class:`ScenarioInput` by
    :func:`transport_core.calculator.calculate_scenario` and never
    modified afterwards.
    """

    name: str
    rail_capacity_tons: int = Field(..., ge=0)
    truck_volume_tons: int = Field(..., ge=0)
    total_cost_msek: float = Field(..., ge=0)
    co2_rail_tons: int = Field(..., ge=0)
    co2_truck_tons: int = Field(..., ge=0)
    co2_total_tons: int = Field(..., ge=0)
    route: Tuple[GeoPoint, ...] = Field(..., min_length=2, max_length=3)
    notes: Tuple[str, ...] = ()
    # echoed input
    transport_mode: TransportMode
    train_frequency: float
    distance_to_terminal: float
    distance_to_customer: float
    tonnage: float
    description: Optional[str] = None


class FreightFactors(BaseModel):
    """Rates and emission factors of the allocation, cost and CO₂ models.

    Defaults come from the Hissmofors terminal case study.  Costs are in
    SEK, fuel use in litres per Swedish mil (10 km).
    """

    tons_per_train: float = Field(1500.0, gt=0, description="Payload of one train (t)")
    weeks_per_year: int = Field(52, ge=1, le=53, description="Operating weeks per year")
    rail_cost_electric_per_ton: float = Field(115.0, ge=0, description="Electric rail cost (SEK/t)")
    rail_cost_diesel_per_ton: float = Field(120.0, ge=0, description="Diesel rail cost (SEK/t), also used for non-electric modes")
    truck_cost_per_ton_km: float = Field(8.0, ge=0, description="Truck cost (SEK/t/km)")
    diesel_train_l_per_10km: float = Field(45.0, ge=0, description="Diesel train fuel use (l/10 km)")
    truck_l_per_10km: float = Field(5.0, ge=0, description="Truck fuel use (l/10 km)")
    diesel_kg_co2e_per_l: float = Field(3.0, ge=0, description="Well-to-wheel diesel factor (kg CO₂e/l)")
    truck_mode_rail_policy: Literal["charge", "exclude"] = Field(
        "charge",
        description=(
            "How train frequency is treated when the mode is 'truck': 'charge' keeps "
            "the rail capacity and its cost, 'exclude' forces rail capacity to zero."
        ),
    )


class RouteParams(BaseModel):
    """Fixed anchor points of the illustrative route drawn on the map."""

    origin: GeoPoint = Field((63.2, 14.8), description="Hissmofors mill (lat, lon)")
    destination: GeoPoint = Field((63.2, 14.6), description="Östersund (lat, lon)")
    terminal_jitter_deg: float = Field(0.1, ge=0, description="Full width of the terminal jitter window (deg)")
    customer_jitter_deg: float = Field(0.2, ge=0, description="Full width of the customer jitter window (deg)")


class ServiceSettings(BaseModel):
    """Runtime settings of :class:`transport_core.service.ScenarioService`."""

    simulated_latency_s: float = Field(0.0, ge=0, le=10, description="Artificial delay per call (s)")
    preload_seed: Optional[int] = Field(None, description="Seed for the preloaded scenario routes")

    @classmethod
    def from_env(cls) -> "ServiceSettings":
        """Build settings from ``FREIGHT_SIM_LATENCY_S`` and ``FREIGHT_PRELOAD_SEED``."""
        data = {}
        latency = os.environ.get("FREIGHT_SIM_LATENCY_S")
        if latency:
            data["simulated_latency_s"] = latency
        seed = os.environ.get("FREIGHT_PRELOAD_SEED")
        if seed:
            data["preload_seed"] = seed
        return cls.model_validate(data)
