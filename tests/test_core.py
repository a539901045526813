"""Unit tests for core modules.

These tests verify the basic computations of the scenario engine: the
modal allocation and cost model, the emissions model, the route
synthesizer and the calculator that combines them.  The two case study
scenarios serve as reference values.
"""

import logging
import math

import pytest

from transport_core.allocation import compute_allocation, rail_rate_per_ton, total_cost_msek, truck_volume_tons
from transport_core.calculator import ELECTRIC_NOTE, calculate_scenario
from transport_core.emissions import compute_emissions
from transport_core.params import FreightFactors, RouteParams, ScenarioInput
from transport_core.route import make_rng, synthesize_route
from transport_core.utils import format_tons, round_half_up, round_int


def _truck_input(**kw):
    data = dict(
        name="Truck with trains",
        tonnage=100_000,
        transport_mode="truck",
        train_frequency=1,
        distance_to_terminal=10,
        distance_to_customer=20,
    )
    data.update(kw)
    return ScenarioInput(**data)


def test_round_half_up():
    assert round_int(2.5) == 3
    assert round_int(-2.5) == -2
    assert round_int(0.4) == 0
    assert math.isclose(round_half_up(9.36528, 2), 9.37)
    assert format_tons(195000) == "195,000"


def test_allocation_diesel_case(diesel_input):
    alloc = compute_allocation(diesel_input, FreightFactors())
    # 2.5 trains/week * 1500 t * 52 weeks
    assert alloc.rail_capacity_tons == 195_000
    assert alloc.truck_volume_tons == 525_000
    assert alloc.rail_rate_per_ton == 120
    # 195000*120 + 525000*8*200/1000 = 24.24 MSEK
    assert math.isclose(alloc.total_cost_msek, 24.24)


def test_allocation_rail_exceeds_demand(electric_input):
    alloc = compute_allocation(electric_input, FreightFactors())
    assert alloc.rail_capacity_tons == 780_000
    assert alloc.truck_volume_tons == 0
    assert math.isclose(alloc.total_cost_msek, 89.7)


def test_truck_volume_never_negative():
    assert truck_volume_tons(100.0, 250.0) == 0.0
    assert truck_volume_tons(300.0, 250.0) == 50.0


def test_rail_rate_by_mode():
    f = FreightFactors()
    assert rail_rate_per_ton("rail_electric", f) == 115
    assert rail_rate_per_ton("rail_diesel", f) == 120
    assert rail_rate_per_ton("truck", f) == 120


def test_total_cost_zero_when_nothing_moves():
    assert total_cost_msek(0.0, 0.0, 120.0, 200.0, FreightFactors()) == 0.0


def test_truck_mode_charges_rail_by_default():
    alloc = compute_allocation(_truck_input(), FreightFactors())
    assert alloc.rail_capacity_tons == 78_000
    assert alloc.truck_volume_tons == 22_000
    # 78000*120 + 22000*8*30/1000 = 9 365 280 SEK
    assert math.isclose(alloc.total_cost_msek, 9.37)
    em = compute_emissions(_truck_input(), alloc, FreightFactors())
    assert em.co2_rail_tons == 0
    assert em.co2_truck_tons == 990


def test_truck_mode_exclude_policy():
    f = FreightFactors(truck_mode_rail_policy="exclude")
    alloc = compute_allocation(_truck_input(), f)
    assert alloc.rail_capacity_tons == 0
    assert alloc.truck_volume_tons == 100_000
    assert math.isclose(alloc.total_cost_msek, 0.02)
    em = compute_emissions(_truck_input(), alloc, f)
    assert em.co2_total_tons == 4500


def test_emissions_diesel_case(diesel_input):
    f = FreightFactors()
    em = compute_emissions(diesel_input, compute_allocation(diesel_input, f), f)
    # rail: 195000 * 8 * 45 * 3 / 1000
    assert em.co2_rail_tons == 210_600
    # truck: 525000 * 20 * 5 * 3 / 1000
    assert em.co2_truck_tons == 157_500
    assert em.co2_total_tons == 368_100


def test_emissions_electric_rail_is_zero(electric_input):
    f = FreightFactors()
    inp = electric_input.model_copy(update={"distance_to_terminal": 50.0})
    em = compute_emissions(inp, compute_allocation(inp, f), f)
    assert em.co2_rail_tons == 0


def test_route_without_legs_is_fixed(electric_input):
    route = synthesize_route(electric_input, RouteParams(), make_rng(0))
    assert route == ((63.2, 14.8), (63.2, 14.6))


def test_route_with_both_legs_stays_in_window(diesel_input):
    for seed in range(20):
        route = synthesize_route(diesel_input, RouteParams(), make_rng(seed))
        assert len(route) == 3
        assert route[0] == (63.2, 14.8)
        assert abs(route[1][0] - 63.2) <= 0.05 and abs(route[1][1] - 14.8) <= 0.05
        assert abs(route[2][0] - 63.2) <= 0.1 and abs(route[2][1] - 14.6) <= 0.1


def test_route_seed_is_reproducible(diesel_input):
    a = synthesize_route(diesel_input, rng=make_rng(42))
    b = synthesize_route(diesel_input, rng=make_rng(42))
    assert a == b


def test_route_terminal_only(diesel_input):
    inp = diesel_input.model_copy(update={"distance_to_customer": 0.0})
    route = synthesize_route(inp, rng=make_rng(3))
    assert len(route) == 3
    assert route[-1] == (63.2, 14.6)


def test_calculate_diesel_case(diesel_input, rng):
    res = calculate_scenario(diesel_input, rng=rng)
    assert res.name == diesel_input.name
    assert res.rail_capacity_tons == 195_000
    assert res.truck_volume_tons == 525_000
    assert math.isclose(res.total_cost_msek, 24.24)
    assert res.co2_total_tons == 368_100
    assert res.notes == (
        "525,000 tons/year transported by truck",
        "195,000 tons/year transported by rail",
    )
    assert res.tonnage == 720_000
    assert res.transport_mode == "rail_diesel"


def test_calculate_electric_case(electric_input, rng):
    res = calculate_scenario(electric_input, rng=rng)
    assert res.rail_capacity_tons == 780_000
    assert res.truck_volume_tons == 0
    assert res.co2_rail_tons == 0
    assert res.co2_total_tons == 0
    assert res.notes == (ELECTRIC_NOTE, "780,000 tons/year transported by rail")
    assert len(res.route) == 2


def test_calculate_is_idempotent_except_route(diesel_input):
    a = calculate_scenario(diesel_input, rng=make_rng(1))
    b = calculate_scenario(diesel_input, rng=make_rng(2))
    fields = ["rail_capacity_tons", "truck_volume_tons", "total_cost_msek", "co2_rail_tons", "co2_truck_tons", "co2_total_tons", "notes"]
    assert a.model_dump(include=set(fields)) == b.model_dump(include=set(fields))


def test_result_is_frozen(diesel_input, rng):
    res = calculate_scenario(diesel_input, rng=rng)
    with pytest.raises(Exception):
        res.total_cost_msek = 0.0


def test_truck_mode_rail_charge_is_logged(caplog):
    with caplog.at_level(logging.WARNING, logger="transport_core.allocation"):
        compute_allocation(_truck_input(), FreightFactors())
    assert any("rail capacity is still charged" in r.getMessage() for r in caplog.records)


def test_truck_mode_exclude_is_not_logged(caplog):
    with caplog.at_level(logging.WARNING, logger="transport_core.allocation"):
        compute_allocation(_truck_input(), FreightFactors(truck_mode_rail_policy="exclude"))
        compute_allocation(_truck_input(train_frequency=0), FreightFactors())
    assert not caplog.records


def test_format_tons_keeps_decimals():
    assert format_tons(1000.5) == "1,000.5"
    assert format_tons(1234.56789) == "1,234.568"
    assert format_tons(0) == "0"
    assert math.isinf(round_half_up(math.inf))


def test_fractional_residual_note(rng):
    inp = ScenarioInput(
        name="Fractional",
        tonnage=1000.5,
        transport_mode="rail_diesel",
        train_frequency=0,
        distance_to_terminal=10,
        distance_to_customer=10,
    )
    res = calculate_scenario(inp, rng=rng)
    assert res.notes == ("1,000.5 tons/year transported by truck",)
    assert res.truck_volume_tons == 1001
