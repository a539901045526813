"""Shared pytest fixtures for the freight scenario tests."""
import pytest

from transport_core.params import ScenarioInput
from transport_core.presets import CURRENT_TERMINAL, UPGRADED_TERMINAL
from transport_core.route import make_rng


@pytest.fixture
def rng():
    return make_rng(1234)


@pytest.fixture
def diesel_input() -> ScenarioInput:
    return CURRENT_TERMINAL


@pytest.fixture
def electric_input() -> ScenarioInput:
    return UPGRADED_TERMINAL


@pytest.fixture
def raw_form():
    """A complete payload as posted by the builder form."""
    return {
        "name": "Test scenario",
        "tonnage": 720000,
        "transportMode": "rail_diesel",
        "trainFrequency": 2.5,
        "distanceToTerminal": 80,
        "distanceToCustomer": 120,
    }
