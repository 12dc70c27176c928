"""Pytest configuration and shared fixtures."""

import os

import pytest
from hypothesis import Verbosity, settings

# Configure Hypothesis profiles
settings.register_profile("ci", max_examples=200, deadline=None)
settings.register_profile("dev", max_examples=50, deadline=None)
settings.register_profile("debug", max_examples=10, verbosity=Verbosity.verbose)

# Load profile from environment or default to "dev"
profile = os.environ.get("HYPOTHESIS_PROFILE", "dev")
settings.load_profile(profile)


@pytest.fixture
def float_options():
    """Default float-mode options."""
    from radixcalc import EvaluationOptions

    return EvaluationOptions()


@pytest.fixture
def int8_signed():
    """8-bit signed integer mode."""
    from radixcalc import EvaluationOptions

    return EvaluationOptions(mode="int", bit_width=8, signed=True)


@pytest.fixture
def int8_unsigned():
    """8-bit unsigned integer mode."""
    from radixcalc import EvaluationOptions

    return EvaluationOptions(mode="int", bit_width=8, signed=False)


@pytest.fixture
def calculator():
    """Provide a float-mode Calculator."""
    from radixcalc import Calculator

    return Calculator()
