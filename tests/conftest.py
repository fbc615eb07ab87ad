import logging

import pytest
from rest_framework.test import APIClient

from fuel_calculator.calculator import FuelCalculator

AUDIT_CHANNEL = "fuel_calculator"


@pytest.fixture
def calculator():
    return FuelCalculator()


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def calculator_defaults(settings):
    settings.FUEL_CALCULATOR = {
        "DEFAULT_DISTANCE": 100.0,
        "DEFAULT_CONSUMPTION": 6.5,
        "DEFAULT_PRICE_PER_LITER": 1.75,
        "CURRENCY": "EUR",
        "LOG_CHANNEL": AUDIT_CHANNEL,
    }
    return settings.FUEL_CALCULATOR


@pytest.fixture
def audit_records(caplog):
    """Messages written to the audit channel during the test."""
    caplog.set_level(logging.INFO, logger=AUDIT_CHANNEL)

    def messages():
        return [r.getMessage() for r in caplog.records if r.name == AUDIT_CHANNEL]

    return messages
