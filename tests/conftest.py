"""Pytest fixtures for testing"""

import logging
from decimal import Decimal
from typing import Generator
from unittest.mock import Mock

import pytest
from typer.testing import CliRunner

from finance_calculator.domain.capabilities import CalculationLogger, RateProvider
from finance_calculator.infrastructure.observability.logging import CustomJsonFormatter
from finance_calculator.infrastructure.rates import StaticRateProvider


@pytest.fixture(autouse=True)
def reset_json_logging() -> Generator[None, None, None]:
    """Drop handlers installed by setup_logging() and restore the root level"""
    root = logging.getLogger()
    level = root.level
    try:
        yield
    finally:
        for handler in root.handlers[:]:
            if isinstance(handler.formatter, CustomJsonFormatter):
                root.removeHandler(handler)
        root.setLevel(level)


@pytest.fixture
def calculation_logger() -> Mock:
    """Mock logger capability recording every notification"""
    return Mock(spec=CalculationLogger)


@pytest.fixture
def rate_provider() -> Mock:
    """Mock rate provider quoting USD->RUB at 90"""
    provider = Mock(spec=RateProvider)
    provider.get_rate.return_value = Decimal("90.0")
    return provider


@pytest.fixture
def static_rates() -> StaticRateProvider:
    """Rate table with the default RUB/USD/EUR pairs"""
    return StaticRateProvider()


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()
