"""Configuration management using Pydantic Settings"""

import logging
from decimal import Decimal
from typing import Dict, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def default_exchange_rates() -> Dict[str, Decimal]:
    """Static rate table; reverse pairs are listed explicitly"""
    return {
        "USD_RUB": Decimal("90.0"),
        "EUR_RUB": Decimal("98.5"),
        "EUR_USD": Decimal("1.09"),
        "RUB_USD": Decimal(1) / Decimal("90.0"),
        "RUB_EUR": Decimal(1) / Decimal("98.5"),
        "USD_EUR": Decimal(1) / Decimal("1.09"),
    }


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(
        env_prefix="FINCALC_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Service
    service_name: str = "finance-calculator"
    log_level: str = "WARNING"

    # Prometheus exporter, disabled when unset
    metrics_port: Optional[int] = None

    # Currency conversion, keyed "SRC_DST"
    exchange_rates: Dict[str, Decimal] = Field(default_factory=default_exchange_rates)

    @field_validator("log_level")
    @classmethod
    def _known_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {value}")
        return level

    @field_validator("exchange_rates")
    @classmethod
    def _positive_rates(cls, value: Dict[str, Decimal]) -> Dict[str, Decimal]:
        for pair, rate in value.items():
            if rate <= 0:
                raise ValueError(f"Exchange rate for {pair} must be positive")
        return value


settings = Settings()
