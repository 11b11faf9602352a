"""Domain models - immutable dataclasses for calculation inputs and outputs"""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Dict

from finance_calculator.domain.exceptions import ValidationError
from finance_calculator.domain.validation import (
    Number,
    to_decimal,
    validate_amount,
    validate_rate,
    validate_term,
)


class CapitalizationMode(str, Enum):
    """How deposit interest accrues"""

    SIMPLE = "simple"  # interest on principal only
    COMPOUND = "compound"  # monthly capitalization

    @classmethod
    def parse(cls, value: "CapitalizationMode | str") -> "CapitalizationMode":
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        raise ValidationError(
            f"Unknown deposit type: {value!r}. Use 'simple' or 'compound'",
            field="mode",
        )


@dataclass(frozen=True)
class LoanRequest:
    """Validated loan parameters"""

    amount: Decimal
    term_months: int
    annual_rate_percent: Decimal

    @classmethod
    def create(cls, amount: Number, term_months: int, annual_rate_percent: Number) -> "LoanRequest":
        """Validate in order amount, term, rate; the first violation wins"""
        return cls(
            amount=validate_amount(amount, "Loan"),
            term_months=validate_term(term_months, "Loan"),
            annual_rate_percent=validate_rate(annual_rate_percent),
        )


@dataclass(frozen=True)
class LoanResult:
    """Aggregate loan figures, each rounded to cents"""

    monthly_payment: Decimal
    overpayment: Decimal
    total_amount: Decimal

    def to_dict(self) -> Dict[str, str]:
        return {
            "monthly_payment": str(self.monthly_payment),
            "overpayment": str(self.overpayment),
            "total_amount": str(self.total_amount),
        }


@dataclass(frozen=True)
class DepositRequest:
    """Validated deposit parameters"""

    amount: Decimal
    term_months: int
    annual_rate_percent: Decimal
    mode: CapitalizationMode

    @classmethod
    def create(
        cls,
        amount: Number,
        term_months: int,
        annual_rate_percent: Number,
        mode: "CapitalizationMode | str",
    ) -> "DepositRequest":
        """Validate in order amount, term, rate, mode"""
        return cls(
            amount=validate_amount(amount, "Deposit"),
            term_months=validate_term(term_months, "Deposit"),
            annual_rate_percent=validate_rate(annual_rate_percent),
            mode=CapitalizationMode.parse(mode),
        )


@dataclass(frozen=True)
class DepositResult:
    """Deposit income and final balance, rounded to cents"""

    income: Decimal
    total_amount: Decimal

    def to_dict(self) -> Dict[str, str]:
        return {
            "income": str(self.income),
            "total_amount": str(self.total_amount),
        }


@dataclass(frozen=True)
class ConversionRequest:
    """Amount to move between two currencies"""

    amount: Decimal
    source_currency: str
    target_currency: str

    @classmethod
    def create(cls, amount: Number, source_currency: str, target_currency: str) -> "ConversionRequest":
        value = to_decimal(amount, "amount", "Amount")
        if value <= 0:
            raise ValidationError("Amount must be a positive number", field="amount")
        return cls(amount=value, source_currency=source_currency, target_currency=target_currency)

    @property
    def is_identity(self) -> bool:
        return self.source_currency == self.target_currency
