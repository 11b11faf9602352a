"""Deposit engine - simple and monthly compounded interest"""

from decimal import Decimal
from typing import Optional

from finance_calculator.domain.capabilities import CalculationLogger, isolate
from finance_calculator.domain.models import CapitalizationMode, DepositRequest, DepositResult
from finance_calculator.domain.rounding import from_float, round_currency
from finance_calculator.domain.validation import Number

OPERATION_NAME = "Deposit calculation"
SUCCESS_MESSAGE = "Calculation completed successfully"


def simple_income(request: DepositRequest) -> Decimal:
    """amount * rate * months / 12 / 100, no compounding"""
    return request.amount * request.annual_rate_percent * request.term_months / 12 / 100


def compound_income(request: DepositRequest) -> Decimal:
    """Income with interest capitalized every month"""
    monthly_rate = float(request.annual_rate_percent) / 100 / 12
    growth = from_float((1 + monthly_rate) ** request.term_months)
    return request.amount * growth - request.amount


def compute_deposit(
    amount: Number,
    term_months: int,
    annual_rate_percent: Number,
    mode: "CapitalizationMode | str",
    logger: Optional[CalculationLogger] = None,
) -> DepositResult:
    """
    Validate deposit inputs and compute income and final balance.

    Intermediate values stay unrounded; only the reported income and total
    are rounded to cents.

    Raises:
        ValidationError: amount, term, rate or mode invalid (checked in that order)
    """
    request = DepositRequest.create(amount, term_months, annual_rate_percent, mode)
    calculation_logger = isolate(logger)

    calculation_logger.log_calculation(OPERATION_NAME, request.amount)

    if request.mode is CapitalizationMode.SIMPLE:
        raw_income = simple_income(request)
    else:
        raw_income = compound_income(request)

    income = round_currency(raw_income)
    result = DepositResult(
        income=income,
        total_amount=round_currency(request.amount + income),
    )

    calculation_logger.log_success(SUCCESS_MESSAGE)
    return result


class DepositEngine:
    """Deposit calculator bound to an optional calculation logger"""

    def __init__(self, logger: Optional[CalculationLogger] = None):
        self.logger = isolate(logger)

    def compute_deposit(
        self,
        amount: Number,
        term_months: int,
        annual_rate_percent: Number,
        mode: "CapitalizationMode | str",
    ) -> DepositResult:
        return compute_deposit(amount, term_months, annual_rate_percent, mode, logger=self.logger)
