"""Annuity loan engine - monthly payment, total and overpayment"""

import math
from typing import Optional

from finance_calculator.domain.capabilities import CalculationLogger, isolate
from finance_calculator.domain.models import LoanRequest, LoanResult
from finance_calculator.domain.rounding import round_currency, to_currency
from finance_calculator.domain.validation import Number

OPERATION_NAME = "Loan calculation"
SUCCESS_MESSAGE = "Calculation completed successfully"


def annuity_payment(request: LoanRequest) -> float:
    """
    Raw monthly payment of an annuity loan, in binary floating point.

    Formula:
        m = annual_rate / 100 / 12
        payment = amount * m * (1 + m)^n / ((1 + m)^n - 1)

    (1 + m)^n - 1 is taken as expm1(n * log1p(m)). For rates so small that
    1 + m == 1.0 in floating point it still stays above zero, and the payment
    tends to amount / n. With n = 1 the payment reduces to amount * (1 + m).
    """
    monthly_rate = float(request.annual_rate_percent) / 100 / 12
    accrued = math.expm1(request.term_months * math.log1p(monthly_rate))
    growth = 1 + accrued
    return float(request.amount) * (monthly_rate * growth) / accrued


def compute_loan(
    amount: Number,
    term_months: int,
    annual_rate_percent: Number,
    logger: Optional[CalculationLogger] = None,
) -> LoanResult:
    """
    Validate loan inputs and compute the aggregate repayment figures.

    Rounding:
    - monthly payment: raw float converted once to Decimal, banker's rounding
    - total: monthly payment * term, rounded
    - overpayment: total - amount, rounded after the subtraction

    Raises:
        ValidationError: amount, term or rate out of bounds (checked in that order)
    """
    request = LoanRequest.create(amount, term_months, annual_rate_percent)
    calculation_logger = isolate(logger)

    calculation_logger.log_calculation(OPERATION_NAME, request.amount)

    monthly_payment = to_currency(annuity_payment(request))
    total_amount = monthly_payment * request.term_months
    overpayment = total_amount - request.amount

    result = LoanResult(
        monthly_payment=monthly_payment,
        overpayment=round_currency(overpayment),
        total_amount=round_currency(total_amount),
    )

    calculation_logger.log_success(SUCCESS_MESSAGE)
    return result


class CreditEngine:
    """Loan calculator bound to an optional calculation logger"""

    def __init__(self, logger: Optional[CalculationLogger] = None):
        self.logger = isolate(logger)

    def compute_loan(self, amount: Number, term_months: int, annual_rate_percent: Number) -> LoanResult:
        return compute_loan(amount, term_months, annual_rate_percent, logger=self.logger)
