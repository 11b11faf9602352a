"""Currency conversion against an externally supplied rate"""

from typing import Optional

from finance_calculator.domain.capabilities import CalculationLogger, RateProvider, isolate
from finance_calculator.domain.exceptions import ConversionUnavailable
from finance_calculator.domain.models import ConversionRequest
from finance_calculator.domain.rounding import round_currency
from finance_calculator.domain.validation import Number, to_decimal

OPERATION_NAME = "Currency conversion"
SUCCESS_MESSAGE = "Conversion completed successfully"


def convert(
    amount: Number,
    source_currency: str,
    target_currency: str,
    rate_provider: RateProvider,
    logger: Optional[CalculationLogger] = None,
) -> Number:
    """
    Convert amount from source to target currency.

    Same-currency conversion returns the amount untouched, without querying
    the provider or rounding. Otherwise the provider is asked exactly once
    and amount * rate is rounded to cents with banker's rounding. Rates are
    never cached or inverted here.

    Raises:
        ValidationError: amount <= 0
        ConversionUnavailable: provider has no rate for the pair
    """
    request = ConversionRequest.create(amount, source_currency, target_currency)
    if request.is_identity:
        return amount

    calculation_logger = isolate(logger)
    calculation_logger.log_calculation(OPERATION_NAME, request.amount)

    try:
        rate = rate_provider.get_rate(request.source_currency, request.target_currency)
        if rate is None:
            raise ConversionUnavailable(request.source_currency, request.target_currency)
    except ConversionUnavailable as e:
        calculation_logger.log_error(str(e))
        raise

    result = round_currency(request.amount * to_decimal(rate, "rate", "Exchange rate"))

    calculation_logger.log_success(SUCCESS_MESSAGE)
    return result


class CurrencyConverter:
    """Converter bound to a rate provider and an optional calculation logger"""

    def __init__(self, rate_provider: RateProvider, logger: Optional[CalculationLogger] = None):
        self.rate_provider = rate_provider
        self.logger = isolate(logger)

    def convert(self, amount: Number, source_currency: str, target_currency: str) -> Number:
        return convert(amount, source_currency, target_currency, self.rate_provider, logger=self.logger)
