"""Collaborator interfaces the engines call into"""

import logging
from decimal import Decimal
from typing import Optional, Protocol, runtime_checkable

logger = logging.getLogger(__name__)


@runtime_checkable
class CalculationLogger(Protocol):
    """Observer notified when a calculation starts, succeeds or fails"""

    def log_calculation(self, operation: str, input_amount: Decimal) -> None: ...

    def log_success(self, message: str) -> None: ...

    def log_error(self, message: str) -> None: ...


@runtime_checkable
class RateProvider(Protocol):
    """Source of exchange rates; returns None for an unknown pair"""

    def get_rate(self, source: str, target: str) -> Optional[Decimal]: ...


class NullCalculationLogger:
    """Default logger when none is injected"""

    def log_calculation(self, operation: str, input_amount: Decimal) -> None:
        pass

    def log_success(self, message: str) -> None:
        pass

    def log_error(self, message: str) -> None:
        pass


class IsolatedCalculationLogger:
    """
    Wraps a CalculationLogger so that its failures never reach the caller.

    Exceptions raised by the wrapped logger are reported through the standard
    logging module with traceback and then dropped.
    """

    def __init__(self, inner: Optional[CalculationLogger] = None):
        self.inner = inner if inner is not None else NullCalculationLogger()

    def log_calculation(self, operation: str, input_amount: Decimal) -> None:
        self._notify("log_calculation", operation, input_amount)

    def log_success(self, message: str) -> None:
        self._notify("log_success", message)

    def log_error(self, message: str) -> None:
        self._notify("log_error", message)

    def _notify(self, method: str, *args) -> None:
        try:
            getattr(self.inner, method)(*args)
        except Exception:
            logger.warning(
                "Calculation logger failed",
                exc_info=True,
                extra={"step": "logger_failure", "logger_method": method},
            )


def isolate(calculation_logger: Optional[CalculationLogger]) -> IsolatedCalculationLogger:
    """Wrap a logger once; already isolated loggers are returned as is"""
    if isinstance(calculation_logger, IsolatedCalculationLogger):
        return calculation_logger
    return IsolatedCalculationLogger(calculation_logger)
