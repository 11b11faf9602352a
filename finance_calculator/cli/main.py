"""Console entry point - interactive menu and one-shot subcommands"""

import json
import logging
from contextlib import contextmanager
from dataclasses import dataclass
from decimal import Decimal
from typing import Callable, Dict, Iterator

import typer

from finance_calculator.cli.parsing import MalformedInputError, parse_decimal, parse_int
from finance_calculator.config import settings
from finance_calculator.domain.credit import CreditEngine
from finance_calculator.domain.currency import CurrencyConverter
from finance_calculator.domain.deposit import DepositEngine
from finance_calculator.domain.exceptions import ConversionUnavailable, ValidationError
from finance_calculator.domain.models import CapitalizationMode, DepositResult, LoanResult
from finance_calculator.domain.validation import validate_currency
from finance_calculator.infrastructure.observability.logging import (
    StructuredCalculationLogger,
    setup_logging,
)
from finance_calculator.infrastructure.observability.metrics import (
    calculation_duration_histogram,
    record_calculation,
    start_metrics_server,
)
from finance_calculator.infrastructure.rates import StaticRateProvider

logger = logging.getLogger(__name__)

app = typer.Typer(add_completion=False, help="Finance calculator: loans, deposits and currency conversion")

MENU = "\n".join(
    [
        "=================================",
        "        FINANCE CALCULATOR       ",
        "=================================",
        "1. Loan calculation",
        "2. Currency converter",
        "3. Deposit calculator",
        "4. Exit",
        "=================================",
    ]
)
INVALID_CHOICE_MESSAGE = "Invalid choice. Please select 1-4."
INVALID_INPUT_MESSAGE = "Error: invalid input. Please enter a number."

DEPOSIT_TYPES: Dict[str, CapitalizationMode] = {
    "1": CapitalizationMode.SIMPLE,
    "2": CapitalizationMode.COMPOUND,
}

EXIT_DOMAIN_ERROR = 1
EXIT_MALFORMED_INPUT = 2


@dataclass
class Calculators:
    """Engines wired with the console's collaborators"""

    credit: CreditEngine
    deposit: DepositEngine
    converter: CurrencyConverter
    rates: StaticRateProvider


def build_calculators() -> Calculators:
    calculation_logger = StructuredCalculationLogger()
    rates = StaticRateProvider(settings.exchange_rates)
    return Calculators(
        credit=CreditEngine(calculation_logger),
        deposit=DepositEngine(calculation_logger),
        converter=CurrencyConverter(rates, calculation_logger),
        rates=rates,
    )


@contextmanager
def tracked(operation: str) -> Iterator[None]:
    """Time a calculation and count its outcome"""
    with calculation_duration_histogram.labels(operation=operation).time():
        try:
            yield
        except ValidationError:
            record_calculation(operation, "validation_error")
            raise
        except ConversionUnavailable:
            record_calculation(operation, "unavailable")
            raise
    record_calculation(operation, "success")


# -----------------------------------------------------------------------------
# Output
# -----------------------------------------------------------------------------


def echo_loan(result: LoanResult) -> None:
    typer.echo("\n=== LOAN RESULTS ===")
    typer.echo(f"Monthly payment: {result.monthly_payment:.2f}")
    typer.echo(f"Total payments: {result.total_amount:.2f}")
    typer.echo(f"Overpayment: {result.overpayment:.2f}")


def echo_deposit(result: DepositResult) -> None:
    typer.echo("\n=== DEPOSIT RESULTS ===")
    typer.echo(f"Deposit income: {result.income:.2f}")
    typer.echo(f"Total amount: {result.total_amount:.2f}")


def echo_conversion(amount: Decimal, source: str, converted: Decimal, target: str) -> None:
    typer.echo("\n=== CONVERSION RESULT ===")
    typer.echo(f"{amount:.2f} {source} = {converted:.2f} {target}")


def echo_error(message: str) -> None:
    typer.secho(message, fg=typer.colors.RED)


# -----------------------------------------------------------------------------
# Interactive dialogs
# -----------------------------------------------------------------------------


def loan_dialog(calculators: Calculators) -> None:
    typer.echo("=== LOAN CALCULATION ===")
    amount = parse_decimal(typer.prompt("Loan amount"))
    term = parse_int(typer.prompt("Loan term (months)"))
    rate = parse_decimal(typer.prompt("Interest rate (% per year)"))

    with tracked("loan"):
        result = calculators.credit.compute_loan(amount, term, rate)
    echo_loan(result)


def currency_dialog(calculators: Calculators) -> None:
    typer.echo("=== CURRENCY CONVERTER ===")
    codes = sorted(calculators.rates.currencies)
    typer.echo(f"Available currencies: {', '.join(codes)}")
    source = typer.prompt("Source currency")
    target = typer.prompt("Target currency")
    amount = parse_decimal(typer.prompt("Amount to convert"))

    with tracked("convert"):
        source = validate_currency(source, codes)
        target = validate_currency(target, codes)
        converted = calculators.converter.convert(amount, source, target)
    echo_conversion(amount, source, converted, target)


def deposit_dialog(calculators: Calculators) -> None:
    typer.echo("=== DEPOSIT CALCULATOR ===")
    amount = parse_decimal(typer.prompt("Deposit amount"))
    term = parse_int(typer.prompt("Deposit term (months)"))
    rate = parse_decimal(typer.prompt("Interest rate (% per year)"))
    deposit_type = typer.prompt("Deposit type (1 - simple interest, 2 - with capitalization)")
    mode = DEPOSIT_TYPES.get(deposit_type.strip(), deposit_type)

    with tracked("deposit"):
        result = calculators.deposit.compute_deposit(amount, term, rate, mode)
    echo_deposit(result)


DIALOGS: Dict[str, tuple[str, Callable[[Calculators], None]]] = {
    "1": ("loan", loan_dialog),
    "2": ("convert", currency_dialog),
    "3": ("deposit", deposit_dialog),
}


def run_dialog(operation: str, dialog: Callable[[Calculators], None], calculators: Calculators) -> None:
    """Run one dialog; input and domain errors are reported, never raised"""
    try:
        dialog(calculators)
    except MalformedInputError:
        record_calculation(operation, "malformed_input")
        echo_error(INVALID_INPUT_MESSAGE)
    except ValidationError as e:
        echo_error(f"Error: {e.message}")
    except ConversionUnavailable as e:
        echo_error(f"Error: {e}")


def run_menu(calculators: Calculators) -> None:
    """Loop over the menu until Exit is chosen or input ends"""
    exit_requested = False
    while not exit_requested:
        typer.echo(MENU)
        try:
            choice = typer.prompt("Select an option").strip()
        except typer.Abort:
            break

        if choice == "4":
            exit_requested = True
        elif choice in DIALOGS:
            operation, dialog = DIALOGS[choice]
            try:
                run_dialog(operation, dialog, calculators)
            except typer.Abort:
                break
            typer.echo("")
        else:
            echo_error(INVALID_CHOICE_MESSAGE)

    typer.echo("Goodbye!")


# -----------------------------------------------------------------------------
# Commands
# -----------------------------------------------------------------------------


@app.callback(invoke_without_command=True)
def main(ctx: typer.Context) -> None:
    """Start the interactive menu when no subcommand is given."""
    setup_logging(settings.log_level)
    try:
        if start_metrics_server(settings.metrics_port):
            logger.info("Metrics exporter started", extra={"port": settings.metrics_port})
    except OSError as e:
        logger.warning(
            "Metrics exporter unavailable",
            extra={"port": settings.metrics_port, "error": str(e)},
        )

    if ctx.invoked_subcommand is None:
        run_menu(build_calculators())


@app.command("menu")
def menu() -> None:
    """Interactive menu: loan, currency, deposit, exit."""
    run_menu(build_calculators())


def _run_once(operation: str, compute: Callable[[], object], as_json: bool, render: Callable[[object], None]) -> None:
    try:
        with tracked(operation):
            result = compute()
    except MalformedInputError:
        record_calculation(operation, "malformed_input")
        echo_error(INVALID_INPUT_MESSAGE)
        raise typer.Exit(code=EXIT_MALFORMED_INPUT)
    except ValidationError as e:
        echo_error(f"Error: {e.message}")
        raise typer.Exit(code=EXIT_DOMAIN_ERROR)
    except ConversionUnavailable as e:
        echo_error(f"Error: {e}")
        raise typer.Exit(code=EXIT_DOMAIN_ERROR)

    if as_json:
        typer.echo(json.dumps(result if isinstance(result, dict) else result.to_dict()))
    else:
        render(result)


@app.command("loan")
def loan(
    amount: str = typer.Option(..., "--amount", "-a", help="Loan amount"),
    term: str = typer.Option(..., "--term", "-t", help="Term in months"),
    rate: str = typer.Option(..., "--rate", "-r", help="Annual interest rate, percent"),
    as_json: bool = typer.Option(False, "--json", help="Print the result as JSON"),
) -> None:
    """Monthly payment, total and overpayment of an annuity loan."""
    calculators = build_calculators()
    _run_once(
        "loan",
        lambda: calculators.credit.compute_loan(parse_decimal(amount), parse_int(term), parse_decimal(rate)),
        as_json,
        echo_loan,
    )


@app.command("deposit")
def deposit(
    amount: str = typer.Option(..., "--amount", "-a", help="Deposit amount"),
    term: str = typer.Option(..., "--term", "-t", help="Term in months"),
    rate: str = typer.Option(..., "--rate", "-r", help="Annual interest rate, percent"),
    mode: str = typer.Option("simple", "--mode", "-m", help="simple or compound"),
    as_json: bool = typer.Option(False, "--json", help="Print the result as JSON"),
) -> None:
    """Income and final balance of a deposit."""
    calculators = build_calculators()
    _run_once(
        "deposit",
        lambda: calculators.deposit.compute_deposit(parse_decimal(amount), parse_int(term), parse_decimal(rate), mode),
        as_json,
        echo_deposit,
    )


@app.command("convert")
def convert(
    amount: str = typer.Option(..., "--amount", "-a", help="Amount to convert"),
    source: str = typer.Option(..., "--source", "-s", help="Source currency code"),
    target: str = typer.Option(..., "--target", "-t", help="Target currency code"),
    as_json: bool = typer.Option(False, "--json", help="Print the result as JSON"),
) -> None:
    """Convert an amount using the static rate table."""
    calculators = build_calculators()
    codes = calculators.rates.currencies

    def compute() -> Dict[str, str]:
        value = parse_decimal(amount)
        source_code = validate_currency(source, codes)
        target_code = validate_currency(target, codes)
        converted = calculators.converter.convert(value, source_code, target_code)
        return {
            "amount": str(value),
            "source": source_code,
            "target": target_code,
            "result": str(converted),
        }

    def render(conversion: Dict[str, str]) -> None:
        echo_conversion(
            Decimal(conversion["amount"]),
            conversion["source"],
            Decimal(conversion["result"]),
            conversion["target"],
        )

    _run_once("convert", compute, as_json, render)


if __name__ == "__main__":
    app()
