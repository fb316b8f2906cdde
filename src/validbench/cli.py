"""Command line entry point: validate records by hand and launch the benchmark suite."""

from __future__ import annotations

import logging
from datetime import date
from pathlib import Path

import click

from validbench.config import get_settings
from validbench.errs import UnknownValidatorError
from validbench.harness import run_validator
from validbench.logs import configure_logging
from validbench.model import FIXTURES, Record
from validbench.register.registry import describe
from validbench.register.value_rules import value_rules
from validbench.validators import VALIDATORS, get_validator

logger = logging.getLogger(__name__)

BENCHMARKS_DIR = Path(__file__).resolve().parents[2] / "benchmarks"


def _parse_numbers(_ctx: click.Context, _param: click.Parameter, value: str | None) -> list[int] | None:
    if value is None:
        return None
    try:
        return [int(item) for item in value.split(",") if item.strip()]
    except ValueError as e:
        msg = f"expected comma separated integers, got {value!r}"
        raise click.BadParameter(msg) from e


def _parse_date(_ctx: click.Context, _param: click.Parameter, value: str | None) -> date | None:
    if value is None:
        return None
    try:
        return date.fromisoformat(value)
    except ValueError as e:
        msg = f"expected YYYY-MM-DD, got {value!r}"
        raise click.BadParameter(msg) from e


def _resolve_validator(name: str | None):  # noqa: ANN202
    try:
        return get_validator(name or get_settings().default_validator)
    except UnknownValidatorError as e:
        raise click.BadParameter(str(e), param_hint="--validator") from e


validator_option = click.option(
    "--validator",
    "validator_name",
    type=click.Choice(list(VALIDATORS)),
    default=None,
    help="Validator style. Defaults to VALIDBENCH_DEFAULT_VALIDATOR.",
)
current_year_option = click.option(
    "--current-year",
    type=int,
    default=None,
    help="Year used as the exclusive upper date-of-birth bound.",
)


@click.group()
@click.option("--log-level", default=None, help="Logging level. Defaults to VALIDBENCH_LOG_LEVEL.")
def cli(log_level: str | None):
    """Compare validator styles over a flat record."""
    configure_logging(log_level or get_settings().log_level)


@cli.command()
@validator_option
@current_year_option
@click.option("--numbers", callback=_parse_numbers, default=None, help="Comma separated integers, '' for empty.")
@click.option("--name", default=None, help="Name, '' for empty.")
@click.option("--dob", callback=_parse_date, default=None, help="Date of birth as YYYY-MM-DD.")
@click.option("--count", type=int, default=0, show_default=True)
@click.option("--null", "null_record", is_flag=True, help="Validate a missing record.")
@click.pass_context
def validate(  # noqa: PLR0913
    ctx: click.Context,
    validator_name: str | None,
    current_year: int | None,
    numbers: list[int] | None,
    name: str | None,
    dob: date | None,
    count: int,
    null_record: bool,  # noqa: FBT001
):
    """Validate one record and print its failures, one per line."""
    check = _resolve_validator(validator_name)
    record = None
    if not null_record:
        fields = {"count": count, "numbers": numbers, "name": name}
        if dob is not None:
            fields["date_of_birth"] = dob
        record = Record(**fields)

    failures = check(record, current_year=current_year)
    if not failures:
        click.echo("OK")
        return
    for failure in failures:
        click.echo(failure)
    ctx.exit(1)


@cli.command()
@validator_option
@current_year_option
def fixtures(validator_name: str | None, current_year: int | None):
    """Print the failures of every benchmark fixture."""
    check = _resolve_validator(validator_name)
    for index, failures in enumerate(run_validator(check, FIXTURES, current_year=current_year), start=1):
        click.echo(f"m{index}: {', '.join(failures) or 'OK'}")


@cli.command()
def rules():
    """List the field rules available to the rule builder."""
    for signature in describe(value_rules).values():
        click.echo(signature)


@cli.command(context_settings={"ignore_unknown_options": True, "allow_extra_args": True})
@click.argument("pytest_args", nargs=-1, type=click.UNPROCESSED)
@click.pass_context
def bench(ctx: click.Context, pytest_args: tuple[str, ...]):
    """Run the benchmark suite through pytest-benchmark. Extra arguments go to pytest."""
    try:
        import pytest  # noqa: PLC0415
    except ImportError as e:
        msg = "pytest and pytest-benchmark are required, install validbench[test]"
        raise click.ClickException(msg) from e

    if not BENCHMARKS_DIR.is_dir():
        msg = f"benchmark suite not found at {BENCHMARKS_DIR}"
        raise click.ClickException(msg)

    logger.info("Running benchmarks in %s", BENCHMARKS_DIR)
    ctx.exit(int(pytest.main([str(BENCHMARKS_DIR), "--benchmark-only", *pytest_args])))
