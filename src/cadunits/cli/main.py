"""Command-line interface for cadunits."""

from __future__ import annotations

import json
import logging

import click

from cadunits.settings import get_settings
from cadunits.units.dimensions import parse_dimension
from cadunits.units.parse import QuantityParseError, parse_canonical, parse_quantity
from cadunits.units.schema import SCAN_ORDER, parse_schema, units_for
from cadunits.units.translate import format_result, translate, translate_adaptive


def _schema_option(ctx: click.Context, param: click.Parameter, value: str | None):
    if value is None:
        return None
    try:
        return parse_schema(value)
    except ValueError as exc:
        raise click.BadParameter(str(exc), ctx=ctx, param=param)


@click.group()
@click.option(
    "--log-level",
    default="WARNING",
    show_default=True,
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Logging threshold for diagnostics written to stderr.",
)
def cli(log_level: str) -> None:
    """Translate and parse CAD quantities."""

    logging.basicConfig(level=log_level.upper(), format="%(levelname)s %(name)s: %(message)s")


@cli.command("translate", context_settings={"ignore_unknown_options": True})
@click.argument("value", type=float)
@click.argument("dimension")
@click.option(
    "--schema",
    "schema",
    default=None,
    callback=_schema_option,
    help="SI or ImperialUK (default from CADUNITS_SCHEMA).",
)
@click.option(
    "--precision",
    type=click.IntRange(0, 15),
    default=None,
    help="Decimals to print (default from CADUNITS_PRECISION).",
)
@click.option(
    "--mode",
    type=click.Choice(["fixed", "adaptive"]),
    default=None,
    help="fixed uses the schema default unit, adaptive picks one from the magnitude.",
)
def translate_cmd(
    value: float,
    dimension: str,
    schema,
    precision: int | None,
    mode: str | None,
) -> None:
    """Show canonical VALUE of DIMENSION in a measurement schema."""

    settings = get_settings()
    try:
        dim = parse_dimension(dimension)
    except ValueError as exc:
        raise click.BadParameter(str(exc), param_hint="DIMENSION")

    schema = schema or settings.default_schema
    adaptive = settings.adaptive if mode is None else mode == "adaptive"
    precision = settings.precision if precision is None else precision
    fn = translate_adaptive if adaptive else translate
    click.echo(format_result(fn(schema, value, dim), precision))


@cli.command("parse", context_settings={"ignore_unknown_options": True})
@click.argument("text")
@click.option("--json", "as_json", is_flag=True, help="Emit the parse result as JSON.")
def parse_cmd(text: str, as_json: bool) -> None:
    """Parse a quantity such as 25.4mm and print its canonical value."""

    if as_json:
        parsed = parse_quantity(text)
        payload: dict = {"ok": parsed.ok, "dimension": parsed.dimension.value}
        if parsed.result is not None:
            payload.update(
                value=parsed.result.value,
                symbol=parsed.result.symbol,
                factor=parsed.result.factor,
                canonical=parsed.result.canonical(),
            )
        click.echo(json.dumps(payload, indent=2, ensure_ascii=False))
        if not parsed.ok:
            raise SystemExit(1)
        return

    try:
        canonical, dimension = parse_canonical(text)
    except QuantityParseError as exc:
        raise click.ClickException(str(exc))
    click.echo(f"{canonical!r} {dimension.value}")


@cli.command("table")
@click.option("--schema", "schema", default=None, callback=_schema_option, help="Only list one schema.")
def table_cmd(schema) -> None:
    """List the unit symbols recognised by the parser, in lookup order."""

    schemas = (schema,) if schema is not None else SCAN_ORDER
    for item in schemas:
        click.echo(f"[{item.value}]")
        for info in units_for(item):
            click.echo(f"  {info.symbol:<8} {info.dimension.value:<10} {info.factor!r}")


if __name__ == "__main__":
    cli()
