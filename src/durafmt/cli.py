"""Command line interface: ``durafmt 354h22m3.24s`` -> "2 weeks 18 hours ..."."""

import json
import logging

import click
from pydantic import BaseModel, ValidationError

from durafmt.config import Settings
from durafmt.errors import DurafmtError, InvalidDurationText
from durafmt.formatter import DurationFormatter

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(levelname).1s %(asctime)s %(filename)s:%(lineno)d - %(message)s"


class FormattedDuration(BaseModel):
    """One rendered duration, as emitted by ``--format json``."""

    input: str
    nanos: int
    text: str
    components: dict[str, int]

    @classmethod
    def from_formatter(cls, source: str, formatter: DurationFormatter) -> "FormattedDuration":
        return cls(
            input=source,
            nanos=formatter.duration.nanos,
            text=formatter.render(),
            components={unit.value: value for unit, value in formatter.components()},
        )


def build_formatter(source: str, as_nanos: bool) -> DurationFormatter:
    """Create a formatter from a command line argument."""
    if not as_nanos:
        return DurationFormatter.from_text(source)
    try:
        return DurationFormatter.from_duration(int(source))
    except ValueError as e:
        # Also covers pydantic's ValidationError for out of range values.
        raise InvalidDurationText(source, "invalid nanosecond count") from e


def output_results(results: list[FormattedDuration], output_format: str) -> None:
    if output_format == "json":
        click.echo(json.dumps([r.model_dump() for r in results], indent=2))
    else:
        for result in results:
            click.echo(result.text)


@click.command(name="durafmt")
@click.argument("durations", nargs=-1, required=True)
@click.option(
    "-n",
    "--first",
    "limit_first_n",
    type=click.IntRange(min=0),
    default=None,
    help="Only show the first N unit/value pairs (0 for all)",
)
@click.option("--short", is_flag=True, help="Only show the largest unit, same as --first 1")
@click.option(
    "--max-unit",
    "limit_to_unit",
    default=None,
    help="Largest unit to show, e.g. hours; bigger units fold into it",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["raw", "json"]),
    default=None,
    help="Output format",
)
@click.option("--nanos", "as_nanos", is_flag=True, help="Arguments are integer nanoseconds")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(
    ctx: click.Context,
    durations: tuple[str, ...],
    limit_first_n: int | None,
    short: bool,
    limit_to_unit: str | None,
    output_format: str | None,
    as_nanos: bool,
    verbose: bool,
):
    """Format durations such as 354h22m3.24s as human readable text.

    Negative durations must follow "--", e.g. durafmt -- -1h30m.
    """
    try:
        settings = Settings()
    except ValidationError as e:
        raise click.ClickException(f"Invalid settings: {e}") from e

    logging.basicConfig(
        level=logging.DEBUG if verbose else settings.log_level,
        format=LOG_FORMAT,
        datefmt="%H:%M:%S",
        handlers=[logging.StreamHandler()],
    )

    if short:
        limit_first_n = 1
    elif limit_first_n is None:
        limit_first_n = settings.limit_first_n
    if limit_to_unit is None:
        limit_to_unit = settings.limit_to_unit
    output_format = output_format or settings.output_format

    results = []
    failed = False
    for source in durations:
        try:
            formatter = build_formatter(source, as_nanos)
            formatter.limit_first_n(limit_first_n).limit_to_unit(limit_to_unit)
        except DurafmtError as e:
            logger.debug(f"Failed to format {source!r}", exc_info=True)
            click.echo(f"Error: {e}", err=True)
            failed = True
            continue
        results.append(FormattedDuration.from_formatter(source, formatter))

    output_results(results, output_format)
    if failed:
        ctx.exit(1)


def main():
    """Console script entry point."""
    cli()


if __name__ == "__main__":
    main()
