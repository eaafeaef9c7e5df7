"""
Command-line interface for ppktools.

Commands operate on already-parsed strings given as arguments:
  check-curie  validate identifiers
  parse-time   turn temporal strings into TimeElement JSON
  example      print a complete example phenopacket
"""

import logging
import sys
import typing

import click
from google.protobuf.json_format import MessageToJson
from stairval.notepad import create_notepad

from .config import SuffixPolicy
from .curie import validate_curie
from .demo import bethlem_myopathy_phenopacket
from .errors import CurieError, TimeElementError
from .time_elements import parse_temporal


@click.group()
@click.option(
    "--verbose-logging",
    is_flag=True,
    help="Also emit debug logs to stderr",
)
@click.option(
    "--log-file-path",
    type=click.Path(dir_okay=False, writable=True),
    help="Append timestamped logs to this file",
)
def main(verbose_logging: bool, log_file_path: typing.Optional[str]):
    """ppktools: build and validate GA4GH phenopackets."""
    _configure_logging(verbose_logging, log_file_path)


def _configure_logging(verbose_logging: bool, log_file_path: typing.Optional[str]) -> None:
    handlers: list[logging.Handler] = []
    if log_file_path:
        handlers.append(logging.FileHandler(log_file_path, mode="a", encoding="utf-8"))
    if verbose_logging:
        handlers.append(logging.StreamHandler(sys.stderr))
    if handlers:
        logging.basicConfig(
            level=logging.DEBUG if verbose_logging else logging.INFO,
            format="%(asctime)s %(levelname)s %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
            handlers=handlers,
        )


@main.command(name="check-curie")
@click.argument("identifiers", nargs=-1)
@click.option(
    "--numeric-suffix",
    is_flag=True,
    help="Require digits-only suffixes (default: PPKTOOLS_CURIE_SUFFIX or alphanumeric)",
)
def check_curie(identifiers: tuple[str, ...], numeric_suffix: bool):
    """
    Validate each IDENTIFIER as a CURIE (e.g. HP:0001250) and report every failure.
    """
    if not identifiers:
        click.echo("No identifiers specified.", err=True)
        sys.exit(1)

    policy = SuffixPolicy.NUMERIC if numeric_suffix else None
    notepad = create_notepad("curies")
    for identifier in identifiers:
        try:
            validate_curie(identifier, policy)
        except CurieError as e:
            logging.debug(f"Rejected {identifier!r}: {e.kind.name}")
            notepad.add_error(f"{identifier!r}: {e.kind.name}: {e}")
            continue
        click.echo(f"OK {identifier}")

    _report_issues(notepad)
    if notepad.has_errors(include_subsections=True):
        sys.exit(1)


@main.command(name="parse-time")
@click.argument("values", nargs=-1)
def parse_time(values: tuple[str, ...]):
    """
    Parse each VALUE (timestamp, ISO-8601 age, gestational age or onset label)
    and print the TimeElement as JSON.
    """
    if not values:
        click.echo("No values specified.", err=True)
        sys.exit(1)

    notepad = create_notepad("time-elements")
    for value in values:
        try:
            element = parse_temporal(value)
        except TimeElementError as e:
            notepad.add_error(f"{value!r}: {e.kind.name}: {e}")
            continue
        logging.debug(f"Parsed {value!r} as {element.WhichOneof('element')}")
        click.echo(MessageToJson(element))

    _report_issues(notepad)
    if notepad.has_errors(include_subsections=True):
        sys.exit(1)


@main.command(name="example")
def example():
    """Print the Bethlem myopathy example phenopacket as JSON."""
    click.echo(MessageToJson(bethlem_myopathy_phenopacket()))


def _report_issues(notepad):
    # if there were errors, show them
    if notepad.has_errors(include_subsections=True):
        click.echo("Errors found in input:")
        for err in notepad.errors():
            click.echo(f"- {err}")
    if notepad.has_warnings(include_subsections=True):
        click.echo("Warnings found in input:")
        for w in notepad.warnings():
            click.echo(f"- {w}")


if __name__ == "__main__":
    main()
