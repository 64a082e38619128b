"""Command-line interface: saved transactions page in, CSV on stdout."""

import logging
import sys
from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError

from txn_html_extract.api import extract_records_from_file
from txn_html_extract.config import AppConfig, get_app_config
from txn_html_extract.parsers import HtmlLoadError
from txn_html_extract.services import write_csv

logger = logging.getLogger(__name__)

app = typer.Typer(add_completion=False, help="Extract transaction records from a saved HTML page as CSV")


def configure_logging(level: int) -> None:
    """Send log records to stderr so stdout carries only CSV."""
    logging.basicConfig(
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        level=level,
    )
    logging.getLogger("txn_html_extract").setLevel(level)


@app.command()
def extract(
    html_file: Path = typer.Argument(..., help="Path to the saved HTML page"),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Write CSV to this file instead of stdout",
    ),
    log_level: Optional[str] = typer.Option(
        None,
        "--log-level",
        help="Override LOG_LEVEL (DEBUG, INFO, WARNING, ...)",
    ),
) -> None:
    config = get_app_config()
    if log_level:
        try:
            config = AppConfig(
                log_level=log_level,
                input_encoding=config.input_encoding,
                output_encoding=config.output_encoding,
            )
        except ValidationError as exc:
            raise typer.BadParameter(f"Unknown log level: {log_level}", param_hint="--log-level") from exc
    configure_logging(config.log_level_value)

    try:
        records = extract_records_from_file(html_file, encoding=config.input_encoding)
    except (FileNotFoundError, HtmlLoadError) as exc:
        logger.error(f"Error reading {html_file}: {exc}")
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1) from exc

    if output is None:
        count = write_csv(records, sys.stdout)
    else:
        count = write_csv(records, output, encoding=config.output_encoding)

    logger.info(f"Extracted {count} records from {html_file}")


def main() -> None:
    app()


if __name__ == "__main__":  # pragma: no cover
    main()
