import logging
from typing import TextIO

import click

from kumo.tokenize import Scanner, SourceFileError, tokenize

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


@click.command()
@click.argument("filename", type=click.Path(allow_dash=True), default="-")
@click.option("-o", "--output", type=click.File("w"), default="-")
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default="WARNING",
    envvar="KUMO_LOG_LEVEL",
    show_default=True,
)
def main(filename: str, output: TextIO, log_level: str):
    """Scan FILENAME and print one token per line."""
    logging.basicConfig(
        level=log_level.upper(), format="%(levelname)s %(name)s: %(message)s"
    )
    if filename == "-":
        with click.open_file("-", "rb") as stdin:
            scanner = Scanner(stdin.read())
    else:
        try:
            scanner = Scanner.from_file(filename)
        except SourceFileError as e:
            raise click.ClickException(str(e)) from e
    for token in tokenize(scanner):
        output.write(f"{token}\n")


if __name__ == "__main__":
    main()
