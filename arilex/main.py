import logging
import sys
from typing import TextIO

import click

from arilex.errors import ArilexError
from arilex.helper import error_message
from arilex.tokenize import Tokenizer


@click.command()
@click.argument("filename", type=click.File("r"), default="-")
@click.option("-o", "--output", type=click.File("w"), default="-")
@click.option("--strict", is_flag=True, help="Fail on unrecognized characters.")
@click.option("-v", "--verbose", is_flag=True, help="Log every token.")
def main(filename: TextIO, output: TextIO, strict: bool, verbose: bool):
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING)
    expression = filename.read()
    try:
        for token in Tokenizer(expression, strict=strict):
            output.write(f"{token}\n")
    except ArilexError as e:
        click.echo(error_message(e.expression, e.location, e.message), err=True, nl=False)
        sys.exit(1)


if __name__ == "__main__":
    main()
