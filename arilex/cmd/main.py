import logging

import typer

from arilex.errors import ArilexError
from arilex.helper import error_message
from arilex.tokenize import tokenize

app = typer.Typer()


@app.command(context_settings={"ignore_unknown_options": True})
def main(
    expression: str,
    strict: bool = typer.Option(False, "--strict", help="Fail on unrecognized characters."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log every token."),
):
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING)
    try:
        tokens = tokenize(expression, strict=strict)
    except ArilexError as e:
        typer.echo(error_message(e.expression, e.location, e.message), err=True, nl=False)
        raise typer.Exit(code=1)
    for token in tokens:
        typer.echo(str(token))


if __name__ == "__main__":
    app()
