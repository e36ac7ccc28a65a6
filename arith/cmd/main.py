import logging

import typer

from arith.error import ParseError
from arith.parse import evaluate
from arith.tokenize import tokenize

app = typer.Typer()


@app.callback()
def configure(verbose: bool = typer.Option(False, "--verbose", "-v")):
    logging.getLogger("arith").setLevel(logging.DEBUG if verbose else logging.WARNING)


@app.command("eval", context_settings={"ignore_unknown_options": True})
def evaluate_expression(
    expression: str,
    strict: bool = typer.Option(False, "--strict", help="Fail on malformed input."),
):
    try:
        result = evaluate(expression, strict=strict)
    except ParseError as e:
        typer.echo(str(e), err=True, nl=False)
        raise typer.Exit(code=1)
    typer.echo(result)


@app.command("tokens", context_settings={"ignore_unknown_options": True})
def dump_tokens(expression: str):
    for token in tokenize(expression):
        typer.echo(f"{token.location:>4} {token.kind.name:<10} {token}")


def run():
    logging.basicConfig(format="%(message)s")
    app()


if __name__ == "__main__":
    run()
