import logging
import sys
from typing import TextIO

import click

from arith.error import ParseError
from arith.parse import evaluate


@click.command()
@click.argument("filename", type=click.File("r"), default="-")
@click.option("-o", "--output", type=click.File("w"), default="-")
@click.option("--strict", is_flag=True, help="Fail on malformed input.")
@click.option("--echo", is_flag=True, help="Print the input before the result.")
@click.option("-v", "--verbose", is_flag=True)
def main(filename: TextIO, output: TextIO, strict: bool, echo: bool, verbose: bool):
    logging.getLogger("arith").setLevel(logging.DEBUG if verbose else logging.WARNING)
    expression = filename.read().strip()
    try:
        result = evaluate(expression, strict=strict)
    except ParseError as e:
        click.echo(str(e), file=sys.stderr, nl=False)
        sys.exit(1)
    if echo:
        output.write(f"Input: {expression}\n")
    output.write(f"Result: {result}\n")


def run():
    logging.basicConfig(format="%(message)s")
    main()


if __name__ == "__main__":
    run()
