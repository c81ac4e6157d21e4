__all__ = ["app"]

import logging
from typing import Annotated

import typer
from returns.result import Failure, Success

from .derivative import derivative_of
from .evaluate import evaluate_expression
from .expression import parse_binding, parse_expression
from .render import render, render_value

logger = logging.getLogger(__name__)

app = typer.Typer()


@app.command()
def xpress(
    expression: Annotated[
        str,
        typer.Argument(
            show_default=False,
            help="The expression to process, e.g. x^3 + log(y).",
        ),
    ],
    variables: Annotated[
        list[str],
        typer.Option(
            "--wrt",
            "-d",
            help=(
                "A variable with respect to which to differentiate. Can be mentioned multiple "
                "times to take higher or mixed derivatives."
            ),
        ),
    ] = [],  # noqa: B006; Typer does not support Sequence or tuple
    binding_strings: Annotated[
        list[str],
        typer.Option(
            "--bind",
            "-b",
            help="A variable and its value separated by an equals sign, e.g. x=2 or v=[1,2].",
        ),
    ] = [],  # noqa: B006; Typer does not support Sequence or tuple
    evaluate: Annotated[
        bool,
        typer.Option(
            "--evaluate",
            "-e",
            help="Print the numeric value instead of the expression.",
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log each step to standard error."),
    ] = False,
):
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    # Parse expression
    match parse_expression(expression):
        case Failure(error):
            typer.echo(f"Failed to parse expression:\n{error}", err=True)
            raise typer.Exit(1)
        case Success(parsed_expression):
            logger.debug("Parsed %s", parsed_expression)
        case _:
            raise NotImplementedError()

    # Parse bindings
    bindings = {}
    for binding_string in binding_strings:
        match parse_binding(binding_string):
            case Failure(error):
                typer.echo(f"Failed to parse binding:\n{error}", err=True)
                raise typer.Exit(1)
            case Success((name, value)):
                pass
            case _:
                raise NotImplementedError()

        if name in bindings:
            typer.echo(f"Binding for {name} was mentioned multiple times", err=True)
            raise typer.Exit(1)

        bindings[name] = value

    # Differentiate
    for variable in variables:
        parsed_expression = derivative_of(parsed_expression, variable)
        logger.debug("Derivative with respect to %s is %s", variable, parsed_expression)

    if evaluate:
        match evaluate_expression(parsed_expression, bindings):
            case Failure(error):
                typer.echo(str(error), err=True)
                raise typer.Exit(1)
            case Success(value):
                typer.echo(render_value(value))
            case _:
                raise NotImplementedError()
    elif len(bindings) > 0:
        match evaluate_expression(parsed_expression, bindings):
            case Failure(error):
                typer.echo(str(error), err=True)
                raise typer.Exit(1)
            case Success(_):
                typer.echo(render(parsed_expression, bindings))
            case _:
                raise NotImplementedError()
    else:
        typer.echo(render(parsed_expression))
