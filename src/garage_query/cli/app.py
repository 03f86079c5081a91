import logging
from typing import Annotated

import typer

from garage_query.cli.query import query_app
from garage_query.config import get_log_level

app = typer.Typer(
    name="garage-query",
    help="Garage Query CLI: null-safe queries over a dealership inventory document.",
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)

app.add_typer(query_app, name="query")


@app.callback()
def configure(
    log_level: Annotated[
        str | None, typer.Option("--log-level", help="Logging level (default from GARAGE_LOG_LEVEL).")
    ] = None,
) -> None:
    """Query a dealership inventory document."""
    name = (log_level or get_log_level()).upper()
    levels = logging.getLevelNamesMapping()
    if name not in levels:
        raise typer.BadParameter(
            f"unknown level {name!r}, expected one of {', '.join(sorted(levels))}", param_hint="--log-level"
        )
    logging.basicConfig(level=levels[name], format="%(levelname)s %(name)s: %(message)s")


def main() -> None:
    app()
