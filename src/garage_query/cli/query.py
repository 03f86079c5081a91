from collections.abc import Sequence
from typing import Annotated, Any

import typer
from rich.console import Console
from rich.table import Table

from garage_query.config import get_cheap_threshold, get_inventory_path
from garage_query.core.loader import InventoryLoadError, load_inventory
from garage_query.core.query import (
    count_cars_with_ukw,
    customer_names_with_cars,
    customer_names_with_codec,
    exists_cheap_car_with_bluetooth,
    inventory_statistics,
    wheels_per_brand,
)
from garage_query.models import Inventory

query_app = typer.Typer(help="Run queries against an inventory document.")
console = Console()

InventoryOption = Annotated[
    str | None, typer.Option("--inventory", "-i", help="Inventory JSON file (default from GARAGE_INVENTORY).")
]


def _render_table(headers: Sequence[str], rows: Sequence[tuple[Any, ...]]) -> None:
    table = Table(show_lines=False)
    for h in headers:
        table.add_column(h)
    for row in rows:
        table.add_row(*(str(v) for v in row))
    console.print(table)
    console.print(f"({len(rows)} rows)")


def _load(path: str | None) -> Inventory | None:
    resolved = path or get_inventory_path()
    try:
        return load_inventory(resolved)
    except InventoryLoadError as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(1) from None
    except FileNotFoundError as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(1) from None
    except OSError as exc:
        console.print(f"[red]Cannot read inventory {resolved}: {exc.strerror or exc}[/red]")
        raise typer.Exit(1) from None


@query_app.command("cheap-bluetooth")
def cheap_bluetooth(
    inventory: InventoryOption = None,
    threshold: Annotated[
        int | None, typer.Option(help="Price limit (default from GARAGE_CHEAP_THRESHOLD).")
    ] = None,
    version: Annotated[int, typer.Option(help="Bluetooth version to look for.")] = 5,
) -> None:
    """Check whether a car below the price limit has the given bluetooth version."""
    data = _load(inventory)
    try:
        limit = threshold if threshold is not None else get_cheap_threshold()
    except ValueError as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(1) from None
    if exists_cheap_car_with_bluetooth(data, limit, version):
        console.print(f"[green]yes[/green]: a car below {limit} has bluetooth {version}")
    else:
        console.print(f"[yellow]no[/yellow]: no car below {limit} has bluetooth {version}")


@query_app.command("wheels-per-brand")
def wheels(inventory: InventoryOption = None) -> None:
    """Sum wheel amounts per wheel brand."""
    totals = wheels_per_brand(_load(inventory))
    _render_table(["brand", "amount"], list(totals.items()))


@query_app.command("codec-customers")
def codec_customers(
    inventory: InventoryOption = None,
    codec: Annotated[str, typer.Option(help="Bluetooth codec to look for.")] = "Opus",
) -> None:
    """List customers owning a car whose bluetooth supports the codec."""
    names = customer_names_with_codec(_load(inventory), codec)
    _render_table(["customer"], [(n,) for n in names])


@query_app.command("multi-car-customers")
def multi_car_customers(
    inventory: InventoryOption = None,
    minimum: Annotated[int, typer.Option(help="Minimum number of cars.")] = 2,
) -> None:
    """List customers owning at least the given number of cars."""
    names = customer_names_with_cars(_load(inventory), minimum)
    _render_table(["customer"], [(n,) for n in names])


@query_app.command("count-ukw")
def count_ukw(inventory: InventoryOption = None) -> None:
    """Count cars with a UKW radio."""
    console.print(str(count_cars_with_ukw(_load(inventory))))


@query_app.command("stats")
def stats(inventory: InventoryOption = None) -> None:
    """Show element counts per level."""
    counts = inventory_statistics(_load(inventory))
    _render_table(["level", "count"], list(counts.items()))
