"""CLI entry point for the Swag Labs suite."""

import logging
from dataclasses import asdict
from pathlib import Path

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from .config import load_config
from .expectations import expectation_table
from .profiles import generate_checkout_profile
from .runner import DEFAULT_SUITE, SuiteRunner
from .scenarios import SCENARIOS, describe

console = Console()


@click.group()
@click.version_option(package_name="swaglabs-e2e")
@click.option("--verbose", "-v", is_flag=True, help="Show debug logs")
def main(verbose: bool) -> None:
    """Swag Labs end-to-end suite."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
    )


@main.command()
@click.argument("suite", type=click.Path(exists=True, path_type=Path), default=DEFAULT_SUITE, required=False)
@click.option("--config", "-c", "config_path", type=click.Path(exists=True, path_type=Path), help="Config file path")
@click.option("--headed", is_flag=True, help="Show the browser window")
@click.option("--keyword", "-k", help="Only run scenarios matching this pytest -k expression")
def run(suite: Path, config_path: Path | None, headed: bool, keyword: str | None) -> None:
    """Run the scenarios against the live shop."""
    runner = SuiteRunner(config_path=config_path, headed=headed, keyword=keyword)

    console.print(f"\n[bold blue]Running suite:[/] {suite}\n")
    exit_code = runner.run(suite)

    if exit_code == 0:
        console.print("[bold green]✓ All scenarios passed![/]\n")
    raise SystemExit(exit_code)


@main.command()
def scenarios() -> None:
    """List the available scenarios."""
    table = Table(title="Scenarios")
    table.add_column("Name", style="cyan")
    table.add_column("Checks")

    for name, scenario in SCENARIOS.items():
        table.add_row(name, describe(scenario))

    console.print(table)


@main.command()
@click.option("--config", "-c", "config_path", type=click.Path(exists=True, path_type=Path), help="Config file path")
def expectations(config_path: Path | None) -> None:
    """Show every selector and the exact text expected there."""
    config = load_config(config_path)

    table = Table(title="Expected page content")
    table.add_column("Name", style="cyan")
    table.add_column("Selector", style="dim")
    table.add_column("Expected", style="green")

    for row in expectation_table(config).values():
        table.add_row(row.name, row.selector, row.expected)

    console.print(table)
    console.print(f"[dim]Base URL: {config.base_url}[/]")


@main.command()
@click.option("--seed", type=int, default=None, help="Seed for reproducible values")
@click.option("--locale", default="en_US", show_default=True, help="Faker locale")
def profile(seed: int | None, locale: str) -> None:
    """Print a generated checkout profile."""
    checkout_profile = generate_checkout_profile(locale=locale, seed=seed)
    for field_name, value in asdict(checkout_profile).items():
        console.print(f"[cyan]{field_name}[/]: {value}")


if __name__ == "__main__":
    main()
