import asyncio
import logging
from collections import Counter
from pathlib import Path

import click
from bs4 import UnicodeDammit
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from . import config
from .assembler import build_records
from .envelope import build_envelope, save_csv, save_json, to_json
from .extractor import extract_tables
from .fetcher import UpstreamError, fetch_records
from .logger import set_level

console = Console()

LAYOUT_CHOICE = click.Choice(sorted(config.LAYOUTS))


def _show_lineup(records, source):
    console.print(Panel(
        Text(f"🚢 Santos Expected Vessels 🚢\n{source}", justify="center", style="bold cyan"),
        border_style="blue",
    ))

    lineup = Table(show_header=True, header_style="bold magenta", border_style="cyan")
    lineup.add_column("ETA", style="bold")
    lineup.add_column("Ship")
    lineup.add_column("IMO")
    lineup.add_column("Flag")
    lineup.add_column("LOA (m)", justify="right")
    lineup.add_column("Draft (m)", justify="right")
    lineup.add_column("Cargo")
    lineup.add_column("Terminal")
    for record in sorted(records, key=lambda r: (r.arrival_ts is None, r.arrival_ts or 0)):
        lineup.add_row(
            record.arrival_iso or record.arrival_text or "-",
            record.ship or "-",
            record.imo or "-",
            record.flag_en or "-",
            f"{record.length_m:g}" if record.length_m is not None else "-",
            f"{record.draft_m:g}" if record.draft_m is not None else "-",
            record.cargo_category_en or "-",
            record.terminal or "-",
        )
    console.print(lineup)

    summary = Table(title="Cargo Mix")
    summary.add_column("Category", style="cyan")
    summary.add_column("Ships", justify="right", style="green")
    counts = Counter(record.cargo_category_en for record in records)
    for label, count in counts.most_common():
        summary.add_row(label, f"{count:,}")
    summary.add_row("Total", f"{len(records):,}", style="bold")
    console.print(summary)


def _emit(records, source, include_raw, pretty, as_json, output, csv_path, save):
    envelope = build_envelope(records, source=source, include_raw=include_raw)
    if save:
        config.setup_directories()
        output = output or config.LINEUP_JSON_FILE
        csv_path = csv_path or config.LINEUP_CSV_FILE
    if output:
        Path(output).parent.mkdir(parents=True, exist_ok=True)
        save_json(envelope, output, pretty=pretty)
    if csv_path:
        Path(csv_path).parent.mkdir(parents=True, exist_ok=True)
        save_csv(records, csv_path)
    if as_json:
        click.echo(to_json(envelope, pretty=pretty))
    elif not output and not csv_path:
        _show_lineup(records, source)
    else:
        console.print(f"✅ [green]{envelope['count']:,} ships written[/green]")


def output_options(command):
    command = click.option("--save", is_flag=True, help=f"Write JSON and CSV under {config.DATA_DIR}/")(command)
    command = click.option("--csv", "csv_path", type=click.Path(dir_okay=False), help="Also write a CSV table")(command)
    command = click.option("--output", "-o", type=click.Path(dir_okay=False), help="Write the JSON envelope to a file")(command)
    command = click.option("--json", "as_json", is_flag=True, help="Print the JSON envelope instead of a table")(command)
    command = click.option("--pretty", is_flag=True, help="Indent JSON output")(command)
    command = click.option("--raw", "include_raw", is_flag=True, help="Include the raw cells of every row")(command)
    command = click.option("--layout", type=LAYOUT_CHOICE, default="current", show_default=True,
                           help="Column layout assumed for headerless tables")(command)
    return command


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Debug logging")
def main(verbose):
    """Normalize the Port of Santos expected-vessels lineup."""
    set_level(logging.DEBUG if verbose else logging.WARNING)


@main.command()
@click.option("--url", default=config.SOURCE_URL, show_default=True, help="Lineup page to fetch")
@output_options
def fetch(url, layout, include_raw, pretty, as_json, output, csv_path, save):
    """Fetch the live lineup page and normalize it."""
    try:
        records = asyncio.run(fetch_records(url, fallback=config.LAYOUTS[layout]))
    except UpstreamError as e:
        console.print(f"❌ [red]Could not fetch the lineup: {e}[/red]")
        raise click.exceptions.Exit(2)
    _emit(records, url, include_raw, pretty, as_json, output, csv_path, save)


@main.command()
@click.argument("html_file", type=click.Path(exists=True, dir_okay=False))
@output_options
def parse(html_file, layout, include_raw, pretty, as_json, output, csv_path, save):
    """Normalize a lineup page saved to disk."""
    markup = UnicodeDammit(Path(html_file).read_bytes(), is_html=True).unicode_markup or ""
    records = build_records(extract_tables(markup), fallback=config.LAYOUTS[layout])
    _emit(records, str(html_file), include_raw, pretty, as_json, output, csv_path, save)


if __name__ == "__main__":
    main()
