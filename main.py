"""Kalender-Layout: Haupt-CLI.

Verwendung:
  python main.py config init                          Default-Konfiguration anlegen
  python main.py config show                          Konfiguration anzeigen
  python main.py layout <termine.json>                Alle Tage gruppieren + positionieren
  python main.py layout <termine.json> --date D       Nur Tag D (Tagesansicht)
  python main.py layout <termine.json> --view week --date D
  python main.py layout <termine.json> --view range --date D --to E
  python main.py slot <termine.json> --date D --index N
                                                      Termine eines Sammel-Slots auflisten
"""

import logging
import sys
from datetime import date, datetime
from pathlib import Path
from typing import Optional

import click
from pydantic import ValidationError
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich import box

console = Console()

VIEW_CHOICES = ["day", "week", "range"]
DAY_NAMES = ["Mo", "Di", "Mi", "Do", "Fr", "Sa", "So"]


def _parse_date(ctx, param, value: Optional[str]) -> Optional[date]:
    if value is None:
        return None
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except ValueError:
        raise click.BadParameter(f"Datum im Format YYYY-MM-DD erwartet, nicht {value!r}")


def _day_title(day: Optional[date]) -> str:
    if day is None:
        return "Ohne Datum"
    return f"{DAY_NAMES[day.weekday()]} {day.strftime('%d.%m.%Y')}"


def _load_config_or_abort(config_path: Optional[Path]):
    """Lädt die Konfiguration (oder Defaults) oder bricht mit Fehlermeldung ab."""
    from config.manager import ConfigManager
    mgr = ConfigManager(config_path)
    try:
        return mgr, mgr.load_or_default()
    except ValueError as e:
        console.print(f"[red bold]Konfiguration ungültig:[/red bold]\n{e}")
        sys.exit(1)


def _load_events_or_abort(path: Path):
    from models.calendar_data import CalendarData
    try:
        return CalendarData.load_json(path)
    except (ValidationError, ValueError) as e:
        console.print(f"[red bold]Termine konnten nicht geladen werden:[/red bold]\n{e}")
        sys.exit(1)


def _select_days(view: str, day: Optional[date], to: Optional[date]) -> Optional[list[date]]:
    """Tage der gewählten Ansicht; None = alle Tage aus der Datei."""
    from layout.calendar_grid import range_days, week_days

    if day is None:
        return None
    if view == "week":
        return week_days(day)
    if view == "range":
        if to is None:
            raise click.UsageError("Zeitraum-Ansicht braucht --to.")
        if to < day:
            raise click.UsageError(
                f"--to ({to.isoformat()}) liegt vor --date ({day.isoformat()}).")
        return range_days(day, to)
    return [day]


def _print_day_table(title: str, slots, grid) -> None:
    from export.tui_renderer import render_day_rows

    table = Table(title=title, box=box.ROUNDED, show_lines=True)
    table.add_column("Nr.", justify="right")
    table.add_column("Zeit")
    table.add_column("top", justify="right")
    table.add_column("height", justify="right")
    table.add_column("Termin")
    for row in render_day_rows(slots, grid):
        table.add_row(*row)
    if not slots:
        table.add_row("", "", "", "", "[dim]keine Termine[/dim]")
    console.print(table)


# ─── CONFIG ───────────────────────────────────────────────────────────────────

@click.group("config")
def cmd_config():
    """Konfiguration anlegen oder anzeigen."""


@cmd_config.command("init")
@click.option("--force", is_flag=True, default=False,
              help="Bestehende Konfiguration überschreiben.")
@click.pass_obj
def config_init(obj: dict, force: bool):
    """Legt die Default-Konfiguration als YAML an."""
    from config.defaults import default_calendar_config
    from config.manager import ConfigManager

    mgr = ConfigManager(obj.get("config_path"))
    if not mgr.first_run_check() and not force:
        console.print(
            f"[yellow]Konfiguration existiert bereits: {mgr.path}[/yellow]\n"
            "Mit [bold]--force[/bold] überschreiben."
        )
        return
    target = mgr.save(default_calendar_config())
    console.print(f"[green]✓[/green] Konfiguration gespeichert: {target}")


@cmd_config.command("show")
@click.pass_obj
def config_show(obj: dict):
    """Zeigt die aktuelle Konfiguration an."""
    from config.schema import CalendarView
    from models.clock import format_minutes

    mgr, config = _load_config_or_abort(obj.get("config_path"))
    source = "Defaults" if mgr.first_run_check() else str(mgr.path)

    console.print(Panel(
        f"[bold]{config.organization_name}[/bold]  |  "
        f"Startansicht: {config.default_view.value}  |  Quelle: {source}",
        title="Kalender-Konfiguration",
        border_style="cyan",
    ))

    table = Table(title="Stundenraster", box=box.ROUNDED)
    table.add_column("Ansicht")
    table.add_column("Ursprung")
    table.add_column("px/Stunde", justify="right")
    table.add_column("Mindesthöhe", justify="right")
    table.add_column("Letzte Zeile")
    for view in (CalendarView.DAY, CalendarView.WEEK, CalendarView.RANGE):
        grid = config.grid_for(view)
        table.add_row(
            view.value,
            format_minutes(grid.grid_origin_minutes),
            f"{grid.pixels_per_hour:g}",
            f"{grid.minimum_height_pixels:g}",
            f"{grid.last_hour:02d}:00",
        )
    console.print(table)


# ─── LAYOUT ───────────────────────────────────────────────────────────────────

@click.command("layout")
@click.argument("datei", type=click.Path(exists=True, path_type=Path))
@click.option("--view", type=click.Choice(VIEW_CHOICES), default="day",
              help="Ansicht, deren Stundenraster verwendet wird.")
@click.option("--date", "day", callback=_parse_date, default=None,
              help="Tag (YYYY-MM-DD); bei week/range der erste Tag.")
@click.option("--to", callback=_parse_date, default=None,
              help="Letzter Tag der Zeitraum-Ansicht (YYYY-MM-DD).")
@click.pass_obj
def cmd_layout(obj: dict, datei: Path, view: str, day: Optional[date], to: Optional[date]):
    """Gruppiert Termine nach Überschneidung und berechnet ihre Position."""
    from config.schema import CalendarView
    from layout.calendar_grid import events_for_day
    from layout.grouper import group_events_by_day, group_overlapping

    _, config = _load_config_or_abort(obj.get("config_path"))
    grid = config.grid_for(CalendarView(view))
    data = _load_events_or_abort(datei)
    console.print(f"[dim]{data.summary()}[/dim]")

    days = _select_days(view, day, to)
    if days is not None:
        for d in days:
            _print_day_table(_day_title(d), group_overlapping(events_for_day(data.events, d)), grid)
        return

    # Termine ohne Datum bilden einen eigenen Tag, nie gemischt mit datierten
    undated = [e for e in data.events if e.date is None]
    dated = [e for e in data.events if e.date is not None]
    if undated:
        _print_day_table(_day_title(None), group_overlapping(undated), grid)
    for d, slots in group_events_by_day(dated).items():
        _print_day_table(_day_title(d), slots, grid)


# ─── SLOT ─────────────────────────────────────────────────────────────────────

@click.command("slot")
@click.argument("datei", type=click.Path(exists=True, path_type=Path))
@click.option("--date", "day", callback=_parse_date, default=None,
              help="Tag (YYYY-MM-DD); Pflicht, sobald Termine ein Datum tragen.")
@click.option("--index", "-i", type=int, required=True,
              help="Nummer des Slots (wie in 'layout' angezeigt, 1-basiert).")
def cmd_slot(datei: Path, day: Optional[date], index: int):
    """Listet die Termine eines Slots auf (Detailansicht bei Überschneidung)."""
    from export.tui_renderer import render_slot_detail_rows
    from layout.calendar_grid import events_for_day
    from layout.grouper import group_overlapping

    data = _load_events_or_abort(datei)
    if day is None:
        if any(e.date is not None for e in data.events):
            raise click.UsageError(
                "Termine tragen ein Datum: Tag mit --date angeben.")
        events = data.events
    else:
        events = events_for_day(data.events, day)
    slots = group_overlapping(events)
    if not 1 <= index <= len(slots):
        console.print(f"[red]Slot {index} existiert nicht ({len(slots)} Slots).[/red]")
        sys.exit(1)

    slot = slots[index - 1]
    table = Table(title=f"{_day_title(day) if day else ''} {slot}".strip(), box=box.ROUNDED)
    for col in ("id", "Zeit", "Fach", "Gruppe", "Lehrkraft", "Raum", "Status"):
        table.add_column(col)
    for row in render_slot_detail_rows(slot):
        table.add_row(*row)
    console.print(table)


# ─── HAUPT-CLI ────────────────────────────────────────────────────────────────

@click.group()
@click.option("--config", "config_path", type=click.Path(path_type=Path), default=None,
              help="Pfad zur Konfigurationsdatei (Default: config/calendar_config.yaml).")
@click.option("--log-level", default="WARNING",
              type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
              help="Log-Level für Diagnoseausgaben.")
@click.pass_context
def cli(ctx: click.Context, config_path: Optional[Path], log_level: str):
    """Kalender-Layout: Überschneidungen gruppieren, Termine im Stundenraster positionieren."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    ctx.obj = {"config_path": config_path}


def main():
    """Einstiegspunkt."""
    cli()


# Befehle registrieren
cli.add_command(cmd_config)
cli.add_command(cmd_layout)
cli.add_command(cmd_slot)


if __name__ == "__main__":
    main()
