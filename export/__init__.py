"""Export-Modul: Terminal-Darstellung (Rich) gruppierter Termine."""

from export.tui_renderer import describe_event, render_day_rows, render_slot_detail_rows

__all__ = ["describe_event", "render_day_rows", "render_slot_detail_rows"]
