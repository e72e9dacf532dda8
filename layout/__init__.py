"""Layout-Modul: Overlap-Gruppierung und Pixel-Positionierung für Kalenderansichten."""

from .grouper import group_overlapping, group_events_by_day, intervals_overlap, events_overlap
from .positioner import layout, layout_slots

__all__ = [
    "group_overlapping",
    "group_events_by_day",
    "intervals_overlap",
    "events_overlap",
    "layout",
    "layout_slots",
]
