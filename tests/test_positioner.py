"""Tests für die Layout-Positionierung (Zeitspanne → top/height)."""

import pytest

from config.schema import GridConfig
from config.defaults import default_grid
from config.schema import CalendarView
from models.clock import TimeFormatError
from models.event import Event
from models.layout_box import LayoutBox
from layout.grouper import group_overlapping
from layout.positioner import layout, layout_slots


def grid(origin: int = 480, pph: float = 60, floor: float = 25) -> GridConfig:
    return GridConfig(grid_origin_minutes=origin, pixels_per_hour=pph,
                      minimum_height_pixels=floor)


# ─── GRUNDFORMEL ──────────────────────────────────────────────────────────────

class TestLayout:
    def test_short_event_gets_floor(self):
        """08:05–08:10 bei 60 px/h: top 5, Rohhöhe 5 → Mindesthöhe 25."""
        box = layout(("08:05", "08:10"), grid())
        assert box.top == pytest.approx(5)
        assert box.height == 25

    def test_regular_event(self):
        box = layout(("09:30", "11:00"), grid())
        assert box == LayoutBox(top=90.0, height=90.0)

    def test_pixels_per_hour_scales(self):
        box = layout(("10:00", "11:30"), grid(pph=68))
        assert box.top == pytest.approx(136)
        assert box.height == pytest.approx(102)

    def test_event_before_origin_clamped_to_zero(self):
        box = layout(("07:00", "09:00"), grid())
        assert box.top == 0
        # Höhe bleibt die volle Dauer
        assert box.height == pytest.approx(120)

    def test_seconds_ignored(self):
        assert layout(("09:00:00", "10:00:59"), grid()) == layout(("09:00", "10:00"), grid())

    def test_zero_duration_gets_floor(self):
        assert layout(("12:00", "12:00"), grid(floor=30)).height == 30

    def test_inverted_interval_gets_floor(self):
        box = layout(("12:00", "11:00"), grid(floor=30))
        assert box.height == 30
        assert box.top == pytest.approx(240)

    def test_custom_origin(self):
        box = layout(("07:30", "08:00"), grid(origin=7 * 60, floor=0))
        assert box.top == pytest.approx(30)
        assert box.height == pytest.approx(30)

    def test_malformed_time_raises(self):
        with pytest.raises(TimeFormatError):
            layout(("9 Uhr", "10:00"), grid())
        with pytest.raises(TimeFormatError):
            layout(("09:00", "10:75"), grid())

    @pytest.mark.parametrize("start,end", [
        ("00:00", "00:01"), ("06:00", "06:10"), ("08:00", "08:00"),
        ("23:59", "24:00"), ("15:00", "09:00"),
    ])
    def test_guarantees(self, start, end):
        cfg = grid(floor=25)
        box = layout((start, end), cfg)
        assert box.top >= 0
        assert box.height >= cfg.minimum_height_pixels


# ─── EVENTS / SLOTS ALS EINGABE ───────────────────────────────────────────────

class TestLayoutSlots:
    def test_event_input(self):
        e = Event(id="a", start_time="09:00:00", end_time="10:30:00")
        assert layout(e, grid()) == LayoutBox(top=60.0, height=90.0)

    def test_slot_uses_full_span(self):
        slots = group_overlapping([
            Event(id="a", start_time="09:00", end_time="10:00"),
            Event(id="b", start_time="09:30", end_time="10:30"),
        ])
        box = layout(slots[0], grid())
        assert box.top == pytest.approx(60)
        assert box.height == pytest.approx(90)

    def test_layout_slots_pairs(self):
        slots = group_overlapping([
            Event(id="a", start_time="09:00", end_time="10:00"),
            Event(id="c", start_time="14:00", end_time="15:00"),
        ])
        result = layout_slots(slots, default_grid(CalendarView.WEEK))
        assert [s.event_ids for s, _ in result] == [["a"], ["c"]]
        assert result[0][1] == LayoutBox(top=60.0, height=60.0)
        assert result[1][1].top == pytest.approx(360)

    def test_view_floors_from_defaults(self):
        """Tag 60 px, Woche 58 px, Zeitraum 25 px für einen 15-Minuten-Termin."""
        span = ("10:00", "10:15")
        assert layout(span, default_grid(CalendarView.DAY)).height == 60
        assert layout(span, default_grid(CalendarView.WEEK)).height == 58
        assert layout(span, default_grid(CalendarView.RANGE)).height == 25

    def test_layout_box_bottom(self):
        assert LayoutBox(top=10, height=25).bottom == 35
