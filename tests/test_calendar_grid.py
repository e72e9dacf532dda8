"""Tests für Kalender-Raster-Hilfsfunktionen (Stundenzeilen, Wochen, Monate)."""

from datetime import date

import pytest

from config.schema import GridConfig
from models.event import Event
from layout.calendar_grid import (
    events_for_day,
    grid_height,
    hour_labels,
    is_event_in_hour,
    month_end,
    month_grid,
    month_start,
    range_days,
    week_days,
    week_end,
    week_start,
)


class TestHourGrid:
    def test_default_labels(self):
        labels = hour_labels(GridConfig())
        assert labels[0] == "08:00"
        assert labels[-1] == "23:00"
        assert len(labels) == 16

    def test_origin_not_on_full_hour(self):
        labels = hour_labels(GridConfig(grid_origin_minutes="07:30", last_hour=9))
        assert labels == ["07:00", "08:00", "09:00"]

    def test_grid_height(self):
        # 08:00 bis 24:00 = 16 Stunden à 60 px
        assert grid_height(GridConfig()) == pytest.approx(960)

    def test_event_in_hour(self):
        e = Event(id="a", start_time="09:30:00", end_time="10:15:00")
        assert not is_event_in_hour(e, "08:00")
        assert is_event_in_hour(e, "09:00")
        assert is_event_in_hour(e, "10:00")
        assert not is_event_in_hour(e, "11:00")

    def test_event_ending_on_full_hour(self):
        e = Event(id="a", start_time="09:00", end_time="10:00")
        assert not is_event_in_hour(e, "10:00")


class TestDays:
    def test_events_for_day(self):
        d = date(2025, 10, 20)
        events = [
            Event(id="a", start_time="09:00", end_time="10:00", date=d),
            Event(id="b", start_time="09:00", end_time="10:00", date=date(2025, 10, 21)),
            Event(id="c", start_time="09:00", end_time="10:00"),
        ]
        assert [e.id for e in events_for_day(events, d)] == ["a"]

    def test_week_starts_on_monday(self):
        # 2025-10-22 ist ein Mittwoch
        assert week_start(date(2025, 10, 22)) == date(2025, 10, 20)
        assert week_end(date(2025, 10, 22)) == date(2025, 10, 26)

    def test_sunday_belongs_to_previous_monday(self):
        assert week_start(date(2025, 10, 26)) == date(2025, 10, 20)

    def test_week_days(self):
        days = week_days(date(2025, 10, 22))
        assert len(days) == 7
        assert days[0].weekday() == 0
        assert days[-1] == date(2025, 10, 26)

    def test_range_days_inclusive(self):
        days = range_days(date(2025, 10, 30), date(2025, 11, 2))
        assert days == [date(2025, 10, 30), date(2025, 10, 31), date(2025, 11, 1), date(2025, 11, 2)]

    def test_range_days_reversed_is_empty(self):
        assert range_days(date(2025, 11, 2), date(2025, 10, 30)) == []

    def test_month_bounds(self):
        assert month_start(date(2025, 2, 14)) == date(2025, 2, 1)
        assert month_end(date(2024, 2, 14)) == date(2024, 2, 29)
        assert month_end(date(2025, 12, 5)) == date(2025, 12, 31)

    @pytest.mark.parametrize("d", [date(2025, 10, 15), date(2026, 2, 1), date(2021, 2, 10)])
    def test_month_grid_full_weeks(self, d):
        grid = month_grid(d)
        assert len(grid) % 7 == 0
        assert grid[0].weekday() == 0
        assert grid[-1].weekday() == 6
        assert month_start(d) in grid
        assert month_end(d) in grid

    def test_month_grid_february_2021_exact(self):
        """Feb. 2021 beginnt Montag, endet Sonntag → genau 4 Wochen."""
        assert len(month_grid(date(2021, 2, 10))) == 28
