from models.clock import TimeFormatError
from models.event import Event
from models.timeslot import TimeSlot
from models.layout_box import LayoutBox
from models.calendar_data import CalendarData

__all__ = [
    "TimeFormatError",
    "Event",
    "TimeSlot",
    "LayoutBox",
    "CalendarData",
]
