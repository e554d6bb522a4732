"""Services combining the schedule engine with a repository."""

from .schedule_view import ScheduleView
from .schedule_editor import ScheduleEditor

__all__ = [
    "ScheduleView",
    "ScheduleEditor",
]
