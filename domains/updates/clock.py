"""Calendar adapter - local date and time in the bot's time zone."""

from datetime import datetime
from zoneinfo import ZoneInfo

DAY_KEY_FORMAT = "%Y-%m-%d"
TIME_FORMAT = "%H:%M:%S"


class Clock:
    """Reads wall-clock time in a fixed IANA time zone.

    Every day key and timestamp in the store comes from here, so tests can
    freeze time (freezegun) or pass a custom ``now_func``.
    """

    def __init__(self, timezone: str = "UTC", now_func=None):
        self.tz = ZoneInfo(timezone)
        self._now_func = now_func

    def now(self) -> datetime:
        if self._now_func is not None:
            return self._now_func().astimezone(self.tz)
        return datetime.now(self.tz)

    def today_key(self) -> str:
        """Day bucket key for the current local date (YYYY-MM-DD)."""
        return self.now().strftime(DAY_KEY_FORMAT)

    def hour(self) -> int:
        return self.now().hour

    def time_of_day(self) -> str:
        """Current local time as HH:MM:SS."""
        return self.now().strftime(TIME_FORMAT)
