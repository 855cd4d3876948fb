from datetime import datetime, timedelta
from typing import Callable
from zoneinfo import ZoneInfo

Clock = Callable[[], datetime]

def now_tz(tz_name: str) -> datetime:
    return datetime.now(ZoneInfo(tz_name))

def clock_for(tz_name: str) -> Clock:
    tz = ZoneInfo(tz_name)
    return lambda: datetime.now(tz)

def in_seconds(tz_name: str, seconds: float) -> datetime:
    return now_tz(tz_name) + timedelta(seconds=seconds)
