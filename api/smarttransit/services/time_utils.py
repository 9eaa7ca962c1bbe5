from datetime import datetime, timedelta
from typing import List, Optional


def format_time(dt: datetime) -> str:
    """12-hour clock without a leading zero, e.g. ``3:05 PM``."""
    hour = dt.hour % 12 or 12
    suffix = "AM" if dt.hour < 12 else "PM"
    return f"{hour}:{dt.minute:02d} {suffix}"


def format_time_24(dt: datetime) -> str:
    return f"{dt.hour:02d}:{dt.minute:02d}"


def add_minutes_to_current_time(minutes: float, now: Optional[datetime] = None) -> str:
    now = now or datetime.now()
    return format_time(now + timedelta(minutes=minutes))


def minutes_to_actual_time(minutes: float, now: Optional[datetime] = None) -> str:
    return add_minutes_to_current_time(minutes, now)


def generate_bus_arrival_times(base_minutes: List[float], now: Optional[datetime] = None) -> List[str]:
    now = now or datetime.now()
    return [add_minutes_to_current_time(m, now) for m in base_minutes]


def time_difference_in_minutes(time1: str, time2: str) -> int:
    h1, m1 = (int(p) for p in time1.split(":"))
    h2, m2 = (int(p) for p in time2.split(":"))
    return abs((h2 * 60 + m2) - (h1 * 60 + m1))
