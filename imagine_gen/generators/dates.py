from __future__ import annotations
import math
from datetime import datetime, timedelta, timezone
from email.utils import format_datetime
from typing import Optional, Union

from imagine_gen.core.errors import InvalidArgument
from imagine_gen.core.rng import Seed, rng_from
from imagine_gen.core.seed import get_global_rng

# fixed tables; never read from the locale
MONTHS = [
    (1, "January", "Jan"), (2, "February", "Feb"), (3, "March", "Mar"), (4, "April", "Apr"),
    (5, "May", "May"), (6, "June", "Jun"), (7, "July", "Jul"), (8, "August", "Aug"),
    (9, "September", "Sep"), (10, "October", "Oct"), (11, "November", "Nov"), (12, "December", "Dec"),
]
WEEKDAYS = ["Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday"]

DEFAULT_START = datetime(2000, 1, 1, tzinfo=timezone.utc)
DEFAULT_END = datetime(2030, 12, 31, tzinfo=timezone.utc)
EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

DateInput = Union[datetime, str]


def _parse(value: Optional[DateInput]) -> Optional[datetime]:
    if value is None:
        return None
    if isinstance(value, datetime):
        d = value
    else:
        try:
            d = datetime.fromisoformat(str(value).replace("Z", "+00:00"))
        except ValueError:
            raise InvalidArgument(f"invalid date: {value!r}") from None
    # naive inputs are read as UTC
    return d if d.tzinfo is not None else d.replace(tzinfo=timezone.utc)


def _shift_years(d: datetime, years: int) -> datetime:
    try:
        return d.replace(year=d.year + years)
    except ValueError:  # Feb 29 into a non-leap year
        return d.replace(year=d.year + years, day=28)


def _to_ms(d: datetime) -> int:
    return (d - EPOCH) // timedelta(milliseconds=1)


def _format(d: datetime, fmt: Optional[str]):
    if not fmt:
        return d
    if fmt == "unix":
        return math.floor(_to_ms(d) / 1000)
    if fmt == "utc":
        return format_datetime(d, usegmt=True)
    if fmt == "local":
        return d.astimezone().isoformat(timespec="milliseconds")
    # "iso" and any unknown format string
    # %Y is not zero-padded below year 1000 on every platform
    return f"{d.year:04d}-{d:%m-%dT%H:%M:%S}.{d.microsecond // 1000:03d}Z"


def date(*, start: Optional[DateInput] = None, end: Optional[DateInput] = None,
         past_years: Optional[int] = None, future_years: Optional[int] = None,
         format: Optional[str] = None, seed: Optional[Seed] = None):
    """Random UTC datetime with millisecond resolution.

    `past_years` / `future_years` override the range relative to now;
    otherwise [start, end] is used (default 2000-01-01..2030-12-31, swapped
    when reversed). `format` is None (datetime), 'iso', 'unix', 'utc' or
    'local'; other strings fall back to 'iso'.
    """
    rng = rng_from(seed, get_global_rng())
    now = datetime.now(timezone.utc)
    lo = _parse(start)
    hi = _parse(end)
    if past_years is not None:
        lo, hi = _shift_years(now, -max(0, math.floor(past_years))), now
    if future_years is not None:
        lo, hi = now, _shift_years(now, max(0, math.floor(future_years)))
    lo = lo or DEFAULT_START
    hi = hi or DEFAULT_END
    if lo > hi:
        lo, hi = hi, lo
    lo_ms, hi_ms = _to_ms(lo), _to_ms(hi)
    t = lo_ms + math.floor(rng.next() * (hi_ms - lo_ms + 1))
    return _format(EPOCH + timedelta(milliseconds=t), format)


def time(*, seed: Optional[Seed] = None) -> str:
    """24-hour 'HH:MM:SS'."""
    rng = rng_from(seed, get_global_rng())
    h = math.floor(rng.next() * 24)
    m = math.floor(rng.next() * 60)
    s = math.floor(rng.next() * 60)
    return f"{h:02d}:{m:02d}:{s:02d}"


def timestamp(*, seed: Optional[Seed] = None) -> int:
    """Unix seconds within the last ten years."""
    return date(past_years=10, format="unix", seed=seed)


def year(start: int = 1970, end: int = 2099, *, seed: Optional[Seed] = None) -> int:
    rng = rng_from(seed, get_global_rng())
    if start > end:
        start, end = end, start
    return math.floor(rng.next() * (end - start + 1)) + start


def month(*, as_: str = "index", seed: Optional[Seed] = None):
    """Month number 1..12, or its English name with ``as_="name"``."""
    rng = rng_from(seed, get_global_rng())
    index, name, _short = rng.pick(MONTHS)
    return name if as_ == "name" else index


def day(*, seed: Optional[Seed] = None) -> int:
    # 1..28 is valid in every month
    rng = rng_from(seed, get_global_rng())
    return 1 + math.floor(rng.next() * 28)


def day_of_the_week(*, seed: Optional[Seed] = None) -> str:
    rng = rng_from(seed, get_global_rng())
    return rng.pick(WEEKDAYS)
