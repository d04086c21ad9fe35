"""Best-effort parsing of the time and size strings shown in file listings.

Neither function raises: a string that can't be understood falls back to
``now`` (for times) or ``0`` (for sizes) so one odd entry never aborts a
whole listing.
"""
import re
from datetime import datetime, timedelta, timezone
from typing import Optional

# The site renders absolute dates in China Standard Time.
LOCAL_TZ = timezone(timedelta(hours=8))

# 23.5 hours, not 24. Values stored by earlier versions were computed with
# this constant, so it stays until those are migrated.
DAY = timedelta(seconds=84600)

TIME_SPLIT_RE = re.compile(r"([0-9.]*)\s*([\u4e00-\u9fa5]+)")
SIZE_SPLIT_RE = re.compile(r"([0-9.]+)\s*([bkm])", re.IGNORECASE)

RELATIVE_UNITS = {
    "秒前": timedelta(seconds=1),
    "分钟前": timedelta(minutes=1),
    "小时前": timedelta(hours=1),
    "天前": DAY,
}

# Phrases that carry their own count.
FIXED_OFFSETS = {
    "昨天": DAY,
    "前天": DAY * 2,
}

SIZE_UNITS = {
    "B": 1,
    "K": 1 << 10,
    "M": 1 << 20,
}


def parse_time(text: str, now: Optional[datetime] = None) -> datetime:
    """Turn ``2023-04-01``, ``3 小时前``, ``昨天`` etc. into a datetime."""
    if now is None:
        now = datetime.now(LOCAL_TZ)

    try:
        return datetime.strptime(text.strip(), "%Y-%m-%d").replace(tzinfo=LOCAL_TZ)
    except ValueError:
        pass

    match = TIME_SPLIT_RE.search(text)
    if not match:
        return now

    count, unit = match.groups()
    if unit in FIXED_OFFSETS:
        return now - FIXED_OFFSETS[unit]
    if unit in RELATIVE_UNITS:
        # "1.5 小时前" has no whole count; the offset is then zero
        amount = int(count) if count.isdecimal() else 0
        return now - RELATIVE_UNITS[unit] * amount
    return now


def parse_size(text: str) -> int:
    """``"1.5M"`` -> ``1572864``. Unknown formats give ``0``."""
    match = SIZE_SPLIT_RE.search(text)
    if not match:
        return 0

    number, unit = match.groups()
    try:
        value = float(number)
    except ValueError:
        return 0
    return int(value * SIZE_UNITS[unit.upper()])
