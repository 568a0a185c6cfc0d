"""Time helpers."""

from __future__ import annotations

import datetime as dt
import time

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def now_ms() -> int:
    return time.time_ns() // 1_000_000


def format_local_ms(millis: int) -> str:
    moment = dt.datetime.fromtimestamp(millis / 1000, tz=dt.UTC).astimezone()
    return moment.strftime(TIMESTAMP_FORMAT)
