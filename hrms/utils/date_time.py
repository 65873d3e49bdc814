from datetime import datetime, timedelta, timezone
from typing import Optional


def utc_now() -> datetime:
    """Current UTC time as a naive datetime, the form timestamps are stored in"""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def next_timestamp(previous: Optional[datetime]) -> datetime:
    """Current UTC time, nudged past ``previous`` so updates never tie"""
    now = utc_now()
    if previous is not None and now <= previous:
        return previous + timedelta(microseconds=1)
    return now
