# SPDX-License-Identifier: MIT

import datetime
from typing import Any, Optional, cast

import pendulum


def now_utc() -> pendulum.DateTime:
    return pendulum.now("UTC")


def python_to_pendulum_utc(python_value: datetime.datetime) -> pendulum.DateTime:
    pendulum_value = pendulum.instance(python_value, tz="UTC")
    return pendulum_value.in_tz("UTC")


def datetime_to_iso_str(datetime: pendulum.DateTime) -> str:
    return datetime.isoformat()


def datetime_from_str(datetime: str) -> pendulum.DateTime:
    parsed = pendulum.parse(datetime)
    if not isinstance(parsed, pendulum.DateTime):
        raise ValueError(f"not a date-time value: {datetime!r}")
    return cast(pendulum.DateTime, parsed.in_tz("UTC"))


def datetime_from_value(value: Any) -> pendulum.DateTime:
    """
    Parse a persisted timestamp.

    Accepts ISO-8601 strings and the datetime objects YAML produces for
    unquoted timestamps in hand-edited files.
    """
    if isinstance(value, datetime.datetime):
        return python_to_pendulum_utc(value)
    if isinstance(value, str):
        return datetime_from_str(value)
    raise TypeError(f"unsupported timestamp value: {value!r}")


def next_edit_timestamp(
    previous: Optional[pendulum.DateTime],
) -> pendulum.DateTime:
    """Current time, never earlier than the previous edit of the same note."""
    current = now_utc()
    if previous is not None and current < previous:
        return previous
    return current


def datetime_to_display_local_date_str(datetime: pendulum.DateTime) -> str:
    return datetime.in_tz("local").format("YYYY-MM-DD ddd")


def datetime_to_display_local_datetime_str(datetime: pendulum.DateTime) -> str:
    return datetime.in_tz("local").format("YYYY-MM-DD HH:mm")


def datetime_to_display_local_datetime_str_optional(
    datetime: Optional[pendulum.DateTime],
) -> Optional[str]:
    if datetime is None:
        return None
    return datetime_to_display_local_datetime_str(datetime)
