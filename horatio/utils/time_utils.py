"""Time utils module."""

from datetime import datetime, tzinfo

import pytz

DISPLAY_TIME_FORMAT = "%Y-%m-%d %H:%M:%S %Z (UTC%z)"


def utc_time_now() -> datetime:
    """
    Get current UTC timezone aware time.

    :return: Timezone aware datetime
    """
    return datetime.now(pytz.utc)


def local_time_now(timezone: tzinfo) -> datetime:
    """
    Get the current time in a timezone.

    :param timezone: Target timezone
    :return: Timezone aware datetime
    """
    return utc_time_now().astimezone(timezone)


def format_time(time: datetime) -> str:
    """
    Format a timezone aware datetime for display.

    :param time: Timezone aware datetime
    :return: Formatted time string
    """
    return time.strftime(DISPLAY_TIME_FORMAT)
