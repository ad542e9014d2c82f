"""
Settings validators module.

Input checks run before any setting is changed. None of these touch the
settings store; they either return the parsed value or raise a settings
error describing what is wrong with the input.
"""

import re
from datetime import tzinfo
from typing import Callable

import pytz

from horatio.botsettings.errors import (
    DuplicateValueError, SettingsValidationError
)

SWITCH_FC_REGEX = r"SW-[0-9]{4}-[0-9]{4}-[0-9]{4}"
INTEGER_REGEX = r"[+-]?[0-9]+"


def is_switch_fc(code: str) -> bool:
    """
    Check if a string is a Nintendo Switch friend code.

    :param code: Friend code, formatted as SW-0000-0000-0000
    :return: Whether the whole string is a valid friend code
    """
    return re.fullmatch(SWITCH_FC_REGEX, code) is not None


def validate_switch_fc(code: str) -> str:
    """
    Validate a Nintendo Switch friend code.

    :param code: Friend code
    :return: The friend code
    :raises SettingsValidationError: When the friend code is malformed
    """
    if not is_switch_fc(code):
        raise SettingsValidationError("user_social_invalid_switchfc")

    return code


def parse_timeout(text: str) -> int:
    """
    Parse a timeout in seconds.

    :param text: Base-10 integer string; zero disables the timeout
    :return: Timeout in seconds
    :raises SettingsValidationError: When the input is not a number or
        is negative
    """
    if re.fullmatch(INTEGER_REGEX, text) is None:
        raise SettingsValidationError("server_filter_timeout_invalid", text)

    timeout = int(text)
    if timeout < 0:
        raise SettingsValidationError("server_filter_timeout_negative", text)

    return timeout


def resolve_timezone(
        name: str,
        resolver: Callable[[str], tzinfo] = pytz.timezone,
        disp_type: str = "user_timezone_invalid",
        *args
) -> tzinfo:
    """
    Resolve a timezone name.

    :param name: Timezone database name, such as America/New_York
    :param resolver: Callable turning a name into a tzinfo
    :param disp_type: Display type of the error raised on failure
    :param args: Arguments to be formatted into the error message
    :return: Resolved timezone
    :raises SettingsValidationError: When the name does not resolve
    """
    try:
        return resolver(name)
    except (KeyError, ValueError) as e:
        # pytz.UnknownTimeZoneError is a KeyError
        raise SettingsValidationError(disp_type, *args) from e


def check_not_duplicate(current: str, new: str, disp_type: str) -> None:
    """
    Reject setting a value to what it already is.

    :param current: Stored value
    :param new: New value
    :param disp_type: Display type of the error raised on duplicates
    :raises DuplicateValueError: When both values are equal
    """
    if current == new:
        raise DuplicateValueError(disp_type)
