"""Text util functions module."""

import re
from typing import Iterable, Optional

USER_REGEX = r"<@!?([0-9]+)>"


def escape_code(text: str) -> str:
    """
    Escape backticks so that text can be shown inside inline code.

    :param text: Raw text
    :return: Text with every backtick escaped
    """
    return text.replace("`", "\\`")


def get_user_id(mention: str) -> Optional[str]:
    """
    Extract a user ID from a user mention.

    :param mention: Mention string, such as <@1234> or <@!1234>
    :return: User ID string, or None if the input is not a mention
    """
    matches = re.fullmatch(USER_REGEX, mention.strip())
    if matches:
        return matches.group(1)

    return None


def bool_str(value: bool) -> str:
    """Lowercase string representation of a boolean."""
    return "true" if value else "false"


def join_names(names: Iterable[str]) -> str:
    """Join names into a comma-separated list."""
    return ", ".join(names)
