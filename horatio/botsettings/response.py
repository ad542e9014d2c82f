"""
Settings responses module.

Commands answer with a Response; turning it into a Discord embed is
left to output.output.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Tuple

from horatio.botsettings.errors import SettingsError
from horatio.output import disp_str


class ResponseKind(Enum):
    """What a response is reporting."""

    SUCCESS = "success"
    ERROR = "error"
    USAGE = "usage"


@dataclass
class Response:
    """
    Command response.

    Parameters:
    - title: Response title
    - desc: Response body
    - kind: Whether this is a normal, error or usage response
    - fields: List of field names and values
    """
    title: str
    desc: str
    kind: ResponseKind = ResponseKind.SUCCESS
    fields: List[Tuple[str, str]] = field(default_factory=list)

    @property
    def is_error(self) -> bool:
        """Whether this response reports an error."""
        return self.kind is ResponseKind.ERROR

    @classmethod
    def simple(cls, disp_type: str, *args) -> "Response":
        """
        Build a success response with its title and description taken
        from disp_str.

        :param disp_type: Display string descriptor, reflects the
            corresponding strings that end with `_title` and `_desc`
        :param args: Arguments to be formatted into the description
        :return: Success response
        """
        desc = disp_str(f"{disp_type}_desc")
        if args:
            desc = desc.format(*args)

        return cls(title=disp_str(f"{disp_type}_title"), desc=desc)

    @classmethod
    def from_error(cls, error: SettingsError) -> "Response":
        """
        Build an error response from a settings error.

        :param error: Settings error raised by a command
        :return: Error response
        """
        return cls(
            title=error.error_header,
            desc=error.error_message,
            kind=ResponseKind.ERROR
        )
