"""
Settings errors module.

Every way a settings command can fail is one of the errors below. They
carry a display type so that their titles and messages come from
disp_str like every other string the bot displays; the router turns them
into error responses.
"""

from horatio.output import disp_str


class SettingsError(Exception):
    """
    Settings command error.

    Directs error outputs to disp_str.
    """

    def __init__(self, disp_type: str, *args) -> None:
        """
        Initializer for the SettingsError class.

        :param disp_type: Display type taken from disp_str
        :param args: Arguments to be formatted into the error message
        """
        self.disp_type = disp_type
        self.error_header = disp_str(f"{disp_type}_title")
        self.error_message = disp_str(f"{disp_type}_desc")

        if args:
            self.error_message = self.error_message.format(*args)

        super().__init__(self.error_message)


class NotFoundError(SettingsError):
    """Unknown setting, command or social name."""


class SettingsValidationError(SettingsError):
    """Malformed friend code, timezone, number or identifier."""


class DuplicateValueError(SettingsError):
    """New value is the same as the stored value."""


class MissingArgumentError(SettingsError):
    """A required argument was not given."""


class ExternalServiceError(SettingsError):
    """An external lookup failed; the user has to try again."""
