"""
Output strings module.

Every string that the bot shows to Discord users is looked up through
disp_str; the strings themselves live in eng_strings. The functions that
actually talk to Discord are kept in output.output so that the settings
core can build responses without importing the Discord library.
"""

from horatio import settings
from horatio.output import eng_strings

DEFAULT_LANG = "eng"

# Turned into a dict at runtime, so that we don't have to use getattr.
ENG_STRINGS = {
    name: value for name, value in vars(eng_strings).items()
    if not name.startswith("__")
}


def disp_str(str_name: str, lang: str = DEFAULT_LANG) -> str:
    """
    Retrieves display string based on string name.

    :param str_name: Name of string
    :param lang: Language of string
    :return: Pre-formatted string
    """
    if lang == "eng" and str_name in ENG_STRINGS:
        return ENG_STRINGS[str_name].replace(
            "%PREFIX%", settings.command_prefix
        )

    return ""
