"""
Settings command context module.

Everything a settings command needs apart from its arguments: who sent
it and where, and the store and outside services it works with.
"""

from dataclasses import dataclass
from datetime import tzinfo
from typing import Callable, Optional, Tuple

import pytz

from horatio import settings
from horatio.storage.settings_store import SettingsStore
from horatio.utils.identity_utils import NNIDChecker


@dataclass(frozen=True)
class RequestContext:
    """
    Origin of a settings command.

    Parameters:
    - user_id: ID of the user who sent the command
    - guild_id: ID of the guild the command was sent in
    - channel_id: ID of the channel the command was sent in
    - mentions: IDs of users mentioned in the command message
    - prefix: Command prefix in effect, used in usage examples
    """
    user_id: str
    guild_id: str
    channel_id: str
    mentions: Tuple[str, ...] = ()
    prefix: str = settings.command_prefix


@dataclass
class SettingsServices:
    """
    Settings store and the outside services used by settings commands.

    Parameters:
    - store: Guild and user settings store
    - timezone_resolver: Callable turning a timezone name into a tzinfo,
        raising KeyError or ValueError for unknown names
    - nnid_checker: Nintendo Network ID checker, or None if NNID lookups
        are unavailable
    """
    store: SettingsStore
    timezone_resolver: Callable[[str], tzinfo] = pytz.timezone
    nnid_checker: Optional[NNIDChecker] = None
