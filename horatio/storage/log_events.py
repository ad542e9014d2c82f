"""
Logging events module.

Guild logging can be toggled per event category. Categories are
addressed by users through their names (for example "server log enable
ChannelCreate GuildBanAdd"), so the set of valid names is declared here
once and used for every lookup, bulk toggle and preset.
"""

from enum import Enum
from typing import Dict, FrozenSet, Iterable, List, Tuple


class LogEvent(Enum):
    """Loggable event categories; values are the user-facing names."""

    # Events received from Discord
    CHANNEL_CREATE = "ChannelCreate"
    CHANNEL_DELETE = "ChannelDelete"
    CHANNEL_UPDATE = "ChannelUpdate"
    GUILD_BAN_ADD = "GuildBanAdd"
    GUILD_BAN_REMOVE = "GuildBanRemove"
    GUILD_EMOJIS_UPDATE = "GuildEmojisUpdate"
    GUILD_MEMBER_ADD = "GuildMemberAdd"
    GUILD_MEMBER_REMOVE = "GuildMemberRemove"
    GUILD_ROLE_CREATE = "GuildRoleCreate"
    GUILD_ROLE_DELETE = "GuildRoleDelete"
    GUILD_ROLE_UPDATE = "GuildRoleUpdate"
    GUILD_UPDATE = "GuildUpdate"
    USER_UPDATE = "UserUpdate"
    VOICE_STATE_UPDATE = "VoiceStateUpdate"

    # Custom events
    SWEAR_DETECT = "SwearDetect"
    USER_MODLOG = "UserModlog"

    @property
    def persist_key(self) -> str:
        """Key used for this event in saved settings files."""
        return self.value[0].lower() + self.value[1:]


EVENT_NAMES: Dict[str, LogEvent] = {event.value: event for event in LogEvent}
PERSIST_KEYS: Dict[str, LogEvent] = {
    event.persist_key: event for event in LogEvent
}

RECOMMENDED_EVENTS: FrozenSet[LogEvent] = frozenset({
    LogEvent.CHANNEL_CREATE,
    LogEvent.CHANNEL_DELETE,
    LogEvent.GUILD_BAN_ADD,
    LogEvent.GUILD_BAN_REMOVE,
    LogEvent.GUILD_MEMBER_ADD,
    LogEvent.GUILD_MEMBER_REMOVE,
    LogEvent.GUILD_ROLE_CREATE,
    LogEvent.GUILD_ROLE_DELETE,
    LogEvent.GUILD_ROLE_UPDATE,
    LogEvent.GUILD_UPDATE,
    LogEvent.SWEAR_DETECT,
    LogEvent.USER_MODLOG,
    LogEvent.VOICE_STATE_UPDATE
})


class LogEvents:
    """Enabled state of every logging event category."""

    __slots__ = ["states"]

    def __init__(self, enabled: Iterable[LogEvent] = ()) -> None:
        """
        Initializer for the LogEvents class.

        :param enabled: Events that start out enabled; every other event
            starts out disabled
        """
        enabled_set = set(enabled)
        self.states: Dict[LogEvent, bool] = {
            event: event in enabled_set for event in LogEvent
        }

    def __getitem__(self, event: LogEvent) -> bool:
        return self.states[event]

    def __setitem__(self, event: LogEvent, value: bool) -> None:
        self.states[event] = bool(value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LogEvents):
            return NotImplemented
        return self.states == other.states

    def __repr__(self) -> str:
        enabled = [event.value for event in LogEvent if self.states[event]]
        return f"LogEvents({enabled})"

    def to_dict(self) -> Dict[str, bool]:
        """Save the event states to a dictionary for YAML dumping."""
        return {
            event.persist_key: self.states[event] for event in LogEvent
        }

    @classmethod
    def from_dict(cls, events_dict: dict) -> "LogEvents":
        """
        Load event states from a saved dictionary.

        Unknown keys are ignored and missing keys default to disabled.

        :param events_dict: Dictionary of persisted event keys to states
        :return: LogEvents object
        """
        return cls(
            PERSIST_KEYS[key] for key, value in events_dict.items()
            if key in PERSIST_KEYS and value
        )


class LogEventFlags:
    """
    Name-indexed view over a LogEvents object.

    Names are matched exactly (case-sensitive) against the LogEvent
    values. Names that are not recognized are never created; they are
    reported back to the caller instead.
    """

    __slots__ = ["events"]

    def __init__(self, events: LogEvents) -> None:
        """
        Initializer for the LogEventFlags class.

        :param events: Event states to read and modify in place
        """
        self.events = events

    @staticmethod
    def names() -> List[str]:
        """Get all recognized event names in declaration order."""
        return list(EVENT_NAMES)

    def lookup(self, name: str) -> Tuple[bool, bool]:
        """
        Look up an event flag by name.

        :param name: Event name
        :return: Tuple of the flag value (False if not found) and
            whether the name was recognized
        """
        event = EVENT_NAMES.get(name)
        if event is None:
            return False, False

        return self.events[event], True

    def set(self, name: str, value: bool) -> bool:
        """
        Set a single event flag by name.

        :param name: Event name
        :param value: New flag value
        :return: Whether the name was recognized
        """
        event = EVENT_NAMES.get(name)
        if event is None:
            return False

        self.events[event] = value
        return True

    def set_all(self, value: bool) -> None:
        """
        Set every event flag to the same value.

        :param value: New flag value
        """
        for event in LogEvent:
            self.events[event] = value

    def apply_preset(self, preset: Iterable[LogEvent]) -> None:
        """
        Replace every flag with a preset; events in the preset are
        enabled and every other event is disabled.

        :param preset: Events enabled by the preset
        """
        preset_set = frozenset(preset)
        for event in LogEvent:
            self.events[event] = event in preset_set

    def set_many(
            self,
            names: Iterable[str],
            value: bool
    ) -> Tuple[List[str], List[str]]:
        """
        Set several event flags by name.

        Every name is handled on its own, so unknown names never stop
        known names from being applied.

        :param names: Event names
        :param value: New flag value
        :return: Tuple of the names that were applied and the names that
            were not recognized, both in input order
        """
        applied: List[str] = []
        failed: List[str] = []
        for name in names:
            if name in EVENT_NAMES:
                applied.append(name)
            else:
                failed.append(name)

        for name in applied:
            self.events[EVENT_NAMES[name]] = value

        return applied, failed

    def states(self) -> List[Tuple[str, bool]]:
        """
        Get every event name with its state.

        :return: List of event names and flag values in declaration
            order
        """
        return [(event.value, self.events[event]) for event in LogEvent]
