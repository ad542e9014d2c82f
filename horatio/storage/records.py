"""
Settings records module.

Guild and user settings, along with every nested settings structure.
Records are saved as dictionaries using the key names below; empty
values are left out of the saved dictionaries.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional

from horatio.storage.log_events import LogEvents


def _drop_empty(record_dict: Dict[str, Any]) -> Dict[str, Any]:
    """
    Remove falsy values from a dictionary about to be saved.

    :param record_dict: Dictionary of saved keys to values
    :return: Dictionary without empty strings, lists, zeroes or False
    """
    return {key: value for key, value in record_dict.items() if value}


class SocialKind(Enum):
    """Socials that a user can add to their profile."""

    SWITCH_FC = "switchfc"
    NNID = "nnid"
    PSN = "psn"
    XBOX = "xbox"


_SOCIAL_ATTRS: Dict[SocialKind, str] = {
    SocialKind.SWITCH_FC: "switch_fc",
    SocialKind.NNID: "nnid",
    SocialKind.PSN: "psn",
    SocialKind.XBOX: "xbox"
}


@dataclass
class Socials:
    """Gamertags and friend codes; empty strings are unset."""

    switch_fc: str = ""
    nnid: str = ""
    psn: str = ""
    xbox: str = ""

    def __getitem__(self, kind: SocialKind) -> str:
        return getattr(self, _SOCIAL_ATTRS[kind])

    def __setitem__(self, kind: SocialKind, value: str) -> None:
        setattr(self, _SOCIAL_ATTRS[kind], value)

    def to_dict(self) -> dict:
        """Save socials to a dictionary for YAML dumping."""
        return _drop_empty({
            "switchFC": self.switch_fc,
            "nintyID": self.nnid,
            "psn": self.psn,
            "xbox": self.xbox
        })

    @classmethod
    def from_dict(cls, socials_dict: dict) -> "Socials":
        """Load socials from a saved dictionary."""
        return cls(
            switch_fc=str(socials_dict.get("switchFC", "")),
            nnid=str(socials_dict.get("nintyID", "")),
            psn=str(socials_dict.get("psn", "")),
            xbox=str(socials_dict.get("xbox", ""))
        )


@dataclass
class UserSettings:
    """Settings specific to a user."""

    balance: int = 0
    daily_next: Optional[datetime] = None
    about_me: str = ""
    timezone: str = ""
    socials: Socials = field(default_factory=Socials)

    def to_dict(self) -> dict:
        """Save user settings to a dictionary for YAML dumping."""
        return _drop_empty({
            "balance": self.balance,
            "dailyNext": (
                self.daily_next.isoformat()
                if self.daily_next is not None else ""
            ),
            "description": self.about_me,
            "timezone": self.timezone,
            "socials": self.socials.to_dict()
        })

    @classmethod
    def from_dict(cls, user_dict: dict) -> "UserSettings":
        """
        Load user settings from a saved dictionary.

        :param user_dict: Saved user settings
        :return: UserSettings object
        :raises ValueError: When the saved daily timestamp is malformed
        """
        daily_next = user_dict.get("dailyNext")
        if isinstance(daily_next, str) and daily_next:
            daily_next = datetime.fromisoformat(daily_next)
        elif not isinstance(daily_next, datetime):
            daily_next = None

        return cls(
            balance=int(user_dict.get("balance", 0)),
            daily_next=daily_next,
            about_me=str(user_dict.get("description", "")),
            timezone=str(user_dict.get("timezone", "")),
            socials=Socials.from_dict(user_dict.get("socials", {}))
        )


@dataclass
class LogSettings:
    """Guild event logging settings."""

    logging_enabled: bool = False
    logging_channel: str = ""
    logging_events: LogEvents = field(default_factory=LogEvents)

    def to_dict(self) -> dict:
        """Save log settings to a dictionary for YAML dumping."""
        return {
            "loggingEnabled": self.logging_enabled,
            "loggingChannel": self.logging_channel,
            "loggingEvents": self.logging_events.to_dict()
        }

    @classmethod
    def from_dict(cls, log_dict: dict) -> "LogSettings":
        """Load log settings from a saved dictionary."""
        return cls(
            logging_enabled=bool(log_dict.get("loggingEnabled", False)),
            logging_channel=str(log_dict.get("loggingChannel", "")),
            logging_events=LogEvents.from_dict(
                log_dict.get("loggingEvents", {})
            )
        )


@dataclass
class SwearFilter:
    """Guild swear filter settings."""

    enabled: bool = False
    blacklisted_words: List[str] = field(default_factory=list)
    disable_normalize: bool = False
    disable_spaced_tab: bool = False
    disable_multi_whitespace_stripping: bool = False
    disable_zero_width_stripping: bool = False
    disable_spaced_bypass: bool = False
    warning_delete_timeout: int = 0
    allow_admin_bypass: bool = False
    allow_bot_owner_bypass: bool = False

    def to_dict(self) -> dict:
        """Save swear filter settings to a dictionary for YAML dumping."""
        return _drop_empty({
            "enabled": self.enabled,
            "blacklistedWords": list(self.blacklisted_words),
            "disableNormalize": self.disable_normalize,
            "disableSpacedTab": self.disable_spaced_tab,
            "disableMultiWhitespaceStripping": (
                self.disable_multi_whitespace_stripping
            ),
            "disableZeroWidthStripping": self.disable_zero_width_stripping,
            "disableSpacedBypass": self.disable_spaced_bypass,
            "warningDeleteTimeout": self.warning_delete_timeout,
            "allowAdminBypass": self.allow_admin_bypass,
            "allowBotOwnerBypass": self.allow_bot_owner_bypass
        })

    @classmethod
    def from_dict(cls, filter_dict: dict) -> "SwearFilter":
        """Load swear filter settings from a saved dictionary."""
        return cls(
            enabled=bool(filter_dict.get("enabled", False)),
            blacklisted_words=[
                str(word) for word in filter_dict.get("blacklistedWords", [])
            ],
            disable_normalize=bool(filter_dict.get("disableNormalize", False)),
            disable_spaced_tab=bool(
                filter_dict.get("disableSpacedTab", False)
            ),
            disable_multi_whitespace_stripping=bool(
                filter_dict.get("disableMultiWhitespaceStripping", False)
            ),
            disable_zero_width_stripping=bool(
                filter_dict.get("disableZeroWidthStripping", False)
            ),
            disable_spaced_bypass=bool(
                filter_dict.get("disableSpacedBypass", False)
            ),
            warning_delete_timeout=int(
                filter_dict.get("warningDeleteTimeout", 0)
            ),
            allow_admin_bypass=bool(
                filter_dict.get("allowAdminBypass", False)
            ),
            allow_bot_owner_bypass=bool(
                filter_dict.get("allowBotOwnerBypass", False)
            )
        )


@dataclass
class GuildSettings:
    """
    Settings specific to a guild.

    Custom responses, role menus, feeds and bot option overrides belong
    to other features; they are kept as plain dictionaries here and
    saved back untouched.
    """

    allow_voice: bool = False
    bot_admin_roles: List[str] = field(default_factory=list)
    bot_admin_users: List[str] = field(default_factory=list)
    bot_options: Dict[str, bool] = field(default_factory=dict)
    bot_prefix: str = ""
    custom_responses: List[dict] = field(default_factory=list)
    log_settings: LogSettings = field(default_factory=LogSettings)
    swear_filter: SwearFilter = field(default_factory=SwearFilter)
    tips_channel: str = ""
    user_join_message: str = ""
    user_join_message_channel: str = ""
    user_leave_message: str = ""
    user_leave_message_channel: str = ""
    role_me_list: List[dict] = field(default_factory=list)
    auto_send_now_playing: bool = False
    api_invite_channel: str = ""
    api_invite_key: str = ""
    feeds: List[dict] = field(default_factory=list)

    def to_dict(self) -> dict:
        """Save guild settings to a dictionary for YAML dumping."""
        guild_dict = _drop_empty({
            "allowVoice": self.allow_voice,
            "adminRoles": list(self.bot_admin_roles),
            "adminUsers": list(self.bot_admin_users),
            "botOptions": dict(self.bot_options),
            "botPrefix": self.bot_prefix,
            "customResponses": list(self.custom_responses),
            "swearFilter": self.swear_filter.to_dict(),
            "tipsChannel": self.tips_channel,
            "userJoinMessage": self.user_join_message,
            "userJoinMessageChannel": self.user_join_message_channel,
            "userLeaveMessage": self.user_leave_message,
            "userLeaveMessageChannel": self.user_leave_message_channel,
            "roleMeList": list(self.role_me_list),
            "autoSendNowPlaying": self.auto_send_now_playing,
            "apiInviteChannel": self.api_invite_channel,
            "apiInviteKey": self.api_invite_key,
            "feeds": list(self.feeds)
        })
        guild_dict["logSettings"] = self.log_settings.to_dict()
        return guild_dict

    @classmethod
    def from_dict(cls, guild_dict: dict) -> "GuildSettings":
        """
        Load guild settings from a saved dictionary.

        :param guild_dict: Saved guild settings
        :return: GuildSettings object
        :raises TypeError: When a nested structure has the wrong type
        :raises ValueError: When a numeric setting is malformed
        """
        return cls(
            allow_voice=bool(guild_dict.get("allowVoice", False)),
            bot_admin_roles=[str(r) for r in guild_dict.get("adminRoles", [])],
            bot_admin_users=[str(u) for u in guild_dict.get("adminUsers", [])],
            bot_options=dict(guild_dict.get("botOptions", {})),
            bot_prefix=str(guild_dict.get("botPrefix", "")),
            custom_responses=list(guild_dict.get("customResponses", [])),
            log_settings=LogSettings.from_dict(
                guild_dict.get("logSettings", {})
            ),
            swear_filter=SwearFilter.from_dict(
                guild_dict.get("swearFilter", {})
            ),
            tips_channel=str(guild_dict.get("tipsChannel", "")),
            user_join_message=str(guild_dict.get("userJoinMessage", "")),
            user_join_message_channel=str(
                guild_dict.get("userJoinMessageChannel", "")
            ),
            user_leave_message=str(guild_dict.get("userLeaveMessage", "")),
            user_leave_message_channel=str(
                guild_dict.get("userLeaveMessageChannel", "")
            ),
            role_me_list=list(guild_dict.get("roleMeList", [])),
            auto_send_now_playing=bool(
                guild_dict.get("autoSendNowPlaying", False)
            ),
            api_invite_channel=str(guild_dict.get("apiInviteChannel", "")),
            api_invite_key=str(guild_dict.get("apiInviteKey", "")),
            feeds=list(guild_dict.get("feeds", []))
        )
