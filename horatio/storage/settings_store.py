"""
Settings store module.

Owns every guild and user settings record. Records must be provisioned
with ensure_guild or ensure_user before anything reads them; commands
then reach them through the guild and user context managers, which
serialize all access per guild and per user.

Saved settings are kept as YAML files, one for guilds and one for
users.
"""

import os
from contextlib import asynccontextmanager
from typing import AsyncIterator, Dict, Optional

import yaml
from loguru import logger

from horatio.storage.key_lock import KeyLock
from horatio.storage.records import GuildSettings, UserSettings


class UnprovisionedError(KeyError):
    """When a record is requested for an ID that was never ensured."""


class SettingsStore:
    """Guild and user settings store."""

    __slots__ = ["guilds", "users", "guild_locks", "user_locks"]

    def __init__(
            self,
            guilds: Optional[Dict[str, GuildSettings]] = None,
            users: Optional[Dict[str, UserSettings]] = None
    ) -> None:
        """
        Initializer for the SettingsStore class.

        :param guilds: Existing guild settings keyed by guild ID
        :param users: Existing user settings keyed by user ID
        """
        self.guilds: Dict[str, GuildSettings] = guilds or {}
        self.users: Dict[str, UserSettings] = users or {}
        self.guild_locks = KeyLock()
        self.user_locks = KeyLock()

    def ensure_guild(self, guild_id) -> GuildSettings:
        """
        Provision a guild settings record if there isn't one yet.

        :param guild_id: Guild ID
        :return: Guild settings record
        """
        guild_id = str(guild_id)
        if guild_id not in self.guilds:
            logger.debug("Provisioning settings for guild {}", guild_id)
            self.guilds[guild_id] = GuildSettings()

        return self.guilds[guild_id]

    def ensure_user(self, user_id) -> UserSettings:
        """
        Provision a user settings record if there isn't one yet.

        :param user_id: User ID
        :return: User settings record
        """
        user_id = str(user_id)
        if user_id not in self.users:
            logger.debug("Provisioning settings for user {}", user_id)
            self.users[user_id] = UserSettings()

        return self.users[user_id]

    def get_guild(self, guild_id) -> GuildSettings:
        """
        Get the settings record of a provisioned guild.

        :param guild_id: Guild ID
        :return: Guild settings record
        :raises UnprovisionedError: When the guild was never provisioned
        """
        try:
            return self.guilds[str(guild_id)]
        except KeyError as e:
            raise UnprovisionedError(f"guild {guild_id}") from e

    def get_user(self, user_id) -> UserSettings:
        """
        Get the settings record of a provisioned user.

        :param user_id: User ID
        :return: User settings record
        :raises UnprovisionedError: When the user was never provisioned
        """
        try:
            return self.users[str(user_id)]
        except KeyError as e:
            raise UnprovisionedError(f"user {user_id}") from e

    def has_user(self, user_id) -> bool:
        """Check if a user has a settings record."""
        return str(user_id) in self.users

    def guild_prefix(self, guild_id, default: str) -> str:
        """
        Get the command prefix used in a guild.

        :param guild_id: Guild ID
        :param default: Global command prefix
        :return: Guild prefix override, or the default if the guild has
            no override or no record
        """
        guild = self.guilds.get(str(guild_id))
        if guild is None or not guild.bot_prefix:
            return default

        return guild.bot_prefix

    @asynccontextmanager
    async def guild(self, guild_id) -> AsyncIterator[GuildSettings]:
        """
        Hold the lock of a guild and work on its settings record.

        :param guild_id: Guild ID
        :raises UnprovisionedError: When the guild was never provisioned
        """
        guild_id = str(guild_id)
        async with self.guild_locks.hold(guild_id):
            yield self.get_guild(guild_id)

    @asynccontextmanager
    async def user(self, user_id) -> AsyncIterator[UserSettings]:
        """
        Hold the lock of a user and work on their settings record.

        :param user_id: User ID
        :raises UnprovisionedError: When the user was never provisioned
        """
        user_id = str(user_id)
        async with self.user_locks.hold(user_id):
            yield self.get_user(user_id)

    async def save_files(self, guild_path: str, user_path: str) -> None:
        """
        Save all settings records to YAML files.

        :param guild_path: Path of the guild settings file
        :param user_path: Path of the user settings file
        """
        guilds_dict = {
            guild_id: guild.to_dict() for guild_id, guild in self.guilds.items()
        }
        users_dict = {
            user_id: user.to_dict() for user_id, user in self.users.items()
        }

        for path, save_dict in [(guild_path, guilds_dict), (user_path, users_dict)]:
            directory = os.path.dirname(path)
            if directory:
                os.makedirs(directory, exist_ok=True)

            with open(path, "w", encoding="utf-8") as save_target:
                yaml.dump(
                    save_dict,
                    save_target,
                    default_flow_style=False,
                    allow_unicode=True
                )

        logger.debug(
            "Saved settings for {} guild(s) and {} user(s).",
            len(guilds_dict),
            len(users_dict)
        )

    async def load_files(self, guild_path: str, user_path: str) -> None:
        """
        Load settings records from YAML files.

        Missing files are skipped, and so are entries that fail to
        parse; records already in the store are replaced by loaded ones.

        :param guild_path: Path of the guild settings file
        :param user_path: Path of the user settings file
        """
        for guild_id, guild_dict in self.read_file(guild_path).items():
            try:
                self.guilds[str(guild_id)] = GuildSettings.from_dict(guild_dict)
            except (AttributeError, TypeError, ValueError):
                logger.warning(
                    "Failed to parse settings for guild ID {}",
                    guild_id
                )

        for user_id, user_dict in self.read_file(user_path).items():
            try:
                self.users[str(user_id)] = UserSettings.from_dict(user_dict)
            except (AttributeError, TypeError, ValueError):
                logger.warning(
                    "Failed to parse settings for user ID {}",
                    user_id
                )

        logger.info(
            "Loaded settings for {} guild(s) and {} user(s).",
            len(self.guilds),
            len(self.users)
        )

    @staticmethod
    def read_file(path: str) -> dict:
        """
        Read a YAML settings file.

        :param path: Path of settings file
        :return: Parsed dictionary, or an empty dictionary if the file
            does not exist or is empty
        """
        if not os.path.exists(path):
            return {}

        with open(path, "r", encoding="utf-8") as file:
            settings_dict = yaml.safe_load(file)

        if not isinstance(settings_dict, dict):
            return {}

        return settings_dict
