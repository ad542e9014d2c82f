"""
Settings module.

Discord commands for bot, user and server settings. Arguments are handed
to the settings command tree, and its response is sent back as an
embed.
"""

from typing import Sequence

from discord.ext import commands, tasks
from discord.ext.commands import Context
from loguru import logger

from horatio import settings
from horatio.botsettings.context import RequestContext, SettingsServices
from horatio.botsettings.router import run_command
from horatio.botsettings.settings_tree import SETTINGS_ROOT
from horatio.output.output import send_response
from horatio.storage.settings_store import SettingsStore
from horatio.utils.identity_utils import NNIDChecker

GUILD_SETTINGS_PATH = settings.file_guild_settings
USER_SETTINGS_PATH = settings.file_user_settings
SAVE_INTERVAL_MINUTES = settings.settings_save_interval_minutes


class SettingsCog(commands.Cog, name="settings"):
    """
    Bot, user and server settings.

    Settings are kept per server and per user, and saved to disk
    periodically and on shutdown.
    """

    __slots__ = ["bot", "store", "services"]

    # Using forward references to avoid cyclic imports
    # noinspection PyUnresolvedReferences
    def __init__(self, bot: "HoratioBot", store: SettingsStore) -> None:
        """
        Initializer for the SettingsCog class.

        :param bot: Horatio bot object
        :param store: Settings store shared with the bot
        """
        self.bot = bot
        self.store = store
        self.services = SettingsServices(
            store=store,
            nnid_checker=NNIDChecker()
        )

    async def load_settings(self) -> None:
        """Load saved settings and start saving them periodically."""
        await self.store.load_files(GUILD_SETTINGS_PATH, USER_SETTINGS_PATH)
        self.save_settings.start()  # pylint: disable=no-member

    async def cog_save_all(self) -> None:
        """Save all guild and user settings."""
        await self.store.save_files(GUILD_SETTINGS_PATH, USER_SETTINGS_PATH)

    @tasks.loop(minutes=SAVE_INTERVAL_MINUTES)
    async def save_settings(self) -> None:
        """Save backup of settings."""
        await self.cog_save_all()

    async def run_settings(
            self,
            context: Context,
            domain: str,
            args: Sequence[str]
    ) -> None:
        """
        Run a settings command and send its response.

        :param context: Command context
        :param domain: Settings domain; bot, user or server
        :param args: Command arguments
        """
        guild_id = str(context.guild.id)
        user_id = str(context.author.id)
        self.store.ensure_guild(guild_id)
        self.store.ensure_user(user_id)

        request = RequestContext(
            user_id=user_id,
            guild_id=guild_id,
            channel_id=str(context.channel.id),
            mentions=tuple(
                str(mention) for mention in context.message.raw_mentions
            ),
            prefix=self.store.guild_prefix(guild_id, settings.command_prefix)
        )

        logger.trace(
            "Settings command from user {} in guild {}: {} {}",
            user_id,
            guild_id,
            domain,
            " ".join(args)
        )
        response = await run_command(
            SETTINGS_ROOT,
            [domain, *args],
            request,
            self.services
        )
        await send_response(context, response)

    @commands.command("bot")
    @commands.has_guild_permissions(administrator=True)
    @commands.guild_only()
    async def guild_bot_settings(self, context: Context, *args: str) -> None:
        """
        Bot settings for this server.

        :param context: Command context
        :param args: Setting name and value(s)
        """
        await self.run_settings(context, "bot", args)

    @commands.command("user")
    @commands.guild_only()
    async def user_settings(self, context: Context, *args: str) -> None:
        """
        Your own user settings.

        :param context: Command context
        :param args: Setting name and value(s)
        """
        await self.run_settings(context, "user", args)

    @commands.command("server")
    @commands.has_guild_permissions(administrator=True)
    @commands.guild_only()
    async def server_settings(self, context: Context, *args: str) -> None:
        """
        Settings for this server.

        :param context: Command context
        :param args: Setting name and value(s)
        """
        await self.run_settings(context, "server", args)
