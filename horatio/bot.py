"""
Main bot module.

Entry point for running the bot.
"""
import sys
import traceback
from typing import Optional

from discord import Intents, Message, TextChannel
from discord.ext import commands
from discord.ext.commands import Context
from loguru import logger

from horatio import settings
from horatio.botsettings.settings_cog import SettingsCog
from horatio.output.error_handler import handle_command_error
from horatio.output.output import send_message
from horatio.storage.settings_store import SettingsStore

# Removing and replacing the default logger output
logger.remove(0)
logger.level("DEBUG", color="<fg 251>")
logger.add(
    sys.stderr,
    format="<bg 239><fg 15> {time:YYYY-MM-DD HH:mm:ss.SSS} </fg 15></bg 239>"
           "<bg 32><lvl><b> {level} </b></lvl></bg 32>"
           "<n> {message}</n>",
    level=settings.console_log_level
)


def get_prefix(bot: "HoratioBot", message: Message) -> str:
    """
    Get the command prefix for a message.

    :param bot: Horatio bot instance
    :param message: Message that might contain a command
    :return: Guild prefix override, or the global prefix
    """
    if message.guild is None:
        return settings.command_prefix

    return bot.settings_store.guild_prefix(
        message.guild.id,
        settings.command_prefix
    )


class HoratioBot(commands.Bot):
    """Horatio Discord bot."""

    __slots__ = [
        "master_log_id",
        "log_channel",
        "first_start",
        "settings_store"
    ]

    def __init__(self) -> None:
        """Initializer for the HoratioBot class."""
        intents = Intents.default()
        intents.message_content = True

        super().__init__(
            command_prefix=get_prefix,
            help_command=None,
            description=settings.bot_description,
            owner_ids=settings.bot_owners,
            intents=intents
        )

        self.log_channel: Optional[TextChannel] = None
        self.master_log_id: int = 1
        self.first_start = True
        self.settings_store = SettingsStore()

    async def on_error(self, event_method: str, *args, **kwargs) -> None:
        """
        Called when an event raises an uncaught exception.

        :param event_method: The name of the event that raised the
            exception
        :param args: Positional arguments for the event that raised the
            exception
        :param kwargs: Keyword arguments for the event that raised the
            exception
        """
        logger.error(
            "Exception raised in {}.\n\t{}",
            event_method,
            traceback.format_exc().replace("\n", "\n\t")
        )

    async def on_command_error(
            self,
            context: Context,
            exception: Exception
    ) -> None:
        """
        Called when a command triggers an error.

        :param context: Context of error-triggering command
        :param exception: Exception that the command raised
        """
        await handle_command_error(context, exception)

    async def on_ready(self) -> None:
        """
        Called when Horatio is done preparing the data received from
        Discord.
        """
        if self.first_start:
            await self.on_first_ready()

    async def on_first_ready(self) -> None:
        """Horatio's startup procedure."""
        logger.trace("Setting up master log channel.")
        log_channel = self.get_channel(settings.master_log_channel)
        if log_channel is not None and isinstance(log_channel, TextChannel):
            self.log_channel = log_channel
            logger.info(
                "Set up master log channel on #{} ({})",
                log_channel.name,
                log_channel.id
            )

            async def log_message(msg: str) -> None:
                await send_message(
                    self.log_channel,
                    msg,
                    token_guard=True,
                    path_guard=True
                )

            self.master_log_id = logger.add(
                log_message,
                colorize=False,
                backtrace=False,
                catch=False,
                format="**[{time:YYYY-MM-DD HH:mm:ss.SSS!UTC}][{level}]** "
                       "```\n{message}\n```",
                level=settings.master_log_level
            )
        else:
            logger.error(
                "Bot master logging channel ID {} not found; setting ignored.",
                settings.master_log_channel
            )

        logger.info(
            "Horatio has started on {} ({}) with {} server(s).",
            self.user.name,
            self.user.id,
            len(self.guilds)
        )

        # Loading is separate from initialization so that saved settings
        # are in place before the periodic save starts
        logger.info("Loading settings cog.")
        settings_cog = SettingsCog(self, self.settings_store)
        self.add_cog(settings_cog)
        await settings_cog.load_settings()

        self.first_start = False


horatio = HoratioBot()


@horatio.command("botshutdown")
@commands.is_owner()
async def stop_command(context: Context) -> None:
    """
    Bot shutdown command.

    This is used for the sole purpose of stopping the bot safely and
    can only be activated by the bot owners.

    :param context: Command context
    """
    await send_message(channel=context, text="I'll be back.")
    logger.info("Bot shutting down...")

    for name, cog in list(horatio.cogs.items()):
        logger.info("Closing cog: {}", name)
        await cog.cog_save_all()

    await horatio.close()


def main() -> None:
    """Run the bot."""
    horatio.run(settings.bot_token)


if __name__ == "__main__":
    main()
