"""Bot settings commands."""

from typing import List

from loguru import logger

from horatio import settings
from horatio.botsettings.context import RequestContext, SettingsServices
from horatio.botsettings.response import Response
from horatio.botsettings.router import CommandNode, reject_arguments
from horatio.utils.text_utils import escape_code


async def command_prefix(
        args: List[str],
        context: RequestContext,
        services: SettingsServices
) -> Response:
    """
    View or set the guild command prefix.

    Setting the prefix to the global prefix removes the guild override.

    :param args: Empty to view, or the new prefix
    :param context: Command context
    :param services: Settings store and services
    :return: Command response
    """
    reject_arguments(args, 1)
    async with services.store.guild(context.guild_id) as guild:
        if not args:
            return Response.simple(
                "bot_prefix_view",
                escape_code(guild.bot_prefix or settings.command_prefix)
            )

        new_prefix = args[0]
        if new_prefix == settings.command_prefix:
            guild.bot_prefix = ""
        else:
            guild.bot_prefix = new_prefix

    logger.debug(
        "Guild {} command prefix set to {}",
        context.guild_id,
        new_prefix
    )
    return Response.simple("bot_prefix_set", escape_code(new_prefix))


BOT_NODE = CommandNode(
    "bot",
    "bot",
    children=[
        CommandNode(
            "prefix",
            "bot_prefix",
            handler=command_prefix,
            arg_type="this/text"
        )
    ]
)
