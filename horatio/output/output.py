"""
Discord output module.

Functions that send messages and embeds to Discord, including turning
settings command responses into embeds.
"""

import os
import re
from datetime import datetime
from typing import List, Optional, Tuple

from discord import Colour, Embed, Forbidden, HTTPException, Message
from discord.abc import Messageable
from loguru import logger

from horatio import settings
from horatio.botsettings.response import Response, ResponseKind

PARENT_DIRECTORY = os.getcwd().split("horatio")[0]
TOKEN_REGEX = r"[MN][A-Za-z\d]{23}\.[\w-]{6}\.[\w-]{27}"

RESPONSE_COLOURS = {
    ResponseKind.SUCCESS: settings.embed_color_success,
    ResponseKind.ERROR: settings.embed_color_error,
    ResponseKind.USAGE: settings.embed_color_usage
}


async def send_message(
        channel: Messageable,
        text: Optional[str],
        embed: Optional[Embed] = None,
        token_guard: bool = False,
        path_guard: bool = False
) -> Optional[Message]:
    """
    Sends a message to a given context or channel.

    :param channel: Context or channel of message
    :param text: Text content of message
    :param embed: Embed of message
    :param token_guard: Censor discord bot tokens
    :param path_guard: Censor full project directory
    :return: Discord Message object, or None if sending failed
    """
    if token_guard and text is not None:
        text = re.sub(TOKEN_REGEX, "[REDACTED TOKEN]", text)

    if path_guard and text is not None:
        text = text.replace(PARENT_DIRECTORY, "../")

    try:
        return await channel.send(text, embed=embed)
    except Forbidden:
        logger.warning("Failed to send message to channel {}", str(channel))
    except HTTPException:
        logger.error(
            "Failed to send message to channel {} due to invalid argument.",
            channel
        )

    return None


def build_embed(
        title: str,
        desc: str,
        colour: Colour = Colour(settings.embed_color_normal),
        fields: Optional[List[Tuple[str, str, bool]]] = None,
        timestamp: Optional[datetime] = None
) -> Embed:
    """
    Build an embed.

    :param title: Title of embed
    :param desc: Text content of embed
    :param colour: Colour of embed
    :param fields: List of fields represented by a tuple of their title,
        text, and inline mode
    :param timestamp: Timestamp of embed
    :return: Embed
    """
    embed = Embed(
        title=title,
        colour=colour,
        description=desc,
        timestamp=timestamp
    )

    try:
        for name, text, inline in fields or []:
            embed.add_field(name=name, value=text, inline=inline)
    except ValueError:
        logger.warning("Failed to add fields to embed: {}", str(fields))

    return embed


async def send_embed(
        channel: Messageable,
        embed: Embed,
        embed_fallback: bool = True
) -> Optional[Message]:
    """
    Sends an embed to a given context or channel.

    :param channel: Context or channel of message
    :param embed: Embed to send
    :param embed_fallback: Whether embed will be sent as a regular
        message if the bot doesn't have the send embeds permission
    :return: Discord Message object, or None if sending failed
    """
    try:
        return await channel.send(None, embed=embed)
    except Forbidden:
        logger.warning(
            "Failed to send embed to channel {}; "
            "falling back on plain message: {}",
            str(channel),
            embed_fallback
        )

    if not embed_fallback:
        return None

    field_text = "\n\n".join(
        f"**{field.name}**\n{field.value}" for field in embed.fields
    )
    return await send_message(
        channel,
        f"**{embed.title}**\n\n{embed.description}\n\n{field_text}".strip(),
        path_guard=True
    )


async def send_error_embed(
        channel: Messageable,
        title: str,
        desc: str
) -> Optional[Message]:
    """
    Send an error embed.

    :param channel: Channel to send error to
    :param title: Embed title
    :param desc: Embed desc
    :return: Sent message
    """
    return await send_embed(
        channel,
        build_embed(title, desc, Colour(settings.embed_color_error))
    )


def response_embed(response: Response) -> Embed:
    """
    Turn a settings command response into an embed.

    :param response: Command response
    :return: Embed coloured according to the response kind
    """
    return build_embed(
        title=response.title,
        desc=response.desc,
        colour=Colour(RESPONSE_COLOURS[response.kind]),
        fields=[(name, value, False) for name, value in response.fields]
    )


async def send_response(
        channel: Messageable,
        response: Response
) -> Optional[Message]:
    """
    Send a settings command response.

    :param channel: Context or channel to reply in
    :param response: Command response
    :return: Sent message
    """
    return await send_embed(channel, response_embed(response))
