"""
Error handler module.

Errors raised by Discord command checks and argument parsing are
handled here. Settings command errors never get this far; they are
turned into error responses by the settings router.
"""

from discord import Forbidden
from discord.ext.commands import (
    BotMissingPermissions, CommandNotFound, Context, MissingPermissions
)
from loguru import logger

from horatio.output import disp_str
from horatio.output.output import send_error_embed

COMMAND_ERRORS = {
    "UserInputError": "command_error_user_input_error",
    "BadArgument": "command_error_bad_argument",
    "MissingRequiredArgument": "command_error_missing_required_argument",
    "UnexpectedQuoteError": "command_error_unexpected_quote_error",
    "InvalidEndOfQuotedStringError": (
        "command_error_invalid_end_of_quoted_string_error"
    ),
    "ExpectedClosingQuoteError": "command_error_expected_closing_quote_error",
    "NoPrivateMessage": "command_error_no_private_message",
    "CommandOnCooldown": "command_error_command_on_cooldown",
    "NotOwner": "command_error_not_owner"
}


def command_error_message(exception: Exception) -> str:
    """
    Find the message shown to users for a command error.

    :param exception: Exception raised by command
    :return: Error message, or an empty string if the error is not one
        that users should be told about
    """
    if type(exception).__name__ in COMMAND_ERRORS:
        return (
            disp_str(COMMAND_ERRORS[type(exception).__name__])
            + "\n" + str(exception)
        )

    if isinstance(exception, MissingPermissions):
        return disp_str("command_error_missing_permissions").format(
            ", ".join(exception.missing_permissions)
        )

    if isinstance(exception, BotMissingPermissions):
        return disp_str("command_error_bot_missing_permissions").format(
            ", ".join(exception.missing_permissions)
        )

    return ""


async def handle_command_error(
        context: Context,
        exception: Exception
) -> None:
    """
    Handles retrieval and sending of command error messages.

    :param context: Context in which error-causing message was sent
    :param exception: Exception raised by command
    """
    if isinstance(exception, CommandNotFound):
        logger.trace("Command not found: {}", context.command)
        return

    error_message = command_error_message(exception)
    if not error_message:
        logger.error(
            "Ignored command error {} triggered by command {} in channel {}",
            type(exception).__name__,
            context.command,
            context.channel.id
        )
        return

    # Trace, because we don't need the bot to report to us whenever
    # a user enters a command wrongly.
    logger.trace(
        disp_str("command_error_logger_header"),
        error_message,
        context.command
    )

    try:
        await send_error_embed(
            channel=context,
            title=disp_str("command_error_header"),
            desc=error_message
        )
    except Forbidden:
        logger.warning(
            disp_str("command_error_failed_to_send"),
            context.channel.id,
            error_message
        )
