"""
Server settings commands.

Join and leave messages, tips, now playing messages, invite link
generation, the swear filter, event logging and resets. Every command
here works on the settings of the guild it was sent in; channel
settings are always set to the channel the command was sent in.
"""

from typing import Callable, Dict, List

from loguru import logger

from horatio.botsettings.context import RequestContext, SettingsServices
from horatio.botsettings.errors import MissingArgumentError, NotFoundError
from horatio.botsettings.response import Response
from horatio.botsettings.router import CommandNode, reject_arguments
from horatio.botsettings.validators import parse_timeout
from horatio.output import disp_str
from horatio.storage.log_events import LogEventFlags, RECOMMENDED_EVENTS
from horatio.storage.records import GuildSettings, LogSettings, SwearFilter
from horatio.utils.text_utils import bool_str, escape_code, join_names


"""'''''''''''''''''''
Join and Leave Messages
'''''''''''''''''''"""


def member_message_view(disp_type: str, message: str, channel: str) -> Response:
    """
    Show a join or leave message and its channel.

    :param disp_type: Display type of the message command
    :param message: Stored message
    :param channel: Stored channel ID
    :return: Command response
    """
    if not message and not channel:
        return Response.simple(f"{disp_type}_unset")

    return Response(
        title=disp_str(f"{disp_type}_view_title"),
        desc=disp_str(f"{disp_type}_view_desc").format(channel),
        fields=[(disp_str("server_member_message_field"), message or "-")]
    )


async def join_message(
        args: List[str],
        context: RequestContext,
        services: SettingsServices
) -> Response:
    """
    View the join message, or set it to be sent in this channel.

    :param args: Empty to view, or the new message
    :param context: Command context
    :param services: Settings store and services
    :return: Command response
    """
    async with services.store.guild(context.guild_id) as guild:
        if not args:
            return member_message_view(
                "server_joinmsg",
                guild.user_join_message,
                guild.user_join_message_channel
            )

        guild.user_join_message = " ".join(args)
        guild.user_join_message_channel = context.channel_id

    return Response.simple("server_joinmsg_set")


async def leave_message(
        args: List[str],
        context: RequestContext,
        services: SettingsServices
) -> Response:
    """
    View the leave message, or set it to be sent in this channel.

    :param args: Empty to view, or the new message
    :param context: Command context
    :param services: Settings store and services
    :return: Command response
    """
    async with services.store.guild(context.guild_id) as guild:
        if not args:
            return member_message_view(
                "server_leavemsg",
                guild.user_leave_message,
                guild.user_leave_message_channel
            )

        guild.user_leave_message = " ".join(args)
        guild.user_leave_message_channel = context.channel_id

    return Response.simple("server_leavemsg_set")


"""''
Tips
''"""


async def tips_view(
        _args: List[str],
        context: RequestContext,
        services: SettingsServices
) -> Response:
    """Show whether tips are enabled."""
    async with services.store.guild(context.guild_id) as guild:
        enabled = bool(guild.tips_channel)

    if enabled:
        return Response.simple("server_tips_enabled")
    return Response.simple("server_tips_disabled")


async def tips_enable(
        args: List[str],
        context: RequestContext,
        services: SettingsServices
) -> Response:
    """Post tips in this channel."""
    reject_arguments(args)
    async with services.store.guild(context.guild_id) as guild:
        guild.tips_channel = context.channel_id

    return Response.simple("server_tips_enable")


async def tips_disable(
        args: List[str],
        context: RequestContext,
        services: SettingsServices
) -> Response:
    """Stop posting tips."""
    reject_arguments(args)
    async with services.store.guild(context.guild_id) as guild:
        guild.tips_channel = ""

    return Response.simple("server_tips_disable")


"""''''''''''''''''''
Auto Send Now Playing
''''''''''''''''''"""


async def now_playing_view(
        _args: List[str],
        context: RequestContext,
        services: SettingsServices
) -> Response:
    """Show whether now playing messages are sent automatically."""
    async with services.store.guild(context.guild_id) as guild:
        enabled = guild.auto_send_now_playing

    if enabled:
        return Response.simple("server_asnp_enabled")
    return Response.simple("server_asnp_disabled")


async def now_playing_enable(
        args: List[str],
        context: RequestContext,
        services: SettingsServices
) -> Response:
    """Send now playing messages for automatically started tracks."""
    reject_arguments(args)
    async with services.store.guild(context.guild_id) as guild:
        guild.auto_send_now_playing = True

    return Response.simple("server_asnp_enable")


async def now_playing_disable(
        args: List[str],
        context: RequestContext,
        services: SettingsServices
) -> Response:
    """Stop sending now playing messages for automatic tracks."""
    reject_arguments(args)
    async with services.store.guild(context.guild_id) as guild:
        guild.auto_send_now_playing = False

    return Response.simple("server_asnp_disable")


"""''''''''''''''''''
Invite Link Generation
''''''''''''''''''"""


async def invitegen_set_channel(
        args: List[str],
        context: RequestContext,
        services: SettingsServices
) -> Response:
    """Generate invite links for this channel."""
    reject_arguments(args)
    async with services.store.guild(context.guild_id) as guild:
        guild.api_invite_channel = context.channel_id

    return Response.simple("server_invitegen_setchannel")


async def invitegen_key(
        args: List[str],
        context: RequestContext,
        services: SettingsServices
) -> Response:
    """
    View or set the invite link generation key.

    :param args: Empty to view, or the new key
    :param context: Command context
    :param services: Settings store and services
    :return: Command response
    """
    async with services.store.guild(context.guild_id) as guild:
        if not args:
            key = guild.api_invite_key
        else:
            key = guild.api_invite_key = " ".join(args)
            return Response.simple("server_invitegen_key_set", escape_code(key))

    if not key:
        return Response.simple("server_invitegen_key_unset")
    return Response.simple("server_invitegen_key_view", escape_code(key))


"""''''''''''
Swear Filter
''''''''''"""


async def filter_enable(
        args: List[str],
        context: RequestContext,
        services: SettingsServices
) -> Response:
    """Enable the swear filter."""
    reject_arguments(args)
    async with services.store.guild(context.guild_id) as guild:
        guild.swear_filter.enabled = True

    return Response.simple("server_filter_enable")


async def filter_disable(
        args: List[str],
        context: RequestContext,
        services: SettingsServices
) -> Response:
    """Disable the swear filter."""
    reject_arguments(args)
    async with services.store.guild(context.guild_id) as guild:
        guild.swear_filter.enabled = False

    return Response.simple("server_filter_disable")


async def filter_words_list(
        _args: List[str],
        context: RequestContext,
        services: SettingsServices
) -> Response:
    """List the filtered words."""
    async with services.store.guild(context.guild_id) as guild:
        words = list(guild.swear_filter.blacklisted_words)

    words_str = join_names(words) if words else disp_str(
        "server_filter_words_empty"
    )
    return Response(
        title=disp_str("server_filter_words_title"),
        desc="",
        fields=[(disp_str("server_filter_words_field"), words_str)]
    )


async def filter_words_add(
        args: List[str],
        context: RequestContext,
        services: SettingsServices
) -> Response:
    """
    Add words to the swear filter.

    :param args: Words to add
    :param context: Command context
    :param services: Settings store and services
    :return: Command response
    """
    if not args:
        raise MissingArgumentError("server_filter_words_add_missing")

    async with services.store.guild(context.guild_id) as guild:
        guild.swear_filter.blacklisted_words.extend(args)

    return Response.simple("server_filter_words_add", join_names(args))


async def filter_words_remove(
        args: List[str],
        context: RequestContext,
        services: SettingsServices
) -> Response:
    """
    Remove words from the swear filter.

    Every occurrence of each given word is removed.

    :param args: Words to remove
    :param context: Command context
    :param services: Settings store and services
    :return: Command response
    """
    if not args:
        raise MissingArgumentError("server_filter_words_remove_missing")

    async with services.store.guild(context.guild_id) as guild:
        words = guild.swear_filter.blacklisted_words
        removed = [word for word in dict.fromkeys(args) if word in words]
        missing = [word for word in dict.fromkeys(args) if word not in words]
        guild.swear_filter.blacklisted_words = [
            word for word in words if word not in removed
        ]

    desc = ""
    if removed:
        desc += disp_str("server_filter_words_removed").format(
            join_names(removed)
        )
    if missing:
        desc += disp_str("server_filter_words_missing").format(
            join_names(missing)
        )

    return Response(
        title=disp_str("server_filter_title"),
        desc=desc.strip()
    )


async def filter_words_clear(
        args: List[str],
        context: RequestContext,
        services: SettingsServices
) -> Response:
    """Remove every word from the swear filter."""
    reject_arguments(args)
    async with services.store.guild(context.guild_id) as guild:
        guild.swear_filter.blacklisted_words = []

    return Response.simple("server_filter_words_clear")


async def filter_timeout(
        args: List[str],
        context: RequestContext,
        services: SettingsServices
) -> Response:
    """
    View or set the timeout for deleting swear filter warnings.

    :param args: Empty to view, or the timeout in seconds (0 disables)
    :param context: Command context
    :param services: Settings store and services
    :return: Command response
    """
    if not args:
        async with services.store.guild(context.guild_id) as guild:
            timeout = guild.swear_filter.warning_delete_timeout

        if timeout == 0:
            return Response.simple("server_filter_timeout_disabled")
        return Response.simple("server_filter_timeout_view", timeout)

    reject_arguments(args, 1)
    timeout = parse_timeout(args[0])
    async with services.store.guild(context.guild_id) as guild:
        guild.swear_filter.warning_delete_timeout = timeout

    if timeout == 0:
        return Response.simple("server_filter_timeout_disable")
    return Response.simple("server_filter_timeout_set", timeout)


"""'''''''''
Event Logs
'''''''''"""


def event_report(
        desc: str,
        applied_type: str,
        applied: List[str],
        failed: List[str]
) -> str:
    """
    Append the applied and unrecognized event names to a description.

    :param desc: Description so far
    :param applied_type: Display string for the applied events line
    :param applied: Event names that were applied
    :param failed: Event names that were not recognized
    :return: Full description
    """
    if applied or failed:
        desc += "\n"
    if applied:
        desc += "\n" + disp_str(applied_type).format(join_names(applied))
    if failed:
        desc += "\n" + disp_str("server_log_events_failed").format(
            join_names(failed)
        )

    return desc


async def log_set(
        args: List[str],
        context: RequestContext,
        services: SettingsServices
) -> Response:
    """Log events to this channel."""
    reject_arguments(args)
    async with services.store.guild(context.guild_id) as guild:
        guild.log_settings.logging_channel = context.channel_id

    return Response.simple("server_log_set")


async def log_unset(
        args: List[str],
        context: RequestContext,
        services: SettingsServices
) -> Response:
    """Unset the logging channel and disable logging."""
    reject_arguments(args)
    async with services.store.guild(context.guild_id) as guild:
        guild.log_settings.logging_channel = ""
        guild.log_settings.logging_enabled = False

    return Response.simple("server_log_unset")


async def log_enable(
        args: List[str],
        context: RequestContext,
        services: SettingsServices
) -> Response:
    """
    Enable logging, and optionally enable events.

    The logging channel is set to this channel if there isn't one yet.

    :param args: Empty, "all", "recommended", or event names
    :param context: Command context
    :param services: Settings store and services
    :return: Command response
    """
    applied: List[str] = []
    failed: List[str] = []

    async with services.store.guild(context.guild_id) as guild:
        log_settings = guild.log_settings
        flags = LogEventFlags(log_settings.logging_events)
        set_channel = not log_settings.logging_channel

        if args == ["all"]:
            flags.set_all(True)
            disp_type = "server_log_enable_all"
        elif args == ["recommended"]:
            flags.apply_preset(RECOMMENDED_EVENTS)
            disp_type = "server_log_enable_recommended"
        else:
            applied, failed = flags.set_many(args, True)
            disp_type = "server_log_enable"

        log_settings.logging_enabled = True
        if set_channel:
            log_settings.logging_channel = context.channel_id

    logger.debug(
        "Enabled logging in guild {} ({})",
        context.guild_id,
        " ".join(args) or "no events"
    )

    if set_channel:
        disp_type += "_channel"

    response = Response.simple(disp_type)
    response.desc = event_report(
        response.desc,
        "server_log_events_enabled",
        applied,
        failed
    )
    return response


async def log_disable(
        args: List[str],
        context: RequestContext,
        services: SettingsServices
) -> Response:
    """
    Disable logging, or disable events.

    :param args: Empty to disable logging, "all" to disable every event,
        or event names
    :param context: Command context
    :param services: Settings store and services
    :return: Command response
    """
    async with services.store.guild(context.guild_id) as guild:
        log_settings = guild.log_settings
        flags = LogEventFlags(log_settings.logging_events)

        if not args:
            log_settings.logging_enabled = False
            return Response.simple("server_log_disable")

        if args == ["all"]:
            flags.set_all(False)
            return Response.simple("server_log_disable_all")

        applied, failed = flags.set_many(args, False)

    response = Response.simple("server_log_disable_events")
    response.desc = event_report(
        response.desc,
        "server_log_events_disabled",
        applied,
        failed
    )
    return response


async def log_events(
        args: List[str],
        context: RequestContext,
        services: SettingsServices
) -> Response:
    """List every event and whether it is enabled."""
    reject_arguments(args)
    async with services.store.guild(context.guild_id) as guild:
        states = LogEventFlags(guild.log_settings.logging_events).states()

    lines = [
        disp_str("server_log_event_state").format(name, bool_str(value))
        for name, value in states
    ]
    response = Response.simple("server_log_events")
    response.desc += "\n" + "\n".join(lines)
    return response


"""'''
Reset
'''"""


def reset_join_message(guild: GuildSettings) -> None:
    guild.user_join_message = ""
    guild.user_join_message_channel = ""


def reset_leave_message(guild: GuildSettings) -> None:
    guild.user_leave_message = ""
    guild.user_leave_message_channel = ""


def reset_log(guild: GuildSettings) -> None:
    guild.log_settings = LogSettings()


def reset_filter(guild: GuildSettings) -> None:
    guild.swear_filter = SwearFilter()


def reset_invitegen(guild: GuildSettings) -> None:
    guild.api_invite_channel = ""
    guild.api_invite_key = ""


def reset_tips(guild: GuildSettings) -> None:
    guild.tips_channel = ""


RESETTERS: Dict[str, Callable[[GuildSettings], None]] = {
    "joinmsg": reset_join_message,
    "leavemsg": reset_leave_message,
    "log": reset_log,
    "filter": reset_filter,
    "invitegen": reset_invitegen,
    "tips": reset_tips
}


async def reset_command(
        args: List[str],
        context: RequestContext,
        services: SettingsServices
) -> Response:
    """
    Reset a group of settings to their defaults.

    :param args: Name of the settings group
    :param context: Command context
    :param services: Settings store and services
    :return: Command response
    """
    if not args:
        raise MissingArgumentError("server_reset_missing")

    reject_arguments(args, 1)
    name = args[0]
    resetter = RESETTERS.get(name)
    if resetter is None:
        raise NotFoundError("server_reset_unknown", name)

    async with services.store.guild(context.guild_id) as guild:
        resetter(guild)

    logger.debug("Reset {} settings in guild {}", name, context.guild_id)
    return Response.simple("server_reset", name)


SERVER_NODE = CommandNode(
    "server",
    "server",
    children=[
        CommandNode(
            "joinmsg",
            "server_joinmsg",
            handler=join_message,
            arg_type="this/text"
        ),
        CommandNode(
            "leavemsg",
            "server_leavemsg",
            handler=leave_message,
            arg_type="this/text"
        ),
        CommandNode(
            "tips",
            "server_tips",
            default=tips_view,
            arg_type="this/enable/disable",
            not_found="server_tips_unknown",
            children=[
                CommandNode("enable", "server_tips_enable", handler=tips_enable),
                CommandNode(
                    "disable",
                    "server_tips_disable",
                    handler=tips_disable
                )
            ]
        ),
        CommandNode(
            "autosendnowplaying",
            "server_asnp",
            default=now_playing_view,
            arg_type="this/enable/disable",
            not_found="server_asnp_unknown",
            children=[
                CommandNode(
                    "enable",
                    "server_asnp_enable",
                    handler=now_playing_enable
                ),
                CommandNode(
                    "disable",
                    "server_asnp_disable",
                    handler=now_playing_disable
                )
            ]
        ),
        CommandNode(
            "invitegen",
            "server_invitegen",
            arg_type="setting (value(s))",
            not_found="server_invitegen_unknown",
            children=[
                CommandNode(
                    "setchannel",
                    "server_invitegen_setchannel",
                    handler=invitegen_set_channel
                ),
                CommandNode(
                    "key",
                    "server_invitegen_key",
                    handler=invitegen_key,
                    arg_type="this/text"
                )
            ]
        ),
        CommandNode(
            "filter",
            "server_filter",
            arg_type="setting (value(s))",
            not_found="server_filter_unknown",
            children=[
                CommandNode(
                    "enable",
                    "server_filter_enable",
                    handler=filter_enable
                ),
                CommandNode(
                    "disable",
                    "server_filter_disable",
                    handler=filter_disable
                ),
                CommandNode(
                    "timeout",
                    "server_filter_timeout",
                    handler=filter_timeout,
                    arg_type="this/number"
                ),
                CommandNode(
                    "words",
                    "server_filter_words",
                    default=filter_words_list,
                    arg_type="this/add/remove/clear",
                    not_found="server_filter_words_unknown",
                    children=[
                        CommandNode(
                            "add",
                            "server_filter_words_add",
                            handler=filter_words_add,
                            arg_type="word(s)"
                        ),
                        CommandNode(
                            "remove",
                            "server_filter_words_remove",
                            handler=filter_words_remove,
                            arg_type="word(s)"
                        ),
                        CommandNode(
                            "clear",
                            "server_filter_words_clear",
                            handler=filter_words_clear
                        )
                    ]
                )
            ]
        ),
        CommandNode(
            "log",
            "server_log",
            arg_type="setting (value(s))",
            not_found="server_log_unknown",
            children=[
                CommandNode("set", "server_log_set", handler=log_set),
                CommandNode("unset", "server_log_unset", handler=log_unset),
                CommandNode(
                    "enable",
                    "server_log_enable",
                    handler=log_enable,
                    arg_type="this/all/recommended/event(s)"
                ),
                CommandNode(
                    "disable",
                    "server_log_disable",
                    handler=log_disable,
                    arg_type="this/all/event(s)"
                ),
                CommandNode("events", "server_log_events", handler=log_events)
            ]
        ),
        CommandNode(
            "reset",
            "server_reset",
            handler=reset_command,
            arg_type="joinmsg/leavemsg/log/filter/invitegen/tips"
        )
    ]
)
