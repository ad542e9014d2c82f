"""
User settings commands.

About me, timezone and socials of the user sending the command.
"""

from typing import Dict, List

from loguru import logger

from horatio.botsettings.context import RequestContext, SettingsServices
from horatio.botsettings.errors import (
    ExternalServiceError, MissingArgumentError, NotFoundError,
    SettingsValidationError
)
from horatio.botsettings.response import Response
from horatio.botsettings.router import CommandNode, reject_arguments
from horatio.botsettings.validators import (
    check_not_duplicate, resolve_timezone, validate_switch_fc
)
from horatio.output import disp_str
from horatio.storage.records import SocialKind
from horatio.storage.settings_store import SettingsStore
from horatio.utils.identity_utils import IdentityCheckError
from horatio.utils.text_utils import escape_code, get_user_id
from horatio.utils.time_utils import format_time, local_time_now

SOCIAL_SELECTORS: Dict[str, SocialKind] = {
    "switchfc": SocialKind.SWITCH_FC,
    "nnid": SocialKind.NNID,
    "nintendoid": SocialKind.NNID,
    "nintyid": SocialKind.NNID,
    "psn": SocialKind.PSN,
    "xbox": SocialKind.XBOX,
    "gamertag": SocialKind.XBOX
}


"""''''''
About Me
''''''"""


async def view_about_me(store: SettingsStore, user_id: str) -> Response:
    """
    Show the about me of a user.

    :param store: Settings store
    :param user_id: ID of user to show
    :return: About me response
    :raises NotFoundError: When the user has no about me
    """
    if not store.has_user(user_id):
        raise NotFoundError("user_about_not_found", user_id)

    async with store.user(user_id) as user:
        about_me = user.about_me

    if not about_me:
        raise NotFoundError("user_about_not_found", user_id)

    return Response(
        title=disp_str("user_about_view_title"),
        desc=disp_str("user_about_view_desc").format(user_id),
        fields=[(disp_str("user_about_view_field"), about_me)]
    )


async def about_me_command(
        args: List[str],
        context: RequestContext,
        services: SettingsServices
) -> Response:
    """
    View your own about me, view a mentioned user's, or set yours.

    :param args: Empty, a single user mention, or the new about me
    :param context: Command context
    :param services: Settings store and services
    :return: Command response
    """
    store = services.store
    if not args:
        async with store.user(context.user_id) as user:
            has_about_me = bool(user.about_me)
        if not has_about_me:
            raise NotFoundError("user_about_unset")
        return await view_about_me(store, context.user_id)

    if len(args) == 1:
        mentioned_id = get_user_id(args[0])
        if mentioned_id is not None and mentioned_id in context.mentions:
            return await view_about_me(store, mentioned_id)

    async with store.user(context.user_id) as user:
        user.about_me = " ".join(args)

    return Response.simple("user_about_set")


"""''''''
Timezone
''''''"""


async def timezone_command(
        args: List[str],
        context: RequestContext,
        services: SettingsServices
) -> Response:
    """
    View or set your timezone.

    :param args: Empty to view, or a timezone database name
    :param context: Command context
    :param services: Settings store and services
    :return: Command response
    """
    if not args:
        async with services.store.user(context.user_id) as user:
            timezone_name = user.timezone

        if not timezone_name:
            raise NotFoundError("user_timezone_unset")

        timezone = resolve_timezone(
            timezone_name,
            services.timezone_resolver,
            "user_timezone_stored_invalid",
            context.prefix
        )
        return Response.simple(
            "user_timezone_view",
            timezone_name,
            format_time(local_time_now(timezone))
        )

    reject_arguments(args, 1)
    timezone_name = args[0]
    timezone = resolve_timezone(timezone_name, services.timezone_resolver)

    async with services.store.user(context.user_id) as user:
        user.timezone = timezone_name

    return Response.simple(
        "user_timezone_set",
        timezone_name,
        format_time(local_time_now(timezone))
    )


"""'''''
Socials
'''''"""


def resolve_social(selector: str) -> SocialKind:
    """
    Find the social kind picked by a selector.

    :param selector: Social name, such as switchfc or gamertag
    :return: Social kind
    :raises NotFoundError: When no social has that name
    """
    try:
        return SOCIAL_SELECTORS[selector]
    except KeyError as e:
        raise NotFoundError("user_social_unknown", selector) from e


async def check_nnid(nnid: str, services: SettingsServices) -> None:
    """
    Make sure a Nintendo Network ID exists.

    :param nnid: Nintendo Network ID
    :param services: Settings store and services
    :raises ExternalServiceError: When the lookup fails
    :raises SettingsValidationError: When the NNID does not exist
    """
    if services.nnid_checker is None:
        raise ExternalServiceError("user_social_nnid_error")

    try:
        exists = await services.nnid_checker.user_exists(nnid)
    except IdentityCheckError as e:
        raise ExternalServiceError("user_social_nnid_error") from e

    if not exists:
        raise SettingsValidationError("user_social_nnid_missing")


async def social_set(
        args: List[str],
        context: RequestContext,
        services: SettingsServices
) -> Response:
    """
    Set one of your socials.

    The value is checked completely (format, duplicate, existence)
    before it is stored. NNID lookups happen outside the user lock, so
    the duplicate check runs again once the lock is held.

    :param args: Social name followed by the new value
    :param context: Command context
    :param services: Settings store and services
    :return: Command response
    """
    if len(args) < 2:
        raise MissingArgumentError("user_social_set_missing")

    reject_arguments(args, 2)
    kind = resolve_social(args[0])
    value = args[1]
    duplicate_type = f"user_social_duplicate_{kind.value}"

    if kind is SocialKind.SWITCH_FC:
        validate_switch_fc(value)

    async with services.store.user(context.user_id) as user:
        check_not_duplicate(user.socials[kind], value, duplicate_type)

    if kind is SocialKind.NNID:
        await check_nnid(value, services)

    async with services.store.user(context.user_id) as user:
        check_not_duplicate(user.socials[kind], value, duplicate_type)
        user.socials[kind] = value

    logger.debug("User {} set social {}", context.user_id, kind.value)
    return Response.simple(f"user_social_set_{kind.value}", escape_code(value))


async def social_list(
        args: List[str],
        context: RequestContext,
        services: SettingsServices
) -> Response:
    """
    List your socials.

    :param args: No arguments expected
    :param context: Command context
    :param services: Settings store and services
    :return: Command response
    """
    reject_arguments(args)
    async with services.store.user(context.user_id) as user:
        fields = [
            (disp_str(f"user_social_name_{kind.value}"), user.socials[kind])
            for kind in SocialKind if user.socials[kind]
        ]

    if not fields:
        return Response.simple("user_social_list_empty")

    return Response(
        title=disp_str("user_social_list_title"),
        desc=disp_str("user_social_list_desc"),
        fields=fields
    )


async def social_clear(
        args: List[str],
        context: RequestContext,
        services: SettingsServices
) -> Response:
    """
    Clear one of your socials.

    :param args: Social name
    :param context: Command context
    :param services: Settings store and services
    :return: Command response
    """
    if not args:
        raise MissingArgumentError("user_social_clear_missing")

    reject_arguments(args, 1)
    kind = resolve_social(args[0])
    async with services.store.user(context.user_id) as user:
        if not user.socials[kind]:
            raise NotFoundError(f"user_social_unset_{kind.value}")
        user.socials[kind] = ""

    return Response.simple(f"user_social_clear_{kind.value}")


async def social_available(
        args: List[str],
        _context: RequestContext,
        _services: SettingsServices
) -> Response:
    """List the socials that can be set."""
    reject_arguments(args)
    return Response.simple("user_social_available")


USER_NODE = CommandNode(
    "user",
    "user",
    children=[
        CommandNode(
            "about",
            "user_about",
            handler=about_me_command,
            aliases=["aboutme", "description", "desc", "info"],
            arg_type="this/mention/text"
        ),
        CommandNode(
            "timezone",
            "user_timezone",
            handler=timezone_command,
            aliases=["tz"],
            arg_type="this/timezone"
        ),
        CommandNode(
            "social",
            "user_social",
            aliases=["socials"],
            arg_type="setting (value(s))",
            not_found="user_social_command_unknown",
            children=[
                CommandNode(
                    "set",
                    "user_social_set",
                    handler=social_set,
                    aliases=["add"],
                    arg_type="social, code/name"
                ),
                CommandNode(
                    "list",
                    "user_social_list",
                    handler=social_list
                ),
                CommandNode(
                    "clear",
                    "user_social_clear",
                    handler=social_clear,
                    aliases=["remove"],
                    arg_type="social"
                ),
                CommandNode(
                    "available",
                    "user_social_available",
                    handler=social_available,
                    aliases=["types"]
                )
            ]
        )
    ]
)
