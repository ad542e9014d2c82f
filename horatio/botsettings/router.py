"""
Settings command router module.

Settings commands form a small tree: "server filter words add" walks
from the server node through filter and words down to add. Every node
is declared once as data; dispatch consumes one argument per level
until it reaches a handler.

At each level:
- No arguments left: the node's default handler runs, or its usage is
  shown if it has none.
- First argument names a child (case-sensitive, aliases included): the
  child takes the remaining arguments.
- Anything else: NotFoundError naming the argument.
"""

from typing import (
    Awaitable, Callable, Dict, Iterator, List, Optional, Sequence, Tuple
)

from loguru import logger

from horatio.botsettings.context import RequestContext, SettingsServices
from horatio.botsettings.errors import NotFoundError, SettingsError
from horatio.botsettings.response import Response, ResponseKind
from horatio.output import disp_str

Handler = Callable[
    [List[str], RequestContext, SettingsServices],
    Awaitable[Response]
]


def reject_arguments(args: List[str], expected: int = 0) -> None:
    """
    Make sure a handler didn't receive more arguments than it takes.

    :param args: Remaining arguments
    :param expected: Number of arguments the handler takes
    :raises NotFoundError: Naming the first unexpected argument
    """
    if len(args) > expected:
        raise NotFoundError("settings_not_found", args[expected])


class CommandNode:
    """
    Node in the settings command tree.

    A node either has a handler, which receives every remaining
    argument, or children selected by the next argument.
    """

    __slots__ = [
        "name", "aliases", "handler", "default", "children", "disp_type",
        "arg_type", "not_found", "selector_map"
    ]

    def __init__(
            self,
            name: str,
            disp_type: str,
            handler: Optional[Handler] = None,
            children: Sequence["CommandNode"] = (),
            default: Optional[Handler] = None,
            aliases: Sequence[str] = (),
            arg_type: str = "this",
            not_found: str = "settings_not_found"
    ) -> None:
        """
        Initializer for the CommandNode class.

        :param name: Selector that picks this node
        :param disp_type: Display string prefix; `_help` is this node's
            line in its parent's usage, `_usage_title` and `_usage_desc`
            make up this node's own usage response
        :param handler: Async handler receiving all remaining arguments
        :param children: Child nodes selected by the next argument
        :param default: Async handler run when no arguments are left,
            instead of showing the usage
        :param aliases: Other selectors that pick this node
        :param arg_type: Description of the arguments this node accepts
        :param not_found: Display type of the error raised when the next
            argument matches no child
        :raises ValueError: When the node has both or neither of a
            handler and children, or two children share a selector
        """
        if (handler is None) == (not children):
            raise ValueError(
                f"Command node {name} needs either a handler or children"
            )

        self.name = name
        self.aliases = tuple(aliases)
        self.handler = handler
        self.default = default
        self.children = tuple(children)
        self.disp_type = disp_type
        self.arg_type = arg_type
        self.not_found = not_found

        self.selector_map: Dict[str, CommandNode] = {}
        for child in self.children:
            for selector in child.selectors:
                if selector in self.selector_map:
                    raise ValueError(
                        f"Duplicate selector {selector} under {name}"
                    )
                self.selector_map[selector] = child

    @property
    def selectors(self) -> Tuple[str, ...]:
        """Every selector that picks this node."""
        return (self.name,) + self.aliases

    def resolve(self, selector: str) -> Optional["CommandNode"]:
        """
        Find the child picked by a selector.

        :param selector: Argument to match, case-sensitive
        :return: Child node, or None if no child matches
        """
        return self.selector_map.get(selector)

    def usage(self, path: Sequence[str], prefix: str) -> Response:
        """
        Build the usage response of this node.

        :param path: Selectors typed to reach this node
        :param prefix: Command prefix shown in the usage line
        :return: Usage response listing every child
        """
        command = " ".join(path)
        desc = disp_str(f"{self.disp_type}_usage_desc")
        desc += "\n\n" + disp_str("settings_usage_line").format(
            prefix,
            command
        )

        fields = []
        for child in self.children:
            field_name = " / ".join(child.selectors)
            field_value = disp_str("settings_usage_field").format(
                disp_str(f"{child.disp_type}_help"),
                child.arg_type
            )
            fields.append((field_name, field_value))

        return Response(
            title=disp_str(f"{self.disp_type}_usage_title"),
            desc=desc,
            kind=ResponseKind.USAGE,
            fields=fields
        )

    def walk(
            self,
            path: Tuple[str, ...] = ()
    ) -> Iterator[Tuple[Tuple[str, ...], "CommandNode"]]:
        """
        Iterate over this node and every node below it.

        :param path: Selectors leading to this node
        :return: Iterator of selector paths (canonical names only) and
            nodes
        """
        path = path + (self.name,)
        yield path, self
        for child in self.children:
            yield from child.walk(path)


async def dispatch(
        node: CommandNode,
        args: List[str],
        context: RequestContext,
        services: SettingsServices,
        path: Tuple[str, ...] = ()
) -> Response:
    """
    Route arguments down the command tree.

    :param node: Node receiving the arguments
    :param args: Remaining arguments
    :param context: Command context
    :param services: Settings store and services
    :param path: Selectors typed to reach this node
    :return: Command response
    :raises SettingsError: When the command fails
    """
    if node.handler is not None:
        return await node.handler(args, context, services)

    if not args:
        if node.default is not None:
            return await node.default(args, context, services)
        return node.usage(path, context.prefix)

    child = node.resolve(args[0])
    if child is None:
        raise NotFoundError(node.not_found, args[0])

    logger.trace(
        "Settings command {} routed to {}",
        " ".join(path) or node.name,
        args[0]
    )
    return await dispatch(
        child,
        args[1:],
        context,
        services,
        path + (args[0],)
    )


async def run_command(
        node: CommandNode,
        args: List[str],
        context: RequestContext,
        services: SettingsServices
) -> Response:
    """
    Run a settings command and turn settings errors into error
    responses.

    :param node: Domain node the command starts at
    :param args: Command arguments, not including the domain name
    :param context: Command context
    :param services: Settings store and services
    :return: Command response
    """
    try:
        return await dispatch(node, list(args), context, services)
    except SettingsError as e:
        # Trace, because we don't need the bot to report to us whenever
        # a user enters a command wrongly.
        logger.trace(
            "Settings command error {} triggered by command: {} {}",
            e.error_message,
            node.name,
            " ".join(args)
        )
        return Response.from_error(e)
