"""
Tests for horatio/botsettings/router.py and the settings command tree.
"""

from dataclasses import replace

import pytest

from horatio.botsettings.errors import NotFoundError
from horatio.botsettings.response import Response, ResponseKind
from horatio.botsettings.router import CommandNode, dispatch
from horatio.botsettings.settings_tree import SETTINGS_ROOT
from horatio.output import ENG_STRINGS


async def noop(args, context, services):
    return Response(title="noop", desc=" ".join(args))


class TestCommandNode:
    """Tests for command node construction."""

    def test_needs_handler_or_children(self):
        with pytest.raises(ValueError):
            CommandNode("empty", "empty")

    def test_rejects_handler_and_children(self):
        child = CommandNode("child", "child", handler=noop)
        with pytest.raises(ValueError):
            CommandNode("both", "both", handler=noop, children=[child])

    def test_rejects_duplicate_selectors(self):
        first = CommandNode("first", "first", handler=noop, aliases=["x"])
        second = CommandNode("x", "second", handler=noop)
        with pytest.raises(ValueError):
            CommandNode("parent", "parent", children=[first, second])

    def test_resolve_aliases(self):
        child = CommandNode("timezone", "tz", handler=noop, aliases=["tz"])
        parent = CommandNode("user", "user", children=[child])
        assert parent.resolve("timezone") is child
        assert parent.resolve("tz") is child
        assert parent.resolve("Timezone") is None

    @pytest.mark.asyncio
    async def test_handler_gets_remaining_arguments(self, context, services):
        child = CommandNode("echo", "echo", handler=noop)
        parent = CommandNode("root", "root", children=[child])
        response = await dispatch(
            parent, ["echo", "a", "b"], context, services
        )
        assert response.desc == "a b"


class TestSettingsTree:
    """Tests enumerating the settings command tree."""

    def test_every_node_has_strings(self):
        for path, node in SETTINGS_ROOT.walk():
            if len(path) > 1:
                assert f"{node.disp_type}_help" in ENG_STRINGS, path
            if node.children and node.default is None:
                assert f"{node.disp_type}_usage_title" in ENG_STRINGS, path
                assert f"{node.disp_type}_usage_desc" in ENG_STRINGS, path
            if node.children:
                assert f"{node.not_found}_title" in ENG_STRINGS, path
                assert f"{node.not_found}_desc" in ENG_STRINGS, path

    def test_command_paths(self):
        paths = {" ".join(path[1:]) for path, _ in SETTINGS_ROOT.walk()}
        for command in [
            "bot prefix",
            "user about",
            "user timezone",
            "user social set",
            "user social list",
            "user social clear",
            "user social available",
            "server joinmsg",
            "server leavemsg",
            "server tips enable",
            "server tips disable",
            "server autosendnowplaying enable",
            "server invitegen setchannel",
            "server invitegen key",
            "server filter enable",
            "server filter timeout",
            "server filter words add",
            "server filter words remove",
            "server filter words clear",
            "server log set",
            "server log unset",
            "server log enable",
            "server log disable",
            "server log events",
            "server reset",
        ]:
            assert command in paths

    def test_terminal_nodes_have_handlers(self):
        for path, node in SETTINGS_ROOT.walk():
            if not node.children:
                assert node.handler is not None, path


class TestDispatch:
    """Tests for routing through the settings tree."""

    @pytest.mark.asyncio
    async def test_domain_without_arguments_shows_usage(self, run):
        response = await run("server")
        assert response.kind is ResponseKind.USAGE
        assert response.title == ENG_STRINGS["server_usage_title"]
        assert "&server" in response.desc
        field_names = [name for name, _ in response.fields]
        assert "joinmsg" in field_names
        assert "reset" in field_names

    @pytest.mark.asyncio
    async def test_usage_lists_aliases(self, run):
        response = await run("user")
        field_names = [name for name, _ in response.fields]
        assert "timezone / tz" in field_names

    @pytest.mark.asyncio
    async def test_usage_uses_request_prefix(self, run, context):
        request = replace(context, prefix="?")
        response = await run("server filter", request)
        assert "?server filter" in response.desc

    @pytest.mark.asyncio
    async def test_unknown_setting(self, run):
        response = await run("server bogus")
        assert response.is_error
        assert "bogus" in response.desc

    @pytest.mark.asyncio
    async def test_unknown_nested_setting(self, dispatch_raw):
        with pytest.raises(NotFoundError) as e:
            await dispatch_raw("server filter words shout")
        assert e.value.disp_type == "server_filter_words_unknown"

    @pytest.mark.asyncio
    async def test_selectors_are_case_sensitive(self, dispatch_raw):
        with pytest.raises(NotFoundError):
            await dispatch_raw("server Tips")

    @pytest.mark.asyncio
    async def test_terminal_rejects_extra_arguments(self, dispatch_raw):
        with pytest.raises(NotFoundError) as e:
            await dispatch_raw("server tips enable now")
        assert "now" in e.value.error_message

    @pytest.mark.asyncio
    async def test_group_default_handler(self, run):
        response = await run("server tips")
        assert response.kind is ResponseKind.SUCCESS
        assert response.desc == ENG_STRINGS["server_tips_disabled_desc"]
