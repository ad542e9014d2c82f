"""
Tests for horatio/output: response embeds and command error handling.
"""

from unittest.mock import AsyncMock, Mock

import pytest
from discord import Forbidden
from discord.ext.commands import CommandNotFound, MissingPermissions

from horatio import settings
from horatio.botsettings.response import Response, ResponseKind
from horatio.output import ENG_STRINGS, disp_str
from horatio.output.error_handler import (
    command_error_message, handle_command_error
)
from horatio.output.output import response_embed, send_response


class TestDispStr:
    """Tests for display string lookup."""

    def test_known_string(self):
        assert disp_str("server_help") == ENG_STRINGS["server_help"]

    def test_unknown_string(self):
        assert disp_str("not_a_string") == ""
        assert disp_str("server_help", "fra") == ""

    def test_prefix_substitution(self):
        desc = disp_str("user_about_unset_desc")
        assert "%PREFIX%" not in desc
        assert f"{settings.command_prefix}user about" in desc


class TestResponseEmbed:
    """Tests for turning responses into embeds."""

    def test_success_embed(self):
        embed = response_embed(Response(
            title="Title",
            desc="Body",
            fields=[("Name", "Value")]
        ))
        assert embed.title == "Title"
        assert embed.description == "Body"
        assert embed.colour.value == settings.embed_color_success
        assert embed.fields[0].name == "Name"
        assert embed.fields[0].value == "Value"

    @pytest.mark.parametrize("kind, colour", [
        (ResponseKind.ERROR, settings.embed_color_error),
        (ResponseKind.USAGE, settings.embed_color_usage),
    ])
    def test_embed_colour_by_kind(self, kind, colour):
        embed = response_embed(Response(title="t", desc="d", kind=kind))
        assert embed.colour.value == colour

    @pytest.mark.asyncio
    async def test_send_response(self):
        channel = Mock()
        channel.send = AsyncMock(return_value=Mock())

        await send_response(channel, Response.simple("server_tips_enable"))

        embed = channel.send.await_args.kwargs["embed"]
        assert embed.title == ENG_STRINGS["server_tips_enable_title"]

    @pytest.mark.asyncio
    async def test_send_response_falls_back_to_text(self):
        channel = Mock()
        channel.send = AsyncMock(side_effect=[
            Forbidden(Mock(status=403, reason="Forbidden"), "no embeds"),
            Mock()
        ])

        await send_response(channel, Response(title="Title", desc="Body"))

        assert channel.send.await_count == 2
        text = channel.send.await_args.args[0]
        assert "**Title**" in text
        assert "Body" in text


class TestErrorHandler:
    """Tests for command error handling."""

    def test_missing_permissions_message(self):
        message = command_error_message(MissingPermissions(["administrator"]))
        assert "administrator" in message

    def test_unhandled_error_message(self):
        assert command_error_message(RuntimeError("boom")) == ""

    @pytest.mark.asyncio
    async def test_sends_error_embed(self):
        context = Mock()
        context.send = AsyncMock(return_value=Mock())

        await handle_command_error(
            context,
            MissingPermissions(["administrator"])
        )

        embed = context.send.await_args.kwargs["embed"]
        assert embed.title == ENG_STRINGS["command_error_header"]
        assert embed.colour.value == settings.embed_color_error

    @pytest.mark.asyncio
    async def test_command_not_found_ignored(self):
        context = Mock()
        context.send = AsyncMock()

        await handle_command_error(context, CommandNotFound("nope"))

        context.send.assert_not_awaited()
