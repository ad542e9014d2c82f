"""
Tests for horatio/botsettings/settings_cog.py.
"""

from unittest.mock import AsyncMock, Mock, patch

import pytest

from horatio.botsettings.settings_cog import SettingsCog
from horatio.output import ENG_STRINGS
from horatio.storage.settings_store import SettingsStore


def mock_context(guild_id=100, user_id=200, channel_id=300, mentions=()):
    """Create a mocked command context."""
    context = Mock()
    context.guild.id = guild_id
    context.author.id = user_id
    context.channel.id = channel_id
    context.message.raw_mentions = list(mentions)
    context.send = AsyncMock(return_value=Mock())
    return context


class TestSettingsCog:
    """Tests for the Discord side of settings commands."""

    @pytest.fixture
    def cog(self):
        """Create a SettingsCog with a mocked bot and an empty store."""
        return SettingsCog(Mock(), SettingsStore())

    def test_registers_settings_commands(self, cog):
        commands = {command.name: command for command in cog.get_commands()}
        assert set(commands) == {"bot", "user", "server"}
        assert commands["bot"] is cog.guild_bot_settings

    @pytest.mark.asyncio
    async def test_provisions_and_runs(self, cog):
        context = mock_context()

        await cog.run_settings(context, "server", ["tips", "enable"])

        assert cog.store.get_guild("100").tips_channel == "300"
        assert cog.store.has_user("200")
        embed = context.send.await_args.kwargs["embed"]
        assert embed.title == ENG_STRINGS["server_tips_enable_title"]

    @pytest.mark.asyncio
    async def test_passes_mentions(self, cog):
        cog.store.ensure_user("42").about_me = "Hi!"
        context = mock_context(mentions=[42])

        await cog.run_settings(context, "user", ["about", "<@42>"])

        embed = context.send.await_args.kwargs["embed"]
        assert embed.fields[0].value == "Hi!"
        assert cog.store.get_user("200").about_me == ""

    @pytest.mark.asyncio
    async def test_errors_become_embeds(self, cog):
        context = mock_context()

        await cog.run_settings(context, "server", ["bogus"])

        embed = context.send.await_args.kwargs["embed"]
        assert embed.title == ENG_STRINGS["settings_not_found_title"]
        assert "bogus" in embed.description

    @pytest.mark.asyncio
    async def test_usage_shows_guild_prefix(self, cog):
        cog.store.ensure_guild("100").bot_prefix = "?"
        context = mock_context()

        await cog.run_settings(context, "server", [])

        embed = context.send.await_args.kwargs["embed"]
        assert "?server" in embed.description

    @pytest.mark.asyncio
    async def test_save_all(self, cog):
        with patch.object(
                SettingsStore,
                "save_files",
                new=AsyncMock()
        ) as save_files:
            await cog.cog_save_all()
        save_files.assert_awaited_once()
