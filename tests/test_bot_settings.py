"""
Tests for horatio/botsettings/bot_node.py.
"""

import pytest

from horatio import settings
from horatio.botsettings.errors import NotFoundError


class TestCommandPrefix:
    """Tests for the guild command prefix setting."""

    @pytest.mark.asyncio
    async def test_view_default(self, run):
        response = await run("bot prefix")
        assert not response.is_error
        assert f"``{settings.command_prefix}``" in response.desc

    @pytest.mark.asyncio
    async def test_set_override(self, run, store):
        response = await run("bot prefix !")
        assert not response.is_error
        assert store.get_guild("100").bot_prefix == "!"
        assert store.guild_prefix("100", settings.command_prefix) == "!"

        response = await run("bot prefix")
        assert "``!``" in response.desc

    @pytest.mark.asyncio
    async def test_setting_default_clears_override(self, run, store):
        await run("bot prefix !")
        await run(f"bot prefix {settings.command_prefix}")

        assert store.get_guild("100").bot_prefix == ""
        response = await run("bot prefix")
        assert f"``{settings.command_prefix}``" in response.desc

    @pytest.mark.asyncio
    async def test_extra_argument_rejected(self, dispatch_raw, store):
        with pytest.raises(NotFoundError) as e:
            await dispatch_raw("bot prefix ! x")
        assert "x" in e.value.error_message
        assert store.get_guild("100").bot_prefix == ""
