"""
Shared pytest fixtures for Horatio tests.
"""

import os
import sys
from unittest.mock import AsyncMock, Mock

import pytest

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from horatio.botsettings.context import RequestContext, SettingsServices  # noqa: E402
from horatio.botsettings.router import dispatch, run_command  # noqa: E402
from horatio.botsettings.settings_tree import SETTINGS_ROOT  # noqa: E402
from horatio.storage.settings_store import SettingsStore  # noqa: E402


# ============================================================================
# Store Fixtures
# ============================================================================

@pytest.fixture
def store():
    """Create a settings store with the test guild and user provisioned."""
    store = SettingsStore()
    store.ensure_guild("100")
    store.ensure_user("200")
    return store


@pytest.fixture
def nnid_checker():
    """Create an NNID checker that reports every NNID as existing."""
    checker = Mock()
    checker.user_exists = AsyncMock(return_value=True)
    return checker


@pytest.fixture
def services(store, nnid_checker):
    """Create settings services around the test store."""
    return SettingsServices(store=store, nnid_checker=nnid_checker)


@pytest.fixture
def context():
    """Create a request from the test user in the test guild."""
    return RequestContext(user_id="200", guild_id="100", channel_id="300")


# ============================================================================
# Command Fixtures
# ============================================================================

@pytest.fixture
def run(context, services):
    """Run a command string through the whole settings tree."""
    async def _run(command, request=None):
        return await run_command(
            SETTINGS_ROOT,
            command.split(),
            request or context,
            services
        )
    return _run


@pytest.fixture
def dispatch_raw(context, services):
    """Dispatch a command string without turning errors into responses."""
    async def _dispatch(command, request=None):
        return await dispatch(
            SETTINGS_ROOT,
            command.split(),
            request or context,
            services
        )
    return _dispatch
