"""
Tests for horatio/utils/identity_utils.py.
"""

from unittest.mock import AsyncMock, MagicMock, patch

import aiohttp
import pytest

from horatio.utils.identity_utils import IdentityCheckError, NNIDChecker


def mock_session(status=200, body=""):
    """Create a mocked aiohttp.ClientSession class returning one response."""
    response = MagicMock()
    response.status = status
    response.text = AsyncMock(return_value=body)

    session = MagicMock()
    session.get.return_value.__aenter__.return_value = response

    session_class = MagicMock()
    session_class.return_value.__aenter__.return_value = session
    return session_class, session


class TestNNIDChecker:
    """Tests for Nintendo Network ID lookups."""

    @pytest.mark.asyncio
    async def test_existing_nnid(self):
        session_class, session = mock_session(
            body="<mapped_ids><mapped_id><in_id>Ninty</in_id>"
                 "<out_id>1234567</out_id></mapped_id></mapped_ids>"
        )
        checker = NNIDChecker(url="https://example.invalid/mapped_ids")

        with patch("aiohttp.ClientSession", session_class):
            assert await checker.lookup_pid("Ninty") == 1234567
            assert await checker.user_exists("Ninty")

        params = session.get.call_args.kwargs["params"]
        assert params["input"] == "Ninty"
        assert params["output_type"] == "pid"

    @pytest.mark.asyncio
    async def test_unmapped_nnid(self):
        session_class, _ = mock_session(
            body="<mapped_ids><mapped_id><in_id>Nobody</in_id>"
                 "<out_id></out_id></mapped_id></mapped_ids>"
        )
        checker = NNIDChecker(url="https://example.invalid/mapped_ids")

        with patch("aiohttp.ClientSession", session_class):
            assert await checker.lookup_pid("Nobody") is None
            assert not await checker.user_exists("Nobody")

    @pytest.mark.asyncio
    async def test_client_headers_only_when_set(self):
        session_class, session = mock_session(body="")
        checker = NNIDChecker(
            url="https://example.invalid/mapped_ids",
            client_id="id",
            client_secret=""
        )

        with patch("aiohttp.ClientSession", session_class):
            await checker.lookup_pid("Ninty")

        headers = session.get.call_args.kwargs["headers"]
        assert headers == {"X-Nintendo-Client-ID": "id"}

    @pytest.mark.asyncio
    async def test_bad_status(self):
        session_class, _ = mock_session(status=500)
        checker = NNIDChecker(url="https://example.invalid/mapped_ids")

        with patch("aiohttp.ClientSession", session_class):
            with pytest.raises(IdentityCheckError):
                await checker.user_exists("Ninty")

    @pytest.mark.asyncio
    async def test_connection_error(self):
        session_class = MagicMock(
            side_effect=aiohttp.ClientConnectionError("down")
        )
        checker = NNIDChecker(url="https://example.invalid/mapped_ids")

        with patch("aiohttp.ClientSession", session_class):
            with pytest.raises(IdentityCheckError):
                await checker.user_exists("Ninty")
