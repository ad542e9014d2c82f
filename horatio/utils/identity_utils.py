"""
Identity utilities module.

Checks whether a Nintendo Network ID exists before users are allowed to
add it to their socials.
"""

import asyncio
import re
from typing import Optional

import aiohttp
from loguru import logger

from horatio import settings

PID_REGEX = r"<out_id>\s*([0-9]+)\s*</out_id>"


class IdentityCheckError(Exception):
    """When an identity lookup could not be completed."""


class NNIDChecker:
    """Nintendo Network ID existence checker."""

    __slots__ = ["url", "client_id", "client_secret", "timeout"]

    def __init__(
            self,
            url: str = settings.nnid_lookup_url,
            client_id: str = settings.nnid_client_id,
            client_secret: str = settings.nnid_client_secret,
            timeout: float = settings.nnid_lookup_timeout
    ) -> None:
        """
        Initializer for the NNIDChecker class.

        :param url: Mapped ID lookup endpoint
        :param client_id: Client ID header sent with lookups
        :param client_secret: Client secret header sent with lookups
        :param timeout: Total request timeout in seconds
        """
        self.url = url
        self.client_id = client_id
        self.client_secret = client_secret
        self.timeout = timeout

    async def lookup_pid(self, nnid: str) -> Optional[int]:
        """
        Look up the principal ID mapped to a Nintendo Network ID.

        :param nnid: Nintendo Network ID
        :return: Principal ID, or None if the NNID is not mapped
        :raises IdentityCheckError: When the lookup request fails
        """
        params = {
            "input_type": "user_id",
            "output_type": "pid",
            "input": nnid
        }
        headers = {}
        if self.client_id:
            headers["X-Nintendo-Client-ID"] = self.client_id
        if self.client_secret:
            headers["X-Nintendo-Client-Secret"] = self.client_secret

        try:
            async with aiohttp.ClientSession(
                    timeout=aiohttp.ClientTimeout(total=self.timeout)
            ) as session:
                async with session.get(
                        self.url,
                        params=params,
                        headers=headers
                ) as response:
                    if response.status != 200:
                        raise IdentityCheckError(
                            f"NNID lookup returned status {response.status}"
                        )
                    body = await response.text()
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.warning("NNID lookup for {} failed: {}", nnid, e)
            raise IdentityCheckError(str(e)) from e

        match = re.search(PID_REGEX, body)
        if not match:
            return None

        return int(match.group(1))

    async def user_exists(self, nnid: str) -> bool:
        """
        Check if a Nintendo Network ID exists.

        :param nnid: Nintendo Network ID
        :return: Whether the NNID exists
        :raises IdentityCheckError: When the lookup request fails
        """
        pid = await self.lookup_pid(nnid)
        return pid is not None and pid > 0
