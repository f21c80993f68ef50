import asyncio
import logging
from typing import Protocol

import httpx

from shared_common.exceptions import RemoteValidationError

logger= logging.getLogger(__name__)

DEFAULT_TIMEOUT_MS = 5000


class UserDirectory(Protocol):
    """Answers whether a user exists. Implemented over HTTP in production."""

    async def exists(self, user_id: int) -> bool:
        ...


def _describe(exc: Exception) -> str:
    return str(exc) or exc.__class__.__name__


class UserServiceClient:
    """Calls the user service's ``GET /users/{id}/exists`` endpoint.

    :param base_url: root URL of the user service, e.g. ``http://user-service:8081``
    :type base_url: str
    :param timeout_ms: upper bound for one existence check, in milliseconds
    :type timeout_ms: int
    :param http_client: client to send requests with; one is created when omitted
    :type http_client: httpx.AsyncClient | None
    """

    def __init__(self, base_url: str, timeout_ms: int = DEFAULT_TIMEOUT_MS, http_client: httpx.AsyncClient | None = None):
        self.base_url = base_url.rstrip("/")
        self.timeout_ms = timeout_ms
        self._timeout = httpx.Timeout(timeout_ms / 1000)
        self._client = http_client or httpx.AsyncClient(timeout=self._timeout)

    async def exists(self, user_id: int) -> bool:
        """Check whether the user service knows ``user_id``.

        :raises RemoteValidationError: on timeout, transport failure or any
            status other than 2xx and 404
        :return: True on 2xx, False on 404
        :rtype: bool
        """
        url = f"{self.base_url}/users/{user_id}/exists"
        logger.debug(f"Checking if user exists with ID: {user_id}")
        try:
            # httpx limits each phase and read separately; wait_for bounds the whole check
            resp = await asyncio.wait_for(self._client.get(url, timeout=self._timeout), self.timeout_ms / 1000)
        except (asyncio.TimeoutError, httpx.TimeoutException) as e:
            logger.error(f"Timed out after {self.timeout_ms} ms checking user existence for ID {user_id}")
            raise RemoteValidationError(
                f"Error validating user: request timed out after {self.timeout_ms} ms"
            ) from e
        except httpx.HTTPError as e:
            logger.error(f"Error checking user existence for ID {user_id}: {_describe(e)}")
            raise RemoteValidationError(f"Error validating user: {_describe(e)}") from e

        if resp.status_code == 404:
            logger.debug(f"User with ID {user_id} does not exist")
            return False
        if resp.is_success:
            logger.debug(f"User with ID {user_id} exists")
            return True
        logger.error(f"Error checking user existence for ID {user_id}: HTTP {resp.status_code}")
        raise RemoteValidationError(
            f"Error validating user: {resp.status_code} {resp.reason_phrase} from GET {url}"
        )

    async def aclose(self):
        await self._client.aclose()
