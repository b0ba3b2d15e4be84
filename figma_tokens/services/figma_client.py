"""Figma API client for fetching design variables."""

import logging
import re
from typing import Any, Dict, Optional, Protocol

import httpx
from tenacity import retry, retry_if_exception, stop_after_attempt, wait_exponential

from figma_tokens.config import get_settings

settings = get_settings()
logger = logging.getLogger(__name__)


class FigmaApi(Protocol):
    """Anything that can return the local variables of a Figma file."""

    async def get_local_variables(self, file_key: str) -> Dict[str, Any]:
        ...


def _is_retryable(error: BaseException) -> bool:
    """Retry on transport errors and server errors (5xx), never on 4xx."""
    if isinstance(error, httpx.HTTPStatusError):
        return error.response.status_code >= 500
    return isinstance(error, httpx.TransportError)


class FigmaClient:
    """Client for interacting with the Figma API."""

    def __init__(
        self,
        access_token: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.access_token = access_token or settings.figma_access_token
        if not self.access_token:
            raise ValueError(
                "Figma access token not found. Please set FIGMA_ACCESS_TOKEN in your .env file or environment variables."
            )
        self.base_url = settings.figma_api_base_url
        self.timeout = settings.request_timeout
        self.headers = {"X-Figma-Token": self.access_token}
        self._transport = transport

    @staticmethod
    def extract_file_id(file_id_or_url: str) -> str:
        """Extract file ID from Figma URL or return as-is if already an ID."""
        url_pattern = r"figma\.com/(?:file|design)/([a-zA-Z0-9]+)"
        match = re.search(url_pattern, file_id_or_url)
        if match:
            return match.group(1)
        return file_id_or_url

    @retry(
        retry=retry_if_exception(_is_retryable),
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=1, min=4, max=10),
        reraise=True,
    )
    async def get_local_variables(self, file_key: str) -> Dict[str, Any]:
        """Fetch the local variables (and used remote variables) of a Figma file.

        Args:
            file_key: Figma file key or file URL

        Returns:
            The raw ``/variables/local`` response
        """
        file_key = self.extract_file_id(file_key)
        logger.debug("Fetching local variables of %s", file_key)
        async with httpx.AsyncClient(transport=self._transport) as client:
            response = await client.get(
                f"{self.base_url}/files/{file_key}/variables/local",
                headers=self.headers,
                timeout=self.timeout,
            )
            if response.status_code == 403:
                # Variables endpoint needs its own token scope
                logger.error(
                    "Forbidden fetching variables of %s; the token needs the "
                    "'file_variables:read' scope",
                    file_key,
                )
            response.raise_for_status()
            return response.json()
