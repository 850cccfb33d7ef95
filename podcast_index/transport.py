"""
HTTP transport shared by every Podcast Index endpoint.
"""

import json
import logging
from typing import Any, Callable, Dict, Optional

import aiohttp
from yarl import URL

from .auth import Credentials, now_ms, sign
from .errors import ParseError, PodcastIndexAuthError, TransportError
from .query import QueryOptions, encode_query
from .version import __version__

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.podcastindex.org/api/1.0"
USER_AGENT = f"Podcast-Index-Python/{__version__}"
BODY_SNIPPET = 500


class Transport:
    """Signs, sends and parses a single GET request per call.

    There are no retries and no internal deadline; pass ``timeout`` (seconds)
    or wrap calls in ``asyncio.timeout`` to bound them.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        user_agent: str = USER_AGENT,
        session: Optional[aiohttp.ClientSession] = None,
        timeout: Optional[float] = None,
        clock: Callable[[], float] = now_ms,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.user_agent = user_agent
        self.timeout = timeout
        self.clock = clock
        self._session = session
        self._owns_session = session is None

    async def _ensure_session(self) -> None:
        """Ensure aiohttp session is created."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(
                timeout=aiohttp.ClientTimeout(total=self.timeout)
            )
            self._owns_session = True

    async def close(self) -> None:
        """Close the HTTP session if this transport created it."""
        if self._owns_session and self._session and not self._session.closed:
            await self._session.close()

    def build_url(self, path: str, options: QueryOptions) -> str:
        url = f"{self.base_url}/{path.lstrip('/')}"
        query = encode_query(options)
        if query:
            url = f"{url}?{query}"
        return url

    def build_headers(self, credentials: Credentials) -> Dict[str, str]:
        headers = {
            "User-Agent": self.user_agent,
            "Accept": "application/json",
            "Content-Type": "application/json",
        }
        # Signed per request, the server rejects stale X-Auth-Date values
        headers.update(sign(credentials.key, credentials.secret, self.clock()).as_headers())
        return headers

    async def fetch(self, path: str, options: QueryOptions, credentials: Credentials) -> Any:
        """Perform a signed GET request and return the decoded JSON body.

        Raises:
            EncodingError: If an option value cannot be encoded
            SigningError: If the clock returns an unusable value
            TransportError: On network failure or a non-2xx status
            ParseError: If the body is not valid JSON
        """
        url = self.build_url(path, options)
        headers = self.build_headers(credentials)

        await self._ensure_session()
        assert self._session is not None

        logger.debug(f"GET {url}")
        try:
            async with self._session.get(URL(url, encoded=True), headers=headers) as response:
                status = response.status
                raw = await response.read()
        except aiohttp.ClientError as e:
            raise TransportError(f"Request to {path} failed", cause=e) from e

        snippet = raw[:BODY_SNIPPET].decode("utf-8", errors="replace")

        if status == 401:
            raise PodcastIndexAuthError(
                "Authentication failed - check API credentials", status=status, body=snippet
            )

        if not 200 <= status < 300:
            raise TransportError(f"HTTP {status} from {path}", status=status, body=snippet)

        try:
            data = json.loads(raw)
        except ValueError as e:
            raise ParseError(f"Invalid JSON returned from {path}", body=snippet, cause=e) from e

        logger.debug(f"{path} returned {len(raw)} bytes")
        return data
