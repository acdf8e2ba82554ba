"""CORS relay fetch helper.

Tries a fixed list of public relays in order and returns the first
successful response. Used to pull fighter sheets from hosts that do not
serve them directly.
"""

import json
import logging
from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple
from urllib.parse import quote

import httpx

from src.fighter_pool.config import PROXY_CHAIN, PROXY_TIMEOUT_SECONDS

logger = logging.getLogger(__name__)


class ProxyFetchError(Exception):
    """Raised when every relay in the chain failed."""


@dataclass(frozen=True)
class Proxy:
    """A single relay: a name plus a URL template."""

    name: str
    template: str

    def build(self, url: str) -> str:
        return self.template.format(url=url, quoted=quote(url, safe=""))


DEFAULT_PROXIES = [Proxy(name, template) for name, template in PROXY_CHAIN]

AttemptCallback = Callable[[int, int, Proxy], None]


class ProxyFetcher:
    """Fetch through the relay chain with httpx."""

    def __init__(
        self,
        proxies: Optional[List[Proxy]] = None,
        client: Optional[httpx.Client] = None,
        timeout: float = PROXY_TIMEOUT_SECONDS,
    ):
        self.proxies = list(proxies) if proxies is not None else list(DEFAULT_PROXIES)
        self._client = client
        self.timeout = timeout

    def _get_client(self) -> httpx.Client:
        if self._client is None or self._client.is_closed:
            self._client = httpx.Client(timeout=self.timeout, follow_redirects=True)
        return self._client

    def close(self):
        if self._client is not None and not self._client.is_closed:
            self._client.close()

    def fetch(
        self,
        url: str,
        on_attempt: Optional[AttemptCallback] = None,
        **request_kwargs,
    ) -> Tuple[httpx.Response, Proxy]:
        """GET *url* through each relay until one answers with a 2xx.

        Raises:
            ProxyFetchError: if every relay failed; chained to the last error.
        """
        client = self._get_client()
        last_error: Optional[Exception] = None
        total = len(self.proxies)

        for index, proxy in enumerate(self.proxies, start=1):
            if on_attempt is not None:
                on_attempt(index, total, proxy)
            try:
                response = client.get(proxy.build(url), **request_kwargs)
            except httpx.HTTPError as e:
                logger.warning("Relay %s failed: %s", proxy.name, e)
                last_error = e
                continue

            if response.is_success:
                logger.info("Fetched %s via %s", url, proxy.name)
                return response, proxy

            logger.warning("Relay %s answered http %d", proxy.name, response.status_code)
            last_error = ProxyFetchError(f"http {response.status_code}")

        raise ProxyFetchError(f"all proxies failed for {url}") from last_error

    def fetch_json(
        self,
        url: str,
        on_attempt: Optional[AttemptCallback] = None,
        **request_kwargs,
    ):
        """Fetch and decode JSON, retrying the raw bytes without a BOM.

        Returns:
            ``(data, response, proxy)``
        """
        response, proxy = self.fetch(url, on_attempt=on_attempt, **request_kwargs)
        try:
            data = response.json()
        except ValueError:
            data = json.loads(response.content.decode("utf-8-sig"))
        return data, response, proxy
