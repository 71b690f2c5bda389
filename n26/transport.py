"""Signed HTTP transport for the N26 API."""

from typing import BinaryIO, Callable, Dict, Optional, TypeVar
from urllib.parse import urlencode

import requests
import urllib3

from n26.errors import InvalidArgument, NetworkError
from n26.logger import get_logger
from n26.models.config import ClientConfig
from n26.token_source import BearerAuth, TokenSource

logger = get_logger("n26.transport")

SUPPORTED_METHODS = ("GET", "POST")

Params = Optional[Dict[str, Optional[str]]]
T = TypeVar("T")


class Transport:
    """Issues bearer-signed GET/POST requests against the API origin.

    Status codes are not inspected here; callers decide what a body means.
    """

    def __init__(self, token_source: TokenSource, config: Optional[ClientConfig] = None,
                 session: Optional[requests.Session] = None):
        self.config = config or ClientConfig()
        self.session = session or requests.Session()
        self.session.headers.update({"User-Agent": self.config.user_agent})
        self.auth = BearerAuth(token_source)

    def build_url(self, path: str, params: Params = None) -> str:
        """Join the origin, path and encoded query. Empty parameters are dropped."""
        url = f"{self.config.base_url}{path}"
        query = {key: str(value) for key, value in (params or {}).items() if value not in (None, "")}
        if query:
            url = f"{url}?{urlencode(query)}"
        return url

    def _send(self, method: str, path: str, params: Params, stream: bool) -> requests.Response:
        method = method.upper()
        if method not in SUPPORTED_METHODS:
            raise InvalidArgument(f"Unsupported HTTP method: {method}")

        url = self.build_url(path, params)
        logger.debug(f"{method} {url}")

        try:
            response = self.session.request(method, url, auth=self.auth, stream=stream,
                                            timeout=self.config.request_timeout)
        except requests.RequestException as e:
            raise NetworkError(f"{method} {path} failed: {e}") from e

        logger.debug(f"{method} {path} -> {response.status_code}")
        return response

    def request(self, method: str, path: str, params: Params = None) -> bytes:
        """Send a request and return the raw response body."""
        response = self._send(method, path, params, stream=False)
        try:
            return response.content
        except requests.RequestException as e:
            raise NetworkError(f"{method} {path} failed reading body: {e}") from e
        finally:
            response.close()

    def stream(self, method: str, path: str, params: Params, consumer: Callable[[BinaryIO], T]) -> T:
        """Send a request and hand the open response body to `consumer`.

        The response is closed once `consumer` returns; its result is passed through.
        A connection dropped while `consumer` reads raises NetworkError.
        """
        response = self._send(method, path, params, stream=True)
        with response:
            response.raw.decode_content = True
            try:
                return consumer(response.raw)
            except (requests.RequestException, urllib3.exceptions.HTTPError) as e:
                raise NetworkError(f"{method} {path} failed reading body: {e}") from e

    def close(self) -> None:
        self.session.close()
