"""Bearer token sources used to sign API requests."""

from abc import ABC, abstractmethod

from requests.auth import AuthBase


class TokenSource(ABC):
    """Supplies the bearer token for each outgoing request."""

    @abstractmethod
    def token(self) -> str:
        """Return the access token to send with the next request."""


class StaticTokenSource(TokenSource):
    """Always returns the access token obtained at login."""

    def __init__(self, access_token: str):
        if not access_token:
            raise ValueError("access_token must not be empty")
        self._access_token = access_token

    def token(self) -> str:
        return self._access_token

    def __repr__(self) -> str:
        return "StaticTokenSource(access_token=<hidden>)"


class BearerAuth(AuthBase):
    """requests auth hook adding `Authorization: Bearer <token>`."""

    def __init__(self, source: TokenSource):
        self.source = source

    def __call__(self, request):
        request.headers["Authorization"] = f"Bearer {self.source.token()}"
        return request
