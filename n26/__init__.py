"""Client library for the N26 banking API."""

from n26.auth import Authenticator
from n26.client import Client
from n26.errors import (
    AuthError,
    DecodeError,
    FilesystemError,
    InvalidArgument,
    MfaCancelledError,
    MfaRejectedError,
    MfaTimeoutError,
    N26Error,
    NetworkError,
)
from n26.models import ClientConfig, Credentials, RawJSON, Timestamp, Token
from n26.token_source import BearerAuth, StaticTokenSource, TokenSource
from n26.transport import Transport

__all__ = [
    "Authenticator",
    "Client",
    "ClientConfig",
    "Credentials",
    "RawJSON",
    "Timestamp",
    "Token",
    "TokenSource",
    "StaticTokenSource",
    "BearerAuth",
    "Transport",
    "N26Error",
    "NetworkError",
    "AuthError",
    "MfaTimeoutError",
    "MfaRejectedError",
    "MfaCancelledError",
    "DecodeError",
    "FilesystemError",
    "InvalidArgument",
]
