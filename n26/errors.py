"""Exception hierarchy for the n26 client."""


class N26Error(Exception):
    """Base class for every error raised by this package."""


class NetworkError(N26Error):
    """The HTTP request could not be completed."""


class AuthError(N26Error):
    """Login failed: bad credentials, unexpected status or malformed token."""


class MfaTimeoutError(AuthError):
    """The login was not approved on the paired device in time."""


class MfaRejectedError(AuthError):
    """The login was rejected on the paired device."""


class MfaCancelledError(AuthError):
    """The caller cancelled the wait for MFA approval."""


class DecodeError(N26Error):
    """A response body is not valid JSON or does not match the expected shape."""


class FilesystemError(N26Error):
    """A downloaded artifact could not be written to disk."""


class InvalidArgument(N26Error, ValueError):
    """The call was made with arguments the API cannot accept."""
