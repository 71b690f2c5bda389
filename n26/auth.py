"""Two-phase N26 login: password grant followed by out-of-band MFA approval."""

import threading
import time
from typing import Any, Callable, Dict, Optional

import requests
from pydantic import ValidationError

from n26.errors import AuthError, MfaCancelledError, MfaRejectedError, MfaTimeoutError, NetworkError
from n26.logger import get_logger
from n26.models.auth import Credentials, Token
from n26.models.config import ClientConfig

logger = get_logger("n26.auth")

TOKEN_PATH = "/oauth2/token"
MFA_CHALLENGE_PATH = "/api/mfa/challenge"

# Public OAuth client of the N26 Android app
CLIENT_AUTH = ("android", "secret")

MFA_PENDING = "authorization_pending"

# Statuses the API uses when the device owner declines the login
MFA_REJECTED_STATUSES = (400, 401, 403)


class Authenticator:
    """Obtains an access token for a set of credentials.

    Each call to `authenticate` runs the whole handshake; nothing is cached or persisted.
    """

    def __init__(self, config: Optional[ClientConfig] = None, session: Optional[requests.Session] = None,
                 clock: Callable[[], float] = time.monotonic, sleep: Callable[[float], None] = time.sleep):
        self.config = config or ClientConfig()
        self.session = session or requests.Session()
        self._clock = clock
        self._sleep = sleep

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> "Authenticator":
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    def authenticate(self, credentials: Credentials, cancel: Optional[threading.Event] = None) -> Token:
        """Log in and, when the API asks for it, wait for MFA approval on the paired device.

        Args:
            credentials: Username, password and paired device token
            cancel: Optional event; setting it aborts the MFA wait

        Returns:
            Token with a non-empty access token

        Raises:
            AuthError: Bad credentials, unexpected status or malformed token
            MfaTimeoutError: No approval before `mfa_timeout`
            MfaRejectedError: The login was declined on the device
            MfaCancelledError: `cancel` was set while waiting
            NetworkError: A request could not be sent
        """
        token = self.request_token(credentials)
        if not token.is_mfa_required:
            logger.info(f"Logged in as {credentials.username}")
            return token

        self.request_mfa_approval(token.mfa_token, credentials.device_token)
        token = self.wait_for_mfa_approval(token.mfa_token, credentials.device_token, cancel)
        logger.info(f"Login approved for {credentials.username}")
        return token

    def request_token(self, credentials: Credentials) -> Token:
        """Password grant. Returns either a final token or an MFA challenge."""
        response = self._post(
            TOKEN_PATH,
            credentials.device_token,
            data={
                "grant_type": "password",
                "username": credentials.username,
                "password": credentials.password,
            },
        )
        payload = _json_object(response)

        # N26 answers 403 with an mfaToken when a device approval is required
        if payload and payload.get("mfaToken"):
            return _decode_token(payload)

        if not response.ok:
            raise AuthError(f"Login failed with HTTP {response.status_code}: {_describe_error(payload)}")

        token = _decode_token(payload)
        if not token.access_token:
            raise AuthError("Token response has neither an access token nor an MFA challenge")
        return token

    def request_mfa_approval(self, mfa_token: str, device_token: str) -> None:
        """Ask N26 to push an approval prompt to the paired device."""
        response = self._post(
            MFA_CHALLENGE_PATH,
            device_token,
            json={"challengeType": "oob", "mfaToken": mfa_token},
        )
        if not response.ok:
            raise AuthError(
                f"MFA challenge failed with HTTP {response.status_code}: {_describe_error(_json_object(response))}"
            )
        logger.info("Approve the login in your N26 app to continue")

    def wait_for_mfa_approval(self, mfa_token: str, device_token: str,
                              cancel: Optional[threading.Event] = None) -> Token:
        """Poll until the login is approved, rejected, cancelled or times out."""
        interval = self.config.mfa_poll_interval
        deadline = self._clock() + self.config.mfa_timeout

        while True:
            remaining = deadline - self._clock()
            if remaining <= 0:
                logger.warning(f"MFA approval not received within {self.config.mfa_timeout:g}s")
                raise MfaTimeoutError(f"MFA approval not received within {self.config.mfa_timeout:g} seconds")

            self._wait(min(interval, remaining), cancel)

            token = self.confirm_mfa(mfa_token, device_token)
            if token is not None:
                return token

    def confirm_mfa(self, mfa_token: str, device_token: str) -> Optional[Token]:
        """One confirmation poll. Returns the final token, or None while approval is pending."""
        response = self._post(
            TOKEN_PATH,
            device_token,
            data={"grant_type": "mfa_oob", "mfaToken": mfa_token},
        )
        payload = _json_object(response)

        if response.ok:
            token = _decode_token(payload)
            if not token.access_token:
                raise AuthError("MFA confirmation returned no access token")
            return token

        error = (payload or {}).get("error")
        if error == MFA_PENDING or (response.status_code == 400 and not error):
            return None

        if response.status_code in MFA_REJECTED_STATUSES:
            logger.warning("MFA approval was rejected")
            raise MfaRejectedError(f"MFA approval rejected: {_describe_error(payload)}")

        raise AuthError(f"MFA confirmation failed with HTTP {response.status_code}")

    def _wait(self, seconds: float, cancel: Optional[threading.Event]) -> None:
        if cancel is None:
            self._sleep(seconds)
            return
        if cancel.is_set() or cancel.wait(seconds):
            raise MfaCancelledError("MFA approval wait was cancelled")

    def _post(self, path: str, device_token: str, **kwargs) -> requests.Response:
        url = f"{self.config.base_url}{path}"
        logger.debug(f"POST {url}")
        try:
            return self.session.post(
                url,
                auth=CLIENT_AUTH,
                headers={"device-token": device_token, "User-Agent": self.config.user_agent},
                timeout=self.config.request_timeout,
                **kwargs,
            )
        except requests.RequestException as e:
            raise NetworkError(f"POST {path} failed: {e}") from e


def _json_object(response: requests.Response) -> Optional[Dict[str, Any]]:
    """Response body as a JSON object, or None if it is anything else."""
    try:
        payload = response.json()
    except ValueError:
        return None
    return payload if isinstance(payload, dict) else None


def _decode_token(payload: Optional[Dict[str, Any]]) -> Token:
    if payload is None:
        raise AuthError("Token response is not a JSON object")
    try:
        return Token.model_validate(payload)
    except ValidationError as e:
        raise AuthError(f"Malformed token response: {e}") from e


def _describe_error(payload: Optional[Dict[str, Any]]) -> str:
    if not payload:
        return "no details"
    return payload.get("error_description") or payload.get("detail") or payload.get("error") or "no details"
