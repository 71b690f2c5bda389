"""N26 API client exposing one typed accessor per resource."""

import threading
from typing import BinaryIO, Callable, Optional, Type, TypeVar, Union

from pydantic import BaseModel, ValidationError

from n26.auth import Authenticator
from n26.errors import DecodeError, InvalidArgument
from n26.logger import get_logger
from n26.models import (
    Addresses,
    Balance,
    Barzahlen,
    Cards,
    ClientConfig,
    Contacts,
    Credentials,
    Limits,
    PersonalInfo,
    Spaces,
    Statements,
    Statuses,
    Timestamp,
    Transactions,
)
from n26.token_source import StaticTokenSource
from n26.transport import Transport

logger = get_logger("n26.client")

ModelT = TypeVar("ModelT", bound=BaseModel)
T = TypeVar("T")


class Client:
    """Authenticated N26 client.

    Logging in happens in the constructor; if it fails no client is created.
    Accessors share no mutable state, so concurrent calls are independent.
    """

    def __init__(self, credentials: Optional[Credentials], config: Optional[ClientConfig] = None,
                 cancel: Optional[threading.Event] = None, authenticator: Optional[Authenticator] = None,
                 transport: Optional[Transport] = None):
        self.config = config or ClientConfig()
        if transport is None:
            if credentials is None:
                raise InvalidArgument("credentials are required to log in")
            if authenticator is None:
                with Authenticator(self.config) as login:
                    token = login.authenticate(credentials, cancel)
            else:
                token = authenticator.authenticate(credentials, cancel)
            transport = Transport(StaticTokenSource(token.access_token), self.config)
        self.transport = transport

    @classmethod
    def from_token(cls, access_token: str, config: Optional[ClientConfig] = None) -> "Client":
        """Build a client around an access token obtained elsewhere."""
        config = config or ClientConfig()
        return cls(None, config, transport=Transport(StaticTokenSource(access_token), config))

    def close(self) -> None:
        """Release the pooled connections of the transport."""
        self.transport.close()

    def __enter__(self) -> "Client":
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    @staticmethod
    def render(model: BaseModel) -> str:
        """Indented JSON rendering of a decoded response."""
        return model.model_dump_json(by_alias=True, indent=2)

    def _get(self, path: str, model: Type[ModelT], params=None) -> ModelT:
        body = self.transport.request("GET", path, params)
        try:
            return model.model_validate_json(body)
        except ValidationError as e:
            raise DecodeError(f"Unexpected response from {path}: {_snippet(body)}") from e

    def _present(self, result: ModelT, pretty: bool) -> Union[ModelT, tuple]:
        return (self.render(result), result) if pretty else result

    def get_balance(self, pretty: bool = False):
        """Main account balance. With pretty=True returns (json_text, Balance)."""
        return self._present(self._get("/api/accounts", Balance), pretty)

    def get_info(self, pretty: bool = False):
        """Account holder profile."""
        return self._present(self._get("/api/me", PersonalInfo), pretty)

    def get_status(self, pretty: bool = False):
        """Onboarding and KYC milestones."""
        return self._present(self._get("/api/me/statuses", Statuses), pretty)

    def get_addresses(self, pretty: bool = False):
        return self._present(self._get("/api/addresses", Addresses), pretty)

    def get_barzahlen(self, pretty: bool = False):
        """Cash deposit and withdrawal allowances."""
        return self._present(self._get("/api/barzahlen/check", Barzahlen), pretty)

    def get_cards(self, pretty: bool = False):
        return self._present(self._get("/api/v2/cards", Cards), pretty)

    def get_limits(self, pretty: bool = False):
        return self._present(self._get("/api/settings/account/limits", Limits), pretty)

    def get_contacts(self, pretty: bool = False):
        return self._present(self._get("/api/smrt/contacts", Contacts), pretty)

    def get_statements(self, pretty: bool = False):
        return self._present(self._get("/api/statements", Statements), pretty)

    def get_spaces(self, pretty: bool = False):
        return self._present(self._get("/api/spaces", Spaces), pretty)

    def get_transactions(self, from_: Timestamp, to: Timestamp, limit: Union[int, str]) -> Transactions:
        """Transactions in a time window.

        The window is only sent when both bounds are set; otherwise the
        server's default window applies.

        Args:
            from_: Start of the window (zero for no filter)
            to: End of the window (zero for no filter)
            limit: Maximum number of transactions to return
        """
        params = {"limit": str(limit)}
        if not from_.is_zero() and not to.is_zero():
            params["from"] = str(from_.as_millis())
            params["to"] = str(to.as_millis())
        return self._get("/api/smrt/transactions", Transactions, params)

    def get_last_transactions(self, limit: Union[int, str]) -> Transactions:
        """Most recent transactions in the server's default window."""
        return self.get_transactions(Timestamp(), Timestamp(), limit)

    def get_smart_statement_csv(self, from_: Timestamp, to: Timestamp, consumer: Callable[[BinaryIO], T]) -> T:
        """Stream the CSV transaction report for a window into `consumer`.

        Raises:
            InvalidArgument: Either bound is unset
        """
        if from_.is_zero() or to.is_zero():
            raise InvalidArgument("start and end time must be set")
        path = f"/api/smrt/reports/{from_.as_millis()}/{to.as_millis()}/statements"
        return self.transport.stream("GET", path, None, consumer)

    def get_statement_pdf(self, statement_id: str) -> bytes:
        """Raw PDF bytes of one monthly statement."""
        return self.transport.request("GET", f"/api/statements/{statement_id}")

    def block_card(self, card_id: str) -> None:
        self.transport.request("POST", f"/api/cards/{card_id}/block")
        logger.info(f"Your card with ID: {card_id} is DISABLED")

    def unblock_card(self, card_id: str) -> None:
        self.transport.request("POST", f"/api/cards/{card_id}/unblock")
        logger.info(f"Your card with ID: {card_id} is ACTIVE")


def _snippet(body: bytes, size: int = 200) -> str:
    text = body[:size].decode("utf-8", errors="replace")
    return text + ("..." if len(body) > size else "")
