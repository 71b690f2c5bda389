"""Pydantic models for transactions and monthly statements."""

from typing import Optional

from pydantic import Field

from n26.models.base import N26List, N26Model
from n26.models.types import Timestamp


class Transaction(N26Model):
    """One booked or pending transaction from /api/smrt/transactions.

    Fields that only some transaction types carry (card payments, transfers)
    default to None.
    """

    id: str = ""
    user_id: str = ""
    type: str = ""
    amount: float = 0.0
    currency_code: str = ""
    account_id: str = ""
    category: str = ""
    recurring: bool = False
    pending: bool = False
    transaction_nature: str = ""
    smart_link_id: str = ""
    link_id: str = ""
    visible_ts: Timestamp = Field(Timestamp(), alias="visibleTS")
    created_ts: Timestamp = Field(Timestamp(), alias="createdTS")
    user_certified: Timestamp = Timestamp()
    confirmed: Timestamp = Timestamp()

    original_amount: Optional[float] = None
    original_currency: Optional[str] = None
    exchange_rate: Optional[float] = None
    merchant_city: Optional[str] = None
    merchant_name: Optional[str] = None
    merchant_country: Optional[int] = None
    mcc: Optional[int] = None
    mcc_group: Optional[int] = None
    card_id: Optional[str] = None
    partner_bic: Optional[str] = None
    partner_bcn: Optional[str] = None
    partner_account_is_sepa: Optional[bool] = None
    partner_name: Optional[str] = None
    partner_iban: Optional[str] = None
    partner_account_ban: Optional[str] = None
    reference_text: Optional[str] = None
    user_accepted: Optional[int] = None
    smart_contact_id: Optional[str] = None


class Transactions(N26List[Transaction]):
    """Transactions in the requested window, newest first."""


class Statement(N26Model):
    """A monthly account statement; the PDF is fetched separately by id."""

    id: str = ""
    url: str = ""
    visible_ts: int = Field(0, alias="visibleTS")
    month: int = 0
    year: int = 0


class Statements(N26List[Statement]):
    """Available statements from /api/statements."""
