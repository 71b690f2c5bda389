"""Pydantic models for cards and spending limits."""

from typing import Optional

from pydantic import Field

from n26.models.base import N26List, N26Model
from n26.models.types import RawJSON, Timestamp


class Card(N26Model):
    """One payment card from /api/v2/cards."""

    id: str = ""
    masked_pan: str = ""
    expiration_date: Timestamp = Timestamp()
    card_type: str = ""
    status: str = ""
    card_product_type: str = ""
    pin_defined: Timestamp = Timestamp()
    card_activated: Timestamp = Timestamp()
    username_on_card: str = ""
    mpts_card: bool = False

    # Undocumented upstream; kept verbatim
    public_token: Optional[RawJSON] = None
    pan: Optional[RawJSON] = None
    card_product: Optional[RawJSON] = None
    exceet_express_card_delivery: Optional[RawJSON] = None
    membership: Optional[RawJSON] = None
    exceet_actual_delivery_date: Optional[RawJSON] = None
    exceet_express_card_delivery_email_sent: Optional[RawJSON] = None
    exceet_card_status: Optional[RawJSON] = None
    exceet_expected_delivery_date: Optional[RawJSON] = None
    exceet_express_card_delivery_tracking_id: Optional[RawJSON] = Field(None, alias="exceetExpressCardDeliveryTrackingId")
    card_settings_id: Optional[RawJSON] = None


class Cards(N26List[Card]):
    """All cards on the account."""


class Limit(N26Model):
    """A spending limit, e.g. ATM_DAILY_ACCOUNT or POS_DAILY_ACCOUNT."""

    limit: str = ""
    amount: float = 0.0


class Limits(N26List[Limit]):
    """Account limits from /api/settings/account/limits."""
