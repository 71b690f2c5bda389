"""Pydantic models for spaces (sub-accounts)."""

from typing import List, Optional

from n26.models.base import N26Model
from n26.models.types import RawJSON


class SpaceBalance(N26Model):
    available_balance: float = 0.0
    overdraft_amount: Optional[RawJSON] = None


class Space(N26Model):
    id: str = ""
    name: str = ""
    balance: SpaceBalance = SpaceBalance()
    color: str = ""
    goal: Optional[RawJSON] = None
    image_url: str = ""
    is_card_attached: bool = False
    is_primary: bool = False


class UserFeatures(N26Model):
    available_spaces: int = 0
    can_upgrade: bool = False


class Spaces(N26Model):
    """All spaces and their combined balance from /api/spaces."""

    spaces: List[Space] = []
    total_balance: float = 0.0
    user_features: UserFeatures = UserFeatures()
