"""n26 data models for API responses, credentials and configuration."""

from .types import RawJSON, Timestamp
from .auth import Credentials, Token
from .config import ClientConfig
from .account import Address, Addresses, Balance, Barzahlen, PersonalInfo, Statuses
from .cards import Card, Cards, Limit, Limits
from .contacts import Contact, Contacts
from .transactions import Statement, Statements, Transaction, Transactions
from .spaces import Space, Spaces

__all__ = [
    "RawJSON",
    "Timestamp",
    "Credentials",
    "Token",
    "ClientConfig",
    "Address",
    "Addresses",
    "Balance",
    "Barzahlen",
    "PersonalInfo",
    "Statuses",
    "Card",
    "Cards",
    "Limit",
    "Limits",
    "Contact",
    "Contacts",
    "Statement",
    "Statements",
    "Transaction",
    "Transactions",
    "Space",
    "Spaces",
]
