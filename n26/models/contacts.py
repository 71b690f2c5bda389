"""Pydantic models for saved transfer contacts."""

from n26.models.base import N26List, N26Model


class ContactAccount(N26Model):
    account_type: str = ""
    iban: str = ""
    bic: str = ""


class Contact(N26Model):
    id: str = ""
    user_id: str = ""
    name: str = ""
    subtitle: str = ""
    account: ContactAccount = ContactAccount()


class Contacts(N26List[Contact]):
    """Saved contacts from /api/smrt/contacts."""
