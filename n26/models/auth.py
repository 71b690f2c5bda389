"""Login credentials and OAuth token models."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from n26 import credentials as credential_store
from n26.models.credentials import UUID_PATTERN


class Credentials(BaseModel):
    """N26 login credentials bound to one paired device."""

    model_config = ConfigDict(frozen=True)

    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1, repr=False)
    device_token: str = Field(..., pattern=UUID_PATTERN, description="Device token is a UUID identifying the paired device")

    @classmethod
    def load(cls) -> "Credentials":
        """Load credentials from keyring, falling back to N26_* environment variables."""
        return cls(
            username=credential_store.get_credential(credential_store.KEY_USERNAME) or "",
            password=credential_store.get_credential(credential_store.KEY_PASSWORD) or "",
            device_token=credential_store.get_credential(credential_store.KEY_DEVICE_TOKEN) or "",
        )


class Token(BaseModel):
    """OAuth token payload from /oauth2/token."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    access_token: str = ""
    refresh_token: str = ""
    mfa_token: str = Field("", alias="mfaToken")
    token_type: Optional[str] = None
    expires_in: Optional[int] = None

    @property
    def is_mfa_required(self) -> bool:
        return bool(self.mfa_token)
