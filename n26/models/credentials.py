"""Individual credential models for validation."""

from pydantic import BaseModel, Field

UUID_PATTERN = r"^[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}$"


class Username(BaseModel):
    """N26 login e-mail."""
    value: str = Field(min_length=1)


class Password(BaseModel):
    """N26 login password."""
    value: str = Field(min_length=1, repr=False)


class DeviceToken(BaseModel):
    """UUID of the device paired for MFA approval."""
    value: str = Field(pattern=UUID_PATTERN)
