"""Client configuration for n26."""

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field

DEFAULT_BASE_URL = "https://api.tech26.de"


class ClientConfig(BaseModel):
    """Connection and MFA settings (endpoint, timeouts, polling)."""

    model_config = ConfigDict(frozen=True)

    base_url: str = Field(DEFAULT_BASE_URL, pattern=r"^https?://[^/]+$", description="Origin only, no trailing slash or path")
    request_timeout: float = Field(30.0, gt=0)
    mfa_poll_interval: float = Field(5.0, gt=0)
    mfa_timeout: float = Field(120.0, gt=0)
    user_agent: str = "n26-python"

    @classmethod
    def load(cls, env_file: Optional[Path] = None) -> "ClientConfig":
        """
        Load configuration from N26_* environment variables.

        A .env file is read first so it can supply any variable not already set.
        """
        load_dotenv(env_file or Path.cwd() / ".env")

        env = {
            "base_url": os.getenv("N26_BASE_URL"),
            "request_timeout": os.getenv("N26_REQUEST_TIMEOUT"),
            "mfa_poll_interval": os.getenv("N26_MFA_POLL_INTERVAL"),
            "mfa_timeout": os.getenv("N26_MFA_TIMEOUT"),
        }

        return cls(**{name: value for name, value in env.items() if value})
