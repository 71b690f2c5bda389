"""
Credential storage using the system keyring.

Login credentials live in the operating system's keyring service
(Keychain on macOS, Secret Service on Linux, Credential Locker on Windows).
Environment variables (N26_USERNAME, N26_PASSWORD, N26_DEVICE_TOKEN) are
used when a key is missing from the keyring.
"""

import os
from typing import Dict, Optional

import keyring
from keyring.errors import KeyringError, PasswordDeleteError

from n26.logger import get_logger
from n26.models.credentials import DeviceToken, Password, Username

logger = get_logger("n26.credentials")

# Keyring service name
SERVICE_NAME = "n26"

KEY_USERNAME = "username"
KEY_PASSWORD = "password"
KEY_DEVICE_TOKEN = "device_token"

# Credential keys and their validation models
CREDENTIALS = {
    KEY_USERNAME: Username,
    KEY_PASSWORD: Password,
    KEY_DEVICE_TOKEN: DeviceToken,
}


def get_credential(key: str, fallback_to_env: bool = True) -> Optional[str]:
    """
    Get a credential from keyring, with optional fallback to the environment.

    Args:
        key: The credential key to retrieve
        fallback_to_env: If True, reads N26_<KEY> when the keyring has no value

    Returns:
        The credential value, or None if not found
    """
    value = keyring.get_password(SERVICE_NAME, key)

    if value is not None:
        return value

    if fallback_to_env:
        return os.getenv(f"N26_{key.upper()}")

    return None


def store_credential(key: str, value: str) -> bool:
    """Store a credential in keyring after validating it."""
    model_class = CREDENTIALS.get(key)
    if model_class:
        model_class(value=value)  # Let Pydantic ValidationError propagate

    try:
        keyring.set_password(SERVICE_NAME, key, value)
        return True
    except KeyringError as e:
        logger.error(f"Error setting credential '{key}': {e}")
        return False


def delete_credential(key: str) -> bool:
    """Delete a credential from keyring. Missing credentials count as deleted."""
    try:
        keyring.delete_password(SERVICE_NAME, key)
        return True
    except PasswordDeleteError:
        return True
    except KeyringError as e:
        logger.error(f"Error deleting credential '{key}': {e}")
        return False


def clear_all_credentials() -> Dict[str, bool]:
    """Remove every stored credential, returning per-key success."""
    return {key: delete_credential(key) for key in CREDENTIALS}


def mask(value: Optional[str], show_chars: int = 4) -> str:
    """Mask a credential value for display."""
    if value is None:
        return "<not set>"

    if len(value) <= show_chars:
        return "*" * len(value)

    return "*" * (len(value) - show_chars) + value[-show_chars:]


def set_username(username: str) -> bool:
    """Set login e-mail with validation."""
    return store_credential(KEY_USERNAME, username)


def set_password(password: str) -> bool:
    """Set login password with validation."""
    return store_credential(KEY_PASSWORD, password)


def set_device_token(device_token: str) -> bool:
    """Set paired device token with validation."""
    return store_credential(KEY_DEVICE_TOKEN, device_token)
