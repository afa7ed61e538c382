"""Authentication information for gdrivepath (installed-app OAuth)."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class AuthInfo:
    """
    OAuth credentials location.

    Attributes:
        client_secrets_file: OAuth client secrets JSON downloaded from the
            Google Cloud console.
        token_file: Authorized-user token JSON. Created on the first
            successful authorization and refreshed afterwards.
    """

    client_secrets_file: str
    token_file: str

    def __post_init__(self) -> None:
        for key in ("client_secrets_file", "token_file"):
            value = getattr(self, key)
            if not isinstance(value, str) or not value.strip():
                raise ValueError(f"AuthInfo.{key} must be a non-empty string")
