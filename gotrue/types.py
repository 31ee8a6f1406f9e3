"""
GoTrue Client Type Definitions

Configuration, enums and the response records returned by the client.
Response records are built from decoded JSON via their ``from_dict``
classmethods and are never mutated afterwards.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional


@dataclass
class GoTrueConfig:
    """Client configuration options."""

    # Base URL of the GoTrue instance, e.g. https://project.example.com/auth/v1
    url: str
    # Headers sent with every request (e.g. {"apikey": "..."})
    headers: Optional[Dict[str, str]] = None
    # Request timeout in seconds (default: 30)
    timeout: float = 30.0
    # Enable debug logging (default: False)
    debug: bool = False


class VerifyType(str, Enum):
    """Which flow a /verify call confirms."""

    SIGNUP = "signup"
    RECOVERY = "recovery"


class GrantType(str, Enum):
    """OAuth2 grant types supported by the /token endpoint."""

    PASSWORD = "password"
    REFRESH_TOKEN = "refresh_token"
    AUTHORIZATION_CODE = "authorization_code"


@dataclass(frozen=True)
class Settings:
    """Publicly available settings of a GoTrue instance."""

    external: Dict[str, bool]
    disable_signup: bool
    autoconfirm: bool
    mailer_autoconfirm: Optional[bool] = None
    phone_autoconfirm: Optional[bool] = None
    sms_provider: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Settings":
        """Create from dictionary."""
        return cls(
            external={name: bool(enabled) for name, enabled in (data.get("external") or {}).items()},
            disable_signup=data.get("disable_signup", False),
            autoconfirm=data.get("autoconfirm", data.get("mailer_autoconfirm", False)),
            mailer_autoconfirm=data.get("mailer_autoconfirm"),
            phone_autoconfirm=data.get("phone_autoconfirm"),
            sms_provider=data.get("sms_provider"),
        )


@dataclass(frozen=True)
class UserResponse:
    """A registered or invited user."""

    id: str
    email: str
    aud: str
    role: str
    created_at: str
    updated_at: str
    confirmed_at: Optional[str] = None
    confirmation_sent_at: Optional[str] = None
    invited_at: Optional[str] = None
    recovery_sent_at: Optional[str] = None
    last_sign_in_at: Optional[str] = None
    phone: Optional[str] = None
    app_metadata: Dict[str, Any] = field(default_factory=dict)
    user_metadata: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "UserResponse":
        """Create from dictionary."""
        return cls(
            id=data["id"],
            email=data.get("email") or "",
            aud=data.get("aud", ""),
            role=data.get("role", ""),
            created_at=data.get("created_at", ""),
            updated_at=data.get("updated_at", ""),
            confirmed_at=data.get("confirmed_at"),
            confirmation_sent_at=data.get("confirmation_sent_at"),
            invited_at=data.get("invited_at"),
            recovery_sent_at=data.get("recovery_sent_at"),
            last_sign_in_at=data.get("last_sign_in_at"),
            phone=data.get("phone") or None,
            app_metadata=data.get("app_metadata") or {},
            user_metadata=data.get("user_metadata") or {},
        )


@dataclass(frozen=True)
class TokenResponse:
    """Tokens issued by /token and /verify."""

    access_token: str
    token_type: str
    expires_in: int
    refresh_token: str
    user: Optional[UserResponse] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TokenResponse":
        """Create from dictionary."""
        user_data = data.get("user")
        return cls(
            access_token=data["access_token"],
            token_type=data.get("token_type", "bearer"),
            expires_in=int(data.get("expires_in", 0)),
            refresh_token=data.get("refresh_token", ""),
            user=UserResponse.from_dict(user_data) if user_data else None,
        )
