"""
GoTrue Client

Synchronous and asynchronous clients for the GoTrue HTTP API. Each method
builds a path, optional headers and a body, hands them to the injected
transport and converts the response with the injected converter.

The clients keep no state between calls: no session storage, no token
refresh and no retries.
"""

import logging
from typing import Any, Dict, Optional, Type, TypeVar, Union

from .converter import DataclassJsonConverter, GoTrueJsonConverter
from .errors import ConfigurationError, GoTrueError
from .http import (
    AsyncGoTrueHttpClient,
    AsyncHttpxGoTrueHttpClient,
    GoTrueHttpClient,
    HttpxGoTrueHttpClient,
)
from .types import (
    GoTrueConfig,
    GrantType,
    Settings,
    TokenResponse,
    UserResponse,
    VerifyType,
)


logger = logging.getLogger("gotrue")

T = TypeVar("T")


def bearer_auth(access_token: str) -> Dict[str, str]:
    """Build the Authorization header for a bearer token."""
    return {"Authorization": f"Bearer {access_token}"}


def _body(**fields: Any) -> Dict[str, Any]:
    # None means "not supplied"; such keys are left out of the request body
    return {key: value for key, value in fields.items() if value is not None}


def _verify_type(type: Union[VerifyType, str]) -> str:
    if isinstance(type, VerifyType):
        return type.value
    return type.lower()


def _token_path(grant_type: Union[GrantType, str]) -> str:
    value = grant_type.value if isinstance(grant_type, GrantType) else grant_type
    return f"/token?grant_type={value}"


def _require(**fields: str) -> None:
    for name, value in fields.items():
        if not value:
            raise ValueError(f"{name} must not be empty")


def _validate_config(config: GoTrueConfig) -> None:
    if not config.url:
        raise ConfigurationError("url is required")


class GoTrueClient:
    """
    GoTrue Client - synchronous entry point.

    Args:
        http_client: Transport performing the HTTP calls
        json_converter: Converter mapping response bodies to typed records
        debug: Log every operation at DEBUG level
    """

    def __init__(
        self,
        http_client: GoTrueHttpClient,
        json_converter: Optional[GoTrueJsonConverter] = None,
        debug: bool = False,
    ) -> None:
        self._http_client = http_client
        self._json_converter = json_converter or DataclassJsonConverter()
        self._debug = debug

    def _log(self, message: str, *args: Any) -> None:
        """Log debug message."""
        if self._debug:
            logger.debug(f"[GoTrue] {message}", *args)

    def _deserialize(self, response: Optional[str], path: str, target_type: Type[T]) -> T:
        if response is None:
            raise GoTrueError(f"Empty response body from {path}")
        return self._json_converter.deserialize(response, target_type)

    def settings(self) -> Settings:
        """Return the publicly available settings of this GoTrue instance."""
        self._log("Fetching settings")
        response = self._http_client.get("/settings")
        return self._deserialize(response, "/settings", Settings)

    def signup(self, email: str, password: str) -> UserResponse:
        """Register a new user with an email and password."""
        _require(email=email, password=password)
        self._log("Signup for: %s", email)
        response = self._http_client.post(
            "/signup",
            data={"email": email, "password": password},
        )
        return self._deserialize(response, "/signup", UserResponse)

    def invite(self, email: str) -> UserResponse:
        """Invite a new user by email."""
        self._log("Invite for: %s", email)
        response = self._http_client.post("/invite", data={"email": email})
        return self._deserialize(response, "/invite", UserResponse)

    def verify(
        self,
        type: Union[VerifyType, str],
        token: str,
        password: Optional[str] = None,
    ) -> TokenResponse:
        """
        Verify a registration or a password recovery.

        Args:
            type: VerifyType.SIGNUP or VerifyType.RECOVERY
            token: Token delivered after /signup or /recover
            password: Password to set (optional)
        """
        verify_type = _verify_type(type)
        self._log("Verify (%s)", verify_type)
        response = self._http_client.post(
            "/verify",
            data=_body(type=verify_type, token=token, password=password),
        )
        return self._deserialize(response, "/verify", TokenResponse)

    def recover(self, email: str) -> None:
        """Deliver a password recovery mail to the user."""
        self._log("Recover for: %s", email)
        self._http_client.post("/recover", data={"email": email})

    def update_user(
        self,
        access_token: str,
        email: Optional[str] = None,
        password: Optional[str] = None,
        data: Optional[Dict[str, Any]] = None,
    ) -> UserResponse:
        """
        Update the authenticated user.

        Apart from changing email/password, this sets custom user data.
        Arguments left as None are not sent.
        """
        self._log("Update user")
        response = self._http_client.put(
            "/user",
            headers=bearer_auth(access_token),
            data=_body(email=email, password=password, data=data),
        )
        return self._deserialize(response, "/user", UserResponse)

    def get_user(self, access_token: str) -> UserResponse:
        """Get the user the access token belongs to."""
        self._log("Get user")
        response = self._http_client.get("/user", headers=bearer_auth(access_token))
        return self._deserialize(response, "/user", UserResponse)

    def token(
        self,
        grant_type: Union[GrantType, str],
        email: Optional[str] = None,
        password: Optional[str] = None,
        refresh_token: Optional[str] = None,
    ) -> TokenResponse:
        """
        OAuth2 token endpoint.

        Supports the password, refresh_token and authorization_code grants.
        """
        path = _token_path(grant_type)
        self._log("Token request: %s", path)
        response = self._http_client.post(
            path,
            data=_body(email=email, password=password, refresh_token=refresh_token),
        )
        return self._deserialize(response, path, TokenResponse)

    def logout(self, access_token: str) -> None:
        """
        Logout the user, revoking all of their refresh tokens.

        Issued access tokens stay valid until they expire.
        """
        self._log("Logout")
        self._http_client.post("/logout", headers=bearer_auth(access_token))

    def close(self) -> None:
        """Close the transport if it supports closing."""
        close = getattr(self._http_client, "close", None)
        if close is not None:
            close()

    def __enter__(self) -> "GoTrueClient":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()


class AsyncGoTrueClient:
    """
    GoTrue Client - asynchronous entry point.

    Same operations as GoTrueClient, awaiting an AsyncGoTrueHttpClient.
    """

    def __init__(
        self,
        http_client: AsyncGoTrueHttpClient,
        json_converter: Optional[GoTrueJsonConverter] = None,
        debug: bool = False,
    ) -> None:
        self._http_client = http_client
        self._json_converter = json_converter or DataclassJsonConverter()
        self._debug = debug

    def _log(self, message: str, *args: Any) -> None:
        """Log debug message."""
        if self._debug:
            logger.debug(f"[GoTrue] {message}", *args)

    def _deserialize(self, response: Optional[str], path: str, target_type: Type[T]) -> T:
        if response is None:
            raise GoTrueError(f"Empty response body from {path}")
        return self._json_converter.deserialize(response, target_type)

    async def settings(self) -> Settings:
        """Return the publicly available settings of this GoTrue instance."""
        self._log("Fetching settings")
        response = await self._http_client.get("/settings")
        return self._deserialize(response, "/settings", Settings)

    async def signup(self, email: str, password: str) -> UserResponse:
        """Register a new user with an email and password."""
        _require(email=email, password=password)
        self._log("Signup for: %s", email)
        response = await self._http_client.post(
            "/signup",
            data={"email": email, "password": password},
        )
        return self._deserialize(response, "/signup", UserResponse)

    async def invite(self, email: str) -> UserResponse:
        """Invite a new user by email."""
        self._log("Invite for: %s", email)
        response = await self._http_client.post("/invite", data={"email": email})
        return self._deserialize(response, "/invite", UserResponse)

    async def verify(
        self,
        type: Union[VerifyType, str],
        token: str,
        password: Optional[str] = None,
    ) -> TokenResponse:
        """Verify a registration or a password recovery."""
        verify_type = _verify_type(type)
        self._log("Verify (%s)", verify_type)
        response = await self._http_client.post(
            "/verify",
            data=_body(type=verify_type, token=token, password=password),
        )
        return self._deserialize(response, "/verify", TokenResponse)

    async def recover(self, email: str) -> None:
        """Deliver a password recovery mail to the user."""
        self._log("Recover for: %s", email)
        await self._http_client.post("/recover", data={"email": email})

    async def update_user(
        self,
        access_token: str,
        email: Optional[str] = None,
        password: Optional[str] = None,
        data: Optional[Dict[str, Any]] = None,
    ) -> UserResponse:
        """Update the authenticated user."""
        self._log("Update user")
        response = await self._http_client.put(
            "/user",
            headers=bearer_auth(access_token),
            data=_body(email=email, password=password, data=data),
        )
        return self._deserialize(response, "/user", UserResponse)

    async def get_user(self, access_token: str) -> UserResponse:
        """Get the user the access token belongs to."""
        self._log("Get user")
        response = await self._http_client.get("/user", headers=bearer_auth(access_token))
        return self._deserialize(response, "/user", UserResponse)

    async def token(
        self,
        grant_type: Union[GrantType, str],
        email: Optional[str] = None,
        password: Optional[str] = None,
        refresh_token: Optional[str] = None,
    ) -> TokenResponse:
        """OAuth2 token endpoint."""
        path = _token_path(grant_type)
        self._log("Token request: %s", path)
        response = await self._http_client.post(
            path,
            data=_body(email=email, password=password, refresh_token=refresh_token),
        )
        return self._deserialize(response, path, TokenResponse)

    async def logout(self, access_token: str) -> None:
        """Logout the user, revoking all of their refresh tokens."""
        self._log("Logout")
        await self._http_client.post("/logout", headers=bearer_auth(access_token))

    async def close(self) -> None:
        """Close the transport if it supports closing."""
        close = getattr(self._http_client, "close", None)
        if close is not None:
            await close()

    async def __aenter__(self) -> "AsyncGoTrueClient":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()


# =============================================================================
# Factory Functions
# =============================================================================

def create_client(config: GoTrueConfig) -> GoTrueClient:
    """Create a synchronous client on the default httpx transport."""
    _validate_config(config)
    transport = HttpxGoTrueHttpClient(
        config.url,
        headers=config.headers,
        timeout=config.timeout,
        debug=config.debug,
    )
    return GoTrueClient(transport, DataclassJsonConverter(), debug=config.debug)


def create_async_client(config: GoTrueConfig) -> AsyncGoTrueClient:
    """Create an asynchronous client on the default httpx transport."""
    _validate_config(config)
    transport = AsyncHttpxGoTrueHttpClient(
        config.url,
        headers=config.headers,
        timeout=config.timeout,
        debug=config.debug,
    )
    return AsyncGoTrueClient(transport, DataclassJsonConverter(), debug=config.debug)
