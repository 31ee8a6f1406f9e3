"""
GoTrue Python Client

A thin client for the GoTrue authentication API with sync and async
variants. Transport and JSON converter are injectable.
"""

from .client import (
    GoTrueClient,
    AsyncGoTrueClient,
    bearer_auth,
    create_client,
    create_async_client,
)
from .converter import GoTrueJsonConverter, DataclassJsonConverter
from .errors import (
    GoTrueError,
    GoTrueHttpError,
    ConfigurationError,
    is_gotrue_error,
)
from .http import (
    GoTrueHttpClient,
    AsyncGoTrueHttpClient,
    HttpxGoTrueHttpClient,
    AsyncHttpxGoTrueHttpClient,
)
from .types import (
    GoTrueConfig,
    GrantType,
    Settings,
    TokenResponse,
    UserResponse,
    VerifyType,
)

__version__ = "0.1.0"
__all__ = [
    # Clients
    "GoTrueClient",
    "AsyncGoTrueClient",
    "bearer_auth",
    "create_client",
    "create_async_client",
    # Converters
    "GoTrueJsonConverter",
    "DataclassJsonConverter",
    # Transports
    "GoTrueHttpClient",
    "AsyncGoTrueHttpClient",
    "HttpxGoTrueHttpClient",
    "AsyncHttpxGoTrueHttpClient",
    # Types
    "GoTrueConfig",
    "GrantType",
    "Settings",
    "TokenResponse",
    "UserResponse",
    "VerifyType",
    # Errors
    "GoTrueError",
    "GoTrueHttpError",
    "ConfigurationError",
    "is_gotrue_error",
]
