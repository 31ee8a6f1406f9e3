"""
GoTrue Python Client - Basic Usage Example

This example demonstrates the basic usage of the GoTrue Python client.
"""

import asyncio
import logging

from gotrue import (
    GoTrueConfig,
    GoTrueHttpError,
    GrantType,
    create_async_client,
    create_client,
)


CONFIG = GoTrueConfig(
    url="http://localhost:9999",
    headers={"apikey": "your-anon-key"},
    debug=True,
)


def sync_example():
    """Synchronous client example."""
    print("=== Sync Client Example ===\n")

    with create_client(CONFIG) as client:
        try:
            settings = client.settings()
            print(f"Signup disabled: {settings.disable_signup}")

            user = client.signup("user@example.com", "SecurePassword123!")
            print(f"Signed up: {user.email} ({user.id})")

            tokens = client.token(
                GrantType.PASSWORD,
                email="user@example.com",
                password="SecurePassword123!",
            )
            print(f"Token expires in {tokens.expires_in}s")

            user = client.update_user(tokens.access_token, data={"plan": "pro"})
            print(f"User metadata: {user.user_metadata}")

            client.logout(tokens.access_token)
        except GoTrueHttpError as e:
            print(f"Request failed with {e.status}: {e.http_body}")
        except Exception as e:
            print(f"Error (expected without a running server): {type(e).__name__}")


async def async_example():
    """Asynchronous client example."""
    print("\n=== Async Client Example ===\n")

    async with create_async_client(CONFIG) as client:
        try:
            tokens = await client.token(
                GrantType.PASSWORD,
                email="user@example.com",
                password="SecurePassword123!",
            )
            user = await client.get_user(tokens.access_token)
            print(f"Logged in as: {user.email}")

            refreshed = await client.token(
                GrantType.REFRESH_TOKEN,
                refresh_token=tokens.refresh_token,
            )
            print(f"Refreshed access token: {refreshed.access_token[:12]}...")
        except GoTrueHttpError as e:
            print(f"Request failed with {e.status}: {e.http_body}")
        except Exception as e:
            print(f"Error (expected without a running server): {type(e).__name__}")


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG)
    sync_example()
    asyncio.run(async_example())
