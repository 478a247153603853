"""Session state machine: authentication state across provider events.

Provides get_identity_provider() / reset_identity_provider() to select the
provider adapter, and the fallback timeout applied while the session loads.
"""

import os

DEFAULT_FALLBACK_TIMEOUT = 5.0

_provider_instance = None


def session_fallback_timeout() -> float:
    """Seconds to wait for the provider before giving up on loading.

    Configure via the SESSION_FALLBACK_TIMEOUT environment variable.
    """
    return float(os.environ.get("SESSION_FALLBACK_TIMEOUT", DEFAULT_FALLBACK_TIMEOUT))


def get_identity_provider():
    """Return the configured identity provider adapter (singleton).

    Uses FakeIdentityProvider by default. Select another adapter via the
    IDENTITY_PROVIDER environment variable; "directory" wraps the fake provider
    so roles come from the identity domain's role assignments.
    """
    global _provider_instance
    if _provider_instance is None:
        adapter = os.environ.get("IDENTITY_PROVIDER", "fake")
        if adapter == "fake":
            from identity.session.fake_provider import FakeIdentityProvider

            _provider_instance = FakeIdentityProvider()
        elif adapter == "directory":
            from identity.roles.lookup import RoleDirectoryProvider
            from identity.session.fake_provider import FakeIdentityProvider

            _provider_instance = RoleDirectoryProvider(FakeIdentityProvider())
        else:
            raise ValueError(f"Unknown identity provider adapter: {adapter}")
    return _provider_instance


def reset_identity_provider():
    """Reset the provider singleton (useful for testing)."""
    global _provider_instance
    _provider_instance = None
