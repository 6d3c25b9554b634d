"""
core/auth.py
-------------

Base URLs and default headers for authenticated requests.

These helpers centralise knowledge about the GoCardless environments and
the headers every call carries.  The access token itself is wrapped in a
callable so the executor asks for the header value per call and never
stores it anywhere it could be logged.
"""

from __future__ import annotations

from typing import Callable, Dict, Optional

from gocardless_pro.core.config import Settings
from gocardless_pro.core.errors import ConfigurationError

BASE_URLS = {
    "live": "https://api.gocardless.com",
    "sandbox": "https://api-sandbox.gocardless.com",
}


def get_base_url(environment: str, override: Optional[str] = None) -> str:
    """Return the API base URL for an environment, without trailing slash.

    :param environment: ``live`` or ``sandbox``
    :param override: explicit base URL taking precedence over the environment
    :raises ConfigurationError: if the environment is not recognised
    """
    if override:
        return override.rstrip("/")
    env = environment.lower().strip()
    try:
        return BASE_URLS[env]
    except KeyError:
        raise ConfigurationError(f"Unknown environment {environment!r}",
                                 {"known": sorted(BASE_URLS)}) from None


def bearer_auth(token: Optional[str]) -> Callable[[], str]:
    """Return a callable producing the ``Authorization`` header value."""
    if not token:
        raise ConfigurationError("No access token configured. Pass access_token or set GOCARDLESS_ACCESS_TOKEN")

    def header() -> str:
        return f"Bearer {token}"

    return header


def build_default_headers(settings: Settings) -> Dict[str, str]:
    """Headers sent on every request regardless of the endpoint."""
    return {
        "Accept": "application/json",
        "GoCardless-Version": settings.api_version,
        "User-Agent": settings.user_agent,
    }
