"""
core/config.py
----------------

Client configuration module.

Defines strongly-typed settings loaded from the environment using
``pydantic-settings``.  These settings control the target environment,
credentials, timeouts and the retry limits for HTTP operations.  The
values provided here are sensible defaults for interactive use and can
be overridden via environment variables or explicit ``Client``
arguments.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from gocardless_pro import __version__

Environment = Literal["live", "sandbox"]


class Settings(BaseSettings):
    """Client settings loaded from environment variables.

    The settings structure is flat and uses environment variables
    prefixed with ``GOCARDLESS_``.  For example, to point the client at
    the live API set ``GOCARDLESS_ENVIRONMENT=live``.
    """

    access_token: Optional[str] = Field(None, description="Bearer access token used for every request.")
    environment: Environment = Field("sandbox", description="Which GoCardless environment to talk to.")
    base_url: Optional[str] = Field(None, description="Explicit API base URL; overrides ``environment``.")
    api_version: str = Field("2015-07-06", description="Value of the GoCardless-Version header.")

    # HTTP client settings
    http_timeout: float = Field(30.0, gt=0, description="Hard timeout for HTTP requests in seconds.")
    http_max_retries: int = Field(3, ge=1, le=10, description="Maximum attempts per logical call, first one included.")
    http_backoff_factor: float = Field(0.1, ge=0, description="Base delay in seconds for exponential backoff.")
    http_backoff_max: float = Field(0.5, ge=0, description="Upper bound in seconds for a single backoff wait.")

    user_agent: str = Field(f"gocardless-pro-python/{__version__}", min_length=1,
                            description="Client identification sent as User-Agent.")

    model_config = SettingsConfigDict(env_prefix="GOCARDLESS_", env_file=None, case_sensitive=False, extra="ignore")


@lru_cache()
def get_settings() -> Settings:
    """Return a cached instance of the client settings.

    Using a cache prevents repeated environment parsing.  The returned
    object is treated as immutable and is safe to share across threads.
    """
    return Settings()
