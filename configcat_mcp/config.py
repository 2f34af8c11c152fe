"""
Centralized configuration for the ConfigCat MCP server.

All magic values, API URLs, and constants in one place.
Supports environment variable overrides for deployment flexibility.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

from .errors import ConfigurationError

# -----------------------------------------------------------------------------
# API Base URL
# -----------------------------------------------------------------------------

CONFIGCAT_BASE_URL = os.environ.get(
    "CONFIGCAT_BASE_URL",
    "https://api.configcat.com",
).rstrip("/")

# -----------------------------------------------------------------------------
# Credentials
# -----------------------------------------------------------------------------

API_USER_ENV = "CONFIGCAT_API_USER"
API_PASS_ENV = "CONFIGCAT_API_PASS"

CREDENTIALS_HELP_URL = "https://app.configcat.com/my-account/public-api-credentials"

# -----------------------------------------------------------------------------
# HTTP Configuration
# -----------------------------------------------------------------------------

HTTP_TIMEOUT_SECONDS = 30.0

RATE_LIMIT_REMAINING_HEADER = "X-Rate-Limit-Remaining"
RATE_LIMIT_RESET_HEADER = "X-Rate-Limit-Reset"

# -----------------------------------------------------------------------------
# Server Configuration
# -----------------------------------------------------------------------------

SERVER_NAME = "ConfigCat MCP"
SERVER_VERSION = "0.1.5"
MCP_PROTOCOL_VERSION = "2024-11-05"

USER_AGENT = f"{SERVER_NAME}/{SERVER_VERSION}"

SERVER_HOST = os.environ.get("CONFIGCAT_MCP_HOST", "127.0.0.1")
SERVER_PORT = int(os.environ.get("CONFIGCAT_MCP_PORT", "8000"))

# -----------------------------------------------------------------------------
# Documentation
# -----------------------------------------------------------------------------

LLMS_TXT_URL = "https://configcat.com/docs/llms.txt"
SDK_REFERENCE_HEADER = "### SDK Reference"


@dataclass(frozen=True)
class Credentials:
    """Public Management API credentials used for Basic authentication."""

    username: str
    password: str

    def __repr__(self) -> str:
        return f"Credentials(username={self.username!r}, password='***')"


def load_credentials(environ: Mapping[str, str] | None = None) -> Credentials:
    """
    Read the API credentials from the environment.

    Raises:
        ConfigurationError: If either variable is missing or blank.
    """
    env = os.environ if environ is None else environ
    username = env.get(API_USER_ENV, "").strip()
    password = env.get(API_PASS_ENV, "").strip()

    if not username or not password:
        raise ConfigurationError(
            f"Please set {API_USER_ENV} and {API_PASS_ENV} environment variables "
            "(Public API credentials). You can create your credentials on the "
            f"Public API credentials management page: {CREDENTIALS_HELP_URL}."
        )
    return Credentials(username=username, password=password)
