# =============================================================================
# core/config.py  —  Runtime Settings
# =============================================================================
#
# All configuration comes from environment variables.  Entry points call
# dotenv's load_dotenv() first, so a local .env file works too.
#
#   RPC_URL            Ethereum mainnet JSON-RPC endpoint (required for id/idx)
#   ID_MCP_LOG_LEVEL   Log level for the tool server (default INFO; unknown
#                      names fall back to INFO)
#
# load_settings() re-reads the environment every time it is called.  The MCP
# client passes RPC_URL through the server's "env" block, and tools check it
# on every call, not once at import time.
# =============================================================================

import os
from dataclasses import dataclass

from core.errors import ConfigurationError

RPC_URL_PLACEHOLDER = "<YOUR-RPC-URL-HERE>"
DEFAULT_LOG_LEVEL = "INFO"
LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")

RPC_URL_HELP = (
    "Please set your own RPC_URL.\n\n"
    "Get a free API key from:\n"
    "• Alchemy: https://alchemy.com\n"
    "• Infura: https://infura.io\n"
    "• QuickNode: https://quicknode.com\n\n"
    "Then update your MCP server configuration with:\n"
    '"env": { "RPC_URL": "https://eth-mainnet.g.alchemy.com/v2/YOUR_API_KEY" }'
)


@dataclass(frozen=True)
class Settings:
    """A snapshot of the environment-level configuration."""

    rpc_url: str = RPC_URL_PLACEHOLDER
    log_level: str = DEFAULT_LOG_LEVEL

    @property
    def rpc_configured(self) -> bool:
        return bool(self.rpc_url.strip()) and self.rpc_url != RPC_URL_PLACEHOLDER


def _log_level(value: str) -> str:
    level = value.strip().upper()
    return level if level in LOG_LEVELS else DEFAULT_LOG_LEVEL


def load_settings() -> Settings:
    """Build Settings from the current process environment."""
    return Settings(
        rpc_url=os.environ.get("RPC_URL") or RPC_URL_PLACEHOLDER,
        log_level=_log_level(os.environ.get("ID_MCP_LOG_LEVEL", DEFAULT_LOG_LEVEL)),
    )


def require_rpc_url(settings: Settings) -> str:
    """Return the configured RPC URL or raise ConfigurationError.

    This is the entry gate for every tool that touches the network.  It runs
    before the ID is even looked at.
    """
    if not settings.rpc_configured:
        raise ConfigurationError(RPC_URL_HELP)
    return settings.rpc_url
