"""
Client Configuration
====================
Configuration for the Clickatell HTTP gateway connection.
"""

import os
from dataclasses import dataclass, field
from typing import Optional


def _env_float(name: str, default: float) -> float:
    value = os.environ.get(name)
    return float(value) if value else default


@dataclass
class ClickatellConfig:
    """Configuration for the Clickatell gateway connection."""
    api_id: str = field(default_factory=lambda: os.environ.get("CLICKATELL_API_ID", ""))
    username: str = field(default_factory=lambda: os.environ.get("CLICKATELL_USERNAME", ""))
    password: str = field(default_factory=lambda: os.environ.get("CLICKATELL_PASSWORD", ""))
    default_sender_id: Optional[str] = field(
        default_factory=lambda: os.environ.get("CLICKATELL_SENDER_ID") or None
    )
    base_url: str = field(
        default_factory=lambda: os.environ.get("CLICKATELL_BASE_URL", "https://api.clickatell.com")
    )
    timeout: float = field(default_factory=lambda: _env_float("CLICKATELL_TIMEOUT", 30.0))

    # Maximum number of concatenated parts the gateway may split a message into
    max_concat: int = 10

    retry_attempts: int = 3
    retry_min_wait: float = 1.0
    retry_max_wait: float = 10.0

    @classmethod
    def from_env(cls, **overrides) -> "ClickatellConfig":
        """Build a config from the current environment, with explicit overrides."""
        return cls(**overrides)
