"""
Clickatell SMS
==============
Message encoding and HTTP client for the Clickatell SMS gateway.
"""

__version__ = "1.0.0"

# Messaging
from clickatell_sms.messaging import (
    MessageEncoder,
    EncodedMessage,
    EncodingType,
    CLICKATELL_SAFE_CHARS,
    encode_message,
    detect_encoding,
)

# Errors
from clickatell_sms.exceptions import (
    ClickatellError,
    InvalidEncodingError,
    InvalidNumberError,
    AuthenticationError,
    GatewayResponseError,
    ServiceUnavailableError,
    ServiceTimeoutError,
)

# Client
from clickatell_sms.config import ClickatellConfig
from clickatell_sms.client import ClickatellClient

# Logging
from clickatell_sms.logging_config import setup_logging

__all__ = [
    # Messaging
    "MessageEncoder",
    "EncodedMessage",
    "EncodingType",
    "CLICKATELL_SAFE_CHARS",
    "encode_message",
    "detect_encoding",
    # Errors
    "ClickatellError",
    "InvalidEncodingError",
    "InvalidNumberError",
    "AuthenticationError",
    "GatewayResponseError",
    "ServiceUnavailableError",
    "ServiceTimeoutError",
    # Client
    "ClickatellConfig",
    "ClickatellClient",
    # Logging
    "setup_logging",
]
