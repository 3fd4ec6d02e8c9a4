"""
Message Encoding
================
Conversion of message text to the Clickatell narrow charset or unicode mode.
"""

from .models import EncodingType, EncodedMessage
from .charset import CLICKATELL_SAFE_CHARS
from .encoding import MessageEncoder, encode_message, detect_encoding

__all__ = [
    # Models
    "EncodingType",
    "EncodedMessage",
    # Charset
    "CLICKATELL_SAFE_CHARS",
    # Encoding
    "MessageEncoder",
    "encode_message",
    "detect_encoding",
]
