"""
Messaging Models
================
Data models for message encoding.
"""

from dataclasses import dataclass
from enum import Enum


class EncodingType(str, Enum):
    """SMS encoding types."""
    GSM7 = "GSM-7"
    UCS2 = "UCS-2"


@dataclass(frozen=True)
class EncodedMessage:
    """
    A message body ready to be placed in the gateway's ``text`` field.

    Attributes:
        data: Narrow charset bytes (one byte per character), or the
            lowercase hex ASCII of the UTF-16BE message when ``is_wide``.
        is_wide: True when ``data`` holds the hex-encoded unicode fallback.
    """
    data: bytes
    is_wide: bool

    @property
    def encoding(self) -> EncodingType:
        return EncodingType.UCS2 if self.is_wide else EncodingType.GSM7

    @property
    def unicode_flag(self) -> str:
        """Value of the gateway's ``unicode`` request parameter."""
        return "1" if self.is_wide else "0"
