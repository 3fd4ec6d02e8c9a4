"""
Safe Character Table
====================
Characters that the Clickatell gateway delivers unchanged without unicode mode.

Clickatell does not document how it converts to GSM 03.38, so this table was
built by sending every 8-bit char code and checking what arrived on the
handset (iPhone 4S, Free Mobile, France). The result is a subset of
Windows-1252: ASCII and Latin-1 map to themselves, and the euro sign is the
only character taken from the 0x80-0x9F range.

Anything missing here is either substituted with a look-alike or with a
question mark by the gateway, so it must go through unicode mode instead.
Other networks may behave differently; pass a different table to
``MessageEncoder`` rather than editing the encoder.

Keys are UTF-16 code units, values are the byte sent to the gateway.
"""

from types import MappingProxyType
from typing import Mapping

# Sent as-is (code unit == byte). The grave accent (0x60) is not safe.
_IDENTITY_CHARS = (
    "\n\r"
    " !\"#$%&'()*+,-./0123456789:;<=>?"
    "@ABCDEFGHIJKLMNOPQRSTUVWXYZ[\\]^_"
    "abcdefghijklmnopqrstuvwxyz{|}~"
    "¡£¤¥§¿"
    "ÄÅÆÉÑÖØÜß"
    "àäåæèéìñòöøùü"
)

EURO_SIGN = 0x20AC

CLICKATELL_SAFE_CHARS: Mapping[int, int] = MappingProxyType({
    **{ord(char): ord(char) for char in _IDENTITY_CHARS},
    EURO_SIGN: 0x80,
})
