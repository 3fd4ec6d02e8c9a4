"""
Message Encoding
================
Conversion of message text to the Clickatell wire format.

A message is sent in the narrow charset when every UTF-16 code unit appears in
the safe table, and as hex-encoded UTF-16BE ("unicode mode") otherwise.
"""

from types import MappingProxyType
from typing import Mapping, Union

from clickatell_sms.exceptions import InvalidEncodingError

from .charset import CLICKATELL_SAFE_CHARS
from .models import EncodedMessage, EncodingType


def _to_ucs2(text: Union[str, bytes]) -> bytes:
    """Return the UTF-16BE bytes of ``text``, rejecting malformed input."""
    if isinstance(text, bytes):
        try:
            text = text.decode("utf-8")
        except UnicodeDecodeError as e:
            raise InvalidEncodingError(
                "The message must be in UTF-8 format.", details=str(e)
            ) from e
    elif not isinstance(text, str):
        raise TypeError(f"Expected str or bytes, got {type(text).__name__}")

    try:
        return text.encode("utf-16-be")
    except UnicodeEncodeError as e:
        # Lone surrogates
        raise InvalidEncodingError(
            "The message is not well-formed Unicode text.", details=str(e)
        ) from e


class MessageEncoder:
    """
    Encodes message text for the Clickatell gateway.

    The encoder holds only a read-only copy of its table, so a single
    instance can be shared between threads and tasks.
    """

    def __init__(self, table: Mapping[int, int] = CLICKATELL_SAFE_CHARS):
        """
        Args:
            table: Mapping of UTF-16 code unit to the single byte sent for it.

        Raises:
            ValueError: If a key is not a 16-bit code unit or a value is not a byte.
        """
        for unit, byte in table.items():
            if isinstance(unit, bool) or not isinstance(unit, int) or not 0 <= unit <= 0xFFFF:
                raise ValueError(f"Invalid code unit in charset table: {unit!r}")
            if isinstance(byte, bool) or not isinstance(byte, int) or not 0 <= byte <= 0xFF:
                raise ValueError(
                    f"Invalid byte for code unit {unit:#06x} in charset table: {byte!r}"
                )
        self._table: Mapping[int, int] = MappingProxyType(dict(table))

    @property
    def table(self) -> Mapping[int, int]:
        return self._table

    def encode(self, text: Union[str, bytes]) -> EncodedMessage:
        """
        Encode a message.

        Every code unit is looked up, even after one fails to map, so the
        choice between the two representations is made on the whole message.

        Args:
            text: Message content, as str or UTF-8 bytes

        Returns:
            EncodedMessage holding either the narrow bytes or the hex fallback

        Raises:
            InvalidEncodingError: If ``text`` is not well-formed Unicode
        """
        ucs2 = _to_ucs2(text)
        table = self._table

        result = bytearray()
        all_mapped = True

        for i in range(0, len(ucs2), 2):
            byte = table.get((ucs2[i] << 8) | ucs2[i + 1])
            if byte is not None:
                result.append(byte)
            else:
                all_mapped = False

        if all_mapped:
            return EncodedMessage(data=bytes(result), is_wide=False)

        return EncodedMessage(data=ucs2.hex().encode("ascii"), is_wide=True)

    def detect_encoding(self, text: Union[str, bytes]) -> EncodingType:
        """
        Detect the encoding ``encode`` would choose, without building the payload.

        Raises:
            InvalidEncodingError: If ``text`` is not well-formed Unicode
        """
        ucs2 = _to_ucs2(text)
        for i in range(0, len(ucs2), 2):
            if ((ucs2[i] << 8) | ucs2[i + 1]) not in self._table:
                return EncodingType.UCS2
        return EncodingType.GSM7


_default_encoder = MessageEncoder()


def encode_message(text: Union[str, bytes]) -> EncodedMessage:
    """Encode a message with the default safe-character table."""
    return _default_encoder.encode(text)


def detect_encoding(text: Union[str, bytes]) -> EncodingType:
    """
    Detect the required encoding for a message.

    Args:
        text: Message content

    Returns:
        EncodingType.GSM7 or EncodingType.UCS2
    """
    return _default_encoder.detect_encoding(text)
