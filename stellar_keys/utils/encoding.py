"""StrKey encoding and decoding utilities."""

import base64
import binascii
import logging
from typing import Union

from ..constants import (
    BASE32_ALPHABET,
    CRC16_XMODEM_POLY,
    STRKEY_CHECKSUM_LENGTH,
    STRKEY_PAYLOAD_LENGTH,
    VersionByte,
)
from ..exceptions import InvalidChecksum, InvalidEncoding, InvalidLength, InvalidVersion
from ..types.common import StrKeyText

__all__ = [
    "crc16_xmodem",
    "encode_base32",
    "decode_base32",
    "encode_check",
    "decode_check",
    "StrKey",
]

logger = logging.getLogger(__name__)

# Unpadded base-32 lengths that map to a whole number of bytes
_VALID_BASE32_REMAINDERS = (0, 2, 4, 5, 7)
_BASE32_CHARS = frozenset(BASE32_ALPHABET)


def _encoding_error(message: str) -> InvalidEncoding:
    logger.debug(f"Rejected base-32 text: {message}")
    return InvalidEncoding(message)


def crc16_xmodem(data: bytes, crc: int = 0) -> int:
    """
    Compute CRC16-XMODEM checksum.
    
    Args:
        data: Bytes to checksum
        crc: Initial register value
        
    Returns:
        16-bit checksum
    """
    for byte in data:
        crc ^= byte << 8
        for _ in range(8):
            if crc & 0x8000:
                crc = ((crc << 1) ^ CRC16_XMODEM_POLY) & 0xFFFF
            else:
                crc = (crc << 1) & 0xFFFF
    return crc


def encode_base32(data: bytes) -> str:
    """Encode bytes as unpadded upper-case base-32."""
    return base64.b32encode(data).decode("ascii").rstrip("=")


def decode_base32(text: str) -> bytes:
    """
    Decode unpadded upper-case base-32.
    
    Args:
        text: Base-32 string without padding
        
    Returns:
        Decoded bytes
        
    Raises:
        InvalidEncoding: If text is not canonical unpadded base-32
    """
    if not isinstance(text, str):
        raise _encoding_error(f"Expected str, got {type(text).__name__}")
        
    if not text:
        raise _encoding_error("Empty base-32 string")
        
    if not _BASE32_CHARS.issuperset(text):
        raise _encoding_error("Base-32 string contains characters outside the alphabet")
        
    if len(text) % 8 not in _VALID_BASE32_REMAINDERS:
        raise _encoding_error(f"Impossible base-32 length: {len(text)}")
        
    padded = text + "=" * (-len(text) % 8)
    try:
        decoded = base64.b32decode(padded)
    except binascii.Error as e:
        raise _encoding_error(f"Invalid base-32 string: {e}") from e
        
    # Reject strings whose unused trailing bits are set
    if encode_base32(decoded) != text:
        raise _encoding_error("Non-canonical base-32 string")
        
    return decoded


def encode_check(version_byte: Union[VersionByte, int], payload: bytes) -> StrKeyText:
    """
    Encode payload as a versioned, checksummed StrKey.
    
    Args:
        version_byte: Leading version byte
        payload: Raw payload bytes
        
    Returns:
        StrKey text
    """
    data = bytes([version_byte]) + bytes(payload)
    checksum = crc16_xmodem(data).to_bytes(STRKEY_CHECKSUM_LENGTH, "little")
    return StrKeyText(encode_base32(data + checksum))


def decode_check(
    text: str,
    expected_version: Union[VersionByte, int],
    payload_length: int = STRKEY_PAYLOAD_LENGTH
) -> bytes:
    """
    Decode a StrKey and return its payload.
    
    Args:
        text: StrKey text
        expected_version: Version byte the key must carry
        payload_length: Expected payload size
        
    Returns:
        Payload bytes
        
    Raises:
        InvalidEncoding: If text is not valid base-32
        InvalidLength: If the text has the wrong size
        InvalidVersion: If the version byte does not match
        InvalidChecksum: If the checksum does not match
    """
    if not isinstance(text, str):
        raise _encoding_error(f"Expected str, got {type(text).__name__}")
        
    # Each character carries 5 bits; reject wrong sizes before decoding
    expected_chars = ((1 + payload_length + STRKEY_CHECKSUM_LENGTH) * 8 + 4) // 5
    if len(text) != expected_chars:
        logger.debug(f"Rejected StrKey of {len(text)} characters")
        raise InvalidLength(
            expected_chars,
            len(text),
            f"Invalid StrKey length: expected {expected_chars} characters, got {len(text)}",
        )
        
    decoded = decode_base32(text)
        
    version = decoded[0]
    if version != expected_version:
        logger.debug(f"StrKey version {version:#04x} does not match {int(expected_version):#04x}")
        raise InvalidVersion(int(expected_version), version)
        
    data = decoded[:-STRKEY_CHECKSUM_LENGTH]
    checksum = decoded[-STRKEY_CHECKSUM_LENGTH:]
    expected_checksum = crc16_xmodem(data).to_bytes(STRKEY_CHECKSUM_LENGTH, "little")
    if checksum != expected_checksum:
        logger.debug(f"StrKey checksum mismatch for version {version:#04x}")
        raise InvalidChecksum("Invalid StrKey checksum")
        
    return data[1:]


class StrKey:
    """Shortcuts for the two Ed25519 StrKey kinds."""
    
    @staticmethod
    def encode_ed25519_public_key(data: bytes) -> StrKeyText:
        """Encode raw public key as 'G...'."""
        return encode_check(VersionByte.ED25519_PUBLIC_KEY, data)
        
    @staticmethod
    def decode_ed25519_public_key(text: str) -> bytes:
        """Decode 'G...' to a raw public key."""
        return decode_check(text, VersionByte.ED25519_PUBLIC_KEY)
        
    @staticmethod
    def encode_ed25519_secret_seed(data: bytes) -> StrKeyText:
        """Encode raw seed as 'S...'."""
        return encode_check(VersionByte.ED25519_SECRET_SEED, data)
        
    @staticmethod
    def decode_ed25519_secret_seed(text: str) -> bytes:
        """Decode 'S...' to a raw seed."""
        return decode_check(text, VersionByte.ED25519_SECRET_SEED)
