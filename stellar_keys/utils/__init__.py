"""Encoding and validation helpers."""

from ..utils.encoding import (
    crc16_xmodem,
    encode_base32,
    decode_base32,
    encode_check,
    decode_check,
    StrKey,
)
from ..utils.validation import (
    validate_seed,
    validate_public_key,
    validate_expanded_secret,
    validate_nonce,
    nonce_to_bytes,
    is_valid_ed25519_public_key,
    is_valid_ed25519_secret_seed,
)

__all__ = [
    # Encoding
    "crc16_xmodem",
    "encode_base32",
    "decode_base32",
    "encode_check",
    "decode_check",
    "StrKey",
    
    # Validation
    "validate_seed",
    "validate_public_key",
    "validate_expanded_secret",
    "validate_nonce",
    "nonce_to_bytes",
    "is_valid_ed25519_public_key",
    "is_valid_ed25519_secret_seed",
]
