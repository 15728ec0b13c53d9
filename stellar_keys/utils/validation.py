"""Validation utilities for Stellar keys."""

import logging
from typing import Union

from ..constants import (
    EXPANDED_SECRET_LENGTH,
    MAX_NONCE_LENGTH,
    PUBLIC_KEY_LENGTH,
    SEED_LENGTH,
)
from ..exceptions import InvalidLength, NonceTooLong, StrKeyError, ValidationError
from ..types.common import ExpandedSecret, Nonce, RawPublicKey, RawSeed
from ..utils.encoding import StrKey

__all__ = [
    "validate_seed",
    "validate_public_key",
    "validate_expanded_secret",
    "validate_nonce",
    "nonce_to_bytes",
    "is_valid_ed25519_public_key",
    "is_valid_ed25519_secret_seed",
]

logger = logging.getLogger(__name__)

BytesLike = Union[bytes, bytearray, memoryview]


def _to_bytes(value: BytesLike, what: str) -> bytes:
    if not isinstance(value, (bytes, bytearray, memoryview)):
        logger.debug(f"Rejected {what.lower()} of type {type(value).__name__}")
        raise ValidationError(f"{what} must be bytes, got {type(value).__name__}")
    return bytes(value)


def validate_seed(seed: BytesLike) -> RawSeed:
    """
    Validate a raw Ed25519 seed.
    
    Args:
        seed: Seed bytes
        
    Returns:
        Seed as immutable bytes
        
    Raises:
        InvalidLength: If seed is not 32 bytes
    """
    data = _to_bytes(seed, "Seed")
    if len(data) != SEED_LENGTH:
        logger.debug(f"Rejected seed of {len(data)} bytes")
        raise InvalidLength(SEED_LENGTH, len(data), f"Invalid seed length: {len(data)}")
    return RawSeed(data)


def validate_public_key(public_key: BytesLike) -> RawPublicKey:
    """
    Validate a raw Ed25519 public key.
    
    Args:
        public_key: Public key bytes
        
    Returns:
        Public key as immutable bytes
        
    Raises:
        InvalidLength: If key is not 32 bytes
    """
    data = _to_bytes(public_key, "Public key")
    if len(data) != PUBLIC_KEY_LENGTH:
        logger.debug(f"Rejected public key of {len(data)} bytes")
        raise InvalidLength(
            PUBLIC_KEY_LENGTH, len(data), f"Invalid public key length: {len(data)}"
        )
    return RawPublicKey(data)


def validate_expanded_secret(secret: BytesLike) -> ExpandedSecret:
    """Validate a 64-byte seed || public key buffer."""
    data = _to_bytes(secret, "Expanded secret")
    if len(data) != EXPANDED_SECRET_LENGTH:
        logger.debug(f"Rejected expanded secret of {len(data)} bytes")
        raise InvalidLength(
            EXPANDED_SECRET_LENGTH,
            len(data),
            f"Invalid expanded secret length: {len(data)}",
        )
    return ExpandedSecret(data)


def nonce_to_bytes(nonce: Nonce) -> bytes:
    """Convert nonce to bytes, UTF-8 encoding text."""
    if isinstance(nonce, str):
        return nonce.encode("utf-8")
    return _to_bytes(nonce, "Nonce")


def validate_nonce(nonce: Nonce) -> bytes:
    """
    Validate a nonce for additive mixing.
    
    Args:
        nonce: Nonce bytes or text
        
    Returns:
        Nonce bytes
        
    Raises:
        NonceTooLong: If nonce is longer than the seed
    """
    data = nonce_to_bytes(nonce)
    if len(data) > MAX_NONCE_LENGTH:
        logger.debug(f"Rejected nonce of {len(data)} bytes")
        raise NonceTooLong(len(data), MAX_NONCE_LENGTH)
    return data


def is_valid_ed25519_public_key(text: str) -> bool:
    """
    Check if text is a valid 'G...' StrKey.
    
    Args:
        text: Candidate StrKey
        
    Returns:
        True if valid, False otherwise
    """
    try:
        StrKey.decode_ed25519_public_key(text)
        return True
    except (StrKeyError, InvalidLength):
        return False


def is_valid_ed25519_secret_seed(text: str) -> bool:
    """Check if text is a valid 'S...' StrKey."""
    try:
        StrKey.decode_ed25519_secret_seed(text)
        return True
    except (StrKeyError, InvalidLength):
        return False
