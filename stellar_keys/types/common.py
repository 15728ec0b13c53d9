"""Common type definitions for Stellar keys."""

from typing import NewType, Union

__all__ = [
    "RawSeed",
    "RawPublicKey",
    "ExpandedSecret",
    "Signature",
    "SignatureHint",
    "StrKeyText",
    "Nonce",
]

# Raw key material
RawSeed = NewType("RawSeed", bytes)
"""32-byte Ed25519 seed."""

RawPublicKey = NewType("RawPublicKey", bytes)
"""32-byte Ed25519 public key."""

ExpandedSecret = NewType("ExpandedSecret", bytes)
"""64-byte seed || public key, the form the signer consumes."""

Signature = NewType("Signature", bytes)
"""64-byte Ed25519 signature."""

SignatureHint = NewType("SignatureHint", bytes)
"""Last 4 bytes of a public key."""

# Text forms
StrKeyText = NewType("StrKeyText", str)
"""Versioned, checksummed base-32 key ('G...' or 'S...')."""

# Type aliases
Nonce = Union[bytes, bytearray, str]
"""Nonce input; text is UTF-8 encoded before mixing."""
