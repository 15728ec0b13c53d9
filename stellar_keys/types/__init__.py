"""Type definitions for Stellar keys."""

# Common types
from ..types.common import (
    RawSeed,
    RawPublicKey,
    ExpandedSecret,
    Signature,
    SignatureHint,
    StrKeyText,
    Nonce,
)

# Signature types
from ..types.signature import DecoratedSignature

__all__ = [
    # Common
    "RawSeed",
    "RawPublicKey",
    "ExpandedSecret",
    "Signature",
    "SignatureHint",
    "StrKeyText",
    "Nonce",
    
    # Signature
    "DecoratedSignature",
]
