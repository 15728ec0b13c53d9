"""Ed25519 signing and verification."""

import logging

from nacl import bindings
from nacl.exceptions import BadSignatureError, CryptoError as NaClCryptoError

from ..constants import (
    EXPANDED_SECRET_LENGTH,
    PUBLIC_KEY_LENGTH,
    SIGNATURE_HINT_LENGTH,
    SIGNATURE_LENGTH,
)
from ..exceptions import SigningFailure, SigningUnavailable
from ..types.common import RawPublicKey, Signature, SignatureHint
from ..types.signature import DecoratedSignature

__all__ = [
    "sign",
    "verify",
    "signature_hint",
    "sign_decorated",
]

logger = logging.getLogger(__name__)


def sign(expanded_secret: bytes, message: bytes) -> Signature:
    """
    Sign message with a 64-byte expanded secret.
    
    Args:
        expanded_secret: seed || public key
        message: Bytes to sign
        
    Returns:
        64-byte detached signature
        
    Raises:
        SigningUnavailable: If no secret is given
        SigningFailure: If the primitive rejects the input
    """
    if expanded_secret is None:
        logger.debug("Signing requested without a secret key")
        raise SigningUnavailable("Cannot sign, no secret key available")
        
    if len(expanded_secret) != EXPANDED_SECRET_LENGTH:
        logger.debug(f"Rejected expanded secret of {len(expanded_secret)} bytes")
        raise SigningFailure(
            f"Invalid secret key length: {len(expanded_secret)}",
            data={"expected": EXPANDED_SECRET_LENGTH, "actual": len(expanded_secret)},
        )
        
    try:
        signed = bindings.crypto_sign(bytes(message), bytes(expanded_secret))
    except (NaClCryptoError, TypeError, ValueError) as e:
        logger.debug(f"Signing rejected by Ed25519 primitive: {e}")
        raise SigningFailure(f"Signing failed: {e}") from e
        
    return Signature(signed[:SIGNATURE_LENGTH])


def verify(public_key: bytes, message: bytes, signature: bytes) -> bool:
    """
    Verify a detached signature.
    
    Args:
        public_key: 32-byte public key
        message: Signed bytes
        signature: 64-byte signature
        
    Returns:
        True if signature is valid
    """
    try:
        if len(public_key) != PUBLIC_KEY_LENGTH or len(signature) != SIGNATURE_LENGTH:
            return False
        bindings.crypto_sign_open(bytes(signature) + bytes(message), bytes(public_key))
        return True
    except BadSignatureError:
        return False
    except (NaClCryptoError, TypeError, ValueError) as e:
        logger.debug(f"Verification rejected input: {e}")
        return False


def signature_hint(public_key: RawPublicKey) -> SignatureHint:
    """Last 4 bytes of the public key."""
    return SignatureHint(bytes(public_key[-SIGNATURE_HINT_LENGTH:]))


def sign_decorated(
    expanded_secret: bytes,
    public_key: RawPublicKey,
    message: bytes
) -> DecoratedSignature:
    """Sign message and tag the signature with the signer's hint."""
    return DecoratedSignature(
        hint=signature_hint(public_key),
        signature=sign(expanded_secret, message),
    )
