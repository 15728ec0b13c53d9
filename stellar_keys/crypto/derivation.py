"""Deterministic Ed25519 key derivation."""

import hashlib
import logging
import secrets
from dataclasses import dataclass, field

from nacl import bindings
from nacl.exceptions import CryptoError as NaClCryptoError

from ..constants import SEED_LENGTH
from ..crypto.secret import SecretBytes
from ..exceptions import DerivationFailure
from ..types.common import ExpandedSecret, Nonce, RawPublicKey, RawSeed
from ..utils.validation import nonce_to_bytes, validate_nonce, validate_seed

__all__ = [
    "DerivedKeys",
    "derive",
    "apply_additive_nonce",
    "derive_with_additive_nonce",
    "hash_nonce_seed",
    "derive_with_hashed_nonce",
    "generate_seed",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DerivedKeys:
    """Result of a derivation: the seed actually used and its keys."""
    
    seed: RawSeed = field(repr=False)
    public_key: RawPublicKey
    expanded_secret: ExpandedSecret = field(repr=False)


def derive(seed: bytes) -> DerivedKeys:
    """
    Derive an Ed25519 keypair from a 32-byte seed.
    
    The seed is hashed with SHA-512, the scalar clamped and multiplied by
    the base point (RFC 8032). The expanded secret is seed || public key.
    
    Args:
        seed: 32-byte seed
        
    Returns:
        DerivedKeys for the seed
        
    Raises:
        InvalidLength: If seed is not 32 bytes
        DerivationFailure: If the primitive rejects the seed
    """
    raw_seed = validate_seed(seed)
    try:
        public_key, expanded_secret = bindings.crypto_sign_seed_keypair(raw_seed)
    except (NaClCryptoError, TypeError, ValueError) as e:
        logger.debug(f"Seed rejected by Ed25519 primitive: {e}")
        raise DerivationFailure(f"Key derivation failed: {e}") from e
        
    return DerivedKeys(
        seed=raw_seed,
        public_key=RawPublicKey(public_key),
        expanded_secret=ExpandedSecret(expanded_secret),
    )


def apply_additive_nonce(seed: bytes, nonce: Nonce) -> SecretBytes:
    """
    Mix nonce into seed by byte-wise addition modulo 256.
    
    Bytes past the end of the nonce are left unchanged.
    
    Args:
        seed: 32-byte seed
        nonce: At most 32 bytes (text is UTF-8 encoded)
        
    Returns:
        Mutated seed in an owned buffer
        
    Raises:
        InvalidLength: If seed is not 32 bytes
        NonceTooLong: If nonce is longer than 32 bytes
    """
    raw_seed = validate_seed(seed)
    raw_nonce = validate_nonce(nonce)
    
    mixed = bytearray(raw_seed)
    for i, value in enumerate(raw_nonce):
        mixed[i] = (mixed[i] + value) & 0xFF
        
    result = SecretBytes(mixed)
    for i in range(len(mixed)):
        mixed[i] = 0
    return result


def derive_with_additive_nonce(seed: bytes, nonce: Nonce) -> DerivedKeys:
    """Derive from seed after additive nonce mixing."""
    with apply_additive_nonce(seed, nonce) as mixed:
        return derive(mixed.reveal())


def hash_nonce_seed(seed: bytes, nonce: Nonce) -> SecretBytes:
    """
    Compute SHA-512(seed || nonce) and keep the first 32 bytes.
    
    Args:
        seed: 32-byte seed
        nonce: Any length (text is UTF-8 encoded)
        
    Returns:
        New seed in an owned buffer
        
    Raises:
        InvalidLength: If seed is not 32 bytes
    """
    raw_seed = validate_seed(seed)
    digest = hashlib.sha512(raw_seed + nonce_to_bytes(nonce)).digest()
    return SecretBytes(digest[:SEED_LENGTH])


def derive_with_hashed_nonce(seed: bytes, nonce: Nonce) -> DerivedKeys:
    """Derive from the SHA-512 chained seed/nonce digest."""
    with hash_nonce_seed(seed, nonce) as hashed:
        return derive(hashed.reveal())


def generate_seed() -> SecretBytes:
    """Draw a fresh 32-byte seed from the OS CSPRNG."""
    return SecretBytes(secrets.token_bytes(SEED_LENGTH))
