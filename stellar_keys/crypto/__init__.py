"""Cryptographic primitives for Stellar keys."""

from ..crypto.secret import SecretBytes
from ..crypto.derivation import (
    DerivedKeys,
    derive,
    apply_additive_nonce,
    derive_with_additive_nonce,
    hash_nonce_seed,
    derive_with_hashed_nonce,
    generate_seed,
)
from ..crypto.signature import sign, verify, signature_hint, sign_decorated
from ..crypto.keypair import Keypair, SecretKeypair, PublicKeypair

__all__ = [
    # Secrets
    "SecretBytes",
    
    # Derivation
    "DerivedKeys",
    "derive",
    "apply_additive_nonce",
    "derive_with_additive_nonce",
    "hash_nonce_seed",
    "derive_with_hashed_nonce",
    "generate_seed",
    
    # Signatures
    "sign",
    "verify",
    "signature_hint",
    "sign_decorated",
    
    # Keypairs
    "Keypair",
    "SecretKeypair",
    "PublicKeypair",
]
