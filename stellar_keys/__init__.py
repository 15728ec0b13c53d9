"""
Stellar Keys Python Library

Ed25519 keypairs for Stellar accounts: seed derivation (plain and
nonce-mixed), StrKey text encoding, and message signing.
"""

from .constants import Network, VersionByte
from .exceptions import (
    KeypairError,
    ValidationError,
    InvalidLength,
    NonceTooLong,
    StrKeyError,
    InvalidEncoding,
    InvalidVersion,
    InvalidChecksum,
    CryptoError,
    NoSecretAvailable,
    SigningUnavailable,
    SigningFailure,
    DerivationFailure,
)
from .crypto import Keypair, SecretKeypair, PublicKeypair, SecretBytes
from .types import DecoratedSignature
from .utils.encoding import StrKey

__version__ = "1.0.0"
__author__ = "Stellar Keys Python Library"

__all__ = [
    # Keypairs
    "Keypair",
    "SecretKeypair",
    "PublicKeypair",
    "SecretBytes",
    "DecoratedSignature",
    
    # Encoding
    "StrKey",
    
    # Constants
    "Network",
    "VersionByte",
    
    # Exceptions
    "KeypairError",
    "ValidationError",
    "InvalidLength",
    "NonceTooLong",
    "StrKeyError",
    "InvalidEncoding",
    "InvalidVersion",
    "InvalidChecksum",
    "CryptoError",
    "NoSecretAvailable",
    "SigningUnavailable",
    "SigningFailure",
    "DerivationFailure",
]
