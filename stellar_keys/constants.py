"""Constants for Stellar key handling."""

import hashlib
from enum import Enum, IntEnum

__all__ = [
    "Network",
    "VersionByte",
    "SEED_LENGTH",
    "PUBLIC_KEY_LENGTH",
    "EXPANDED_SECRET_LENGTH",
    "SIGNATURE_LENGTH",
    "SIGNATURE_HINT_LENGTH",
    "MAX_NONCE_LENGTH",
    "STRKEY_PAYLOAD_LENGTH",
    "STRKEY_CHECKSUM_LENGTH",
    "BASE32_ALPHABET",
    "CRC16_XMODEM_POLY",
]


class Network(str, Enum):
    """Stellar network passphrases."""
    
    PUBLIC = "Public Global Stellar Network ; September 2015"
    TESTNET = "Test SDF Network ; September 2015"
    
    def network_id(self) -> bytes:
        """SHA-256 of the passphrase, mixed into signature payloads."""
        return hashlib.sha256(self.value.encode("utf-8")).digest()


class VersionByte(IntEnum):
    """StrKey version bytes (5-bit type tag shifted left by 3)."""
    
    ED25519_PUBLIC_KEY = 6 << 3    # 'G...'
    ED25519_SECRET_SEED = 18 << 3  # 'S...'


# Raw buffer sizes
SEED_LENGTH = 32
PUBLIC_KEY_LENGTH = 32
EXPANDED_SECRET_LENGTH = SEED_LENGTH + PUBLIC_KEY_LENGTH
SIGNATURE_LENGTH = 64
SIGNATURE_HINT_LENGTH = 4

# Additive nonce mixing touches at most one byte per seed byte
MAX_NONCE_LENGTH = SEED_LENGTH

# StrKey layout: version (1) + payload (32) + checksum (2)
STRKEY_PAYLOAD_LENGTH = 32
STRKEY_CHECKSUM_LENGTH = 2

# RFC 4648 base-32 alphabet, upper case only
BASE32_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ234567"

CRC16_XMODEM_POLY = 0x1021
