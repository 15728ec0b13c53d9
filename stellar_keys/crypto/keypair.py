"""Keypair management for Stellar accounts."""

import logging
from abc import ABC, abstractmethod
from types import TracebackType
from typing import ClassVar, Optional, Type, Union

from ..crypto.derivation import (
    DerivedKeys,
    derive,
    derive_with_additive_nonce,
    derive_with_hashed_nonce,
    generate_seed,
)
from ..crypto.secret import SecretBytes
from ..crypto import signature as _signature
from ..exceptions import NoSecretAvailable, SigningUnavailable, ValidationError
from ..types.common import (
    Nonce,
    RawPublicKey,
    RawSeed,
    Signature,
    SignatureHint,
    StrKeyText,
)
from ..types.signature import DecoratedSignature
from ..utils.encoding import StrKey
from ..utils.validation import nonce_to_bytes, validate_public_key

__all__ = ["Keypair", "SecretKeypair", "PublicKeypair"]

logger = logging.getLogger(__name__)

Message = Union[bytes, bytearray, str]


def _message_bytes(message: Message) -> bytes:
    if isinstance(message, str):
        return message.encode("utf-8")
    if not isinstance(message, (bytes, bytearray, memoryview)):
        raise ValidationError(f"Message must be bytes or str, got {type(message).__name__}")
    return bytes(message)


class Keypair(ABC):
    """
    Ed25519 keypair.
    
    A keypair is either a ``SecretKeypair`` (can sign) or a
    ``PublicKeypair`` (verify only). Instances are created through the
    ``from_*`` class methods or ``random()`` and are not modified after
    construction, apart from wiping secret buffers.
    """
    
    __slots__ = ("_public_key",)
    
    _holds_secret: ClassVar[bool] = False
    
    def __init__(self, public_key: bytes) -> None:
        self._public_key = validate_public_key(public_key)
    
    # Factories
    
    @classmethod
    def from_secret_seed(cls, secret: str) -> "SecretKeypair":
        """
        Create keypair from an 'S...' secret seed.
        
        Args:
            secret: StrKey encoded secret seed
        
        Returns:
            SecretKeypair for the seed
        
        Raises:
            StrKeyError: If the text is not a valid secret seed
            InvalidLength: If the decoded seed has the wrong size
        """
        with SecretBytes(StrKey.decode_ed25519_secret_seed(secret)) as raw_seed:
            return cls._from_derived(derive(raw_seed.reveal()), "secret seed")
    
    @classmethod
    def from_secret_seed_with_nonce(cls, secret: str, nonce: Nonce) -> "SecretKeypair":
        """
        Create keypair from an 'S...' seed with additive nonce mixing.
        
        Each nonce byte is added (mod 256) to the seed byte at the same
        position before derivation.
        
        Raises:
            StrKeyError: If the text is not a valid secret seed
            NonceTooLong: If nonce is longer than 32 bytes
        """
        with SecretBytes(StrKey.decode_ed25519_secret_seed(secret)) as raw_seed:
            derived = derive_with_additive_nonce(raw_seed.reveal(), nonce)
        return cls._from_derived(derived, "secret seed + additive nonce", nonce)
    
    @classmethod
    def from_master_secret(cls, secret: str, nonce: Nonce) -> "SecretKeypair":
        """
        Create keypair from an 'S...' master seed and a text nonce.
        
        The new seed is the first 32 bytes of SHA-512(seed || nonce).
        
        Raises:
            StrKeyError: If the text is not a valid secret seed
        """
        with SecretBytes(StrKey.decode_ed25519_secret_seed(secret)) as raw_seed:
            derived = derive_with_hashed_nonce(raw_seed.reveal(), nonce)
        return cls._from_derived(derived, "master secret + hashed nonce", nonce)
    
    @classmethod
    def from_public_key(cls, public_key: str) -> "PublicKeypair":
        """
        Create verify-only keypair from a 'G...' public key.
        
        Raises:
            StrKeyError: If the text is not a valid public key
        """
        keypair = PublicKeypair(StrKey.decode_ed25519_public_key(public_key))
        logger.debug("Created public-only keypair")
        return keypair
    
    @classmethod
    def from_raw_seed(cls, seed: bytes) -> "SecretKeypair":
        """
        Create keypair from a raw 32-byte seed.
        
        Raises:
            InvalidLength: If seed is not 32 bytes
        """
        return cls._from_derived(derive(seed), "raw seed")
    
    @classmethod
    def from_raw_seed_with_nonce(cls, seed: bytes, nonce: Nonce) -> "SecretKeypair":
        """
        Create keypair from a raw seed with additive nonce mixing.
        
        Raises:
            InvalidLength: If seed is not 32 bytes
            NonceTooLong: If nonce is longer than 32 bytes
        """
        return cls._from_derived(
            derive_with_additive_nonce(seed, nonce), "raw seed + additive nonce", nonce
        )
    
    @classmethod
    def random(cls) -> "SecretKeypair":
        """Create keypair from a fresh CSPRNG seed."""
        with generate_seed() as seed:
            return cls._from_derived(derive(seed.reveal()), "random seed")
    
    @staticmethod
    def _from_derived(
        derived: DerivedKeys,
        source: str,
        nonce: Optional[Nonce] = None
    ) -> "SecretKeypair":
        if nonce is None:
            logger.debug(f"Created signing keypair from {source}")
        else:
            nonce_length = len(nonce_to_bytes(nonce))
            logger.debug(f"Created signing keypair from {source} (nonce length {nonce_length})")
        return SecretKeypair(derived)
    
    # Accessors
    
    def raw_public_key(self) -> RawPublicKey:
        """Get public key as 32 raw bytes."""
        return self._public_key
    
    def raw_secret_seed(self) -> Optional[RawSeed]:
        """Get seed as 32 raw bytes, or None if verify-only."""
        return None
    
    def encoded_public_key(self) -> StrKeyText:
        """Get public key as 'G...' StrKey."""
        return StrKey.encode_ed25519_public_key(self._public_key)
    
    def encoded_secret_seed(self) -> StrKeyText:
        """
        Get seed as 'S...' StrKey.
        
        Raises:
            NoSecretAvailable: If keypair is verify-only
        """
        logger.debug("Secret seed requested from a verify-only keypair")
        raise NoSecretAvailable("No secret key available")
    
    @abstractmethod
    def can_sign(self) -> bool:
        """Whether this keypair can currently sign."""
    
    def sign(self, message: Message) -> Signature:
        """
        Sign message.
        
        Raises:
            SigningUnavailable: If keypair is verify-only
        """
        logger.debug("Signing requested on a verify-only keypair")
        raise SigningUnavailable("Cannot sign, no secret key available")
    
    def sign_decorated(self, message: Message) -> DecoratedSignature:
        """Sign message and attach this key's signature hint."""
        return DecoratedSignature(hint=self.signature_hint(), signature=self.sign(message))
    
    def verify(self, message: Message, signature: bytes) -> bool:
        """
        Verify signature over message.
        
        Returns:
            True if signature is valid, False otherwise
        """
        try:
            data = _message_bytes(message)
        except ValidationError:
            return False
        return _signature.verify(self._public_key, data, signature)
    
    def signature_hint(self) -> SignatureHint:
        """Get last 4 bytes of the public key."""
        return _signature.signature_hint(self._public_key)
    
    def __eq__(self, other: object) -> bool:
        """Check equality."""
        if not isinstance(other, Keypair):
            return False
        return self._holds_secret == other._holds_secret and self._public_key == other._public_key
    
    def __hash__(self) -> int:
        return hash((self._holds_secret, self._public_key))
    
    def __repr__(self) -> str:
        """String representation."""
        return f"{self.__class__.__name__}({self.encoded_public_key()})"


class PublicKeypair(Keypair):
    """Verify-only keypair holding a public key."""
    
    __slots__ = ()
    
    _holds_secret: ClassVar[bool] = False
    
    def can_sign(self) -> bool:
        return False


class SecretKeypair(Keypair):
    """
    Signing keypair.
    
    Holds the seed and the 64-byte expanded secret (seed || public key)
    in wipeable buffers. Use as a context manager to zero them on exit.
    """
    
    __slots__ = ("_secret_seed", "_secret_key")
    
    _holds_secret: ClassVar[bool] = True
    
    def __init__(self, derived: DerivedKeys) -> None:
        super().__init__(derived.public_key)
        self._secret_seed = SecretBytes(derived.seed)
        self._secret_key = SecretBytes(derived.expanded_secret)
    
    def can_sign(self) -> bool:
        """Whether secret buffers are still intact."""
        return not self._secret_key.wiped
    
    def raw_secret_seed(self) -> Optional[RawSeed]:
        return RawSeed(self._reveal(self._secret_seed))
    
    def encoded_secret_seed(self) -> StrKeyText:
        return StrKey.encode_ed25519_secret_seed(self._reveal(self._secret_seed))
    
    def sign(self, message: Message) -> Signature:
        """
        Sign message with the expanded secret.
        
        Raises:
            SigningUnavailable: If the secret has been wiped
            SigningFailure: If the primitive rejects the input
        """
        if self._secret_key.wiped:
            logger.debug("Signing requested after secret buffers were wiped")
            raise SigningUnavailable("Cannot sign, secret key has been wiped")
        return _signature.sign(self._secret_key.reveal(), _message_bytes(message))
    
    @property
    def wiped(self) -> bool:
        """Whether secret buffers have been zeroed."""
        return self._secret_key.wiped
    
    def wipe(self) -> None:
        """Zero secret buffers."""
        self._secret_seed.wipe()
        self._secret_key.wipe()
        logger.debug("Wiped signing keypair secret buffers")
    
    def __enter__(self) -> "SecretKeypair":
        return self
    
    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        self.wipe()
    
    @staticmethod
    def _reveal(buffer: SecretBytes) -> bytes:
        if buffer.wiped:
            logger.debug("Secret seed requested after secret buffers were wiped")
            raise NoSecretAvailable("Secret key has been wiped")
        return buffer.reveal()
