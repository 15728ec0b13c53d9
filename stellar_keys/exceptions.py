"""Stellar key exceptions hierarchy."""

from typing import Any, Optional

__all__ = [
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


class KeypairError(Exception):
    """Base exception for all key handling errors."""
    
    def __init__(
        self, 
        message: str, 
        code: Optional[int] = None, 
        data: Optional[Any] = None
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.data = data
        
    def __str__(self) -> str:
        if self.code:
            return f"[{self.code}] {self.message}"
        return self.message


class ValidationError(KeypairError):
    """Raised when externally supplied input is malformed."""
    pass


class InvalidLength(ValidationError):
    """Raised when a seed, key or decoded payload has the wrong size."""
    
    def __init__(
        self,
        expected: int,
        actual: int,
        message: Optional[str] = None
    ) -> None:
        if message is None:
            message = f"Invalid length: expected {expected} bytes, got {actual}"
        super().__init__(message, data={"expected": expected, "actual": actual})
        self.expected = expected
        self.actual = actual


class NonceTooLong(ValidationError):
    """Raised when an additive nonce is longer than the seed."""
    
    def __init__(self, length: int, limit: int) -> None:
        super().__init__(
            f"Nonce too long: {length} bytes, at most {limit} allowed",
            data={"length": length, "limit": limit},
        )
        self.length = length
        self.limit = limit


class StrKeyError(ValidationError):
    """Raised when StrKey text cannot be decoded."""
    pass


class InvalidEncoding(StrKeyError):
    """Raised when text is not valid unpadded base-32."""
    pass


class InvalidVersion(StrKeyError):
    """Raised when the StrKey version byte is not the expected one."""
    
    def __init__(self, expected: int, actual: int) -> None:
        super().__init__(
            f"Invalid version byte: expected {expected:#04x}, got {actual:#04x}",
            data={"expected": expected, "actual": actual},
        )
        self.expected = expected
        self.actual = actual


class InvalidChecksum(StrKeyError):
    """Raised when the StrKey checksum does not match its contents."""
    pass


class CryptoError(KeypairError):
    """Raised when a cryptographic operation fails."""
    pass


class NoSecretAvailable(CryptoError):
    """Raised when secret material is requested from a public-only keypair."""
    pass


class SigningUnavailable(CryptoError):
    """Raised when signing is attempted without secret material."""
    pass


class SigningFailure(CryptoError):
    """Raised when the signature primitive rejects its input."""
    pass


class DerivationFailure(CryptoError):
    """Raised when key derivation fails."""
    pass
