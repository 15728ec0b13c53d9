"""Signature type definitions."""

from dataclasses import dataclass

from ..types.common import Signature, SignatureHint

__all__ = ["DecoratedSignature"]


@dataclass(frozen=True)
class DecoratedSignature:
    """Signature tagged with the hint of the key that produced it."""
    
    hint: SignatureHint
    signature: Signature
    
    def to_bytes(self) -> bytes:
        """Hint followed by signature."""
        return bytes(self.hint) + bytes(self.signature)
