"""Owned secret buffers that are wiped when released."""

import hmac
from types import TracebackType
from typing import Optional, Type, Union

__all__ = ["SecretBytes"]


class SecretBytes:
    """
    Mutable byte buffer for secret key material.
    
    The buffer is zeroed when the object leaves a ``with`` block (on any
    exit path), when ``wipe()`` is called, and when it is garbage
    collected. Immutable copies handed out by ``reveal()`` are outside
    its control.
    """
    
    __slots__ = ("_buffer", "_wiped")
    
    def __init__(self, data: Union[bytes, bytearray, memoryview]) -> None:
        self._buffer = bytearray(data)
        self._wiped = False
        
    @property
    def wiped(self) -> bool:
        """Whether the buffer has been zeroed."""
        return self._wiped
        
    def reveal(self) -> bytes:
        """
        Get an immutable copy of the secret.
        
        Raises:
            ValueError: If the buffer was already wiped
        """
        if self._wiped:
            raise ValueError("Secret buffer has been wiped")
        return bytes(self._buffer)
        
    def wipe(self) -> None:
        """Zero the buffer in place."""
        for i in range(len(self._buffer)):
            self._buffer[i] = 0
        self._wiped = True
        
    def __enter__(self) -> "SecretBytes":
        return self
        
    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        self.wipe()
        
    def __del__(self) -> None:
        # Attributes may be missing if __init__ failed
        if getattr(self, "_buffer", None) is not None:
            self.wipe()
            
    def __len__(self) -> int:
        return len(self._buffer)
        
    def __eq__(self, other: object) -> bool:
        """Constant-time comparison."""
        if isinstance(other, SecretBytes):
            other_bytes = bytes(other._buffer)
        elif isinstance(other, (bytes, bytearray)):
            other_bytes = bytes(other)
        else:
            return NotImplemented
        return hmac.compare_digest(bytes(self._buffer), other_bytes)
        
    __hash__ = None  # type: ignore[assignment]
        
    def __repr__(self) -> str:
        state = "wiped" if self._wiped else f"{len(self._buffer)} bytes"
        return f"SecretBytes(<{state}>)"
