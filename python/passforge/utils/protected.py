"""
In-memory protection for passwords under analysis.
"""

import codecs
import secrets
from typing import Callable


class ProtectedValue:
    """
    Password held XOR-masked with a random salt.

    The plain text is only ever reconstructed one character at a time
    through ``for_each_char``.
    """

    def __init__(self, masked: bytes, salt: bytes):
        if len(masked) != len(salt):
            raise ValueError("Salt must be as long as the masked value")
        self._masked = bytes(masked)
        self._salt = bytes(salt)

    @classmethod
    def from_string(cls, text: str) -> "ProtectedValue":
        """
        Protect a string.

        Args:
            text: Plain text to protect

        Returns:
            ProtectedValue holding ``text``
        """
        data = bytearray(text.encode("utf-8"))
        salt = secrets.token_bytes(len(data))
        masked = bytes(b ^ s for b, s in zip(data, salt))
        # Overwrite our copy of the plain bytes
        for i in range(len(data)):
            data[i] = 0
        return cls(masked, salt)

    @property
    def byte_length(self) -> int:
        return len(self._masked)

    def for_each_char(self, callback: Callable[[str], None]) -> None:
        """
        Call ``callback`` with each character of the value in order.

        Args:
            callback: Function receiving one character at a time
        """
        decoder = codecs.getincrementaldecoder("utf-8")()
        for masked_byte, salt_byte in zip(self._masked, self._salt):
            char = decoder.decode(bytes((masked_byte ^ salt_byte,)))
            if char:
                callback(char)
        tail = decoder.decode(b"", final=True)
        if tail:
            callback(tail)

    def __repr__(self) -> str:
        return f"ProtectedValue(<{self.byte_length} bytes>)"
