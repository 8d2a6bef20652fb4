"""Abstract base class for codecs."""

from abc import ABC, abstractmethod
from typing import Union

from .units import Text

BytesLike = Union[bytes, bytearray, memoryview]


class Codec(ABC):
    """Base codec interface for converting between text and bytes."""

    @abstractmethod
    def encode(self, text: Text) -> bytes:
        """Encode text.

        Args:
            text: A str or a sequence of 16-bit code units

        Returns:
            The encoded bytes
        """
        pass

    @abstractmethod
    def decode(self, data: BytesLike) -> str:
        """Decode bytes.

        Args:
            data: The bytes to decode

        Returns:
            The decoded string
        """
        pass
