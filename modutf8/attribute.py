"""Class file attribute payload holders."""

from dataclasses import dataclass
from typing import ClassVar, Optional, Tuple

from .byte_string import ByteString, Name
from .units import Text
from .utf8 import encode


@dataclass(frozen=True)
class Attribute:
    """A named attribute with its raw payload bytes."""

    EMPTY: ClassVar[Tuple['Attribute', ...]] = ()

    name: ByteString[Name]
    data: Optional[bytes]

    @classmethod
    def from_text(cls, name: ByteString[Name], text: Text) -> 'Attribute':
        """Build an attribute whose payload is ``text`` in Modified UTF-8."""
        return cls(name, encode(text))


@dataclass(frozen=True)
class ExceptionsAttribute(Attribute):
    """The Exceptions attribute: constant pool indices of checked exceptions.

    It carries no raw payload; ``data`` is always None.
    """

    NAME: ClassVar[ByteString[Name]] = ByteString(b'Exceptions', Name)

    checked_exceptions_cpi: Tuple[int, ...] = ()

    def __init__(self, name: ByteString[Name], checked_exceptions_cpi: Tuple[int, ...]) -> None:
        object.__setattr__(self, 'name', name)
        object.__setattr__(self, 'data', None)
        object.__setattr__(self, 'checked_exceptions_cpi', tuple(checked_exceptions_cpi))

    @classmethod
    def from_text(cls, name: ByteString[Name], text: Text) -> 'Attribute':
        raise TypeError("ExceptionsAttribute holds constant pool indices, not a text payload")
