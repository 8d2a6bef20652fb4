"""Immutable byte strings tagged with what they describe.

A ByteString holds Modified UTF-8 bytes as they appear in a class file. The
type parameter is a phantom tag (Name, Type, Signature, Constant) that only
documents where the bytes came from; it takes no part in equality, hashing
or ordering.

Example:
    >>> name = ByteString.from_str('Exceptions', Name)
    >>> name
    ByteString[Name](b'Exceptions')
    >>> name == ByteString(b'Exceptions')
    True
"""

from functools import total_ordering
from typing import Generic, Iterator, Optional, TypeVar, Union, overload

T = TypeVar('T')


class Name:
    """Tag for field, method, class and attribute names."""


class Type:
    """Tag for field and method descriptors."""


class Signature:
    """Tag for generic signatures."""


class Constant:
    """Tag for constant pool string literals."""


@total_ordering
class ByteString(Generic[T]):
    """An immutable, hashable sequence of encoded bytes.

    Args:
        data: The encoded bytes. A bytearray or memoryview is copied so the
            handle owns its buffer.
        tag: Optional tag class. Stored for repr() only.
    """

    __slots__ = ('_data', '_tag', '_hash')

    def __init__(self, data: Union[bytes, bytearray, memoryview], tag: Optional[type] = None) -> None:
        self._data = bytes(data)
        self._tag = tag
        self._hash: Optional[int] = None

    @classmethod
    def from_str(cls, text: str, tag: Optional[type] = None) -> 'ByteString[T]':
        """Encode ``text`` as Modified UTF-8 into a new ByteString."""
        from .utf8 import encode_to_handle
        return encode_to_handle(text, tag)

    @property
    def tag(self) -> Optional[type]:
        return self._tag

    def to_str(self) -> str:
        """Decode the bytes back into a str.

        Raises:
            MalformedEncodingError: If the bytes are not valid Modified UTF-8.
        """
        from .utf8 import decode
        return decode(self._data)

    def __bytes__(self) -> bytes:
        return self._data

    def __len__(self) -> int:
        return len(self._data)

    @overload
    def __getitem__(self, index: int) -> int: ...

    @overload
    def __getitem__(self, index: slice) -> bytes: ...

    def __getitem__(self, index):
        return self._data[index]

    def __iter__(self) -> Iterator[int]:
        return iter(self._data)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ByteString):
            return self._data == other._data
        return NotImplemented

    def __lt__(self, other: 'ByteString') -> bool:
        if isinstance(other, ByteString):
            return self._data < other._data
        return NotImplemented

    def __hash__(self) -> int:
        if self._hash is None:
            self._hash = hash(self._data)
        return self._hash

    def __repr__(self) -> str:
        if self._tag is None:
            return f"ByteString({self._data!r})"
        return f"ByteString[{self._tag.__name__}]({self._data!r})"

