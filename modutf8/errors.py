"""Exceptions raised when decoding malformed Modified UTF-8."""

from typing import Union

ENCODING_NAME = 'mutf-8'


class MalformedEncodingError(UnicodeDecodeError):
    """Base class for Modified UTF-8 decoding failures.

    Subclasses UnicodeDecodeError so callers that already handle codec
    errors (including ``bytes.decode('mutf-8')`` once the codec is
    registered) catch it without special casing.

    Attributes:
        position: Byte offset nearest the fault
        reason: Human readable description of the fault
    """

    def __init__(self, data: Union[bytes, bytearray, memoryview], position: int, reason: str) -> None:
        super().__init__(ENCODING_NAME, bytes(data), position, position + 1, reason)

    def __reduce__(self):
        return type(self), (self.object, self.start, self.reason)

    @property
    def position(self) -> int:
        return self.start


class TruncatedSequenceError(MalformedEncodingError):
    """A multi-byte sequence runs past the end of the input."""

    def __init__(self, data: Union[bytes, bytearray, memoryview], position: int) -> None:
        super().__init__(data, position, 'partial character at end')
        self.end = len(self.object)

    def __reduce__(self):
        return type(self), (self.object, self.start)


class InvalidContinuationByteError(MalformedEncodingError):
    """A byte that must match ``10xxxxxx`` does not."""

    def __init__(self, data: Union[bytes, bytearray, memoryview], position: int) -> None:
        super().__init__(data, position, f'malformed input around byte {position}')

    def __reduce__(self):
        return type(self), (self.object, self.start)


class InvalidLeadingByteError(MalformedEncodingError):
    """A sequence starts with an orphan continuation byte or a 4+ byte lead."""

    def __init__(self, data: Union[bytes, bytearray, memoryview], position: int) -> None:
        super().__init__(data, position, f'malformed input around byte {position}')

    def __reduce__(self):
        return type(self), (self.object, self.start)
