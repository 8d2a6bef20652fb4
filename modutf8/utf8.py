"""Modified UTF-8 conversions.

Modified UTF-8 is the string encoding used by JVM class files and JNI. It
differs from standard UTF-8 in two ways:

    - U+0000 is written as the two byte overlong form ``C0 80``, so an
      encoded string never contains a zero byte.
    - Characters above U+FFFF are written as two independent three byte
      sequences, one per UTF-16 surrogate half, instead of one four byte
      sequence.

Encoded strings are length-prefixed by their container, not terminated. A
single ``00`` terminator can be appended for C-style consumers.

Example:
    >>> encode('A\\x00\\U0001F600')
    b'A\\xc0\\x80\\xed\\xa0\\xbd\\xed\\xb8\\x80'
    >>> decode(b'A\\xc0\\x80\\xed\\xa0\\xbd\\xed\\xb8\\x80') == 'A\\x00\\U0001F600'
    True

Functions:
    encoded_length: Number of bytes text encodes to
    encode: Text to bytes
    decode_units: Bytes to UTF-16 code units
    decode: Bytes to str
    encode_to_handle: Text to an immutable ByteString handle
"""

import logging
from typing import List, Optional, Sequence, Tuple, Type, TypeVar

from .byte_string import ByteString
from .codec import BytesLike, Codec
from .errors import (
    InvalidContinuationByteError,
    InvalidLeadingByteError,
    TruncatedSequenceError,
)
from .units import Text, from_code_units, to_code_units

logger = logging.getLogger(__name__)

T = TypeVar('T')


def _resolve_range(units: Sequence[int], start: int, length: Optional[int]) -> Tuple[int, int]:
    """Validate a (start, length) slice of ``units`` and return (start, end)."""
    total = len(units)
    if length is None:
        length = total - start
    if start < 0 or length < 0 or start + length > total:
        raise IndexError(
            f"range start={start} length={length} is outside text of {total} code units"
        )
    return start, start + length


def _length_of(units: Sequence[int], start: int, end: int) -> int:
    utflen = 0
    for i in range(start, end):
        c = units[i]
        if 0x0001 <= c <= 0x007F:
            utflen += 1
        elif c > 0x07FF:
            utflen += 3
        else:
            utflen += 2
    return utflen


def encoded_length(text: Text, start: int = 0, length: Optional[int] = None) -> int:
    """Compute the number of bytes ``text`` encodes to, without a terminator.

    Useful for sizing an external buffer before calling encode().

    Args:
        text: A str or a sequence of 16-bit code units
        start: Index of the first code unit to count
        length: Number of code units to count. Defaults to the rest of text.

    Returns:
        The encoded byte count. It is at least the number of code units and
        at most three times that.

    Raises:
        IndexError: If the range lies outside the text.

    Examples:
        >>> encoded_length('abc')
        3
        >>> encoded_length('\\x00\\u00e9\\u4e16')
        7
    """
    units = to_code_units(text)
    start, end = _resolve_range(units, start, length)
    return _length_of(units, start, end)


def encode(
    text: Text,
    start: int = 0,
    length: Optional[int] = None,
    append_terminator: bool = False
) -> bytes:
    """Encode text as Modified UTF-8.

    Each code unit is encoded on its own; a surrogate pair therefore
    produces six bytes. Every 16-bit value has an encoding, so this never
    fails on valid input.

    Args:
        text: A str or a sequence of 16-bit code units
        start: Index of the first code unit to encode
        length: Number of code units to encode. Defaults to the rest of text.
        append_terminator: If True, add a single zero byte after the
            encoded text. In-text NULs are always written as ``C0 80`` so
            the terminator is unambiguous.

    Returns:
        The encoded bytes.

    Raises:
        IndexError: If the range lies outside the text.
        ValueError: If a code unit in a raw sequence is not 16-bit.
    """
    units = to_code_units(text)
    start, end = _resolve_range(units, start, length)
    utflen = _length_of(units, start, end)

    bytearr = bytearray(utflen + (1 if append_terminator else 0))
    count = 0

    # Leading ASCII run
    i = start
    while i < end:
        c = units[i]
        if not 0x0001 <= c <= 0x007F:
            break
        bytearr[count] = c
        count += 1
        i += 1

    while i < end:
        c = units[i]
        if 0x0001 <= c <= 0x007F:
            bytearr[count] = c
            count += 1
        elif c > 0x07FF:
            bytearr[count] = 0xE0 | ((c >> 12) & 0x0F)
            bytearr[count + 1] = 0x80 | ((c >> 6) & 0x3F)
            bytearr[count + 2] = 0x80 | (c & 0x3F)
            count += 3
        else:
            bytearr[count] = 0xC0 | ((c >> 6) & 0x1F)
            bytearr[count + 1] = 0x80 | (c & 0x3F)
            count += 2
        i += 1

    # bytearray() is zero filled, so the terminator slot is already 0x00
    return bytes(bytearr)


def decode_units(data: BytesLike) -> List[int]:
    """Decode Modified UTF-8 into UTF-16 code units.

    Surrogate halves come back exactly as they were encoded; no attempt is
    made to check that they pair up.

    Args:
        data: The encoded bytes. Must not include a terminator.

    Returns:
        List of 16-bit code units.

    Raises:
        TruncatedSequenceError: A multi-byte sequence runs past the end.
        InvalidContinuationByteError: A trailing byte is not ``10xxxxxx``.
        InvalidLeadingByteError: A byte cannot start a sequence (an orphan
            continuation byte or a four byte or longer UTF-8 lead).
    """
    buf = memoryview(data).cast('B') if not isinstance(data, (bytes, bytearray)) else data
    utflen = len(buf)
    # No sequence yields more code units than it has bytes
    chararr = [0] * utflen
    count = 0
    chararr_count = 0

    while count < utflen:
        c = buf[count]
        if c > 127:
            break
        chararr[chararr_count] = c
        chararr_count += 1
        count += 1

    try:
        while count < utflen:
            c = buf[count]
            nibble = c >> 4
            if nibble <= 7:
                # 0xxxxxxx
                chararr[chararr_count] = c
                count += 1
            elif nibble == 12 or nibble == 13:
                # 110xxxxx 10xxxxxx
                if count + 2 > utflen:
                    raise TruncatedSequenceError(data, count)
                char2 = buf[count + 1]
                if (char2 & 0xC0) != 0x80:
                    raise InvalidContinuationByteError(data, count + 1)
                chararr[chararr_count] = ((c & 0x1F) << 6) | (char2 & 0x3F)
                count += 2
            elif nibble == 14:
                # 1110xxxx 10xxxxxx 10xxxxxx
                if count + 3 > utflen:
                    raise TruncatedSequenceError(data, count)
                char2 = buf[count + 1]
                char3 = buf[count + 2]
                if (char2 & 0xC0) != 0x80:
                    raise InvalidContinuationByteError(data, count + 1)
                if (char3 & 0xC0) != 0x80:
                    raise InvalidContinuationByteError(data, count + 2)
                chararr[chararr_count] = ((c & 0x0F) << 12) | ((char2 & 0x3F) << 6) | (char3 & 0x3F)
                count += 3
            else:
                # 10xxxxxx, 1111xxxx
                raise InvalidLeadingByteError(data, count)
            chararr_count += 1
    except TruncatedSequenceError as e:
        logger.debug("Truncated sequence at byte %d of %d", e.position, utflen)
        raise
    except (InvalidContinuationByteError, InvalidLeadingByteError) as e:
        logger.debug("Malformed input at byte %d (0x%02x): %s",
                     e.position, buf[e.position], e.reason)
        raise

    del chararr[chararr_count:]
    return chararr


def decode(data: BytesLike) -> str:
    """Decode Modified UTF-8 into a str.

    Surrogate halves that form a valid pair become one supplementary
    character; unpaired halves are kept as lone surrogates.

    Args:
        data: The encoded bytes. Must not include a terminator.

    Returns:
        The decoded string.

    Raises:
        MalformedEncodingError: See decode_units() for the subclasses.

    Examples:
        >>> decode(b'caf\\xc3\\xa9')
        'café'
        >>> decode(b'\\xc0\\x80')
        '\\x00'
    """
    return from_code_units(decode_units(data))


def encode_to_handle(text: Text, tag: Optional[Type[T]] = None) -> ByteString[T]:
    """Encode text without terminator and wrap it in a ByteString.

    Args:
        text: A str or a sequence of 16-bit code units
        tag: Optional phantom tag class recorded on the handle (Name, Type,
            Signature, ...). It has no effect on the bytes.

    Returns:
        An immutable ByteString holding the encoded bytes.
    """
    return ByteString(encode(text), tag)


class ModifiedUtf8Codec(Codec):
    """Codec object for Modified UTF-8.

    Args:
        append_terminator: If True, encode() appends a zero byte and decode()
            strips a trailing zero byte before decoding.

    Example:
        >>> codec = ModifiedUtf8Codec(append_terminator=True)
        >>> codec.encode('hi')
        b'hi\\x00'
        >>> codec.decode(b'hi\\x00')
        'hi'
    """

    def __init__(self, append_terminator: bool = False) -> None:
        self.append_terminator = append_terminator

    def encode(self, text: Text) -> bytes:
        return encode(text, append_terminator=self.append_terminator)

    def decode(self, data: BytesLike) -> str:
        # A literal zero byte only ever appears as the terminator
        if self.append_terminator and len(data) and data[-1] == 0:
            data = data[:-1]
        return decode(data)

    def __repr__(self) -> str:
        return f"ModifiedUtf8Codec(append_terminator={self.append_terminator})"
