"""UTF-16 code unit helpers.

Modified UTF-8 is defined over 16-bit code units rather than code points, so
a Python ``str`` has to be viewed the way a UTF-16 string would store it:
characters above U+FFFF become a high/low surrogate pair, and lone
surrogates (which a ``str`` may legally hold) stay single units.

Functions:
    to_code_units: View a str (or unit sequence) as a sequence of code units
    from_code_units: Rebuild a str from code units
    classify: Determine the encoded width class of one code unit
"""

import struct
from enum import IntEnum
from typing import Sequence, Union

Text = Union[str, Sequence[int]]

MAX_CODE_UNIT = 0xFFFF


class CodeUnitClass(IntEnum):
    """Encoded width of a single code unit. The value is the byte count."""

    ASCII = 1
    TWO_BYTE = 2
    THREE_BYTE = 3


def classify(unit: int) -> CodeUnitClass:
    """Classify a code unit by the number of bytes it encodes to.

    Args:
        unit: A 16-bit code unit

    Returns:
        ASCII for 0x0001..0x007F, THREE_BYTE above 0x07FF, and TWO_BYTE for
        everything else (including 0x0000, which is never encoded as a
        single zero byte).

    Examples:
        >>> classify(0x41)
        <CodeUnitClass.ASCII: 1>
        >>> classify(0)
        <CodeUnitClass.TWO_BYTE: 2>
        >>> classify(0xD800)
        <CodeUnitClass.THREE_BYTE: 3>
    """
    if 0x0001 <= unit <= 0x007F:
        return CodeUnitClass.ASCII
    if unit > 0x07FF:
        return CodeUnitClass.THREE_BYTE
    return CodeUnitClass.TWO_BYTE


def to_code_units(text: Text) -> Sequence[int]:
    """Return the UTF-16 code units of ``text``.

    A ``str`` is split into code units with surrogate pairs for
    supplementary characters. Any other sequence is taken to already hold
    code units and is returned unchanged after a range check.

    Raises:
        ValueError: If a sequence element is not in 0..0xFFFF.
    """
    if isinstance(text, str):
        raw = text.encode('utf-16-le', 'surrogatepass')
        return struct.unpack(f'<{len(raw) // 2}H', raw)
    for index, unit in enumerate(text):
        if not 0 <= unit <= MAX_CODE_UNIT:
            raise ValueError(
                f"code unit {unit!r} at index {index} is outside 0..0xFFFF"
            )
    return text


def from_code_units(units: Sequence[int]) -> str:
    """Build a str from UTF-16 code units.

    Adjacent high/low surrogates are joined into one supplementary
    character. Unpaired surrogates are kept as lone surrogate characters, so
    any sequence of 16-bit values survives the trip.
    """
    raw = struct.pack(f'<{len(units)}H', *units)
    return raw.decode('utf-16-le', 'surrogatepass')

