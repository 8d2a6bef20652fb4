"""modutf8 - Modified UTF-8 encoding and decoding for JVM class file strings."""

__version__ = "0.1.0"

from .codec import Codec
from .units import CodeUnitClass, classify, to_code_units, from_code_units
from .errors import (
    MalformedEncodingError,
    TruncatedSequenceError,
    InvalidContinuationByteError,
    InvalidLeadingByteError,
)
from .byte_string import ByteString, Name, Type, Signature, Constant
from .utf8 import (
    ModifiedUtf8Codec,
    encoded_length,
    encode,
    decode,
    decode_units,
    encode_to_handle,
)
from .attribute import Attribute, ExceptionsAttribute
from .registry import register, unregister

__all__ = [
    "Codec",
    "ModifiedUtf8Codec",
    "CodeUnitClass",
    "classify",
    "to_code_units",
    "from_code_units",
    "encoded_length",
    "encode",
    "decode",
    "decode_units",
    "encode_to_handle",
    "MalformedEncodingError",
    "TruncatedSequenceError",
    "InvalidContinuationByteError",
    "InvalidLeadingByteError",
    "ByteString",
    "Name",
    "Type",
    "Signature",
    "Constant",
    "Attribute",
    "ExceptionsAttribute",
    "register",
    "unregister",
]
