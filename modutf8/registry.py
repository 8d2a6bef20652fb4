"""Registration of Modified UTF-8 with Python's ``codecs`` machinery.

After register() the codec is reachable by name:

    >>> register()
    >>> 'a\\x00b'.encode('mutf-8')
    b'a\\xc0\\x80b'
    >>> b'a\\xc0\\x80b'.decode('mutf-8')
    'a\\x00b'
"""

import codecs
import logging
import threading
from typing import Optional, Tuple

from .codec import BytesLike
from .errors import ENCODING_NAME
from .utf8 import decode, encode

logger = logging.getLogger(__name__)

CODEC_NAMES = frozenset([
    'mutf_8',
    'mutf8',
    'modified_utf_8',
    'java_modified_utf_8',
])

_lock = threading.Lock()
_registered = False


def normalize_name(name: str) -> str:
    """Lower-case ``name`` and fold hyphens and spaces into underscores."""
    return name.strip().lower().replace('-', '_').replace(' ', '_')


def _check_errors(errors: str) -> None:
    if errors != 'strict':
        raise ValueError(f"{ENCODING_NAME} only supports the 'strict' error handler, got {errors!r}")


def _encode(text: str, errors: str = 'strict') -> Tuple[bytes, int]:
    _check_errors(errors)
    return encode(text), len(text)


def _decode(data: BytesLike, errors: str = 'strict') -> Tuple[str, int]:
    _check_errors(errors)
    return decode(data), len(data)


def search(name: str) -> Optional[codecs.CodecInfo]:
    """Codec search function; returns CodecInfo for any Modified UTF-8 alias."""
    if normalize_name(name) not in CODEC_NAMES:
        return None
    return codecs.CodecInfo(_encode, _decode, name=ENCODING_NAME)


def register() -> None:
    """Make the codec available to str.encode() and bytes.decode().

    Calling this more than once has no further effect.
    """
    global _registered
    with _lock:
        if _registered:
            return
        codecs.register(search)
        _registered = True
    logger.debug("Registered codec search function for %s", ENCODING_NAME)


def unregister() -> None:
    """Remove the codec search function installed by register()."""
    global _registered
    with _lock:
        if not _registered:
            return
        codecs.unregister(search)
        _registered = False
    logger.debug("Unregistered codec search function for %s", ENCODING_NAME)
