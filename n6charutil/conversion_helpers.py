# Copyright (c) 2024-2025 NASK. All rights reserved.

"""
Allocating counterparts of the core conversion functions: they take
care of the output buffer themselves, return :class:`bytes`, and
signal any failure by raising an exception (see:
:mod:`n6charutil.exceptions`).
"""

from n6charutil.encoding_helpers import (
    utf16_to_utf8_required_size,
    utf8_to_utf16_required_size,
)
from n6charutil.exceptions import (
    UTF16DecodingError,
    UTF8DecodingError,
)
from n6charutil.log_helpers import get_logger
from n6charutil.unicode_constants import (
    MAX_UTF16_STRING,
    octets_view,
)
from n6charutil.utf16_to_utf8 import convert_utf16_to_utf8
from n6charutil.utf8_to_utf16 import convert_utf8_to_utf16
from n6charutil.utf8_validation import is_utf8_valid


LOGGER = get_logger(__name__)


def utf8_to_utf16(data, little_endian: bool = True) -> bytes:

    r"""
    Convert UTF-8 data to UTF-16 (without adding any byte-order mark).

    Raises:
        :exc:`~n6charutil.exceptions.UTF8DecodingError`:
            if `data` is not valid UTF-8.
        :exc:`~exceptions.TypeError`:
            if `data` is not a bytes-like object.

    >>> utf8_to_utf16(b'Hello')
    b'H\x00e\x00l\x00l\x00o\x00'
    >>> utf8_to_utf16('Zaż\xf3łć'.encode('utf-8'), little_endian=False) == 'Zaż\xf3łć'.encode('utf-16-be')
    True
    >>> utf8_to_utf16(b'')
    b''
    >>> utf8_to_utf16(b'\xc0\xaf')           # doctest: +IGNORE_EXCEPTION_DETAIL
    Traceback (most recent call last):
      ...
    n6charutil.exceptions.UTF8DecodingError: ...
    """
    in_view = octets_view(data)
    out = bytearray(utf8_to_utf16_required_size(len(in_view)))
    ok, length = convert_utf8_to_utf16(in_view, out, little_endian)
    if not ok:
        LOGGER.debug('UTF-8 -> UTF-16 conversion failed for %a', bytes(in_view[:64]))
        raise UTF8DecodingError(len(in_view), little_endian=little_endian)
    return bytes(out[:length])


def utf16_to_utf8(data, little_endian: bool = True) -> bytes:

    r"""
    Convert UTF-16 data to UTF-8 (a leading byte-order mark, if any,
    determines the byte order and is converted as any other character;
    see: :func:`~n6charutil.convert_utf16_to_utf8`).

    Raises:
        :exc:`~n6charutil.exceptions.UTF16DecodingError`:
            if `data` is not valid UTF-16 (e.g., its length is odd or it
            contains some unpaired surrogates) or is too long.
        :exc:`~exceptions.TypeError`:
            if `data` is not a bytes-like object.

    >>> utf16_to_utf8(b'H\x00e\x00l\x00l\x00o\x00')
    b'Hello'
    >>> utf16_to_utf8(b'\xd8\x3d\xde\x00', little_endian=False)
    b'\xf0\x9f\x98\x80'
    >>> utf16_to_utf8(b'\xff\xfeA\x00', little_endian=False)
    b'\xef\xbb\xbfA'
    >>> utf16_to_utf8(b'\x00\xd8')           # doctest: +IGNORE_EXCEPTION_DETAIL
    Traceback (most recent call last):
      ...
    n6charutil.exceptions.UTF16DecodingError: ...
    """
    in_view = octets_view(data)
    in_length = len(in_view)
    if in_length > MAX_UTF16_STRING:
        LOGGER.debug('UTF-16 input too long (%d octets)', in_length)
        raise UTF16DecodingError(in_length, little_endian=little_endian,
                                 description='UTF-16 data too long')
    out = bytearray(utf16_to_utf8_required_size(in_length))
    ok, length = convert_utf16_to_utf8(in_view, out, little_endian)
    if not ok:
        LOGGER.debug('UTF-16 -> UTF-8 conversion failed for %a', bytes(in_view[:64]))
        raise UTF16DecodingError(in_length, little_endian=little_endian)
    return bytes(out[:length])


def verified_as_utf8(data) -> bytes:

    r"""
    Verify that the given data is valid UTF-8, and return it (as
    :class:`bytes`).

    Raises:
        :exc:`~n6charutil.exceptions.UTF8DecodingError`:
            if `data` is not valid UTF-8.
        :exc:`~exceptions.TypeError`:
            if `data` is not a bytes-like object.

    >>> verified_as_utf8(bytearray(b'Spam \xc5\x9b'))
    b'Spam \xc5\x9b'
    >>> verified_as_utf8(b'\xed\xa0\x80')    # doctest: +IGNORE_EXCEPTION_DETAIL
    Traceback (most recent call last):
      ...
    n6charutil.exceptions.UTF8DecodingError: ...
    """
    if not is_utf8_valid(data):
        in_view = octets_view(data)
        LOGGER.debug('invalid UTF-8 data: %a', bytes(in_view[:64]))
        raise UTF8DecodingError(len(in_view))
    return bytes(octets_view(data))
