# Copyright (c) 2024-2025 NASK. All rights reserved.

"""
Immutable constants shared by the UTF-8/UTF-16 conversion and
validation functions of *n6charutil*.

>>> hex(LEAD_OFFSET + (0x1F600 >> 10))
'0xd83d'
>>> hex(SURROGATE_LOW_MIN + (0x1F600 & 0x3FF))
'0xde00'
>>> hex(((0xD83D << 10) + 0xDE00 + SURROGATE_OFFSET) & UINT32_MASK)
'0x1f600'

>>> MAX_UTF16_STRING + MAX_UTF16_STRING // 2 <= sys.maxsize
True
>>> (MAX_UTF16_STRING + 1) + (MAX_UTF16_STRING + 1) // 2 > sys.maxsize
True
"""

import sys
from typing import (
    Final,
    Optional,
    Tuple,
)


# Largest valid Unicode character
MAX_CHARACTER_VALUE: Final = 0x10FFFF

# Largest character of the Basic Multilingual Plane (BMP)
MAX_BMP_VALUE: Final = 0xFFFF

# Surrogate code point ranges
# (see: https://en.wikipedia.org/wiki/UTF-16#U+D800_to_U+DFFF_(surrogates))
SURROGATE_HIGH_MIN: Final = 0xD800
SURROGATE_HIGH_MAX: Final = 0xDBFF
SURROGATE_LOW_MIN: Final = 0xDC00
SURROGATE_LOW_MAX: Final = 0xDFFF

# Values used when creating or parsing surrogate pairs
# (see: https://www.unicode.org/faq/utf_bom.html#utf16-3)
LEAD_OFFSET: Final = SURROGATE_HIGH_MIN - (0x10000 >> 10)
SURROGATE_OFFSET: Final = (0x10000 - (SURROGATE_HIGH_MIN << 10) - SURROGATE_LOW_MIN) & 0xFFFFFFFF
UINT32_MASK: Final = 0xFFFFFFFF

# Byte-order marks
UTF8_BOM: Final = b'\xEF\xBB\xBF'
UTF16_BE_BOM: Final = b'\xFE\xFF'
UTF16_LE_BOM: Final = b'\xFF\xFE'

# The UTF-16 -> UTF-8 conversion requires an output buffer 1.5 times
# as large as the input, so the input length is limited to the largest
# value `n` for which `n + n // 2` does not exceed the maximum buffer
# size supported by the platform (`sys.maxsize`).
MAX_UTF16_STRING: Final = (2 * sys.maxsize + 1) // 3

# Worst-case output size factors
UTF8_TO_UTF16_EXPANSION: Final = 2


# The smallest scalar value that may be encoded with a UTF-8 sequence
# of the given length (anything below is an overlong form), indexed by
# the number of continuation octets.
MIN_SCALAR_FOR_CONTINUATION_COUNT: Final = (0x00, 0x80, 0x800, 0x10000)


def classify_utf8_lead_octet(octet: int) -> Optional[Tuple[int, int]]:
    """
    Classify an octet that is expected to start a UTF-8 sequence.

    Returns:
        A `(<number of continuation octets>, <payload bits>)` pair, or
        `None` if the octet can never start a valid sequence (this
        includes continuation octets, the overlong-only leads 0xC0 and
        0xC1, and any octet >= 0xF5).

    >>> classify_utf8_lead_octet(0x41)
    (0, 65)
    >>> classify_utf8_lead_octet(0xC3)
    (1, 3)
    >>> classify_utf8_lead_octet(0xE2)
    (2, 2)
    >>> classify_utf8_lead_octet(0xF0)
    (3, 0)
    >>> classify_utf8_lead_octet(0xF4)
    (3, 4)
    >>> classify_utf8_lead_octet(0x80) is None
    True
    >>> classify_utf8_lead_octet(0xC0) is None
    True
    >>> classify_utf8_lead_octet(0xC1) is None
    True
    >>> classify_utf8_lead_octet(0xF5) is None
    True
    >>> classify_utf8_lead_octet(0xFF) is None
    True
    """
    if octet <= 0x7F:
        # 0xxxxxxx
        return 0, octet
    if octet in (0xC0, 0xC1) or octet >= 0xF5:
        return None
    if (octet & 0xE0) == 0xC0:
        # 110xxxxx
        return 1, octet & 0x1F
    if (octet & 0xF0) == 0xE0:
        # 1110xxxx
        return 2, octet & 0x0F
    if (octet & 0xF8) == 0xF0:
        # 11110xxx
        return 3, octet & 0x07
    return None


def is_utf8_continuation_octet(octet: int) -> bool:
    """Tell whether the octet matches the `10xxxxxx` pattern."""
    return (octet & 0xC0) == 0x80


def is_acceptable_scalar(scalar: int, continuation_count: int) -> bool:
    """
    Check a scalar value assembled from a multi-octet UTF-8 sequence.

    >>> is_acceptable_scalar(0xE9, 1)
    True
    >>> is_acceptable_scalar(0x10FFFF, 3)
    True
    >>> is_acceptable_scalar(0x110000, 3)       # out of range
    False
    >>> is_acceptable_scalar(0xD800, 2)         # surrogate
    False
    >>> is_acceptable_scalar(0x7FF, 2)          # overlong
    False
    >>> is_acceptable_scalar(0xFFFF, 3)         # overlong
    False
    """
    return (MIN_SCALAR_FOR_CONTINUATION_COUNT[continuation_count]
            <= scalar
            <= MAX_CHARACTER_VALUE
            and not SURROGATE_HIGH_MIN <= scalar <= SURROGATE_LOW_MAX)


def octets_view(obj, *, writable: bool = False) -> memoryview:
    """
    Get a flat, unsigned-octet :class:`memoryview` of the given
    buffer-protocol-supporting object.

    Raises:
        :exc:`~exceptions.TypeError`:
            if `obj` is a :class:`str` (text is not a byte sequence),
            if it does not support the buffer protocol, or if
            `writable` is true and the buffer is read-only.

    >>> octets_view(b'abc').tolist()
    [97, 98, 99]
    >>> octets_view(bytearray(b'\\x00\\xff'), writable=True).tolist()
    [0, 255]
    >>> octets_view('abc')                       # doctest: +IGNORE_EXCEPTION_DETAIL
    Traceback (most recent call last):
      ...
    TypeError: ...
    >>> octets_view(b'abc', writable=True)       # doctest: +IGNORE_EXCEPTION_DETAIL
    Traceback (most recent call last):
      ...
    TypeError: ...
    """
    if isinstance(obj, str):
        raise TypeError('{!a} is a str, not a bytes-like object'.format(obj))
    view = memoryview(obj)
    if writable and view.readonly:
        raise TypeError('{!a} is a read-only buffer'.format(obj))
    if view.format != 'B' or view.ndim != 1:
        view = view.cast('B')
    return view
