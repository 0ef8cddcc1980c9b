# Copyright (c) 2024-2025 NASK. All rights reserved.

from typing import Tuple

from n6charutil.unicode_constants import (
    LEAD_OFFSET,
    MAX_BMP_VALUE,
    SURROGATE_LOW_MIN,
    UTF8_TO_UTF16_EXPANSION,
    classify_utf8_lead_octet,
    is_acceptable_scalar,
    is_utf8_continuation_octet,
    octets_view,
)


def convert_utf8_to_utf16(in_octets,
                          out_buffer,
                          little_endian: bool = True) -> Tuple[bool, int]:

    r"""
    Convert a UTF-8 octet sequence to UTF-16, writing the result into
    the given (pre-allocated) output buffer.

    Args:
        `in_octets`:
            The original string in UTF-8 format (a bytes-like object).
        `out_buffer`:
            A writable bytes-like object (e.g., a :class:`bytearray`)
            the UTF-16 octets will be written into.  Its size MUST be
            at least twice the size of `in_octets` (even though the
            resultant data may be shorter).  It is never resized.
        `little_endian` (default: :obj:`True`):
            Whether to store the UTF-16 code units in the little-endian
            (rather than big-endian) order.

    Returns:
        An `(<success flag>, <length>)` pair.  On success the length is
        the number of octets (*not* characters!) written to the output
        buffer.  On failure it is 0, and the buffer's content shall be
        considered unspecified.

    Raises:
        :exc:`~exceptions.TypeError`:
            if `in_octets` is not a bytes-like object (e.g., it is a
            :class:`str`) or if `out_buffer` is not a writable one.

    No byte-order mark is ever inserted by this function (though a
    U+FEFF character present in the input is converted as any other
    character).

    >>> out = bytearray(10)
    >>> convert_utf8_to_utf16(b'Hello', out)
    (True, 10)
    >>> bytes(out)
    b'H\x00e\x00l\x00l\x00o\x00'
    >>> convert_utf8_to_utf16(b'Hello', out, little_endian=False)
    (True, 10)
    >>> bytes(out)
    b'\x00H\x00e\x00l\x00l\x00o'

    >>> out = bytearray(8)
    >>> convert_utf8_to_utf16(b'\xf0\x9f\x98\x80', out)
    (True, 4)
    >>> out[:4].hex()
    '3dd800de'
    >>> convert_utf8_to_utf16(b'\xf0\x9f\x98\x80', out, little_endian=False)
    (True, 4)
    >>> out[:4].hex()
    'd83dde00'

    >>> convert_utf8_to_utf16(b'', bytearray())
    (True, 0)
    >>> convert_utf8_to_utf16(b'Hello', bytearray(9))      # output too small
    (False, 0)
    >>> convert_utf8_to_utf16(b'\xc1\xbf', bytearray(4))   # overlong form
    (False, 0)
    >>> convert_utf8_to_utf16(b'\xe2\x82', bytearray(4))   # truncated
    (False, 0)
    """
    in_view = octets_view(in_octets)
    out_view = octets_view(out_buffer, writable=True)

    # If the input is empty, so is the output
    if not in_view:
        return True, 0

    # Not enough space for the worst case?
    if len(out_view) < len(in_view) * UTF8_TO_UTF16_EXPANSION:
        return False, 0

    if little_endian:
        low_index, high_index = 0, 1
    else:
        low_index, high_index = 1, 0

    def put_unit(position, unit):
        out_view[position + low_index] = unit & 0xFF
        out_view[position + high_index] = (unit >> 8) & 0xFF

    pos = 0
    remaining = 0
    continuation_count = 0
    wide_character = 0
    for octet in in_view:
        if remaining:
            # (expecting a 10xxxxxx octet)
            if not is_utf8_continuation_octet(octet):
                return False, 0
            wide_character = (wide_character << 6) | (octet & 0x3F)
            remaining -= 1
            if remaining:
                continue
            if not is_acceptable_scalar(wide_character, continuation_count):
                return False, 0
        else:
            lead_info = classify_utf8_lead_octet(octet)
            if lead_info is None:
                return False, 0
            remaining, wide_character = lead_info
            continuation_count = remaining
            if remaining:
                continue

        # Here `wide_character` is a complete scalar value
        if wide_character > MAX_BMP_VALUE:
            # (see: https://www.unicode.org/faq/utf_bom.html#utf16-3)
            put_unit(pos, LEAD_OFFSET + (wide_character >> 10))
            put_unit(pos + 2, SURROGATE_LOW_MIN + (wide_character & 0x3FF))
            pos += 4
        else:
            put_unit(pos, wide_character)
            pos += 2

    # Some continuation octets still expected?
    if remaining:
        return False, 0

    return True, pos
