# Copyright (c) 2024-2025 NASK. All rights reserved.

from typing import Tuple

from n6charutil.unicode_constants import (
    MAX_CHARACTER_VALUE,
    MAX_UTF16_STRING,
    SURROGATE_HIGH_MIN,
    SURROGATE_LOW_MAX,
    SURROGATE_LOW_MIN,
    SURROGATE_OFFSET,
    UINT32_MASK,
    UTF16_BE_BOM,
    UTF16_LE_BOM,
    octets_view,
)


def convert_utf16_to_utf8(in_octets,
                          out_buffer,
                          little_endian: bool = True) -> Tuple[bool, int]:

    r"""
    Convert a UTF-16 octet sequence to UTF-8, writing the result into
    the given (pre-allocated) output buffer.

    Args:
        `in_octets`:
            The UTF-16 string (a bytes-like object); its length must be
            even and not greater than `MAX_UTF16_STRING`.
        `out_buffer`:
            A writable bytes-like object (e.g., a :class:`bytearray`)
            the UTF-8 octets will be written into.  Its size MUST be at
            least `len(in_octets) + len(in_octets) // 2` (characters in
            the range U+0800..U+FFFF take two octets in UTF-16 and three
            in UTF-8; supplementary characters take four octets in both
            encodings).  It is never resized.
        `little_endian` (default: :obj:`True`):
            Whether the UTF-16 code units are in the little-endian
            (rather than big-endian) order -- unless the input starts
            with a byte-order mark (see below).

    Returns:
        An `(<success flag>, <length>)` pair.  On success the length is
        the number of octets (*not* characters!) written to the output
        buffer.  On failure it is 0, and the buffer's content shall be
        considered unspecified.

    Raises:
        :exc:`~exceptions.TypeError`:
            if `in_octets` is not a bytes-like object (e.g., it is a
            :class:`str`) or if `out_buffer` is not a writable one.

    If the input is at least 4 octets long and starts with a byte-order
    mark (`FE FF` or `FF FE`), the byte order it indicates takes
    precedence over `little_endian`.  The mark itself is *not* stripped:
    it is converted (to `EF BB BF`) as any other character.

    >>> out = bytearray(15)
    >>> convert_utf16_to_utf8(b'H\x00e\x00l\x00l\x00o\x00', out)
    (True, 5)
    >>> bytes(out[:5])
    b'Hello'
    >>> convert_utf16_to_utf8(b'\x00H\x00e\x00l\x00l\x00o', out, little_endian=False)
    (True, 5)
    >>> bytes(out[:5])
    b'Hello'

    >>> out = bytearray(6)
    >>> convert_utf16_to_utf8(b'\x3d\xd8\x00\xde', out)
    (True, 4)
    >>> out[:4].hex()
    'f09f9880'

    >>> convert_utf16_to_utf8(b'\xfe\xff\x00A', out)    # BOM beats `little_endian`
    (True, 4)
    >>> out[:4].hex()
    'efbbbf41'

    >>> convert_utf16_to_utf8(b'', bytearray())
    (True, 0)
    >>> convert_utf16_to_utf8(b'\x00\x00\x00', bytearray(10))   # odd length
    (False, 0)
    >>> convert_utf16_to_utf8(b'\x00\xd8', bytearray(10))       # lone high surrogate
    (False, 0)
    >>> convert_utf16_to_utf8(b'\x00\xdc\x00\xd8', bytearray(10))   # misordered pair
    (False, 0)
    >>> convert_utf16_to_utf8(b'A\x00B\x00', bytearray(5))      # output too small
    (False, 0)
    """
    in_view = octets_view(in_octets)
    out_view = octets_view(out_buffer, writable=True)
    in_length = len(in_view)

    # If the input is empty, so is the output
    if not in_length:
        return True, 0

    # UTF-16 data always consist of an even number of octets
    if in_length & 1:
        return False, 0

    if in_length > MAX_UTF16_STRING:
        return False, 0

    # Not enough space for the worst case?
    if len(out_view) < in_length + (in_length >> 1):
        return False, 0

    # A byte-order mark at the start overrides the given byte order
    if in_length >= 4:
        if in_view[:2] == UTF16_BE_BOM:
            little_endian = False
        elif in_view[:2] == UTF16_LE_BOM:
            little_endian = True

    if little_endian:
        low_index, high_index = 0, 1
    else:
        low_index, high_index = 1, 0

    def get_unit(position):
        return (in_view[position + high_index] << 8) | in_view[position + low_index]

    i = 0
    pos = 0
    while i < in_length:
        character = get_unit(i)
        i += 2

        if SURROGATE_HIGH_MIN <= character <= SURROGATE_LOW_MAX:
            # (a low surrogate is not allowed here)
            if character >= SURROGATE_LOW_MIN:
                return False, 0
            # (a low surrogate must follow)
            if i >= in_length:
                return False, 0
            low_surrogate = get_unit(i)
            i += 2
            if not SURROGATE_LOW_MIN <= low_surrogate <= SURROGATE_LOW_MAX:
                return False, 0
            # (see: https://www.unicode.org/faq/utf_bom.html#utf16-3;
            # this is equivalent to: `((character - 0xD800) << 10) +
            # (low_surrogate - 0xDC00) + 0x10000`)
            character = ((character << 10) + low_surrogate + SURROGATE_OFFSET) & UINT32_MASK

        # (see: https://www.rfc-editor.org/rfc/rfc3629#section-3)
        if character <= 0x7F:
            # 0xxxxxxx
            out_view[pos] = character
            pos += 1
        elif character <= 0x7FF:
            # 110xxxxx 10xxxxxx
            out_view[pos] = 0xC0 | (character >> 6)
            out_view[pos + 1] = 0x80 | (character & 0x3F)
            pos += 2
        elif character <= 0xFFFF:
            # 1110xxxx 10xxxxxx 10xxxxxx
            out_view[pos] = 0xE0 | (character >> 12)
            out_view[pos + 1] = 0x80 | ((character >> 6) & 0x3F)
            out_view[pos + 2] = 0x80 | (character & 0x3F)
            pos += 3
        elif character <= MAX_CHARACTER_VALUE:
            # 11110xxx 10xxxxxx 10xxxxxx 10xxxxxx
            out_view[pos] = 0xF0 | (character >> 18)
            out_view[pos + 1] = 0x80 | ((character >> 12) & 0x3F)
            out_view[pos + 2] = 0x80 | ((character >> 6) & 0x3F)
            out_view[pos + 3] = 0x80 | (character & 0x3F)
            pos += 4
        else:
            # (cannot happen for a correctly combined surrogate pair)
            return False, 0

    return True, pos
