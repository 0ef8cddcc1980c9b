# Copyright (c) 2013-2025 NASK. All rights reserved.

from typing import Optional

from n6charutil.unicode_constants import (
    MAX_UTF16_STRING,
    UTF16_BE_BOM,
    UTF16_LE_BOM,
    UTF8_TO_UTF16_EXPANSION,
    octets_view,
)


def ascii_str(obj):

    r"""
    Safely convert the given object to an ASCII-only :class:`str`.

    This function does its best to obtain a string representation
    (possibly :class:`str`-like or :class:`bytes`-like converted to str,
    though :func:`repr` can also be used as the last-resort fallback)
    and then escaping any non-ASCII characters -- *not raising* any
    encoding/decoding exceptions.

    The result is an ASCII :class:`str`, with non-ASCII characters escaped
    using Python literal notation (``\x...``, ``\u...``, ``\U...``).

    >>> ascii_str('')
    ''
    >>> ascii_str(b'')
    ''
    >>> ascii_str('Ala ma kota\nA kot?\n2=2 ')   # pure ASCII str => unchanged
    'Ala ma kota\nA kot?\n2=2 '
    >>> ascii_str(b'Ala ma kota\nA kot?\n2=2 ')
    'Ala ma kota\nA kot?\n2=2 '

    >>> ascii_str('Ech, ale błąd!')       # non-pure-ASCII-str => escaped
    'Ech, ale b\\u0142\\u0105d!'
    >>> ascii_str(b'Ech, ale b\xc5\x82\xc4\x85d!')   # UTF-8 bytes => decoded + escaped
    'Ech, ale b\\u0142\\u0105d!'
    >>> ascii_str(b'\xee\xdd \tja\xc5\xba\xc5\x84')   # non-UTF-8 bytes => escaped as such
    '\\xee\\xdd \tja\\u017a\\u0144'
    >>> ascii_str(memoryview(b'\xf0\x9f\x98\x80'))
    '\\U0001f600'

    >>> ascii_str(ValueError('Ech, ale błąd!'))
    'Ech, ale b\\u0142\\u0105d!'
    >>> ascii_str(42)
    '42'

    >>> class Nasty(object):
    ...     def __str__(self): raise UnicodeError
    ...     def __repr__(self): return u'quite nasŧy \udcaa'
    ...
    >>> ascii_str(Nasty())
    'quite nas\\u0167y \\udcaa'
    """
    if isinstance(obj, str):
        s = obj
    else:
        if isinstance(obj, memoryview):
            obj = bytes(obj)
        if isinstance(obj, (bytes, bytearray)):
            s = obj.decode('utf-8', 'backslashreplace')
        else:
            try:
                s = str(obj)
            except ValueError:
                s = repr(obj)
    return s.encode('ascii', 'backslashreplace').decode('ascii')


def utf8_to_utf16_required_size(in_length: int) -> int:
    """
    Get the output buffer size required by
    :func:`~n6charutil.convert_utf8_to_utf16` for an input of
    `in_length` octets.

    >>> utf8_to_utf16_required_size(0)
    0
    >>> utf8_to_utf16_required_size(5)
    10
    >>> utf8_to_utf16_required_size(-1)      # doctest: +IGNORE_EXCEPTION_DETAIL
    Traceback (most recent call last):
      ...
    ValueError: ...
    """
    _verify_length(in_length)
    return in_length * UTF8_TO_UTF16_EXPANSION


def utf16_to_utf8_required_size(in_length: int) -> int:
    """
    Get the output buffer size required by
    :func:`~n6charutil.convert_utf16_to_utf8` for an input of
    `in_length` octets.

    >>> utf16_to_utf8_required_size(0)
    0
    >>> utf16_to_utf8_required_size(10)
    15
    >>> utf16_to_utf8_required_size(3)
    4
    >>> utf16_to_utf8_required_size(MAX_UTF16_STRING + 1)      # doctest: +IGNORE_EXCEPTION_DETAIL
    Traceback (most recent call last):
      ...
    ValueError: ...
    """
    _verify_length(in_length)
    if in_length > MAX_UTF16_STRING:
        raise ValueError(
            'UTF-16 input length {} exceeds the maximum '
            'supported ({})'.format(in_length, MAX_UTF16_STRING))
    return in_length + (in_length >> 1)


def _verify_length(in_length):
    if not isinstance(in_length, int) or isinstance(in_length, bool):
        raise TypeError('{!a} is not an int'.format(in_length))
    if in_length < 0:
        raise ValueError('{!a} is not a valid length'.format(in_length))


def detect_utf16_bom(data) -> Optional[bool]:

    r"""
    Inspect the first two octets of the given UTF-16 data.

    Returns:
        :obj:`True` if they form the little-endian byte-order mark
        (`FF FE`); :obj:`False` if they form the big-endian one
        (`FE FF`); :obj:`None` otherwise.

    Note that :func:`~n6charutil.convert_utf16_to_utf8` honors a
    byte-order mark only if the input is at least 4 octets long; this
    function, on the other hand, just looks at the mark.

    >>> detect_utf16_bom(b'\xff\xfeA\x00')
    True
    >>> detect_utf16_bom(b'\xfe\xff\x00A')
    False
    >>> detect_utf16_bom(b'\xfe\xff')
    False
    >>> detect_utf16_bom(b'A\x00') is None
    True
    >>> detect_utf16_bom(b'\xff') is None
    True
    """
    head = octets_view(data)[:2]
    if head == UTF16_LE_BOM:
        return True
    if head == UTF16_BE_BOM:
        return False
    return None
