# Copyright (c) 2024-2025 NASK. All rights reserved.

from n6charutil.unicode_constants import (
    classify_utf8_lead_octet,
    is_acceptable_scalar,
    is_utf8_continuation_octet,
    octets_view,
)


def is_utf8_valid(octets) -> bool:

    r"""
    Verify that the given sequence of octets is valid UTF-8 (as
    defined by RFC 3629).

    Args:
        `octets`:
            A bytes-like object (:class:`bytes`, :class:`bytearray`,
            :class:`memoryview`...).

    Returns:
        :obj:`True` if the octets form a valid UTF-8 sequence;
        :obj:`False` otherwise.

    Raises:
        :exc:`~exceptions.TypeError` if `octets` is a :class:`str` or
        any other object that does not support the buffer protocol.

    Only byte-level conformance is checked: the function makes no
    attempt to verify that the sequence of encoded characters makes
    sense (e.g., whether a Zero Width Joiner joins anything).

    >>> is_utf8_valid(b'')
    True
    >>> is_utf8_valid(b'Hello')
    True
    >>> is_utf8_valid('Zaż\xf3łć gęślą jaźń'.encode('utf-8'))
    True
    >>> is_utf8_valid(bytearray(b'\xf0\x9f\x9a\xb5'))
    True
    >>> is_utf8_valid(memoryview(b'\xef\xbb\xbfBOM'))
    True

    >>> is_utf8_valid(b'\xc0\x80')            # overlong lead octet
    False
    >>> is_utf8_valid(b'\xe0\x80\xaf')        # overlong 3-octet form
    False
    >>> is_utf8_valid(b'\xf0\x9f\x9a')        # truncated
    False
    >>> is_utf8_valid(b'\xf0\xdf\x9a\xa3')    # bad continuation octet
    False
    >>> is_utf8_valid(b'\xed\xa0\x80')        # surrogate
    False
    >>> is_utf8_valid(b'\xf4\x90\x80\x80')    # beyond U+10FFFF
    False
    >>> is_utf8_valid(b'\xf8\x9f\x9a\xa3')    # no such lead octet
    False
    """
    remaining = 0
    continuation_count = 0
    accumulator = 0
    for octet in octets_view(octets):
        if remaining:
            if not is_utf8_continuation_octet(octet):
                return False
            accumulator = (accumulator << 6) | (octet & 0x3F)
            remaining -= 1
            if not remaining and not is_acceptable_scalar(accumulator, continuation_count):
                return False
            continue
        lead_info = classify_utf8_lead_octet(octet)
        if lead_info is None:
            return False
        remaining, accumulator = lead_info
        continuation_count = remaining
    # (truncated sequence?)
    return remaining == 0
