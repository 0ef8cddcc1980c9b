# Copyright (c) 2024-2025 NASK. All rights reserved.

import sys
import unittest

from unittest_expander import (
    expand,
    foreach,
    param,
)

from n6charutil.unicode_constants import (
    LEAD_OFFSET,
    MAX_BMP_VALUE,
    MAX_CHARACTER_VALUE,
    MAX_UTF16_STRING,
    SURROGATE_HIGH_MAX,
    SURROGATE_HIGH_MIN,
    SURROGATE_LOW_MAX,
    SURROGATE_LOW_MIN,
    SURROGATE_OFFSET,
    UINT32_MASK,
    UTF16_BE_BOM,
    UTF16_LE_BOM,
    UTF8_BOM,
    classify_utf8_lead_octet,
    is_acceptable_scalar,
    is_utf8_continuation_octet,
    octets_view,
)


class TestConstantValues(unittest.TestCase):

    def test_ranges(self):
        self.assertEqual(MAX_CHARACTER_VALUE, 0x10FFFF)
        self.assertEqual(MAX_BMP_VALUE, 0xFFFF)
        self.assertEqual((SURROGATE_HIGH_MIN, SURROGATE_HIGH_MAX), (0xD800, 0xDBFF))
        self.assertEqual((SURROGATE_LOW_MIN, SURROGATE_LOW_MAX), (0xDC00, 0xDFFF))

    def test_offsets(self):
        self.assertEqual(LEAD_OFFSET, 0xD7C0)
        self.assertEqual(SURROGATE_OFFSET, 0xFCA02400)

    def test_boms(self):
        self.assertEqual(UTF8_BOM, '\ufeff'.encode('utf-8'))
        self.assertEqual(UTF16_BE_BOM, '\ufeff'.encode('utf-16-be'))
        self.assertEqual(UTF16_LE_BOM, '\ufeff'.encode('utf-16-le'))

    def test_max_utf16_string(self):
        n = MAX_UTF16_STRING
        self.assertLessEqual(n + n // 2, sys.maxsize)
        self.assertGreater((n + 1) + (n + 1) // 2, sys.maxsize)


@expand
class TestSurrogateOffsetFolding(unittest.TestCase):

    @foreach(0x10000, 0x103FF, 0x1F600, 0x24B62, 0x10FC00, 0x10FFFF)
    def test_folded_formula_equals_three_step_formula(self, scalar):
        high = LEAD_OFFSET + (scalar >> 10)
        low = SURROGATE_LOW_MIN + (scalar & 0x3FF)
        three_step = ((high - 0xD800) << 10) + (low - 0xDC00) + 0x10000
        folded = ((high << 10) + low + SURROGATE_OFFSET) & UINT32_MASK
        self.assertEqual(three_step, scalar)
        self.assertEqual(folded, scalar)


@expand
class Test_classify_utf8_lead_octet(unittest.TestCase):

    @foreach(
        param(octet=0x00, expected=(0, 0x00)),
        param(octet=0x7F, expected=(0, 0x7F)),
        param(octet=0xC2, expected=(1, 0x02)),
        param(octet=0xDF, expected=(1, 0x1F)),
        param(octet=0xE0, expected=(2, 0x00)),
        param(octet=0xEF, expected=(2, 0x0F)),
        param(octet=0xF0, expected=(3, 0x00)),
        param(octet=0xF4, expected=(3, 0x04)),
    )
    def test_lead(self, octet, expected):
        self.assertEqual(classify_utf8_lead_octet(octet), expected)

    def test_never_a_lead(self):
        never = list(range(0x80, 0xC2)) + list(range(0xF5, 0x100))
        for octet in never:
            self.assertIsNone(classify_utf8_lead_octet(octet), hex(octet))

    def test_continuation(self):
        for octet in range(0x100):
            self.assertIs(is_utf8_continuation_octet(octet), 0x80 <= octet <= 0xBF, hex(octet))


@expand
class Test_is_acceptable_scalar(unittest.TestCase):

    @foreach(
        param(scalar=0x80, continuation_count=1, expected=True),
        param(scalar=0x7F, continuation_count=1, expected=False),
        param(scalar=0x800, continuation_count=2, expected=True),
        param(scalar=0x7FF, continuation_count=2, expected=False),
        param(scalar=0xD7FF, continuation_count=2, expected=True),
        param(scalar=0xD800, continuation_count=2, expected=False),
        param(scalar=0xDBFF, continuation_count=2, expected=False),
        param(scalar=0xDC00, continuation_count=2, expected=False),
        param(scalar=0xDFFF, continuation_count=2, expected=False),
        param(scalar=0xE000, continuation_count=2, expected=True),
        param(scalar=0xFFFF, continuation_count=3, expected=False),
        param(scalar=0x10000, continuation_count=3, expected=True),
        param(scalar=0x10FFFF, continuation_count=3, expected=True),
        param(scalar=0x110000, continuation_count=3, expected=False),
        param(scalar=0x1FFFFF, continuation_count=3, expected=False),
    )
    def test(self, scalar, continuation_count, expected):
        self.assertIs(is_acceptable_scalar(scalar, continuation_count), expected)


class Test_octets_view(unittest.TestCase):

    def test_bytes_like_objects(self):
        for obj in (b'ab', bytearray(b'ab'), memoryview(b'ab')):
            view = octets_view(obj)
            self.assertIsInstance(view, memoryview)
            self.assertEqual(view.format, 'B')
            self.assertEqual(view.tolist(), [0x61, 0x62])

    def test_multi_byte_format_is_cast_to_octets(self):
        view = octets_view(memoryview(bytearray(4)).cast('H'))
        self.assertEqual(view.format, 'B')
        self.assertEqual(len(view), 4)

    def test_writable(self):
        buf = bytearray(2)
        view = octets_view(buf, writable=True)
        view[1] = 0xFF
        self.assertEqual(buf, b'\x00\xff')

    def test_errors(self):
        with self.assertRaises(TypeError):
            octets_view('ab')
        with self.assertRaises(TypeError):
            octets_view(12)
        with self.assertRaises(TypeError):
            octets_view(b'ab', writable=True)
        with self.assertRaises(TypeError):
            octets_view(memoryview(bytearray(2)).toreadonly(), writable=True)
