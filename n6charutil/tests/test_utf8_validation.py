# Copyright (c) 2024-2025 NASK. All rights reserved.

import unittest

from unittest_expander import (
    expand,
    foreach,
    param,
)

from n6charutil import is_utf8_valid
from n6charutil.tests._generic_helpers import SAMPLE_TEXTS


@expand
class Test_is_utf8_valid(unittest.TestCase):

    @foreach(
        param(octets=b'').label('empty'),
        param(octets=b'\xf0\x9f\x9a\xb5').label('single emoji'),
        param(octets=(b'\xf0\x9f\x9a\xa3'
                      b'\xe2\x80\x8d'
                      b'\xe2\x99\x80'
                      b'\xef\xb8\x8f')).label('emoji ZWJ sequence'),
        param(octets=b'\xef\xbb\xbfHello').label('utf-8 bom'),
        param(octets=b'\xc2\x80').label('smallest 2-octet'),
        param(octets=b'\xdf\xbf').label('largest 2-octet'),
        param(octets=b'\xe0\xa0\x80').label('smallest 3-octet'),
        param(octets=b'\xed\x9f\xbf').label('just below surrogates'),
        param(octets=b'\xee\x80\x80').label('just above surrogates'),
        param(octets=b'\xef\xbf\xbf').label('largest 3-octet'),
        param(octets=b'\xf0\x90\x80\x80').label('smallest 4-octet'),
        param(octets=b'\xf4\x8f\xbf\xbf').label('largest 4-octet'),
        param(octets=bytes(range(0x80))).label('all ascii'),
    )
    def test_valid(self, octets):
        self.assertIs(is_utf8_valid(octets), True)

    @foreach(
        param(octets=b'\xf0\xdf\x9a\xa3').label('bad continuation octet'),
        param(octets=b'\xf0\x9f\x9a').label('truncated 4-octet'),
        param(octets=b'abc\xe2\x82').label('truncated 3-octet at end'),
        param(octets=b'\xc3').label('lone lead octet'),
        param(octets=b'\xf8\x9f\x9a\xa3').label('5-octet lead'),
        param(octets=b'\xfc\x80\x80\x80\x80\x80').label('6-octet lead'),
        param(octets=b'\xfe').label('0xFE'),
        param(octets=b'\xff').label('0xFF'),
        param(octets=b'\x80').label('lone continuation octet'),
        param(octets=b'a\xbfb').label('stray continuation octet'),
        param(octets=b'\xc0\x80').label('0xC0 lead (overlong NUL)'),
        param(octets=b'\xc1\xbf').label('0xC1 lead'),
        param(octets=b'\xe0\x80\xaf').label('overlong 3-octet'),
        param(octets=b'\xe0\x9f\xbf').label('largest overlong 3-octet'),
        param(octets=b'\xf0\x80\x80\xaf').label('overlong 4-octet'),
        param(octets=b'\xf0\x8f\xbf\xbf').label('largest overlong 4-octet'),
        param(octets=b'\xed\xa0\x80').label('high surrogate'),
        param(octets=b'\xed\xbf\xbf').label('low surrogate'),
        param(octets=b'\xed\xa0\xbd\xed\xb8\x80').label('cesu-8 surrogate pair'),
        param(octets=b'\xf4\x90\x80\x80').label('beyond U+10FFFF'),
        param(octets=b'\xf5\x80\x80\x80').label('0xF5 lead'),
        param(octets=b'\xc3a').label('ascii instead of continuation'),
        param(octets=b'\xe2\xc3\xa9').label('lead instead of continuation'),
    )
    def test_not_valid(self, octets):
        self.assertIs(is_utf8_valid(octets), False)

    @foreach([
        param(text=text).label(label)
        for label, text in SAMPLE_TEXTS
    ])
    def test_encoded_sample_texts_are_valid(self, text):
        octets = text.encode('utf-8')
        self.assertIs(is_utf8_valid(octets), True)
        self.assertIs(is_utf8_valid(bytearray(octets)), True)
        self.assertIs(is_utf8_valid(memoryview(octets)), True)

    @foreach(
        param(octets=b'Hello'),
        param(octets=b'\xc0\x80'),
        param(octets=b'\xf0\x9f\x9a'),
    )
    def test_is_deterministic_and_leaves_input_intact(self, octets):
        buf = bytearray(octets)
        results = {is_utf8_valid(buf) for _ in range(3)}
        self.assertEqual(len(results), 1)
        self.assertEqual(buf, octets)

    @foreach(0x00, 0x41, 0x7f, 0x80, 0xbf, 0xc0, 0xc1, 0xc2, 0xf4, 0xf5, 0xff)
    def test_single_octet_agrees_with_python_codec(self, octet):
        octets = bytes([octet])
        self.assertIs(is_utf8_valid(octets), self._python_says_valid(octets))

    def test_two_octet_sequences_agree_with_python_codec(self):
        for first in range(0xC0, 0x100):
            for second in (0x00, 0x7F, 0x80, 0xBF, 0xC0, 0xFF):
                octets = bytes([first, second])
                self.assertIs(is_utf8_valid(octets), self._python_says_valid(octets),
                              octets)

    def test_three_octet_sequences_agree_with_python_codec(self):
        for first in range(0xE0, 0xF0):
            for second in range(0x80, 0xC0, 0x0F):
                octets = bytes([first, second, 0x80])
                self.assertIs(is_utf8_valid(octets), self._python_says_valid(octets),
                              octets)

    def test_str_is_rejected(self):
        with self.assertRaises(TypeError):
            is_utf8_valid('Hello')

    def test_non_buffer_is_rejected(self):
        with self.assertRaises(TypeError):
            is_utf8_valid([0x48, 0x69])

    @staticmethod
    def _python_says_valid(octets):
        try:
            octets.decode('utf-8', 'strict')
        except UnicodeDecodeError:
            return False
        return True
