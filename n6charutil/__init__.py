# Copyright (c) 2024-2025 NASK. All rights reserved.

"""
*n6charutil* -- conversions between UTF-8 and UTF-16 (little- or
big-endian), and UTF-8 validation.
"""

from n6charutil.utf8_validation import is_utf8_valid
from n6charutil.utf8_to_utf16 import convert_utf8_to_utf16
from n6charutil.utf16_to_utf8 import convert_utf16_to_utf8


__all__ = (
    'convert_utf16_to_utf8',
    'convert_utf8_to_utf16',
    'is_utf8_valid',
)
