# Copyright (c) 2024-2025 NASK. All rights reserved.

"""
Exceptions raised by the *allocating* conversion helpers provided by
:mod:`n6charutil.conversion_helpers`.

Note that the core functions (:func:`~n6charutil.convert_utf8_to_utf16`,
:func:`~n6charutil.convert_utf16_to_utf8` and
:func:`~n6charutil.is_utf8_valid`) never raise any of them: they just
report success or failure in their return values.
"""

from n6charutil.encoding_helpers import ascii_str


class CharConversionError(ValueError):

    r"""
    The base class of the conversion errors.

    Constructor args/kwargs:
        `input_length`:
            The length (in octets) of the input that could not be
            converted/validated.
        `little_endian` (default: :obj:`None`):
            The byte order of UTF-16 data that was either being produced
            or consumed (:obj:`None` if not applicable).
        `description` (default: :attr:`default_description`):
            A short human-readable description of the problem.

    The :class:`str` conversion always gives an ASCII-only message:

    >>> exc = CharConversionError(3, little_endian=False)
    >>> exc.input_length, exc.little_endian
    (3, False)
    >>> str(exc)
    'cannot convert the given data (input length: 3 octet(s); big-endian UTF-16)'
    >>> str(CharConversionError(0, description='Złe dane'))
    'Z\\u0142e dane (input length: 0 octet(s))'
    >>> isinstance(exc, ValueError)
    True
    """

    #: (overridable in subclasses)
    default_description = 'cannot convert the given data'

    def __init__(self, input_length, little_endian=None, description=None):
        self.input_length = input_length
        self.little_endian = little_endian
        self.description = (description if description is not None
                            else self.default_description)
        super(CharConversionError, self).__init__(input_length, little_endian, self.description)

    def __str__(self):
        details = ['input length: {} octet(s)'.format(self.input_length)]
        if self.little_endian is not None:
            details.append('{}-endian UTF-16'.format('little' if self.little_endian else 'big'))
        return '{} ({})'.format(ascii_str(self.description), '; '.join(details))


class UTF8DecodingError(CharConversionError):

    """
    Raised when the input is expected to be UTF-8 but it is not (or,
    at least, it is not conformant to RFC 3629).

    >>> str(UTF8DecodingError(2))
    'invalid UTF-8 data (input length: 2 octet(s))'
    """

    default_description = 'invalid UTF-8 data'


class UTF16DecodingError(CharConversionError):

    """
    Raised when the input is expected to be UTF-16 but it is not (e.g.,
    it is of an odd length or contains unpaired surrogates).

    >>> str(UTF16DecodingError(5, little_endian=True))
    'invalid UTF-16 data (input length: 5 octet(s); little-endian UTF-16)'
    """

    default_description = 'invalid UTF-16 data'
