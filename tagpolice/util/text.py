# -*- coding: utf-8; -*-

import io
import re


def first_non_ascii(s):
    """
    >>> first_non_ascii('de-\N{LATIN SMALL LETTER U WITH DIAERESIS}ber')
    3
    >>> first_non_ascii('de') is None
    True
    """
    for i, c in enumerate(s):
        if ord(c) > 0x7F:
            return i
    return None


def split_with_offsets(s, separator='-', start=0):
    """Split `s`, pairing every piece with its offset in `s` (plus `start`).

    >>> split_with_offsets('en--us', start=2)
    [('en', 2), ('', 5), ('us', 6)]
    """
    r = []
    offset = start
    for piece in s.split(separator):
        r.append((piece, offset))
        offset += len(piece) + len(separator)
    return r


def stdio_as_bytes(f):
    return f.buffer if hasattr(f, 'buffer') else f


class WriteIfAny(io.StringIO):

    """
    >>> import sys
    >>> with write_if_any('foo\\n', sys.stdout) as buf:
    ...     pass
    ...
    >>> with write_if_any('foo\\n', sys.stdout) as buf:
    ...     n = buf.write('bar\\n')
    ...
    foo
    bar
    """

    def __init__(self, beginning, parent_file):
        super(WriteIfAny, self).__init__()
        self.beginning = beginning
        self.parent_file = parent_file

    def __enter__(self):
        return self

    def __exit__(self, exc_type, _1, _2):
        if exc_type is None:
            value = self.getvalue()
            if value:
                self.parent_file.write(self.beginning + value)
        return False


write_if_any = WriteIfAny


def ellipsize(s, max_length=60):
    """
    >>> print(ellipsize('lorem ipsum dolor sit amet', 40))
    lorem ipsum dolor sit amet
    >>> print(ellipsize('lorem ipsum dolor sit amet', 20))
    lorem ipsum dolor...
    """
    if len(s) > max_length:
        ellipsis = '...'
        return s[:(max_length - len(ellipsis))] + ellipsis
    else:
        return s


def detypographize(s):
    """
    >>> print(detypographize('\N{LEFT DOUBLE QUOTATION MARK}Foo'
    ...                      '\N{RIGHT DOUBLE QUOTATION MARK}: A'
    ...                      '\N{EN DASH}Z'))
    "Foo": A-Z
    """
    return (s.
            replace('\N{LEFT DOUBLE QUOTATION MARK}', '"').
            replace('\N{RIGHT DOUBLE QUOTATION MARK}', '"').
            replace('\N{LEFT SINGLE QUOTATION MARK}', "'").
            replace('\N{RIGHT SINGLE QUOTATION MARK}', "'").
            replace('\N{EM DASH}', '--').
            replace('\N{EN DASH}', '-').
            replace('\N{NO-BREAK SPACE}', ' '))


def printable(s):
    # Based on `XML 1.0 section 2.2 <https://www.w3.org/TR/xml/#charsets>`_,
    # with the addition of U+0085.
    return re.sub(
        pattern=('[\u0000-\u0008\u000B\u000C\u000E-\u001F'
                 '\u007F-\u009F\uD800-\uDFFF\uFDD0-\uFDEF\uFFFE\uFFFF]'),
        repl='\N{REPLACEMENT CHARACTER}',
        string=s
    )


class MockStdio(object):

    """Suitable as a mock stdout/stderr for tests."""

    def __init__(self):
        self.buffer = io.BytesIO()

    def write(self, s):
        self.buffer.write(s.encode('utf-8'))
