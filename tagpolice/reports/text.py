# -*- coding: utf-8; -*-

import codecs
from functools import singledispatch

from tagpolice import notice
from tagpolice.reports.common import expand_piece, resolve_reference
from tagpolice.util.text import (detypographize, ellipsize, printable,
                                 write_if_any)


def text_report(validations, buf):
    """Generate a plain-text report with check results.

    :param validations:
        An iterable of :class:`~tagpolice.Validation` objects,
        as returned by :func:`~tagpolice.validate`.

    :param buf:
        The file (or file-like object) to which the report will be written.
        It must be opened in binary mode (not text).

    """
    f1 = codecs.getwriter('utf-8')(buf)
    for validation in validations:
        with write_if_any(_validation_marker(validation), f1) as f2:
            for complaint in validation.notices:
                _write_complaint_line(complaint, f2)


def _validation_marker(validation):
    marker = '------------ tag: %s' % printable(validation.text)
    if validation.remark:
        marker += ' (%s)' % printable(validation.remark)
    # The number 79 fits the default ``cmd.exe`` size in Windows.
    return ellipsize(marker, 79) + '\n'


def complaint_title(complaint):
    """Render the complaint's notice title as one line of plain text."""
    return detypographize(
        _piece_to_text(complaint.notice.title, complaint.context).strip())


def _write_complaint_line(complaint, f):
    f.write('%s %d %s\n' % (complaint.notice.severity_short,
                            complaint.notice.id, complaint_title(complaint)))


@singledispatch
def _piece_to_text(piece, ctx):
    return _piece_to_text(expand_piece(piece), ctx)

@_piece_to_text.register(str)
def _text_to_text(text, _):
    return printable(text)

@_piece_to_text.register(list)
def _list_to_text(xs, ctx):
    return ''.join(_piece_to_text(x, ctx) for x in xs)

@_piece_to_text.register(notice.Var)
def _var_to_text(var, ctx):
    target = resolve_reference(ctx, var.reference)
    return _piece_to_text(target, ctx)
