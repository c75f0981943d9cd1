# -*- coding: utf-8; -*-

import io

from tagpolice.inputs.common import InputError


def lines_input(paths):
    """Read tags from text files, one tag per line.

    Blank lines and lines starting with ``#`` are skipped.
    Files must be UTF-8, optionally with a BOM.
    """
    for path in paths:
        with io.open(path, 'rt', encoding='utf-8-sig') as f:
            try:
                lines = f.readlines()
            except UnicodeError as exc:
                raise InputError('%s: not a UTF-8 file: %s' %
                                 (path, exc)) from exc
        for lineno, line in enumerate(lines, 1):
            tag = line.strip()
            if not tag or tag.startswith('#'):
                continue
            yield (tag, '%s:%d' % (path, lineno))
