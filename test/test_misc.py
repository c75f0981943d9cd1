# -*- coding: utf-8; -*-

import io

import tagpolice.notice
import tagpolice.reports.html
from tagpolice import html_report, text_report, validate
from tagpolice.notice import Kind, Severity


def test_notices_list():
    buf = io.BytesIO()
    tagpolice.reports.html.list_notices(buf)
    out = buf.getvalue()
    assert out.count(b'<h3>') == len(tagpolice.notice.all_notices)
    assert b'1101' in out
    assert b'Unknown language subtag ' in out
    assert b'<var>subtag</var>' in out


def test_notices_are_consistent():
    for id_, notice in tagpolice.notice.all_notices.items():
        assert notice.id == id_
        assert isinstance(notice.kind, Kind)
        assert notice.title
        if notice.kind.advisory:
            assert notice.severity is Severity.comment
        else:
            assert notice.severity is Severity.error
        # Syntax errors, then registry problems, then warnings.
        if notice.kind.syntax:
            assert 1000 <= id_ < 1100
        elif notice.kind.registry:
            assert 1100 <= id_ < 1200
        else:
            assert 1200 <= id_ < 1300


def test_every_kind_has_a_notice():
    kinds = set(notice.kind
                for notice in tagpolice.notice.all_notices.values())
    assert kinds == set(Kind)


def test_text_report():
    buf = io.BytesIO()
    text_report([validate('en-US'), validate('ch-DE'),
                 validate('en--US', remark='tags.txt:3')], buf)
    assert buf.getvalue() == (
        b'------------ tag: ch-DE\n'
        b'E 1101 Unknown language subtag ch (did you mean zh?)\n'
        b'------------ tag: en--US (tags.txt:3)\n'
        b'E 1002 Empty subtag at position 3\n'
    )


def test_text_report_silenced():
    v = validate('iw-Hebr')
    v.silence([1200, 1202])
    buf = io.BytesIO()
    text_report([v], buf)
    assert buf.getvalue() == b''


def test_text_report_non_ascii():
    buf = io.BytesIO()
    text_report([validate('fr-\N{LATIN SMALL LETTER C WITH CEDILLA}a')], buf)
    assert buf.getvalue().decode('utf-8') == (
        '------------ tag: fr-\N{LATIN SMALL LETTER C WITH CEDILLA}a\n'
        'E 1001 Non-ASCII character at position 3\n'
    )


def test_html_report():
    buf = io.BytesIO()
    html_report([validate('en-Latn-US'), validate('ch-DE'),
                 validate('en--US'), validate('i-klingon'),
                 validate('x-foo')], buf)
    out = buf.getvalue()
    assert b'<!DOCTYPE html>' in out
    assert b'TagPolice report' in out
    assert b'Canonical form' in out
    assert b'1202' in out
    assert b'1101' in out
    assert b'Not a well-formed tag' in out
    assert b'https://www.iana.org/assignments/language-subtag-registry' in out
    assert b'https://tools.ietf.org/html/rfc5646#section-2.1' in out
    assert b'title="Latin (IANA Language Subtag Registry)"' in out
