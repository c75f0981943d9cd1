# -*- coding: utf-8; -*-

from tagpolice import (Kind, LanguageTag, Severity, is_valid, is_well_formed,
                       validate)
from tagpolice.structure import Role


def ids(complaints):
    return [complaint.id for complaint in complaints]


def test_valid():
    v = validate('en-US')
    assert v.well_formed
    assert v.valid
    assert isinstance(v.tag, LanguageTag)
    assert v.tag.language == 'en'
    assert v.problems == []
    assert v.warnings == []
    assert v.notices == []
    assert v.canonical == 'en-US'
    assert repr(v) == "<Validation 'en-US'>"


def test_malformed():
    v = validate('en--US')
    assert not v.well_formed
    assert not v.valid
    assert v.tag is None
    assert v.canonical is None
    assert ids(v.problems) == [1002]
    assert v.problems[0].kind is Kind.malformed
    assert v.problems[0].position == 3
    assert v.warnings == []


def test_duplicate_singleton():
    v = validate('en-a-abc-a-def')
    assert not v.well_formed
    [problem] = v.problems
    assert problem.kind is Kind.duplicate_singleton
    assert problem.subtag == 'a'


def test_invalid():
    v = validate('ch-DE')
    assert v.well_formed
    assert not v.valid
    assert ids(v.problems) == [1101]
    assert v.problems[0].suggested_replacement == 'zh'
    assert v.canonical == 'ch-DE'


def test_without_registry():
    v = validate('ch-DE', check_registry=False)
    assert v.well_formed
    assert v.valid
    assert v.problems == []


def test_redundant_script():
    v = validate('en-Latn-US')
    assert v.valid
    assert v.problems == []
    [warning] = v.warnings
    assert warning.id == 1202
    assert warning.kind is Kind.redundant_script
    assert warning.kind.advisory
    assert warning.severity is Severity.comment
    assert warning.subtag == 'Latn'
    assert warning.role is Role.script
    assert warning.message == 'Script Latn is redundant with language en'
    assert v.canonical == 'en-US'

    assert validate('en-Latn-US', warn_on_redundant_script=False).warnings \
        == []
    assert validate('ja-Latn').warnings == []
    assert validate('sr-Latn').warnings == []


def test_deprecated_subtags():
    v = validate('iw')
    assert v.valid
    [warning] = v.warnings
    assert warning.id == 1200
    assert warning.kind is Kind.deprecated_subtag
    assert warning.subtag == 'iw'
    assert warning.suggested_replacement == 'he'
    assert warning.message == 'Deprecated subtag iw, replaced by he'

    v = validate('iw-Hebr')
    assert v.valid
    assert ids(v.warnings) == [1200, 1202]

    v = validate('de-dd')
    [warning] = v.warnings
    assert warning.role is Role.region
    assert warning.subtag == 'DD'
    assert warning.suggested_replacement == 'DE'

    assert validate('iw', warn_on_deprecated=False).warnings == []


def test_deprecated_grandfathered():
    v = validate('I-Klingon')
    assert v.well_formed
    assert v.valid
    assert v.tag.grandfathered
    [warning] = v.warnings
    assert warning.id == 1201
    assert warning.kind is Kind.deprecated_tag
    assert warning.subtag == 'i-klingon'
    assert warning.suggested_replacement == 'tlh'
    assert warning.message == \
        'Grandfathered tag i-klingon is deprecated, use tlh'
    assert v.canonical == 'tlh'

    assert validate('en-gb-oed').warnings[0].subtag == 'en-GB-oed'
    assert validate('i-default').warnings == []


def test_warnings_without_registry():
    assert ids(validate('iw-Hebr', check_registry=False).warnings) == \
        [1200, 1202]


def test_warnings_do_not_invalidate():
    for text in ['iw', 'en-Latn', 'zh-guoyu', 'de-DD']:
        v = validate(text)
        assert v.warnings
        assert v.valid


def test_private_use():
    v = validate('x-foo')
    assert v.well_formed
    assert v.valid
    assert v.tag.privateuse_only
    assert v.canonical == 'x-foo'
    assert v.problems == v.warnings == []


def test_silence():
    v = validate('ch-DE')
    v.silence([1101])
    assert v.notices == []
    assert ids(v.problems) == [1101]
    assert not v.valid

    v = validate('iw-Hebr')
    v.silence([1202])
    assert ids(v.notices) == [1200]
    assert ids(v.warnings) == [1200, 1202]


def test_remark():
    v = validate('en', remark='index.html: <html lang>')
    assert v.remark == 'index.html: <html lang>'
    assert v.text == 'en'


def test_shortcuts():
    assert is_well_formed('en-US')
    assert is_well_formed('ch-DE')
    assert not is_well_formed('en--US')
    assert not is_well_formed('')
    assert is_valid('en-US')
    assert is_valid('iw')
    assert is_valid('i-klingon')
    assert not is_valid('ch-DE')
    assert not is_valid('en--US')


def test_exclusivity():
    for text in ['en-US', 'en--US', 'ch-DE', 'en-Latn-US', 'x-foo', '',
                 'i-klingon', 'en-a-abc-a-def']:
        v = validate(text)
        if v.well_formed:
            assert v.tag is not None
            assert all(not c.kind.syntax for c in v.problems)
        else:
            assert v.tag is None
            assert len(v.problems) == 1
            assert v.problems[0].kind.syntax
