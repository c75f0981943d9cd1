# -*- coding: utf-8; -*-

import pytest

from tagpolice.notice import Kind
from tagpolice.parse import ParseError, Phase, can_enter, parse
from tagpolice.structure import LanguageTag, Role


def parsed(text):
    result = parse(text)
    assert isinstance(result, LanguageTag)
    return result

def not_parsed(text):
    result = parse(text)
    assert isinstance(result, list)
    [complaint] = result
    return complaint


def test_simple():
    tag = parsed('en-US')
    assert tag.language == 'en'
    assert tag.region == 'us'
    assert tag.extlang == []
    assert tag.script is None
    assert tag.variants == []
    assert not tag.extensions
    assert tag.privateuse == []
    assert not tag.grandfathered
    assert not tag.privateuse_only
    assert str(tag) == 'en-us'


def test_all_parts():
    tag = parsed('zh-cmn-Hant-TW-1901-rozaj-u-co-pinyin-a-bbb-x-private')
    assert tag.language == 'zh'
    assert tag.extlang == ['cmn']
    assert tag.script == 'hant'
    assert tag.region == 'tw'
    assert tag.variants == ['1901', 'rozaj']
    assert list(tag.extensions.items()) == [('u', ['co', 'pinyin']),
                                            ('a', ['bbb'])]
    assert tag.privateuse == ['private']
    assert str(tag) == \
        'zh-cmn-hant-tw-1901-rozaj-u-co-pinyin-a-bbb-x-private'


def test_values_are_lowercase():
    tag = parsed('SR-LATN-RS-X-FOO')
    assert [value for (_, value) in tag.subtags()] == \
        ['sr', 'latn', 'rs', 'x', 'foo']
    assert all(value.islower() for (_, value) in tag.subtags())


def test_roles():
    tag = parsed('zh-yue-Hant-419-fonipa-t-ab-x-cd')
    assert tag.subtags() == [
        (Role.language, 'zh'),
        (Role.extlang, 'yue'),
        (Role.script, 'hant'),
        (Role.region, '419'),
        (Role.variant, 'fonipa'),
        (Role.singleton, 't'),
        (Role.extension, 'ab'),
        (Role.singleton, 'x'),
        (Role.privateuse, 'cd'),
    ]


def test_extlang():
    assert parsed('zh-cmn-yue').extlang == ['cmn', 'yue']
    assert parsed('zh-gan-cmn-yue').extlang == ['gan', 'cmn', 'yue']
    # A three-letter subtag is an extlang only if it is registered as one.
    assert not_parsed('en-abc').id == 1013
    # No more than three of them.
    assert not_parsed('zh-gan-cmn-yue-wuu').subtag == 'wuu'
    # Not after a script.
    assert not_parsed('zh-Hant-yue').id == 1013


def test_language_shapes():
    assert parsed('ast').language == 'ast'
    assert parsed('abcd').language == 'abcd'
    assert parsed('abcdefgh').language == 'abcdefgh'
    for text in ['e', 'abcdefghi', 'e2', '123', 'en_US']:
        complaint = not_parsed(text)
        assert complaint.id == 1010
        assert complaint.kind is Kind.invalid_syntax
        assert complaint.role is Role.language


def test_variants():
    assert parsed('de-CH-1901').variants == ['1901']
    assert parsed('sl-rozaj-biske-1994').variants == ['rozaj', 'biske',
                                                      '1994']
    assert parsed('en-12ab').variants == ['12ab']
    complaint = not_parsed('de-1901-1901')
    assert complaint.id == 1030
    assert complaint.kind is Kind.duplicate_variant
    assert complaint.subtag == '1901'
    assert complaint.position == 8
    assert not_parsed('sl-rozaj-ROZAJ').kind is Kind.duplicate_variant


def test_private_use_only():
    tag = parsed('x-whatever')
    assert tag.privateuse_only
    assert tag.language is None
    assert tag.privateuse == ['whatever']
    assert str(tag) == 'x-whatever'
    assert parsed('X-A-1-bcdefgh').privateuse == ['a', '1', 'bcdefgh']


def test_grandfathered():
    for text in ['i-klingon', 'I-KLINGON', 'en-GB-oed', 'zh-min-nan',
                 'art-lojban', 'sgn-BE-FR']:
        tag = parsed(text)
        assert tag.grandfathered
        assert tag.grandfathered_tag == text
        assert tag.language is None
        assert tag.subtags() == [(Role.grandfathered, text.lower())]
    # But only as a whole.
    assert not_parsed('zh-min-nan-TW').id == 1013
    assert not_parsed('i-klingon-x-foo').id == 1010


def test_surrounding_whitespace():
    assert str(parsed('  en-US \n')) == 'en-us'
    complaint = not_parsed('  en--US')
    assert complaint.id == 1002
    assert complaint.position == 5


@pytest.mark.parametrize('text,notice_id,kind', [
    ('', 1000, Kind.malformed),
    ('   ', 1000, Kind.malformed),
    ('fr-\N{LATIN SMALL LETTER C WITH CEDILLA}a', 1001, Kind.malformed),
    ('en--US', 1002, Kind.malformed),
    ('-en', 1002, Kind.malformed),
    ('en-', 1002, Kind.malformed),
    ('en-Latn-Cyrl', 1011, Kind.invalid_syntax),
    ('en-US-GB', 1012, Kind.invalid_syntax),
    ('en-toolongvariant', 1013, Kind.invalid_syntax),
    ('en-US-abc', 1013, Kind.invalid_syntax),
    ('en-US-Latn', 1020, Kind.invalid_order),
    ('en-rozaj-Latn', 1020, Kind.invalid_order),
    ('en-rozaj-US', 1021, Kind.invalid_order),
    ('de-1901-1901', 1030, Kind.duplicate_variant),
    ('en-a-abc-a-def', 1040, Kind.duplicate_singleton),
    ('en-a', 1050, Kind.invalid_extension),
    ('en-a-x-foo', 1050, Kind.invalid_extension),
    ('en-a-b-cc', 1050, Kind.invalid_extension),
    ('en-a-toolongvalue', 1051, Kind.invalid_extension),
    ('x-toolongvalue', 1060, Kind.invalid_private_use),
    ('en-x-a-b-c!', 1060, Kind.invalid_private_use),
    ('x', 1061, Kind.invalid_private_use),
    ('en-US-x', 1061, Kind.invalid_private_use),
])
def test_syntax_errors(text, notice_id, kind):
    complaint = not_parsed(text)
    assert complaint.id == notice_id
    assert complaint.kind is kind
    assert complaint.kind.syntax


def test_positions():
    assert not_parsed('en--US').position == 2 + 1
    assert not_parsed('-en').position == 0
    assert not_parsed('en-').position == 3
    complaint = not_parsed('de-\N{LATIN SMALL LETTER U WITH DIAERESIS}ber')
    assert complaint.position == 3
    complaint = not_parsed('en-US-Latn')
    assert complaint.subtag == 'Latn'
    assert complaint.position == 6
    assert complaint.role is Role.script


def test_first_violation_wins():
    # Both a repeated singleton and a duplicate variant... but the variant
    # comes first.
    assert not_parsed('de-1901-1901-a-bb-a-cc').id == 1030


def test_extension_details():
    complaint = not_parsed('en-a-toolongvalue')
    assert complaint.context['singleton'] == 'a'
    assert complaint.role is Role.extension
    complaint = not_parsed('en-a-b-cc')
    assert complaint.subtag == 'a'
    assert complaint.position == 3


def test_messages():
    assert not_parsed('en--US').message == 'Empty subtag at position 3'
    assert not_parsed('en-US-Latn').message == \
        'Script subtag Latn is out of order'
    assert not_parsed('').message == 'Empty language tag'


def test_phases():
    assert can_enter(Phase.language, Phase.extlang)
    assert can_enter(Phase.extlang, Phase.extlang)
    assert can_enter(Phase.extension, Phase.privateuse)
    assert not can_enter(Phase.script, Phase.extlang)
    assert not can_enter(Phase.variant, Phase.region)
    assert not can_enter(Phase.privateuse, Phase.extension)
    for phase in Phase:
        # Never backwards.
        assert all(target >= phase for target in
                   [t for t in Phase if can_enter(phase, t)])


def test_parse_error_is_internal():
    err = ParseError(1013, subtag='abc', position=3)
    assert err.subtag == 'abc'
    assert err.position == 3
    complaint = err.as_complaint()
    assert complaint.id == 1013
    assert complaint.message == 'Unrecognized subtag abc at position 3'
