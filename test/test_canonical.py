# -*- coding: utf-8; -*-

import pytest

from tagpolice.canonical import canonical_form, canonicalize
from tagpolice.parse import parse


@pytest.mark.parametrize('text,expected', [
    # Case.
    ('en-us', 'en-US'),
    ('EN-US', 'en-US'),
    ('zh-hant-tw', 'zh-Hant-TW'),
    ('SR-LATN-RS', 'sr-Latn-RS'),
    ('es-419', 'es-419'),
    ('DE-ch-1996', 'de-CH-1996'),

    # Redundant scripts.
    ('en-Latn-US', 'en-US'),
    ('EN-LATN-US', 'en-US'),
    ('zh-Hans-CN', 'zh-CN'),
    ('sr-Cyrl', 'sr'),
    ('ja-Latn', 'ja-Latn'),
    ('az-Latn', 'az-Latn'),

    # Deprecated subtags.
    ('iw', 'he'),
    ('iw-Hebr-IL', 'he-IL'),
    ('in-ID', 'id-ID'),
    ('mo-Latn-MD', 'ro-MD'),
    ('de-DD', 'de-DE'),
    ('my-BU', 'my-MM'),
    ('en-Qaai', 'en-Zinh'),

    # Extended language subtags.
    ('zh-cmn', 'cmn'),
    ('zh-yue-HK', 'yue-HK'),
    ('zh-cmn-Hans-CN', 'cmn-Hans-CN'),
    ('ar-arb', 'arb'),
    ('sgn-ase-US', 'ase-US'),
    ('zh-cmn-yue', 'cmn-yue'),
    ('en-cmn', 'en-cmn'),

    # Variants and extensions are sorted, values are not.
    ('sl-rozaj-biske', 'sl-biske-rozaj'),
    ('sl-biske-rozaj', 'sl-biske-rozaj'),
    ('en-b-ccc-a-bbb', 'en-a-bbb-b-ccc'),
    ('en-a-zzz-yyy', 'en-a-zzz-yyy'),
    ('en-U-CO-PHONEBK', 'en-u-co-phonebk'),

    # Private use.
    ('x-Foo-BAR', 'x-foo-bar'),
    ('en-x-Foo', 'en-x-foo'),
    ('en-b-ccc-a-bbb-x-z-y', 'en-a-bbb-b-ccc-x-z-y'),

    # Grandfathered tags.
    ('i-klingon', 'tlh'),
    ('I-KLINGON', 'tlh'),
    ('zh-guoyu', 'cmn'),
    ('zh-min-nan', 'nan'),
    ('art-lojban', 'jbo'),
    ('no-bok', 'nb'),
    ('sgn-be-fr', 'sfb'),
    ('en-gb-oed', 'en-GB-oxendict'),
    ('i-default', 'i-default'),
    ('ZH-MIN', 'zh-min'),
    ('CEL-GAULISH', 'cel-gaulish'),
])
def test_canonicalize(text, expected):
    assert canonicalize(text) == expected
    assert canonicalize(expected) == expected


@pytest.mark.parametrize('text', ['', 'en--US', 'en-a-abc-a-def', 'x',
                                  'en-US-Latn', 'de-1901-1901'])
def test_malformed(text):
    assert canonicalize(text) is None


def test_parsed_tag():
    tag = parse('EN-latn-us')
    assert canonicalize(tag) == 'en-US'


def test_parsed_tag_is_not_modified():
    tag = parse('zh-cmn-Hans-CN-x-FOO')
    before = tag.copy()
    canonical = canonical_form(tag)
    assert tag == before
    assert canonical is not tag
    assert str(canonical) == 'cmn-Hans-CN-x-foo'


def test_canonical_form():
    tag = canonical_form(parse('zh-yue-hk'))
    assert tag.language == 'yue'
    assert tag.extlang == []
    assert tag.region == 'HK'
    assert str(tag.region) == 'HK'
    tag = canonical_form(parse('i-klingon'))
    assert not tag.grandfathered
    assert tag.language == 'tlh'
    tag = canonical_form(parse('i-enochian'))
    assert tag.grandfathered
    assert str(tag) == 'i-enochian'


def test_variant_order_does_not_matter():
    results = set(canonicalize(text) for text in [
        'de-1901-fonipa-scouse',
        'de-fonipa-1901-scouse',
        'de-scouse-fonipa-1901',
        'DE-SCOUSE-1901-FONIPA',
    ])
    assert results == {'de-1901-fonipa-scouse'}


def test_whitespace():
    assert canonicalize(' en-us\t') == 'en-US'
