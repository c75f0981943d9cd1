# -*- coding: utf-8; -*-

from tagpolice.citation import subtag_registry
from tagpolice.known.base import KnownDict
from tagpolice.structure import ExtlangSubtag, LanguageSubtag


def is_known(code):
    return code in known

def title(code):
    return known.get_info(code).get('_title')

def prefix(code):
    return known.get_info(code).get('prefix')

def preferred_value(code):
    return known.get_info(code).get('preferred_value')


class KnownExtlangs(KnownDict):

    def __init__(self, *args, **kwargs):
        super(KnownExtlangs, self).__init__(ExtlangSubtag, *args, **kwargs)


# Every extlang in the registry also exists as a primary language subtag,
# which is its ``preferred_value`` (``zh-yue`` is better written ``yue``).
# ``prefix`` is the macrolanguage or collection that the extlang may follow.

def _extlang(code, name, prefix):
    return {'_': ExtlangSubtag(code), '_title': name,
            'prefix': LanguageSubtag(prefix),
            'preferred_value': LanguageSubtag(code)}


known = KnownExtlangs([
    _extlang('aeb', 'Tunisian Arabic', 'ar'),
    _extlang('apc', 'North Levantine Arabic', 'ar'),
    _extlang('arb', 'Standard Arabic', 'ar'),
    _extlang('ary', 'Moroccan Arabic', 'ar'),
    _extlang('arz', 'Egyptian Arabic', 'ar'),

    _extlang('cdo', 'Min Dong Chinese', 'zh'),
    _extlang('cjy', 'Jinyu Chinese', 'zh'),
    _extlang('cmn', 'Mandarin Chinese', 'zh'),
    _extlang('cpx', 'Pu-Xian Chinese', 'zh'),
    _extlang('czh', 'Huizhou Chinese', 'zh'),
    _extlang('czo', 'Min Zhong Chinese', 'zh'),
    _extlang('gan', 'Gan Chinese', 'zh'),
    _extlang('hak', 'Hakka Chinese', 'zh'),
    _extlang('hsn', 'Xiang Chinese', 'zh'),
    _extlang('lzh', 'Literary Chinese', 'zh'),
    _extlang('mnp', 'Min Bei Chinese', 'zh'),
    _extlang('nan', 'Min Nan Chinese', 'zh'),
    _extlang('wuu', 'Wu Chinese', 'zh'),
    _extlang('yue', 'Yue Chinese', 'zh'),

    _extlang('zlm', 'Malay (individual language)', 'ms'),
    _extlang('zsm', 'Standard Malay', 'ms'),

    _extlang('ase', 'American Sign Language', 'sgn'),
    _extlang('bfi', 'British Sign Language', 'sgn'),
    _extlang('sfb', 'Langue des signes de Belgique Francophone', 'sgn'),
    _extlang('sgg', 'Swiss-German Sign Language', 'sgn'),
    _extlang('vgt', 'Vlaamse Gebarentaal', 'sgn'),

    _extlang('uzn', 'Northern Uzbek', 'uz'),
    _extlang('uzs', 'Southern Uzbek', 'uz'),
], extra_info=['prefix', 'preferred_value'], citation=subtag_registry)
