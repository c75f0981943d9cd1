# -*- coding: utf-8; -*-

"""Whole tags registered under RFC 3066 that RFC 5646 keeps for compatibility.

*Irregular* ones do not match the ``langtag`` production at all
(``i-klingon``, ``sgn-BE-FR``). *Regular* ones do, but their subtags
are not registered individually (``zh-min-nan``). Either way, such a tag
is only recognized as a whole, so it must be matched before parsing.
"""

from tagpolice.citation import subtag_registry
from tagpolice.known.base import KnownDict
from tagpolice.structure import GrandfatheredTag


def is_known(tag):
    return tag in known

def title(tag):
    return known.get_info(tag).get('_title')

def registered(tag):
    return known.registered(tag)

def preferred_value(tag):
    return known.get_info(tag).get('preferred_value')

def is_irregular(tag):
    return known.get_info(tag).get('irregular', False)


class KnownGrandfathered(KnownDict):

    def __init__(self, *args, **kwargs):
        super(KnownGrandfathered, self).__init__(GrandfatheredTag,
                                                 *args, **kwargs)


# ``preferred_value`` is a complete tag, not a subtag.

def _tag(tag, name, preferred_value=None, irregular=False):
    item = {'_': GrandfatheredTag(tag), '_title': name}
    if preferred_value:
        item['preferred_value'] = preferred_value
    if irregular:
        item['irregular'] = True
    return item


known = KnownGrandfathered([
    _tag('en-GB-oed', 'English, Oxford English Dictionary spelling',
         'en-GB-oxendict', irregular=True),
    _tag('i-ami', 'Amis', 'ami', irregular=True),
    _tag('i-bnn', 'Bunun', 'bnn', irregular=True),
    _tag('i-default', 'Default Language', irregular=True),
    _tag('i-enochian', 'Enochian', irregular=True),
    _tag('i-hak', 'Hakka', 'hak', irregular=True),
    _tag('i-klingon', 'Klingon', 'tlh', irregular=True),
    _tag('i-lux', 'Luxembourgish', 'lb', irregular=True),
    _tag('i-mingo', 'Mingo', irregular=True),
    _tag('i-navajo', 'Navajo', 'nv', irregular=True),
    _tag('i-pwn', 'Paiwan', 'pwn', irregular=True),
    _tag('i-tao', 'Tao', 'tao', irregular=True),
    _tag('i-tay', 'Tayal', 'tay', irregular=True),
    _tag('i-tsu', 'Tsou', 'tsu', irregular=True),
    _tag('sgn-BE-FR', 'Belgian-French Sign Language', 'sfb',
         irregular=True),
    _tag('sgn-BE-NL', 'Belgian-Flemish Sign Language', 'vgt',
         irregular=True),
    _tag('sgn-CH-DE', 'Swiss German Sign Language', 'sgg', irregular=True),

    _tag('art-lojban', 'Lojban', 'jbo'),
    _tag('cel-gaulish', 'Gaulish'),
    _tag('no-bok', 'Norwegian Bokmal', 'nb'),
    _tag('no-nyn', 'Norwegian Nynorsk', 'nn'),
    _tag('zh-guoyu', 'Mandarin or Standard Chinese', 'cmn'),
    _tag('zh-hakka', 'Hakka', 'hak'),
    _tag('zh-min', 'Min, Fuzhou, Hokkien, Amoy, or Taiwanese'),
    _tag('zh-min-nan', 'Minnan, Hokkien, Amoy, Taiwanese, Southern Min, '
         'Southern Fujian, Hoklo, Southern Fukien, Ho-lo', 'nan'),
    _tag('zh-xiang', 'Xiang or Hunanese', 'hsn'),
], extra_info=['preferred_value', 'irregular'], citation=subtag_registry)
