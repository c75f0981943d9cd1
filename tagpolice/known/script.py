# -*- coding: utf-8; -*-

from tagpolice.citation import subtag_registry
from tagpolice.known.base import KnownDict
from tagpolice.structure import ScriptSubtag


def is_known(code):
    return code in known

def title(code):
    return known.get_info(code).get('_title')

def preferred_value(code):
    return known.get_info(code).get('preferred_value')

def is_deprecated(code):
    return preferred_value(code) is not None


class KnownScripts(KnownDict):

    def __init__(self, *args, **kwargs):
        super(KnownScripts, self).__init__(ScriptSubtag, *args, **kwargs)


def _script(code, name, preferred_value=None):
    item = {'_': ScriptSubtag(code), '_title': name}
    if preferred_value:
        item['preferred_value'] = ScriptSubtag(preferred_value)
    return item


known = KnownScripts([
    _script('Arab', 'Arabic'),
    _script('Armn', 'Armenian'),
    _script('Beng', 'Bengali'),
    _script('Bopo', 'Bopomofo'),
    _script('Brai', 'Braille'),
    _script('Cher', 'Cherokee'),
    _script('Copt', 'Coptic'),
    _script('Cyrl', 'Cyrillic'),
    _script('Deva', 'Devanagari'),
    _script('Egyp', 'Egyptian hieroglyphs'),
    _script('Ethi', 'Ethiopic'),
    _script('Geor', 'Georgian'),
    _script('Goth', 'Gothic'),
    _script('Grek', 'Greek'),
    _script('Gujr', 'Gujarati'),
    _script('Guru', 'Gurmukhi'),
    _script('Hang', 'Hangul'),
    _script('Hani', 'Han'),
    _script('Hans', 'Han (Simplified variant)'),
    _script('Hant', 'Han (Traditional variant)'),
    _script('Hebr', 'Hebrew'),
    _script('Hira', 'Hiragana'),
    _script('Jpan', 'Japanese (alias for Han + Hiragana + Katakana)'),
    _script('Kana', 'Katakana'),
    _script('Khmr', 'Khmer'),
    _script('Knda', 'Kannada'),
    _script('Kore', 'Korean (alias for Hangul + Han)'),
    _script('Laoo', 'Lao'),
    _script('Latf', 'Latin (Fraktur variant)'),
    _script('Latn', 'Latin'),
    _script('Mlym', 'Malayalam'),
    _script('Mong', 'Mongolian'),
    _script('Mymr', 'Myanmar'),
    _script('Orya', 'Oriya'),
    _script('Qaai', 'Inherited', preferred_value='Zinh'),
    _script('Runr', 'Runic'),
    _script('Sinh', 'Sinhala'),
    _script('Syrc', 'Syriac'),
    _script('Taml', 'Tamil'),
    _script('Telu', 'Telugu'),
    _script('Tfng', 'Tifinagh'),
    _script('Thaa', 'Thaana'),
    _script('Thai', 'Thai'),
    _script('Tibt', 'Tibetan'),
    _script('Zinh', 'Code for inherited script'),
    _script('Zmth', 'Mathematical notation'),
    _script('Zsym', 'Symbols'),
    _script('Zxxx', 'Code for unwritten documents'),
    _script('Zyyy', 'Code for undetermined script'),
    _script('Zzzz', 'Code for uncoded script'),
], extra_info=['preferred_value'], citation=subtag_registry)
