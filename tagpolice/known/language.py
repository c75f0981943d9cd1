# -*- coding: utf-8; -*-

from tagpolice.citation import subtag_registry
from tagpolice.known.base import KnownDict
from tagpolice.structure import LanguageSubtag, ScriptSubtag


def is_known(code):
    return code in known

def title(code):
    return known.get_info(code).get('_title')

def preferred_value(code):
    return known.get_info(code).get('preferred_value')

def is_deprecated(code):
    return preferred_value(code) is not None

def suppress_script(code):
    return known.get_info(code).get('suppress_script')

def suggestion(code):
    return corrections.get(LanguageSubtag(code))


class KnownLanguages(KnownDict):

    def __init__(self, *args, **kwargs):
        super(KnownLanguages, self).__init__(LanguageSubtag, *args, **kwargs)


# When adding a new language, fill in the fields as follows:
#
#   ``_``, ``_title``
#     The subtag in its registered (lowercase) form and its description
#     from the IANA registry.
#
#   ``preferred_value``
#     Only for deprecated subtags that the registry maps onto another one.
#     The target must itself be registered here and not be deprecated,
#     otherwise canonicalization stops being idempotent.
#
#   ``suppress_script``
#     The script that is implied for this language and therefore redundant
#     when given explicitly (``en-Latn`` is just ``en``).

def _lang(code, name, preferred_value=None, suppress_script=None):
    item = {'_': LanguageSubtag(code), '_title': name}
    if preferred_value:
        item['preferred_value'] = LanguageSubtag(preferred_value)
    if suppress_script:
        item['suppress_script'] = ScriptSubtag(suppress_script)
    return item


known = KnownLanguages([
    _lang('af', 'Afrikaans', suppress_script='Latn'),
    _lang('am', 'Amharic', suppress_script='Ethi'),
    _lang('ar', 'Arabic', suppress_script='Arab'),
    _lang('as', 'Assamese', suppress_script='Beng'),
    _lang('az', 'Azerbaijani'),
    _lang('be', 'Belarusian', suppress_script='Cyrl'),
    _lang('bg', 'Bulgarian', suppress_script='Cyrl'),
    _lang('bn', 'Bengali', suppress_script='Beng'),
    _lang('br', 'Breton'),
    _lang('bs', 'Bosnian', suppress_script='Latn'),
    _lang('ca', 'Catalan', suppress_script='Latn'),
    _lang('co', 'Corsican'),
    _lang('cs', 'Czech', suppress_script='Latn'),
    _lang('cy', 'Welsh', suppress_script='Latn'),
    _lang('da', 'Danish', suppress_script='Latn'),
    _lang('de', 'German', suppress_script='Latn'),
    _lang('dv', 'Dhivehi', suppress_script='Thaa'),
    _lang('el', 'Modern Greek', suppress_script='Grek'),
    _lang('en', 'English', suppress_script='Latn'),
    _lang('eo', 'Esperanto', suppress_script='Latn'),
    _lang('es', 'Spanish', suppress_script='Latn'),
    _lang('et', 'Estonian', suppress_script='Latn'),
    _lang('eu', 'Basque', suppress_script='Latn'),
    _lang('fa', 'Persian', suppress_script='Arab'),
    _lang('fi', 'Finnish', suppress_script='Latn'),
    _lang('fo', 'Faroese', suppress_script='Latn'),
    _lang('fr', 'French', suppress_script='Latn'),
    _lang('fy', 'Western Frisian', suppress_script='Latn'),
    _lang('ga', 'Irish', suppress_script='Latn'),
    _lang('gd', 'Scottish Gaelic', suppress_script='Latn'),
    _lang('gl', 'Galician', suppress_script='Latn'),
    _lang('gu', 'Gujarati', suppress_script='Gujr'),
    _lang('ha', 'Hausa'),
    _lang('he', 'Hebrew', suppress_script='Hebr'),
    _lang('hi', 'Hindi', suppress_script='Deva'),
    _lang('hr', 'Croatian', suppress_script='Latn'),
    _lang('ht', 'Haitian', suppress_script='Latn'),
    _lang('hu', 'Hungarian', suppress_script='Latn'),
    _lang('hy', 'Armenian', suppress_script='Armn'),
    _lang('id', 'Indonesian', suppress_script='Latn'),
    _lang('ig', 'Igbo'),
    _lang('in', 'Indonesian', preferred_value='id'),
    _lang('is', 'Icelandic', suppress_script='Latn'),
    _lang('it', 'Italian', suppress_script='Latn'),
    _lang('iw', 'Hebrew', preferred_value='he'),
    _lang('ja', 'Japanese', suppress_script='Jpan'),
    _lang('ji', 'Yiddish', preferred_value='yi'),
    _lang('jv', 'Javanese'),
    _lang('jw', 'Javanese', preferred_value='jv'),
    _lang('ka', 'Georgian', suppress_script='Geor'),
    _lang('kk', 'Kazakh', suppress_script='Cyrl'),
    _lang('km', 'Central Khmer', suppress_script='Khmr'),
    _lang('kn', 'Kannada', suppress_script='Knda'),
    _lang('ko', 'Korean', suppress_script='Kore'),
    _lang('ku', 'Kurdish'),
    _lang('la', 'Latin'),
    _lang('lb', 'Luxembourgish', suppress_script='Latn'),
    _lang('lo', 'Lao', suppress_script='Laoo'),
    _lang('lt', 'Lithuanian', suppress_script='Latn'),
    _lang('lv', 'Latvian', suppress_script='Latn'),
    _lang('mg', 'Malagasy', suppress_script='Latn'),
    _lang('mk', 'Macedonian', suppress_script='Cyrl'),
    _lang('ml', 'Malayalam', suppress_script='Mlym'),
    _lang('mn', 'Mongolian'),
    _lang('mo', 'Moldavian', preferred_value='ro'),
    _lang('mr', 'Marathi', suppress_script='Deva'),
    _lang('ms', 'Malay', suppress_script='Latn'),
    _lang('mt', 'Maltese', suppress_script='Latn'),
    _lang('my', 'Burmese', suppress_script='Mymr'),
    _lang('nb', 'Norwegian Bokm\N{LATIN SMALL LETTER A WITH RING ABOVE}l',
          suppress_script='Latn'),
    _lang('ne', 'Nepali', suppress_script='Deva'),
    _lang('nl', 'Dutch', suppress_script='Latn'),
    _lang('nn', 'Norwegian Nynorsk', suppress_script='Latn'),
    _lang('no', 'Norwegian', suppress_script='Latn'),
    _lang('nv', 'Navajo'),
    _lang('oc', 'Occitan'),
    _lang('or', 'Oriya', suppress_script='Orya'),
    _lang('pa', 'Panjabi', suppress_script='Guru'),
    _lang('pl', 'Polish', suppress_script='Latn'),
    _lang('ps', 'Pushto', suppress_script='Arab'),
    _lang('pt', 'Portuguese', suppress_script='Latn'),
    _lang('rm', 'Romansh', suppress_script='Latn'),
    _lang('ro', 'Romanian', suppress_script='Latn'),
    _lang('ru', 'Russian', suppress_script='Cyrl'),
    _lang('sa', 'Sanskrit'),
    _lang('sc', 'Sardinian'),
    _lang('se', 'Northern Sami'),
    _lang('si', 'Sinhala', suppress_script='Sinh'),
    _lang('sk', 'Slovak', suppress_script='Latn'),
    _lang('sl', 'Slovenian', suppress_script='Latn'),
    _lang('so', 'Somali', suppress_script='Latn'),
    _lang('sq', 'Albanian', suppress_script='Latn'),
    _lang('sr', 'Serbian', suppress_script='Cyrl'),
    _lang('sv', 'Swedish', suppress_script='Latn'),
    _lang('sw', 'Swahili', suppress_script='Latn'),
    _lang('ta', 'Tamil', suppress_script='Taml'),
    _lang('te', 'Telugu', suppress_script='Telu'),
    _lang('th', 'Thai', suppress_script='Thai'),
    _lang('ti', 'Tigrinya', suppress_script='Ethi'),
    _lang('tl', 'Tagalog', suppress_script='Latn'),
    _lang('tr', 'Turkish', suppress_script='Latn'),
    _lang('uk', 'Ukrainian', suppress_script='Cyrl'),
    _lang('ur', 'Urdu', suppress_script='Arab'),
    _lang('uz', 'Uzbek'),
    _lang('vi', 'Vietnamese', suppress_script='Latn'),
    _lang('xh', 'Xhosa', suppress_script='Latn'),
    _lang('yi', 'Yiddish', suppress_script='Hebr'),
    _lang('yo', 'Yoruba'),
    _lang('zh', 'Chinese', suppress_script='Hans'),
    _lang('zu', 'Zulu', suppress_script='Latn'),

    _lang('aeb', 'Tunisian Arabic'),
    _lang('ami', 'Amis'),
    _lang('apc', 'North Levantine Arabic'),
    _lang('arb', 'Standard Arabic'),
    _lang('art', 'Artificial languages'),
    _lang('ary', 'Moroccan Arabic'),
    _lang('arz', 'Egyptian Arabic'),
    _lang('ase', 'American Sign Language'),
    _lang('bfi', 'British Sign Language'),
    _lang('bnn', 'Bunun'),
    _lang('cdo', 'Min Dong Chinese'),
    _lang('cel', 'Celtic languages'),
    _lang('chr', 'Cherokee'),
    _lang('cjy', 'Jinyu Chinese'),
    _lang('cmn', 'Mandarin Chinese'),
    _lang('cnr', 'Montenegrin'),
    _lang('cpx', 'Pu-Xian Chinese'),
    _lang('czh', 'Huizhou Chinese'),
    _lang('czo', 'Min Zhong Chinese'),
    _lang('dsb', 'Lower Sorbian'),
    _lang('egy', 'Egyptian (Ancient)'),
    _lang('fil', 'Filipino'),
    _lang('fur', 'Friulian'),
    _lang('gan', 'Gan Chinese'),
    _lang('gsw', 'Swiss German', suppress_script='Latn'),
    _lang('hak', 'Hakka Chinese'),
    _lang('haw', 'Hawaiian'),
    _lang('hsb', 'Upper Sorbian', suppress_script='Latn'),
    _lang('hsn', 'Xiang Chinese'),
    _lang('jbo', 'Lojban'),
    _lang('lld', 'Ladin'),
    _lang('lzh', 'Literary Chinese'),
    _lang('mis', 'Uncoded languages'),
    _lang('mnp', 'Min Bei Chinese'),
    _lang('mul', 'Multiple languages'),
    _lang('nan', 'Min Nan Chinese'),
    _lang('pwn', 'Paiwan'),
    _lang('sfb', 'Langue des signes de Belgique Francophone'),
    _lang('sgg', 'Swiss-German Sign Language'),
    _lang('sgn', 'Sign languages'),
    _lang('tao', 'Yami'),
    _lang('tay', 'Atayal'),
    _lang('tlh', 'Klingon'),
    _lang('tsu', 'Tsou'),
    _lang('und', 'Undetermined'),
    _lang('uzn', 'Northern Uzbek'),
    _lang('uzs', 'Southern Uzbek'),
    _lang('vgt', 'Vlaamse Gebarentaal'),
    _lang('wuu', 'Wu Chinese'),
    _lang('yue', 'Yue Chinese'),
    _lang('zlm', 'Malay (individual language)'),
    _lang('zsm', 'Standard Malay'),
    _lang('zxx', 'No linguistic content'),
], extra_info=['preferred_value', 'suppress_script'],
   citation=subtag_registry)


# Codes that people tend to put where a language subtag belongs,
# mostly country codes, mapped to the language that was probably meant.
# None of these may be registered above, or they would never be suggested.
corrections = {
    LanguageSubtag('at'): LanguageSubtag('de'),
    LanguageSubtag('ch'): LanguageSubtag('zh'),
    LanguageSubtag('cn'): LanguageSubtag('zh'),
    LanguageSubtag('cz'): LanguageSubtag('cs'),
    LanguageSubtag('dk'): LanguageSubtag('da'),
    LanguageSubtag('gb'): LanguageSubtag('en'),
    LanguageSubtag('gr'): LanguageSubtag('el'),
    LanguageSubtag('il'): LanguageSubtag('he'),
    LanguageSubtag('ir'): LanguageSubtag('fa'),
    LanguageSubtag('jp'): LanguageSubtag('ja'),
    LanguageSubtag('kr'): LanguageSubtag('ko'),
    LanguageSubtag('rs'): LanguageSubtag('sr'),
    LanguageSubtag('ua'): LanguageSubtag('uk'),
    LanguageSubtag('us'): LanguageSubtag('en'),
    LanguageSubtag('vn'): LanguageSubtag('vi'),
}
