# -*- coding: utf-8; -*-

from tagpolice.citation import subtag_registry
from tagpolice.known.base import KnownDict
from tagpolice.structure import RegionSubtag


def is_known(code):
    return code in known

def title(code):
    return known.get_info(code).get('_title')

def preferred_value(code):
    return known.get_info(code).get('preferred_value')

def is_deprecated(code):
    return preferred_value(code) is not None

def suggestion(code):
    return corrections.get(RegionSubtag(code))


class KnownRegions(KnownDict):

    def __init__(self, *args, **kwargs):
        super(KnownRegions, self).__init__(RegionSubtag, *args, **kwargs)

    @classmethod
    def _name_for(cls, item):
        # ``known.r419`` rather than an invalid identifier.
        name = super(KnownRegions, cls)._name_for(item)
        if name.isdigit():
            name = 'r' + name
        return name


def _region(code, name, preferred_value=None):
    item = {'_': RegionSubtag(code), '_title': name}
    if preferred_value:
        item['preferred_value'] = RegionSubtag(preferred_value)
    return item


known = KnownRegions([
    _region('AD', 'Andorra'),
    _region('AE', 'United Arab Emirates'),
    _region('AF', 'Afghanistan'),
    _region('AL', 'Albania'),
    _region('AM', 'Armenia'),
    _region('AO', 'Angola'),
    _region('AQ', 'Antarctica'),
    _region('AR', 'Argentina'),
    _region('AT', 'Austria'),
    _region('AU', 'Australia'),
    _region('AZ', 'Azerbaijan'),
    _region('BA', 'Bosnia and Herzegovina'),
    _region('BD', 'Bangladesh'),
    _region('BE', 'Belgium'),
    _region('BG', 'Bulgaria'),
    _region('BH', 'Bahrain'),
    _region('BO', 'Bolivia'),
    _region('BR', 'Brazil'),
    _region('BU', 'Burma', preferred_value='MM'),
    _region('BY', 'Belarus'),
    _region('CA', 'Canada'),
    _region('CD', 'The Democratic Republic of the Congo'),
    _region('CH', 'Switzerland'),
    _region('CL', 'Chile'),
    _region('CM', 'Cameroon'),
    _region('CN', 'China'),
    _region('CO', 'Colombia'),
    _region('CR', 'Costa Rica'),
    _region('CU', 'Cuba'),
    _region('CY', 'Cyprus'),
    _region('CZ', 'Czechia'),
    _region('DD', 'German Democratic Republic', preferred_value='DE'),
    _region('DE', 'Germany'),
    _region('DK', 'Denmark'),
    _region('DO', 'Dominican Republic'),
    _region('DZ', 'Algeria'),
    _region('EC', 'Ecuador'),
    _region('EE', 'Estonia'),
    _region('EG', 'Egypt'),
    _region('ES', 'Spain'),
    _region('ET', 'Ethiopia'),
    _region('EU', 'European Union'),
    _region('FI', 'Finland'),
    _region('FO', 'Faroe Islands'),
    _region('FR', 'France'),
    _region('FX', 'Metropolitan France', preferred_value='FR'),
    _region('GB', 'United Kingdom'),
    _region('GE', 'Georgia'),
    _region('GH', 'Ghana'),
    _region('GR', 'Greece'),
    _region('GT', 'Guatemala'),
    _region('HK', 'Hong Kong'),
    _region('HN', 'Honduras'),
    _region('HR', 'Croatia'),
    _region('HT', 'Haiti'),
    _region('HU', 'Hungary'),
    _region('ID', 'Indonesia'),
    _region('IE', 'Ireland'),
    _region('IL', 'Israel'),
    _region('IN', 'India'),
    _region('IQ', 'Iraq'),
    _region('IR', 'Islamic Republic of Iran'),
    _region('IS', 'Iceland'),
    _region('IT', 'Italy'),
    _region('JM', 'Jamaica'),
    _region('JO', 'Jordan'),
    _region('JP', 'Japan'),
    _region('KE', 'Kenya'),
    _region('KH', 'Cambodia'),
    _region('KP', "Democratic People's Republic of Korea"),
    _region('KR', 'Republic of Korea'),
    _region('KW', 'Kuwait'),
    _region('KZ', 'Kazakhstan'),
    _region('LA', "Lao People's Democratic Republic"),
    _region('LB', 'Lebanon'),
    _region('LI', 'Liechtenstein'),
    _region('LK', 'Sri Lanka'),
    _region('LT', 'Lithuania'),
    _region('LU', 'Luxembourg'),
    _region('LV', 'Latvia'),
    _region('LY', 'Libya'),
    _region('MA', 'Morocco'),
    _region('MC', 'Monaco'),
    _region('MD', 'Moldova'),
    _region('ME', 'Montenegro'),
    _region('MK', 'North Macedonia'),
    _region('MM', 'Myanmar'),
    _region('MN', 'Mongolia'),
    _region('MO', 'Macao'),
    _region('MT', 'Malta'),
    _region('MX', 'Mexico'),
    _region('MY', 'Malaysia'),
    _region('NG', 'Nigeria'),
    _region('NI', 'Nicaragua'),
    _region('NL', 'Netherlands'),
    _region('NO', 'Norway'),
    _region('NP', 'Nepal'),
    _region('NZ', 'New Zealand'),
    _region('OM', 'Oman'),
    _region('PA', 'Panama'),
    _region('PE', 'Peru'),
    _region('PH', 'Philippines'),
    _region('PK', 'Pakistan'),
    _region('PL', 'Poland'),
    _region('PR', 'Puerto Rico'),
    _region('PT', 'Portugal'),
    _region('PY', 'Paraguay'),
    _region('QA', 'Qatar'),
    _region('RO', 'Romania'),
    _region('RS', 'Serbia'),
    _region('RU', 'Russian Federation'),
    _region('SA', 'Saudi Arabia'),
    _region('SE', 'Sweden'),
    _region('SG', 'Singapore'),
    _region('SI', 'Slovenia'),
    _region('SK', 'Slovakia'),
    _region('SN', 'Senegal'),
    _region('SO', 'Somalia'),
    _region('SV', 'El Salvador'),
    _region('SY', 'Syrian Arab Republic'),
    _region('TH', 'Thailand'),
    _region('TL', 'Timor-Leste'),
    _region('TN', 'Tunisia'),
    _region('TP', 'East Timor', preferred_value='TL'),
    _region('TR', 'Turkey'),
    _region('TW', 'Taiwan, Province of China'),
    _region('TZ', 'United Republic of Tanzania'),
    _region('UA', 'Ukraine'),
    _region('UG', 'Uganda'),
    _region('US', 'United States'),
    _region('UY', 'Uruguay'),
    _region('UZ', 'Uzbekistan'),
    _region('VA', 'Holy See (Vatican City State)'),
    _region('VE', 'Venezuela'),
    _region('VN', 'Viet Nam'),
    _region('YD', 'Democratic Yemen', preferred_value='YE'),
    _region('YE', 'Yemen'),
    _region('ZA', 'South Africa'),
    _region('ZM', 'Zambia'),
    _region('ZR', 'Zaire', preferred_value='CD'),
    _region('ZW', 'Zimbabwe'),

    _region('001', 'World'),
    _region('002', 'Africa'),
    _region('005', 'South America'),
    _region('009', 'Oceania'),
    _region('013', 'Central America'),
    _region('019', 'Americas'),
    _region('021', 'Northern America'),
    _region('029', 'Caribbean'),
    _region('030', 'Eastern Asia'),
    _region('034', 'Southern Asia'),
    _region('035', 'South-Eastern Asia'),
    _region('039', 'Southern Europe'),
    _region('142', 'Asia'),
    _region('143', 'Central Asia'),
    _region('145', 'Western Asia'),
    _region('150', 'Europe'),
    _region('151', 'Eastern Europe'),
    _region('154', 'Northern Europe'),
    _region('155', 'Western Europe'),
    _region('419', 'Latin America and the Caribbean'),
], extra_info=['preferred_value'], citation=subtag_registry)


# Things that are not ISO 3166 codes but are often used as if they were:
# an informal name of a country, or a language code in the region slot.
corrections = {
    RegionSubtag('EN'): RegionSubtag('GB'),
    RegionSubtag('UK'): RegionSubtag('GB'),
    RegionSubtag('DA'): RegionSubtag('DK'),
    RegionSubtag('EL'): RegionSubtag('GR'),
    RegionSubtag('HE'): RegionSubtag('IL'),
    RegionSubtag('JA'): RegionSubtag('JP'),
    RegionSubtag('KO'): RegionSubtag('KR'),
    RegionSubtag('ZH'): RegionSubtag('CN'),
}
