# -*- coding: utf-8; -*-

"""Tables of registered subtags, from the IANA Language Subtag Registry.

Each table is a :class:`~tagpolice.known.base.KnownDict` keyed by one of the
case-insensitive subtag classes from :mod:`tagpolice.structure`, so
``known.language.known['EN']`` and ``known.language.known['en']`` are the
same entry. The tables are built once, at import, and never change.
"""

from tagpolice import structure
from tagpolice.known import extlang, grandfathered, language, region, script


# Names are also the XML elements that mark up subtags in ``notices.xml``.
classes = {
    structure.LanguageSubtag: (language.known, 'lang'),
    structure.ExtlangSubtag: (extlang.known, 'extlang'),
    structure.ScriptSubtag: (script.known, 'script'),
    structure.RegionSubtag: (region.known, 'region'),
    structure.GrandfatheredTag: (grandfathered.known, 'grandfathered'),
}


def get(obj):
    for cls, (table, _) in classes.items():
        if isinstance(obj, cls):
            return table.get_info(obj)
    return {}


def citation(obj):
    for cls, (table, _) in classes.items():
        if isinstance(obj, cls):
            return table.citation
    return None


def title(obj, with_citation=False):
    """Return the registered name of a subtag, or `None` if it is unknown.

    >>> title(structure.ScriptSubtag('cyrl'))
    'Cyrillic'
    >>> title(structure.RegionSubtag('419'), with_citation=True)
    'Latin America and the Caribbean (IANA Language Subtag Registry)'
    """
    t = get(obj).get('_title')
    if with_citation and t:
        cite = citation(obj)
        if cite and cite.title:
            t = '%s (%s)' % (t, cite.title)
    return t
