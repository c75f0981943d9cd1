# -*- coding: utf-8; -*-

"""Rewriting language tags into one deterministic form.

Two tags that mean the same thing according to the registry
canonicalize to the same string. This goes a bit beyond the canonical form
of RFC 5646 Section 4.5: variants and extensions are sorted, and a script
that the registry suppresses for the language is dropped.
The result is always well-formed, and canonicalizing it again
gives the same string.

Case is folded on the parsed structure, role by role. Because
the parser classifies subtags without regard to case, this gives
the same result as folding the raw subtags and parsing them again.
"""

from tagpolice import known
from tagpolice.parse import parse
from tagpolice.structure import (ExtlangSubtag, LanguageSubtag, LanguageTag,
                                 RegionSubtag, Role, ScriptSubtag,
                                 conventional_case)


def canonicalize(tag):
    """Return the canonical form of `tag` as a string.

    :param tag:
        A string, or a :class:`~tagpolice.structure.LanguageTag`
        as returned by :func:`~tagpolice.parse`.

    :return:
        A string, or `None` if `tag` is not well-formed.

    >>> canonicalize('EN-latn-us')
    'en-US'
    >>> canonicalize('i-klingon')
    'tlh'
    >>> canonicalize('en--US') is None
    True
    """
    if isinstance(tag, str):
        tag = parse(tag)
    if not isinstance(tag, LanguageTag):
        return None
    return str(canonical_form(tag))


def canonical_form(tag):
    """Like :func:`canonicalize`, but returns a new `LanguageTag`."""
    if tag.grandfathered:
        preferred = known.grandfathered.preferred_value(tag.grandfathered_tag)
        if preferred is not None:
            return canonical_form(parse(preferred))
        return LanguageTag(grandfathered_tag=known.grandfathered.registered(
            tag.grandfathered_tag))

    if tag.privateuse_only:
        return LanguageTag(privateuse=[s.lower() for s in tag.privateuse],
                           privateuse_only=True)

    language = _preferred(Role.language, LanguageSubtag(tag.language.lower()))
    extlang = [ExtlangSubtag(s.lower()) for s in tag.extlang]
    if extlang:
        preferred = known.extlang.preferred_value(extlang[0])
        if preferred is not None and \
                known.extlang.prefix(extlang[0]) == language:
            language = _preferred(Role.language, LanguageSubtag(preferred))
            extlang = extlang[1:]

    script = None
    if tag.script is not None:
        script = _preferred(Role.script, ScriptSubtag(tag.script))
        if script == known.language.suppress_script(language):
            script = None

    region = None
    if tag.region is not None:
        region = _preferred(Role.region, RegionSubtag(tag.region))

    return LanguageTag(
        language=language,
        extlang=extlang,
        script=script,
        region=region,
        variants=sorted(v.lower() for v in tag.variants),
        extensions=[(singleton.lower(), [v.lower() for v in values])
                    for (singleton, values)
                    in sorted(tag.extensions.items(),
                              key=lambda item: item[0].lower())],
        privateuse=[s.lower() for s in tag.privateuse],
    )


_tables = {
    Role.language: known.language,
    Role.script: known.script,
    Role.region: known.region,
}


def _preferred(role, subtag):
    preferred = _tables[role].preferred_value(subtag)
    if preferred is not None:
        subtag = preferred
    return conventional_case(role, subtag)
