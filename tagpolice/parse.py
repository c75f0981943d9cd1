# -*- coding: utf-8; -*-

"""Parsing language tags into :class:`~tagpolice.structure.LanguageTag`.

The grammar of RFC 5646 is simple enough that we don't need a general parser:
a tag is split on hyphens, and every subtag is classified by its shape
and by where it occurs. "Where" is tracked by a small state machine
over the :class:`Phase` enumeration. A tag only ever moves forward
through the phases, which is how ordering rules (script before region,
region before variants, and so on) are enforced.

The parser consults the registry only to tell extlang subtags apart
from other three-letter subtags. Everything else is syntax.

The first violation stops the parse. It is reported as a single
:class:`~tagpolice.Complaint`, so :func:`parse` never raises
for bad input.
"""

import re

from tagpolice import known
from tagpolice.blackboard import make_complaint
from tagpolice.structure import (ExtlangSubtag, GrandfatheredTag,
                                 LanguageSubtag, LanguageTag, RegionSubtag,
                                 Role, ScriptSubtag)
from tagpolice.util.ordered_enum import OrderedEnum
from tagpolice.util.text import first_non_ascii, split_with_offsets


# All of these work on a lowercase copy of the input.
_language_re = re.compile(r'[a-z]{2,3}|[a-z]{4}|[a-z]{5,8}')
_extlang_re = re.compile(r'[a-z]{3}')
_script_re = re.compile(r'[a-z]{4}')
_region_re = re.compile(r'[a-z]{2}|[0-9]{3}')
_variant_re = re.compile(r'[a-z0-9]{5,8}|[0-9][a-z0-9]{3}')
_singleton_re = re.compile(r'[0-9a-wyz]')
_extension_re = re.compile(r'[a-z0-9]{2,8}')
_privateuse_re = re.compile(r'[a-z0-9]{1,8}')


class Phase(OrderedEnum):

    """Where the parser is within a tag."""

    language = 0
    extlang = 1
    script = 2
    region = 3
    variant = 4
    extension = 5
    privateuse = 6


# From each phase, the phases that the next subtag may put us into.
transitions = {
    Phase.language: frozenset([Phase.extlang, Phase.script, Phase.region,
                               Phase.variant, Phase.extension,
                               Phase.privateuse]),
    Phase.extlang: frozenset([Phase.extlang, Phase.script, Phase.region,
                              Phase.variant, Phase.extension,
                              Phase.privateuse]),
    Phase.script: frozenset([Phase.region, Phase.variant, Phase.extension,
                             Phase.privateuse]),
    Phase.region: frozenset([Phase.variant, Phase.extension,
                             Phase.privateuse]),
    Phase.variant: frozenset([Phase.variant, Phase.extension,
                              Phase.privateuse]),
    Phase.extension: frozenset([Phase.extension, Phase.privateuse]),
    Phase.privateuse: frozenset(),
}


def can_enter(current, target):
    """
    >>> can_enter(Phase.language, Phase.region)
    True
    >>> can_enter(Phase.region, Phase.script)
    False
    >>> can_enter(Phase.variant, Phase.variant)
    True
    """
    return target in transitions[current]


class ParseError(Exception):

    """Aborts parsing at the first violation.

    Never escapes :func:`parse`, which turns it into a complaint.
    """

    def __init__(self, notice_id, **context):
        super(ParseError, self).__init__(notice_id)
        self.notice_id = notice_id
        self.context = context

    subtag = property(lambda self: self.context.get('subtag'))
    position = property(lambda self: self.context.get('position'))

    def as_complaint(self):
        return make_complaint(self.notice_id, **self.context)


def parse(text):
    """Parse `text` as a language tag.

    :return:
        A :class:`~tagpolice.structure.LanguageTag` if `text` is well-formed,
        otherwise a list with a single :class:`~tagpolice.Complaint`
        describing the first violation.
        All subtags in the returned tag are lowercase.
    """
    try:
        return _Parser(text).run()
    except ParseError as e:
        return [e.as_complaint()]


class _Parser(object):

    def __init__(self, text):
        self.raw = text
        stripped = text.lstrip()
        self.start = len(text) - len(stripped)
        self.text = stripped.rstrip()
        self.tag = LanguageTag()
        self.phase = Phase.language
        self.open_singleton = None
        self.open_position = None

    def run(self):
        if not self.text:
            raise ParseError(1000, position=0)
        bad = first_non_ascii(self.text)
        if bad is not None:
            raise ParseError(1001, subtag=self.text,
                             position=self.start + bad)

        lowered = self.text.lower()
        if known.grandfathered.is_known(lowered):
            return LanguageTag(grandfathered_tag=GrandfatheredTag(lowered))

        # Each item is ``(lowercase, as written, position)``.
        subtags = [(piece.lower(), piece, position)
                   for (piece, position)
                   in split_with_offsets(self.text, start=self.start)]
        for (lower, _, position) in subtags:
            if lower == '':
                raise ParseError(1002, position=position)

        (first, first_raw, first_position) = subtags[0]
        if first == 'x':
            self.tag.privateuse_only = True
            self._private_use(subtags[1:], first_raw, first_position)
            return self.tag

        if not _language_re.fullmatch(first):
            raise ParseError(1010, subtag=first_raw, position=first_position,
                             role=Role.language)
        self.tag.language = LanguageSubtag(first)

        for i in range(1, len(subtags)):
            (lower, raw, position) = subtags[i]
            if lower == 'x':
                self._close_extension()
                self._private_use(subtags[i + 1:], raw, position)
                break
            self._step(lower, raw, position)
        else:
            self._close_extension()

        return self.tag

    def _step(self, lower, raw, position):
        tag = self.tag
        context = dict(subtag=raw, position=position)

        if _singleton_re.fullmatch(lower):
            self._close_extension()
            if lower in tag.extensions:
                raise ParseError(1040, role=Role.singleton, **context)
            tag.extensions[lower] = []
            self.open_singleton = lower
            self.open_position = position
            self.phase = Phase.extension

        elif self.phase is Phase.extension:
            if not _extension_re.fullmatch(lower):
                raise ParseError(1051, role=Role.extension,
                                 singleton=self.open_singleton, **context)
            tag.extensions[self.open_singleton].append(lower)

        elif self._is_extlang(lower):
            tag.extlang.append(ExtlangSubtag(lower))
            self.phase = Phase.extlang

        elif _script_re.fullmatch(lower):
            if tag.script is not None:
                raise ParseError(1011, role=Role.script, **context)
            if not can_enter(self.phase, Phase.script):
                raise ParseError(1020, role=Role.script, **context)
            tag.script = ScriptSubtag(lower)
            self.phase = Phase.script

        elif _region_re.fullmatch(lower):
            if tag.region is not None:
                raise ParseError(1012, role=Role.region, **context)
            if not can_enter(self.phase, Phase.region):
                raise ParseError(1021, role=Role.region, **context)
            tag.region = RegionSubtag(lower)
            self.phase = Phase.region

        elif _variant_re.fullmatch(lower):
            if lower in tag.variants:
                raise ParseError(1030, role=Role.variant, **context)
            tag.variants.append(lower)
            self.phase = Phase.variant

        else:
            raise ParseError(1013, **context)

    def _is_extlang(self, lower):
        return (can_enter(self.phase, Phase.extlang) and
                len(self.tag.extlang) < 3 and
                _extlang_re.fullmatch(lower) is not None and
                known.extlang.is_known(lower))

    def _close_extension(self):
        if self.open_singleton is not None:
            if not self.tag.extensions[self.open_singleton]:
                raise ParseError(1050, subtag=self.open_singleton,
                                 position=self.open_position,
                                 role=Role.singleton)
            self.open_singleton = None
            self.open_position = None

    def _private_use(self, subtags, x_raw, x_position):
        if not subtags:
            raise ParseError(1061, subtag=x_raw, position=x_position,
                             role=Role.singleton)
        for (lower, raw, position) in subtags:
            if not _privateuse_re.fullmatch(lower):
                raise ParseError(1060, subtag=raw, position=position,
                                 role=Role.privateuse)
            self.tag.privateuse.append(lower)
        self.phase = Phase.privateuse
