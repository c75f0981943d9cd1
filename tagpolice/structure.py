# -*- coding: utf-8; -*-

"""Classes for representing language tags and their subtags."""

from collections import OrderedDict
from enum import Enum


###############################################################################
# Commonly useful structures


class TagString(str):

    """Base class for the various kinds of subtags."""

    __slots__ = ()

    def __repr__(self):
        return '%s(%s)' % (self.__class__.__name__, str.__repr__(self))


class CaseInsensitive(TagString):

    """A string that compares and hashes without regard to ASCII case.

    Language tags are case-insensitive (RFC 5646 Section 2.1.1), but their
    conventional case carries information for the reader. Instances of this
    class keep the case they were given and still match registry keys
    regardless of it:

    >>> ScriptSubtag('latn') == 'Latn'
    True
    >>> {RegionSubtag('GB'): 1}[RegionSubtag('gb')]
    1
    """

    __slots__ = ()

    def __eq__(self, other):
        if isinstance(other, str):
            return self.lower() == other.lower()
        return NotImplemented

    def __ne__(self, other):
        return not (self == other)

    def __hash__(self):
        return hash(self.lower())


###############################################################################
# Representations of specific subtags


class LanguageSubtag(CaseInsensitive):

    __slots__ = ()


class ExtlangSubtag(CaseInsensitive):

    __slots__ = ()


class ScriptSubtag(CaseInsensitive):

    __slots__ = ()


class RegionSubtag(CaseInsensitive):

    __slots__ = ()

    @property
    def numeric(self):
        """Whether this is a UN M.49 area code like ``419``, which has no case."""
        return self.isdigit()


class GrandfatheredTag(CaseInsensitive):

    """A whole tag registered before RFC 4646, such as ``i-klingon``."""

    __slots__ = ()


class Role(Enum):

    """What a subtag means, as determined by its shape and position."""

    language = 'language'
    extlang = 'extlang'
    script = 'script'
    region = 'region'
    variant = 'variant'
    singleton = 'extension-singleton'
    extension = 'extension-value'
    privateuse = 'private-use'
    grandfathered = 'grandfathered'


def conventional_case(role, value):
    """Return `value` in the case that RFC 5646 recommends for its `role`.

    >>> conventional_case(Role.script, ScriptSubtag('LATN'))
    ScriptSubtag('Latn')
    >>> conventional_case(Role.region, RegionSubtag('gb'))
    RegionSubtag('GB')
    >>> conventional_case(Role.variant, '1996')
    '1996'
    """
    if role is Role.script:
        folded = value.title()
    elif role is Role.region:
        folded = value.upper()
    else:
        folded = value.lower()
    return type(value)(folded)


class LanguageTag(object):

    """A language tag broken down into its subtags.

    Exactly one of the following is true of any instance:

    - :attr:`grandfathered`: the whole tag is one of the irregular or regular
      grandfathered tags, and it is stored in :attr:`grandfathered_tag`;
    - :attr:`privateuse_only`: the tag starts with ``x`` and consists only
      of :attr:`privateuse` subtags;
    - :attr:`language` is set, optionally followed by :attr:`extlang`,
      :attr:`script`, :attr:`region`, :attr:`variants`, :attr:`extensions`
      and :attr:`privateuse`.

    :attr:`extensions` is an ordered mapping from a singleton (one character)
    to the list of subtags that follow it.

    Converting an instance to a string joins its subtags with hyphens,
    in the order of the grammar and with the case they have.
    """

    __slots__ = ('language', 'extlang', 'script', 'region', 'variants',
                 'extensions', 'privateuse', 'grandfathered_tag',
                 'privateuse_only')

    def __init__(self, language=None, extlang=None, script=None, region=None,
                 variants=None, extensions=None, privateuse=None,
                 grandfathered_tag=None, privateuse_only=False):
        self.language = language
        self.extlang = list(extlang or [])
        self.script = script
        self.region = region
        self.variants = list(variants or [])
        self.extensions = OrderedDict(extensions or [])
        self.privateuse = list(privateuse or [])
        self.grandfathered_tag = grandfathered_tag
        self.privateuse_only = privateuse_only

    grandfathered = property(lambda self: self.grandfathered_tag is not None)

    def __repr__(self):
        return '<LanguageTag %s>' % self

    def __str__(self):
        return '-'.join(value for (_, value) in self.subtags())

    def __eq__(self, other):
        if isinstance(other, LanguageTag):
            return all(getattr(self, name) == getattr(other, name)
                       for name in self.__slots__)
        return NotImplemented

    def __ne__(self, other):
        return not (self == other)

    __hash__ = None

    def subtags(self):
        """List the subtags as ``(role, value)`` pairs, in tag order.

        The ``x`` that introduces private use gets :attr:`Role.singleton`.
        A grandfathered tag is a single pair with :attr:`Role.grandfathered`.
        """
        if self.grandfathered:
            return [(Role.grandfathered, self.grandfathered_tag)]
        r = []
        if self.language is not None:
            r.append((Role.language, self.language))
        r.extend((Role.extlang, subtag) for subtag in self.extlang)
        if self.script is not None:
            r.append((Role.script, self.script))
        if self.region is not None:
            r.append((Role.region, self.region))
        r.extend((Role.variant, subtag) for subtag in self.variants)
        for singleton, values in self.extensions.items():
            r.append((Role.singleton, singleton))
            r.extend((Role.extension, value) for value in values)
        if self.privateuse or self.privateuse_only:
            r.append((Role.singleton, 'x'))
            r.extend((Role.privateuse, subtag) for subtag in self.privateuse)
        return r

    def copy(self):
        return LanguageTag(self.language, self.extlang, self.script,
                           self.region, self.variants,
                           [(singleton, list(values))
                            for (singleton, values) in self.extensions.items()],
                           self.privateuse, self.grandfathered_tag,
                           self.privateuse_only)
