# -*- coding: utf-8; -*-

"""Access to the TagPolice notices base.

Notices are written and stored in XML (``notices.xml``).
Their titles and explanations are free-form markup with placeholders
and citations, which is what XML mixed content is good at,
and lxml makes it easy to map XML elements to custom classes.
To render a notice, we recursively reduce these custom classes to strings,
obtaining an HTML tree (or plain text) along the way.

This module exposes the :data:`all_notices` variable,
which is a map from notice ID (:class:`int`) to :class:`Notice`.
"""

import copy
from enum import Enum
import pkgutil

import lxml.etree

from tagpolice import citation, known
from tagpolice.util.ordered_enum import OrderedEnum


lookup = lxml.etree.ElementNamespaceClassLookup()
ns = lookup.get_namespace(None)


class Severity(OrderedEnum):

    """A notice's severity.

    This is an enumeration whose members are ordered:

    >>> Severity.comment < Severity.error
    True

    The underlying values of this enumeration are **not** part of the API.
    """

    error = 2
    comment = 1
    debug = 0


class Kind(Enum):

    """What sort of problem a notice describes.

    Syntax kinds make a tag malformed, registry kinds make it invalid,
    and advisory kinds are mere warnings.
    """

    malformed = 'malformed'
    invalid_syntax = 'invalid-syntax'
    duplicate_variant = 'duplicate-variant'
    duplicate_singleton = 'duplicate-singleton'
    invalid_extension = 'invalid-extension'
    invalid_private_use = 'invalid-private-use'
    invalid_order = 'invalid-order'

    unknown_language = 'unknown-language'
    unknown_extlang = 'unknown-extlang'
    unknown_script = 'unknown-script'
    unknown_region = 'unknown-region'

    deprecated_subtag = 'deprecated-subtag'
    deprecated_tag = 'deprecated-tag'
    redundant_script = 'redundant-script'

    @property
    def syntax(self):
        return self in _syntax_kinds

    @property
    def registry(self):
        return self in _registry_kinds

    @property
    def advisory(self):
        return self in _advisory_kinds


_syntax_kinds = frozenset([
    Kind.malformed, Kind.invalid_syntax, Kind.duplicate_variant,
    Kind.duplicate_singleton, Kind.invalid_extension,
    Kind.invalid_private_use, Kind.invalid_order])

_registry_kinds = frozenset([
    Kind.unknown_language, Kind.unknown_extlang, Kind.unknown_script,
    Kind.unknown_region])

_advisory_kinds = frozenset([
    Kind.deprecated_subtag, Kind.deprecated_tag, Kind.redundant_script])


known_map = {name: cls for (cls, (_, name)) in known.classes.items()}


@ns('error')
@ns('comment')
@ns('debug')
class Notice(lxml.etree.ElementBase):

    """An element that represents a single notice, as template."""

    id = property(lambda self: int(self.get('id')))
    severity = property(lambda self: Severity[self.tag])
    severity_short = property(lambda self: self.severity.name[0].upper())
    kind = property(lambda self: Kind(self.get('kind')))
    title = property(lambda self: self.find('title').content)

    @property
    def explanation(self):
        for child in self:
            if isinstance(child, Title) or child.tag is lxml.etree.Comment:
                continue
            elif isinstance(child, Paragraph):
                yield child
            else:
                # Assume that a wrapping ``<explain/>`` was omitted.
                para = _parser.makeelement('explain')
                para.append(copy.deepcopy(child))
                yield para


class Content(lxml.etree.ElementBase):

    """An element that has further content inside it."""

    @property
    def content(self):
        r = [self.text]
        for child in self:
            r.append(child)
            r.append(child.tail)
        r = [piece for piece in r if piece is not None and piece != '']

        # Strip spaces from the first and last text children.
        # Useful for quotes.
        if r:
            if isinstance(r[0], str):
                r[0] = r[0].lstrip()
            if isinstance(r[-1], str):
                r[-1] = r[-1].rstrip()

        return r


@ns('explain')
class Paragraph(Content):

    """A paragraph of explanation."""

    pass


@ns('title')
class Title(Content):

    """A notice's title."""

    pass


@ns('var')
class Var(lxml.etree.ElementBase):

    """A placeholder for a piece of data from a notice's context."""

    reference = property(lambda self: self.get('ref').split('.'))


@ns('tt')
class Literal(Content):

    """A literal piece of a tag, like ``zh-TW-Hant``, which need not be valid."""

    pass


@ns('cite')
class Cite(Content):

    """A citation, with an optional quote."""

    @property
    def info(self):
        return citation.Citation(self.get('title'), self.get('url'))


@ns('rfc')
class CiteRFC(Cite):

    """A citation from an RFC, with an optional quote."""

    @property
    def info(self):
        return citation.RFC(self.get('num'),
                            self.get('sect'), self.get('appendix'))


class Known(Content):

    """A registered subtag mentioned in the text, such as ``<script>Latn``."""

    @property
    def content(self):
        [name] = super(Known, self).content
        return known_map[self.tag](name)


for tag in known_map:
    ns[tag] = Known


def _load_notices():
    parser = lxml.etree.XMLParser()
    parser.set_element_class_lookup(lookup)
    notices_xml = pkgutil.get_data('tagpolice', 'notices.xml')
    root = lxml.etree.fromstring(notices_xml, parser)
    r = {}
    for elem in root:
        if isinstance(elem, Notice):
            assert elem.id not in r
            r[elem.id] = elem
    return r, parser

(all_notices, _parser) = _load_notices()
