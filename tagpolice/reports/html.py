# -*- coding: utf-8; -*-

from functools import singledispatch
import pkgutil

import dominate
import dominate.tags as H
from dominate.util import text as text_node

from tagpolice import known, notice
from tagpolice.__metadata__ import version
from tagpolice.citation import Citation
from tagpolice.reports.common import (describe_subtag, expand_piece,
                                      resolve_reference)
from tagpolice.structure import conventional_case
from tagpolice.util.text import printable


###############################################################################
# High-level templates.


css_code = pkgutil.get_data('tagpolice.reports', 'html.css').decode('utf-8')


def html_report(validations, buf):
    """Generate an HTML report with check results.

    :param validations:
        An iterable of :class:`~tagpolice.Validation` objects,
        as returned by :func:`~tagpolice.validate`.

    :param buf:
        The file (or file-like object) to which the report will be written.
        It must be opened in binary mode (not text).

    """
    title = 'TagPolice report'
    document = dominate.document(title=title)
    _common_meta(document)
    with document.body:
        H.attr(_class='report')
    with document:
        H.h1(title)
        _render_validations(validations)
    buf.write(document.render().encode('utf-8'))


class Placeholder(object):

    """A magical placeholder used for rendering the notices list."""

    def __init__(self, name=None):
        self.__name = name

    def get(self, name, _=None):
        return Placeholder(name)

    def __getitem__(self, name):
        return self.get(name)

    def __getattr__(self, name):
        return self.get(name)

    def __str__(self):
        return self.__name


def list_notices(buf):
    """Render the list of all notices to the file-like `buf`."""
    title = 'TagPolice notices'
    document = dominate.document(title=title)
    _common_meta(document)
    with document.body:
        H.attr(_class='notices-list')
    with document:
        H.h1(title)
        placeholder = Placeholder()
        for id_ in sorted(notice.all_notices.keys()):
            _notice_to_html(notice.all_notices[id_], placeholder,
                            with_anchor=True)
    buf.write(document.render().encode('utf-8'))


def _common_meta(document):
    with document:
        H.attr(lang='en')
    with document.head:
        H.meta(charset='utf-8')
        H.meta(name='generator', content='TagPolice %s' % version)
        H.style(type='text/css').add_raw_string(css_code)
        H.base(_target='blank')


def _render_validations(validations):
    # The ``hr`` elements really help readability in w3m.
    H.hr()
    for validation in validations:
        with H.div(_class='validation'):
            _render_tag(validation)
            _render_complaints(validation)
        H.hr()


def _render_tag(validation):
    with H.section(_class='tag-display'):
        if validation.remark:
            H.p(printable(validation.remark), _class='tag-remark')
        with H.h2(), H.code():
            text_node(printable(validation.text))
        if validation.tag is None:
            H.p('Not a well-formed tag', _class='verdict malformed')
            return
        if validation.valid:
            H.p('Valid', _class='verdict valid')
        else:
            H.p('Well-formed, but not valid', _class='verdict invalid')
        if validation.canonical != validation.text:
            with H.p(_class='canonical'):
                text_node('Canonical form: ')
                H.code(validation.canonical)
        with H.table(_class='subtags'):
            for role, value in validation.tag.subtags():
                with H.tr():
                    H.td(describe_subtag(role, value))
                    with H.td(), H.code():
                        _render_known(conventional_case(role, value))


def _render_complaints(validation):
    if validation.notices:
        with H.div(_class='complaints'):
            for complaint in validation.notices:
                _notice_to_html(complaint.notice, complaint.context)


###############################################################################
# Templates for pieces of notice explanations.


def _render_known(obj):
    """Render a subtag, with a link to the registry if it is registered."""
    text = printable(str(obj))
    title = known.title(obj, with_citation=True)
    cite = known.citation(obj)
    if cite and title:
        H.a(text, href=cite.url, title=title)
    else:
        text_node(text)


def _notice_to_html(the_notice, ctx, with_anchor=False):
    anchor = {'id': str(the_notice.id)} if with_anchor else {}
    with H.div(_class='notice %s' % the_notice.severity.name, **anchor):
        with H.h3():
            # We don't insert spaces here because,
            # without ``__pretty=False``,
            # Dominate renders each element on its own line,
            # thus implicitly creating whitespace.
            H.abbr(the_notice.severity_short, _class='severity',
                   title=the_notice.severity.name)
            H.span(str(the_notice.id), _class='ident')
            with H.span(__pretty=False):
                _piece_to_html(the_notice.title, ctx)
        for piece in the_notice.explanation:
            _piece_to_html(piece, ctx)


@singledispatch
def _piece_to_html(piece, ctx):
    _piece_to_html(expand_piece(piece), ctx)

@_piece_to_html.register(str)
def _text_to_html(text, _):
    text_node(printable(text))

@_piece_to_html.register(list)
def _list_to_html(xs, ctx):
    for x in xs:
        _piece_to_html(x, ctx)

@_piece_to_html.register(notice.Paragraph)
def _paragraph_to_html(para, ctx):
    with H.p(__pretty=False):
        _piece_to_html(para.content, ctx)

@_piece_to_html.register(notice.Literal)
def _literal_to_html(elem, ctx):
    with H.code(__pretty=False):
        _piece_to_html(elem.content, ctx)

@_piece_to_html.register(notice.Known)
def _known_elem_to_html(elem, _):
    with H.code(__pretty=False):
        _render_known(elem.content)

@_piece_to_html.register(notice.Var)
def _var_to_html(var, ctx):
    target = resolve_reference(ctx, var.reference)
    with H.var(__pretty=False):
        _piece_to_html(target, ctx)

@_piece_to_html.register(notice.Cite)
def _cite_elem_to_html(elem, ctx):
    _piece_to_html(elem.info, ctx)
    quote = elem.content
    if quote:
        text_node(': ')
        with H.q():
            _piece_to_html(quote, ctx)

@_piece_to_html.register(Citation)
def _cite_to_html(cite, _):
    with H.cite():
        H.a(cite.title, href=cite.url)

@_piece_to_html.register(Placeholder)
def _placeholder_to_html(placeholder, _):
    text_node(str(placeholder))

for _cls in known.classes:
    _piece_to_html.register(_cls, lambda obj, _: _render_known(obj))
