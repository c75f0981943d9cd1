# -*- coding: utf-8; -*-

from functools import singledispatch

from tagpolice import known, notice
from tagpolice.structure import Role


def resolve_reference(ctx, path):
    path = list(path)
    node = ctx[path.pop(0)]
    for attr_name in path:
        node = getattr(node, attr_name)
    return node


@singledispatch
def expand_piece(piece):
    return str(piece)

@expand_piece.register(notice.Content)
def expand_elem(elem):
    return elem.content

@expand_piece.register(Role)
def expand_role(role):
    return role.value


def describe_subtag(role, value):
    """A short human-readable description of a subtag, for reports."""
    title = known.title(value)
    if title:
        return '%s (%s)' % (role.value, title)
    return role.value
