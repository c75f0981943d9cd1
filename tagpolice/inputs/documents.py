# -*- coding: utf-8; -*-

import xml.etree.ElementTree

import defusedxml
import defusedxml.ElementTree

from tagpolice.inputs.common import InputError


xml_lang = '{http://www.w3.org/XML/1998/namespace}lang'


def xml_input(paths):
    """Read tags from the ``xml:lang`` and ``lang`` attributes of documents.

    Both XML and XHTML are fine. The order of the attributes
    within one element is not preserved: ``xml:lang`` comes first.
    """
    for path in paths:
        with open(path, 'rb') as f:
            data = f.read()
        try:
            # Documents may be maliciously constructed.
            root = defusedxml.ElementTree.fromstring(data)
        except defusedxml.DefusedXmlException as exc:
            raise InputError('%s: refusing to process XML: %r' %
                             (path, exc)) from exc
        except xml.etree.ElementTree.ParseError as exc:
            raise InputError('%s: bad XML: %s' % (path, exc)) from exc

        for elem in root.iter():
            for (attr_name, display_name) in [(xml_lang, 'xml:lang'),
                                              ('lang', 'lang')]:
                value = elem.get(attr_name)
                if value is not None:
                    yield (value, '%s: <%s %s>' % (
                        path, _local_name(elem.tag), display_name))


def _local_name(name):
    """
    >>> _local_name('{http://www.w3.org/1999/xhtml}p')
    'p'
    >>> _local_name(xml_lang)
    'lang'
    """
    return name.rpartition('}')[2]
