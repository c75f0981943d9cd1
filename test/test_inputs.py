# -*- coding: utf-8; -*-

import os

import pytest

from tagpolice.inputs import InputError, formats
from tagpolice.inputs.common import args_input
from tagpolice.inputs.documents import xml_input
from tagpolice.inputs.lines import lines_input


base_path = os.path.dirname(__file__)

def data_path(*parts):
    return os.path.join(base_path, *parts)


def test_formats():
    assert sorted(formats) == ['args', 'lines', 'xml']


def test_args():
    assert list(args_input(['en', 'fr-CA'])) == [('en', None),
                                                 ('fr-CA', None)]


def test_lines():
    path = data_path('lines_data', 'tags.txt')
    assert list(lines_input([path])) == [
        ('en-US', '%s:2' % path),
        ('ch-DE', '%s:4' % path),
        ('zh-Hant-TW', '%s:5' % path),
        ('en--US', '%s:6' % path),
    ]


def test_lines_not_utf8():
    with pytest.raises(InputError):
        list(lines_input([data_path('lines_data', 'not_utf8.txt')]))


def test_lines_missing_file():
    with pytest.raises(EnvironmentError):
        list(lines_input([data_path('lines_data', 'nonexistent.txt')]))


def test_xml():
    path = data_path('xml_data', 'page.xhtml')
    assert list(xml_input([path])) == [
        ('en-US', '%s: <html xml:lang>' % path),
        ('en-US', '%s: <html lang>' % path),
        ('ch-DE', '%s: <p lang>' % path),
        ('fr', '%s: <p xml:lang>' % path),
    ]


def test_xml_broken():
    with pytest.raises(InputError) as info:
        list(xml_input([data_path('xml_data', 'broken.xml')]))
    assert 'bad XML' in str(info.value)


def test_xml_entities():
    with pytest.raises(InputError) as info:
        list(xml_input([data_path('xml_data', 'entities.xml')]))
    assert 'refusing to process XML' in str(info.value)
