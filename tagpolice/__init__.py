# -*- coding: utf-8; -*-

from tagpolice.__metadata__ import version as __version__
from tagpolice.blackboard import Complaint
from tagpolice.canonical import canonicalize
from tagpolice.check import check_registry
from tagpolice.notice import Kind, Severity
from tagpolice.parse import parse
from tagpolice.reports.html import html_report
from tagpolice.reports.text import text_report
from tagpolice.structure import LanguageTag, Role
from tagpolice.validation import (Validation, is_valid, is_well_formed,
                                  validate)

__all__ = [
    'Complaint',
    'Kind',
    'LanguageTag',
    'Role',
    'Severity',
    'Validation',
    'canonicalize',
    'check_registry',
    'html_report',
    'is_valid',
    'is_well_formed',
    'parse',
    'text_report',
    'validate',
]
