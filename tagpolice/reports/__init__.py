# -*- coding: utf-8; -*-

from tagpolice.reports.html import html_report
from tagpolice.reports.text import text_report


formats = {
    'text': text_report,
    'html': html_report,
}
