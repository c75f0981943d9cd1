# -*- coding: utf-8; -*-

import sys

import tagpolice.reports.html
from tagpolice.util.text import stdio_as_bytes


def main():
    tagpolice.reports.html.list_notices(stdio_as_bytes(sys.stdout))

if __name__ == '__main__':
    main()
