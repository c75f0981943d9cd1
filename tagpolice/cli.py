# -*- coding: utf-8; -*-

"""The command-line interface to TagPolice."""

import argparse
import codecs
import collections
import sys
import traceback

import tagpolice
from tagpolice import inputs, reports
from tagpolice.notice import Severity
from tagpolice.util.text import printable, stdio_as_bytes
from tagpolice.validation import validate


def parse_args(argv):
    parser = argparse.ArgumentParser(
        description='Check BCP 47 language tags with TagPolice.')
    parser.add_argument('--version', action='version',
                        version='TagPolice %s' % tagpolice.__version__)
    parser.add_argument('-i', '--input', choices=inputs.formats,
                        default='args', metavar='FORMAT',
                        help='input format: tags as arguments (args), '
                             'files with one tag per line (lines), '
                             'or XML documents with xml:lang (xml)')
    parser.add_argument('-o', '--output', choices=reports.formats,
                        default='text', help='output format')
    parser.add_argument('-s', '--silence', metavar='ID', type=int,
                        action='append', help='silence the given notice ID')
    parser.add_argument('--fail-on',
                        choices=[severity.name for severity in Severity],
                        help='exit with a non-zero status '
                             'if any notices with this or higher severity '
                             'have been reported')
    parser.add_argument('--no-registry', dest='check_registry',
                        action='store_false',
                        help='only check syntax, not the subtag registry')
    parser.add_argument('--no-deprecated', dest='warn_on_deprecated',
                        action='store_false',
                        help='do not warn about deprecated subtags and tags')
    parser.add_argument('--no-redundant-script',
                        dest='warn_on_redundant_script', action='store_false',
                        help='do not warn about scripts implied by language')
    parser.add_argument('--canonical', action='store_true',
                        help='print the canonical form of every tag '
                             'instead of a report')
    parser.add_argument('--full-traceback', action='store_true',
                        help='do not hide the traceback on exceptions')
    parser.add_argument('item', nargs='+', metavar='TAG_OR_PATH')
    return parser.parse_args(argv[1:])


def run_cli(args, stdout, stderr):
    input_ = inputs.formats[args.input]
    report = canonical_report if args.canonical else \
        reports.formats[args.output]
    n_notices = collections.Counter()
    def generate_validations():
        for (text, remark) in input_(args.item):
            validation = validate(
                text, check_registry=args.check_registry,
                warn_on_deprecated=args.warn_on_deprecated,
                warn_on_redundant_script=args.warn_on_redundant_script,
                remark=remark)
            if args.silence:
                validation.silence(args.silence)
            n_notices.update(complaint.severity
                             for complaint in validation.notices)
            yield validation

    try:
        # Reports are always encoded into UTF-8 and written as bytes,
        # because stdout may be opened as text in another encoding
        # (especially on Windows), and tags may contain anything.
        report(generate_validations(), stdio_as_bytes(stdout))
    except (EnvironmentError, inputs.InputError) as exc:
        if args.full_traceback:
            traceback.print_exc(file=stderr)
        stderr.write('tagpolice: %s\n' % exc)
        return 1

    if args.fail_on is not None:
        for severity in Severity:
            if severity >= Severity[args.fail_on] and n_notices[severity] > 0:
                return 1
    return 0


def canonical_report(validations, buf):
    """Write ``<tag> TAB <canonical form>`` lines, with ``-`` for bad tags."""
    f = codecs.getwriter('utf-8')(buf)
    for validation in validations:
        f.write('%s\t%s\n' % (printable(validation.text),
                              validation.canonical or '-'))


def excepthook(_type, exc, _traceback):     # pragma: no cover
    sys.stderr.write('tagpolice: unhandled exception: %r\n' % exc)


def main():     # pragma: no cover
    args = parse_args(sys.argv)
    if not args.full_traceback:
        sys.excepthook = excepthook
    sys.exit(run_cli(args, sys.stdout, sys.stderr))

if __name__ == '__main__':
    main()
