# -*- coding: utf-8; -*-


class Citation(object):

    """A reference to a relevant document."""

    __slots__ = ('title', 'url')
    __str__ = lambda self: self.title or self.url

    def __init__(self, title, url):
        self.title = title
        self.url = url

    def __repr__(self):
        return 'Citation(%r, %r)' % (self.title, self.url)

    def __eq__(self, other):
        return isinstance(other, Citation) and \
            self.title == other.title and self.url == other.url

    def __ne__(self, other):
        return not self == other

    def __hash__(self):
        return hash((self.title, self.url))


class RFC(Citation):

    """A reference to an RFC document, optionally to a section or appendix.

    >>> RFC(5646, section='4.5').url
    'https://tools.ietf.org/html/rfc5646#section-4.5'
    >>> RFC(5646, appendix='A').url
    'https://tools.ietf.org/html/rfc5646#appendix-A'
    """

    __slots__ = ('num', 'section', 'appendix')

    def __init__(self, num, section=None, appendix=None):
        assert bool(section) + bool(appendix) <= 1
        self.num = num = int(num)
        self.section = section = str(section) if section else None
        self.appendix = appendix = str(appendix) if appendix else None
        title = 'RFC\N{NO-BREAK SPACE}%d' % num
        url = 'https://tools.ietf.org/html/rfc%d' % num
        if section or appendix:
            word1 = '\N{SECTION SIGN}' if section else 'appendix'
            word2 = 'section' if section else 'appendix'
            title += '\N{NO-BREAK SPACE}%s\N{NO-BREAK SPACE}%s' % (
                word1, section or appendix)
            url += '#%s-%s' % (word2, section or appendix)
        super(RFC, self).__init__(title, url)


bcp47 = RFC(5646)

subtag_registry = Citation('IANA Language Subtag Registry',
                           'https://www.iana.org/assignments/'
                           'language-subtag-registry')
