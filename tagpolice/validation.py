# -*- coding: utf-8; -*-

from tagpolice import known
from tagpolice.blackboard import Blackboard, make_complaint
from tagpolice.canonical import canonicalize
from tagpolice.check import check_registry as _check_registry
from tagpolice.parse import parse
from tagpolice.structure import LanguageTag, Role, conventional_case


class Validation(Blackboard):

    """The outcome of validating one language tag.

    Everything found about the tag is reported as complaints on this object.
    :attr:`problems` and :attr:`warnings` always list all of them,
    whereas :attr:`notices` (used in reports) honors :meth:`silence`.
    Silencing never changes :attr:`well_formed` or :attr:`valid`.
    """

    def __init__(self, text, remark=None):
        """
        :param text:
            The tag as given, a string.
        :param remark:
            If not `None`, a string that will be displayed next to the tag
            in reports, such as where it was found.
        """
        super(Validation, self).__init__()
        self.text = text
        self.remark = remark
        self.tag = None
        self.canonical = None

    def __repr__(self):
        return '<Validation %r>' % self.text

    @property
    def well_formed(self):
        return self.tag is not None

    @property
    def valid(self):
        return self.well_formed and not self.problems

    @property
    def problems(self):
        """Syntax errors or registry problems, as complaints."""
        return [complaint for complaint in self._complaints
                if not complaint.kind.advisory]

    @property
    def warnings(self):
        return [complaint for complaint in self._complaints
                if complaint.kind.advisory]


def validate(text, check_registry=True, warn_on_deprecated=True,
             warn_on_redundant_script=True, remark=None):
    """Parse and check a language tag.

    :param text:
        The tag to validate, as a string.
    :param check_registry:
        Whether to look up subtags in the registry. Without this,
        only syntax is checked, and any well-formed tag is also valid.
    :param warn_on_deprecated:
        Whether to warn about deprecated subtags and grandfathered tags
        that have a preferred value.
    :param warn_on_redundant_script:
        Whether to warn about a script that the language implies anyway.
    :param remark:
        Passed on to :class:`Validation`.

    :return:
        A :class:`Validation`.
    """
    validation = Validation(text, remark=remark)
    parsed = parse(text)
    if not isinstance(parsed, LanguageTag):
        for complaint in parsed:
            validation.add_complaint(complaint)
        return validation

    validation.tag = parsed
    validation.canonical = canonicalize(parsed)
    if check_registry:
        for complaint in _check_registry(parsed):
            validation.add_complaint(complaint)
    if warn_on_deprecated:
        for complaint in _deprecation_warnings(parsed):
            validation.add_complaint(complaint)
    if warn_on_redundant_script:
        for complaint in _redundant_script_warnings(parsed):
            validation.add_complaint(complaint)
    return validation


def is_well_formed(text):
    return isinstance(parse(text), LanguageTag)


def is_valid(text):
    return validate(text, warn_on_deprecated=False,
                    warn_on_redundant_script=False).valid


def _deprecation_warnings(tag):
    if tag.grandfathered:
        preferred = known.grandfathered.preferred_value(tag.grandfathered_tag)
        if preferred is not None:
            yield make_complaint(
                1201, role=Role.grandfathered, replacement=preferred,
                subtag=known.grandfathered.registered(tag.grandfathered_tag))
        return

    if tag.privateuse_only:
        return

    for (role, table, subtag) in [(Role.language, known.language,
                                   tag.language),
                                  (Role.script, known.script, tag.script),
                                  (Role.region, known.region, tag.region)]:
        if subtag is None:
            continue
        preferred = table.preferred_value(subtag)
        if preferred is not None:
            yield make_complaint(1200, role=role,
                                 subtag=conventional_case(role, subtag),
                                 replacement=preferred)


def _redundant_script_warnings(tag):
    if tag.script is None:
        return
    # ``iw-Hebr`` is as redundant as ``he-Hebr``.
    language = known.language.preferred_value(tag.language) or tag.language
    suppress = known.language.suppress_script(language)
    if suppress is not None and suppress == tag.script:
        yield make_complaint(1202, role=Role.script,
                             subtag=conventional_case(Role.script, tag.script),
                             language=tag.language)
