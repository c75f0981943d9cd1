# -*- coding: utf-8; -*-

"""Checking a parsed tag against the registry.

Every subtag is looked up on its own. No attempt is made to check
that subtags make sense together (``ja-Cyrl-BR`` is perfectly valid).
"""

from tagpolice import known
from tagpolice.blackboard import make_complaint
from tagpolice.structure import Role, conventional_case


def check_registry(tag):
    """Look up the subtags of a parsed `tag` in the registry.

    :param tag:
        A :class:`~tagpolice.structure.LanguageTag`, which is not modified.

    :return:
        A list of :class:`~tagpolice.Complaint` instances, one for every
        unregistered subtag, in tag order. An empty list means
        the tag is valid.
    """
    if tag.grandfathered or tag.privateuse_only:
        return []

    problems = []

    if not known.language.is_known(tag.language):
        suggestion = known.language.suggestion(tag.language)
        if suggestion is None:
            problems.append(make_complaint(1100, subtag=tag.language,
                                           role=Role.language))
        else:
            problems.append(make_complaint(1101, subtag=tag.language,
                                           role=Role.language,
                                           replacement=suggestion))

    for subtag in tag.extlang:
        if not known.extlang.is_known(subtag):
            problems.append(make_complaint(1130, subtag=subtag,
                                           role=Role.extlang))

    if tag.script is not None and not known.script.is_known(tag.script):
        script = conventional_case(Role.script, tag.script)
        problems.append(make_complaint(1110, subtag=script,
                                       role=Role.script))

    if tag.region is not None and not known.region.is_known(tag.region):
        region = conventional_case(Role.region, tag.region)
        suggestion = known.region.suggestion(region)
        if suggestion is None:
            problems.append(make_complaint(1120, subtag=region,
                                           role=Role.region))
        else:
            problems.append(make_complaint(1121, subtag=region,
                                           role=Role.region,
                                           replacement=suggestion))

    return problems
