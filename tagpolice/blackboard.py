# -*- coding: utf-8; -*-

from collections import namedtuple

from tagpolice.notice import all_notices


class Complaint(namedtuple('Complaint', ('notice', 'context'))):

    """A notice as reported about a particular tag.

    Syntax errors, registry problems and warnings are all complaints;
    they differ only in their notice's :attr:`kind` and :attr:`severity`.
    """

    __slots__ = ()

    @property
    def id(self):
        """The notice's ID (an integer)."""
        return self.notice.id

    @property
    def severity(self):
        """
        The notice's severity,
        as a member of the :class:`~tagpolice.Severity` enumeration.
        """
        return self.notice.severity

    @property
    def kind(self):
        """The notice's kind, as a member of :class:`~tagpolice.notice.Kind`."""
        return self.notice.kind

    subtag = property(lambda self: self.context.get('subtag'))
    role = property(lambda self: self.context.get('role'))
    position = property(lambda self: self.context.get('position'))
    suggested_replacement = property(
        lambda self: self.context.get('replacement'))

    @property
    def message(self):
        """The notice's title with the context filled in, as plain text."""
        # Imported here because the reports depend on this module.
        from tagpolice.reports.text import complaint_title
        return complaint_title(self)

    def __repr__(self):
        return '<Complaint %d %s>' % (self.id, self.message)


def make_complaint(notice_id, **context):
    return Complaint(all_notices[notice_id], context)


class Blackboard(object):

    """Something that complaints can be written upon.

    The main way of "writing upon" a blackboard is :meth:`complain`.
    """

    def __init__(self):
        self._complaints = []
        self._silenced = set()

    def complain(self, notice_id, **kwargs):
        """Report a notice on this blackboard."""
        self.add_complaint(make_complaint(notice_id, **kwargs))

    def add_complaint(self, complaint):
        if complaint not in self._complaints:
            self._complaints.append(complaint)

    def silence(self, notice_ids):
        """Silence unwanted notices on this object.

        :param notice_ids:
          An iterable of notice IDs that will be silenced on this object,
          so they don't appear in :attr:`notices` or in reports.
        """
        self._silenced.update(notice_ids)

    @property
    def complaints(self):
        """
        A list of :class:`~tagpolice.Complaint` instances
        reported on this object.
        """
        return [complaint for complaint in self._complaints
                if complaint.notice.id not in self._silenced]

    # Inside our codebase, there is a clear distinction
    # between a notice and a complaint.
    # But the user need not bother with this detail.
    notices = complaints
