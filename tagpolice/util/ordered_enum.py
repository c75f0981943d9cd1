# -*- coding: utf-8; -*-

import enum
import functools


@functools.total_ordering
class OrderedEnum(enum.Enum):

    """An :class:`enum.Enum` whose members compare by their values.

    >>> class Size(OrderedEnum):
    ...     small = 1
    ...     large = 2
    >>> Size.small < Size.large
    True
    >>> max([Size.large, Size.small])
    <Size.large: 2>
    """

    def __lt__(self, other):
        if self.__class__ is other.__class__:
            return self.value < other.value
        return NotImplemented
