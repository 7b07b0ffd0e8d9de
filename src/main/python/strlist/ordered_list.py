from __future__ import annotations

import collections.abc
import logging
import typing

from .comparable import C
from .config import NOT_FOUND
from .errors import OutOfRange

logger = logging.getLogger(__name__)


class OrderedList(collections.abc.Sequence, typing.Generic[C]):
    """
    An ordered, mutable sequence paired with an internal traversal cursor.

    Operations come in two access modes. Checked operations (``next``, ``previous``, ``peek_next``,
    ``move_to``, ``get_at``, ``set_at`` and ``delete_at``) validate the index first and raise
    :class:`OutOfRange` without modifying anything. Unchecked operations (``get``, ``first``, ``last``,
    the views and item access) assume the caller already holds a valid index and fail with whatever
    the underlying list raises.

    The cursor starts at -1, before the first element.
    """
    values: typing.List[C]

    def __init__(self, values: typing.Optional[typing.Iterable[C]] = None):
        self.values = list(values) if values is not None else []
        self._cursor = -1

    def _derive(self, values: typing.Iterable[C]) -> OrderedList[C]:
        return type(self)(values)

    def _check(self, index: int):
        if self.is_out_of_bound(index):
            logger.debug("Rejected index %d for list of length %d", index, len(self.values))
            raise OutOfRange(index, len(self.values))

    def length(self) -> int:
        return len(self.values)

    def is_empty(self) -> bool:
        return self.length() == 0

    def is_out_of_bound(self, index: int) -> bool:
        return index < 0 or index >= self.length()

    # Cursor navigation

    @property
    def cursor(self) -> int:
        return self._cursor

    @cursor.setter
    def cursor(self, value: int):
        self.move_to(value)

    def first(self) -> C:
        self._cursor = 0
        return self.values[self._cursor]

    def last(self) -> C:
        self._cursor = self.length() - 1
        return self.values[self._cursor]

    def has_next(self) -> bool:
        return self.length() - self._cursor > 1

    def has_previous(self) -> bool:
        return 0 < self._cursor <= self.length()

    def next(self) -> C:
        self._check(self._cursor + 1)
        self._cursor += 1
        return self.values[self._cursor]

    def __next__(self) -> C:
        return self.next()

    def previous(self) -> C:
        self._check(self._cursor - 1)
        self._cursor -= 1
        return self.values[self._cursor]

    def peek_next(self) -> C:
        self._check(self._cursor + 1)
        return self.values[self._cursor + 1]

    def move_to(self, index: int):
        self._check(index)
        self._cursor = index

    def rewind(self):
        self._cursor = -1

    def get(self) -> C:
        """
        :return: The element under the cursor. Unchecked: the cursor must point at an element.
        """
        return self.values[self._cursor]

    # Bounds-checked random access

    def get_at(self, position: int) -> C:
        self._check(position)
        return self.values[position]

    def set_at(self, position: int, value: C):
        self._check(position)
        self.values[position] = value

    def delete_at(self, position: int):
        """
        Removes the element at ``position``, shifting every later element one place left. The cursor is
        left where it is.

        :param position: Index of the element to remove.
        :raises OutOfRange: If ``position`` has no element; the list is left unchanged.
        """
        self._check(position)
        del self.values[position]

    def find(self, value: C) -> int:
        for index, item in enumerate(self.values):
            if item == value:
                return index

        return NOT_FOUND

    def exist(self, value: C) -> bool:
        return self.find(value) != NOT_FOUND

    def count(self, value: C) -> int:
        return sum(1 for item in self.values if item == value)

    # Ordering

    def sort(self):
        self.values.sort()

    def reverse(self):
        """Sorts into descending order. This does not simply flip the current order."""
        self.values.sort(reverse=True)

    def dedup(self):
        seen = set()
        distinct = []
        for item in self.values:
            if item not in seen:
                seen.add(item)
                distinct.append(item)

        removed = len(self.values) - len(distinct)
        if removed:
            logger.debug("Removed %d duplicate(s)", removed)
        self.values[:] = distinct

    # Views

    def range(self, start: int, end: int) -> OrderedList[C]:
        return self._derive(self.values[start:end])

    def from_index(self, start: int) -> OrderedList[C]:
        return self._derive(self.values[start:])

    def until(self, end: int) -> OrderedList[C]:
        return self._derive(self.values[:end])

    def copy(self) -> OrderedList[C]:
        return self._derive(self.values)

    def to_array(self) -> typing.List[C]:
        return list(self.values)

    # Sequence protocol

    def __len__(self) -> int:
        return self.length()

    def __iter__(self) -> typing.Iterator[C]:
        return iter(self.values)

    def __contains__(self, value) -> bool:
        return self.exist(value)

    def __getitem__(self, index):
        if isinstance(index, slice):
            return self._derive(self.values[index])
        else:
            return self.values[index]

    def __eq__(self, other) -> bool:
        if isinstance(other, OrderedList):
            return self.values == other.values
        elif isinstance(other, (list, tuple)):
            return self.values == list(other)
        else:
            return NotImplemented

    __hash__ = None

    def __repr__(self):
        return f'{type(self).__name__}({self.values!r})'
