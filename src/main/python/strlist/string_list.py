from __future__ import annotations

import logging
import typing

from .config import DEFAULT_SEPARATOR
from .ordered_list import OrderedList

logger = logging.getLogger(__name__)


class OrderedStringList(OrderedList[str]):
    """
    An ordered list of text tokens joined by ``separator`` when rendered as text.

    On top of the checked and unchecked accessors of :class:`OrderedList`, this adds the text
    constructors and serializers and the structural mutators. ``set``, ``set_last``, ``insert``,
    ``swap``, ``shift`` and ``split`` are unchecked and expect valid positions.
    """
    separator: str

    def __init__(self, values: typing.Optional[typing.Iterable[str]] = None, separator: str = DEFAULT_SEPARATOR):
        super().__init__(values)
        self.separator = separator

    @classmethod
    def from_array(cls, tokens: typing.Iterable[str], separator: str = DEFAULT_SEPARATOR) -> OrderedStringList:
        return cls(tokens, separator)

    @classmethod
    def from_text(cls, text: str, separator: str = DEFAULT_SEPARATOR) -> OrderedStringList:
        """
        :param text: The delimited text to parse. Empty tokens between adjacent separators are kept.
        :param separator: The literal separator. An empty separator splits ``text`` into characters.
        :return: A new list with its cursor before the first token.
        """
        if separator:
            tokens = text.split(separator)
        else:
            tokens = list(text)

        return cls(tokens, separator)

    def _derive(self, values: typing.Iterable[str]) -> OrderedStringList:
        return type(self)(values, self.separator)

    def to_text(self) -> str:
        return self.separator.join(self.values)

    def __str__(self):
        return self.to_text()

    def __repr__(self):
        return f'{type(self).__name__}({self.values!r}, separator={self.separator!r})'

    # Unchecked setters

    def set(self, value: str):
        self.values[self._cursor] = value

    def set_last(self, value: str):
        self.values[self.length() - 1] = value

    # Insertion

    def append(self, *values: str):
        self.values.extend(values)

    def append_new(self, *values: str):
        for value in values:
            if not self.exist(value):
                self.values.append(value)

    def insert(self, position: int, value: str):
        self.values.insert(position, value)

    # Deletion

    def delete(self):
        self.delete_at(self._cursor)

    def delete_first(self, value: str):
        index = self.find(value)
        if index >= 0:
            del self.values[index]

    def delete_last(self, value: str):
        for index in range(self.length() - 1, -1, -1):
            if self.values[index] == value:
                del self.values[index]
                return

    def delete_all(self, *values: str):
        targets = set(values)
        remaining = [value for value in self.values if value not in targets]

        removed = self.length() - len(remaining)
        if removed:
            logger.debug("Deleted %d token(s) matching %r", removed, values)
        self.values[:] = remaining

    # Repositioning

    def swap(self, x: int, y: int):
        self.values[x], self.values[y] = self.values[y], self.values[x]

    def shift(self, from_: int, to: int):
        """Moves the token at ``from_`` so that it ends up at ``to``."""
        self.values.insert(to, self.values.pop(from_))

    def split(self, position: int, *offsets: int):
        """
        Cuts the token at ``position`` into consecutive pieces and puts them in its place.

        :param position: Index of the token to cut.
        :param offsets: Increasing right boundaries of each piece; the first piece starts at 0.
        """
        token = self.values[position]

        pieces = []
        start = 0
        for offset in offsets:
            pieces.append(token[start:offset])
            start = offset

        self.values[position:position + 1] = pieces

    # Filtering and substitution

    def filter(self, *values: str):
        accepted = set(values)
        kept = [value for value in self.values if value in accepted]

        logger.debug("Filter kept %d of %d token(s)", len(kept), self.length())
        self.values[:] = kept

    def replacer(self, mapping: typing.Mapping[str, str]):
        for index, value in enumerate(self.values):
            if value in mapping:
                self.values[index] = mapping[value]

    # Text transforms

    def upper(self):
        self.values[:] = [value.upper() for value in self.values]

    def lower(self):
        self.values[:] = [value.lower() for value in self.values]

    def quote(self, char: str):
        if len(char) != 1:
            raise ValueError("Quote must be a single character, got '%s'" % char)

        self.values[:] = [f'{char}{value}{char}' for value in self.values]
