from .config import DEFAULT_SEPARATOR, NOT_FOUND
from .errors import ListError, OutOfRange
from .ordered_list import OrderedList
from .string_list import OrderedStringList

__all__ = ['DEFAULT_SEPARATOR', 'NOT_FOUND', 'ListError', 'OutOfRange', 'OrderedList', 'OrderedStringList']
