class ListError(Exception):
    def __init__(self, message):
        super().__init__(message)


class OutOfRange(ListError, IndexError):
    """Raised by the checked accessors when an index has no corresponding token."""

    index: int
    length: int

    def __init__(self, index: int, length: int):
        super().__init__("Index %d out of range for list of length %d" % (index, length))
        self.index = index
        self.length = length
