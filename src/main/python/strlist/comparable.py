import typing


class Comparable(typing.Protocol):
    def __lt__(self, other: typing.Any) -> bool:
        pass

    def __hash__(self) -> int:
        pass


C = typing.TypeVar('C', bound=Comparable)
