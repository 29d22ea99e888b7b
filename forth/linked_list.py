from typing import (
    Any,
    Generic,
    Iterator,
    List,
    Optional,
    Tuple,
    TypeVar,
)
from typing_extensions import Never

_T_co = TypeVar('_T_co', covariant=True)


class LinkedList(Generic[_T_co]):
    """An immutable singly linked list.

    The first element is the head. Pushing and popping share the tail, so
    older lists stay valid after a new one is built from them."""

    def __init__(
        self, _val: Optional[Tuple[_T_co, 'LinkedList[_T_co]']]
    ) -> None:
        self._val = _val
        if _val is None:
            self._length = 0
        else:
            self._length = 1 + len(_val[1])

    def push(self, *elements: Any) -> 'LinkedList[Any]':
        """Return a list with elements added in order, the last on top."""
        l: LinkedList[Any] = self
        for el in elements:
            l = LinkedList((el, l))
        return l

    def pop(self, n: int) -> 'Tuple[List[_T_co], LinkedList[_T_co]]':
        """Split off the first n elements.

        Returns the elements head first, and the remaining list. Raises
        IndexError if the list is shorter than n."""
        if n > self._length:
            raise IndexError(n)
        popped: List[_T_co] = []
        l = self
        for _ in range(n):
            assert l._val is not None
            head, l = l._val
            popped.append(head)
        return popped, l

    def __getitem__(self, i: int) -> _T_co:
        if i < 0:
            i += self._length
        if i < 0:
            raise IndexError
        for _ in range(i):
            if self._val is None:
                raise IndexError
            self = self._val[1]
        if self._val is None:
            raise IndexError
        return self._val[0]

    def __len__(self) -> int:
        return self._length

    def __iter__(self) -> Iterator[_T_co]:
        while self._val is not None:
            yield self._val[0]
            self = self._val[1]

    def __str__(self) -> str:
        return str(list(self))

    def __repr__(self) -> str:
        return f'empty_list.push(*{list(self)[::-1]!r})'

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LinkedList):
            return NotImplemented
        if len(self) != len(other):
            return False
        for a, b in zip(self, other):
            if a != b:
                return False
        return True

    def __hash__(self) -> int:
        return hash(tuple(self))


empty_list = LinkedList[Never](None)

Stack = LinkedList[int]
