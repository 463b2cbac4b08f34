"""Array-backed binary heap with a pluggable ordering.

The tree is stored 1-indexed: slot 0 is an unused sentinel, the root lives
at index 1 and the children of ``i`` are ``2 * i`` and ``2 * i + 1``.
"""

import operator
from typing import TypeVar, Generic, List, Iterable, Iterator, Optional, Callable

T = TypeVar('T')

Order = Callable[[T, T], bool]


class Heap(Generic[T]):
    def __init__(self, order: Order) -> None:
        if not callable(order):
            raise TypeError("order must be a callable taking two elements")
        self._count: int = 0
        self._items: List[Optional[T]] = [None]
        self._order: Order = order

    @staticmethod
    def new_min() -> 'Heap[T]':
        return Heap(operator.lt)

    @staticmethod
    def new_max() -> 'Heap[T]':
        return Heap(operator.gt)

    @classmethod
    def from_iterable(cls, values: Iterable[T], *args) -> 'Heap[T]':
        """Build a heap by adding each value in turn.

        Extra positional arguments go to the constructor, so
        ``Heap.from_iterable(xs, order)`` and ``MinHeap.from_iterable(xs)``
        both work.
        """
        heap = cls(*args)
        for value in values:
            heap.add(value)
        return heap

    def len(self) -> int:
        return self._count

    def is_empty(self) -> bool:
        return self.len() == 0

    def add(self, value: T) -> None:
        if value is None:
            raise ValueError("None cannot be stored in a heap")
        self._count += 1

        if self._count >= len(self._items):
            self._items.append(value)
        else:
            self._items[self._count] = value

        current = self._count
        while current > 1 and self._order(self._items[current], self._items[self._parent_idx(current)]):
            parent = self._parent_idx(current)
            self._items[current], self._items[parent] = self._items[parent], self._items[current]
            current = parent

    def extract(self) -> Optional[T]:
        if self.is_empty():
            return None

        self._items[1], self._items[self._count] = self._items[self._count], self._items[1]
        self._count -= 1

        current = 1
        while self._children_present(current):
            child = self._smallest_child_idx(current)
            if self._order(self._items[child], self._items[current]):
                self._items[child], self._items[current] = self._items[current], self._items[child]
                current = child
            else:
                break

        # Vacated slot keeps no reference to the extracted element.
        value = self._items[self._count + 1]
        self._items[self._count + 1] = None
        return value

    def drain(self) -> List[T]:
        return list(self)

    def clear(self) -> None:
        self._count = 0
        self._items = [None]

    def copy(self) -> 'Heap[T]':
        clone: Heap[T] = Heap(self._order)
        clone._count = self._count
        clone._items = self._items.copy()
        return clone

    def _parent_idx(self, idx: int) -> int:
        return idx // 2

    def _children_present(self, idx: int) -> bool:
        return self._left_child_idx(idx) <= self._count

    def _left_child_idx(self, idx: int) -> int:
        return idx * 2

    def _right_child_idx(self, idx: int) -> int:
        return self._left_child_idx(idx) + 1

    def _smallest_child_idx(self, idx: int) -> int:
        left = self._left_child_idx(idx)
        right = self._right_child_idx(idx)
        # "Smallest" is the higher-priority child under the configured order.
        if right <= self._count and self._order(self._items[right], self._items[left]):
            return right
        return left

    def __len__(self) -> int:
        return self._count

    def __bool__(self) -> bool:
        return self._count > 0

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items[1:self._count + 1]})"

    def __str__(self) -> str:
        return f"{type(self).__name__}(size={self._count})"

    def __iter__(self) -> Iterator[T]:
        return self

    def __next__(self) -> T:
        value = self.extract()
        if value is None:
            raise StopIteration
        return value


class MinHeap(Heap[T]):
    def __init__(self) -> None:
        super().__init__(operator.lt)


class MaxHeap(Heap[T]):
    def __init__(self) -> None:
        super().__init__(operator.gt)
