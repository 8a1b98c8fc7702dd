"""Iterator - traverse a collection without exposing its representation.

Every iterator offers the explicit has_next()/next()/reset() protocol and is
also a regular Python iterator, so it works in for-loops and list().
"""

from abc import ABC, abstractmethod
from collections import deque
from typing import Generic, List, Optional, Sequence, TypeVar

from pattern_catalog.infrastructure.narration import narrate, section

T = TypeVar("T")


class CollectionIterator(ABC, Generic[T]):

    @abstractmethod
    def has_next(self) -> bool:
        pass

    @abstractmethod
    def _advance(self) -> T:
        """Return the current element and move on; only called when has_next()."""

    @abstractmethod
    def reset(self) -> None:
        pass

    def next(self) -> Optional[T]:
        """Next element, or None when exhausted."""
        if not self.has_next():
            return None
        return self._advance()

    def __iter__(self) -> "CollectionIterator[T]":
        return self

    def __next__(self) -> T:
        if not self.has_next():
            raise StopIteration
        return self._advance()


# =============================================================================
# NUMBER COLLECTION
# =============================================================================

class ForwardIterator(CollectionIterator[int]):

    def __init__(self, items: Sequence[int]):
        self._items = list(items)
        self._index = 0

    def has_next(self) -> bool:
        return self._index < len(self._items)

    def _advance(self) -> int:
        value = self._items[self._index]
        self._index += 1
        return value

    def reset(self) -> None:
        self._index = 0


class BackwardIterator(CollectionIterator[int]):

    def __init__(self, items: Sequence[int]):
        self._items = list(items)
        self._index = len(self._items) - 1

    def has_next(self) -> bool:
        return self._index >= 0

    def _advance(self) -> int:
        value = self._items[self._index]
        self._index -= 1
        return value

    def reset(self) -> None:
        self._index = len(self._items) - 1


class _FilteredIterator(CollectionIterator[int]):
    """Forward iterator that skips elements failing a predicate."""

    def __init__(self, items: Sequence[int]):
        self._items = list(items)
        self._index = 0
        self._skip()

    def accept(self, value: int) -> bool:
        raise NotImplementedError

    def _skip(self) -> None:
        while self._index < len(self._items) and not self.accept(self._items[self._index]):
            self._index += 1

    def has_next(self) -> bool:
        return self._index < len(self._items)

    def _advance(self) -> int:
        value = self._items[self._index]
        self._index += 1
        self._skip()
        return value

    def reset(self) -> None:
        self._index = 0
        self._skip()


class EvenNumbersIterator(_FilteredIterator):

    def accept(self, value: int) -> bool:
        return value % 2 == 0


class OddNumbersIterator(_FilteredIterator):

    def accept(self, value: int) -> bool:
        return value % 2 != 0


class NumberCollection:

    def __init__(self, numbers: Optional[Sequence[int]] = None):
        self._numbers: List[int] = list(numbers or [])

    def add(self, number: int) -> None:
        self._numbers.append(number)

    def remove(self, index: int) -> Optional[int]:
        if not 0 <= index < len(self._numbers):
            return None
        return self._numbers.pop(index)

    def __len__(self) -> int:
        return len(self._numbers)

    def forward_iterator(self) -> ForwardIterator:
        return ForwardIterator(self._numbers)

    def backward_iterator(self) -> BackwardIterator:
        return BackwardIterator(self._numbers)

    def even_iterator(self) -> EvenNumbersIterator:
        return EvenNumbersIterator(self._numbers)

    def odd_iterator(self) -> OddNumbersIterator:
        return OddNumbersIterator(self._numbers)


# =============================================================================
# TREE
# =============================================================================

class TreeNode:

    def __init__(self, value: str):
        self.value = value
        self.children: List["TreeNode"] = []

    def add_child(self, child: "TreeNode") -> "TreeNode":
        self.children.append(child)
        return child


class DepthFirstIterator(CollectionIterator[str]):

    def __init__(self, root: Optional[TreeNode]):
        self._root = root
        self._stack: List[TreeNode] = []
        self.reset()

    def has_next(self) -> bool:
        return bool(self._stack)

    def _advance(self) -> str:
        node = self._stack.pop()
        # reversed so the leftmost child is visited first
        self._stack.extend(reversed(node.children))
        return node.value

    def reset(self) -> None:
        self._stack = [self._root] if self._root is not None else []


class BreadthFirstIterator(CollectionIterator[str]):

    def __init__(self, root: Optional[TreeNode]):
        self._root = root
        self._queue: deque = deque()
        self.reset()

    def has_next(self) -> bool:
        return bool(self._queue)

    def _advance(self) -> str:
        node = self._queue.popleft()
        self._queue.extend(node.children)
        return node.value

    def reset(self) -> None:
        self._queue = deque([self._root] if self._root is not None else [])


class LeafOnlyIterator(CollectionIterator[str]):

    def __init__(self, root: Optional[TreeNode]):
        self._leaves: List[str] = []
        self._index = 0
        self._collect(root)

    def _collect(self, node: Optional[TreeNode]) -> None:
        if node is None:
            return
        if not node.children:
            self._leaves.append(node.value)
        for child in node.children:
            self._collect(child)

    def has_next(self) -> bool:
        return self._index < len(self._leaves)

    def _advance(self) -> str:
        value = self._leaves[self._index]
        self._index += 1
        return value

    def reset(self) -> None:
        self._index = 0


class Tree:

    def __init__(self, root: Optional[TreeNode] = None):
        self.root = root

    def depth_first_iterator(self) -> DepthFirstIterator:
        return DepthFirstIterator(self.root)

    def breadth_first_iterator(self) -> BreadthFirstIterator:
        return BreadthFirstIterator(self.root)

    def leaf_iterator(self) -> LeafOnlyIterator:
        return LeafOnlyIterator(self.root)


# =============================================================================
# MATRIX
# =============================================================================

class _IndexedIterator(CollectionIterator[int]):
    """Iterates a precomputed element order."""

    def __init__(self, elements: List[int]):
        self._elements = elements
        self._index = 0

    def has_next(self) -> bool:
        return self._index < len(self._elements)

    def _advance(self) -> int:
        value = self._elements[self._index]
        self._index += 1
        return value

    def reset(self) -> None:
        self._index = 0


class RowMajorIterator(CollectionIterator[int]):

    def __init__(self, data: List[List[int]]):
        self._data = data
        self._columns = len(data[0]) if data else 0
        self._row = 0
        self._col = 0

    def has_next(self) -> bool:
        return self._row < len(self._data) and self._col < self._columns

    def _advance(self) -> int:
        value = self._data[self._row][self._col]
        self._col += 1
        if self._col >= self._columns:
            self._col = 0
            self._row += 1
        return value

    def reset(self) -> None:
        self._row = 0
        self._col = 0


class ColumnMajorIterator(CollectionIterator[int]):

    def __init__(self, data: List[List[int]]):
        self._data = data
        self._rows = len(data)
        self._columns = len(data[0]) if data else 0
        self._row = 0
        self._col = 0

    def has_next(self) -> bool:
        return self._rows > 0 and self._col < self._columns

    def _advance(self) -> int:
        value = self._data[self._row][self._col]
        self._row += 1
        if self._row >= self._rows:
            self._row = 0
            self._col += 1
        return value

    def reset(self) -> None:
        self._row = 0
        self._col = 0


class DiagonalIterator(_IndexedIterator):

    def __init__(self, data: List[List[int]]):
        size = min(len(data), len(data[0]) if data else 0)
        super().__init__([data[i][i] for i in range(size)])


class SpiralIterator(_IndexedIterator):

    def __init__(self, data: List[List[int]]):
        super().__init__(self._spiral_order(data))

    @staticmethod
    def _spiral_order(data: List[List[int]]) -> List[int]:
        if not data or not data[0]:
            return []
        elements = []
        top, bottom = 0, len(data) - 1
        left, right = 0, len(data[0]) - 1
        while top <= bottom and left <= right:
            for col in range(left, right + 1):
                elements.append(data[top][col])
            top += 1
            for row in range(top, bottom + 1):
                elements.append(data[row][right])
            right -= 1
            if top <= bottom:
                for col in range(right, left - 1, -1):
                    elements.append(data[bottom][col])
                bottom -= 1
            if left <= right:
                for row in range(bottom, top - 1, -1):
                    elements.append(data[row][left])
                left += 1
        return elements


class Matrix:

    def __init__(self, data: List[List[int]]):
        self.data = [list(row) for row in data]

    @property
    def rows(self) -> int:
        return len(self.data)

    @property
    def columns(self) -> int:
        return len(self.data[0]) if self.data else 0

    def row_major_iterator(self) -> RowMajorIterator:
        return RowMajorIterator(self.data)

    def column_major_iterator(self) -> ColumnMajorIterator:
        return ColumnMajorIterator(self.data)

    def diagonal_iterator(self) -> DiagonalIterator:
        return DiagonalIterator(self.data)

    def spiral_iterator(self) -> SpiralIterator:
        return SpiralIterator(self.data)

    def render(self) -> str:
        return "\n".join(" ".join(str(v) for v in row) for row in self.data)


def _join(values) -> str:
    return " ".join(str(v) for v in values)


def run_demo() -> None:
    section("Number Collection Iterators")
    numbers = NumberCollection(range(1, 11))
    narrate("Demo", f"Forward iteration: {_join(numbers.forward_iterator())}")
    narrate("Demo", f"Backward iteration: {_join(numbers.backward_iterator())}")
    narrate("Demo", f"Even numbers only: {_join(numbers.even_iterator())}")
    narrate("Demo", f"Odd numbers only: {_join(numbers.odd_iterator())}")

    section("Tree Iterators")
    root = TreeNode("Root")
    child1 = root.add_child(TreeNode("Child1"))
    child2 = root.add_child(TreeNode("Child2"))
    child1.add_child(TreeNode("Grandchild1"))
    child1.add_child(TreeNode("Grandchild2"))
    child2.add_child(TreeNode("Grandchild3"))
    tree = Tree(root)
    narrate("Demo", f"Depth-First traversal: {_join(tree.depth_first_iterator())}")
    narrate("Demo", f"Breadth-First traversal: {_join(tree.breadth_first_iterator())}")
    narrate("Demo", f"Leaf nodes only: {_join(tree.leaf_iterator())}")

    section("Matrix Iterators")
    matrix = Matrix([[1, 2, 3, 4], [5, 6, 7, 8], [9, 10, 11, 12]])
    narrate("Demo", f"Matrix:\n{matrix.render()}")
    narrate("Demo", f"Row-major order: {_join(matrix.row_major_iterator())}")
    narrate("Demo", f"Column-major order: {_join(matrix.column_major_iterator())}")
    narrate("Demo", f"Diagonal order: {_join(matrix.diagonal_iterator())}")
    narrate("Demo", f"Spiral order: {_join(matrix.spiral_iterator())}")

    section("Multiple Simultaneous Iterations")
    forward = numbers.forward_iterator()
    backward = numbers.backward_iterator()
    while forward.has_next() and backward.has_next():
        narrate("Demo", f"Forward: {forward.next()}, Backward: {backward.next()}")
