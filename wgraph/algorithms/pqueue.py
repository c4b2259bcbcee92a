"""
Implements a binary min-heap of vertex ids keyed by an external distance list.
"""

from typing import List, Optional


class IndexedPriorityQueue:
    """
    Min-heap of vertex ids ordered by ``dist[v]``.

    The distance list is owned by the caller and shared, not copied. When the
    caller lowers ``dist[v]`` for a queued vertex it must call
    ``decrease_key(v)`` to restore heap order. ``index[heap[i]] == i`` holds
    for every heap slot after each operation.
    """

    __slots__ = ("heap", "index", "dist")

    def __init__(self, dist: List[Optional[int]]) -> None:
        """
        Constructs an empty queue over vertices ``0..len(dist)-1``.
        """
        self.dist = dist
        self.heap: List[int] = []
        self.index: List[int] = [-1] * len(dist)

    def push(self, v: int) -> None:
        """
        Adds vertex ``v`` to the queue.
        """
        self.heap.append(v)
        self.index[v] = len(self.heap) - 1
        self._sift_up(len(self.heap) - 1)

    def pop(self) -> int:
        """
        Removes and returns the vertex with minimum distance.
        """
        if not self.heap:
            raise IndexError("pop from an empty priority queue")

        top = self.heap[0]
        last = self.heap.pop()
        self.index[top] = -1
        if self.heap:
            self.heap[0] = last
            self.index[last] = 0
            self._sift_down(0)
        return top

    def peek(self) -> int:
        """
        Returns the vertex with minimum distance without removing it.
        """
        if not self.heap:
            raise IndexError("peek into an empty priority queue")
        return self.heap[0]

    def decrease_key(self, v: int) -> None:
        """
        Restores heap order after ``dist[v]`` has been lowered.
        """
        self._sift_up(self.index[v])

    def _less(self, i: int, j: int) -> bool:
        return self.dist[self.heap[i]] < self.dist[self.heap[j]]  # type: ignore[operator]

    def _swap(self, i: int, j: int) -> None:
        heap = self.heap
        heap[i], heap[j] = heap[j], heap[i]
        self.index[heap[i]] = i
        self.index[heap[j]] = j

    def _sift_up(self, i: int) -> None:
        while i > 0:
            parent = (i - 1) // 2
            if not self._less(i, parent):
                break
            self._swap(i, parent)
            i = parent

    def _sift_down(self, i: int) -> None:
        n = len(self.heap)
        while True:
            smallest = i
            for child in (2 * i + 1, 2 * i + 2):
                if child < n and self._less(child, smallest):
                    smallest = child
            if smallest == i:
                return
            self._swap(i, smallest)
            i = smallest

    def __contains__(self, v: int) -> bool:
        return 0 <= v < len(self.index) and self.index[v] >= 0

    def __len__(self) -> int:
        """
        Returns the number of queued vertices.
        """
        return len(self.heap)

    def __bool__(self) -> bool:
        """
        Returns true if the queue is not empty.
        """
        return bool(self.heap)
