# search/frontier.py

import heapq


class Frontier:
    """
    Binary-heap frontier. Entries are ordered by their key tuple, then by
    insertion sequence (FIFO among equal keys). Stale duplicates are the
    caller's business: engines skip vertices they have already finalized.
    """

    def __init__(self):
        self._q: list[tuple] = []
        self._seq = 0

    def push(self, vertex: int, *key) -> None:
        self._seq += 1
        heapq.heappush(self._q, (*key, self._seq, vertex))

    def pop(self) -> tuple[int, tuple]:
        *key, _, vertex = heapq.heappop(self._q)
        return vertex, tuple(key)

    def __len__(self) -> int:
        return len(self._q)

    def __bool__(self) -> bool:
        return bool(self._q)
