from collections import deque
from typing import Deque, Iterable, List, Set, Tuple


class Frontier:
    """Fringe and closed list of a single walk

    The fringe is FIFO and may hold duplicates; entries carry the depth at
    which they were discovered, so depths along the fringe never decrease.
    """

    def __init__(self):
        self.fringe: Deque[Tuple[str, int]] = deque()
        self.closed: Set[str] = set()

    def push(self, identifier: str, depth: int = 0) -> None:
        self.fringe.append((identifier, depth))

    def extend(self, identifiers: Iterable[str], depth: int) -> int:
        """Append identifiers at ``depth``; returns how many were appended"""
        before = len(self.fringe)
        self.fringe.extend((identifier, depth) for identifier in identifiers)
        return len(self.fringe) - before

    def pop_layer(self) -> List[Tuple[str, int]]:
        """Remove and return every entry at the depth of the head entry"""
        if not self.fringe:
            return []
        depth = self.fringe[0][1]
        layer = []
        while self.fringe and self.fringe[0][1] == depth:
            layer.append(self.fringe.popleft())
        return layer

    def claim(self, identifier: str) -> bool:
        """Add identifier to the closed list; False if it was already there"""
        if identifier in self.closed:
            return False
        self.closed.add(identifier)
        return True

    def is_closed(self, identifier: str) -> bool:
        return identifier in self.closed

    def __len__(self) -> int:
        return len(self.fringe)

    def __bool__(self) -> bool:
        return bool(self.fringe)
