"""Frontier priority queue for the A* search."""

import heapq
import itertools
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Tuple, Union

from .types import Position

Cost = Union[int, float]


@dataclass
class PriorityItem:
    """
    Candidate position in the frontier.

    Comparison order:
    1. f_cost (lower is better)
    2. h_cost (lower is better - favor positions closer to the goal)
    3. sequence (insertion order)
    """
    f_cost: Cost
    h_cost: Cost
    sequence: int
    position: Position
    removed: bool = field(default=False, compare=False)

    def __lt__(self, other: "PriorityItem") -> bool:
        if self.f_cost != other.f_cost:
            return self.f_cost < other.f_cost
        if self.h_cost != other.h_cost:
            return self.h_cost < other.h_cost
        return self.sequence < other.sequence


class PriorityQueue:
    """
    Min-heap of positions keyed by estimated total cost.

    Re-adding a position with a lower cost supersedes its earlier entry;
    superseded entries stay in the heap and are skipped when popped.
    """

    def __init__(self):
        self._heap: List[PriorityItem] = []
        self._entry_finder: Dict[Position, PriorityItem] = {}
        self._counter = itertools.count()

    def __len__(self) -> int:
        return len(self._entry_finder)

    def __contains__(self, position: Position) -> bool:
        return position in self._entry_finder

    def __iter__(self) -> Iterator[Position]:
        return iter(list(self._entry_finder))

    def is_empty(self) -> bool:
        """Check if the queue is empty."""
        return not self._entry_finder

    def put(self, position: Position, f_cost: Cost, h_cost: Cost = 0) -> bool:
        """
        Add a position or lower its priority.
        Returns False if the position is already queued at an equal or lower cost.
        """
        existing = self._entry_finder.get(position)
        if existing is not None:
            if existing.f_cost <= f_cost:
                return False
            existing.removed = True

        entry = PriorityItem(f_cost, h_cost, next(self._counter), position)
        self._entry_finder[position] = entry
        heapq.heappush(self._heap, entry)
        return True

    def get(self) -> Optional[Tuple[Position, Cost]]:
        """
        Remove and return (position, f_cost) with the lowest f_cost.
        Returns None if the queue is empty.
        """
        while self._heap:
            entry = heapq.heappop(self._heap)
            if not entry.removed:
                del self._entry_finder[entry.position]
                return entry.position, entry.f_cost
        return None

    def peek(self) -> Optional[Tuple[Position, Cost]]:
        """Look at the next (position, f_cost) without removing it."""
        while self._heap:
            entry = self._heap[0]
            if not entry.removed:
                return entry.position, entry.f_cost
            heapq.heappop(self._heap)
        return None

    def get_cost(self, position: Position) -> Optional[Cost]:
        """Get the f_cost of a queued position, or None if not present."""
        entry = self._entry_finder.get(position)
        return entry.f_cost if entry is not None else None

    def clear(self):
        """Remove all items from the queue."""
        self._heap.clear()
        self._entry_finder.clear()
