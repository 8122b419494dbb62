# gridpath/core/frontiers.py
from __future__ import annotations
import heapq
from collections import deque


class FIFOQueue:
    def __init__(self):
        self.q = deque()
    def push(self, x): self.q.append(x)
    def pop(self): return self.q.popleft()
    def __len__(self): return len(self.q)
    def __iter__(self): return iter(self.q)


class LIFOStack:
    def __init__(self):
        self.q = []
    def push(self, x): self.q.append(x)
    def pop(self): return self.q.pop()
    def __len__(self): return len(self.q)
    def __iter__(self): return iter(self.q)


class PriorityQueue:
    """
    Min-heap by key(x), evaluated once at push time.
    Re-pushing an item with a better key leaves the old entry behind;
    callers skip those stale entries when they surface.
    """
    def __init__(self, key):
        self.key = key
        self.h = []
        self.counter = 0  # equal keys pop in insertion order
    def push(self, x):
        self.counter += 1
        heapq.heappush(self.h, (self.key(x), self.counter, x))
    def pop(self):
        return heapq.heappop(self.h)[2]
    def __len__(self): return len(self.h)
    def __iter__(self): return (entry[2] for entry in self.h)
