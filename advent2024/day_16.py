"""Day 16: the reindeer maze and its cheapest routes."""

from __future__ import annotations

import heapq
from dataclasses import dataclass
from enum import Enum
from itertools import count
from typing import Iterator

Coord = tuple[int, int]

_STEP_COST = 1
_TURN_COST = 1000


class _Direction(Enum):
    UP = (0, -1)
    RIGHT = (1, 0)
    DOWN = (0, 1)
    LEFT = (-1, 0)

    def clockwise(self) -> _Direction:
        return _CLOCKWISE[self]

    def counter_clockwise(self) -> _Direction:
        return _COUNTER_CLOCKWISE[self]

    def ahead(self, coord: Coord) -> Coord:
        dx, dy = self.value
        return coord[0] + dx, coord[1] + dy


_CLOCKWISE = {
    _Direction.UP: _Direction.RIGHT,
    _Direction.RIGHT: _Direction.DOWN,
    _Direction.DOWN: _Direction.LEFT,
    _Direction.LEFT: _Direction.UP,
}
_COUNTER_CLOCKWISE = {after: before for before, after in _CLOCKWISE.items()}

_State = tuple[Coord, _Direction]


@dataclass(frozen=True)
class Maze:
    walls: tuple[tuple[bool, ...], ...]
    start: Coord
    end: Coord

    @classmethod
    def parse(cls, text: str) -> Maze:
        start: Coord | None = None
        end: Coord | None = None
        rows: list[tuple[bool, ...]] = []
        for y, line in enumerate(text.strip().splitlines()):
            row: list[bool] = []
            for x, char in enumerate(line):
                if char == "#":
                    row.append(True)
                elif char in ".SE":
                    row.append(False)
                    if char == "S":
                        start = (x, y)
                    elif char == "E":
                        end = (x, y)
                else:
                    raise ValueError(f"unknown maze character: {char!r}")
            rows.append(tuple(row))
        if start is None:
            raise ValueError("maze has no start tile")
        if end is None:
            raise ValueError("maze has no end tile")
        return cls(tuple(rows), start, end)

    def _is_open(self, coord: Coord) -> bool:
        x, y = coord
        if y < 0 or y >= len(self.walls) or x < 0 or x >= len(self.walls[y]):
            return False
        return not self.walls[y][x]

    def _moves(self, state: _State) -> Iterator[tuple[_State, int]]:
        pos, direction = state
        if self._is_open(direction.ahead(pos)):
            yield (direction.ahead(pos), direction), _STEP_COST
        for turned in (direction.clockwise(), direction.counter_clockwise()):
            if self._is_open(turned.ahead(pos)):
                yield (pos, turned), _TURN_COST

    def solve(self) -> tuple[int, int]:
        """Lowest score to the end and the number of tiles on any best path."""
        start: _State = (self.start, _Direction.RIGHT)
        dist: dict[_State, int] = {start: 0}
        prev: dict[_State, set[_State]] = {}
        tie = count()
        heap: list[tuple[int, int, _State]] = [(0, next(tie), start)]

        while heap:
            cost, _, state = heapq.heappop(heap)
            if cost > dist[state]:
                continue
            for nxt, step in self._moves(state):
                new_cost = cost + step
                old_cost = dist.get(nxt)
                if old_cost is None or new_cost < old_cost:
                    dist[nxt] = new_cost
                    prev[nxt] = {state}
                    heapq.heappush(heap, (new_cost, next(tie), nxt))
                elif new_cost == old_cost:
                    prev[nxt].add(state)

        end_costs = {state: c for state, c in dist.items() if state[0] == self.end}
        if not end_costs:
            raise ValueError("the end tile cannot be reached")
        best = min(end_costs.values())

        stack = [state for state, c in end_costs.items() if c == best]
        seen = set(stack)
        tiles = {self.start}
        while stack:
            state = stack.pop()
            tiles.add(state[0])
            for before in prev.get(state, ()):
                if before not in seen:
                    seen.add(before)
                    stack.append(before)
        return best, len(tiles)


def solve_day(text: str) -> tuple[int, int]:
    return Maze.parse(text).solve()