"""Day 6: a patrolling guard and the obstacles that trap it in a loop."""

from __future__ import annotations

from bisect import bisect_left
from dataclasses import dataclass, field, replace
from enum import Enum


class Tile(Enum):
    OBSTACLE = "obstacle"
    EMPTY = "empty"
    OUT = "out"


_TILES = {".": Tile.EMPTY, "#": Tile.OBSTACLE, "^": Tile.EMPTY}


class Direction(Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    def turn_right(self) -> Direction:
        return _TURN_RIGHT[self]


_TURN_RIGHT = {
    Direction.UP: Direction.RIGHT,
    Direction.RIGHT: Direction.DOWN,
    Direction.DOWN: Direction.LEFT,
    Direction.LEFT: Direction.UP,
}


@dataclass(frozen=True, order=True)
class Point:
    x: int
    y: int

    def step(self, direction: Direction) -> Point | None:
        """One step in ``direction``; None when it would leave the grid's top or left."""
        if direction is Direction.UP:
            return Point(self.x, self.y - 1) if self.y > 0 else None
        if direction is Direction.DOWN:
            return Point(self.x, self.y + 1)
        if direction is Direction.LEFT:
            return Point(self.x - 1, self.y) if self.x > 0 else None
        return Point(self.x + 1, self.y)

    def step_back(self, direction: Direction) -> Point:
        """One step against ``direction``."""
        if direction is Direction.UP:
            return Point(self.x, self.y + 1)
        if direction is Direction.DOWN:
            return Point(self.x, self.y - 1)
        if direction is Direction.LEFT:
            return Point(self.x + 1, self.y)
        return Point(self.x - 1, self.y)


@dataclass(frozen=True)
class Guard:
    pos: Point
    direction: Direction

    def next_pos(self) -> Point | None:
        return self.pos.step(self.direction)


@dataclass
class Map:
    tiles: list[list[Tile]]
    guard: Guard

    @classmethod
    def parse(cls, text: str) -> Map:
        lines = text.strip().split("\n")
        tiles: list[list[Tile]] = []
        guard: Guard | None = None
        for y, line in enumerate(lines):
            row = []
            for x, char in enumerate(line):
                try:
                    row.append(_TILES[char])
                except KeyError:
                    raise ValueError(f"unknown map character: {char!r}") from None
                if char == "^":
                    guard = Guard(Point(x, y), Direction.UP)
            tiles.append(row)
        if guard is None:
            raise ValueError("map has no guard")
        return cls(tiles, guard)

    def get(self, point: Point | None) -> Tile:
        """The tile at ``point``, or OUT when it lies beyond the map."""
        if point is None or point.y >= len(self.tiles):
            return Tile.OUT
        row = self.tiles[point.y]
        if point.x >= len(row):
            return Tile.OUT
        return row[point.x]

    def size(self) -> tuple[int, int]:
        return len(self.tiles[0]), len(self.tiles)

    def visited(self) -> set[Point]:
        """Positions the guard steps onto before walking off the map."""
        seen: set[Point] = set()
        guard = self.guard
        while True:
            nxt = guard.next_pos()
            tile = self.get(nxt)
            if tile is Tile.OBSTACLE:
                guard = replace(guard, direction=guard.direction.turn_right())
            elif tile is Tile.EMPTY and nxt is not None:
                guard = replace(guard, pos=nxt)
                seen.add(nxt)
            else:
                return seen


@dataclass
class ObstacleIndex:
    """Obstacles sorted per column and per row for fast lookups."""

    columns: list[list[Point]] = field(default_factory=list)
    rows: list[list[Point]] = field(default_factory=list)

    @classmethod
    def from_map(cls, grid: Map) -> ObstacleIndex:
        width, height = grid.size()
        index = cls([[] for _ in range(width)], [[] for _ in range(height)])
        for y, row in enumerate(grid.tiles):
            for x, tile in enumerate(row):
                if tile is Tile.OBSTACLE:
                    index.insert(Point(x, y))
        return index

    def insert(self, point: Point) -> None:
        for line in (self.columns[point.x], self.rows[point.y]):
            idx = bisect_left(line, point)
            if idx == len(line) or line[idx] != point:
                line.insert(idx, point)

    def next_obstacle(self, guard: Guard) -> Point | None:
        """The first obstacle the guard would hit walking straight ahead."""
        direction = guard.direction
        if direction in (Direction.UP, Direction.DOWN):
            line = self.columns[guard.pos.x]
        else:
            line = self.rows[guard.pos.y]
        idx = bisect_left(line, guard.pos)
        if idx < len(line) and line[idx] == guard.pos:
            raise ValueError("guard stands on an obstacle")
        if direction in (Direction.UP, Direction.LEFT):
            return line[idx - 1] if idx > 0 else None
        return line[idx] if idx < len(line) else None

    def next_obstacle_with_extra(self, guard: Guard, extra: Point) -> Point | None:
        """Like ``next_obstacle`` with one additional obstacle at ``extra``."""
        pos = guard.pos
        direction = guard.direction
        obs = self.next_obstacle(guard)
        if obs is not None:
            if direction is Direction.UP:
                closer = extra.x == obs.x and obs.y < extra.y < pos.y
            elif direction is Direction.DOWN:
                closer = extra.x == obs.x and pos.y < extra.y < obs.y
            elif direction is Direction.LEFT:
                closer = extra.y == obs.y and obs.x < extra.x < pos.x
            else:
                closer = extra.y == obs.y and pos.x < extra.x < obs.x
            return extra if closer else obs
        if direction is Direction.UP:
            ahead = extra.x == pos.x and extra.y < pos.y
        elif direction is Direction.DOWN:
            ahead = extra.x == pos.x and extra.y > pos.y
        elif direction is Direction.LEFT:
            ahead = extra.y == pos.y and extra.x < pos.x
        else:
            ahead = extra.y == pos.y and extra.x > pos.x
        return extra if ahead else None

    def check_loop(self, guard: Guard, obstacle: Point) -> bool:
        """True if an extra obstacle at ``obstacle`` traps the guard in a loop."""
        seen: set[Guard] = set()
        while (hit := self.next_obstacle_with_extra(guard, obstacle)) is not None:
            guard = Guard(hit.step_back(guard.direction), guard.direction.turn_right())
            if guard in seen:
                return True
            seen.add(guard)
        return False


def part_a(grid: Map) -> int:
    return len(grid.visited())


def part_b(grid: Map) -> int:
    """Count positions on the guard's path where an obstacle causes a loop."""
    index = ObstacleIndex.from_map(grid)
    return sum(
        1
        for point in grid.visited()
        if point != grid.guard.pos and index.check_loop(grid.guard, point)
    )


def solve_day(text: str) -> tuple[int, int]:
    grid = Map.parse(text)
    return part_a(grid), part_b(grid)