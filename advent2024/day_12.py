"""Day 12: fencing garden plots by area, perimeter and sides."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

Coord = tuple[int, int]


@dataclass(frozen=True)
class Region:
    area: int
    perimeter: int
    plant: str

    def cost(self) -> int:
        return self.area * self.perimeter


@dataclass
class Garden:
    grid: list[list[str]]

    @classmethod
    def parse(cls, text: str) -> Garden:
        return cls([list(line) for line in text.strip().splitlines()])

    @property
    def width(self) -> int:
        return len(self.grid[0])

    @property
    def height(self) -> int:
        return len(self.grid)

    def _get(self, coord: Coord) -> str:
        x, y = coord
        return self.grid[y][x]

    def _left(self, coord: Coord) -> Coord | None:
        x, y = coord
        return (x - 1, y) if x > 0 else None

    def _up(self, coord: Coord) -> Coord | None:
        x, y = coord
        return (x, y - 1) if y > 0 else None

    def _right(self, coord: Coord) -> Coord | None:
        x, y = coord
        return (x + 1, y) if x < self.width - 1 else None

    def _down(self, coord: Coord) -> Coord | None:
        x, y = coord
        return (x, y + 1) if y < self.height - 1 else None

    def _neighbours(self, coord: Coord) -> list[Coord | None]:
        return [self._left(coord), self._up(coord), self._right(coord), self._down(coord)]

    def _coords(self) -> Iterator[Coord]:
        """All coordinates, ordered by x and then y."""
        return iter(
            sorted((x, y) for y, row in enumerate(self.grid) for x in range(len(row)))
        )

    def _differs(self, coord: Coord | None, plant: str) -> bool:
        return coord is None or self._get(coord) != plant

    def _count_corners(self, coord: Coord, plant: str) -> int:
        up, left = self._up(coord), self._left(coord)
        right, down = self._right(coord), self._down(coord)
        open_up = self._differs(up, plant)
        open_left = self._differs(left, plant)
        open_right = self._differs(right, plant)
        open_down = self._differs(down, plant)
        open_up_left = up is None or self._differs(self._left(up), plant)
        open_up_right = up is None or self._differs(self._right(up), plant)
        open_down_left = down is None or self._differs(self._left(down), plant)
        open_down_right = down is None or self._differs(self._right(down), plant)
        return sum(
            (
                open_up and open_left,
                open_up and open_right,
                open_down and open_left,
                open_down and open_right,
                not open_up and not open_left and open_up_left,
                not open_up and not open_right and open_up_right,
                not open_down and not open_left and open_down_left,
                not open_down and not open_right and open_down_right,
            )
        )

    def regions_a(self) -> list[Region]:
        """Regions with their area and fence perimeter."""
        unassigned = set(self._coords())
        regions: list[Region] = []
        for start in self._coords():
            if start not in unassigned:
                continue
            unassigned.remove(start)
            plant = self._get(start)
            stack = [start]
            area = 1
            perimeter = 0
            while stack:
                coord = stack.pop()
                for n in self._neighbours(coord):
                    if n is None or self._get(n) != plant:
                        perimeter += 1
                    elif n in unassigned:
                        unassigned.remove(n)
                        stack.append(n)
                        area += 1
            regions.append(Region(area, perimeter, plant))
        return regions

    def regions_b(self) -> list[Region]:
        """Regions with their area and number of sides (counted as corners)."""
        unassigned = set(self._coords())
        regions: list[Region] = []
        for start in self._coords():
            if start not in unassigned:
                continue
            unassigned.remove(start)
            plant = self._get(start)
            stack = [start]
            area = 1
            corners = 0
            while stack:
                coord = stack.pop()
                for n in self._neighbours(coord):
                    if n is not None and self._get(n) == plant and n in unassigned:
                        unassigned.remove(n)
                        stack.append(n)
                        area += 1
                corners += self._count_corners(coord, plant)
            regions.append(Region(area, corners, plant))
        return regions

    def cost_a(self) -> int:
        return sum(region.cost() for region in self.regions_a())

    def cost_b(self) -> int:
        return sum(region.cost() for region in self.regions_b())


def part_a(garden: Garden) -> int:
    return garden.cost_a()


def part_b(garden: Garden) -> int:
    return garden.cost_b()


def solve_day(text: str) -> tuple[int, int]:
    garden = Garden.parse(text)
    return part_a(garden), part_b(garden)