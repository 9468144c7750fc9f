"""Day 4: word search for XMAS."""

_WORD = "XMAS"


def parse_input(text: str) -> list[list[str]]:
    return [list(line) for line in text.strip().split("\n")]


def _xmas_in_direction(puzzle: list[list[str]], i: int, j: int, di: int, dj: int) -> bool:
    for step, letter in enumerate(_WORD):
        row, col = i + di * step, j + dj * step
        if row < 0 or col < 0 or row >= len(puzzle) or col >= len(puzzle[row]):
            return False
        if puzzle[row][col] != letter:
            return False
    return True


def part_a(puzzle: list[list[str]]) -> int:
    """Count XMAS in all eight directions."""
    return sum(
        _xmas_in_direction(puzzle, i, j, di, dj)
        for i, row in enumerate(puzzle)
        for j in range(len(row))
        for di in (-1, 0, 1)
        for dj in (-1, 0, 1)
    )


def _is_x_mas(puzzle: list[list[str]], i: int, j: int) -> bool:
    if puzzle[i][j] != "A":
        return False
    top_left = puzzle[i - 1][j - 1]
    top_right = puzzle[i - 1][j + 1]
    bottom_left = puzzle[i + 1][j - 1]
    bottom_right = puzzle[i + 1][j + 1]
    corners_ok = (
        top_left != bottom_right
        and top_left in ("M", "S")
        and bottom_right in ("M", "S")
    )
    if not corners_ok:
        return False
    vertical_pairs = top_left == bottom_left and top_right == bottom_right
    horizontal_pairs = top_left == top_right and bottom_left == bottom_right
    return vertical_pairs or horizontal_pairs


def part_b(puzzle: list[list[str]]) -> int:
    """Count MAS crosses centred on an A."""
    return sum(
        _is_x_mas(puzzle, i, j)
        for i in range(1, len(puzzle) - 1)
        for j in range(1, len(puzzle[i]) - 1)
    )


def solve_day(text: str) -> tuple[int, int]:
    puzzle = parse_input(text)
    return part_a(puzzle), part_b(puzzle)