import pytest

from advent2024.day_04 import parse_input, part_a, part_b, solve_day

SMALL = "..X...\n.SAMX.\n.A..A.\nXMAS.S\n.X...."
LARGE = (
    "MMMSXXMASM\nMSAMXMSMSA\nAMXSXMAAMM\nMSAMASMSMX\nXMASAMXAMM\n"
    "XXAMMXXAMA\nSMSMSASXSS\nSAXAMASAAA\nMAMMMXMMMM\nMXMXAXMASX"
)


def test_parse():
    assert parse_input(SMALL) == [
        [".", ".", "X", ".", ".", "."],
        [".", "S", "A", "M", "X", "."],
        [".", "A", ".", ".", "A", "."],
        ["X", "M", "A", "S", ".", "S"],
        [".", "X", ".", ".", ".", "."],
    ]


@pytest.mark.parametrize("text, expected", [(SMALL, 4), (LARGE, 18)])
def test_part_a(text, expected):
    assert part_a(parse_input(text)) == expected


@pytest.mark.parametrize(
    "text, expected",
    [
        (SMALL, 0),
        ("M.S\n.A.\nM.S", 1),
        ("S.M\n.A.\nS.M", 1),
        ("S.S\n.A.\nM.M", 1),
        ("M.M\n.A.\nS.S", 1),
        (LARGE, 9),
    ],
)
def test_part_b(text, expected):
    assert part_b(parse_input(text)) == expected


def test_solve_day():
    assert solve_day(LARGE) == (18, 9)


def test_diagonal_same_letters_is_not_a_cross():
    assert part_b(parse_input("M.M\n.A.\nM.M")) == 0