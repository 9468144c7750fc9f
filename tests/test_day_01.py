import pytest

from advent2024.day_01 import parse, part_a, part_b, solve_day

EXAMPLE = "3   4\n4   3\n2   5\n1   3\n3   9\n3   3"


def test_parse():
    left, right = parse(EXAMPLE)
    assert left == [3, 4, 2, 1, 3, 3]
    assert right == [4, 3, 5, 3, 9, 3]


def test_part_a():
    assert part_a(EXAMPLE) == 11


def test_part_b():
    assert part_b(EXAMPLE) == 31


def test_solve_day():
    assert solve_day(EXAMPLE) == (11, 31)


def test_parse_ignores_surrounding_whitespace():
    assert parse("\n" + EXAMPLE + "\n\n") == parse(EXAMPLE)


def test_parse_rejects_non_numbers():
    with pytest.raises(ValueError):
        parse("3   x")


def test_parse_rejects_single_column():
    with pytest.raises(ValueError):
        parse("3")