import pytest

from advent2024.day_13 import Machine, parse_input, part_a, part_b, solve_day

FIRST = "Button A: X+94, Y+34\nButton B: X+22, Y+67\nPrize: X=8400, Y=5400"
SECOND = "Button A: X+26, Y+66\nButton B: X+67, Y+21\nPrize: X=12748, Y=12176"

EXAMPLE = """Button A: X+94, Y+34
Button B: X+22, Y+67
Prize: X=8400, Y=5400

Button A: X+26, Y+66
Button B: X+67, Y+21
Prize: X=12748, Y=12176

Button A: X+17, Y+86
Button B: X+84, Y+37
Prize: X=7870, Y=6450

Button A: X+69, Y+23
Button B: X+27, Y+71
Prize: X=18641, Y=10279
"""


@pytest.mark.parametrize(
    "text, machine",
    [
        (FIRST, Machine((94, 34), (22, 67), (8400, 5400))),
        (SECOND, Machine((26, 66), (67, 21), (12748, 12176))),
    ],
)
def test_parse(text, machine):
    assert Machine.parse(text) == machine


def test_parse_wrong_count():
    with pytest.raises(ValueError):
        Machine.parse("Button A: X+94, Y+34\nButton B: X+22, Y+67")


@pytest.mark.parametrize("text, cost", [(FIRST, 280), (SECOND, None)])
def test_brute_force(text, cost):
    assert Machine.parse(text).brute_force() == cost


@pytest.mark.parametrize("text, cost", [(FIRST, 280), (SECOND, None)])
def test_solver(text, cost):
    assert Machine.parse(text).solve_mathematically(0) == cost


def test_parse_input_count():
    machines = parse_input(EXAMPLE)
    assert len(machines) == 4
    assert machines[0] == Machine.parse(FIRST)


def test_part_a():
    assert part_a(parse_input(EXAMPLE)) == 480


def test_solver_agrees_with_brute_force():
    for machine in parse_input(EXAMPLE):
        assert machine.solve_mathematically(0) == machine.brute_force()


def test_solve_day_matches_parts():
    machines = parse_input(EXAMPLE)
    assert solve_day(EXAMPLE) == (480, part_b(machines))


def test_part_b_sums_solutions():
    machines = parse_input(EXAMPLE)
    expected = [m.solve_mathematically(10000000000000) for m in machines]
    assert part_b(machines) == sum(c for c in expected if c is not None)