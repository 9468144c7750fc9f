import pytest

from advent2024.day_17 import Computer, parse, part_a, part_b, solve_day

EXAMPLE_A = "Register A: 729\nRegister B: 0\nRegister C: 0\n\nProgram: 0,1,5,4,3,0"
EXAMPLE_B = "Register A: 2024\nRegister B: 0\nRegister C: 0\n\nProgram: 0,3,5,4,3,0"


@pytest.mark.parametrize(
    "registers, program, end_registers, output",
    [
        ((0, 0, 9), [2, 6], (0, 1, 9), []),
        ((10, 0, 0), [5, 0, 5, 1, 5, 4], (10, 0, 0), [0, 1, 2]),
        ((2024, 0, 0), [0, 1, 5, 4, 3, 0], (0, 0, 0), [4, 2, 5, 6, 7, 7, 7, 7, 3, 1, 0]),
        ((0, 29, 0), [1, 7], (0, 26, 0), []),
        ((0, 2024, 43690), [4, 0], (0, 44354, 43690), []),
    ],
)
def test_example_instructions(registers, program, end_registers, output):
    computer = Computer(*registers)
    assert computer.run(program) == output
    assert (computer.a, computer.b, computer.c) == end_registers


def test_parse():
    computer, program = parse(EXAMPLE_A)
    assert computer == Computer(729, 0, 0)
    assert program == [0, 1, 5, 4, 3, 0]


def test_part_a():
    assert part_a(EXAMPLE_A) == "4,6,3,5,6,3,5,2,1,0"


def test_part_b():
    assert part_b(EXAMPLE_B) == 117440


def test_part_b_reproduces_program():
    computer, program = parse(EXAMPLE_B)
    computer.a = part_b(EXAMPLE_B)
    assert computer.run(program) == program


def test_solve_day():
    assert solve_day(EXAMPLE_A) == ("4,6,3,5,6,3,5,2,1,0", 0)


def test_invalid_combo_operand():
    with pytest.raises(ValueError):
        Computer(1, 0, 0).run([2, 7])


def test_missing_operand():
    with pytest.raises(ValueError):
        Computer(1, 0, 0).run([1, 2, 4])