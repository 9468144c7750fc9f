"""Day 5: page ordering rules for the safety manual updates."""

from dataclasses import dataclass
from typing import Sequence


def _split_once(value: str, separator: str) -> tuple[str, str]:
    head, found, tail = value.partition(separator)
    if not found:
        raise ValueError(f"missing {separator!r} in {value!r}")
    return head, tail


@dataclass(frozen=True)
class Rule:
    first: int
    second: int

    @classmethod
    def parse(cls, value: str) -> "Rule":
        first, second = _split_once(value, "|")
        return cls(int(first), int(second))

    @classmethod
    def parse_multiple(cls, value: str) -> list["Rule"]:
        return [cls.parse(line) for line in value.split("\n")]

    def check(self, order: Sequence[int]) -> bool:
        """False only if ``second`` appears before ``first``."""
        seen_second = False
        for page in order:
            if page == self.first:
                return not seen_second
            if page == self.second:
                seen_second = True
        return True


@dataclass
class PrintOrder:
    order: list[int]

    @classmethod
    def parse(cls, value: str) -> "PrintOrder":
        return cls([int(number) for number in value.split(",")])

    def check(self, rules: Sequence[Rule]) -> bool:
        return all(rule.check(self.order) for rule in rules)

    def reorder(self, rules: Sequence[Rule]) -> "PrintOrder":
        """Return a copy reordered until every rule holds."""
        order = list(self.order)
        while True:
            for rule in rules:
                if not rule.check(order):
                    first = order.index(rule.first)
                    second = order.index(rule.second)
                    order.insert(first, order.pop(second))
            if all(rule.check(order) for rule in rules):
                return PrintOrder(order)

    def middle(self) -> int:
        return self.order[len(self.order) // 2]

    def middle_if_valid(self, rules: Sequence[Rule]) -> int:
        return self.middle() if self.check(rules) else 0


def _parse(text: str) -> tuple[list[Rule], list[PrintOrder]]:
    rules_text, orders_text = _split_once(text, "\n\n")
    rules = Rule.parse_multiple(rules_text)
    orders = [PrintOrder.parse(line) for line in orders_text.strip().split("\n")]
    return rules, orders


def part_a(text: str) -> int:
    rules, orders = _parse(text)
    return sum(order.middle_if_valid(rules) for order in orders)


def part_b(text: str) -> int:
    rules, orders = _parse(text)
    return sum(
        order.reorder(rules).middle() for order in orders if not order.check(rules)
    )


def solve_day(text: str) -> tuple[int, int]:
    return part_a(text), part_b(text)