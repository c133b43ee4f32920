"""The cost-driven sort that produces the list of stack operations."""

from __future__ import annotations

from typing import Iterable, List, Optional

from pushswap.stacks import Stack


def _position(stack: Stack, number: int) -> Optional[int]:
    try:
        return stack.index_of(number)
    except ValueError:
        return None


def movements_to_top(stack: Stack, number: int) -> int:
    """Rotations needed to bring ``number`` to the top, in the cheaper direction.

    A number that is not in the stack costs nothing.
    """
    pos = _position(stack, number)
    if pos is None:
        return 0
    size = len(stack)
    return pos if pos <= size // 2 else size - pos


def is_closer_to_top(stack: Stack, number: int) -> bool:
    """True when rotating (rather than reverse-rotating) reaches ``number`` sooner."""
    pos = _position(stack, number)
    if pos is None:
        pos = len(stack)
    return pos <= len(stack) // 2


def find_best_position(stack: Stack, number: int) -> int:
    """The largest value below ``number``, or the stack's maximum if there is none."""
    if not len(stack):
        raise ValueError("no position in an empty stack")
    smaller = [value for value in stack if value < number]
    return max(smaller) if smaller else max(stack)


def find_place(stack: Stack, number: int) -> int:
    """The smallest value above ``number``, or the stack's minimum if there is none."""
    if not len(stack):
        raise ValueError("no place in an empty stack")
    larger = [value for value in stack if value > number]
    return min(larger) if larger else min(stack)


def calculate_cost(number: int, a: Stack, b: Stack) -> int:
    """Moves to bring ``number`` to the top of ``a`` and its target to the top of ``b``."""
    cost = movements_to_top(a, number)
    if len(b):
        cost += movements_to_top(b, find_best_position(b, number))
    return cost


def find_the_cheapest(a: Stack, b: Stack) -> Optional[int]:
    """The value of ``a`` with the lowest cost; the first one on ties, None if empty."""
    cheapest: Optional[int] = None
    min_cost: Optional[int] = None
    for number in a:
        cost = calculate_cost(number, a, b)
        if min_cost is None or cost < min_cost:
            min_cost = cost
            cheapest = number
    return cheapest


class Sorter:
    """Sorts stack a with the help of stack b, recording each operation by name."""

    def __init__(self, numbers: Iterable[int]) -> None:
        self.a = Stack(numbers)
        self.b = Stack()
        self.operations: List[str] = []

    def _apply(self, name: str) -> None:
        actions = {
            "sa": self.a.swap,
            "ra": self.a.rotate,
            "rra": self.a.reverse_rotate,
            "rb": self.b.rotate,
            "rrb": self.b.reverse_rotate,
            "pa": lambda: self.a.push_from(self.b),
            "pb": lambda: self.b.push_from(self.a),
        }
        actions[name]()
        self.operations.append(name)

    def bring_to_top(self, stack_name: str, number: int) -> None:
        """Rotate stack ``"a"`` or ``"b"`` until ``number`` is on top."""
        if stack_name == "a":
            stack = self.a
        elif stack_name == "b":
            stack = self.b
        else:
            raise ValueError(f"unknown stack {stack_name!r}")
        if not len(stack):
            return
        if _position(stack, number) is None:
            raise ValueError(f"{number} is not in stack {stack_name}")
        while stack.top() != number:
            if is_closer_to_top(stack, number):
                self._apply("r" + stack_name)
            else:
                self._apply("rr" + stack_name)

    def sort_three(self) -> None:
        """Sort a stack a of exactly three values in at most two operations."""
        if len(self.a) < 3:
            return
        first, second, third = list(self.a)[:3]
        if first > second and second < third and first < third:
            self._apply("sa")
        elif first < second and second > third and first < third:
            self._apply("rra")
            self._apply("sa")
        elif first > second and second < third and first > third:
            self._apply("ra")
        elif first < second and second > third and first > third:
            self._apply("rra")
        elif first > second and second > third:
            self._apply("sa")
            self._apply("rra")

    def push_two_elements(self) -> None:
        """Move up to two values to b, keeping at least three in a."""
        for _ in range(2):
            if len(self.a) > 3:
                self._apply("pb")

    def push_until_three(self) -> None:
        """Push the cheapest values to b until three remain in a, then sort those."""
        while len(self.a) > 3:
            cheapest = find_the_cheapest(self.a, self.b)
            if cheapest is None:
                break
            target: Optional[int] = None
            if len(self.b):
                target = find_best_position(self.b, cheapest)
            self.bring_to_top("a", cheapest)
            if target is not None:
                self.bring_to_top("b", target)
            self._apply("pb")
        self.sort_three()

    def push_back(self) -> None:
        """Return every value of b to its place in a."""
        while len(self.b):
            cheapest = find_the_cheapest(self.b, self.a)
            if cheapest is None:
                break
            self.bring_to_top("b", cheapest)
            if len(self.a):
                self.bring_to_top("a", find_place(self.a, cheapest))
            self._apply("pa")

    def run(self) -> List[str]:
        """Sort stack a and return the operations used."""
        if self.a.is_sorted():
            return list(self.operations)
        if len(self.a) == 2:
            self._apply("sa")
        elif len(self.a) == 3:
            self.sort_three()
        else:
            self.push_two_elements()
            self.push_until_three()
            self.push_back()
            self.bring_to_top("a", min(self.a))
        return list(self.operations)


def sort_operations(numbers: Iterable[int]) -> List[str]:
    """The operations that sort ``numbers``, given top first."""
    return Sorter(numbers).run()