"""Pick the most prestigious set of pizzas that fits a budget."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True)
class Dish:
    """One recipe: ``name`` is made from ``base`` by adding ``ingredient``."""

    name: str
    base: str
    ingredient: str
    cost: int
    prestige: int


def parse_dishes(lines: Iterable[str]) -> list[Dish]:
    """Parse lines of ``name base ingredient cost prestige``; blank lines are skipped."""
    dishes = []
    for line in lines:
        fields = line.split()
        if not fields:
            continue
        if len(fields) != 5:
            raise ValueError(f"expected 5 fields in recipe line {line!r}")
        name, base, ingredient, cost, prestige = fields
        dishes.append(Dish(name, base, ingredient, int(cost), int(prestige)))
    return dishes


def _cheapest(options: Iterable[tuple[int, int]]) -> tuple[int, int]:
    cost, negative_prestige = min((cost, -prestige) for cost, prestige in options)
    return cost, -negative_prestige


def _totals(recipes: dict[str, list[Dish]]) -> dict[str, tuple[int, int]]:
    """Cheapest total cost of each pizza, with the best prestige at that cost."""
    totals: dict[str, tuple[int, int]] = {}
    for root in recipes:
        if root in totals:
            continue
        stack = [root]
        path = {root}
        while stack:
            name = stack[-1]
            missing = next(
                (d.base for d in recipes[name] if d.base in recipes and d.base not in totals),
                None,
            )
            if missing is not None:
                if missing in path:
                    raise ValueError(f"recipe for {missing!r} depends on itself")
                path.add(missing)
                stack.append(missing)
                continue
            totals[name] = _cheapest(
                (
                    totals.get(dish.base, (0, 0))[0] + dish.cost,
                    totals.get(dish.base, (0, 0))[1] + dish.prestige,
                )
                for dish in recipes[name]
            )
            stack.pop()
            path.discard(name)
    return totals


def best_menu(budget: int, dishes: Iterable[Dish]) -> tuple[int, int]:
    """Return (prestige, cost) of the best set of distinct pizzas within ``budget``.

    Each pizza is priced at its cheapest way to build it. Of equally
    prestigious menus the cheapest is reported.
    """
    recipes: dict[str, list[Dish]] = {}
    for dish in dishes:
        recipes.setdefault(dish.name, []).append(dish)
    totals = _totals(recipes)

    best: list[int | None] = [None] * (budget + 1)
    best[0] = 0
    for name in recipes:
        weight, profit = totals[name]
        for spent in range(budget, 0, -1):
            before = spent - weight
            if 0 <= before <= budget and best[before] is not None:
                candidate = best[before] + profit
                current = best[spent]
                best[spent] = candidate if current is None else max(current, candidate)

    answer_cost, answer_prestige = 0, None
    for spent, prestige in enumerate(best):
        if prestige is not None and (answer_prestige is None or answer_prestige < prestige):
            answer_cost, answer_prestige = spent, prestige
    return answer_prestige, answer_cost