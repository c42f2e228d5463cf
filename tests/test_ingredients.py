import pytest

from katsolve.ingredients import Dish, best_menu, parse_dishes


def test_parse_dishes_reads_fields():
    dishes = parse_dishes(["pizza_tomato pizza_base tomato 1 2", "", "  "])
    assert dishes == [Dish("pizza_tomato", "pizza_base", "tomato", 1, 2)]


def test_parse_dishes_rejects_short_line():
    with pytest.raises(ValueError):
        parse_dishes(["pizza_tomato pizza_base tomato 1"])


def test_parse_dishes_rejects_non_number_cost():
    with pytest.raises(ValueError):
        parse_dishes(["pizza_tomato pizza_base tomato one 2"])


def test_single_pizza_within_budget():
    assert best_menu(10, [Dish("a", "base", "x", 3, 4)]) == (4, 3)


def test_single_pizza_over_budget_gives_empty_menu():
    assert best_menu(2, [Dish("a", "base", "x", 3, 4)]) == (0, 0)


def test_cheapest_recipe_is_used():
    dishes = [Dish("a", "base", "x", 5, 9), Dish("a", "base", "y", 2, 1)]
    assert best_menu(10, dishes) == (1, 2)


def test_equal_cost_recipes_keep_higher_prestige():
    dishes = [Dish("a", "base", "x", 2, 1), Dish("a", "base", "y", 2, 7)]
    assert best_menu(10, dishes) == (7, 2)


def test_base_pizza_cost_is_included():
    dishes = [Dish("a", "base", "x", 2, 3), Dish("b", "a", "y", 4, 5)]
    prestige, cost = best_menu(6, dishes)
    assert cost <= 6
    assert prestige == 8


def test_more_budget_never_hurts():
    dishes = parse_dishes(
        [
            "pizza_tomato pizza_base tomato 1 2",
            "pizza_cheese pizza_base cheese 5 10",
            "pizza_classic pizza_tomato cheese 5 5",
            "pizza_classic pizza_cheese tomato 5 5",
            "pizza_salami pizza_classic salami 7 6",
            "pizza_spicy pizza_tomato chili 3 1",
        ]
    )
    results = [best_menu(budget, dishes) for budget in range(0, 30)]
    prestiges = [prestige for prestige, _ in results]
    assert prestiges == sorted(prestiges)
    assert all(cost <= budget for budget, (_, cost) in enumerate(results))


def test_dish_order_does_not_change_result():
    dishes = [
        Dish("a", "base", "x", 2, 3),
        Dish("b", "a", "y", 4, 5),
        Dish("c", "base", "z", 3, 6),
    ]
    assert best_menu(9, dishes) == best_menu(9, list(reversed(dishes)))


def test_cycle_is_rejected():
    dishes = [Dish("a", "b", "x", 1, 1), Dish("b", "a", "y", 1, 1)]
    with pytest.raises(ValueError):
        best_menu(10, dishes)