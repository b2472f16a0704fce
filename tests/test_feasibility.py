"""Greedy mana feasibility."""

import pytest

from feasibility import affordable_count, by_ascending_cost, by_descending_cost, playable_sequence, reserve
from models import HandCard


def _cards(*costs):
    return [HandCard(f"C{i}", cost) for i, cost in enumerate(costs)]

def _costs(cards):
    return [c.cost for c in cards]


class TestPlayableSequence:

    def test_takes_in_order_and_skips_what_no_longer_fits(self):
        assert _costs(playable_sequence(_cards(3, 1, 2), 4)) == [3, 1]

    def test_skipped_card_does_not_stop_the_scan(self):
        assert _costs(playable_sequence(_cards(5, 2, 2), 4)) == [2, 2]

    def test_greedy_is_not_a_knapsack(self):
        # 2 + 2 would use all 4 mana; greedy grabs the 3 first
        assert _costs(playable_sequence(_cards(3, 2, 2), 4)) == [3]

    def test_empty_hand(self):
        assert playable_sequence([], 10) == []

    @pytest.mark.parametrize("budget", [0, -1, -5])
    def test_no_budget_affords_nothing(self, budget):
        assert playable_sequence(_cards(0, 1, 2), budget) == []

    def test_zero_cost_cards_ride_along(self):
        assert _costs(playable_sequence(_cards(1, 0), 1)) == [1, 0]

    def test_total_cost_never_drops_as_budget_grows(self):
        for order in (_cards(3, 1, 1, 1), _cards(2, 5, 1, 3), _cards(4, 4, 1)):
            totals = [sum(_costs(playable_sequence(order, b))) for b in range(0, 12)]
            assert totals == sorted(totals)

    def test_count_never_drops_for_cheapest_first(self):
        order = by_ascending_cost(_cards(3, 1, 2, 1, 5))
        sizes = [len(playable_sequence(order, b)) for b in range(0, 14)]
        assert sizes == sorted(sizes)

    def test_never_exceeds_budget(self):
        order = _cards(2, 3, 1, 4, 1)
        for b in range(0, 12):
            assert sum(_costs(playable_sequence(order, b))) <= b


class TestOrdering:

    def test_ascending_is_stable(self):
        cards = [HandCard("A", 2), HandCard("B", 1), HandCard("C", 2)]
        assert [c.card_id for c in by_ascending_cost(cards)] == ["B", "A", "C"]

    def test_descending_is_stable(self):
        cards = [HandCard("A", 2), HandCard("B", 3), HandCard("C", 2)]
        assert [c.card_id for c in by_descending_cost(cards)] == ["B", "A", "C"]


class TestCounts:

    @pytest.mark.parametrize("count,budget,expected", [
        (3, 2, 2),
        (1, 5, 1),
        (2, -3, 0),
        (0, 4, 0),
        (2, 0, 0),
    ])
    def test_affordable_count(self, count, budget, expected):
        assert affordable_count(count, budget) == expected

    def test_reserve_can_go_negative(self):
        assert reserve(3, 5) == -2
