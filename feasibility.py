"""
Which hand cards fit in a mana budget.

Picks are greedy and order-preserving: candidates are scanned once in the
caller's order and never revisited. This misses some subsets an exact
knapsack would find; callers choose the order that suits the question
(cheapest first to fit the most burn, dearest first for the most stats).
"""

from typing import Iterable, List, Sequence

from models import HandCard


def reserve(budget: int, cost: int) -> int:
    # may go negative; a budget <= 0 affords nothing
    return budget - cost

def by_ascending_cost(cards: Iterable[HandCard]) -> List[HandCard]:
    return sorted(cards, key=lambda c: c.cost)

def by_descending_cost(cards: Iterable[HandCard]) -> List[HandCard]:
    return sorted(cards, key=lambda c: -c.cost)

def playable_sequence(candidates: Sequence[HandCard], budget: int) -> List[HandCard]:
    ret: List[HandCard] = []
    if budget <= 0:
        return ret
    left = budget
    for card in candidates:
        if card.cost > left:
            continue
        ret.append(card)
        left -= card.cost
    return ret

def affordable_count(count_in_hand: int, budget: int) -> int:
    """How many copies of a one-mana repeatable card fit in the budget."""
    return max(0, min(count_in_hand, budget))
