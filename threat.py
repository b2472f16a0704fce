"""
Which friendly creatures get traded off before they can swing.

Enemy attackers are taken biggest first; each one claims the
highest-attack friendly creature it kills outright (health <= its attack).
One claim per enemy, no re-matching. Taunt does not shield a creature
here: anything can be picked as trade bait.
"""

import logging
from typing import List, Sequence, Tuple

from models import BoardMinion

logger = logging.getLogger(__name__)

Trade = Tuple[BoardMinion, BoardMinion]   # (enemy, friendly)


def _matched_indices(friendly: Sequence[BoardMinion], enemies: Sequence[BoardMinion]) -> List[Tuple[int, int]]:
    pool = list(range(len(friendly)))
    pairs: List[Tuple[int, int]] = []
    order = sorted(range(len(enemies)), key=lambda i: -enemies[i].attack)
    for ei in order:
        enemy = enemies[ei]
        killable = [fi for fi in pool if friendly[fi].health <= enemy.attack]
        if not killable:
            continue
        # max() keeps the first on ties
        fi = max(killable, key=lambda i: friendly[i].attack)
        pool.remove(fi)
        pairs.append((ei, fi))
    return pairs

def presumed_trades(friendly: Sequence[BoardMinion], enemies: Sequence[BoardMinion]) -> List[Trade]:
    return [(enemies[ei], friendly[fi]) for ei, fi in _matched_indices(friendly, enemies)]

def surviving_attackers(friendly: Sequence[BoardMinion], enemies: Sequence[BoardMinion]) -> List[BoardMinion]:
    removed = {fi for _, fi in _matched_indices(friendly, enemies)}
    if removed:
        logger.debug("threat: %d of %d creatures presumed traded", len(removed), len(friendly))
    return [m for i, m in enumerate(friendly) if i not in removed]
