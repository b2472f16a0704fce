"""
Damage projection for one board snapshot.

Every function here is pure: it reads a Board (and the card oracle) and
returns numbers or verdicts. Nothing searches opponent replies; the
estimates are single-ply, greedy and lean optimistic.

Signals
- burst damage in hand (every burn spell, affordable or not, + spell power)
- weapon damage this turn (windfury weapon, Rockbiter buffs)
- creature damage next turn (attackers surviving presumed enemy trades)
- lethal range (enemy health + armor)
"""

import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple

from cards import ORACLE, CardOracle
from consts import *
from feasibility import affordable_count, by_ascending_cost, by_descending_cost, playable_sequence, reserve
from models import Board, BoardMinion, HandCard
from threat import surviving_attackers

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DamageProjection:
    lethal_range: int
    enemy_taunt: bool
    spell_power: int
    burst_damage: int
    spell_sequence: Tuple[str, ...]
    spell_sequence_damage: int
    remaining_burst_damage: int
    weapon_damage: int
    next_turn_weapon_damage: int
    creature_damage: int
    face_damage: int
    lethal_this_turn: bool
    lethal_next_turn: bool
    lethal_next_turn_without_spells: bool

# ----------------- Small helpers -----------------

def spell_power(board: Board) -> int:
    return sum(m.spell_power for m in board.friendly_minions if not m.silenced)

def has_enemy_taunt(board: Board) -> bool:
    return any(m.taunt and not m.stealth for m in board.enemy_minions)

def lethal_range(board: Board) -> int:
    return board.enemy_hero.health + board.enemy_hero.armor

def attacks_left(board: Board) -> int:
    return WINDFURY_SWINGS - board.friendly_hero.attack_count

def ready_attack(board: Board) -> int:
    return sum(m.attack for m in board.friendly_minions if m.can_attack)

# ----------------- Weapon -----------------

def equipped_windfury_weapon(board: Board, oracle: CardOracle = ORACLE) -> bool:
    return board.weapon is not None and oracle.lookup(board.weapon.card_id).windfury

def windfury_weapon_in_hand(board: Board, oracle: CardOracle = ORACLE) -> Optional[HandCard]:
    for card in board.hand:
        attrs = oracle.lookup(card.card_id)
        if attrs.card_type == WEAPON and attrs.windfury:
            return card
    return None

def should_play_weapon(board: Board, oracle: CardOracle = ORACLE) -> bool:
    """Nothing equipped, a windfury weapon in hand and the mana to play it now."""
    if board.weapon is not None:
        return False
    card = windfury_weapon_in_hand(board, oracle)
    return card is not None and board.mana_available >= card.cost

def _budget(board: Board, with_weapon: bool, oracle: CardOracle) -> int:
    # with no weapon in hand there is nothing to reserve for
    card = windfury_weapon_in_hand(board, oracle) if with_weapon else None
    return reserve(board.mana_available, card.cost) if card is not None else board.mana_available

def playable_rockbiters(board: Board, with_weapon: bool = False, oracle: CardOracle = ORACLE) -> int:
    budget = _budget(board, with_weapon, oracle)
    return affordable_count(board.count_in_hand(ROCKBITER_WEAPON), budget)

def weapon_damage(board: Board, oracle: CardOracle = ORACLE) -> int:
    if equipped_windfury_weapon(board, oracle):
        swing = oracle.lookup(board.weapon.card_id).attack
        return (swing + playable_rockbiters(board, oracle=oracle) * ROCKBITER_BONUS) * attacks_left(board)

    if should_play_weapon(board, oracle):
        swing = oracle.lookup(windfury_weapon_in_hand(board, oracle).card_id).attack
        return (swing + playable_rockbiters(board, True, oracle) * ROCKBITER_BONUS) * attacks_left(board)

    return 0

def next_turn_weapon_damage(board: Board, oracle: CardOracle = ORACLE) -> int:
    if not equipped_windfury_weapon(board, oracle):
        return 0
    charges = board.weapon.durability - attacks_left(board)
    return NEXT_TURN_WEAPON_DAMAGE if charges >= WINDFURY_SWINGS else 0

# ----------------- Burn -----------------

def total_burst_damage(board: Board) -> int:
    sp = spell_power(board)
    return sum(SPELL_DAMAGES[c.card_id] + sp for c in board.hand if c.card_id in SPELL_DAMAGES)

def playable_spell_sequence(board: Board, with_weapon: bool = False, oracle: CardOracle = ORACLE) -> List[str]:
    budget = _budget(board, with_weapon, oracle)
    burn = by_ascending_cost(c for c in board.hand if c.card_id in SPELL_DAMAGES)
    return [c.card_id for c in playable_sequence(burn, budget)]

def spell_sequence_damage(sequence: List[str]) -> int:
    # table damage only; spell power is counted in the burst total
    return sum(SPELL_DAMAGES[cid] for cid in sequence if cid in SPELL_DAMAGES)

def playable_spell_sequence_damage(board: Board, oracle: CardOracle = ORACLE) -> int:
    return spell_sequence_damage(playable_spell_sequence(board, should_play_weapon(board, oracle), oracle))

def face_damage(board: Board, oracle: CardOracle = ORACLE) -> int:
    return weapon_damage(board, oracle) + playable_spell_sequence_damage(board, oracle)

def remaining_burst_damage(board: Board, oracle: CardOracle = ORACLE) -> int:
    return total_burst_damage(board) - playable_spell_sequence_damage(board, oracle)

# ----------------- Creatures -----------------

def hand_minions_to_play(board: Board, oracle: CardOracle = ORACLE) -> List[BoardMinion]:
    minions = by_descending_cost(c for c in board.hand if c.category == MINION)
    played = playable_sequence(minions, board.mana_available)
    return [BoardMinion.from_attributes(oracle.lookup(c.card_id)) for c in played]

def creature_damage(board: Board, oracle: CardOracle = ORACLE) -> int:
    attackers = [m for m in board.friendly_minions if m.can_attack]
    on_board = surviving_attackers(attackers, board.enemy_minions)
    from_hand = surviving_attackers(hand_minions_to_play(board, oracle), board.enemy_minions)
    return sum(m.attack for m in on_board) + sum(m.attack for m in from_hand)

# ----------------- LETHAL -----------------

def _unanswered_range(board: Board, oracle: CardOracle) -> int:
    return (lethal_range(board)
            - creature_damage(board, oracle)
            - weapon_damage(board, oracle)
            - next_turn_weapon_damage(board, oracle))

def lethal_this_turn(board: Board, oracle: CardOracle = ORACLE) -> bool:
    # burn ignores taunt; hero and minion swings do not
    damage = playable_spell_sequence_damage(board, oracle)
    if not has_enemy_taunt(board):
        damage += weapon_damage(board, oracle) + ready_attack(board)
    return damage >= lethal_range(board)

def lethal_next_turn_without_spells(board: Board, oracle: CardOracle = ORACLE) -> bool:
    if has_enemy_taunt(board):
        return False
    return _unanswered_range(board, oracle) <= 0

def lethal_next_turn(board: Board, oracle: CardOracle = ORACLE) -> bool:
    unblocked = not has_enemy_taunt(board) and _unanswered_range(board, oracle) <= total_burst_damage(board)
    topdeck = remaining_burst_damage(board, oracle) >= lethal_range(board) - face_damage(board, oracle)
    return unblocked or topdeck

def project(board: Board, oracle: CardOracle = ORACLE) -> DamageProjection:
    sequence = playable_spell_sequence(board, should_play_weapon(board, oracle), oracle)
    p = DamageProjection(
        lethal_range=lethal_range(board),
        enemy_taunt=has_enemy_taunt(board),
        spell_power=spell_power(board),
        burst_damage=total_burst_damage(board),
        spell_sequence=tuple(sequence),
        spell_sequence_damage=spell_sequence_damage(sequence),
        remaining_burst_damage=remaining_burst_damage(board, oracle),
        weapon_damage=weapon_damage(board, oracle),
        next_turn_weapon_damage=next_turn_weapon_damage(board, oracle),
        creature_damage=creature_damage(board, oracle),
        face_damage=face_damage(board, oracle),
        lethal_this_turn=lethal_this_turn(board, oracle),
        lethal_next_turn=lethal_next_turn(board, oracle),
        lethal_next_turn_without_spells=lethal_next_turn_without_spells(board, oracle),
    )
    logger.debug(
        "projection: range=%d burst=%d weapon=%d creatures=%d face=%d lethal(now=%s next=%s board=%s)",
        p.lethal_range, p.burst_damage, p.weapon_damage, p.creature_damage, p.face_damage,
        p.lethal_this_turn, p.lethal_next_turn, p.lethal_next_turn_without_spells,
    )
    return p
