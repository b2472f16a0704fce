# ai.py
import logging
from typing import Dict, Iterable, Optional

from cards import MINIONS_OVERLOAD_TABLE, ORACLE, SPELLS_OVERLOAD_TABLE, CardOracle
from consts import *
from engine import DamageProjection, has_enemy_taunt, project
from models import Board, Modifier, NoChoiceAvailable, PreferenceProfile, merge_profiles
from threat import presumed_trades

logger = logging.getLogger(__name__)


def _layer() -> PreferenceProfile:
    return PreferenceProfile(base=BASE_PROFILE)

# ----------------- Small helpers -----------------

def has_doomhammer_on_board(board: Board) -> bool:
    return board.weapon is not None and board.weapon.card_id == DOOMHAMMER

def can_play_doomhammer_next_turn(board: Board, oracle: CardOracle = ORACLE) -> bool:
    next_turn_mana = board.mana_available - board.mana.locked + NEXT_TURN_MANA_GAIN
    return board.has_in_hand(DOOMHAMMER) and next_turn_mana >= oracle.lookup(DOOMHAMMER).cost

def mana_left_after_minions(board: Board) -> int:
    left = board.mana_available - sum(c.cost for c in board.hand if c.category == MINION)
    return left if left > 0 else 0

def should_draw_cards(board: Board) -> bool:
    minions_in_hand = sum(1 for c in board.hand if c.category == MINION)
    if minions_in_hand < 2 and board.mana_available > 2 and board.hero_power == LIFE_TAP:
        return True
    if board.has_in_hand(ANCESTRAL_KNOWLEDGE) and mana_left_after_minions(board) >= 2:
        return True
    return False

def conservative_overload_modifier(board: Board) -> int:
    # Trogg grows off overload, so it pays to overload a little earlier
    if board.has_friendly_minion(TUNNEL_TROGG):
        return OVERLOAD_SPELLS_CONSERVATIVE // 2
    return OVERLOAD_SPELLS_CONSERVATIVE

# ----------------- Rule layers -----------------

def base_rules() -> PreferenceProfile:
    p = _layer()
    p.aggro = Modifier(AGGRO_MODIFIER)
    p.set_modifier(FERAL_SPIRIT, 20)
    p.set_modifier(LAVA_SHOCK, 200)      # keep it for turns with overloaded mana
    p.set_modifier(THE_COIN, 70)
    p.set_modifier(EARTH_SHOCK, 20, target=SLUDGE_BELCHER)
    p.set_modifier(KNIFE_JUGGLER, 0)
    return p

def lethal_rules(board: Board, proj: DamageProjection) -> PreferenceProfile:
    p = _layer()
    if proj.lethal_this_turn:
        logger.info("lethal this turn (range %d): going all in", proj.lethal_range)
        p.aggro = Modifier(ALL_IN_AGGRO_MODIFIER)
        for cid in SPELL_DAMAGES:
            p.set_modifier(cid, BURN_FREE_MODIFIER)
    elif not proj.lethal_next_turn:
        logger.info("no lethal in sight: holding overload burn")
        conservative = conservative_overload_modifier(board)
        p.set_modifier(LIGHTNING_BOLT, conservative // 3)
        p.set_modifier(CRACKLE, conservative)
        p.set_modifier(LAVA_BURST, conservative)
        p.set_modifier(ARCANE_GOLEM, ARCANE_GOLEM_HOLD_MODIFIER)
    elif proj.lethal_next_turn_without_spells:
        logger.info("board alone threatens lethal next turn: protecting it")
        p.defense = Modifier(BOARD_LETHAL_DEFENSE_MODIFIER)
        for cid in SPELL_DAMAGES:
            p.set_modifier(cid, BURN_HOLD_MODIFIER)
    return p

def taunt_rules(board: Board) -> PreferenceProfile:
    p = _layer()
    if not has_enemy_taunt(board):
        p.set_modifier(IRONBEAK_OWL, OWL_HOLD_MODIFIER)
        return p
    p.set_modifier(IRONBEAK_OWL, OWL_TAUNT_MODIFIER)
    for m in board.enemy_minions:
        if m.taunt and not m.stealth:
            p.add_overlay(IRONBEAK_OWL, TAUNT_TARGET_OVERLAY, m.card_id)
            p.add_overlay(EARTH_SHOCK, TAUNT_TARGET_OVERLAY, m.card_id)
    return p

def threat_rules(board: Board) -> PreferenceProfile:
    p = _layer()
    attackers = [m for m in board.friendly_minions if m.can_attack]
    for enemy, _ in presumed_trades(attackers, board.enemy_minions):
        p.add_overlay(LIGHTNING_BOLT, THREAT_TARGET_OVERLAY, enemy.card_id)
        p.add_overlay(LAVA_SHOCK, THREAT_TARGET_OVERLAY, enemy.card_id)
    return p

def weapon_rules(board: Board) -> PreferenceProfile:
    p = _layer()
    if not has_doomhammer_on_board(board):
        # keep Rockbiter until the hammer shows up
        p.set_modifier(ROCKBITER_WEAPON, ROCKBITER_HOLD_MODIFIER)
    elif not has_enemy_taunt(board):
        p.weapons = Modifier(WEAPON_FACE_MODIFIER)
    return p

def draw_rules(board: Board) -> PreferenceProfile:
    p = _layer()
    if should_draw_cards(board):
        p.set_modifier(ANCESTRAL_KNOWLEDGE, 0)
        p.draw = Modifier(DRAW_MODIFIER)
    else:
        p.draw = Modifier(NO_DRAW_MODIFIER)
    return p

def turn_rules(board: Board) -> PreferenceProfile:
    p = _layer()
    if board.turn == 1:
        p.set_modifier(TUNNEL_TROGG, -100)
        p.set_modifier(LEPER_GNOME, -100)
    elif board.turn == 2:
        p.set_modifier(UNBOUND_ELEMENTAL, -500)
    return p

def overload_override_rules(board: Board, proj: DamageProjection, oracle: CardOracle = ORACLE) -> PreferenceProfile:
    """Don't lock mana we need for Doomhammer next turn, unless the game ends now."""
    p = _layer()
    if proj.lethal_this_turn:
        return p
    if has_doomhammer_on_board(board) or not can_play_doomhammer_next_turn(board, oracle):
        return p
    if board.friendly_minions:
        for cid in MINIONS_OVERLOAD_TABLE:
            p.set_modifier(cid, OVERLOAD_OVERRIDE_MODIFIER)
    for cid in SPELLS_OVERLOAD_TABLE:
        p.set_modifier(cid, OVERLOAD_OVERRIDE_MODIFIER)
    return p

# ----------------- Profile -----------------

def build_profile(board: Board, oracle: CardOracle = ORACLE, proj: Optional[DamageProjection] = None) -> PreferenceProfile:
    if proj is None:
        proj = project(board, oracle)
    return merge_profiles(
        base_rules(),
        lethal_rules(board, proj),
        taunt_rules(board),
        threat_rules(board),
        weapon_rules(board),
        draw_rules(board),
        turn_rules(board),
        overload_override_rules(board, proj, oracle),
    )

def choose_best(candidates: Iterable[str], priority_table: Dict[str, int] = HERO_POWER_PRIORITY) -> str:
    """Highest-ranked candidate; ties go to whichever the table lists first."""
    offered = set(candidates)
    ranked = [(cid, rank) for cid, rank in priority_table.items() if cid in offered]
    if not ranked:
        raise NoChoiceAvailable(f"none of {sorted(offered)} is ranked")
    best = max(rank for _, rank in ranked)
    return next(cid for cid, rank in ranked if rank == best)

def sir_finley_choice(choices: Iterable[str]) -> str:
    return choose_best(choices, HERO_POWER_PRIORITY)
