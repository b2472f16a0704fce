import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

import consts
from ai import build_profile
from cards import ORACLE, CardOracle
from engine import DamageProjection, project
from models import Board, BoardMinion, HandCard, HeroState, ManaState, PreferenceProfile, UnknownCard, Weapon

logger = logging.getLogger(__name__)


# ---------------------- Board JSON ----------------------

def _section(data: Dict[str, Any], key: str, kind: type, default):
    value = data.get(key)
    if value is None:
        return default
    if not isinstance(value, kind):
        raise ValueError(f"{key!r} must be a JSON {'object' if kind is dict else 'array'}")
    return value

def _hand_card(raw: Any, oracle: CardOracle) -> HandCard:
    # bare ids take cost and category from the card templates
    if isinstance(raw, str):
        attrs = oracle.lookup(raw)
        return HandCard(raw, attrs.cost, attrs.card_type)
    if not isinstance(raw, dict):
        raise ValueError(f"hand entry must be a card id or an object, got {raw!r}")
    attrs = oracle.lookup(raw["card_id"])
    return HandCard(raw["card_id"], int(raw.get("cost", attrs.cost)), raw.get("category", attrs.card_type))

def _minion(raw: Any, oracle: CardOracle) -> BoardMinion:
    if not isinstance(raw, dict):
        raise ValueError(f"minion entry must be an object, got {raw!r}")
    attrs = oracle.lookup(raw["card_id"])
    return BoardMinion(
        card_id=raw["card_id"],
        attack=int(raw.get("attack", attrs.attack)),
        health=int(raw.get("health", attrs.health)),
        can_attack=bool(raw.get("can_attack", False)),
        taunt=bool(raw.get("taunt", attrs.taunt)),
        stealth=bool(raw.get("stealth", attrs.stealth)),
        divine_shield=bool(raw.get("divine_shield", attrs.divine_shield)),
        silenced=bool(raw.get("silenced", False)),
        spell_power=int(raw.get("spell_power", attrs.spell_power)),
    )

def _hero(data: Dict[str, Any], key: str) -> HeroState:
    raw = _section(data, key, dict, {})
    return HeroState(int(raw.get("health", 30)), int(raw.get("armor", 0)), int(raw.get("attack_count", 0)))

def board_from_dict(data: Dict[str, Any], oracle: CardOracle = ORACLE) -> Board:
    if not isinstance(data, dict):
        raise ValueError("board must be a JSON object")
    weapon = _section(data, "weapon", dict, None)
    if weapon:
        attrs = oracle.lookup(weapon["card_id"])
        weapon = Weapon(weapon["card_id"], int(weapon.get("durability", attrs.health)))
    mana = _section(data, "mana", dict, {})
    return Board(
        hand=[_hand_card(c, oracle) for c in _section(data, "hand", list, [])],
        friendly_minions=[_minion(m, oracle) for m in _section(data, "friendly_minions", list, [])],
        enemy_minions=[_minion(m, oracle) for m in _section(data, "enemy_minions", list, [])],
        friendly_hero=_hero(data, "friendly_hero"),
        enemy_hero=_hero(data, "enemy_hero"),
        weapon=weapon or None,
        mana=ManaState(int(mana.get("available", 0)), int(mana.get("locked", 0))),
        turn=int(data.get("turn", 1)),
        hero_power=data.get("hero_power"),
    )

def load_board(path: str, oracle: CardOracle = ORACLE) -> Board:
    with Path(path).open("r", encoding="utf-8") as f:
        return board_from_dict(json.load(f), oracle)

# ---------------------- Printing ----------------------

def _minion_str(m: BoardMinion) -> str:
    flags = []
    if m.taunt: flags.append("T")
    if m.stealth: flags.append("St")
    if m.divine_shield: flags.append("D")
    if m.silenced: flags.append("Si")
    if m.can_attack: flags.append("R")
    return f"{m.card_id}({m.attack}/{m.health})[{''.join(flags)}]"

def print_state(board: Board):
    print("=" * 70)
    print(f"Turn {board.turn} | Mana {board.mana.available} (locked {board.mana.locked})")
    fh, eh = board.friendly_hero, board.enemy_hero
    print(f"Us:   {fh.health} HP +{fh.armor} armor | attacks made {fh.attack_count}"
          + (f" | weapon {board.weapon.card_id} ({board.weapon.durability})" if board.weapon else ""))
    print(f"Them: {eh.health} HP +{eh.armor} armor")
    print(f"Hand[{len(board.hand)}]: {[f'{c.card_id}:{c.cost}' for c in board.hand]}")
    print(f"Board[{len(board.friendly_minions)}]: {[_minion_str(m) for m in board.friendly_minions]}")
    print(f"Enemy[{len(board.enemy_minions)}]: {[_minion_str(m) for m in board.enemy_minions]}")
    print("=" * 70)

def print_projection(proj: DamageProjection):
    print("Projection:")
    print(f"  lethal range {proj.lethal_range} | taunt {'yes' if proj.enemy_taunt else 'no'} | spell power {proj.spell_power}")
    print(f"  burst {proj.burst_damage} | sequence {list(proj.spell_sequence)} = {proj.spell_sequence_damage}"
          f" | remaining {proj.remaining_burst_damage}")
    print(f"  weapon {proj.weapon_damage} (+{proj.next_turn_weapon_damage} next turn) | creatures {proj.creature_damage}"
          f" | face {proj.face_damage}")
    print(f"  lethal: this turn {proj.lethal_this_turn} | next turn {proj.lethal_next_turn}"
          f" | next turn without spells {proj.lethal_next_turn_without_spells}")

def print_profile(profile: PreferenceProfile):
    print(f"Profile (base {profile.base}):")
    for name in ("aggro", "defense", "draw", "weapons"):
        mod = getattr(profile, name)
        if mod is not None:
            print(f"  {name:<8} {mod.value}")
    for (cid, target), mod in profile.items():
        print(f"  {cid}{' -> ' + target if target else ''}: {mod.value}")

# ---------------------- Entry ----------------------

def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="shaman-face", description="Build a preference profile for a board snapshot.")
    parser.add_argument("board", help="board snapshot JSON file")
    parser.add_argument("--view", metavar="PNG", help="also render the board and profile to an image")
    parser.add_argument("--debug", action="store_true", help="log projection details")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if (args.debug or consts.DEBUG) else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        board = load_board(args.board)
    except (OSError, ValueError, TypeError, KeyError, UnknownCard) as e:
        print(f"Error: cannot load board {args.board}: {e}", file=sys.stderr)
        return 2

    proj = project(board)
    profile = build_profile(board, proj=proj)
    print_state(board)
    print_projection(proj)
    print_profile(profile)

    if args.view:
        import viewer
        viewer.save(viewer.render(board, proj, profile), args.view)
        logger.info("rendered %s", args.view)
    return 0

if __name__ == "__main__":
    sys.exit(main())
