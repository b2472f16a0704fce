"""
Static card attributes and the read-only oracle over them.

Only the cards this deck plays, the hero powers it can be offered and the
opposing cards its rules name are listed; anything else is an UnknownCard.
"""

from types import MappingProxyType
from typing import Dict, Mapping

from consts import *
from models import CardAttributes, UnknownCard


def _minion(cid: str, cost: int, attack: int, health: int, **kw) -> CardAttributes:
    return CardAttributes(cid, MINION, cost, attack=attack, health=health, **kw)

def _spell(cid: str, cost: int, **kw) -> CardAttributes:
    return CardAttributes(cid, SPELL, cost, **kw)

def _power(cid: str) -> CardAttributes:
    return CardAttributes(cid, ABILITY, 2)


CARD_TEMPLATES: Mapping[str, CardAttributes] = MappingProxyType({c.card_id: c for c in (
    _spell(THE_COIN, 0),
    _spell(EARTH_SHOCK, 1),
    _spell(LIGHTNING_BOLT, 1, overload=1),
    _spell(ROCKBITER_WEAPON, 1),
    _spell(ANCESTRAL_KNOWLEDGE, 2, overload=2),
    _spell(CRACKLE, 2, overload=1),
    _spell(LAVA_SHOCK, 2),
    _spell(ELEMENTAL_DESTRUCTION, 3, overload=5),
    _spell(FERAL_SPIRIT, 3, overload=2),
    _spell(HEX, 3),
    _spell(LAVA_BURST, 3, overload=2),
    CardAttributes(DOOMHAMMER, WEAPON, 5, attack=2, health=8, overload=2, windfury=True),

    _minion(TUNNEL_TROGG, 1, 1, 3),
    _minion(LEPER_GNOME, 1, 2, 1),
    _minion(TOTEM_GOLEM, 2, 3, 4, overload=1),
    _minion(BLOODMAGE_THALNOS, 2, 1, 1, spell_power=1),
    _minion(LOOT_HOARDER, 2, 2, 1),
    _minion(KNIFE_JUGGLER, 2, 2, 2),
    _minion(MANA_TIDE_TOTEM, 3, 0, 3),
    _minion(IRONBEAK_OWL, 3, 2, 1),
    _minion(UNBOUND_ELEMENTAL, 3, 2, 4),
    _minion(ARCANE_GOLEM, 3, 4, 2),
    _minion(SLUDGE_BELCHER, 5, 3, 5, taunt=True),

    _power(STEADY_SHOT),
    _power(SHAPESHIFT),
    _power(LIFE_TAP),
    _power(FIREBLAST),
    _power(REINFORCE),
    _power(ARMOR_UP),
    _power(LESSER_HEAL),
    _power(DAGGER_MASTERY),
    _power(TOTEMIC_CALL),
)})


class CardOracle:
    def __init__(self, templates: Mapping[str, CardAttributes] = CARD_TEMPLATES):
        self._templates = templates

    def lookup(self, card_id: str) -> CardAttributes:
        try:
            return self._templates[card_id]
        except KeyError:
            raise UnknownCard(card_id) from None

    def __contains__(self, card_id: str) -> bool:
        return card_id in self._templates


ORACLE = CardOracle()

SPELLS_OVERLOAD_TABLE: Dict[str, int] = {cid: ORACLE.lookup(cid).overload for cid in SPELL_OVERLOAD_CARDS}
MINIONS_OVERLOAD_TABLE: Dict[str, int] = {cid: ORACLE.lookup(cid).overload for cid in MINION_OVERLOAD_CARDS}
