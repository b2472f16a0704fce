
# ---------------------- Errors ----------------------

from dataclasses import dataclass, field
from typing import Dict, Iterable, Optional, Set, Tuple


class UnknownCard(LookupError):
    pass

class InvalidModifier(ValueError):
    pass

class NoChoiceAvailable(LookupError):
    pass

# ---------------------- Cards ----------------------

@dataclass(frozen=True)
class CardAttributes:
    card_id: str
    card_type: str      # "MINION", "SPELL", "WEAPON", "ABILITY"
    cost: int
    attack: int = 0
    health: int = 0     # durability for weapons
    overload: int = 0
    spell_power: int = 0
    taunt: bool = False
    divine_shield: bool = False
    stealth: bool = False
    windfury: bool = False

@dataclass(frozen=True)
class HandCard:
    card_id: str
    cost: int           # current cost, discounts included
    category: str = "SPELL"

# ---------------------- Board entities ----------------------

@dataclass(frozen=True)
class BoardMinion:
    card_id: str
    attack: int
    health: int
    can_attack: bool = False
    taunt: bool = False
    stealth: bool = False
    divine_shield: bool = False
    silenced: bool = False
    spell_power: int = 0

    @classmethod
    def from_attributes(cls, attrs: CardAttributes) -> "BoardMinion":
        """Hypothetical creature as it would enter play from hand."""
        return cls(
            card_id=attrs.card_id,
            attack=attrs.attack,
            health=attrs.health,
            can_attack=True,
            taunt=attrs.taunt,
            stealth=attrs.stealth,
            divine_shield=attrs.divine_shield,
            spell_power=attrs.spell_power,
        )

@dataclass(frozen=True)
class Weapon:
    card_id: str
    durability: int

@dataclass(frozen=True)
class HeroState:
    health: int = 30
    armor: int = 0
    attack_count: int = 0

@dataclass(frozen=True)
class ManaState:
    available: int = 0
    locked: int = 0     # overloaded; unavailable next turn

@dataclass(frozen=True)
class Board:
    hand: Tuple[HandCard, ...] = ()
    friendly_minions: Tuple[BoardMinion, ...] = ()
    enemy_minions: Tuple[BoardMinion, ...] = ()
    friendly_hero: HeroState = field(default_factory=HeroState)
    enemy_hero: HeroState = field(default_factory=HeroState)
    weapon: Optional[Weapon] = None
    mana: ManaState = field(default_factory=ManaState)
    turn: int = 1
    hero_power: Optional[str] = None

    def __post_init__(self):
        # accept lists from callers, store tuples
        for name in ("hand", "friendly_minions", "enemy_minions"):
            object.__setattr__(self, name, tuple(getattr(self, name)))
        for m in self.friendly_minions + self.enemy_minions:
            if m.health <= 0:
                raise ValueError(f"minion {m.card_id} on board with health {m.health}")

    @property
    def mana_available(self) -> int:
        return self.mana.available

    def hand_ids(self) -> Tuple[str, ...]:
        return tuple(c.card_id for c in self.hand)

    def has_in_hand(self, card_id: str) -> bool:
        return any(c.card_id == card_id for c in self.hand)

    def count_in_hand(self, card_id: str) -> int:
        return sum(1 for c in self.hand if c.card_id == card_id)

    def has_friendly_minion(self, card_id: str) -> bool:
        return any(m.card_id == card_id for m in self.friendly_minions)

# ---------------------- Profile ----------------------

MODIFIER_MIN = -1000
MODIFIER_MAX = 1000

ProfileKey = Tuple[str, Optional[str]]

@dataclass(frozen=True)
class Modifier:
    value: int
    target: Optional[str] = None

    def __post_init__(self):
        if not MODIFIER_MIN <= self.value <= MODIFIER_MAX:
            raise InvalidModifier(f"modifier {self.value} outside [{MODIFIER_MIN}, {MODIFIER_MAX}]")

GLOBAL_SCALARS = ("aggro", "defense", "draw", "weapons")

@dataclass
class PreferenceProfile:
    """
    Percentage modifiers over a base profile.

    Entries are keyed by (card, target). Unscoped entries (target None) apply
    to the card everywhere; target-scoped entries are added on top of them.

    Keys written with add_overlay are marked so that merging adds them to
    whatever an earlier layer stored under the same key.
    """
    base: str = "Rush"
    modifiers: Dict[ProfileKey, Modifier] = field(default_factory=dict)
    aggro: Optional[Modifier] = None
    defense: Optional[Modifier] = None
    draw: Optional[Modifier] = None
    weapons: Optional[Modifier] = None
    overlays: Set[ProfileKey] = field(default_factory=set)

    def set_modifier(self, card_id: str, value: int, target: Optional[str] = None) -> "PreferenceProfile":
        self.modifiers[(card_id, target)] = Modifier(value, target)
        self.overlays.discard((card_id, target))
        return self

    def add_overlay(self, card_id: str, value: int, target: str) -> "PreferenceProfile":
        self.set_modifier(card_id, value, target)
        self.overlays.add((card_id, target))
        return self

    def modifier_for(self, card_id: str, target: Optional[str] = None) -> Optional[Modifier]:
        return self.modifiers.get((card_id, target))

    def effective_value(self, card_id: str, target: Optional[str] = None) -> int:
        total = 0
        own = self.modifiers.get((card_id, None))
        if own is not None:
            total += own.value
        if target is not None:
            scoped = self.modifiers.get((card_id, target))
            if scoped is not None:
                total += scoped.value
        return total

    def items(self) -> Iterable[Tuple[ProfileKey, Modifier]]:
        return sorted(self.modifiers.items(), key=lambda kv: (kv[0][0], kv[0][1] or ""))

def merge_profiles(*layers: PreferenceProfile) -> PreferenceProfile:
    """
    Fold layers left to right; later layers win per key and per global scalar,
    except overlay keys, which add onto the earlier value (clamped to range).
    """
    out = PreferenceProfile()
    for layer in layers:
        out.base = layer.base
        for key, mod in layer.modifiers.items():
            prior = out.modifiers.get(key)
            if key in layer.overlays and prior is not None:
                total = max(MODIFIER_MIN, min(MODIFIER_MAX, prior.value + mod.value))
                mod = Modifier(total, mod.target)
            out.modifiers[key] = mod
        for name in GLOBAL_SCALARS:
            value = getattr(layer, name)
            if value is not None:
                setattr(out, name, value)
    return out
