import pytest

from cards import CARD_TEMPLATES, MINIONS_OVERLOAD_TABLE, ORACLE, SPELLS_OVERLOAD_TABLE, CardOracle
from consts import *
from models import CardAttributes, UnknownCard


def test_lookup_known_card():
    hammer = ORACLE.lookup(DOOMHAMMER)
    assert (hammer.card_type, hammer.cost, hammer.attack, hammer.health) == (WEAPON, 5, 2, 8)
    assert hammer.windfury

def test_unknown_card_raises():
    with pytest.raises(UnknownCard):
        ORACLE.lookup("NOT_A_CARD")

def test_unknown_card_is_a_lookup_error():
    with pytest.raises(LookupError):
        ORACLE.lookup("")

def test_contains():
    assert LAVA_BURST in ORACLE
    assert "NOT_A_CARD" not in ORACLE

def test_templates_are_read_only():
    with pytest.raises(TypeError):
        CARD_TEMPLATES["X"] = CardAttributes("X", SPELL, 0)

def test_custom_templates():
    oracle = CardOracle({"X": CardAttributes("X", MINION, 1, attack=1, health=1)})
    assert oracle.lookup("X").health == 1
    with pytest.raises(UnknownCard):
        oracle.lookup(DOOMHAMMER)

def test_overload_tables():
    assert SPELLS_OVERLOAD_TABLE[LIGHTNING_BOLT] == 1
    assert SPELLS_OVERLOAD_TABLE[LAVA_BURST] == 2
    assert SPELLS_OVERLOAD_TABLE[ELEMENTAL_DESTRUCTION] == 5
    assert SPELLS_OVERLOAD_TABLE[DOOMHAMMER] == 2
    assert MINIONS_OVERLOAD_TABLE == {TOTEM_GOLEM: 1}

def test_every_table_card_is_known():
    for cid in list(SPELL_DAMAGES) + list(HERO_POWER_PRIORITY):
        assert cid in ORACLE
