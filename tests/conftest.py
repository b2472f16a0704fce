"""
Shared pytest fixtures for the Shaman Face test suite.

Boards are built from plain card ids; costs and categories come from the
card templates unless a test overrides them.
"""

import os
import sys

import pytest

# Ensure project root is in path
_project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, _project_root)

# pygame renders off-screen in tests
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

from cards import ORACLE
from models import Board, BoardMinion, HandCard, HeroState, ManaState


def _hand(*card_ids):
    out = []
    for cid in card_ids:
        attrs = ORACLE.lookup(cid)
        out.append(HandCard(cid, attrs.cost, attrs.card_type))
    return out


@pytest.fixture
def hand():
    """hand(*ids) -> list of HandCard at template cost."""
    return _hand


@pytest.fixture
def minion():
    """minion(id, attack, health, **flags) -> BoardMinion."""
    def _make(card_id, attack, health, **kw):
        return BoardMinion(card_id, attack, health, **kw)
    return _make


@pytest.fixture
def board():
    """board(mana=.., enemy_health=.., **fields) -> Board."""
    def _make(mana=0, locked=0, enemy_health=30, enemy_armor=0, attack_count=0, **kw):
        return Board(
            mana=ManaState(mana, locked),
            enemy_hero=HeroState(enemy_health, enemy_armor),
            friendly_hero=HeroState(30, 0, attack_count),
            **kw,
        )
    return _make
