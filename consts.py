from typing import Dict

# --- Debug / dev toggles ---
DEBUG = False

# --- Card categories ---
SPELL   = "SPELL"
MINION  = "MINION"
WEAPON  = "WEAPON"
ABILITY = "ABILITY"
OTHER   = "OTHER"

# --- Cards ---
THE_COIN              = "GAME_005"

EARTH_SHOCK           = "EX1_245"
LIGHTNING_BOLT        = "EX1_238"
ROCKBITER_WEAPON      = "CS2_045"
TUNNEL_TROGG          = "LOE_018"
ANCESTRAL_KNOWLEDGE   = "AT_053"
CRACKLE               = "GVG_038"
LAVA_SHOCK            = "BRM_011"
TOTEM_GOLEM           = "AT_052"
ELEMENTAL_DESTRUCTION = "AT_051"
FERAL_SPIRIT          = "EX1_248"
HEX                   = "EX1_246"
LAVA_BURST            = "EX1_241"
MANA_TIDE_TOTEM       = "EX1_575"
DOOMHAMMER            = "EX1_567"
LEPER_GNOME           = "EX1_029"
BLOODMAGE_THALNOS     = "EX1_012"
LOOT_HOARDER          = "EX1_096"
IRONBEAK_OWL          = "CS2_203"
UNBOUND_ELEMENTAL     = "EX1_258"
ARCANE_GOLEM          = "EX1_089"
KNIFE_JUGGLER         = "NEW1_019"
SLUDGE_BELCHER        = "FP1_012"

# Hero powers
STEADY_SHOT   = "DS1h_292"
SHAPESHIFT    = "CS2_017"
LIFE_TAP      = "CS2_056"
FIREBLAST     = "CS2_034"
REINFORCE     = "CS2_101"
ARMOR_UP      = "CS2_102"
LESSER_HEAL   = "CS1h_001"
DAGGER_MASTERY = "CS2_083b"
TOTEMIC_CALL  = "CS2_049"

# --- Static tables ---
HERO_POWER_PRIORITY: Dict[str, int] = {
    STEADY_SHOT: 8,
    SHAPESHIFT: 7,
    LIFE_TAP: 6,
    FIREBLAST: 5,
    REINFORCE: 4,
    ARMOR_UP: 3,
    LESSER_HEAL: 2,
    DAGGER_MASTERY: 1,
}

# Face damage of each burn spell, before spell power
SPELL_DAMAGES: Dict[str, int] = {
    EARTH_SHOCK: 1,
    LIGHTNING_BOLT: 3,
    CRACKLE: 4,          # 3-6, rounded to the mean
    LAVA_BURST: 5,
    LAVA_SHOCK: 2,
}

SPELL_OVERLOAD_CARDS = (
    LIGHTNING_BOLT, CRACKLE, LAVA_BURST, DOOMHAMMER,
    ELEMENTAL_DESTRUCTION, ANCESTRAL_KNOWLEDGE, FERAL_SPIRIT,
)
MINION_OVERLOAD_CARDS = (TOTEM_GOLEM,)

# --- Damage projection ---
WINDFURY_SWINGS         = 2
ROCKBITER_BONUS         = 3
NEXT_TURN_WEAPON_DAMAGE = 4
NEXT_TURN_MANA_GAIN     = 1

# --- Modifiers (percent of the base profile value) ---
BASE_PROFILE                        = "Rush"
AGGRO_MODIFIER                      = 300
ALL_IN_AGGRO_MODIFIER               = 1000
OVERLOAD_SPELLS_CONSERVATIVE        = 400
OVERLOAD_OVERRIDE_MODIFIER          = 600
BURN_FREE_MODIFIER                  = 0
BURN_HOLD_MODIFIER                  = 150
BOARD_LETHAL_DEFENSE_MODIFIER       = 150
ARCANE_GOLEM_HOLD_MODIFIER          = 400
ROCKBITER_HOLD_MODIFIER             = 400
WEAPON_FACE_MODIFIER                = 150
OWL_HOLD_MODIFIER                   = 150
OWL_TAUNT_MODIFIER                  = 60
TAUNT_TARGET_OVERLAY                = -50
THREAT_TARGET_OVERLAY               = -30
DRAW_MODIFIER                       = 150
NO_DRAW_MODIFIER                    = 50

# --- Viewer layout ---
VIEW_W, VIEW_H = 1100, 620

BG = (20, 25, 30)
WHITE = (230, 230, 230)
GREY = (150, 150, 150)
GREEN = (60, 200, 90)
RED   = (210, 70, 70)
YELLOW = (230, 200, 90)
CARD_BG_HAND = (45, 75, 110)
CARD_BG_MY   = (60, 100, 70)
CARD_BG_EN   = (70, 70, 100)
COST_BADGE   = (0, 50, 102)
ATTK_COLOR   = (230, 170, 60)

BOARD_BG       = (26, 32, 40)
BOARD_BORDER   = (60, 90, 130)
HEALTH_BADGE   = (210, 70, 70)
ARMOR_BADGE    = (130, 130, 130)
MANA_BADGE     = (60, 120, 230)
LOCKED_MANA    = (200, 140, 40)
PLATE_BG       = (30, 36, 46)
PLATE_RIM      = (42, 50, 60)
PANEL_BG       = (18, 22, 26)
PANEL_TEXT     = (215, 215, 215)
PANEL_ACCENT   = (140, 170, 255)

MINION_W, MINION_H = 90, 110
MARGIN = 12
FACE_W, FACE_H = 220, 56
PANEL_W = 330
