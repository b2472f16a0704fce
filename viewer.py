"""
Off-screen rendering of a board, its projection and the resulting profile.

Nothing here opens a window: everything is drawn onto a pygame Surface that
can be saved as a PNG for inspecting a decision after the fact.
"""

from functools import lru_cache
from typing import List, Optional, Tuple

import pygame

from consts import *
from engine import DamageProjection
from models import Board, BoardMinion, HeroState, PreferenceProfile
from threat import presumed_trades


@lru_cache(maxsize=None)
def _fonts() -> Tuple[pygame.font.Font, pygame.font.Font, pygame.font.Font]:
    pygame.font.init()
    return pygame.font.SysFont(None, 22), pygame.font.SysFont(None, 26), pygame.font.SysFont(None, 20)

# ---------- Drawing helpers ----------

def draw_badge_circle(surface: pygame.Surface, center: Tuple[int, int], radius: int,
                      color: Tuple[int, int, int], text: str, text_color=WHITE):
    font, _, _ = _fonts()
    pygame.draw.circle(surface, color, center, radius)
    pygame.draw.circle(surface, (20, 20, 20), center, radius, 2)
    label = font.render(text, True, text_color)
    surface.blit(label, label.get_rect(center=center))

def draw_mana_crystal_rect(surface: pygame.Surface, r: pygame.Rect, mana: int, *, locked: int = 0):
    """
    Row of 10 diamonds, left to right.
      filled = mana available this turn (blue)
      locked = overloaded slots, unavailable next turn (amber, rightmost of the filled run)
    """
    total_slots = 10
    mana   = max(0, min(mana, total_slots))
    locked = max(0, min(locked, mana))

    gap = 6
    w = max(12, int((r.w - gap * (total_slots - 1)) / total_slots))
    h = max(10, min(r.h, int(w * 1.1)))
    top_y = r.centery - h // 2

    for i in range(total_slots):
        cx = r.x + i * (w + gap) + w // 2
        poly = [(cx, top_y), (cx + w // 2, top_y + h // 2), (cx, top_y + h), (cx - w // 2, top_y + h // 2)]
        slot = i + 1
        if slot <= mana - locked:
            pygame.draw.polygon(surface, MANA_BADGE, poly)
        elif slot <= mana:
            pygame.draw.polygon(surface, LOCKED_MANA, poly)
        else:
            pygame.draw.polygon(surface, (32, 46, 64), poly, 2)

def draw_hero_plate(surface: pygame.Surface, r: pygame.Rect, hero: HeroState, caption: str):
    font, _, _ = _fonts()
    pygame.draw.rect(surface, PLATE_BG, r, border_radius=12)
    pygame.draw.rect(surface, PLATE_RIM, r, 2, border_radius=12)
    cap = font.render(caption, True, WHITE)
    surface.blit(cap, cap.get_rect(midleft=(r.x + 12, r.centery)))

    health_center = (r.right - 20, r.centery)
    draw_badge_circle(surface, health_center, 14, HEALTH_BADGE, str(max(0, hero.health)))
    if hero.armor > 0:
        draw_badge_circle(surface, (health_center[0] - 32, health_center[1]), 11, ARMOR_BADGE, str(hero.armor))

def draw_minion(surface: pygame.Surface, r: pygame.Rect, m: BoardMinion, color_bg, *, traded: bool = False):
    font, _, small = _fonts()
    pygame.draw.rect(surface, color_bg, r, border_radius=10)
    if m.taunt:
        pygame.draw.rect(surface, GREY, r.inflate(6, 6), 3, border_radius=12)
    if traded:
        pygame.draw.rect(surface, RED, r, 3, border_radius=10)
    elif m.can_attack:
        pygame.draw.rect(surface, GREEN, r, 2, border_radius=10)

    name = small.render(m.card_id, True, WHITE)
    surface.blit(name, name.get_rect(midtop=(r.centerx, r.y + 8)))

    atk_rect = pygame.Rect(r.x + 6, r.bottom - 28, 28, 22)
    pygame.draw.rect(surface, (40, 35, 25), atk_rect, border_radius=6)
    ta = font.render(str(m.attack), True, ATTK_COLOR)
    surface.blit(ta, ta.get_rect(center=atk_rect.center))
    hp_rect = pygame.Rect(r.right - 34, r.bottom - 28, 28, 22)
    pygame.draw.rect(surface, (40, 35, 35), hp_rect, border_radius=6)
    th = font.render(str(m.health), True, WHITE)
    surface.blit(th, th.get_rect(center=hp_rect.center))

def draw_row(surface: pygame.Surface, y: int, minions: List[BoardMinion], color_bg, traded_ids: Optional[set] = None):
    traded_ids = traded_ids or set()
    x = 20
    for m in minions:
        r = pygame.Rect(x, y, MINION_W, MINION_H)
        draw_minion(surface, r, m, color_bg, traded=id(m) in traded_ids)
        x += MINION_W + MARGIN

def draw_hand(surface: pygame.Surface, y: int, board: Board, sequence: Tuple[str, ...]):
    _, big, small = _fonts()
    x = 20
    left = list(sequence)
    for card in board.hand:
        r = pygame.Rect(x, y, MINION_W - 10, MINION_H - 20)
        pygame.draw.rect(surface, CARD_BG_HAND, r, border_radius=8)
        # highlight burn the projection would cast this turn
        if card.card_id in left:
            left.remove(card.card_id)
            pygame.draw.rect(surface, YELLOW, r, 2, border_radius=8)
        gem = pygame.Rect(r.x + 4, r.y + 4, 26, 26)
        pygame.draw.ellipse(surface, COST_BADGE, gem)
        t = big.render(str(card.cost), True, WHITE)
        surface.blit(t, t.get_rect(center=gem.center))
        nm = small.render(card.card_id, True, WHITE)
        surface.blit(nm, nm.get_rect(midbottom=(r.centerx, r.bottom - 6)))
        x += r.w + 8

def draw_panel(surface: pygame.Surface, r: pygame.Rect, proj: DamageProjection, profile: PreferenceProfile):
    _, big, small = _fonts()
    pygame.draw.rect(surface, PANEL_BG, r, border_radius=8)
    pygame.draw.rect(surface, PLATE_RIM, r, 1, border_radius=8)
    title = big.render(f"Profile ({profile.base})", True, PANEL_ACCENT)
    surface.blit(title, (r.x + 10, r.y + 8))

    lines = [
        f"range {proj.lethal_range}  burst {proj.burst_damage}  face {proj.face_damage}",
        f"weapon {proj.weapon_damage}  creatures {proj.creature_damage}",
        f"lethal now {proj.lethal_this_turn}  next {proj.lethal_next_turn}",
        f"board lethal next {proj.lethal_next_turn_without_spells}",
        "",
    ]
    for name in ("aggro", "defense", "draw", "weapons"):
        mod = getattr(profile, name)
        if mod is not None:
            lines.append(f"{name}: {mod.value}")
    for (cid, target), mod in profile.items():
        lines.append(f"{cid}{' > ' + target if target else ''}: {mod.value}")

    y = r.y + 44
    for line in lines:
        surf = small.render(line, True, PANEL_TEXT)
        if y + surf.get_height() > r.bottom - 8:
            break
        surface.blit(surf, (r.x + 10, y))
        y += surf.get_height() + 3

# ---------- Entry points ----------

def render(board: Board, proj: DamageProjection, profile: PreferenceProfile,
           size: Tuple[int, int] = (VIEW_W, VIEW_H)) -> pygame.Surface:
    surface = pygame.Surface(size)
    surface.fill(BG)
    w, h = size

    play_w = w - PANEL_W - 30
    draw_hero_plate(surface, pygame.Rect(20, 12, FACE_W, FACE_H), board.enemy_hero, "Enemy")
    arena = pygame.Rect(10, 12 + FACE_H + 8, play_w, 2 * MINION_H + 3 * MARGIN)
    pygame.draw.rect(surface, BOARD_BG, arena, border_radius=12)
    pygame.draw.rect(surface, BOARD_BORDER, arena, 2, border_radius=12)

    attackers = [m for m in board.friendly_minions if m.can_attack]
    traded = {id(f) for _, f in presumed_trades(attackers, board.enemy_minions)}
    draw_row(surface, arena.y + MARGIN, list(board.enemy_minions), CARD_BG_EN)
    draw_row(surface, arena.y + 2 * MARGIN + MINION_H, list(board.friendly_minions), CARD_BG_MY, traded)

    plate_y = arena.bottom + 8
    draw_hero_plate(surface, pygame.Rect(20, plate_y, FACE_W, FACE_H), board.friendly_hero, f"Turn {board.turn}")
    crystals = pygame.Rect(20 + FACE_W + 16, plate_y + 8, min(360, play_w - FACE_W - 40), FACE_H - 16)
    draw_mana_crystal_rect(surface, crystals, board.mana.available, locked=board.mana.locked)

    draw_hand(surface, plate_y + FACE_H + 12, board, proj.spell_sequence)
    draw_panel(surface, pygame.Rect(w - PANEL_W - 10, 12, PANEL_W, h - 24), proj, profile)
    return surface

def save(surface: pygame.Surface, path: str):
    pygame.image.save(surface, path)
