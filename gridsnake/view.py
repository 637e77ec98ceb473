"""
view.py — View layer.

Draws one frame from a model Snapshot. Reads nothing else from the model
and never writes back to it.

Layers, bottom to top:
  - Pre-rendered grid surface (drawn once, blitted every frame)
  - Obstacles as red blocks crossed with an X
  - Food as a round apple with a specular highlight
  - Snake: bright rounded head, dark bordered body segments
  - HUD panel: score, best score, current speed
  - State overlay: start prompt, pause card, game-over card

Public API:
    GameView(screen)       — bind to a pygame surface
    view.render(snapshot)  — draw the current frame
"""

import math
import pygame

from .config import (
    WIDTH, PANEL_H, GAME_W, GAME_H,
    OFFSET_X, OFFSET_Y, CELL, TILES,
    BG, GRID_COL, HEAD_COL, BODY_COL, FOOD_COL, FOOD_SHINE,
    OBSTACLE_COL, OBSTACLE_X, UI_COL, PANEL_BG, BORDER_COL, TEXT_COL,
    INITIAL_INTERVAL, MIN_INTERVAL,
    STATE_IDLE, STATE_PAUSED, STATE_OVER,
    END_BOARD_FULL,
)
from .model import Snapshot


# ─────────────────────── colour helpers ──────────────────────────
def _lerp_color(c1: tuple, c2: tuple, t: float) -> tuple:
    t = max(0.0, min(1.0, t))
    return tuple(int(c1[i] + (c2[i] - c1[i]) * t) for i in range(3))


def _brighten(color: tuple, factor: float) -> tuple:
    return tuple(min(255, int(c * factor)) for c in color[:3])


def _cell_rect(x: int, y: int, inset: int = 1) -> pygame.Rect:
    return pygame.Rect(
        OFFSET_X + x * CELL + inset,
        OFFSET_Y + y * CELL + inset,
        CELL - 2 * inset,
        CELL - 2 * inset,
    )


def speed_fraction(interval: int) -> float:
    """0.0 at the starting interval, 1.0 at the fastest one."""
    span = INITIAL_INTERVAL - MIN_INTERVAL
    return max(0.0, min(1.0, (INITIAL_INTERVAL - interval) / span))


# ─────────────────────────── GameView ────────────────────────────
class GameView:
    """Renders the complete game frame from a Snapshot."""

    # ── Construction ─────────────────────────────────────────────
    def __init__(self, screen: pygame.Surface):
        self.screen = screen
        self._init_fonts()
        self._build_static_surfaces()

        # Score rack-up animation state
        self._disp_score: float = 0.0
        # For overlay title pulse animation
        self._anim_tick: int = 0

    # ── Main entry ───────────────────────────────────────────────
    def render(self, snap: Snapshot) -> None:
        self._anim_tick += 1
        self._disp_score += (snap.score - self._disp_score) * 0.25

        self.screen.fill(BG)
        self.screen.blit(self._grid_surf, (OFFSET_X, OFFSET_Y))

        for ox, oy in snap.obstacles:
            self._draw_obstacle(ox, oy)
        self._draw_food(snap.food)
        if snap.state != STATE_IDLE:
            self._draw_snake(snap)

        self._draw_border()
        self._draw_panel(snap)

        if snap.state == STATE_IDLE:
            self._draw_start_overlay()
        elif snap.state == STATE_PAUSED:
            self._draw_paused_overlay()
        elif snap.state == STATE_OVER:
            self._draw_game_over_overlay(snap)

        pygame.display.flip()

    # ── Static surface pre-builds ─────────────────────────────────
    def _build_static_surfaces(self) -> None:
        self._grid_surf = pygame.Surface((GAME_W, GAME_H), pygame.SRCALPHA)
        for i in range(TILES + 1):
            pygame.draw.line(self._grid_surf, (*GRID_COL, 160),
                             (i * CELL, 0), (i * CELL, GAME_H))
            pygame.draw.line(self._grid_surf, (*GRID_COL, 160),
                             (0, i * CELL), (GAME_W, i * CELL))

    # ── Board entities ───────────────────────────────────────────
    def _draw_obstacle(self, x: int, y: int) -> None:
        rect = _cell_rect(x, y)
        pygame.draw.rect(self.screen, OBSTACLE_COL, rect)
        left, top = OFFSET_X + x * CELL + 3, OFFSET_Y + y * CELL + 3
        right, bottom = left + CELL - 6, top + CELL - 6
        pygame.draw.line(self.screen, OBSTACLE_X, (left, top), (right, bottom), 3)
        pygame.draw.line(self.screen, OBSTACLE_X, (right, top), (left, bottom), 3)

    def _draw_food(self, food: tuple[int, int]) -> None:
        cx = OFFSET_X + food[0] * CELL + CELL // 2
        cy = OFFSET_Y + food[1] * CELL + CELL // 2
        pygame.draw.circle(self.screen, FOOD_COL, (cx, cy), CELL // 2 - 2)
        pygame.draw.circle(self.screen, FOOD_SHINE, (cx - 3, cy - 3), 3)

    def _draw_snake(self, snap: Snapshot) -> None:
        for i, (sx, sy) in enumerate(snap.snake):
            rect = _cell_rect(sx, sy)
            if i == 0:
                pygame.draw.rect(self.screen, HEAD_COL, rect,
                                 border_radius=max(1, rect.width // 3))
            else:
                pygame.draw.rect(self.screen, BODY_COL, rect)
                pygame.draw.rect(self.screen, HEAD_COL, rect, 2)
        self._draw_eyes(snap)

    def _draw_eyes(self, snap: Snapshot) -> None:
        hx, hy = snap.snake[0]
        cx = OFFSET_X + hx * CELL + CELL // 2
        cy = OFFSET_Y + hy * CELL + CELL // 2
        dx, dy = snap.direction.x, snap.direction.y
        if not (dx or dy):
            dx = 1
        px, py = -dy, dx  # perpendicular

        for sign in (+1, -1):
            ex = int(cx + dx * 4 + sign * px * 4)
            ey = int(cy + dy * 4 + sign * py * 4)
            pygame.draw.rect(self.screen, (235, 235, 235), (ex - 2, ey - 2, 4, 4))
            pygame.draw.rect(self.screen, BODY_COL, (ex - 1, ey - 1, 2, 2))

    # ── Border ────────────────────────────────────────────────────
    def _draw_border(self) -> None:
        pygame.draw.rect(self.screen, BORDER_COL,
                         (OFFSET_X - 1, OFFSET_Y - 1, GAME_W + 2, GAME_H + 2), 1)

    # ── HUD Panel ─────────────────────────────────────────────────
    def _draw_panel(self, snap: Snapshot) -> None:
        pygame.draw.rect(self.screen, PANEL_BG, (0, 0, WIDTH, PANEL_H))
        pygame.draw.line(self.screen, BORDER_COL,
                         (0, PANEL_H - 1), (WIDTH, PANEL_H - 1), 1)

        self.screen.blit(self.font_small.render("SCORE", True, HEAD_COL), (16, 6))
        self.screen.blit(
            self.font_big.render(str(int(round(self._disp_score))), True, HEAD_COL),
            (16, 24),
        )

        best = self.font_small.render("BEST", True, FOOD_COL)
        self.screen.blit(best, best.get_rect(topright=(WIDTH - 16, 6)))
        best_val = self.font_big.render(str(snap.high_score), True, FOOD_COL)
        self.screen.blit(best_val, best_val.get_rect(topright=(WIDTH - 16, 24)))

        self._draw_speed_bar(WIDTH // 2, 14, snap.interval)
        label = self.font_tiny.render(f"{snap.interval} MS", True, UI_COL)
        self.screen.blit(label, label.get_rect(center=(WIDTH // 2, 36)))

        if snap.state == STATE_PAUSED:
            badge = self.font_tiny.render("[ PAUSED ]", True, FOOD_COL)
            self.screen.blit(badge, badge.get_rect(center=(WIDTH // 2, PANEL_H - 10)))

    def _draw_speed_bar(self, cx: int, y: int, interval: int) -> None:
        """Thin gauge filling up as the tick interval approaches its floor."""
        bar_w, bar_h = 110, 6
        bx = cx - bar_w // 2
        pygame.draw.rect(self.screen, (28, 28, 48), (bx, y, bar_w, bar_h), border_radius=3)
        frac = speed_fraction(interval)
        fill = int(bar_w * frac)
        if fill > 0:
            color = _lerp_color(HEAD_COL, OBSTACLE_COL, frac)
            pygame.draw.rect(self.screen, color, (bx, y, fill, bar_h), border_radius=3)

    # ── Overlay infrastructure ────────────────────────────────────
    def _draw_overlay_base(self) -> None:
        surf = pygame.Surface((GAME_W, GAME_H), pygame.SRCALPHA)
        surf.fill((5, 5, 12, 200))
        self.screen.blit(surf, (OFFSET_X, OFFSET_Y))

    def _draw_animated_title(self, title: str, color: tuple, cy: int) -> int:
        pulse = 0.82 + 0.18 * math.sin(self._anim_tick * 0.05)
        surf = self.font_title.render(title, True, _brighten(color, pulse))
        self.screen.blit(surf, surf.get_rect(center=(WIDTH // 2, cy + surf.get_height() // 2)))
        return cy + surf.get_height() + 14

    def _draw_text_line(self, text: str, color: tuple, cy: int,
                        font: pygame.font.Font) -> int:
        surf = font.render(text, True, color)
        self.screen.blit(surf, surf.get_rect(center=(WIDTH // 2, cy)))
        return cy + surf.get_height() + 8

    def _draw_controls_hint(self, cy: int) -> None:
        hints = [("ARROWS/WASD", "MOVE"), ("P", "PAUSE"), ("R", "RESTART")]
        step = GAME_W // len(hints)
        for i, (key, action) in enumerate(hints):
            x = OFFSET_X + step * i + step // 2
            k_surf = self.font_tiny.render(key, True, (200, 200, 255))
            a_surf = self.font_tiny.render(action, True, UI_COL)
            self.screen.blit(k_surf, k_surf.get_rect(center=(x, cy)))
            self.screen.blit(a_surf, a_surf.get_rect(center=(x, cy + 16)))

    # ── State overlays ────────────────────────────────────────────
    def _draw_start_overlay(self) -> None:
        self._draw_overlay_base()
        cy = OFFSET_Y + GAME_H // 3
        cy = self._draw_animated_title("SNAKE", HEAD_COL, cy)
        cy = self._draw_text_line("ENTER  TO  START", TEXT_COL, cy, self.font_med)
        self._draw_controls_hint(cy + 30)

    def _draw_paused_overlay(self) -> None:
        self._draw_overlay_base()
        cy = OFFSET_Y + GAME_H // 2 - 36
        cy = self._draw_animated_title("PAUSED", FOOD_COL, cy)
        self._draw_text_line("PRESS  P  TO RESUME", UI_COL, cy, self.font_med)

    def _draw_game_over_overlay(self, snap: Snapshot) -> None:
        self._draw_overlay_base()
        if snap.end_reason == END_BOARD_FULL:
            title, color = "BOARD FULL!", HEAD_COL
        else:
            title, color = "GAME OVER", OBSTACLE_COL

        cy = OFFSET_Y + GAME_H // 3
        cy = self._draw_animated_title(title, color, cy)
        cy = self._draw_text_line(f"FINAL SCORE  {snap.score}", TEXT_COL, cy, self.font_med)
        if snap.score > 0 and snap.score >= snap.high_score:
            cy = self._draw_text_line("NEW HIGH SCORE", FOOD_COL, cy, self.font_small)
        else:
            cy = self._draw_text_line(f"BEST: {snap.high_score}", UI_COL, cy, self.font_tiny)
        self._draw_text_line("R / ENTER — PLAY AGAIN", _lerp_color(UI_COL, color, 0.5),
                             cy + 12, self.font_small)

    # ── Font init ─────────────────────────────────────────────────
    def _init_fonts(self) -> None:
        specs = [
            ("font_title", "courier", 40, True),
            ("font_big",   "courier", 24, True),
            ("font_med",   "courier", 17, False),
            ("font_small", "courier", 13, True),
            ("font_tiny",  "courier", 11, False),
        ]
        for attr, name, size, bold in specs:
            try:
                setattr(self, attr, pygame.font.SysFont(name, size, bold=bold))
            except (pygame.error, OSError):
                setattr(self, attr, pygame.font.SysFont(None, size))
