"""
view.py — View layer.

Draws one frame from a model Snapshot:
  - Pre-rendered grid surface (drawn once, blitted every frame)
  - Pulsing food dot with a soft glow
  - Grey obstacle blocks
  - Rounded snake segments fading from head to tail, eyes on the head
  - CRT scanline overlay
  - Short red flash after a crash

Public API:
    GameView(screen, cell)  — bind to a pygame surface
    view.flash_crash()      — start the crash flash
    view.render(snapshot)   — draw the current frame
"""

import math
import pygame

from .config import (
    BG, GRID_COL, FOOD_COL, OBSTACLE_COL, CRASH_COL, BLACK,
    CRASH_FLASH_FRAMES,
)
from .model import Snapshot


# ─────────────────────── colour helpers ──────────────────────────
def _lerp_color(c1: tuple, c2: tuple, t: float) -> tuple:
    t = max(0.0, min(1.0, t))
    return tuple(int(c1[i] + (c2[i] - c1[i]) * t) for i in range(3))


def _with_alpha(color: tuple, alpha: int) -> tuple:
    return (*color[:3], max(0, min(255, alpha)))


def _brighten(color: tuple, factor: float) -> tuple:
    return tuple(min(255, int(c * factor)) for c in color[:3])


# ─────────────────────────── GameView ────────────────────────────
class GameView:
    """Renders the complete game frame from a Snapshot."""

    def __init__(self, screen: pygame.Surface, cell: int):
        self.screen = screen
        self.cell = cell
        self._grid_surf = None
        self._scanline_surf = None
        self._grid_size = None
        self._anim_tick: int = 0
        self._flash: int = 0

    # ── Main entry ───────────────────────────────────────────────
    def flash_crash(self) -> None:
        self._flash = CRASH_FLASH_FRAMES

    def render(self, snap: Snapshot) -> None:
        self._anim_tick += 1
        if self._grid_size != (snap.width, snap.height):
            self._build_static_surfaces(snap.width, snap.height)

        self.screen.fill(BG)
        self.screen.blit(self._grid_surf, (0, 0))

        for cell in snap.obstacles:
            self._draw_obstacle(cell)
        self._draw_food(snap.food)
        self._draw_snake(snap)

        self.screen.blit(self._scanline_surf, (0, 0))
        if self._flash > 0:
            self._draw_crash_flash()
            self._flash -= 1

        pygame.display.flip()

    # ── Static surface pre-builds ─────────────────────────────────
    def _build_static_surfaces(self, cols: int, rows: int) -> None:
        w, h = cols * self.cell, rows * self.cell
        self._grid_size = (cols, rows)

        self._grid_surf = pygame.Surface((w, h), pygame.SRCALPHA)
        for x in range(cols + 1):
            pygame.draw.line(self._grid_surf, (*GRID_COL, 160),
                             (x * self.cell, 0), (x * self.cell, h))
        for y in range(rows + 1):
            pygame.draw.line(self._grid_surf, (*GRID_COL, 160),
                             (0, y * self.cell), (w, y * self.cell))

        # CRT scanlines — every other horizontal line, very subtle
        self._scanline_surf = pygame.Surface((w, h), pygame.SRCALPHA)
        for y in range(0, h, 2):
            pygame.draw.line(self._scanline_surf, (0, 0, 0, 18), (0, y), (w, y))

    def _cell_rect(self, cell: tuple[int, int], inset: int = 0) -> pygame.Rect:
        return pygame.Rect(
            cell[0] * self.cell + inset,
            cell[1] * self.cell + inset,
            self.cell - inset * 2,
            self.cell - inset * 2,
        )

    # ── Food ─────────────────────────────────────────────────────
    def _draw_food(self, food: tuple[int, int]) -> None:
        pulse = 0.70 + 0.30 * math.sin(self._anim_tick * 0.10)
        r = max(2, int((self.cell / 2 + 1) * pulse))
        x = food[0] * self.cell + self.cell // 2
        y = food[1] * self.cell + self.cell // 2

        glow_r = r + 8
        glow = pygame.Surface((glow_r * 2, glow_r * 2), pygame.SRCALPHA)
        for gr in range(glow_r, r, -1):
            a = int(90 * (1 - (gr - r) / (glow_r - r)) * pulse)
            pygame.draw.circle(glow, _with_alpha(FOOD_COL, a), (glow_r, glow_r), gr)
        self.screen.blit(glow, (x - glow_r, y - glow_r))

        pygame.draw.circle(self.screen, FOOD_COL, (x, y), r)

    # ── Obstacles ────────────────────────────────────────────────
    def _draw_obstacle(self, cell: tuple[int, int]) -> None:
        rect = self._cell_rect(cell, 1)
        pygame.draw.rect(self.screen, OBSTACLE_COL, rect, border_radius=2)
        pygame.draw.rect(self.screen, _brighten(OBSTACLE_COL, 1.4), rect, 1, border_radius=2)

    # ── Snake body ───────────────────────────────────────────────
    def _draw_snake(self, snap: Snapshot) -> None:
        if not snap.snake:
            return

        length = len(snap.snake)
        dim = _lerp_color(BLACK, snap.color, 0.45)

        for i, seg in enumerate(snap.snake):
            # Colour fades from bright head to dim tail
            t = 1.0 - (i / max(length - 1, 1)) * 0.72
            color = _lerp_color(dim, snap.color, t)

            shrink = 0 if i == 0 else min(3, 1 + i // max(1, length // 4))
            rect = self._cell_rect(seg, shrink)
            if rect.width <= 0 or rect.height <= 0:
                continue

            radius = max(1, rect.width // 2 - 1) if i == 0 else max(1, rect.width // 4)
            pygame.draw.rect(self.screen, color, rect, border_radius=radius)

        self._draw_eyes(snap)

    def _draw_eyes(self, snap: Snapshot) -> None:
        hx, hy = snap.snake[0]
        cx = hx * self.cell + self.cell // 2
        cy = hy * self.cell + self.cell // 2
        dx, dy = snap.heading.x, snap.heading.y
        px, py = -dy, dx  # perpendicular
        reach = max(2, self.cell // 4)

        for sign in (+1, -1):
            ex = int(cx + dx * reach + sign * px * reach)
            ey = int(cy + dy * reach + sign * py * reach)
            pygame.draw.rect(self.screen, (220, 220, 220), (ex - 1, ey - 1, 3, 3))  # sclera
            pygame.draw.rect(self.screen, BLACK,           (ex,     ey,     1, 1))  # pupil

    # ── Crash flash ──────────────────────────────────────────────
    def _draw_crash_flash(self) -> None:
        alpha = int(120 * self._flash / CRASH_FLASH_FRAMES)
        surf = pygame.Surface(self.screen.get_size(), pygame.SRCALPHA)
        surf.fill(_with_alpha(CRASH_COL, alpha))
        self.screen.blit(surf, (0, 0))
