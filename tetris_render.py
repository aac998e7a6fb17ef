
"""
Rendering helpers for the pygame driver.

- Pre-render block cell Surfaces per kind id (normal + ghost outline) and blit them.
- Pre-render the static background (grid + panel frame) once per Dims.
- Cache HUD text surfaces; re-render only when values change.
- Cache a BOARD SURFACE with all locked blocks; rebuild it when the board changes.
- Rows in the line-clear window flash white instead of showing their blocks.
"""
from __future__ import annotations
import pygame
from dataclasses import dataclass
from typing import Dict, Optional, Tuple
from tetris_layout import Dims
from tetris_piece import COLORS, Piece

FLASH = (245,245,255)
TEXT = (200,210,240)
DIM_TEXT = (165,175,215)

@dataclass
class HudCache:
    score: int = -1
    level: int = -1
    lines: int = -1
    title: Optional[pygame.Surface] = None
    score_s: Optional[pygame.Surface] = None
    level_s: Optional[pygame.Surface] = None
    lines_s: Optional[pygame.Surface] = None
    controls: Optional[list] = None

class RenderAssets:
    """Holds all pre-rendered assets for fast blitting."""
    def __init__(self, dims: Dims, font: pygame.font.Font, big_font: pygame.font.Font):
        self.dims = dims
        self.font = font
        self.big_font = big_font
        self._make_static()
        self._make_cells()
        self.hud = HudCache()
        self.board_surface = pygame.Surface((dims.board_w, dims.board_h), pygame.SRCALPHA)
        self._board_key: Optional[Tuple] = None

    # ---------- Static background (grid + panel) ----------
    def _make_static(self):
        d = self.dims
        self.bg = pygame.Surface((d.total_w, d.total_h))
        self.bg.fill((10,13,34))
        grid_col = (40,50,90)
        for x in range(d.cols+1):
            X = d.board_x + x*d.cell
            pygame.draw.line(self.bg, grid_col, (X, d.board_y), (X, d.board_y + d.board_h))
        for y in range(d.rows+1):
            Y = d.board_y + y*d.cell
            pygame.draw.line(self.bg, grid_col, (d.board_x, Y), (d.board_x + d.board_w, Y))
        panel_rect = pygame.Rect(d.panel_x, d.panel_y, d.panel_w, d.board_h)
        pygame.draw.rect(self.bg, (21,25,53), panel_rect)
        pygame.draw.rect(self.bg, (50,60,100), panel_rect, 1)
        # Next / Hold preview frames side by side
        pc = d.preview_cell
        self.next_pos = (d.panel_x + 12, d.panel_y + 150)
        self.hold_pos = (d.panel_x + 24 + pc*4, d.panel_y + 150)
        for px, py in (self.next_pos, self.hold_pos):
            frame = pygame.Rect(px-6, py-6, pc*4+12, pc*4+12)
            pygame.draw.rect(self.bg, (15,18,40), frame)
            pygame.draw.rect(self.bg, (55,65,110), frame, 1)

    # ---------- Small cell sprites (solid + ghost outline) ----------
    def _make_cells(self):
        self.cell_surf: Dict[int, pygame.Surface] = {}
        self.ghost_surf: Dict[int, pygame.Surface] = {}
        c = self.dims.cell
        for k, col in COLORS.items():
            s = pygame.Surface((c-2, c-2))
            s.fill(col)
            self.cell_surf[k] = s
            g = pygame.Surface((c-8, c-8), pygame.SRCALPHA)
            pygame.draw.rect(g, col, (0,0,c-8,c-8), 2)
            self.ghost_surf[k] = g
        self.flash_surf = pygame.Surface((c-2, c-2))
        self.flash_surf.fill(FLASH)

    # ---------- Board surface cache ----------
    def rebuild_board_surface(self, rows: Tuple[Tuple[int, ...], ...], clearing: Tuple[int, ...] = ()):
        """Rebuilds the "locked blocks" surface from a board snapshot."""
        self.board_surface.fill((0,0,0,0))
        c = self.dims.cell
        for y, row in enumerate(rows):
            for x, v in enumerate(row):
                if not v:
                    continue
                surf = self.flash_surf if y in clearing else self.cell_surf[v]
                self.board_surface.blit(surf, (x*c + 1, y*c + 1))

    def sync_board(self, game, flash_on: bool):
        rows = game.board.rows_snapshot()
        clearing = game.lines_being_cleared if flash_on else ()
        key = (rows, clearing)
        if key != self._board_key:
            self._board_key = key
            self.rebuild_board_surface(rows, clearing)

    # ---------- Per-cell helpers for moving/ghost piece ----------
    def draw_piece(self, screen: pygame.Surface, piece: Piece, ghost: bool = False):
        d = self.dims
        inset = 4 if ghost else 1
        surf = (self.ghost_surf if ghost else self.cell_surf)[piece.id]
        for bx, by in piece.cells():
            if by < 0:
                continue
            screen.blit(surf, (d.board_x + bx*d.cell + inset, d.board_y + by*d.cell + inset))

    def draw_preview(self, screen: pygame.Surface, piece: Optional[Piece], pos: Tuple[int,int]):
        if piece is None:
            return
        pc = self.dims.preview_cell
        offx = (4 - piece.width) * pc // 2
        offy = (4 - piece.height) * pc // 2
        block = pygame.Surface((pc-2, pc-2))
        block.fill(piece.color)
        for r, row in enumerate(piece.shape):
            for c, v in enumerate(row):
                if v:
                    screen.blit(block, (pos[0] + offx + c*pc + 1, pos[1] + offy + r*pc + 1))

    # ---------- HUD / Panel ----------
    def draw_panel_hud(self, screen: pygame.Surface, game, stats=None):
        d = self.dims
        f = self.font
        if self.hud.title is None:
            self.hud.title = f.render("Classic Tetris", True, (197,202,233))
        if game.score != self.hud.score:
            self.hud.score = game.score
            self.hud.score_s = f.render(f"Score: {game.score}", True, TEXT)
        if game.level != self.hud.level:
            self.hud.level = game.level
            self.hud.level_s = f.render(f"Level: {game.level}", True, TEXT)
        if game.lines_cleared != self.hud.lines:
            self.hud.lines = game.lines_cleared
            self.hud.lines_s = f.render(f"Lines: {game.lines_cleared}", True, TEXT)
        screen.blit(self.hud.title, (d.panel_x + 12, d.panel_y + 12))
        screen.blit(self.hud.score_s, (d.panel_x + 12, d.panel_y + 44))
        screen.blit(self.hud.level_s, (d.panel_x + 12, d.panel_y + 68))
        screen.blit(self.hud.lines_s, (d.panel_x + 12, d.panel_y + 92))
        screen.blit(f.render("Next:", True, TEXT), (self.next_pos[0], d.panel_y + 126))
        hold_col = TEXT if game.can_hold else DIM_TEXT
        screen.blit(f.render("Hold:", True, hold_col), (self.hold_pos[0], d.panel_y + 126))
        self.draw_preview(screen, game.next_piece, self.next_pos)
        self.draw_preview(screen, game.held_piece, self.hold_pos)
        y = d.panel_y + 150 + d.preview_cell*4 + 20
        if stats is not None:
            for line in (f"Games: {stats.games_played}", f"Best: {stats.best_score}",
                         f"Tetrises: {stats.tetrises}", f"Time: {stats.play_time_text()}"):
                screen.blit(f.render(line, True, DIM_TEXT), (d.panel_x + 12, y)); y += 20
            y += 10
        if not self.hud.controls:
            self.hud.controls = [f.render(s, True, DIM_TEXT) for s in (
                "←/→ Move", "↓ Soft drop", "↑ Rotate", "Space Hard drop",
                "C Hold", "P Pause • R Restart", "F1 Settings")]
        for surf in self.hud.controls:
            screen.blit(surf, (d.panel_x + 12, y)); y += 20

    def draw_banner(self, screen: pygame.Surface, text: str, dy: int = 0):
        d = self.dims
        msg = self.big_font.render(text, True, (255,220,220))
        rect = msg.get_rect(center=(d.board_x + d.board_w // 2, d.board_y + d.board_h // 2 + dy))
        screen.blit(msg, rect)

    def draw(self, screen: pygame.Surface, game, stats=None, flash_on: bool = True):
        """Full frame: background, locked blocks, ghost, current, panel, banners."""
        self.sync_board(game, flash_on)
        screen.blit(self.bg, (0,0))
        screen.blit(self.board_surface, (self.dims.board_x, self.dims.board_y))
        ghost = game.ghost_piece()
        if ghost is not None:
            self.draw_piece(screen, ghost, ghost=True)
        if game.current is not None and not game.game_over:
            self.draw_piece(screen, game.current)
        self.draw_panel_hud(screen, game, stats)
        if game.game_over:
            self.draw_banner(screen, "GAME OVER (R)")
        elif game.paused:
            self.draw_banner(screen, "PAUSED (P)", -40)
