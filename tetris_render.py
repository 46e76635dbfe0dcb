"""
Rendering helpers for the falling-block game.

- Pre-render one cell Surface per color id and blit it.
- Pre-render the static background (grid + panel frame) once per Layout.
- Cache HUD text surfaces; re-render only when values change.
"""
from __future__ import annotations
import pygame
from dataclasses import dataclass
from typing import Dict, List, Optional
from tetris_layout import Layout, COLS, ROWS, LEGEND, LEGEND_ROW, PREVIEW_CELLS
from tetris_piece import COLORS, Piece, Shape

TEXT = (200,210,240)
DIM_TEXT = (165,175,215)

@dataclass
class HudCache:
    score: int = -1
    lines: int = -1
    next_shape: Optional[Shape] = None
    title: Optional[pygame.Surface] = None
    score_s: Optional[pygame.Surface] = None
    lines_s: Optional[pygame.Surface] = None
    next_s: Optional[pygame.Surface] = None
    controls: Optional[list] = None

class RenderAssets:
    """Holds all pre-rendered assets for fast blitting."""
    def __init__(self, layout: Layout, font: pygame.font.Font):
        self.layout = layout
        self.font = font
        self._make_static()
        self._make_cells()
        self.hud = HudCache()
        self.board_rect = pygame.Rect(layout.board_x, layout.board_y, layout.board_w, layout.board_h)

    # ---------- Static background (grid + panel) ----------
    def _make_static(self):
        d = self.layout
        self.bg = pygame.Surface((d.total_w, d.total_h))
        self.bg.fill((10,13,34))
        pygame.draw.rect(self.bg, (0,0,0), (d.board_x, d.board_y, d.board_w, d.board_h))
        grid_col = (40,50,90)
        for x in range(COLS+1):
            X = d.board_x + x*d.cell
            pygame.draw.line(self.bg, grid_col, (X, d.board_y), (X, d.board_y + d.board_h))
        for y in range(ROWS+1):
            Y = d.board_y + y*d.cell
            pygame.draw.line(self.bg, grid_col, (d.board_x, Y), (d.board_x + d.board_w, Y))
        panel_rect = pygame.Rect(d.panel_x, d.board_y, d.panel_w, d.panel_h)
        pygame.draw.rect(self.bg, (21,25,53), panel_rect)
        pygame.draw.rect(self.bg, (50,60,100), panel_rect, 1)
        frame = pygame.Rect(d.preview_frame)
        pygame.draw.rect(self.bg, (15,18,40), frame)
        pygame.draw.rect(self.bg, (55,65,110), frame, 1)

    # ---------- Cell sprites, index 0 is background and never painted ----------
    def _make_cells(self):
        self.cell_surf: Dict[int, pygame.Surface] = {}
        c = self.layout.cell
        for color_id, name in enumerate(COLORS):
            if name is None: continue
            s = pygame.Surface((c-1, c-1))
            s.fill(pygame.Color(name))
            self.cell_surf[color_id] = s

    def draw_cell(self, screen: pygame.Surface, color_id: int, bx: int, by: int):
        rx = self.layout.board_x + bx*self.layout.cell + 1
        ry = self.layout.board_y + by*self.layout.cell + 1
        screen.blit(self.cell_surf[color_id], (rx, ry))

    # ---------- Full frame ----------
    def draw(self, screen: pygame.Surface, board: List[List[int]], piece: Piece):
        screen.blit(self.bg, (0,0))
        for y, row in enumerate(board):
            for x, v in enumerate(row):
                if v: self.draw_cell(screen, v, x, y)
        for bx, by in piece.cells():
            self.draw_cell(screen, piece.color, bx, by)

    # ---------- HUD / Panel ----------
    def draw_panel_hud(self, screen: pygame.Surface, score: int, lines: int, next_piece: Piece):
        d = self.layout
        f = self.font
        if self.hud.title is None:
            self.hud.title = f.render("Falling Blocks", True, (197,202,233))
        if score != self.hud.score:
            self.hud.score = score
            self.hud.score_s = f.render(f"Score: {score}", True, TEXT)
        if lines != self.hud.lines:
            self.hud.lines = lines
            self.hud.lines_s = f.render(f"Lines: {lines}", True, TEXT)
        if next_piece.shape != self.hud.next_shape:
            self.hud.next_shape = next_piece.shape
            self.hud.next_s = self._preview(next_piece)
        screen.blit(self.hud.title, (d.text_x, d.title_y))
        screen.blit(self.hud.score_s, (d.text_x, d.score_y))
        screen.blit(self.hud.lines_s, (d.text_x, d.lines_y))
        screen.blit(f.render("Next:", True, TEXT), (d.text_x, d.next_label_y))
        screen.blit(self.hud.next_s, (d.pv_x, d.pv_y))
        if not self.hud.controls:
            self.hud.controls = [f.render(txt, True, TEXT if i == 0 else DIM_TEXT) for i, txt in enumerate(LEGEND)]
        y = d.legend_y
        for surf in self.hud.controls:
            screen.blit(surf, (d.text_x, y)); y += LEGEND_ROW

    def _preview(self, piece: Piece) -> pygame.Surface:
        pv, n = self.layout.pv_cell, PREVIEW_CELLS
        s = pygame.Surface((pv*n, pv*n), pygame.SRCALPHA)
        shape = piece.shape
        offx = (n - len(shape[0])) // 2
        offy = max(0, (n - len(shape)) // 2)
        block = pygame.Surface((pv-2, pv-2))
        block.fill(pygame.Color(COLORS[piece.color]))
        for y, row in enumerate(shape):
            for x, v in enumerate(row):
                if v:
                    s.blit(block, ((x + offx)*pv + 1, (y + offy)*pv + 1))
        return s
