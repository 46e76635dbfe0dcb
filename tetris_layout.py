"""Window geometry: the board plus a side panel sized to what it shows."""
from dataclasses import dataclass
from tetris_config import CONFIG
from tetris_piece import COLS, ROWS

PAD = 16            # gap around board and panel
INSET = 12          # panel content inset
TEXT_ROW = 24
LEGEND_ROW = 20
PREVIEW_CELLS = 4   # next preview is a 4x4 box, the widest shape fits
FRAME_PAD = 6
MIN_PANEL_W = 180

LEGEND = ("Controls:", "←/→ Move", "↓ Soft drop", "↑ Rotate", "Space Hard drop", "P Pause")

@dataclass
class Layout:
    cell: int
    board_x: int
    board_y: int
    board_w: int
    board_h: int
    panel_x: int
    panel_w: int
    panel_h: int
    text_x: int
    title_y: int
    score_y: int
    lines_y: int
    next_label_y: int
    pv_cell: int
    pv_x: int
    pv_y: int
    legend_y: int
    total_w: int
    total_h: int

    @property
    def preview_frame(self):
        side = self.pv_cell*PREVIEW_CELLS + 2*FRAME_PAD
        return (self.pv_x - FRAME_PAD, self.pv_y - FRAME_PAD, side, side)

def compute_layout(cell=None) -> Layout:
    cell = int(cell or CONFIG["CELL_SIZE"])
    board_w, board_h = COLS*cell, ROWS*cell
    pv_cell = max(14, cell*3//4)

    panel_x = PAD + board_w + PAD
    panel_w = max(MIN_PANEL_W, pv_cell*PREVIEW_CELLS + 2*FRAME_PAD + 2*INSET)
    text_x = panel_x + INSET

    # title, score, lines, then "Next:" with the preview box under it
    title_y = PAD + INSET
    score_y = title_y + TEXT_ROW + 8
    lines_y = score_y + TEXT_ROW
    next_label_y = lines_y + TEXT_ROW + TEXT_ROW//2
    pv_y = next_label_y + TEXT_ROW + FRAME_PAD
    legend_y = pv_y + pv_cell*PREVIEW_CELLS + FRAME_PAD + TEXT_ROW
    content_bottom = legend_y + len(LEGEND)*LEGEND_ROW + INSET
    panel_h = max(board_h, content_bottom - PAD)

    return Layout(
        cell=cell, board_x=PAD, board_y=PAD, board_w=board_w, board_h=board_h,
        panel_x=panel_x, panel_w=panel_w, panel_h=panel_h,
        text_x=text_x, title_y=title_y, score_y=score_y, lines_y=lines_y,
        next_label_y=next_label_y, pv_cell=pv_cell, pv_x=text_x, pv_y=pv_y,
        legend_y=legend_y,
        total_w=panel_x + panel_w + PAD,
        total_h=PAD + panel_h + PAD,
    )
