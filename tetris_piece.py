
"""Piece model, shape catalog, rotation"""
from dataclasses import dataclass
from typing import Optional, Tuple

COLS, ROWS = 10, 20

Shape = Tuple[Tuple[int, ...], ...]

# Filled cells carry the shape's color id (index into COLORS)
SHAPES: Tuple[Shape, ...] = (
    ((1,1,1,1),),              # I
    ((2,2),(2,2)),             # O
    ((0,3,0),(3,3,3)),         # T
    ((4,4,0),(0,4,4)),         # S
    ((0,5,5),(5,5,0)),         # Z
    ((6,6,6),(0,0,6)),         # J
    ((7,7,7),(7,0,0)),         # L
)
NAMES = ("I", "O", "T", "S", "Z", "J", "L")

COLORS: Tuple[Optional[str], ...] = (
    None, "cyan", "blue", "orange", "yellow", "green", "purple", "red",
)

def rotate(m: Shape) -> Shape: return tuple(zip(*m[::-1]))

def color_of(shape: Shape) -> int:
    return next(v for row in shape for v in row if v)

@dataclass
class Piece:
    shape: Shape
    x: int
    y: int
    color: int
    @staticmethod
    def spawn(shape: Shape) -> "Piece":
        w = len(shape[0])
        return Piece(shape, COLS//2 - w//2, 0, color_of(shape))
    def cells(self):
        for r,row in enumerate(self.shape):
            for c,v in enumerate(row):
                if v: yield self.x+c, self.y+r
