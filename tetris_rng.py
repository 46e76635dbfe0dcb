
"""Uniform piece factory"""
import random
from typing import Optional
from tetris_piece import Piece, SHAPES

class PieceFactory:
    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        self.rng = random.Random(seed)

    def create_piece(self) -> Piece:
        return Piece.spawn(self.rng.choice(SHAPES))
