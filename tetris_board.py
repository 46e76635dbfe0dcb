
"""Board helpers: can_place, merge, top_row_occupied, clear_full_lines"""
from typing import List
from tetris_piece import Piece, Shape, COLS, ROWS

Board = List[List[int]]

def new_board() -> Board:
    return [[0]*COLS for _ in range(ROWS)]

def can_place(board: Board, shape: Shape, x: int, y: int) -> bool:
    for r,row in enumerate(shape):
        for c,v in enumerate(row):
            if not v: continue
            bx,by = x+c, y+r
            if bx<0 or bx>=COLS or by<0 or by>=ROWS: return False
            if board[by][bx]: return False
    return True

def merge(board: Board, piece: Piece):
    for bx,by in piece.cells():
        board[by][bx]=piece.color

def top_row_occupied(board: Board) -> bool:
    return any(board[0])

def clear_full_lines(board: Board) -> int:
    c=0; y=ROWS-1
    while y>=0:
        if all(board[y]):
            del board[y]; board.insert(0,[0]*COLS); c+=1
        else: y-=1
    return c
