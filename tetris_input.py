
"""Key bindings and host key repeat"""
from typing import Dict, Optional
import pygame
from tetris_config import CONFIG
from tetris_game import Command

KEY_BINDINGS: Dict[int, Command] = {
    pygame.K_LEFT: Command.MOVE_LEFT,
    pygame.K_RIGHT: Command.MOVE_RIGHT,
    pygame.K_DOWN: Command.SOFT_DOWN,
    pygame.K_UP: Command.ROTATE,
    pygame.K_SPACE: Command.HARD_DROP,
    pygame.K_p: Command.TOGGLE_PAUSE,
}

def command_for(key: int) -> Optional[Command]:
    return KEY_BINDINGS.get(key)

def enable_key_repeat():
    pygame.key.set_repeat(CONFIG["KEY_REPEAT_DELAY_MS"], CONFIG["KEY_REPEAT_INTERVAL_MS"])
