"""Key mapping: pygame key events to game events"""
import pygame
from tetris_events import DropStart, DropStop, InputEvent, MoveLeft, MoveRight, NoOp, Rotate

KEYDOWN_EVENTS = {
    pygame.K_LEFT: MoveLeft(),
    pygame.K_RIGHT: MoveRight(),
    pygame.K_UP: Rotate(),
    pygame.K_DOWN: DropStart(),
}
KEYUP_EVENTS = {
    pygame.K_DOWN: DropStop(),
}

def map_key(event_type: int, key: int) -> InputEvent:
    if event_type == pygame.KEYDOWN:
        return KEYDOWN_EVENTS.get(key, NoOp())
    if event_type == pygame.KEYUP:
        return KEYUP_EVENTS.get(key, NoOp())
    return NoOp()
