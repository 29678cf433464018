import logging
import sys
from collections import deque
import pygame
from tetris_clock import TickClock, TICK_EVENT
from tetris_config import CONFIG
from tetris_events import (
    Command, Event, NextPieceReady, PiecesReady, RearmClock, RequestInitialPieces,
    RequestNextPiece, Tick,
)
from tetris_feed import observe
from tetris_game import Phase, new_game, update
from tetris_input import map_key
from tetris_layout import compute_dims
from tetris_render import RenderAssets
from tetris_rng import PieceSource

log = logging.getLogger("tetris")


def recreate_window(dims, flags=pygame.DOUBLEBUF):
    try:
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags, vsync=1)
    except TypeError:
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags)


def execute(command: Command, source: PieceSource, clock: TickClock):
    """Fulfil a command; return the follow-up event for piece draws, else None."""
    if isinstance(command, RequestInitialPieces):
        return PiecesReady(*source.draw_pair())
    if isinstance(command, RequestNextPiece):
        return NextPieceReady(source.draw())
    if isinstance(command, RearmClock):
        clock.arm(command.interval_ms)
    return None


def dispatch(phase: Phase, event: Event, source: PieceSource, clock: TickClock) -> Phase:
    """Process ``event`` and every follow-up it triggers before the next queued event."""
    pending = deque([event])
    while pending:
        phase, commands = update(phase, pending.popleft())
        for c in commands:
            follow_up = execute(c, source, clock)
            if follow_up is not None:
                pending.append(follow_up)
    return phase


def translate(e):
    if e.type == TICK_EVENT:
        return Tick()
    if e.type in (pygame.KEYDOWN, pygame.KEYUP):
        return map_key(e.type, e.key)
    return None


def main():
    logging.basicConfig(level=CONFIG["LOG_LEVEL"], format="%(asctime)s %(name)s %(levelname)s %(message)s")
    pygame.init()
    pygame.event.set_allowed([pygame.QUIT, pygame.KEYDOWN, pygame.KEYUP, TICK_EVENT])

    dims = compute_dims()
    screen = recreate_window(dims)
    pygame.display.set_caption("Tetris")
    font = pygame.font.SysFont(None, 22)
    big_font = pygame.font.SysFont(None, 36)
    render = RenderAssets(dims, font, big_font)
    frame_clock = pygame.time.Clock()

    source = PieceSource(CONFIG["SEED"])
    clock = TickClock()

    def restart():
        pygame.event.clear(TICK_EVENT)
        phase, commands = new_game()
        clock.start()
        for c in commands:
            follow_up = execute(c, source, clock)
            if follow_up is not None:
                phase = dispatch(phase, follow_up, source, clock)
        return phase

    phase = restart()
    while True:
        frame_clock.tick(60)
        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                clock.cancel()
                pygame.quit(); sys.exit()
            if e.type == pygame.KEYDOWN and e.key == pygame.K_r:
                log.info("restart")
                phase = restart()
                continue
            event = translate(e)
            if event is None:
                continue
            phase = dispatch(phase, event, source, clock)

        render.draw(screen, observe(phase))
        pygame.display.flip()


if __name__ == '__main__':
    main()
