
import argparse
import pygame, sys
from tetris_config import CONFIG, configure
from tetris_game import Game, Phase
from tetris_input import command_for, enable_key_repeat
from tetris_layout import compute_layout
from tetris_log import setup_logger
from tetris_overlay import Overlay
from tetris_render import RenderAssets
from tetris_rng import PieceFactory
from tetris_timer import TickTimer


def parse_args(argv=None):
    p = argparse.ArgumentParser(description="Falling-block puzzle game")
    p.add_argument("--seed", type=int, default=None, help="piece sequence seed")
    p.add_argument("--cell-size", type=int, default=CONFIG["CELL_SIZE"])
    p.add_argument("--tick-ms", type=int, default=CONFIG["TICK_MS"], help="gravity period")
    p.add_argument("--log-level", default=CONFIG["LOG_LEVEL"])
    p.add_argument("--no-rich", action="store_true", help="plain log output")
    return p.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    configure(SEED=args.seed, CELL_SIZE=args.cell_size, TICK_MS=args.tick_ms,
              LOG_LEVEL=args.log_level, USE_RICH=not args.no_rich)
    log = setup_logger("tetris", CONFIG["LOG_LEVEL"], CONFIG["USE_RICH"])

    pygame.init()
    pygame.event.set_allowed([pygame.QUIT, pygame.KEYDOWN])
    enable_key_repeat()

    layout = compute_layout()
    screen = pygame.display.set_mode((layout.total_w, layout.total_h))
    pygame.display.set_caption("Falling Blocks")
    font = pygame.font.SysFont(None, 22)
    big_font = pygame.font.SysFont(None, 42)

    render = RenderAssets(layout, font)
    overlay = Overlay(big_font, font)
    timer = TickTimer(CONFIG["TICK_MS"])
    pygame.event.set_allowed([timer.event_type])

    dirty = False
    def request_repaint():
        nonlocal dirty
        dirty = True

    game = Game(timer, PieceFactory(CONFIG["SEED"]),
                on_change=request_repaint,
                on_score=lambda score: pygame.display.set_caption(f"Falling Blocks - {score}"))
    game.start()

    clock = pygame.time.Clock()
    while True:
        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                pygame.quit(); sys.exit()
            if e.type == timer.event_type:
                game.tick()
            if e.type == pygame.KEYDOWN:
                if game.phase is Phase.OVER:
                    if e.key in (pygame.K_RETURN, pygame.K_KP_ENTER, pygame.K_ESCAPE):
                        log.info("closing after game over")
                        pygame.quit(); sys.exit()
                    continue
                cmd = command_for(e.key)
                if cmd is not None: game.handle(cmd)

        if dirty:
            render.draw(screen, game.board, game.current)
            render.draw_panel_hud(screen, game.score, game.lines, game.next)
            overlay.draw(screen, render.board_rect, game.phase, game.score)
            pygame.display.flip()
            dirty = False

        clock.tick(60)


if __name__ == '__main__':
    main()
