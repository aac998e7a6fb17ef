
import argparse
import logging
import sys

import pygame

from tetris import Game
from tetris_config import CONFIG
from tetris_input import ShiftRepeat, apply_shift
from tetris_layout import compute_dims
from tetris_overlay import Overlay
from tetris_render import RenderAssets
from tetris_rng import make_randomizer
from tetris_stats import GameStatistics

logger = logging.getLogger("tetris.main")


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Classic Tetris (pygame)")
    parser.add_argument("--seed", type=int, default=CONFIG["SEED"], help="RNG seed for the piece source")
    parser.add_argument("--randomizer", choices=["uniform", "nes"], default=CONFIG["RANDOMIZER"],
                        help="Piece source")
    parser.add_argument("--log-level", default=CONFIG["LOG_LEVEL"], help="Logging level, e.g. DEBUG")
    return parser.parse_args(argv)


def recreate_window(dims, flags=pygame.DOUBLEBUF):
    try:
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags, vsync=1)
    except TypeError:
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(),
                        format="%(asctime)s %(name)s %(levelname)s %(message)s")

    pygame.init()
    pygame.event.set_allowed([pygame.QUIT, pygame.KEYDOWN, pygame.KEYUP])

    dims = compute_dims()
    screen = recreate_window(dims)
    pygame.display.set_caption("Classic Tetris")
    font = pygame.font.SysFont(None, 22)
    big_font = pygame.font.SysFont(None, 42)
    render = RenderAssets(dims, font, big_font)
    clock = pygame.time.Clock()

    game = Game(make_randomizer(args.randomizer, args.seed))
    stats = GameStatistics().attach(game)
    overlay = Overlay(stats)
    shift = ShiftRepeat()
    game.events.level_up.connect(lambda lvl: logger.info("speed now %dms", game.current_speed()))

    acc = 0
    soft_acc = 0
    soft_drop_held = False

    while True:
        dt = clock.tick(60)

        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                pygame.quit(); sys.exit()
            if e.type == pygame.KEYDOWN:
                if e.key == pygame.K_F1 and not overlay.active:
                    overlay.toggle(); continue
                if overlay.active:
                    overlay.handle(e); continue
                if e.key == pygame.K_r:
                    game.reset(); acc = 0
                elif e.key == pygame.K_p:
                    game.toggle_pause()
                elif e.key in (pygame.K_UP, pygame.K_x):
                    game.rotate()
                elif e.key == pygame.K_SPACE:
                    if game.drop(): acc = 0
                elif e.key in (pygame.K_c, pygame.K_LSHIFT, pygame.K_RSHIFT):
                    if game.hold(): acc = 0
                elif e.key == pygame.K_DOWN:
                    soft_drop_held = True; soft_acc = CONFIG["SOFT_DROP_MS"]
            if e.type == pygame.KEYUP and e.key == pygame.K_DOWN:
                soft_drop_held = False

        # The clear window always runs to completion, even under the overlay or pause
        game.update(dt)

        if not overlay.active and not game.frozen:
            stats.add_play_time(dt)
            keys = pygame.key.get_pressed()
            apply_shift(game, shift.update(dt, keys[pygame.K_LEFT], keys[pygame.K_RIGHT]))

            if soft_drop_held:
                soft_acc += dt
                while soft_acc >= CONFIG["SOFT_DROP_MS"]:
                    soft_acc -= CONFIG["SOFT_DROP_MS"]
                    game.tick(); acc = 0

            acc += dt
            speed = game.current_speed()
            while acc >= speed:
                acc -= speed
                game.tick()

        flash_on = int(game.clear_time_remaining // 100) % 2 == 0
        render.draw(screen, game, stats, flash_on)
        overlay.draw(screen, font, dims.total_w, dims.total_h)
        pygame.display.flip()


if __name__ == '__main__':
    main()
