"""
Flappy
Playable pygame front-end for the flappy simulation core.

Controls:
  Enter       Start / Restart
  Space       Flap
  Escape      Quit
"""
from __future__ import annotations

import argparse
import logging
import sys

import pygame

from flappy import Game, GameConfig, GamePhase, Inputs, SpriteKind, build_game

# --- Configuration ---
WIDTH, HEIGHT = 800, 600
FPS = 60
TITLE = "Flappy"

# Colors
BG_COLOR = (78, 192, 202)
ACTOR_COLOR = (250, 214, 60)
OBSTACLE_COLOR = (92, 170, 48)
OUTLINE_COLOR = (30, 30, 30)
TEXT_COLOR = (255, 255, 255)
OVERLAY_COLOR = (0, 0, 0, 200)

SPRITE_COLORS = {
    SpriteKind.ACTOR: ACTOR_COLOR,
    SpriteKind.TOP_OBSTACLE: OBSTACLE_COLOR,
    SpriteKind.BOTTOM_OBSTACLE: OBSTACLE_COLOR,
}


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Flappy - skyloop demo")
    p.add_argument("--seed", type=int, default=None, help="Random seed (default: random)")
    p.add_argument("--tps", type=int, default=FPS, help="Simulation ticks per second")
    p.add_argument("--log-level", default="INFO",
                   choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return p.parse_args()


def to_screen(x: float, y: float) -> tuple[float, float]:
    """World is centered with y up; the screen has its origin top-left with y down."""
    return x + WIDTH / 2, HEIGHT / 2 - y


def draw_world(screen: pygame.Surface, game: Game, font: pygame.font.Font) -> None:
    screen.fill(BG_COLOR)
    for kind, x, y, w, h in game.sprites():
        sx, sy = to_screen(x, y)
        rect = pygame.Rect(int(sx - w / 2), int(sy - h / 2), int(w), int(h))
        pygame.draw.rect(screen, SPRITE_COLORS[kind], rect)
        pygame.draw.rect(screen, OUTLINE_COLOR, rect, 2)
    for text, x, y in game.labels():
        surf = font.render(text, True, TEXT_COLOR)
        sx, sy = to_screen(x, y)
        screen.blit(surf, surf.get_rect(center=(int(sx), int(sy))))


def draw_overlay(screen: pygame.Surface, title: str, hint: str,
                 big: pygame.font.Font, small: pygame.font.Font) -> None:
    overlay = pygame.Surface((WIDTH, HEIGHT), pygame.SRCALPHA)
    overlay.fill(OVERLAY_COLOR)
    screen.blit(overlay, (0, 0))
    title_surf = big.render(title, True, TEXT_COLOR)
    hint_surf = small.render(hint, True, TEXT_COLOR)
    screen.blit(title_surf, title_surf.get_rect(center=(WIDTH // 2, HEIGHT // 2 - 30)))
    screen.blit(hint_surf, hint_surf.get_rect(center=(WIDTH // 2, HEIGHT // 2 + 30)))


def main() -> None:
    args = parse_args()
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    game = build_game(config=GameConfig(tps=args.tps), seed=args.seed)

    pygame.init()
    screen = pygame.display.set_mode((WIDTH, HEIGHT))
    pygame.display.set_caption(TITLE)
    pg_clock = pygame.time.Clock()
    font = pygame.font.SysFont("monospace", 28, bold=True)
    big_font = pygame.font.SysFont("monospace", 60, bold=True)

    while not game.exit_requested:
        dt = pg_clock.tick(args.tps) / 1000.0

        # --- Events ---
        flap = start = restart = quit_ = False
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                quit_ = True
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    quit_ = True
                elif event.key == pygame.K_SPACE:
                    flap = True
                elif event.key in (pygame.K_RETURN, pygame.K_KP_ENTER):
                    start = game.phase is GamePhase.IDLE
                    restart = game.phase is GamePhase.TERMINATED

        # --- Update ---
        game.tick(dt, Inputs(flap=flap, start=start, restart=restart, exit=quit_))

        # --- Draw ---
        draw_world(screen, game, font)
        if game.phase is GamePhase.IDLE:
            draw_overlay(screen, "Flappy", "Enter: start   Esc: exit", big_font, font)
        elif game.phase is GamePhase.TERMINATED:
            draw_overlay(screen, "Game Over", "Enter: restart   Esc: exit", big_font, font)
        pygame.display.flip()

    pygame.quit()
    sys.exit(0)


if __name__ == "__main__":
    main()
