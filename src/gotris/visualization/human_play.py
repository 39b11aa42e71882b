from __future__ import annotations

import logging
from typing import Dict

import pygame

from gotris.game import Action, Field, GameConfig, apply_action
from .renderer import Renderer

logger = logging.getLogger(__name__)


KEY_TO_ACTION: Dict[int, Action] = {
    pygame.K_LEFT: Action.LEFT,
    pygame.K_a: Action.LEFT,
    pygame.K_RIGHT: Action.RIGHT,
    pygame.K_d: Action.RIGHT,
    pygame.K_UP: Action.ROTATE,
    pygame.K_w: Action.ROTATE,
    pygame.K_DOWN: Action.SOFT_DROP,
    pygame.K_s: Action.SOFT_DROP,
    pygame.K_SPACE: Action.HARD_DROP,
    pygame.K_ESCAPE: Action.EXIT,
    pygame.K_e: Action.EXIT,
}


def controls() -> str:
    return (
        "Pygame Mode\n"
        "\nAbout\n"
        "  Real-time windowed gameplay. Gravity speeds up with every level.\n"
        "\nControls\n"
        "  * W / Up:        Rotate\n"
        "  * A / Left:      Move left\n"
        "  * D / Right:     Move right\n"
        "  * S / Down:      Move down\n"
        "  * [Space]:       Drop tile to floor\n"
        "  * E / Esc:       Exit game\n"
        "  * R:             Play again after game over\n"
    )


def _play(screen: pygame.Surface, renderer: Renderer, field: Field) -> bool:
    """Run one game; returns True if the player asked for another."""
    clock = pygame.time.Clock()
    last_fall = pygame.time.get_ticks()
    game_over = False

    while not game_over:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False
            if event.type == pygame.KEYDOWN:
                action = KEY_TO_ACTION.get(event.key)
                if action == Action.EXIT:
                    return False
                if action is not None:
                    apply_action(field, action)

        now = pygame.time.get_ticks()
        if now - last_fall >= field.config.tick_interval(field.level()):
            _, game_over = field.advance()
            last_fall = now

        renderer.draw(screen, field)
        clock.tick(60)

    logger.info("final score %s at level %d", field.display_score(), field.level())
    renderer.draw(screen, field, "Game Over - R to restart, ESC to quit")
    while True:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False
            if event.type == pygame.KEYDOWN:
                if event.key == pygame.K_r:
                    return True
                if KEY_TO_ACTION.get(event.key) == Action.EXIT:
                    return False
        clock.tick(30)


def run(config: GameConfig | None = None) -> None:
    config = config or GameConfig()
    pygame.init()
    try:
        renderer = Renderer()
        screen = pygame.display.set_mode(renderer.window_size())
        pygame.display.set_caption("Gotris")
        while _play(screen, renderer, Field(config)):
            pass
    finally:
        pygame.quit()


if __name__ == "__main__":  # pragma: no cover
    run()
