"""The window, drawing and main loop of the game."""

from __future__ import annotations

import argparse
import functools
import io
import math
import random
from typing import Any

import pygame

from airdefense.assets import DEFAULT_DIRECTORY, Assets, load_assets
from airdefense.entities import (
    AIRPLANE_FLIP_ROTATION,
    FIRE_ROTATION_OFFSET,
    WINDOW_HEIGHT,
    WINDOW_WIDTH,
    Sprite,
    fire_offset,
)
from airdefense.game import Game, SoundEvent, new_game

TICKS_PER_SECOND = 60
AUDIO_SAMPLE_RATE = 48000


def ground_positions(ground_width: int, ground_height: int) -> list[tuple[float, float]]:
    """Top-left corners of the ground tiles covering the bottom of the window."""
    y = float(WINDOW_HEIGHT - ground_height)
    return [(float(i * ground_width), y) for i in range(WINDOW_WIDTH // ground_width + 1)]


@functools.lru_cache(maxsize=1)
def _font() -> Any:
    pygame.font.init()
    return pygame.font.Font(None, 18)


def _blit(screen: Any, sprite: Sprite, x: float, y: float, theta: float = 0.0) -> None:
    """Draw a sprite with its top-left at (x, y), rotated about its centre."""
    if theta == 0.0:
        screen.blit(sprite.surface, (x, y))
        return
    rotated = pygame.transform.rotate(sprite.surface, -math.degrees(theta))
    center = (x + sprite.width // 2, y + sprite.height // 2)
    screen.blit(rotated, rotated.get_rect(center=center))


def draw(screen: Any, game: Game, assets: Assets) -> None:
    """Render one frame of the game onto the screen surface."""
    weapon = game.airdefense
    for projectile in weapon.projectiles:
        if projectile.image is None or projectile.position is None:
            continue
        if projectile.fire is not None:
            flame = fire_offset(projectile)
            _blit(
                screen,
                projectile.fire,
                flame.x,
                flame.y,
                projectile.rotation + FIRE_ROTATION_OFFSET,
            )
        _blit(
            screen,
            projectile.image,
            projectile.position.x,
            projectile.position.y,
            projectile.rotation,
        )
    _blit(screen, weapon.image, weapon.position.x, weapon.position.y)

    for plane in game.airplanes:
        theta = AIRPLANE_FLIP_ROTATION if plane.speed < 0 else 0.0
        _blit(screen, plane.image, plane.position.x, plane.position.y, theta)

    for explosion in game.explosions:
        _blit(screen, explosion.current_frame(), explosion.position.x, explosion.position.y)

    ground = assets.sprites.ground
    for x, y in ground_positions(ground.width, ground.height):
        _blit(screen, ground, x, y)

    text = _font().render(f"Destroyed: {game.airplanes_destroyed}", True, (255, 255, 255))
    screen.blit(text, (0, 0))


def _load_sounds(assets: Assets) -> dict[SoundEvent, Any]:
    try:
        pygame.mixer.init(frequency=AUDIO_SAMPLE_RATE)
    except pygame.error:
        return {}
    sounds = {}
    for event, data in (
        (SoundEvent.LAUNCH, assets.launch_sound),
        (SoundEvent.EXPLOSION, assets.explosion_sound),
    ):
        if not data:
            continue
        try:
            sounds[event] = pygame.mixer.Sound(file=io.BytesIO(data))
        except pygame.error:
            continue
    return sounds


def main(argv: list[str] | None = None) -> int:
    """Open the game window and run until it is closed."""
    parser = argparse.ArgumentParser(prog="airdefense", description="Shoot down airplanes.")
    parser.add_argument(
        "--assets",
        default=str(DEFAULT_DIRECTORY),
        help="directory holding assets/ and sounds/",
    )
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args(argv)

    assets = load_assets(args.assets)
    pygame.init()
    try:
        screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
        pygame.display.set_caption("Air Defense")
        sounds = _load_sounds(assets)
        game = new_game(assets.sprites, random.Random(args.seed))
        clock = pygame.time.Clock()
        while True:
            if any(event.type == pygame.QUIT for event in pygame.event.get()):
                return 0
            fire = bool(pygame.key.get_pressed()[pygame.K_SPACE])
            for event in game.update(fire):
                sound = sounds.get(event)
                if sound is not None:
                    sound.play()
            screen.fill((0, 0, 0))
            draw(screen, game, assets)
            pygame.display.flip()
            clock.tick(TICKS_PER_SECOND)
    finally:
        pygame.quit()