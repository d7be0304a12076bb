"""Game state and the per-tick update rules."""

from __future__ import annotations

import enum
import math
import random
from dataclasses import dataclass, field

from airdefense.entities import (
    WINDOW_WIDTH,
    Airplane,
    Explosion,
    Projectile,
    Sprites,
    Weapon,
    check_collision,
    new_airdefense,
    spawn_airplane,
)
from airdefense.geometry import Vector

FRAME_COUNT = 10
MIN_AIRPLANE_SPAWN_COOLDOWN_TICKS = 120
RANDOM_AIRPLANE_SPAWN_COOLDOWN_RANGE = 180


class SoundEvent(enum.Enum):
    """A sound the game asks to be played during a tick."""

    LAUNCH = "launch"
    EXPLOSION = "explosion"


@dataclass
class Game:
    """The whole state of a running game."""

    sprites: Sprites
    airdefense: Weapon
    rng: random.Random = field(default_factory=random.Random)
    airplanes: list[Airplane] = field(default_factory=list)
    explosions: list[Explosion] = field(default_factory=list)
    counter: int = 0
    next_airplane_spawn_tick: int = 0
    airplanes_destroyed: int = 0

    def spawn_airplane(self) -> Airplane:
        """Add a new airplane entering from a random side and return it."""
        plane = spawn_airplane(self.sprites.airplane, self.rng)
        self.airplanes.append(plane)
        return plane

    def update(self, fire_pressed: bool) -> list[SoundEvent]:
        """Advance the game by one tick; return the sounds to play."""
        sounds: list[SoundEvent] = []
        self.counter += 1

        if fire_pressed and self.airdefense.shoot(self.counter):
            sounds.append(SoundEvent.LAUNCH)

        self._move_projectiles()

        if self.counter >= self.next_airplane_spawn_tick:
            self.spawn_airplane()
            self.next_airplane_spawn_tick = (
                self.counter
                + MIN_AIRPLANE_SPAWN_COOLDOWN_TICKS
                + self.rng.randrange(RANDOM_AIRPLANE_SPAWN_COOLDOWN_RANGE)
            )

        for plane in self.airplanes:
            plane.position.x += plane.speed
        self.airplanes = [p for p in self.airplanes if p.is_on_screen(WINDOW_WIDTH)]

        sounds.extend(self._resolve_collisions())

        self.explosions = [e for e in self.explosions if e.advance()]
        return sounds

    def _move_projectiles(self) -> None:
        kept: list[Projectile] = []
        for projectile in self.airdefense.projectiles:
            if projectile.target is None and self.airplanes:
                projectile.target = self.airplanes[0]
            if projectile.target is not None and projectile.position is not None:
                self._steer(projectile)
            pos = projectile.position
            if pos is not None and (pos.y > 0 or 0 < pos.x < WINDOW_WIDTH):
                kept.append(projectile)
        self.airdefense.projectiles = kept

    def _steer(self, projectile: Projectile) -> None:
        pos = projectile.position
        target = projectile.target
        assert pos is not None and target is not None
        if any(target is plane for plane in self.airplanes):
            dx = target.position.x - pos.x
            dy = target.position.y - pos.y
            dist = math.hypot(dx, dy)
            if dist < projectile.speed:
                pos.x = target.position.x
                if pos.y > target.position.y:
                    pos.y = target.position.y
            elif dist > 0:
                pos.x += dx / dist * projectile.speed
                if pos.y > target.position.y:
                    pos.y += dy / dist * projectile.speed
            projectile.rotation = math.atan2(dy, dx) + math.pi / 2.0
        else:
            pos.y -= projectile.speed
            if projectile.rotation < 0:
                pos.x -= projectile.speed
            else:
                pos.x += projectile.speed

    def _resolve_collisions(self) -> list[SoundEvent]:
        sounds: list[SoundEvent] = []
        hit: set[int] = set()
        surviving: list[Projectile] = []
        for projectile in self.airdefense.projectiles:
            collided = False
            if projectile.position is not None:
                for index, plane in enumerate(self.airplanes):
                    if index in hit or not check_collision(projectile, plane):
                        continue
                    hit.add(index)
                    self.explosions.append(
                        Explosion(
                            position=Vector(plane.position.x, plane.position.y),
                            frames=self.sprites.explosion_frames,
                        )
                    )
                    self.airplanes_destroyed += 1
                    sounds.append(SoundEvent.EXPLOSION)
                    collided = True
                    break
            if not collided:
                surviving.append(projectile)
        self.airdefense.projectiles = surviving
        self.airplanes = [p for i, p in enumerate(self.airplanes) if i not in hit]
        return sounds


def new_game(sprites: Sprites, rng: random.Random) -> Game:
    """Start a game with the missile launcher and the first spawn scheduled."""
    return Game(
        sprites=sprites,
        airdefense=new_airdefense(sprites),
        rng=rng,
        next_airplane_spawn_tick=MIN_AIRPLANE_SPAWN_COOLDOWN_TICKS
        + rng.randrange(RANDOM_AIRPLANE_SPAWN_COOLDOWN_RANGE),
    )