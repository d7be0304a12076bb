"""Game objects: airplanes, weapons, projectiles and explosions."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass, field, replace
from typing import Any

from airdefense.geometry import Vector

SCREEN_WIDTH = 240
SCREEN_HEIGHT = 240
WINDOW_WIDTH = SCREEN_WIDTH * 2
WINDOW_HEIGHT = SCREEN_HEIGHT * 2

SHOT_COOLDOWN_TICKS = 60
AIRPLANE_SPEED = 2.0
EXPLOSION_FRAME_DURATION_TICKS = 5

AIRPLANE_FLIP_ROTATION = 45.0 * math.pi
FIRE_ROTATION_OFFSET = 45.0 * math.pi


@dataclass(frozen=True)
class Sprite:
    """An image with its pixel size; ``surface`` holds the drawable, if any."""

    name: str
    width: int
    height: int
    surface: Any = field(default=None, compare=False, repr=False)


@dataclass(frozen=True)
class Sprites:
    """Every image the game uses."""

    airdefense: Sprite
    irondome: Sprite
    airplane: Sprite
    bomb: Sprite
    missile: Sprite
    fire1: Sprite
    fire2: Sprite
    fire3: Sprite
    ground: Sprite

    @property
    def explosion_frames(self) -> tuple[Sprite, ...]:
        """The explosion animation sequence."""
        return (self.fire1, self.fire2, self.fire3, self.fire2)


@dataclass(eq=False)
class Airplane:
    """An enemy airplane flying horizontally."""

    image: Sprite
    position: Vector
    speed: float

    def is_on_screen(self, window_width: float) -> bool:
        """Whether the airplane has not yet left the screen in its direction."""
        if self.speed > 0:
            return self.position.x <= window_width
        return self.position.x >= -float(self.image.width)


@dataclass
class Projectile:
    """A missile or bomb; a template projectile has no position."""

    image: Sprite | None
    position: Vector | None = None
    speed: float = 0.0
    fire: Sprite | None = None
    target: Airplane | None = None
    rotation: float = 0.0


@dataclass
class Weapon:
    """A launcher that fires copies of its template projectile."""

    image: Sprite
    position: Vector
    projectile: Projectile
    projectiles: list[Projectile] = field(default_factory=list)
    rotation: float = 0.0
    last_shot_tick: int = 0

    def has_projectiles(self) -> bool:
        return bool(self.projectiles)

    def shoot(self, current_tick: int) -> bool:
        """Fire a projectile unless still cooling down; return whether it fired."""
        if current_tick - self.last_shot_tick < SHOT_COOLDOWN_TICKS:
            return False
        self.projectiles.append(
            replace(
                self.projectile,
                position=Vector(self.position.x, self.position.y),
                target=None,
            )
        )
        self.last_shot_tick = current_tick
        return True


@dataclass
class Explosion:
    """An explosion animation playing at a fixed position."""

    position: Vector
    frames: tuple[Sprite, ...]
    current_frame_index: int = 0
    frame_duration_ticks: int = EXPLOSION_FRAME_DURATION_TICKS
    current_tick_in_frame: int = 0

    def advance(self) -> bool:
        """Move the animation on by one tick; return whether it is still playing."""
        self.current_tick_in_frame += 1
        if self.current_tick_in_frame >= self.frame_duration_ticks:
            self.current_tick_in_frame = 0
            self.current_frame_index += 1
        return self.current_frame_index < len(self.frames)

    def current_frame(self) -> Sprite:
        return self.frames[self.current_frame_index]


def _overlaps(a: tuple[int, int, int, int], b: tuple[int, int, int, int]) -> bool:
    ax0, ay0, ax1, ay1 = a
    bx0, by0, bx1, by1 = b
    if ax0 >= ax1 or ay0 >= ay1 or bx0 >= bx1 or by0 >= by1:
        return False
    return ax0 < bx1 and bx0 < ax1 and ay0 < by1 and by0 < ay1


def check_collision(projectile: Projectile, airplane: Airplane) -> bool:
    """Whether a projectile's box overlaps the airplane's hit box.

    The airplane's hit box is the top-left quarter of its image.
    """
    if projectile.image is None or projectile.position is None or airplane.image is None:
        return False
    px, py = int(projectile.position.x), int(projectile.position.y)
    ax, ay = int(airplane.position.x), int(airplane.position.y)
    projectile_rect = (px, py, px + projectile.image.width, py + projectile.image.height)
    plane_rect = (ax, ay, ax + airplane.image.width // 2, ay + airplane.image.height // 2)
    return _overlaps(projectile_rect, plane_rect)


def spawn_airplane(image: Sprite, rng: random.Random) -> Airplane:
    """Create an airplane entering from a random side at a random height."""
    min_y = 10.0
    max_y = max(min_y, WINDOW_HEIGHT * 0.4 - image.height)
    start_y = min_y + rng.random() * (max_y - min_y)
    if rng.randrange(2) == 0:
        start_x, speed = -float(image.width), AIRPLANE_SPEED
    else:
        start_x, speed = float(WINDOW_WIDTH), -AIRPLANE_SPEED
    return Airplane(image=image, position=Vector(start_x, start_y), speed=speed)


def new_airdefense(sprites: Sprites) -> Weapon:
    """The missile launcher standing on the ground."""
    image = sprites.airdefense
    position = Vector(
        SCREEN_WIDTH - float(image.width // 2),
        8.5 + float(WINDOW_HEIGHT - sprites.ground.height) - float(image.height),
    )
    return Weapon(
        image=image,
        position=position,
        projectile=Projectile(image=sprites.missile, speed=3.0, fire=sprites.fire1),
    )


def new_irondome(sprites: Sprites) -> Weapon:
    """The slower bomb launcher standing on the ground."""
    image = sprites.irondome
    position = Vector(
        (SCREEN_WIDTH - float(image.width)) - 10,
        6.5 + float(WINDOW_HEIGHT - sprites.ground.height) - float(image.height),
    )
    return Weapon(
        image=image,
        position=position,
        projectile=Projectile(image=sprites.bomb, speed=1.0, fire=sprites.fire1),
    )


def fire_offset(projectile: Projectile) -> Vector:
    """Where to draw a projectile's exhaust flame, behind it along its heading."""
    if projectile.fire is None or projectile.image is None or projectile.position is None:
        raise ValueError("projectile has no flame, image or position")
    flight_angle = projectile.rotation - math.pi / 2.0
    distance = projectile.image.height * 0.5 + projectile.fire.height * 0.1
    return Vector(
        projectile.position.x - distance * math.cos(flight_angle),
        projectile.position.y - distance * math.sin(flight_angle),
    )