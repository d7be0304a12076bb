"""Loading the game's images and sounds from a directory."""

from __future__ import annotations

import io
import struct
from dataclasses import dataclass
from pathlib import Path

import pygame

from airdefense.entities import Sprite, Sprites

PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"
IMAGE_NAMES = (
    "airdefense",
    "irondome",
    "airplane",
    "bomb",
    "missile",
    "fire1",
    "fire2",
    "fire3",
    "ground",
)
DEFAULT_DIRECTORY = Path(__file__).with_name("data")


@dataclass(frozen=True)
class Assets:
    """Images and raw sound data for the game."""

    sprites: Sprites
    launch_sound: bytes
    explosion_sound: bytes


def _png_size(data: bytes, name: str) -> tuple[int, int]:
    if not data.startswith(PNG_SIGNATURE) or len(data) < 24 or data[12:16] != b"IHDR":
        raise ValueError(f"{name} is not a PNG image")
    width, height = struct.unpack(">II", data[16:24])
    return width, height


def _load_sprite(directory: Path, name: str) -> Sprite:
    path = directory / "assets" / f"{name}.png"
    data = path.read_bytes()
    width, height = _png_size(data, str(path))
    try:
        surface = pygame.image.load(io.BytesIO(data), f"{name}.png")
    except pygame.error as exc:
        raise ValueError(f"cannot decode {path}: {exc}") from exc
    return Sprite(name=name, width=width, height=height, surface=surface)


def load_assets(directory: str | Path) -> Assets:
    """Load every image from ``assets/`` and every sound from ``sounds/``."""
    root = Path(directory)
    sprites = Sprites(**{name: _load_sprite(root, name) for name in IMAGE_NAMES})
    return Assets(
        sprites=sprites,
        launch_sound=(root / "sounds" / "missile.mp3").read_bytes(),
        explosion_sound=(root / "sounds" / "explosion.mp3").read_bytes(),
    )