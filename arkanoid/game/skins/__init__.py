"""Arkanoid skins for rendering."""

from .base import ArkanoidSkin
from .classic import ClassicSkin

SKINS = {
    ClassicSkin.NAME: ClassicSkin,
}

__all__ = [
    'ArkanoidSkin',
    'ClassicSkin',
    'SKINS',
]
