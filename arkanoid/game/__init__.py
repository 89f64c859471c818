"""Arkanoid gameplay: entities, physics, world state and skins."""
