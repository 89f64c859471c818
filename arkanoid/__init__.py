"""
Arkanoid - single-screen brick breaker on pygame.

Provides:
- game_mode: ArkanoidMode, the screen state machine and frame driver
- game: entities, collision, world state, powerups, simulation step, skins
- input: keyboard input frames and sources
- logging: per-module console logging and structured record sinks
- config: gameplay constants and environment overrides
"""

__version__ = "1.0.0"
