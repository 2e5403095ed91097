"""Backend-independent platformer logic: resources, geometry, events, animation state machines, input, game objects and backgrounds."""

__version__ = "0.1.0"