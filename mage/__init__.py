"""Game engine core: vector maths, entities and components, physics, input, meshes and message encoding."""

__version__ = "0.1.0"