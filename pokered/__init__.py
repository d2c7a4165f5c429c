"""A small pygame game skeleton: positions, delta timing, logging, an event bus, a camera and a main loop."""

__version__ = "0.1.0"