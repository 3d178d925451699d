"""Rules of a 2D puzzle platformer about merging boxes: boxes, players, elevators, lights and level building."""

__version__ = "0.1.0"