"""DINO RUN - endless runner where a dinosaur jumps over rolling barrels."""

__version__ = "0.1.0"
