"""Rules engine for the 3v3 pawn game (5x3 board, best-of-3 rounds)."""

__version__ = "0.1.0"
