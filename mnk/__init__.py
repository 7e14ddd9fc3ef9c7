"""
MNK - Generalized Tic-Tac-Toe Engine

A two-player M-N-K game engine: an M-wide by N-high board where a player
wins by placing K of their tiles in a row, column or diagonal.
The engine provides:
- Validated game settings
- Board state and placement rules
- Directional win detection
- Turn-by-turn game logs
- A terminal menu loop for local play
"""

__version__ = "0.1.0"
