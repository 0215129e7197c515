"""Default board geometry and match configuration."""

# Board dimensions
GRID_ROWS = 5
GRID_COLS = 3

# Pieces per player, placed one per column starting at column 1
PIECES_PER_PLAYER = 3

# Match format: first to ROUNDS_TO_WIN rounds, best of TOTAL_ROUNDS
ROUNDS_TO_WIN = 2
TOTAL_ROUNDS = 3

# Player ONE starts on this row and moves towards the last row
PLAYER_ONE_START_ROW = 2
