"""
Ladder constants.
"""

# Default prior for a player's first appearance (keep in code, not env vars)
DEFAULT_MU = 25.0
DEFAULT_SIGMA = DEFAULT_MU / 3.0  # ~8.333
DEFAULT_BETA = DEFAULT_SIGMA / 2.0
DEFAULT_TAU = DEFAULT_SIGMA / 100.0
DEFAULT_DRAW_PROBABILITY = 0.10

# Ladder sheet layout (A1 notation, rows/columns are 1-based)
INPUT_RANGE = "B2:G"
OUTPUT_RANGE = "I2:J"

# Menu wiring
MENU_TITLE = "Ladder"
RECALCULATE_ITEM = "Recalculate True Skill"
