"""Constants."""

# Step costs
ORTHOGONAL_STEP_COST = 10
DIAGONAL_STEP_COST = 14

# Marker characters used by the text adapter
DEFAULT_PASSABLE_CHAR = " "
DEFAULT_IMPASSABLE_CHAR = "*"
DEFAULT_START_CHAR = "S"
DEFAULT_GOAL_CHAR = "E"
DEFAULT_PATH_CHAR = "+"
DEFAULT_EXPLORED_CHAR = "•"

# Defaults
DEFAULT_SOLVED_SUFFIX = "_solved"
DEFAULT_MAZE_SUFFIX = ".txt"
DEFAULT_OBSTACLE_DENSITY = 0.2

# Validation
MIN_GENERATED_GRID_SIZE = 2
