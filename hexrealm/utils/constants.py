"""Game configuration defaults and fixed action costs."""

# Grid dimensions
DEFAULT_ROWS = 9
DEFAULT_COLS = 9

# Planning clock (informational, enforced by the host)
DEFAULT_INITIAL_PLAN_MINUTES = 5
DEFAULT_INITIAL_PLAN_SECONDS = 0
DEFAULT_REVISION_PLAN_MINUTES = 30
DEFAULT_REVISION_PLAN_SECONDS = 0

# Economy
DEFAULT_INITIAL_BUDGET = 10000
DEFAULT_INITIAL_DEPOSIT = 100  # City-center deposit at game start
DEFAULT_REVISION_COST = 100
DEFAULT_MAX_DEPOSIT = 1000000
DEFAULT_INTEREST_PERCENTAGE = 5

# Action costs
ACTION_FEE = 1  # Charged by every metered action
RELOCATE_STEP_COST = 5  # Per step between the old and new city center

# Signal encodings
NEARBY_DISTANCE_WEIGHT = 100
OPPONENT_DISTANCE_WEIGHT = 10

# Testing
RNG_SEED_DEFAULT = 42  # Default seed for testing
