"""
Engine Constants - Tuning values for the turn engine.

Grouped by the rule they belong to. Changing any of these changes game
balance; run `lifepath simulate` afterwards.
"""

# Run length
MAX_TURNS = 20
SEASON_TURNS = 5
LOG_LIMIT = 6

# Narrative phases by turn
EARLY_PHASE_LAST_TURN = 6
MID_PHASE_LAST_TURN = 12

# Cost of living
BASE_UPKEEP = -1

# Chance clamp band
MIN_CHANCE = 0.10
MAX_CHANCE = 0.85

# Money bonus on a successful, paying choice
SKILL_BONUS_DIVISOR = 5
SKILL_BONUS_CAP = 2
LUCK_BONUS_DIVISOR = 2
LUCK_BONUS_CAP = 3
VARIABILITY_CHANCE = 0.45

# World events
FIRST_EVENT_TURN = 2
MAJOR_EVENT_FIRST_TURN = 16
MAJOR_EVENT_LAST_TURN = 19

# Fatigue
FATIGUE_THRESHOLD = 6
FATIGUE_HEALTH_PENALTY = 1
PHYSICAL_FATIGUE = 1
REST_RECOVERY = -2
PASSIVE_RECOVERY = -1

# Luck drift
LUCK_UP_CHANCE = 0.15
LUCK_DOWN_ROLL = 0.92

# Decorative fallback effect cadence
LEAVES_EVERY_TURNS = 5

# Ending classifier
NEAR_MISS_THRESHOLD = 2
