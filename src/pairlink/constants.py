GRID_ROWS = 7
GRID_COLS = 16

# Routing rule: a connecting path may change direction at most this many times.
MAX_TURNS = 2

# Level progression
SPECIAL_LEVEL = 9          # tagged-pair matching, no compaction after removal
CLASSIC_LEVEL_CAP = 10
CLUSTER_LEVEL = 1          # first level pre-seeds adjacent pairs

# Hints
STARTING_HINTS = 3
HARD_HINT_BONUS_PER_LEVEL = 2

# Scoring & timing (seconds)
MATCH_SCORE = 10
MATCH_TIME_BONUS = 3
BASE_TIME_START = 120
BASE_TIME_STEP = 5
BASE_TIME_FLOOR = 30
PATH_DISPLAY_DELAY = 0.25

# Board generation
SYMBOL_CATALOGUE = tuple(f"tile_{index:03d}" for index in range(1, 36))
PAIR_BASES = tuple(f"pair{index:03d}" for index in range(1, 33))
PAIR_SEPARATOR = "_"
PAIR_SUFFIXES = ("1", "2")
CLUSTER_RATIO = 0.35
SHUFFLE_MAX_ATTEMPTS = 200

# Persistence keys
ENDLESS_BEST_LEVEL_KEY = "endless_best_level"
ENDLESS_BEST_SCORE_KEY = "endless_best_score"

# Advisory messages
MESSAGE_NO_HINT = "No connectable pair available."
MESSAGE_DEADLOCK_FAILED = "No moves left and no hints remaining."

# Sound cues understood by the feedback collaborator
SOUND_CLICK = "click"
SOUND_COMBO = "combo"


def base_time_for_level(level: int) -> int:
    """Seconds on the clock for a level; shrinks each level down to a floor."""
    return max(BASE_TIME_FLOOR, BASE_TIME_START - (level - 1) * BASE_TIME_STEP)
