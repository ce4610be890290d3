"""Central configuration for the FTC alliance odds simulator."""

# Data source
FTCSCOUT_URL = "https://api.ftcscout.org/graphql"
DEFAULT_SEASON = 2025
REQUEST_TIMEOUT = 30

# Phase split used when a team has no per-phase rating: auto / teleop / endgame
# These must sum to 1.0 so derived phases add back up to the aggregate rating
AUTO_SHARE = 0.25
TELEOP_SHARE = 0.55
ENDGAME_SHARE = 0.20

# Synthetic consistency: max(FLOOR, BASE - SLOPE * rating + JITTER * U(0,1))
CONSISTENCY_FLOOR = 5.0
CONSISTENCY_BASE = 20.0
CONSISTENCY_SLOPE = 0.1
CONSISTENCY_JITTER = 5.0
DEFAULT_CONSISTENCY = 15.0

# Noise applied to each phase rate: rate * (1 + N(0,1) * scale)
MATCH_NOISE = 0.20       # match / alliance simulation
PICK_LIST_NOISE = 0.15   # pick list win checks and tournaments

# Simulation sizes
DEFAULT_SIMULATIONS = 10_000
QUICK_SIMULATIONS = 2_000
RIVAL_SIMULATIONS = 500
TOURNAMENT_SIMULATIONS = 100
HISTOGRAM_BINS = 20

# Target scores
DEFAULT_TARGET_SCORE = 200
PICK_LIST_TARGET_SCORE = 150

# Complementary scoring thresholds
MIN_CANDIDATE_RATING = 30
AUTO_MIN = 20            # candidate must reach this in auto to count
AUTO_WEAK = 20           # below this your auto is "weak"
TELEOP_MIN = 35
TELEOP_WEAK = 40
WELL_ROUNDED_AUTO = 25
WELL_ROUNDED_TELEOP = 40
MAX_COMPLEMENTARY = 100

# Pick score = 0.3*rating + 0.4*winProb + 0.2*complementary + 0.5*(25 - consistency)
RATING_WEIGHT = 0.3
WIN_PROB_WEIGHT = 0.4
COMPLEMENTARY_WEIGHT = 0.2
CONSISTENCY_WEIGHT = 0.5
CONSISTENCY_OFFSET = 25

# Pick list filters
AUTO_SPECIALIST_SHARE = 0.4
AUTO_SPECIALIST_MIN = 25
TELEOP_SPECIALIST_SHARE = 0.6
TELEOP_SPECIALIST_MIN = 40
CONSISTENT_MAX = 15
CONSISTENT_MIN_RATING = 30

# Match insights
CLOSE_MATCH_MARGIN = 10
AUTO_EDGE_MARGIN = 5
FAVORABLE_WIN_PCT = 70
UNDERDOG_WIN_PCT = 30
