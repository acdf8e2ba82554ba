# Rating dynamics
DECAY_FACTOR = 0.985  # Applied to every rating once per tick
RATING_STEP = 0.6  # Gained by a contest winner, lost by the loser
INITIAL_RATING_SPACING = 1.0  # Gap between neighbouring seeded ratings
JITTER = 0.35  # +/- display noise added when reordering

# Contests run per tick (inclusive range)
CONTESTS_PER_TICK = (2, 3)

# Seconds between volatility ticks (uniform, inclusive range)
TICK_INTERVAL_RANGE = (0.6, 1.4)

# How many displayed fighters are considered for the best-fit pick
FIT_WINDOW = 5

# Stat value treated as "fully covered" when computing team needs
STAT_CEILING = 100.0

# Event name -> stat compared (None = coin flip)
EVENT_CATALOGUE = {
    "Arm Wrestle": "strength",
    "Footrace": "speed",
    "Endurance Hold": "endurance",
    "Kata Showdown": "technique",
    "Coin Toss": None,
}
