from pathlib import Path

# Base project directory
PROJECT_ROOT = Path(__file__).parent.parent.parent

# Data directories
DATA_DIR = PROJECT_ROOT / "data"
STORE_DIR = DATA_DIR / "store"

# Key/value store settings
STORE_PREFIX = "sbbt_"
FIGHTERS_KEY = "fighters"

# Fighter record field names (as exported by the bookie sheet)
STAT_FIELDS = {
    "strength": "Strength",
    "speed": "Speed",
    "endurance": "Endurance",
    "technique": "Technique",
}

RECORD_FIELDS = {
    "wins": "Wins",
    "losses": "Losses",
    "draws": "Draws",
}

# Affiliation markers (compared trimmed + lower-cased)
FREE_AGENT_MARKERS = {"", "free agent", "free agents", "fa"}
CUSTOM_MARKERS = {"custom fighter", "custom fighters", "custom"}

# Public CORS relays, tried in order
PROXY_CHAIN = [
    ("allorigins", "https://api.allorigins.win/raw?url={quoted}"),
    ("isomorphic-git", "https://cors.isomorphic-git.org/{url}"),
    ("corsproxy.io", "https://corsproxy.io/?{url}"),
]

PROXY_TIMEOUT_SECONDS = 15.0
