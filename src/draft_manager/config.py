from pathlib import Path

# Base project directory
PROJECT_ROOT = Path(__file__).parent.parent.parent

# Export directory
EXPORTS_DIR = PROJECT_ROOT / "data" / "exports"

# Per-pick clock (seconds)
DEFAULT_PICK_DELAY_SECONDS = 10
MIN_PICK_DELAY_SECONDS = 1
MAX_PICK_DELAY_SECONDS = 3600

# Smoothing prior for win/loss/draw records (Laplace-style)
RECORD_PRIOR_WINS = 1
RECORD_PRIOR_GAMES = 2
