import os
import sys
from pathlib import Path

# Settings are read at import time, so the test environment must be in place first.
os.environ.setdefault("RATE_LIMIT_ENABLED", "0")
os.environ.setdefault("SENTRY_DSN", "")
os.environ.setdefault("API_KEY", "")

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))
